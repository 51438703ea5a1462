"""clientreg.
~~~~~~~~~

Validation and normalization of OAuth 2.0 / OpenID Connect Dynamic Client
Registration metadata.
"""

from .claims import ClientMetadataClaims
from .errors import ClientMetadataError
from .errors import DuplicateValueError
from .errors import GrantResponseMismatchError
from .errors import MalformedURIError
from .errors import NotAbsoluteURIError
from .errors import OutputParameterNotAllowedError
from .errors import UnsupportedValueError
from .models import ClientMetadata
from .registry import ClientMetadataRegistry
from .validator import ClientMetadataValidator

__version__ = "1.0.0"

__all__ = [
    "ClientMetadata",
    "ClientMetadataClaims",
    "ClientMetadataRegistry",
    "ClientMetadataValidator",
    "ClientMetadataError",
    "UnsupportedValueError",
    "DuplicateValueError",
    "MalformedURIError",
    "NotAbsoluteURIError",
    "GrantResponseMismatchError",
    "OutputParameterNotAllowedError",
]
