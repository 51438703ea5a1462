"""clientreg.errors.
~~~~~~~~~~~~~~~~~

Errors raised while validating client metadata. Every error is an
``invalid_client_metadata`` (or ``invalid_redirect_uri``) OAuth 2.0 error
with a ``400`` status, and carries the rejected field and value so that
callers can render their own message.
"""

from urllib.parse import quote

from authlib.oauth2.rfc7591 import InvalidClientMetadataError
from authlib.oauth2.rfc7591 import InvalidRedirectURIError

from .models import REDIRECT_URIS

__all__ = [
    "ClientMetadataError",
    "UnsupportedValueError",
    "DuplicateValueError",
    "MalformedURIError",
    "NotAbsoluteURIError",
    "GrantResponseMismatchError",
    "OutputParameterNotAllowedError",
]


class ClientMetadataError(InvalidClientMetadataError):
    #: Machine readable reason of the rejection
    reason = None
    #: Default ``error_description`` text, formatted with ``field`` and ``value``
    message = "The value {value} for the client registration metadata field {field} is invalid."

    def __init__(self, field, value=None, description=None, status_code=400):
        self.field = field
        self.value = value
        if description is None:
            description = self.message.format(field=field, value=value)
        super().__init__(
            description=_escape_description(description), status_code=status_code
        )

    def to_dict(self):
        return {
            "reason": self.reason,
            "field": self.field,
            "value": self.value,
            "status_code": self.status_code,
        }

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.field}={self.value!r}>"


class UnsupportedValueError(ClientMetadataError):
    reason = "UNSUPPORTED_VALUE"
    message = "The value {value} is not a supported value for the {field} client registration metadata field."


class DuplicateValueError(ClientMetadataError):
    reason = "DUPLICATE_VALUE"
    message = "The value {value} is a duplicate for the {field} client registration metadata field."


class _URIError(ClientMetadataError):
    def __init__(self, field, value=None, description=None, status_code=400):
        # redirect_uris problems have their own error code in RFC7591 section 3.2.2
        if field == REDIRECT_URIS:
            self.error = InvalidRedirectURIError.error
        super().__init__(field, value, description, status_code)


class MalformedURIError(_URIError):
    reason = "MALFORMED_URI"
    message = "The value {value} for the client registration metadata field {field} contains a malformed URI syntax."


class NotAbsoluteURIError(_URIError):
    reason = "NOT_ABSOLUTE_URI"
    message = "The value {value} for the client registration metadata field {field} is not an absolute URI."


class GrantResponseMismatchError(ClientMetadataError):
    reason = "GRANT_RESPONSE_MISMATCH"

    def __init__(self, field, value=None, required=None, status_code=400):
        self.required = required
        description = (
            f"The client registration metadata field {field} contains value "
            f"{value}, which requires at least a matching grant_type value {required}."
        )
        super().__init__(field, value, description, status_code)

    def to_dict(self):
        rv = super().to_dict()
        rv["required"] = self.required
        return rv


class OutputParameterNotAllowedError(ClientMetadataError):
    reason = "OUTPUT_PARAMETER_NOT_ALLOWED"
    message = (
        "The client registration metadata field {field} cannot be specified "
        "for a create or update action because it is an output parameter."
    )


# RFC6749 section 5.2: error_description is limited to %x20-21 / %x23-5B / %x5D-7E
_DESCRIPTION_SAFE = "".join(chr(c) for c in range(0x20, 0x7F) if chr(c) not in '"\\')


def _escape_description(description):
    return quote(description, safe=_DESCRIPTION_SAFE)
