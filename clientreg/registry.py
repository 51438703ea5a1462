"""clientreg.registry.
~~~~~~~~~~~~~~~~~~~

Supported values for the enumerated client metadata fields. The values
are configuration, kept out of the validation rules, so that a server can
narrow them from its own discovery metadata.
"""

import typing as t

from joserfc.errors import InvalidClaimError
from joserfc.jwt import BaseClaimsRegistry

from .errors import UnsupportedValueError
from .models import APPLICATION_TYPE
from .models import GRANT_TYPES
from .models import RESPONSE_TYPES
from .models import SUBJECT_TYPE
from .models import TOKEN_ENDPOINT_AUTH_METHOD


class ClientMetadataRegistry(BaseClaimsRegistry):
    """Registry of the values a client may register. Defaults can be
    changed by subclassing, or per instance::

        registry = ClientMetadataRegistry(grant_types=["authorization_code"])
    """

    APPLICATION_TYPES = ["web", "native"]
    RESPONSE_TYPES = ["code", "token", "id_token", "id_token token", "token id_token"]
    GRANT_TYPES = [
        "authorization_code",
        "implicit",
        "refresh_token",
        "client_credentials",
        "password",
        "urn:ietf:params:oauth:grant-type:jwt-bearer",
    ]
    # pairwise identifiers are not issued
    SUBJECT_TYPES = ["public"]
    # client_secret_jwt and private_key_jwt are not supported
    TOKEN_ENDPOINT_AUTH_METHODS = ["client_secret_post", "client_secret_basic", "none"]

    #: response type -> grant type it can not be used without
    RESPONSE_GRANT_REQUIREMENTS = {
        "code": "authorization_code",
        "id_token token": "implicit",
        "token id_token": "implicit",
    }

    def __init__(
        self,
        application_types: t.Optional[list[str]] = None,
        response_types: t.Optional[list[str]] = None,
        grant_types: t.Optional[list[str]] = None,
        subject_types: t.Optional[list[str]] = None,
        token_endpoint_auth_methods: t.Optional[list[str]] = None,
    ):
        options = {
            APPLICATION_TYPE: application_types,
            RESPONSE_TYPES: response_types,
            GRANT_TYPES: grant_types,
            SUBJECT_TYPE: subject_types,
            TOKEN_ENDPOINT_AUTH_METHOD: token_endpoint_auth_methods,
        }
        defaults = {
            APPLICATION_TYPE: self.APPLICATION_TYPES,
            RESPONSE_TYPES: self.RESPONSE_TYPES,
            GRANT_TYPES: self.GRANT_TYPES,
            SUBJECT_TYPE: self.SUBJECT_TYPES,
            TOKEN_ENDPOINT_AUTH_METHOD: self.TOKEN_ENDPOINT_AUTH_METHODS,
        }
        # an empty list registers nothing, None keeps the defaults
        self.supported = {
            key: list(defaults[key] if values is None else values)
            for key, values in options.items()
        }
        super().__init__(
            **{key: {"values": values} for key, values in self.supported.items()}
        )

    @classmethod
    def from_server_metadata(cls, metadata: dict[str, t.Any]):
        """Create a registry restricted to what the authorization server
        advertises in its RFC8414 / OpenID Connect discovery metadata. Values
        the server advertises but this registry does not support are ignored;
        when none of them is supported, nothing is accepted for that field.
        ``application_type`` has no discovery metadata and keeps its defaults.
        """

        def narrow(key, defaults):
            values = metadata.get(key)
            if not values:
                return None
            return [v for v in defaults if v in values]

        return cls(
            response_types=narrow("response_types_supported", cls.RESPONSE_TYPES),
            grant_types=narrow("grant_types_supported", cls.GRANT_TYPES),
            subject_types=narrow("subject_types_supported", cls.SUBJECT_TYPES),
            token_endpoint_auth_methods=narrow(
                "token_endpoint_auth_methods_supported",
                cls.TOKEN_ENDPOINT_AUTH_METHODS,
            ),
        )

    def supported_values(self, key: str) -> list[str]:
        return self.supported[key]

    def check_supported(self, key: str, value: t.Any):
        """Raise :class:`UnsupportedValueError` if ``value`` is not registered
        for ``key``.
        """
        # joserfc accepts any value when the option has no values
        if not isinstance(value, str) or not self.supported[key]:
            raise UnsupportedValueError(key, value)
        try:
            self.check_value(key, value)
        except InvalidClaimError as error:
            raise UnsupportedValueError(key, value) from error

    def required_grant_type(self, response_type: str) -> t.Optional[str]:
        return self.RESPONSE_GRANT_REQUIREMENTS.get(response_type)
