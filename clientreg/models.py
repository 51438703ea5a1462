"""clientreg.models.
~~~~~~~~~~~~~~~~~

Client metadata record as submitted to a Dynamic Client Registration
endpoint (RFC7591, OpenID Connect Dynamic Client Registration 1.0).
"""

import copy

CLIENT_NAME = "client_name"
APPLICATION_TYPE = "application_type"
RESPONSE_TYPES = "response_types"
GRANT_TYPES = "grant_types"
REDIRECT_URIS = "redirect_uris"
POST_LOGOUT_REDIRECT_URIS = "post_logout_redirect_uris"
TRUSTED_URI_PREFIXES = "trusted_uri_prefixes"
SCOPE = "scope"
PREAUTHORIZED_SCOPE = "preauthorized_scope"
SUBJECT_TYPE = "subject_type"
TOKEN_ENDPOINT_AUTH_METHOD = "token_endpoint_auth_method"
FUNCTIONAL_USER_GROUP_IDS = "functional_user_groupIds"
CLIENT_ID_ISSUED_AT = "client_id_issued_at"
CLIENT_SECRET_EXPIRES_AT = "client_secret_expires_at"
REGISTRATION_CLIENT_URI = "registration_client_uri"


def is_empty(value):
    """``None``, an empty string and an empty collection are all empty."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    return False


class ClientMetadata(dict):
    """A client metadata record. Registered keys are readable as
    attributes, returning ``None`` when absent::

        metadata = ClientMetadata({"redirect_uris": ["https://client.test/cb"]})
        metadata.redirect_uris  # ['https://client.test/cb']
        metadata.application_type  # None
    """

    REGISTERED_CLAIMS = [
        CLIENT_NAME,
        APPLICATION_TYPE,
        RESPONSE_TYPES,
        GRANT_TYPES,
        REDIRECT_URIS,
        POST_LOGOUT_REDIRECT_URIS,
        TRUSTED_URI_PREFIXES,
        SCOPE,
        PREAUTHORIZED_SCOPE,
        SUBJECT_TYPE,
        TOKEN_ENDPOINT_AUTH_METHOD,
        FUNCTIONAL_USER_GROUP_IDS,
        CLIENT_ID_ISSUED_AT,
        CLIENT_SECRET_EXPIRES_AT,
        REGISTRATION_CLIENT_URI,
    ]

    #: Keys which are assigned by the server and never accepted as input
    OUTPUT_CLAIMS = [
        CLIENT_ID_ISSUED_AT,
        CLIENT_SECRET_EXPIRES_AT,
        REGISTRATION_CLIENT_URI,
    ]

    def __getattr__(self, key):
        try:
            return object.__getattribute__(self, key)
        except AttributeError as error:
            if key in self.REGISTERED_CLAIMS:
                return self.get(key)
            raise error

    def get_deep_copy(self):
        return self.__class__(copy.deepcopy(dict(self)))

    def get_registered_claims(self):
        return {k: self[k] for k in self.REGISTERED_CLAIMS if k in self}

    @property
    def scopes(self):
        return _split_scope(self.get(SCOPE))

    @property
    def preauthorized_scopes(self):
        return _split_scope(self.get(PREAUTHORIZED_SCOPE))


def _split_scope(scope):
    if not scope:
        return []
    return scope.split()
