"""clientreg.validator.
~~~~~~~~~~~~~~~~~~~~

Validation of client metadata on client creation and update, per
`RFC7591`_ and `OpenID Connect Dynamic Client Registration 1.0`_.

.. _`RFC7591`: https://tools.ietf.org/html/rfc7591
.. _`OpenID Connect Dynamic Client Registration 1.0`:
    https://openid.net/specs/openid-connect-registration-1_0.html
"""

import copy
import logging

from .common.encoding import url_decode
from .common.urls import parse_uri
from .common.urls import slash_terminated
from .errors import ClientMetadataError
from .errors import DuplicateValueError
from .errors import GrantResponseMismatchError
from .errors import MalformedURIError
from .errors import NotAbsoluteURIError
from .errors import OutputParameterNotAllowedError
from .errors import UnsupportedValueError
from .models import APPLICATION_TYPE
from .models import CLIENT_ID_ISSUED_AT
from .models import CLIENT_NAME
from .models import CLIENT_SECRET_EXPIRES_AT
from .models import FUNCTIONAL_USER_GROUP_IDS
from .models import GRANT_TYPES
from .models import POST_LOGOUT_REDIRECT_URIS
from .models import PREAUTHORIZED_SCOPE
from .models import REDIRECT_URIS
from .models import REGISTRATION_CLIENT_URI
from .models import RESPONSE_TYPES
from .models import SCOPE
from .models import SUBJECT_TYPE
from .models import TOKEN_ENDPOINT_AUTH_METHOD
from .models import TRUSTED_URI_PREFIXES
from .models import ClientMetadata
from .models import is_empty
from .registry import ClientMetadataRegistry

log = logging.getLogger(__name__)


class ClientMetadataValidator:
    """Validate and normalize the metadata of one client. A validator owns
    a deep copy of the metadata it was created with; the caller's object is
    never modified. Create a new validator for every request::

        validator = ClientMetadataValidator.create(request_json)
        try:
            metadata = validator.validate_create_update()
        except ClientMetadataError as error:
            return error.get_body(), error.status_code
    """

    #: Registry used when none is given to :meth:`create`
    registry_cls = ClientMetadataRegistry

    DEFAULT_APPLICATION_TYPE = "web"
    DEFAULT_RESPONSE_TYPE = "code"
    DEFAULT_GRANT_TYPE = "authorization_code"
    DEFAULT_TOKEN_ENDPOINT_AUTH_METHOD = "client_secret_basic"

    def __init__(self, metadata, registry=None):
        self.metadata = ClientMetadata(metadata).get_deep_copy()
        if registry is None:
            registry = self.registry_cls()
        self.registry = registry

    @classmethod
    def create(cls, metadata, registry=None):
        """Create a validator for ``metadata``. A percent-encoded
        ``client_name`` is decoded; when it can not be decoded the value is
        kept as it is.
        """
        validator = cls(metadata, registry)
        client_name = validator.metadata.get(CLIENT_NAME)
        if isinstance(client_name, str):
            try:
                validator.metadata[CLIENT_NAME] = url_decode(client_name)
            except ValueError as error:
                log.debug("Keep undecodable client_name %r: %r", client_name, error)
        return validator

    def validate_create_update(self):
        """Check the metadata of a client being created or updated. The first
        violation is raised as a :class:`~clientreg.errors.ClientMetadataError`.

        :returns: the normalized :class:`~clientreg.models.ClientMetadata`
        """
        return self._run_rules(set_defaults_on_error=False)

    def validate_and_set_defaults_on_errors(self):
        """Run the same checks as :meth:`validate_create_update`, but replace
        every rejected field with its default value instead of raising.
        """
        return self._run_rules(set_defaults_on_error=True)

    def set_defaults_for_omitted(self):
        """Fill the omitted fields with their default values, without
        checking anything.

        :returns: the :class:`~clientreg.models.ClientMetadata` with defaults
        """
        metadata = self.metadata
        if is_empty(metadata.get(APPLICATION_TYPE)):
            metadata[APPLICATION_TYPE] = self.DEFAULT_APPLICATION_TYPE
        if is_empty(metadata.get(RESPONSE_TYPES)):
            metadata[RESPONSE_TYPES] = [self.DEFAULT_RESPONSE_TYPE]
        if is_empty(metadata.get(GRANT_TYPES)):
            metadata[GRANT_TYPES] = [self.DEFAULT_GRANT_TYPE]
        if is_empty(metadata.get(TOKEN_ENDPOINT_AUTH_METHOD)):
            metadata[TOKEN_ENDPOINT_AUTH_METHOD] = (
                self.DEFAULT_TOKEN_ENDPOINT_AUTH_METHOD
            )
        for key in (REDIRECT_URIS, POST_LOGOUT_REDIRECT_URIS, TRUSTED_URI_PREFIXES):
            if metadata.get(key) is None:
                metadata[key] = []
        return metadata

    def _run_rules(self, set_defaults_on_error):
        def run(rule, on_error, *args):
            try:
                return rule(*args)
            except ClientMetadataError as error:
                if not set_defaults_on_error:
                    log.debug("Reject client metadata: %r", error)
                    raise
                log.debug("Reset client metadata after %r", error)
                on_error()

        run(self.validate_application_type, self._reset_application_type)
        run(self.validate_response_types, self._reset(RESPONSE_TYPES, []))
        grant_types = run(self.validate_grant_types, self._reset(GRANT_TYPES, []))
        run(
            self.validate_response_and_grant_match,
            self._reset_response_and_grant_types,
            grant_types or set(),
        )
        run(self.validate_redirect_uris, self._reset(REDIRECT_URIS, []))
        run(self.validate_scope, self._reset(SCOPE))
        run(self.validate_subject_type, self._reset(SUBJECT_TYPE))
        run(
            self.validate_token_endpoint_auth_method,
            self._reset(
                TOKEN_ENDPOINT_AUTH_METHOD, self.DEFAULT_TOKEN_ENDPOINT_AUTH_METHOD
            ),
        )
        run(
            self.validate_post_logout_redirect_uris,
            self._reset(POST_LOGOUT_REDIRECT_URIS, []),
        )
        run(self.validate_preauthorized_scope, self._reset(PREAUTHORIZED_SCOPE))
        run(self.validate_trusted_uri_prefixes, self._reset(TRUSTED_URI_PREFIXES, []))
        run(
            self.validate_functional_user_group_ids,
            self._reset(FUNCTIONAL_USER_GROUP_IDS, []),
        )
        run(self.validate_output_parameters, self._reset_output_parameters)
        return self.metadata

    def _reset(self, key, default=None):
        def reset():
            if default is None:
                self.metadata.pop(key, None)
            else:
                self.metadata[key] = copy.copy(default)

        return reset

    def _reset_application_type(self):
        self.metadata[APPLICATION_TYPE] = self.DEFAULT_APPLICATION_TYPE

    def _reset_response_and_grant_types(self):
        self.metadata[RESPONSE_TYPES] = [self.DEFAULT_RESPONSE_TYPE]
        self.metadata[GRANT_TYPES] = [self.DEFAULT_GRANT_TYPE]

    def _reset_output_parameters(self):
        self.metadata[CLIENT_ID_ISSUED_AT] = 0
        self.metadata[CLIENT_SECRET_EXPIRES_AT] = 0
        self.metadata.pop(REGISTRATION_CLIENT_URI, None)

    def validate_application_type(self):
        """Kind of the application, ``web`` or ``native``. The default, if
        omitted, is ``web``.
        """
        value = self.metadata.get(APPLICATION_TYPE)
        if not is_empty(value):
            self.registry.check_supported(APPLICATION_TYPE, value)

    def validate_response_types(self):
        values = self.metadata.get(RESPONSE_TYPES)
        if is_empty(values):
            return
        _check_list(RESPONSE_TYPES, values)
        seen = set()
        for value in values:
            self.registry.check_supported(RESPONSE_TYPES, value)
            _check_unique(RESPONSE_TYPES, value, seen)

    def validate_grant_types(self):
        """Check the grant types, and return them as a set for
        :meth:`validate_response_and_grant_match`.
        """
        seen = set()
        values = self.metadata.get(GRANT_TYPES)
        if is_empty(values):
            return seen
        _check_list(GRANT_TYPES, values)
        for value in values:
            self.registry.check_supported(GRANT_TYPES, value)
            _check_unique(GRANT_TYPES, value, seen)
        return seen

    def validate_response_and_grant_match(self, grant_types):
        """RFC7591 section 2.1: a response type can only be used together with
        the grant type that redeems it, e.g. ``code`` requires
        ``authorization_code``.
        """
        response_types = self.metadata.get(RESPONSE_TYPES)
        if is_empty(response_types):
            return
        for response_type in response_types:
            required = self.registry.required_grant_type(response_type)
            if required and required not in grant_types:
                raise GrantResponseMismatchError(
                    RESPONSE_TYPES, response_type, required=required
                )

    def validate_redirect_uris(self):
        uris = self.metadata.get(REDIRECT_URIS)
        if uris is None:
            self.metadata[REDIRECT_URIS] = []
            return

        # native clients may register relative URIs
        application_type = self.metadata.get(APPLICATION_TYPE)
        require_absolute = is_empty(application_type) or application_type == "web"
        self._validate_uris(REDIRECT_URIS, uris, require_absolute)

    def validate_scope(self):
        # TODO: reject scope tokens outside of the RFC6749 section 3.3
        # character set, and duplicated scope tokens.
        pass

    def validate_subject_type(self):
        value = self.metadata.get(SUBJECT_TYPE)
        if not is_empty(value):
            self.registry.check_supported(SUBJECT_TYPE, value)

    def validate_token_endpoint_auth_method(self):
        value = self.metadata.get(TOKEN_ENDPOINT_AUTH_METHOD)
        if not is_empty(value):
            self.registry.check_supported(TOKEN_ENDPOINT_AUTH_METHOD, value)

    def validate_post_logout_redirect_uris(self):
        uris = self.metadata.get(POST_LOGOUT_REDIRECT_URIS)
        if uris is None:
            self.metadata[POST_LOGOUT_REDIRECT_URIS] = []
            return
        self._validate_uris(POST_LOGOUT_REDIRECT_URIS, uris)

    def validate_preauthorized_scope(self):
        # Not required to be a subset of ``scope``: the granted scope is
        # reduced when the token is issued.
        pass

    def validate_trusted_uri_prefixes(self):
        uris = self.metadata.get(TRUSTED_URI_PREFIXES)
        if uris is None:
            self.metadata[TRUSTED_URI_PREFIXES] = []
            return
        self._validate_uris(TRUSTED_URI_PREFIXES, uris)
        self.metadata[TRUSTED_URI_PREFIXES] = [slash_terminated(uri) for uri in uris]

    def validate_functional_user_group_ids(self):
        group_ids = self.metadata.get(FUNCTIONAL_USER_GROUP_IDS)
        if group_ids is None:
            self.metadata[FUNCTIONAL_USER_GROUP_IDS] = []
            return
        _check_list(FUNCTIONAL_USER_GROUP_IDS, group_ids)
        seen = set()
        for group_id in group_ids:
            if not isinstance(group_id, str):
                raise UnsupportedValueError(FUNCTIONAL_USER_GROUP_IDS, group_id)
            _check_unique(FUNCTIONAL_USER_GROUP_IDS, group_id, seen)

    def validate_output_parameters(self):
        """``client_id_issued_at``, ``client_secret_expires_at`` and
        ``registration_client_uri`` are set by the server in the registration
        response, they can not be sent by the client.
        """
        for key in (CLIENT_ID_ISSUED_AT, CLIENT_SECRET_EXPIRES_AT):
            value = self.metadata.get(key)
            if value is not None and value != 0:
                raise OutputParameterNotAllowedError(key, value)

        value = self.metadata.get(REGISTRATION_CLIENT_URI)
        if not is_empty(value):
            raise OutputParameterNotAllowedError(REGISTRATION_CLIENT_URI, value)

    def _validate_uris(self, key, uris, require_absolute=True):
        _check_list(key, uris, MalformedURIError)
        seen = set()
        for uri in uris:
            try:
                parts = parse_uri(uri)
            except ValueError as error:
                raise MalformedURIError(key, uri) from error

            if require_absolute and not parts.scheme:
                raise NotAbsoluteURIError(key, uri)

            _check_unique(key, uri, seen)


def _check_list(key, values, error_cls=UnsupportedValueError):
    if not isinstance(values, (list, tuple)):
        raise error_cls(key, values)


def _check_unique(key, value, seen):
    if value in seen:
        raise DuplicateValueError(key, value)
    seen.add(value)
