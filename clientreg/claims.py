from .models import ClientMetadata
from .registry import ClientMetadataRegistry
from .validator import ClientMetadataValidator


class ClientMetadataClaims(ClientMetadata):
    """Client metadata claims which can be used together with other claims
    classes by the :ref:`specs/rfc7591` and :ref:`specs/rfc7592` endpoints::

        server.register_endpoint(
            ClientRegistrationEndpoint(
                claims_classes=[
                    rfc7591.ClientMetadataClaims,
                    clientreg.ClientMetadataClaims,
                ]
            )
        )

    Validation errors are raised as
    :class:`~clientreg.errors.ClientMetadataError`, which the endpoint
    renders as ``invalid_client_metadata`` responses.
    """

    validator_cls = ClientMetadataValidator

    def __init__(self, claims, header=None, options=None, server_metadata=None):
        super().__init__(claims)
        self.header = header or {}
        # claims options are not used, supported values come from server_metadata
        self.options = options or {}
        self.server_metadata = server_metadata or {}

    def validate(self, now=None, leeway=0):
        if self.server_metadata:
            registry = ClientMetadataRegistry.from_server_metadata(
                self.server_metadata
            )
        else:
            registry = None
        validator = self.validator_cls.create(self, registry)
        metadata = validator.validate_create_update()
        self.clear()
        self.update(metadata)
