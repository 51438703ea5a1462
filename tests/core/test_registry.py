import pytest

from clientreg import ClientMetadataRegistry
from clientreg.errors import UnsupportedValueError


def test_default_supported_values():
    registry = ClientMetadataRegistry()
    assert registry.supported_values("application_type") == ["web", "native"]
    assert registry.supported_values("subject_type") == ["public"]
    assert "private_key_jwt" not in registry.supported_values(
        "token_endpoint_auth_method"
    )


def test_check_supported():
    registry = ClientMetadataRegistry()
    registry.check_supported("grant_types", "refresh_token")

    with pytest.raises(UnsupportedValueError) as exc_info:
        registry.check_supported("grant_types", "magic")
    assert exc_info.value.field == "grant_types"
    assert exc_info.value.value == "magic"
    assert exc_info.value.reason == "UNSUPPORTED_VALUE"


def test_override_supported_values():
    registry = ClientMetadataRegistry(response_types=["code"])
    registry.check_supported("response_types", "code")
    with pytest.raises(UnsupportedValueError):
        registry.check_supported("response_types", "id_token")


def test_subclass_supported_values():
    class NoImplicitRegistry(ClientMetadataRegistry):
        GRANT_TYPES = ["authorization_code", "refresh_token"]

    registry = NoImplicitRegistry()
    with pytest.raises(UnsupportedValueError):
        registry.check_supported("grant_types", "implicit")


def test_from_server_metadata():
    registry = ClientMetadataRegistry.from_server_metadata(
        {
            "response_types_supported": ["code", "id_token", "code id_token"],
            "grant_types_supported": ["authorization_code", "refresh_token"],
            "token_endpoint_auth_methods_supported": [
                "client_secret_basic",
                "private_key_jwt",
            ],
        }
    )
    assert registry.supported_values("response_types") == ["code", "id_token"]
    assert registry.supported_values("grant_types") == [
        "authorization_code",
        "refresh_token",
    ]
    assert registry.supported_values("token_endpoint_auth_method") == [
        "client_secret_basic"
    ]
    # not advertised, keep defaults
    assert registry.supported_values("subject_type") == ["public"]


def test_required_grant_type():
    registry = ClientMetadataRegistry()
    assert registry.required_grant_type("code") == "authorization_code"
    assert registry.required_grant_type("token id_token") == "implicit"
    assert registry.required_grant_type("id_token") is None


def test_check_supported_requires_string():
    registry = ClientMetadataRegistry()
    with pytest.raises(UnsupportedValueError):
        registry.check_supported("application_type", ["web"])
    with pytest.raises(UnsupportedValueError):
        registry.check_supported("grant_types", None)


def test_from_server_metadata_without_common_values():
    registry = ClientMetadataRegistry.from_server_metadata(
        {
            "token_endpoint_auth_methods_supported": ["private_key_jwt"],
            "subject_types_supported": ["pairwise"],
        }
    )
    assert registry.supported_values("token_endpoint_auth_method") == []
    assert registry.supported_values("subject_type") == []
    with pytest.raises(UnsupportedValueError):
        registry.check_supported("token_endpoint_auth_method", "client_secret_basic")
    with pytest.raises(UnsupportedValueError):
        registry.check_supported("subject_type", "public")
    # application_type is not part of discovery metadata
    assert registry.supported_values("application_type") == ["web", "native"]


def test_empty_supported_values():
    registry = ClientMetadataRegistry(grant_types=[])
    assert registry.supported_values("grant_types") == []
    with pytest.raises(UnsupportedValueError):
        registry.check_supported("grant_types", "authorization_code")
