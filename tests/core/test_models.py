import pytest

from clientreg import ClientMetadata
from clientreg.models import is_empty


def test_attribute_access():
    metadata = ClientMetadata({"application_type": "native", "scope": "openid email"})
    assert metadata.application_type == "native"
    assert metadata.redirect_uris is None
    assert metadata.scopes == ["openid", "email"]
    assert metadata.preauthorized_scopes == []
    with pytest.raises(AttributeError):
        metadata.not_a_claim


def test_get_deep_copy():
    metadata = ClientMetadata({"redirect_uris": ["https://client.test/cb"]})
    copied = metadata.get_deep_copy()
    copied["redirect_uris"].append("https://client.test/other")
    assert metadata["redirect_uris"] == ["https://client.test/cb"]
    assert isinstance(copied, ClientMetadata)


def test_is_empty():
    assert is_empty(None)
    assert is_empty("")
    assert is_empty([])
    assert not is_empty("web")
    assert not is_empty(["code"])
    assert not is_empty(0)
