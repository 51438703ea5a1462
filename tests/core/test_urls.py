import pytest

from clientreg.common.encoding import url_decode
from clientreg.common.urls import parse_uri
from clientreg.common.urls import slash_terminated


@pytest.mark.parametrize(
    "uri",
    [
        "https://client.test/cb",
        "https://client.test:8443/cb?a=b#frag",
        "http://127.0.0.1/cb",
        "http://[::1]:8080/cb",
        "com.example.app:/oauth2redirect",
        "urn:ietf:wg:oauth:2.0:oob",
        "file:///tmp/cb",
        "/callback",
        "callback",
        "https://client.test/caf%C3%A9",
    ],
)
def test_parse_valid_uri(uri):
    parse_uri(uri)


@pytest.mark.parametrize(
    "uri",
    [
        "http://[",
        "http://client.test/a b",
        "https://client.test/<cb>",
        "https://client.test/%zz",
        "https://client.test/50%",
        "http:",
        "http://",
        "1http://client.test",
        ":client.test",
        "https://client.test/#a#b",
        None,
        1,
    ],
)
def test_parse_malformed_uri(uri):
    with pytest.raises(ValueError):
        parse_uri(uri)


def test_slash_terminated():
    assert slash_terminated("https://client.test/api") == "https://client.test/api/"
    assert slash_terminated("https://client.test/api/") == "https://client.test/api/"


def test_url_decode():
    assert url_decode("a%20b+c") == "a b c"
    assert url_decode("caf%C3%A9") == "café"
    with pytest.raises(ValueError):
        url_decode("100%")
    with pytest.raises(ValueError):
        url_decode("%C3")
