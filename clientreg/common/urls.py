"""clientreg.common.urls.
~~~~~~~~~~~~~~~~~~~~~~~

URI helpers shared by the client metadata rules.
"""

import re
from urllib.parse import urlsplit

SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
ILLEGAL_CHARS_RE = re.compile(r'[\x00-\x20"<>\\^`{|}\x7f]')
BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_uri(uri):
    """Parse ``uri`` as an RFC 3986 URI reference.

    :param uri: the URI string
    :returns: a :class:`urllib.parse.SplitResult`
    :raises ValueError: if the string is not a syntactically valid URI
    """
    if not isinstance(uri, str):
        raise ValueError(f"{uri!r} is not a string")

    if ILLEGAL_CHARS_RE.search(uri):
        raise ValueError(f"{uri!r} contains an illegal character")

    if BAD_ESCAPE_RE.search(uri):
        raise ValueError(f"{uri!r} contains a malformed escape sequence")

    # a ":" before any "/", "?" or "#" terminates a scheme
    head = re.split(r"[/?#]", uri, maxsplit=1)[0]
    if ":" in head:
        scheme, rest = uri.split(":", 1)
        if not SCHEME_RE.match(scheme):
            raise ValueError(f"{uri!r} has an invalid scheme")
        if not rest:
            raise ValueError(f"{uri!r} has an empty scheme-specific part")

    parts = urlsplit(uri)
    if "#" in parts.fragment:
        raise ValueError(f"{uri!r} contains more than one fragment")

    if uri[len(parts.scheme) + 1 if parts.scheme else 0 :].startswith("//"):
        if not parts.netloc and not parts.path:
            raise ValueError(f"{uri!r} has an empty authority")
    return parts


def slash_terminated(uri):
    if uri.endswith("/"):
        return uri
    return uri + "/"
