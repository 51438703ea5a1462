from urllib.parse import unquote_plus

from .urls import BAD_ESCAPE_RE


def url_decode(s, encoding="utf-8"):
    """Decode an ``application/x-www-form-urlencoded`` string. ``+`` turns
    into a space and ``%XX`` escapes are decoded with ``encoding``.

    :raises ValueError: on a truncated or non-hex escape, or when the
        decoded bytes are not valid in ``encoding``
    """
    if BAD_ESCAPE_RE.search(s):
        raise ValueError(f"Malformed escape sequence in {s!r}")
    return unquote_plus(s, encoding=encoding, errors="strict")
