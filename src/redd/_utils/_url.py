"""Query string merging and form encoding for outgoing requests."""

from typing import Any, Mapping, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit


def encode_form(data: Mapping[str, Any]) -> str:
    """Encode ``data`` as ``application/x-www-form-urlencoded`` content.

    Keys keep their insertion order. Sequence values are expanded into
    repeated keys (``{"a": ["1", "2"]}`` becomes ``a=1&a=2``) and spaces are
    encoded as ``+``.

    Args:
        data: The key/value pairs to encode.

    Returns:
        str: The encoded string, empty when ``data`` is empty.
    """
    return urlencode(data, doseq=True)


def build_url(path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Append ``params`` to the query string of ``path``.

    An existing query string is kept and the new parameters are joined to it
    with ``&``; nothing already present in ``path`` is overwritten. When
    ``params`` is ``None`` the path is returned untouched.

    Args:
        path: A path relative to the endpoint, or an absolute URL. May already
            carry a query string.
        params: Query parameters to append.

    Returns:
        str: The path with the merged query string.

    Examples:
        >>> build_url("/api/v1/me", {"a": "1", "b": "2"})
        '/api/v1/me?a=1&b=2'
        >>> build_url("/search?x=1", {"y": "2"})
        '/search?x=1&y=2'
    """
    if params is None:
        return path

    parts = urlsplit(path)
    query = "&".join(q for q in (parts.query, encode_form(params)) if q)
    return urlunsplit(parts._replace(query=query))
