from ._ssl_context import create_ssl_context
from ._url import build_url, encode_form

__all__ = [
    "build_url",
    "create_ssl_context",
    "encode_form",
]
