"""A minimal base for JSON-over-HTTP API clients."""

from ._client import Client
from ._config import ClientConfig
from ._utils.constants import USER_AGENT
from ._version import __version__
from .models import EndpointMissingError, ReddError, Response, UnsupportedVerbError

__all__ = [
    "Client",
    "ClientConfig",
    "EndpointMissingError",
    "ReddError",
    "Response",
    "USER_AGENT",
    "UnsupportedVerbError",
    "__version__",
]
