from .errors import EndpointMissingError, ReddError, UnsupportedVerbError
from .response import Response

__all__ = [
    "EndpointMissingError",
    "ReddError",
    "Response",
    "UnsupportedVerbError",
]
