from .decode import DecodeError, Response
from .endpoint import SERVICE, VERSION, Endpoint, Payload, RequestInfo

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "Endpoint",
    "Payload",
    "RequestInfo",
    "Response",
    "SERVICE",
    "VERSION",
]
