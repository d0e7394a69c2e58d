from .constants import ErrorKind
from .errors import DecodeFailure, EmoteApiError, IoFailure, TransportFailure
from .log import setup_logging
from .services import bttv, ttv

__all__ = [
    "ErrorKind",
    "EmoteApiError",
    "IoFailure",
    "DecodeFailure",
    "TransportFailure",
    "setup_logging",
    "bttv",
    "ttv",
]
