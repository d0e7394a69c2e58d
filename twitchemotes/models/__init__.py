from . import bttv, ttv
from .fields import OptionalNonEmptyStr, empty_string_to_none

__all__ = [
    "bttv",
    "ttv",
    "OptionalNonEmptyStr",
    "empty_string_to_none",
]
