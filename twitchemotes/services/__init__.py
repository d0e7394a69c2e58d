from . import bttv, ttv

__all__ = ["bttv", "ttv"]
