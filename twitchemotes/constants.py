from enum import Enum
from typing import TypedDict

DEFAULT_BTTV_API_URL = "https://api.betterttv.net/2"
DEFAULT_TWITCHEMOTES_API_URL = "https://twitchemotes.com/api_cache/v3"

# The twitchemotes.com API does not ship a url template for emote images
TWITCH_EMOTE_CDN_TEMPLATE = "https://static-cdn.jtvnw.net/emoticons/v1/{id}/{size}"
TWITCH_EMOTE_SIZES = ("1.0", "2.0", "3.0")

BTTV_ID_PLACEHOLDER = "{{id}}"
BTTV_IMAGE_PLACEHOLDER = "{{image}}"
BTTV_EMOTE_SIZES = ("1x", "2x", "3x")

DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 30.0


class ErrorKind(str, Enum):
    Io = "io"
    Decode = "decode"
    Transport = "transport"


class ErrorDetails(TypedDict):
    type: str
    message: str
    args: tuple
    traceback: str
