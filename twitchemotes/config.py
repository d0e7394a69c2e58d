import os

from dotenv import load_dotenv

from twitchemotes.constants import (
    DEFAULT_BTTV_API_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_TWITCHEMOTES_API_URL,
)

load_dotenv()

BTTV_API_URL = os.getenv("BTTV_API_URL", DEFAULT_BTTV_API_URL).rstrip("/")
TWITCHEMOTES_API_URL = os.getenv(
    "TWITCHEMOTES_API_URL", DEFAULT_TWITCHEMOTES_API_URL
).rstrip("/")

HTTP_CONNECT_TIMEOUT = float(
    os.getenv("EMOTES_HTTP_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
)
HTTP_READ_TIMEOUT = float(os.getenv("EMOTES_HTTP_READ_TIMEOUT", DEFAULT_READ_TIMEOUT))
