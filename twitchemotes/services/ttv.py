"""twitchemotes.com API cache.

The API does not include an image url template. Use :func:`emote_image_url`
to build one from an emote id, keeping in mind many emotes were only made
for the ``1.0`` size.
"""

import logging

from pydantic import TypeAdapter

from twitchemotes import config
from twitchemotes.constants import TWITCH_EMOTE_CDN_TEMPLATE, TWITCH_EMOTE_SIZES
from twitchemotes.models.ttv import Channels, GlobalEmotes
from twitchemotes.services.helper import decode, http_client_manager

logger = logging.getLogger(__name__)

_global_schema = TypeAdapter(GlobalEmotes)
_subscriber_schema = TypeAdapter(Channels)


def emote_image_url(emote_id: int, size: str = "1.0") -> str:
    if size not in TWITCH_EMOTE_SIZES:
        raise ValueError(
            f"Unsupported emote size {size!r}, expected one of {', '.join(TWITCH_EMOTE_SIZES)}"
        )
    return TWITCH_EMOTE_CDN_TEMPLATE.format(id=emote_id, size=size)


def fetch_global() -> bytes:
    return http_client_manager.get(f"{config.TWITCHEMOTES_API_URL}/global.json")


def fetch_subscriber() -> bytes:
    return http_client_manager.get(f"{config.TWITCHEMOTES_API_URL}/subscriber.json")


def decode_global(text: str | bytes) -> GlobalEmotes:
    return decode(_global_schema, text)


def decode_subscriber(text: str | bytes) -> Channels:
    return decode(_subscriber_schema, text)


def get_global() -> GlobalEmotes:
    emotes = decode_global(fetch_global())
    logger.info(f"Loaded {len(emotes)} Twitch global emotes")
    return emotes


def get_subscriber() -> Channels:
    channels = decode_subscriber(fetch_subscriber())
    logger.info(f"Loaded subscriber data for {len(channels)} channels")
    return channels
