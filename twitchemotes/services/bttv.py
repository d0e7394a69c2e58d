"""BetterTTV emote API.

Global emotes are available on every channel, channel emotes only where the
broadcaster enabled them. Both responses carry a ``url_template`` rather than
full image urls.
"""

import logging

from pydantic import TypeAdapter

from twitchemotes import config
from twitchemotes.models.bttv import ChannelEmotes, GlobalEmotes
from twitchemotes.services.helper import decode, http_client_manager

logger = logging.getLogger(__name__)

_global_schema = TypeAdapter(GlobalEmotes)
_channel_schema = TypeAdapter(ChannelEmotes)


def fetch_global() -> bytes:
    return http_client_manager.get(f"{config.BTTV_API_URL}/emotes")


def fetch_channel(name: str) -> bytes:
    # name is used as-is, escaping path segments is up to the caller
    return http_client_manager.get(f"{config.BTTV_API_URL}/channels/{name}")


def decode_global(text: str | bytes) -> GlobalEmotes:
    return decode(_global_schema, text)


def decode_channel(text: str | bytes) -> ChannelEmotes:
    return decode(_channel_schema, text)


def get_global() -> GlobalEmotes:
    global_emotes = decode_global(fetch_global())
    logger.info(f"Loaded {len(global_emotes.emotes)} BTTV global emotes")
    return global_emotes


def get_channel(name: str) -> ChannelEmotes:
    channel_emotes = decode_channel(fetch_channel(name))
    logger.info(f"Loaded {len(channel_emotes.emotes)} BTTV emotes for {name}")
    return channel_emotes
