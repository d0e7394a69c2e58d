from typing import Any, Optional

from pydantic import Field

from twitchemotes.constants import (
    BTTV_EMOTE_SIZES,
    BTTV_ID_PLACEHOLDER,
    BTTV_IMAGE_PLACEHOLDER,
)
from twitchemotes.models.common import Record


class Emote(Record):
    id: str
    code: str
    channel: Optional[str] = None
    # Never observed populated, kept as raw JSON
    restrictions: Optional[Any] = None
    image_type: str = Field(alias="imageType")


class EmoteListResponse(Record):
    status: int
    url_template: str = Field(alias="urlTemplate")
    emotes: list[Emote]

    def emote_url(self, emote: Emote, size: str = "1x") -> str:
        """Fill ``url_template`` for one emote, e.g. ``//cdn.betterttv.net/emote/<id>/3x``."""
        if size not in BTTV_EMOTE_SIZES:
            raise ValueError(
                f"Unsupported emote size {size!r}, expected one of {', '.join(BTTV_EMOTE_SIZES)}"
            )
        return self.url_template.replace(BTTV_ID_PLACEHOLDER, emote.id).replace(
            BTTV_IMAGE_PLACEHOLDER, size
        )


class GlobalEmotes(EmoteListResponse):
    pass


class ChannelEmotes(EmoteListResponse):
    bots: list[Any]
