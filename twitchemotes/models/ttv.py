from typing import Optional

from pydantic import Field

from twitchemotes.models.common import Record
from twitchemotes.models.fields import OptionalNonEmptyStr


class Emote(Record):
    id: int
    code: str
    emoticon_set: int
    description: Optional[str] = None


class Badge(Record):
    image_url_1x: str
    image_url_2x: str
    image_url_4x: str
    description: str
    title: str
    click_action: str
    click_url: OptionalNonEmptyStr = None


class Cheermote(Record):
    url_1: str = Field(alias="1")
    url_1_5: str = Field(alias="1.5")
    url_2: str = Field(alias="2")
    url_3: str = Field(alias="3")
    url_4: str = Field(alias="4")


class Channel(Record):
    channel_name: str
    display_name: str
    channel_id: str
    broadcaster_type: Optional[str] = None
    # plan price -> plan id
    plans: dict[str, Optional[str]]
    emotes: list[Emote]
    subscriber_badges: Optional[dict[str, Badge]] = None
    bits_badges: Optional[dict[str, Badge]] = None
    cheermotes: Optional[dict[str, Cheermote]] = None
    base_set_id: str


GlobalEmotes = dict[str, Emote]
Channels = dict[str, Channel]
