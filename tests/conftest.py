from typing import Callable

import httpx
import pytest

from twitchemotes.services.helper.http_client import http_client_manager

BTTV_CHANNEL_JSON = """{
    "status":200,
    "urlTemplate":"//cdn.betterttv.net/emote/{{id}}/{{image}}",
    "bots":[],
    "emotes":[
        {"id":"594e207ae949fe3b435e5859","channel":"oshleyy","code":"pachiW","imageType":"png"},
        {"id":"56e9f494fff3cc5c35e5287e","channel":"monkasen","code":"monkaS","imageType":"png"},
        {"id":"55b6f480e66682f576dd94f5","channel":"turtlemaw","code":"Clap","imageType":"gif"},
        {"id":"59c0b93f8798a53d5af9a484","channel":"oshleyy","code":"oshleyW","imageType":"png"},
        {"id":"59c72b628798a53d5af9cbb4","channel":"oshleyy","code":"oshleyHmm","imageType":"png"}
    ]
}"""

BTTV_GLOBAL_JSON = """{
    "status":200,
    "urlTemplate":"//cdn.betterttv.net/emote/{{id}}/{{image}}",
    "emotes":[
        {"id":"54fa8f1401e468494b85b537","code":":tf:","channel":null,"restrictions":{"channels":[],"games":[],"emoticonSet":null},"imageType":"png"},
        {"id":"54fa8fce01e468494b85b53c","code":"CiGrip","channel":null,"imageType":"png"},
        {"id":"566ca04265dbbdab32ec054a","code":"FeelsBadMan","imageType":"png"}
    ]
}"""

TTV_GLOBAL_JSON = """{
    "emote1": {"id": 91735, "code": "emote1", "emoticon_set": 0, "description": null},
    "Kappa": {"id": 25, "code": "Kappa", "emoticon_set": 0}
}"""

TTV_SUBSCRIBER_JSON = """{
    "22484632": {
        "channel_name": "forsen",
        "display_name": "forsen",
        "channel_id": "22484632",
        "broadcaster_type": "partner",
        "plans": {"$4.99": "1000", "$9.99": "2000", "$24.99": null},
        "emotes": [
            {"id": 1, "code": "forsenE", "emoticon_set": 9, "description": null},
            {"id": 2, "code": "forsenW", "emoticon_set": 9}
        ],
        "subscriber_badges": {
            "0": {
                "image_url_1x": "https://static-cdn.jtvnw.net/badges/v1/a/1",
                "image_url_2x": "https://static-cdn.jtvnw.net/badges/v1/a/2",
                "image_url_4x": "https://static-cdn.jtvnw.net/badges/v1/a/3",
                "description": "Subscriber",
                "title": "Subscriber",
                "click_action": "subscribe_to_channel",
                "click_url": ""
            }
        },
        "bits_badges": {
            "100": {
                "image_url_1x": "https://static-cdn.jtvnw.net/badges/v1/b/1",
                "image_url_2x": "https://static-cdn.jtvnw.net/badges/v1/b/2",
                "image_url_4x": "https://static-cdn.jtvnw.net/badges/v1/b/3",
                "description": "cheer 100",
                "title": "cheer 100",
                "click_action": "visit_url",
                "click_url": "https://bits.twitch.tv"
            }
        },
        "cheermotes": {
            "forsen": {
                "1": "https://cdn/forsen/1.png",
                "1.5": "https://cdn/forsen/1.5.png",
                "2": "https://cdn/forsen/2.png",
                "3": "https://cdn/forsen/3.png",
                "4": "https://cdn/forsen/4.png"
            }
        },
        "base_set_id": "9",
        "generated_at": "2018-01-01T00:00:00Z"
    },
    "11148817": {
        "channel_name": "pajlada",
        "display_name": "pajlada",
        "channel_id": "11148817",
        "broadcaster_type": null,
        "plans": {},
        "emotes": [],
        "subscriber_badges": null,
        "bits_badges": null,
        "cheermotes": null,
        "base_set_id": "0"
    }
}"""


@pytest.fixture
def mock_http() -> Callable[..., list[httpx.Request]]:
    """Install an httpx.MockTransport serving ``handler`` for the test.

    Returns the list of requests the transport saw.
    """
    requests: list[httpx.Request] = []

    def _install(handler: Callable[[httpx.Request], httpx.Response]):
        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http_client_manager.install_transport(httpx.MockTransport(_record))
        return requests

    yield _install
    http_client_manager.install_transport(None)
