"""Shared pytest fixtures and configuration for the twitch-kraken test suite.

Guidelines
----------
* No internet access in any test.
* The API client is always a mock (or the offline client).
* Coroutines are driven with ``asyncio.run``.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


def make_client() -> MagicMock:
    """Return a mock ApiClient whose channel endpoints are coroutines."""
    client = MagicMock(name="ApiClient")
    client.channels.get_channel = AsyncMock(name="get_channel")
    client.channels.update_channel = AsyncMock(name="update_channel", return_value=None)
    return client


@pytest.fixture
def client() -> MagicMock:
    return make_client()


@pytest.fixture
def video_data() -> dict[str, Any]:
    """A Kraken video record as returned by ``GET /videos/:id``."""
    return {
        "_id": "v106400740",
        "broadcast_id": "26080357472",
        "broadcast_type": "archive",
        "channel": {
            "_id": "12826",
            "name": "twitch",
            "display_name": "Twitch",
        },
        "created_at": "2016-12-08T19:48:55Z",
        "description": "Pancakes",
        "description_html": "<p>Pancakes</p>",
        "fps": {"1080p": 60, "chunked": 59.9, "720p": 30},
        "game": "Creative",
        "language": "en",
        "length": 3240,
        "muted_segments": [
            {"duration": 180, "offset": 600},
            {"duration": 360, "offset": 1800},
        ],
        "preview": {
            "large": "https://static-cdn.jtvnw.net/s3_vods/large.jpg",
            "medium": "https://static-cdn.jtvnw.net/s3_vods/medium.jpg",
            "small": "https://static-cdn.jtvnw.net/s3_vods/small.jpg",
            "template": "https://static-cdn.jtvnw.net/s3_vods/{width}x{height}.jpg",
        },
        "published_at": "2016-12-08T19:49:08Z",
        "resolutions": {"1080p": "1920x1080", "chunked": "1920x1080", "720p": "1280x720"},
        "status": "recorded",
        "tag_list": "pancakes,cooking,irl",
        "thumbnails": {
            "large": [
                {"type": "generated", "url": "https://static-cdn.jtvnw.net/thumb0-640x360.jpg"},
                {"type": "custom", "url": "https://static-cdn.jtvnw.net/thumb1-640x360.jpg"},
            ],
            "small": [
                {"type": "generated", "url": "https://static-cdn.jtvnw.net/thumb0-80x45.jpg"},
            ],
        },
        "title": "Test Broadcast",
        "url": "https://www.twitch.tv/videos/106400740",
        "viewable": "public",
        "viewable_at": None,
        "views": 5417,
    }


@pytest.fixture
def channel_data() -> dict[str, Any]:
    """A Kraken channel record as returned by ``GET /channels/:id``."""
    return {
        "_id": "44322889",
        "broadcaster_language": "en",
        "broadcaster_type": "partner",
        "created_at": "2013-06-03T19:12:02Z",
        "description": "A Twitch user since 2013.",
        "display_name": "DallasNChains",
        "followers": 40,
        "game": "Final Fantasy XV",
        "language": "en",
        "logo": "https://static-cdn.jtvnw.net/jtv_user_pictures/logo.png",
        "mature": True,
        "name": "dallasnchains",
        "partner": False,
        "profile_banner": None,
        "profile_banner_background_color": None,
        "status": "The Finalest of Fantasies",
        "updated_at": "2016-12-06T22:02:05Z",
        "url": "https://www.twitch.tv/dallasnchains",
        "video_banner": "https://static-cdn.jtvnw.net/jtv_user_pictures/banner.png",
        "views": 232,
    }


@pytest.fixture
def subscription_data() -> dict[str, Any]:
    return {
        "_id": "ac2f1248993eaf97e71721458bd88aae66c92330",
        "sub_plan": "1000",
        "sub_plan_name": "Channel Subscription (forstycup)",
        "created_at": "2017-04-08T12:00:00Z",
    }
