"""Core layer — record views and the client protocols they depend on.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; network work is forwarded to the client.
* No imports from ``cli``.
* Accessors are pure projections of the raw record.
"""

from twitch_kraken.core.channel import (
    Channel,
    ChannelLike,
    ChannelPlaceholder,
    ChannelReference,
)
from twitch_kraken.core.offline import OfflineApiClient
from twitch_kraken.core.protocols import ApiClient, ChannelApi, ChannelUpdateData
from twitch_kraken.core.record import ApiRecord
from twitch_kraken.core.subscription import Subscription
from twitch_kraken.core.video import (
    Video,
    VideoMutedSegment,
    VideoThumbnail,
    VideoThumbSize,
    VideoViewability,
)

__all__: list[str] = [
    "ApiClient",
    "ApiRecord",
    "Channel",
    "ChannelApi",
    "ChannelLike",
    "ChannelPlaceholder",
    "ChannelReference",
    "ChannelUpdateData",
    "OfflineApiClient",
    "Subscription",
    "Video",
    "VideoMutedSegment",
    "VideoThumbSize",
    "VideoThumbnail",
    "VideoViewability",
]
