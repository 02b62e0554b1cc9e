"""twitch-kraken-models — typed views over Twitch Kraken API records.

Each model wraps one raw JSON record plus a shared API client handle and
exposes named, read-only accessors.  Mutations are forwarded to the client.
"""

from twitch_kraken.core.channel import Channel, ChannelLike, ChannelPlaceholder
from twitch_kraken.core.offline import OfflineApiClient
from twitch_kraken.core.protocols import ApiClient, ChannelApi, ChannelUpdateData
from twitch_kraken.core.subscription import Subscription
from twitch_kraken.core.video import Video, VideoMutedSegment, VideoThumbnail
from twitch_kraken.version import __version__

__all__: list[str] = [
    "ApiClient",
    "Channel",
    "ChannelApi",
    "ChannelLike",
    "ChannelPlaceholder",
    "ChannelUpdateData",
    "OfflineApiClient",
    "Subscription",
    "Video",
    "VideoMutedSegment",
    "VideoThumbnail",
    "__version__",
]
