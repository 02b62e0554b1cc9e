"""Client handle for records that have no API connection behind them.

Useful when wrapping records loaded from disk (the CLI does this) or
built as fixtures: every accessor works, while any operation that would
need the network fails loudly instead of silently doing nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from twitch_kraken.exceptions import ClientUnavailableError

if TYPE_CHECKING:
    from twitch_kraken.core.channel import Channel
    from twitch_kraken.core.protocols import ChannelUpdateData

_HINT = "Construct the model with a connected API client to fetch or update data."


class OfflineChannelApi:
    """Channel endpoints that refuse every request."""

    async def get_channel(self, channel_id: str) -> NoReturn:
        raise ClientUnavailableError(
            f"Cannot fetch channel {channel_id}: no API client is connected.",
            hint=_HINT,
        )

    async def update_channel(self, channel: Channel, data: ChannelUpdateData) -> Any:
        raise ClientUnavailableError(
            f"Cannot update channel {channel.id}: no API client is connected.",
            hint=_HINT,
        )


class OfflineApiClient:
    """Concrete :class:`~twitch_kraken.core.protocols.ApiClient` with no transport."""

    def __init__(self) -> None:
        self._channels = OfflineChannelApi()

    @property
    def channels(self) -> OfflineChannelApi:
        return self._channels
