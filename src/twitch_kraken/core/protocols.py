"""Protocols (interfaces) for the external API client.

The models never talk to the network themselves.  They hold a reference
to an object satisfying :class:`ApiClient` and forward fetch/mutation
calls to it.  Transport, authentication, rate limiting and caching all
live behind these protocols and are out of scope for this package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypedDict

if TYPE_CHECKING:
    from twitch_kraken.core.channel import Channel


class ChannelUpdateData(TypedDict, total=False):
    """Partial-update payload accepted by :meth:`ChannelApi.update_channel`."""

    status: str
    game: str
    delay: int
    channel_feed_enabled: bool


class ChannelApi(Protocol):
    """Contract for the channel endpoints of an API client."""

    async def get_channel(self, channel_id: str) -> Channel:
        """Fetch the full channel record for *channel_id*."""
        ...  # pragma: no cover

    async def update_channel(self, channel: Channel, data: ChannelUpdateData) -> Any:
        """Apply the partial update *data* to *channel*.

        The return value is the client's own completion signal; models
        pass it through untouched.
        """
        ...  # pragma: no cover


class ApiClient(Protocol):
    """Contract for the client handle shared by every model it creates.

    Any object with a ``channels`` attribute satisfying
    :class:`ChannelApi` qualifies structurally — no explicit inheritance
    required.
    """

    @property
    def channels(self) -> ChannelApi: ...  # pragma: no cover
