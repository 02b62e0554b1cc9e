"""Twitch channels, as an unresolved reference or a full record.

A channel is known in one of two states:

* :class:`ChannelPlaceholder` — only the ID is known.  Resolving it asks
  the client for the full record.
* :class:`Channel` — the full record is already present.  Resolving it
  returns the same instance, so code that treats a hydrated channel as a
  placeholder does not trigger a second fetch.

Both satisfy :class:`ChannelReference`; use :data:`ChannelLike` where
either is accepted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol, Union

from twitch_kraken.core.protocols import ApiClient, ChannelUpdateData
from twitch_kraken.core.record import ApiRecord
from twitch_kraken.utils.dates import parse_date

logger = logging.getLogger(__name__)


class ChannelReference(Protocol):
    """Anything that identifies a channel and can resolve to its full record."""

    @property
    def id(self) -> str: ...  # pragma: no cover

    async def get_channel(self) -> Channel: ...  # pragma: no cover

    async def resolve(self) -> Channel: ...  # pragma: no cover


# ---------------------------------------------------------------------------
# Unresolved
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ChannelPlaceholder:
    """A channel known only by its ID."""

    _id: str
    _client: ApiClient = field(repr=False, compare=False)

    @property
    def id(self) -> str:
        """The ID of the channel."""
        return self._id

    async def get_channel(self) -> Channel:
        """Fetch the full channel record through the client."""
        logger.debug("Resolving channel placeholder %s", self._id)
        return await self._client.channels.get_channel(self._id)

    resolve = get_channel


# ---------------------------------------------------------------------------
# Resolved
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Channel(ApiRecord):
    """A Twitch channel with its full profile record."""

    async def get_channel(self) -> Channel:
        """Return this channel; the record is already present."""
        return self

    resolve = get_channel

    async def update(self, data: ChannelUpdateData) -> Any:
        """Ask the client to apply the partial update *data* to this channel.

        The instance itself is not modified; fetch the channel again to
        observe the new values.  Whatever the client returns (or raises)
        reaches the caller unchanged.
        """
        logger.debug("Forwarding update for channel %s: %s", self.id, sorted(data))
        return await self._client.channels.update_channel(self, data)

    def to_placeholder(self) -> ChannelPlaceholder:
        """Return an ID-only reference to this channel sharing the same client."""
        return ChannelPlaceholder(self.id, self._client)

    @property
    def id(self) -> str:
        return self._get("_id")

    @property
    def name(self) -> str:
        """The login name of the channel."""
        return self._get("name")

    @property
    def display_name(self) -> str:
        """The display name of the channel, with its chosen capitalization."""
        return self._get("display_name")

    @property
    def broadcaster_language(self) -> str:
        return self._get("broadcaster_language")

    @property
    def broadcaster_type(self) -> str:
        """``"partner"``, ``"affiliate"`` or an empty string."""
        return self._get("broadcaster_type")

    @property
    def creation_date(self) -> datetime | None:
        return parse_date(self._get("created_at"))

    @property
    def update_date(self) -> datetime | None:
        """The date when the channel was last updated."""
        return parse_date(self._get("updated_at"))

    @property
    def description(self) -> str:
        return self._get("description")

    @property
    def followers(self) -> int:
        """The number of followers of the channel."""
        return self._get("followers")

    @property
    def game(self) -> str:
        """The game currently set on the channel."""
        return self._get("game")

    @property
    def language(self) -> str:
        return self._get("language")

    @property
    def logo(self) -> str:
        """The URL of the channel's logo."""
        return self._get("logo")

    @property
    def is_mature(self) -> bool:
        """Whether the channel is flagged as suitable for mature audiences only."""
        return self._get("mature")

    @property
    def is_partner(self) -> bool:
        return self._get("partner")

    @property
    def profile_banner(self) -> str | None:
        return self._get("profile_banner")

    @property
    def profile_banner_background_color(self) -> str | None:
        return self._get("profile_banner_background_color")

    @property
    def status(self) -> str:
        """The current status (title) of the channel."""
        return self._get("status")

    @property
    def url(self) -> str:
        return self._get("url")

    @property
    def video_banner(self) -> str:
        """The URL of the image shown while the channel is offline."""
        return self._get("video_banner")

    @property
    def views(self) -> int:
        """The total number of views of the channel."""
        return self._get("views")


ChannelLike = Union[ChannelPlaceholder, Channel]
