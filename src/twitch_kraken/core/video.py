"""Twitch video (VOD, highlight or upload)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Literal

from twitch_kraken.core.record import ApiRecord
from twitch_kraken.utils.dates import parse_date

VideoThumbSize = Literal["large", "medium", "small", "template"]
"""Size categories used by the ``preview`` and ``thumbnails`` maps."""

VideoViewability = Literal["public", "private"]


# ---------------------------------------------------------------------------
# Nested value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoMutedSegment:
    """A stretch of the video whose audio was muted."""

    duration: int
    """Length of the muted stretch, in seconds."""

    offset: int
    """Start of the muted stretch, in seconds from the beginning."""


@dataclass(frozen=True, slots=True)
class VideoThumbnail:
    """A single thumbnail image of a video."""

    type: str
    url: str


# ---------------------------------------------------------------------------
# Video
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Video(ApiRecord):
    """A Twitch video.

    Lookups by key (:meth:`get_fps`, :meth:`get_preview`,
    :meth:`get_thumbnails`) return ``None`` for unknown keys instead of
    raising.  Keys are used exactly as given.
    """

    @property
    def id(self) -> str:
        """The ID of the video."""
        return self._get("_id")

    @property
    def broadcast_id(self) -> str:
        """The ID of the broadcast the video was recorded from."""
        return self._get("broadcast_id")

    @property
    def broadcast_type(self) -> str:
        """The type of the video (``archive``, ``highlight`` or ``upload``)."""
        return self._get("broadcast_type")

    # -- channel sub-record ------------------------------------------------

    @property
    def _channel(self) -> Mapping[str, Any]:
        return self._get("channel") or {}

    @property
    def channel_id(self) -> str:
        """The ID of the channel the video was uploaded to."""
        return self._channel.get("_id")

    @property
    def channel_name(self) -> str:
        """The name of the channel the video was uploaded to."""
        return self._channel.get("name")

    @property
    def channel_display_name(self) -> str:
        """The display name of the channel the video was uploaded to."""
        return self._channel.get("display_name")

    # -- dates ---------------------------------------------------------------

    @property
    def creation_date(self) -> datetime | None:
        """The date when the video was created."""
        return parse_date(self._get("created_at"))

    @property
    def publish_date(self) -> datetime | None:
        """The date when the video was published."""
        return parse_date(self._get("published_at"))

    @property
    def viewability_date(self) -> datetime | None:
        """When the video will be viewable publicly, if scheduled."""
        viewable_at = self._get("viewable_at")
        return parse_date(viewable_at) if viewable_at else None

    # -- plain fields --------------------------------------------------------

    @property
    def description(self) -> str:
        return self._get("description")

    @property
    def html_description(self) -> str:
        """The description of the video in HTML."""
        return self._get("description_html")

    @property
    def game_name(self) -> str:
        """The name of the game shown in the video."""
        return self._get("game")

    @property
    def language(self) -> str:
        return self._get("language")

    @property
    def length(self) -> int:
        """The length of the video, in seconds."""
        return self._get("length")

    @property
    def status(self) -> str:
        """The processing status of the video (e.g. ``recorded``)."""
        return self._get("status")

    @property
    def title(self) -> str:
        return self._get("title")

    @property
    def url(self) -> str:
        return self._get("url")

    @property
    def views(self) -> int:
        """The number of views of the video."""
        return self._get("views")

    @property
    def viewable(self) -> VideoViewability:
        """The raw viewability marker, ``"public"`` or ``"private"``."""
        return self._get("viewable")

    @property
    def is_public(self) -> bool:
        """Whether the video is public."""
        return self._get("viewable") == "public"

    @property
    def tags(self) -> list[str]:
        """The tags of the video.

        The raw ``tag_list`` is split on commas as-is: an empty string
        yields ``[""]``.
        """
        return (self._get("tag_list") or "").split(",")

    @property
    def muted_segments(self) -> tuple[VideoMutedSegment, ...]:
        """The muted segments of the video."""
        return tuple(
            VideoMutedSegment(duration=seg.get("duration"), offset=seg.get("offset"))
            for seg in self._get("muted_segments") or ()
        )

    # -- keyed lookups -------------------------------------------------------

    @property
    def resolutions(self) -> Mapping[str, str]:
        """The resolutions the video is available in, keyed by quality name."""
        return MappingProxyType(self._get("resolutions") or {})

    def get_fps(self, resolution: str) -> float | None:
        """Return the frames per second for *resolution*.

        *resolution* is a key of :attr:`resolutions` (e.g. ``"chunked"``
        or ``"720p30"``).  ``None`` when the key is unknown.
        """
        return (self._get("fps") or {}).get(resolution)

    def get_preview(self, size: VideoThumbSize) -> str | None:
        """Return the preview image URL for *size*."""
        return (self._get("preview") or {}).get(size)

    def get_thumbnails(self, size: VideoThumbSize) -> tuple[VideoThumbnail, ...] | None:
        """Return the thumbnails for *size*, or ``None`` when absent."""
        raw = (self._get("thumbnails") or {}).get(size)
        if raw is None:
            return None
        return tuple(
            VideoThumbnail(type=thumb.get("type"), url=thumb.get("url"))
            for thumb in raw
        )
