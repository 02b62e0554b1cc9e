"""Rich table rendering of a wrapped API record.

This module is responsible for:

* Turning a model into ordered ``(field, text)`` rows.
* Rendering those rows as a Rich table on stdout.

All display-related logic lives here — no record loading, no parsing.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from twitch_kraken.core.channel import Channel
from twitch_kraken.core.record import ApiRecord
from twitch_kraken.core.subscription import Subscription
from twitch_kraken.core.video import Video, VideoMutedSegment
from twitch_kraken.exceptions import EnvironmentError

_SUBSCRIPTION_FIELDS: tuple[str, ...] = ("id", "sub_plan", "sub_plan_name", "start_date")

_VIDEO_FIELDS: tuple[str, ...] = (
    "id",
    "title",
    "channel_id",
    "channel_name",
    "channel_display_name",
    "broadcast_type",
    "status",
    "game_name",
    "language",
    "length",
    "views",
    "is_public",
    "creation_date",
    "publish_date",
    "viewability_date",
    "tags",
    "muted_segments",
    "url",
)

_CHANNEL_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "display_name",
    "status",
    "game",
    "language",
    "broadcaster_type",
    "followers",
    "views",
    "is_partner",
    "is_mature",
    "creation_date",
    "update_date",
    "url",
)

_THUMB_SIZES: tuple[str, ...] = ("large", "medium", "small", "template")


def _import_rich_table() -> tuple[type[Any], type[Any]]:
    """Import rich ``Table`` and ``Text`` lazily for record rendering."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table, Text


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_value(value: object) -> str:
    """Render one accessor value as a single table cell."""
    if value is None:
        return "—"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, VideoMutedSegment):
        return f"{value.offset}s +{value.duration}s"
    if isinstance(value, Mapping):
        return ", ".join(f"{k}={format_value(v)}" for k, v in value.items())
    if isinstance(value, Sequence) and not isinstance(value, str):
        return ", ".join(format_value(item) for item in value)
    return str(value)


def record_rows(record: ApiRecord) -> list[tuple[str, str]]:
    """Return the ordered ``(field, text)`` rows shown for *record*."""
    if isinstance(record, Subscription):
        names = _SUBSCRIPTION_FIELDS
    elif isinstance(record, Video):
        names = _VIDEO_FIELDS
    elif isinstance(record, Channel):
        names = _CHANNEL_FIELDS
    else:
        raise TypeError(f"No row layout for {type(record).__name__}")

    rows = [(name, format_value(getattr(record, name))) for name in names]

    if isinstance(record, Video):
        for resolution, label in record.resolutions.items():
            rows.append((f"fps[{resolution}]", f"{format_value(record.get_fps(resolution))} ({label})"))
        for size in _THUMB_SIZES:
            preview = record.get_preview(size)  # type: ignore[arg-type]
            if preview is not None:
                rows.append((f"preview[{size}]", preview))

    return rows


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def render_record(record: ApiRecord, console: Any) -> None:
    """Print a Rich table of *record*'s accessors on *console*."""
    table_class, text_class = _import_rich_table()

    table = table_class(
        title=type(record).__name__,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Field", justify="left", style="cyan", no_wrap=True)
    table.add_column("Value", justify="left", overflow="fold")

    # Text cells: values such as "fps[chunked]" must not be read as markup.
    for name, text in record_rows(record):
        table.add_row(text_class(name), text_class(text))

    console.print(table)
