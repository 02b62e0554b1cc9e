"""Loading raw API records from disk and wrapping them in models.

Records are wrapped with an :class:`~twitch_kraken.core.offline.OfflineApiClient`:
accessors work normally, but nothing can reach the network.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

from twitch_kraken.core.channel import Channel
from twitch_kraken.core.offline import OfflineApiClient
from twitch_kraken.core.record import ApiRecord
from twitch_kraken.core.subscription import Subscription
from twitch_kraken.core.video import Video
from twitch_kraken.exceptions import RecordDecodeError

logger = logging.getLogger(__name__)

MODEL_BY_KIND: dict[str, type[ApiRecord]] = {
    "channel": Channel,
    "subscription": Subscription,
    "video": Video,
}
"""CLI record kind → model class."""


def read_record(source: str) -> dict[str, Any]:
    """Read one JSON object from *source* (a file path, or ``-`` for stdin).

    Raises
    ------
    RecordDecodeError
        If the source cannot be read, is not valid JSON, or does not
        contain a JSON object.
    """
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordDecodeError(
            f"Cannot read record from {source}: {exc.strerror or exc}",
        ) from exc

    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordDecodeError(
            f"Invalid JSON in {source}: {exc.msg} (line {exc.lineno}, column {exc.colno})",
        ) from exc

    if not isinstance(payload, dict):
        raise RecordDecodeError(
            f"Expected a JSON object in {source}, got {type(payload).__name__}.",
            hint="Pass a single API record, not a list or wrapper response.",
        )

    logger.debug("Loaded record with %d keys from %s", len(payload), source)
    return payload


def wrap_record(kind: str, data: dict[str, Any]) -> ApiRecord:
    """Wrap *data* in the model registered for *kind*."""
    model_class = MODEL_BY_KIND[kind]
    return model_class(data, OfflineApiClient())
