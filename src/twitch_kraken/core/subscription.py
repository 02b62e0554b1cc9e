"""Subscription to a Twitch channel."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from twitch_kraken.core.record import ApiRecord
from twitch_kraken.utils.dates import parse_date


@dataclass(frozen=True, eq=False)
class Subscription(ApiRecord):
    """A subscription to a Twitch channel.

    Raw keys: ``_id``, ``sub_plan``, ``sub_plan_name``, ``created_at``.
    """

    @property
    def id(self) -> str:
        """The ID of the subscription."""
        return self._get("_id")

    @property
    def sub_plan(self) -> str:
        """The identifier of the subscription plan (e.g. ``"1000"``)."""
        return self._get("sub_plan")

    @property
    def sub_plan_name(self) -> str:
        """The name of the subscription plan."""
        return self._get("sub_plan_name")

    @property
    def start_date(self) -> datetime | None:
        """The date when the subscription was started.

        ``None`` when ``created_at`` is not a valid ISO-8601 string.
        """
        return parse_date(self._get("created_at"))
