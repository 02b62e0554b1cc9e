"""Lenient ISO-8601 parsing for upstream timestamp fields.

The API sends UTC timestamps such as ``2018-03-01T12:34:56Z``.  A value
that cannot be parsed maps to ``None`` (the "invalid date" sentinel)
rather than raising, so accessors stay pure projections.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

_FRACTION_RE = re.compile(r"\.(\d+)")


def _pad_fraction(match: re.Match[str]) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_date(value: object) -> datetime | None:
    """Parse *value* into an aware :class:`~datetime.datetime`.

    Values without an offset (including date-only strings) are taken to
    be UTC.  Returns ``None`` for anything that is not a valid ISO-8601
    string.
    """
    if not isinstance(value, str):
        logger.debug("Cannot parse non-string date value %r", value)
        return None

    text = value.strip()
    # fromisoformat() only accepts a "Z" suffix and 1-6 digit fractions from 3.11 on.
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(_pad_fraction, text, count=1)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Invalid date string %r", value)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
