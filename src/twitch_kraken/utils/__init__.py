"""Shared utilities — typing helpers and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from twitch_kraken.utils.dates import parse_date

__all__: list[str] = ["parse_date"]
