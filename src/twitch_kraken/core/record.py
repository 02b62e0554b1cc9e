"""Common shape of every API record view.

A record view holds two things: the raw record exactly as received from
the API, and a reference to the client handle that produced it.  Neither
is ever mutated by the view.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from twitch_kraken.core.protocols import ApiClient


@dataclass(frozen=True, eq=False)
class ApiRecord:
    """Frozen view over one raw API record plus its client handle.

    Subclasses add read-only properties only; they declare no fields of
    their own.  Identity (not field values) defines equality and hashing,
    since two views of the same record are still distinct snapshots.
    """

    _data: Mapping[str, Any]
    """Raw record with the upstream snake_case keys (read-only view)."""

    _client: ApiClient = field(repr=False)
    """Shared client handle, borrowed from whoever built this view."""

    def __post_init__(self) -> None:
        if not isinstance(self._data, MappingProxyType):
            object.__setattr__(self, "_data", MappingProxyType(self._data))

    def _get(self, key: str) -> Any:
        """Return the raw value for *key*, or ``None`` when absent."""
        return self._data.get(key)

    def to_raw(self) -> Mapping[str, Any]:
        """Return the read-only raw record backing this view."""
        return self._data
