"""Custom exception hierarchy for twitch-kraken-models.

Model accessors never raise for bad upstream data — they degrade to
``None`` sentinels instead.  The exceptions here cover the few places
where this package itself refuses to continue.  Errors raised by a real
API client while handling a forwarded call are **not** wrapped; they
reach the caller unchanged.

Hierarchy
---------
TwitchKrakenError
├── ClientUnavailableError
├── RecordDecodeError
└── EnvironmentError
"""

from __future__ import annotations


class TwitchKrakenError(Exception):
    """Base exception for all twitch-kraken-models errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Client handle ---------------------------------------------------------

class ClientUnavailableError(TwitchKrakenError):
    """Raised when a network operation is requested on an offline client."""


# --- Record loading --------------------------------------------------------

class RecordDecodeError(TwitchKrakenError):
    """Raised when a raw API record cannot be read or is not a JSON object."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TwitchKrakenError):
    """Raised when an optional runtime dependency is not available."""
