"""Process exit codes returned by ``twitch-kraken``.

Scripts piping records into the tool can tell a bad record (``1``)
apart from a crash (``2``) without parsing stderr.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The record was loaded and its table printed."""

GENERAL_ERROR: int = 1
"""A TwitchKrakenError was reported (unreadable record, missing Rich, ...)."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C, e.g. while waiting on stdin (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the package's own hierarchy reached ``cli()``."""
