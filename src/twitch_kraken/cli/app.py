"""CLI application entry point and command routing for twitch-kraken.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~twitch_kraken.exceptions.TwitchKrakenError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Usage::

    twitch-kraken video vod.json
    curl ... | twitch-kraken channel -
"""

from __future__ import annotations

import argparse
import logging
import sys

from twitch_kraken.cli import exit_codes
from twitch_kraken.cli.console import console
from twitch_kraken.cli.records import MODEL_BY_KIND
from twitch_kraken.exceptions import TwitchKrakenError
from twitch_kraken.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``twitch-kraken <kind> <path>`` — show a raw record through its model
    * ``twitch-kraken --version``
    """
    parser = argparse.ArgumentParser(
        prog="twitch-kraken",
        description="Inspect Twitch Kraken API records through their typed models.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    parser.add_argument(
        "kind",
        nargs="?",
        default=None,
        choices=sorted(MODEL_BY_KIND),
        help="Record type to wrap the JSON object in.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="JSON file holding one API record, or '-' for stdin (default).",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_show(kind: str, path: str) -> int:
    """Load the record at *path*, wrap it as *kind*, and print a table."""
    from twitch_kraken.cli.console import get_rich_console
    from twitch_kraken.cli.records import read_record, wrap_record
    from twitch_kraken.cli.render import render_record

    data = read_record(path)
    record = wrap_record(kind, data)
    render_record(record, get_rich_console(stderr=False))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the twitch-kraken CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.kind is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.verbose)
    return _handle_show(args.kind, args.path)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except TwitchKrakenError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
