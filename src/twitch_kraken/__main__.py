"""Allow ``python -m twitch_kraken`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m twitch_kraken`` behaves identically to the ``twitch-kraken``
console script.
"""

from __future__ import annotations

from twitch_kraken.cli.app import cli

if __name__ == "__main__":
    cli()
