"""Rich consoles for the ``twitch-kraken`` command.

Record tables go to stdout so they can be redirected; errors and hints
go to stderr through :data:`console`.  Rich is imported only when a
console is actually built, which keeps ``--help`` and ``--version``
usable without it.
"""

from __future__ import annotations

import sys
from typing import Any

from twitch_kraken.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Build a Rich console; ``stderr=False`` targets stdout for record tables."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ErrorConsole:
	"""Writes error-boundary messages to stderr, with or without Rich.

	The error boundary must be able to report a missing Rich install, so
	when Rich cannot be loaded the markup is printed as plain text.
	"""

	def print(self, *objects: object) -> None:
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ErrorConsole()
"""Stderr console used by :func:`twitch_kraken.cli.app.cli`."""
