"""Output and logging setup for the ``ger`` command.

Rich is imported on first use only, so ``ger --help`` and
``ger --version`` keep working on installs without it.

:data:`console` carries diagnostics to stderr and :data:`out` carries
command results to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from gerlib.exceptions import EnvironmentError

_LOG_FORMAT = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print.

		*options* are Rich ``Console.print`` keywords and are ignored by
		the fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, **options)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)


def configure_logging(verbosity: int = 0) -> None:
	"""Route ``gerlib`` log records to stderr.

	WARNING by default, INFO at ``-vv``, DEBUG at ``-vvv``.  Records are
	rendered through Rich's ``RichHandler`` when Rich is installed.
	"""
	if verbosity >= 3:
		level = logging.DEBUG
	elif verbosity == 2:
		level = logging.INFO
	else:
		level = logging.WARNING

	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(f"%(levelname)s {_LOG_FORMAT}"))
	else:
		handler = RichHandler(
			console=get_rich_console(stderr=True),
			show_time=False,
			show_path=False,
		)
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))

	root = logging.getLogger("gerlib")
	for existing in list(root.handlers):
		if not isinstance(existing, logging.NullHandler):
			root.removeHandler(existing)
	root.addHandler(handler)
	root.setLevel(level)
