"""Entry point of the ``ger`` command.

:func:`main` parses arguments and dispatches to a command handler;
:func:`cli` wraps it and is the **only** place where exceptions become
process exit codes.  Handlers raise
:class:`~gerlib.exceptions.GerlibError` subclasses and never call
``sys.exit`` themselves.
"""

from __future__ import annotations

import argparse
import logging
import sys

from gerlib.cli import exit_codes
from gerlib.cli.console import configure_logging, console
from gerlib.exceptions import ConfigError, GerlibError
from gerlib.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _verbosity_parent() -> argparse.ArgumentParser:
    """``-v`` accepted after any sub-command too (``ger remote -v``)."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=argparse.SUPPRESS,
        help="Increase verbosity; repeat for more detail.",
    )
    return parent


def _build_parser() -> argparse.ArgumentParser:
    """``ger [-V] [-v...] [--config PATH] remote ...``"""
    from gerlib.cli import remote

    parser = argparse.ArgumentParser(
        prog="ger",
        description="Gerrit command-line client.",
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
        action="count",
        default=0,
        help="Increase verbosity; repeat for more detail.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="Remote registry file (default: ~/.config/ger/settings.yaml).",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    remote.add_parser(subparsers, parents=[_verbosity_parent()])
    return parser


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Parse *argv* (``sys.argv[1:]`` when ``None``) and run the command.

    Without a command the help text is printed.  Domain errors propagate
    to the caller; use :func:`cli` for exit-code translation.

    Returns
    -------
    int
        One of :mod:`gerlib.cli.exit_codes`.
    """
    from gerlib.infra.remote_store import RemoteStore

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    store = RemoteStore(args.config)
    logger.debug("Using remote registry %s", store.path)
    return args.handler(args, store)


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: run :func:`main` and exit with its code.

    Domain errors print ``fatal: ...`` plus the hint, Ctrl+C exits 130,
    anything else is reported as a bug with exit code 2.
    """
    try:
        code = main()
        sys.exit(code)
    except GerlibError as exc:
        console.print(f"[bold red]fatal:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        if isinstance(exc, ConfigError):
            sys.exit(exit_codes.CONFIG_ERROR)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"[bold red]internal error:[/bold red] {type(exc).__name__}: {exc}\n"
            "This is a bug in ger; please report it."
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
