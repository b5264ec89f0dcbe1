"""``ger remote`` — manage named Gerrit servers.

Sub-commands:

* ``ger remote``                      — list remote names (``-v`` adds URL
  and port, ``-vv`` adds the login)
* ``ger remote show [NAME...]``       — details of the named remotes
* ``ger remote add NAME URL [PORT]``  — register a remote
* ``ger remote remove|rm NAME...``    — unregister remotes

All display-related logic lives here; registry semantics live in
:mod:`gerlib.core.remotes` and persistence in
:mod:`gerlib.infra.remote_store`.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from gerlib.cli import exit_codes
from gerlib.cli.console import out
from gerlib.core.remotes import Remote, RemoteRegistry, validate_port, validate_url
from gerlib.exceptions import (
    EnvironmentError,
    InvalidURLError,
    RemoteConfigError,
    RemoteExistsError,
)
from gerlib.infra.remote_store import RemoteStore

PROMPT_PASSWORD = object()
"""Sentinel stored by ``-p`` when given without a value."""

_PLAIN: dict[str, Any] = {"markup": False, "highlight": False, "soft_wrap": True}


def _import_questionary() -> Any:
    """Import questionary lazily for the password prompt."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> tuple[type[Any], type[Any]]:
    """Import rich table and text lazily for the remote listing."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table, Text


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _url_arg(value: str) -> str:
    try:
        return validate_url(value)
    except InvalidURLError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _port_arg(value: str) -> int | None:
    try:
        return validate_port(value)
    except InvalidURLError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def add_parser(
    subparsers: Any,
    parents: Sequence[argparse.ArgumentParser] = (),
) -> argparse.ArgumentParser:
    """Register the ``remote`` command and its sub-commands."""
    remote = subparsers.add_parser(
        "remote",
        parents=list(parents),
        help="Manage gerrit remote servers.",
        description="Manage gerrit remote servers.",
    )
    remote.set_defaults(handler=handle_list)
    commands = remote.add_subparsers(dest="remote_command", metavar="COMMAND")

    show = commands.add_parser(
        "show", parents=list(parents), help="Show information about remote.",
    )
    show.add_argument("names", nargs="*", metavar="remote", help="Remote name.")
    show.set_defaults(handler=handle_show)

    add = commands.add_parser("add", parents=list(parents), help="Add a new remote.")
    add.add_argument("name", help="Remote unique identifier.")
    add.add_argument(
        "url",
        type=_url_arg,
        help="Remote URL including protocol. e.g. 'https://mygerrit.com'.",
    )
    add.add_argument(
        "port", nargs="?", type=_port_arg, default=None,
        help="Port to use on connection with server.",
    )
    add.add_argument("-u", "--username", metavar="ID", help="Username for login.")
    add.add_argument(
        "-p",
        "--password",
        nargs="?",
        const=PROMPT_PASSWORD,
        default=None,
        metavar="STRING",
        help=(
            "HTTP password. Can be generated in gerrit user settings menu. "
            "Pass only the flag without value to be prompted for (recommended). "
            "Note: this password is saved in plain text in the configuration file."
        ),
    )
    add.set_defaults(handler=handle_add)

    remove = commands.add_parser(
        "remove", aliases=["rm"], parents=list(parents), help="Remove a remote from config.",
    )
    remove.add_argument("names", nargs="+", metavar="remote", help="Remote name.")
    remove.set_defaults(handler=handle_remove)

    return remote


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def table_rows(registry: RemoteRegistry, verbosity: int) -> list[list[str]]:
    """Rows of the remote listing for the given verbosity."""
    rows: list[list[str]] = []
    for name, remote in registry:
        row = [name]
        if verbosity >= 1:
            row += ["-", remote.url, f"[{remote.display_port}]"]
        if verbosity >= 2:
            row.append(f"({remote.username})" if remote.username else "")
        rows.append(row)
    return rows


def _print_rows(rows: list[list[str]]) -> None:
    try:
        table_class, text_class = _import_rich_table()
    except EnvironmentError:
        widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
        for row in rows:
            line = " ".join(cell.ljust(width) for cell, width in zip(row, widths))
            out.print(line.rstrip())
        return

    table = table_class(show_header=False, box=None, pad_edge=False)
    for _ in rows[0]:
        table.add_column(no_wrap=True)
    for row in rows:
        table.add_row(*(text_class(cell) for cell in row))
    out.print(table)


def describe_remote(name: str, remote: Remote) -> str:
    """Multi-line description used by ``ger remote show NAME``."""
    lines = [f"* remote: {name}", f"  url: {remote.url}"]
    if remote.port is not None:
        lines.append(f"  port: {remote.port}")
    if remote.username is not None:
        lines.append(f"  login: {remote.username}")
    return "\n".join(lines) + "\n"


def _prompt_password() -> str:
    questionary = _import_questionary()
    password: str | None = questionary.password("HTTP password:").ask()
    if password is None:
        raise RemoteConfigError(
            "No password entered.",
            hint="Pass the password with -p STRING, or answer the prompt.",
        )
    return password


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def handle_list(args: argparse.Namespace, store: RemoteStore) -> int:
    registry = store.load()
    if registry:
        _print_rows(table_rows(registry, args.verbose))
    return exit_codes.SUCCESS


def handle_show(args: argparse.Namespace, store: RemoteStore) -> int:
    """Print details of each named remote, or the listing when none is named.

    Raises
    ------
    NoSuchRemoteError
        At the first unknown name; earlier remotes are already printed.
    """
    if not args.names:
        return handle_list(args, store)
    registry = store.load()
    for name in args.names:
        out.print(describe_remote(name, registry.get(name)), **_PLAIN)
    return exit_codes.SUCCESS


def handle_add(args: argparse.Namespace, store: RemoteStore) -> int:
    """Register a remote and save the registry.

    Raises
    ------
    RemoteExistsError
        If the name is already registered; nothing is prompted or saved.
    """
    registry = store.load()
    if args.name in registry:
        raise RemoteExistsError(args.name)

    password = args.password
    if password is PROMPT_PASSWORD:
        password = _prompt_password()

    registry.add(
        args.name,
        Remote(url=args.url, port=args.port, username=args.username, http_password=password),
    )
    store.save(registry)
    return exit_codes.SUCCESS


def handle_remove(args: argparse.Namespace, store: RemoteStore) -> int:
    registry = store.load()
    for name in args.names:
        if name in registry:
            registry.remove(name)
            out.print(f"removed: {name}", **_PLAIN)
        else:
            out.print(f"fatal: no such remote: {name}", **_PLAIN)
    store.save(registry)
    return exit_codes.SUCCESS
