"""Process exit codes returned by ``ger``.

Every exit path of :func:`gerlib.cli.app.cli` maps to one of these
values; tests assert against the names, never the raw integers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command completed."""

GENERAL_ERROR: int = 1
"""A server, transport or environment error was reported to the user."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the gerlib hierarchy escaped; likely a bug."""

CONFIG_ERROR: int = 3
"""The remote registry or a command argument was rejected."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
