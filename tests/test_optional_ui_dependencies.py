"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands are resilient when optional UI
packages are missing, listings fall back to plain text, and the password
prompt fails cleanly only when it is actually exercised.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from gerlib.cli import exit_codes
from gerlib.cli.app import main
from gerlib.cli.console import configure_logging
from gerlib.core.remotes import Remote, RemoteRegistry
from gerlib.exceptions import EnvironmentError
from gerlib.infra.remote_store import RemoteStore


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def _seed(config_path: Path) -> None:
    registry = RemoteRegistry()
    registry.add("origin", Remote(url="https://review.example.org", port=29418))
    RemoteStore(config_path).save(registry)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_listing_falls_back_to_plain_text(
    monkeypatch: pytest.MonkeyPatch,
    config_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _seed(config_path)
    _hide_rich(monkeypatch)

    code = main(["--config", str(config_path), "remote", "-v"])

    assert code == exit_codes.SUCCESS
    assert capsys.readouterr().out.splitlines() == [
        "origin - https://review.example.org [29418]",
    ]


def test_show_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    config_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _seed(config_path)
    _hide_rich(monkeypatch)

    main(["--config", str(config_path), "remote", "show", "origin"])
    assert "* remote: origin" in capsys.readouterr().out


def test_add_with_password_works_without_questionary(
    monkeypatch: pytest.MonkeyPatch, config_path: Path,
) -> None:
    _hide_questionary(monkeypatch)

    code = main(
        ["--config", str(config_path), "remote", "add", "origin", "https://review.example.org", "-p", "pw"],
    )
    assert code == exit_codes.SUCCESS


def test_password_prompt_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch, config_path: Path,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main(["--config", str(config_path), "remote", "add", "origin", "https://review.example.org", "-p"])
    assert not config_path.exists()


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    configure_logging(3)

    root = logging.getLogger("gerlib")
    handlers = [h for h in root.handlers if not isinstance(h, logging.NullHandler)]
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler
    assert root.level == logging.DEBUG
