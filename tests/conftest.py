"""Shared pytest fixtures and configuration for the gerlib test suite.

Guidelines
----------
* No network access in any test.  HTTP is faked at the transport
  boundary (``MagicMock``) or inside httpx (``pytest-httpx``).
* Tests never read or write the user's real configuration directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture()
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated registry file; the environment points at it as well."""
    monkeypatch.setenv("GER_CONFIG_DIR", str(tmp_path))
    return tmp_path / "settings.yaml"


@pytest.fixture(autouse=True)
def _restore_gerlib_logging() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` during a CLI run."""
    logger = logging.getLogger("gerlib")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
