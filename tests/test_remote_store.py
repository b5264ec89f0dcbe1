"""Tests for YAML persistence of the remote registry (infra/remote_store.py).

Every test works inside ``tmp_path``; the user's configuration
directory is never touched.
"""

from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest
import yaml

from gerlib.core.remotes import Remote, RemoteRegistry
from gerlib.exceptions import ConfigError, InvalidURLError
from gerlib.infra.remote_store import CONFIG_FILENAME, RemoteStore, default_config_path


def _registry() -> RemoteRegistry:
    registry = RemoteRegistry()
    registry.add(
        "origin",
        Remote(url="https://review.example.org", port=29418, username="jdoe", http_password="s3cret"),
    )
    return registry


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

class TestDefaultConfigPath:
    def test_explicit_directory(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("GER_CONFIG_DIR", str(tmp_path))
        assert default_config_path() == tmp_path / CONFIG_FILENAME

    def test_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv("GER_CONFIG_DIR", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_config_path() == tmp_path / "ger" / "settings.yaml"

    def test_home_fallback(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv("GER_CONFIG_DIR", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert default_config_path() == tmp_path / ".config" / "ger" / "settings.yaml"

    def test_store_uses_default(self, config_path: Path) -> None:
        assert RemoteStore().path == config_path

    def test_explicit_path_wins(self, config_path: Path, tmp_path: Path) -> None:
        other = tmp_path / "other.yaml"
        assert RemoteStore(other).path == other


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------

class TestRemoteStore:
    def test_missing_file_is_empty(self, config_path: Path) -> None:
        assert len(RemoteStore(config_path).load()) == 0
        assert not config_path.exists()

    def test_empty_file_is_empty(self, config_path: Path) -> None:
        config_path.write_text("", encoding="utf-8")
        assert len(RemoteStore(config_path).load()) == 0

    def test_round_trip(self, config_path: Path) -> None:
        store = RemoteStore(config_path)
        store.save(_registry())
        assert store.load() == _registry()

    def test_saved_format(self, config_path: Path) -> None:
        RemoteStore(config_path).save(_registry())
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        assert data == {
            "remotes": {
                "origin": {
                    "url": "https://review.example.org",
                    "port": 29418,
                    "username": "jdoe",
                    "http_password": "s3cret",
                },
            },
        }

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_owner_only(self, config_path: Path) -> None:
        RemoteStore(config_path).save(_registry())
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_existing_permissions_tightened(self, config_path: Path) -> None:
        config_path.write_text("remotes: {}\n", encoding="utf-8")
        config_path.chmod(0o644)
        RemoteStore(config_path).save(_registry())
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "settings.yaml"
        RemoteStore(path).save(_registry())
        assert path.exists()

    def test_save_overwrites(self, config_path: Path) -> None:
        store = RemoteStore(config_path)
        store.save(_registry())
        store.save(RemoteRegistry())
        assert len(store.load()) == 0

    def test_malformed_yaml(self, config_path: Path) -> None:
        config_path.write_text("remotes: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Malformed") as exc_info:
            RemoteStore(config_path).load()
        assert exc_info.value.hint is not None

    def test_top_level_must_be_mapping(self, config_path: Path) -> None:
        config_path.write_text("- origin\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            RemoteStore(config_path).load()

    def test_invalid_stored_url(self, config_path: Path) -> None:
        config_path.write_text("remotes:\n  origin:\n    url: not-a-url\n", encoding="utf-8")
        with pytest.raises(InvalidURLError):
            RemoteStore(config_path).load()

    def test_unreadable_path(self, tmp_path: Path) -> None:
        directory = tmp_path / "settings.yaml"
        directory.mkdir()
        with pytest.raises(ConfigError, match="Cannot read"):
            RemoteStore(directory).load()

    def test_unwritable_path(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError, match="Cannot write"):
            RemoteStore(blocker / "settings.yaml").save(_registry())
