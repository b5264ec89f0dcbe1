"""Tests for the named-remote registry (core/remotes.py)."""

from __future__ import annotations

import pytest

from gerlib.core.remotes import (
    DEFAULT_PORT,
    Remote,
    RemoteRegistry,
    validate_port,
    validate_url,
)
from gerlib.exceptions import (
    ConfigError,
    InvalidURLError,
    NoSuchRemoteError,
    RemoteExistsError,
)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidateUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://review.example.org",
            "http://localhost:8080",
            "https://example.org/gerrit/",
        ],
    )
    def test_valid(self, url: str) -> None:
        assert validate_url(url) == url

    @pytest.mark.parametrize(
        "url",
        ["", "   ", "review.example.org", "ssh://review.example.org", "https://", "http://host:port"],
    )
    def test_invalid(self, url: str) -> None:
        with pytest.raises(InvalidURLError):
            validate_url(url)

    def test_invalid_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            validate_url("nope")


class TestValidatePort:
    def test_none(self) -> None:
        assert validate_port(None) is None

    @pytest.mark.parametrize(("value", "expected"), [(1, 1), ("29418", 29418), (65535, 65535)])
    def test_valid(self, value: int | str, expected: int) -> None:
        assert validate_port(value) == expected

    @pytest.mark.parametrize("value", [0, 65536, -1, "http", True])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(InvalidURLError):
            validate_port(value)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Remote
# ---------------------------------------------------------------------------

class TestRemote:
    def test_display_port_default(self) -> None:
        assert Remote(url="https://review.example.org").display_port == DEFAULT_PORT == 8080

    def test_display_port_explicit(self) -> None:
        assert Remote(url="https://review.example.org", port=29418).display_port == 29418

    def test_port_string_is_normalized(self) -> None:
        assert Remote(url="https://review.example.org", port="443").port == 443  # type: ignore[arg-type]

    def test_invalid_url_rejected(self) -> None:
        with pytest.raises(InvalidURLError):
            Remote(url="review.example.org")

    def test_to_dict_only_set_fields(self) -> None:
        assert Remote(url="https://a.example").to_dict() == {"url": "https://a.example"}
        full = Remote(url="https://a.example", port=1, username="u", http_password="p")
        assert full.to_dict() == {
            "url": "https://a.example",
            "port": 1,
            "username": "u",
            "http_password": "p",
        }

    def test_from_dict(self) -> None:
        remote = Remote.from_dict({"url": "https://a.example", "username": "u"})
        assert remote == Remote(url="https://a.example", username="u")

    def test_from_dict_without_url(self) -> None:
        with pytest.raises(InvalidURLError):
            Remote.from_dict({"port": 80})


# ---------------------------------------------------------------------------
# RemoteRegistry
# ---------------------------------------------------------------------------

def _registry() -> RemoteRegistry:
    registry = RemoteRegistry()
    registry.add("origin", Remote(url="https://review.example.org", port=29418, username="jdoe"))
    registry.add("backup", Remote(url="http://backup.example.org"))
    return registry


class TestRemoteRegistry:
    def test_empty(self) -> None:
        registry = RemoteRegistry()
        assert len(registry) == 0
        assert not registry
        assert list(registry) == []

    def test_iteration_is_sorted_by_name(self) -> None:
        assert [name for name, _ in _registry()] == ["backup", "origin"]
        assert _registry().names() == ["backup", "origin"]

    def test_contains_and_get(self) -> None:
        registry = _registry()
        assert "origin" in registry
        assert "nowhere" not in registry
        assert registry.get("origin").username == "jdoe"

    def test_get_unknown(self) -> None:
        with pytest.raises(NoSuchRemoteError) as exc_info:
            _registry().get("nowhere")
        assert exc_info.value.name == "nowhere"

    def test_add_duplicate_keeps_original(self) -> None:
        registry = _registry()
        with pytest.raises(RemoteExistsError):
            registry.add("origin", Remote(url="https://other.example.org"))
        assert registry.get("origin").url == "https://review.example.org"

    def test_remove(self) -> None:
        registry = _registry()
        removed = registry.remove("backup")
        assert removed.url == "http://backup.example.org"
        assert registry.names() == ["origin"]

    def test_remove_unknown(self) -> None:
        with pytest.raises(NoSuchRemoteError):
            _registry().remove("nowhere")

    def test_dict_round_trip(self) -> None:
        registry = _registry()
        data = registry.to_dict()
        assert data == {
            "remotes": {
                "backup": {"url": "http://backup.example.org"},
                "origin": {"url": "https://review.example.org", "port": 29418, "username": "jdoe"},
            },
        }
        assert RemoteRegistry.from_dict(data) == registry

    def test_from_dict_without_remotes(self) -> None:
        assert len(RemoteRegistry.from_dict({})) == 0

    def test_from_dict_rejects_non_mapping(self) -> None:
        with pytest.raises(ConfigError):
            RemoteRegistry.from_dict({"remotes": ["origin"]})

    def test_from_dict_rejects_non_mapping_entry(self) -> None:
        with pytest.raises(ConfigError):
            RemoteRegistry.from_dict({"remotes": {"origin": "https://review.example.org"}})
