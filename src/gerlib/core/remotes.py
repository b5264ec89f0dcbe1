"""Named remote-server registry.

Pure, in-memory bookkeeping for ``name → Remote`` entries.  Loading and
saving the registry is the job of
:mod:`gerlib.infra.remote_store`; this module performs no I/O.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from gerlib.exceptions import (
    ConfigError,
    InvalidURLError,
    NoSuchRemoteError,
    RemoteExistsError,
)

DEFAULT_PORT: int = 8080
"""Port shown for remotes that do not configure one."""

_SCHEMES: tuple[str, ...] = ("http", "https")


def validate_url(url: str) -> str:
    """Return *url* unchanged if it is an absolute http(s) URL.

    Raises
    ------
    InvalidURLError
        If *url* is empty, relative, or uses another scheme.
    """
    if not url or not url.strip():
        raise InvalidURLError("URL must not be empty.")
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError for a malformed port
    except ValueError as exc:
        raise InvalidURLError(f"Invalid URL '{url}': {exc}") from exc
    if parts.scheme.lower() not in _SCHEMES or not parts.hostname:
        raise InvalidURLError(
            f"Invalid URL '{url}'.",
            hint="Use an absolute URL such as https://review.example.org",
        )
    return url


def validate_port(port: int | str | None) -> int | None:
    """Return *port* as an ``int`` in 1..65535, or ``None``.

    Raises
    ------
    InvalidURLError
        If *port* is not a number in the valid range.
    """
    if port is None:
        return None
    try:
        value = int(port)
    except (TypeError, ValueError) as exc:
        raise InvalidURLError(f"Invalid port '{port}'.") from exc
    if isinstance(port, bool) or not 0 < value < 65536:
        raise InvalidURLError(f"Invalid port '{port}'.", hint="Ports range from 1 to 65535.")
    return value


@dataclass(frozen=True, slots=True)
class Remote:
    """Connection settings for one Gerrit server."""

    url: str
    port: int | None = None
    username: str | None = None
    http_password: str | None = None

    def __post_init__(self) -> None:
        validate_url(self.url)
        object.__setattr__(self, "port", validate_port(self.port))

    @property
    def display_port(self) -> int:
        return self.port if self.port is not None else DEFAULT_PORT

    def to_dict(self) -> dict[str, Any]:
        """Mapping of the set fields, as persisted."""
        data: dict[str, Any] = {"url": self.url}
        if self.port is not None:
            data["port"] = self.port
        if self.username is not None:
            data["username"] = self.username
        if self.http_password is not None:
            data["http_password"] = self.http_password
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Remote:
        return cls(
            url=str(data.get("url", "")),
            port=data.get("port"),
            username=data.get("username"),
            http_password=data.get("http_password"),
        )


@dataclass
class RemoteRegistry:
    """Ordered collection of named remotes."""

    remotes: dict[str, Remote] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.remotes)

    def __contains__(self, name: object) -> bool:
        return name in self.remotes

    def __iter__(self) -> Iterator[tuple[str, Remote]]:
        return iter(sorted(self.remotes.items()))

    def names(self) -> list[str]:
        return sorted(self.remotes)

    def get(self, name: str) -> Remote:
        """Return the remote registered as *name*.

        Raises
        ------
        NoSuchRemoteError
            If *name* is not registered.
        """
        try:
            return self.remotes[name]
        except KeyError:
            raise NoSuchRemoteError(name) from None

    def add(self, name: str, remote: Remote) -> None:
        """Register *remote* as *name*.

        Raises
        ------
        RemoteExistsError
            If *name* is already registered.
        """
        if name in self.remotes:
            raise RemoteExistsError(name)
        self.remotes[name] = remote

    def remove(self, name: str) -> Remote:
        """Unregister *name* and return its settings.

        Raises
        ------
        NoSuchRemoteError
            If *name* is not registered.
        """
        try:
            return self.remotes.pop(name)
        except KeyError:
            raise NoSuchRemoteError(name) from None

    def to_dict(self) -> dict[str, Any]:
        return {"remotes": {name: remote.to_dict() for name, remote in self}}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RemoteRegistry:
        raw = data.get("remotes") or {}
        if not isinstance(raw, Mapping):
            raise ConfigError("'remotes' must be a mapping of names to settings.")
        registry = cls()
        for name, entry in raw.items():
            if not isinstance(entry, Mapping):
                raise ConfigError(f"Remote '{name}' must be a mapping of settings.")
            registry.add(str(name), Remote.from_dict(entry))
        return registry
