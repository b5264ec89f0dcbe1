"""YAML persistence for the named-remote registry.

Location, first match wins:

1. an explicit path passed by the caller (``ger --config PATH``)
2. ``$GER_CONFIG_DIR/settings.yaml``
3. ``$XDG_CONFIG_HOME/ger/settings.yaml``
4. ``~/.config/ger/settings.yaml``

The file stores HTTP passwords in plain text and is therefore written
with owner-only permissions.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from gerlib.core.remotes import RemoteRegistry
from gerlib.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME: str = "settings.yaml"
CONFIG_DIR_ENV: str = "GER_CONFIG_DIR"

_FILE_MODE = 0o600


def default_config_path() -> Path:
    """Resolve the registry file location from the environment."""
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit:
        return Path(explicit).expanduser() / CONFIG_FILENAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "ger" / CONFIG_FILENAME


class RemoteStore:
    """Load and save a :class:`~gerlib.core.remotes.RemoteRegistry`.

    Parameters
    ----------
    path:
        Registry file.  ``None`` resolves :func:`default_config_path`.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path: Path = Path(path).expanduser() if path else default_config_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> RemoteRegistry:
        """Read the registry; a missing file is an empty registry.

        Raises
        ------
        ConfigError
            If the file cannot be read or is not a valid registry.
        """
        if not self._path.exists():
            logger.debug("No remote registry at %s", self._path)
            return RemoteRegistry()
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(
                f"Malformed configuration file {self._path}: {exc}",
                hint="Fix or remove the file and re-add your remotes.",
            ) from exc

        if data is None:
            return RemoteRegistry()
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {self._path} must contain a mapping.")
        return RemoteRegistry.from_dict(data)

    def save(self, registry: RemoteRegistry) -> None:
        """Write *registry*, creating parent directories as needed.

        Raises
        ------
        ConfigError
            If the file cannot be written.
        """
        text = yaml.safe_dump(registry.to_dict(), sort_keys=True, default_flow_style=False)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.chmod(self._path, _FILE_MODE)
        except OSError as exc:
            raise ConfigError(f"Cannot write {self._path}: {exc}") from exc
        logger.debug("Saved %d remote(s) to %s", len(registry), self._path)
