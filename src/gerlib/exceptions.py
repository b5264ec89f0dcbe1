"""Custom exception hierarchy for gerlib.

All exceptions that cross layer boundaries must inherit from
:class:`GerlibError`.  Raw third-party exceptions (httpx, pydantic,
PyYAML) must NEVER propagate beyond the layer that triggered them —
they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
GerlibError
├── ConfigError
│   ├── InvalidURLError
│   └── RemoteConfigError
│       ├── RemoteExistsError
│       └── NoSuchRemoteError
├── TransportError
├── RestError
│   ├── UnexpectedHttpResponse
│   │   └── ConflictError
│   ├── NotJsonResponse
│   ├── InvalidJsonResponse
│   └── WrongQuery
└── EnvironmentError
"""

from __future__ import annotations


class GerlibError(Exception):
    """Base exception for all gerlib errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigError(GerlibError):
    """Raised when client or CLI configuration is unusable."""


class InvalidURLError(ConfigError):
    """Raised when a server URL is not an absolute http(s) URL."""


class RemoteConfigError(ConfigError):
    """Raised for invalid operations on the named-remote registry."""


class RemoteExistsError(RemoteConfigError):
    """Raised when adding a remote whose name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"remote '{name}' already exists.")
        self.name: str = name


class NoSuchRemoteError(RemoteConfigError):
    """Raised when a remote name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"no such remote '{name}'.",
            hint="List configured remotes with: ger remote -v",
        )
        self.name: str = name


# --- Transport -------------------------------------------------------------

class TransportError(GerlibError):
    """Low-level HTTP handler failure (connection, DNS, TLS, timeout)."""


HttpHandler = TransportError


# --- REST envelope ---------------------------------------------------------

class RestError(GerlibError):
    """Base class for failures while talking to the REST endpoints."""


class UnexpectedHttpResponse(RestError):
    """Raised when the server answers with a status other than expected.

    The raw response body is kept untouched so callers can inspect the
    server's explanation (Gerrit answers errors in plain text).
    """

    def __init__(self, status_code: int, body: bytes) -> None:
        super().__init__(f"Unexpected HTTP response code: {status_code}")
        self.status_code: int = status_code
        self.body: bytes = body

    @property
    def message(self) -> str:
        """Server-provided body decoded as text."""
        return self.body.decode("utf-8", errors="replace").strip()


class ConflictError(UnexpectedHttpResponse):
    """HTTP 409: the change is not in a state that allows the operation."""


class NotJsonResponse(RestError):
    """Raised when a body lacks the JSON envelope magic prefix."""

    def __init__(self, body: bytes) -> None:
        super().__init__("Unexpected non-JSON response")
        self.body: bytes = body


class InvalidJsonResponse(RestError):
    """Raised when the envelope payload does not decode to the expected type."""


class WrongQuery(RestError):
    """Raised when query parameters cannot be serialized."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GerlibError):
    """Raised when an optional runtime dependency is not available."""
