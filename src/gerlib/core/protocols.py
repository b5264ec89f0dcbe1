"""Structural types the REST layer expects from an HTTP backend.

:mod:`gerlib.core.rest` talks to a :class:`Transport` only, so tests can
hand it a fake and :mod:`gerlib.infra.http_transport` can stay the sole
httpx importer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from gerlib.core.models.enums import HttpMethod


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Status code and undecoded body of a single HTTP exchange."""

    status_code: int
    body: bytes


class Transport(Protocol):
    """Contract for HTTP backends.

    Any object that implements :meth:`request` and :meth:`close` with the
    correct signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> RawResponse:
        """Send one request for *path* relative to the server base URL.

        Implementations follow redirects, do not retry, and must map all
        backend-specific exceptions to
        :class:`~gerlib.exceptions.TransportError`.

        Raises
        ------
        TransportError
            On connection, DNS, TLS or timeout failures.
        """
        ...  # pragma: no cover

    def close(self) -> None:
        """Release the underlying connection pool."""
        ...  # pragma: no cover
