"""httpx backed implementation of :class:`~gerlib.core.protocols.Transport`.

This module is the **only** place in the codebase that performs HTTP
requests.  All httpx exceptions are caught here and re-raised as
:class:`~gerlib.exceptions.TransportError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from gerlib.core.models.enums import HttpAuthMethod, HttpMethod
from gerlib.core.protocols import RawResponse
from gerlib.core.remotes import validate_port, validate_url
from gerlib.exceptions import InvalidURLError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: float = 30.0
"""Seconds before connect/read/write operations give up."""


def build_base_url(host: str, port: int | None = None) -> httpx.URL:
    """Return *host* as an ``httpx.URL``, with *port* applied when given.

    Any path prefix on *host* is preserved and given a trailing slash so
    request paths are appended beneath it.

    Raises
    ------
    InvalidURLError
        If *host* is malformed or *port* is out of range.
    """
    validate_url(host)
    port = validate_port(port)
    try:
        url = httpx.URL(host)
        if port is not None:
            url = url.copy_with(port=port)
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        raise InvalidURLError(f"Invalid URL '{host}': {exc}") from exc
    return url.copy_with(path=url.path.rstrip("/") + "/")


class HttpxTransport:
    """Concrete :class:`Transport` backed by a synchronous ``httpx.Client``.

    Usage::

        transport = HttpxTransport("https://review.example.org", username="jdoe", password="…")
        response = transport.request(HttpMethod.GET, "/a/changes/")

    Parameters
    ----------
    host:
        Absolute http(s) base URL, optionally with a path prefix.
    username, password:
        Credentials.  Requests are anonymous when either is missing.
    port:
        Overrides the port of *host*.
    auth_method:
        HTTP basic (default) or digest authentication.
    insecure:
        Disable TLS certificate and host-name verification.
    timeout:
        Per-operation timeout in seconds; defaults to :data:`DEFAULT_TIMEOUT`.
    """

    def __init__(
        self,
        host: str,
        *,
        username: str | None = None,
        password: str | None = None,
        port: int | None = None,
        auth_method: HttpAuthMethod = HttpAuthMethod.BASIC,
        insecure: bool = False,
        timeout: float | None = None,
    ) -> None:
        self._base_url: httpx.URL = build_base_url(host, port)
        self._client: httpx.Client = httpx.Client(
            base_url=self._base_url,
            auth=self._build_auth(auth_method, username, password),
            verify=not insecure,
            follow_redirects=True,
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        )
        if insecure:
            logger.warning("TLS verification disabled for %s", self._base_url)

    @staticmethod
    def _build_auth(
        auth_method: HttpAuthMethod,
        username: str | None,
        password: str | None,
    ) -> httpx.Auth | None:
        if username is None or password is None:
            return None
        if HttpAuthMethod(auth_method) is HttpAuthMethod.DIGEST:
            return httpx.DigestAuth(username, password)
        return httpx.BasicAuth(username, password)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: bytes | None = None,
    ) -> RawResponse:
        """Send one request; the leading ``/`` of *path* is relative to the base URL.

        Raises
        ------
        TransportError
            On connection, DNS, TLS, timeout or protocol failures.
        """
        method = HttpMethod(method)
        logger.debug("%s %s%s", method.value, self._base_url, path.lstrip("/"))
        try:
            response = self._client.request(
                method.value,
                path.lstrip("/"),
                headers=dict(headers or {}),
                content=body,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Timed out talking to {self._base_url}: {exc}",
                hint="Check the server address or raise the timeout.",
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Low-level HTTP handler failure: {exc}",
                hint="Check network connectivity and the server URL.",
            ) from exc
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid request URL for path '{path}': {exc}") from exc

        logger.debug("-> %d (%d bytes)", response.status_code, len(response.content))
        return RawResponse(response.status_code, response.content)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
