"""REST envelope layer.

Wraps a :class:`~gerlib.core.protocols.Transport` with the conventions
every Gerrit endpoint shares:

* ``Accept: application/json`` on every request, plus a JSON
  ``Content-Type`` when a body is sent.
* Request bodies are serialized to JSON — pydantic models by wire
  alias with unset fields omitted.
* The status code is compared against the caller's expectation before
  anything else is looked at.
* JSON payloads start with the magic prefix ``)]}'\\n`` which must be
  present and is stripped before decoding.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Collection
from typing import Any

from gerlib.core.models.base import GerritModel
from gerlib.core.models.enums import HttpMethod
from gerlib.core.protocols import Transport
from gerlib.exceptions import (
    ConflictError,
    NotJsonResponse,
    UnexpectedHttpResponse,
    WrongQuery,
)

logger = logging.getLogger(__name__)

MAGIC_PREFIX: bytes = b")]}'\n"
"""Anti-XSSI guard that precedes every JSON response body."""

_JSON_CONTENT_TYPE = "application/json; charset=UTF-8"

Expected = int | Collection[int]


class Envelope:
    """A response body whose status code already matched expectations."""

    __slots__ = ("_body",)

    def __init__(self, body: bytes) -> None:
        self._body = body

    def __repr__(self) -> str:
        return f"Envelope({self._body[:40]!r})"

    def json(self) -> str:
        """Return the JSON text that follows the magic prefix.

        Raises
        ------
        NotJsonResponse
            If the body does not start with the magic prefix.  The raw
            body is attached to the exception.
        """
        if not self._body.startswith(MAGIC_PREFIX):
            raise NotJsonResponse(self._body)
        return self._body[len(MAGIC_PREFIX):].decode("utf-8", errors="replace")

    def string(self) -> str:
        """Return the whole body as text, without prefix validation."""
        return self._body.decode("utf-8", errors="replace")

    def raw(self) -> bytes:
        """Return the whole body untouched."""
        return self._body


def encode_body(body: Any) -> bytes:
    """Serialize a request body to UTF-8 JSON bytes."""
    if isinstance(body, GerritModel):
        return body.to_json().encode("utf-8")
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise WrongQuery(f"Failed to serialize request body: {exc}") from exc


def _accepts(expected: Expected, status_code: int) -> bool:
    if isinstance(expected, int):
        return status_code == expected
    return status_code in expected


class RestHandler:
    """Issue requests through a transport and validate the outcome.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`Transport` protocol.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport: Transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, path: str, expected: Expected) -> Envelope:
        return self._send(HttpMethod.GET, path, expected)

    def put(self, path: str, expected: Expected) -> Envelope:
        return self._send(HttpMethod.PUT, path, expected)

    def put_json(self, path: str, body: Any, expected: Expected) -> Envelope:
        return self._send(HttpMethod.PUT, path, expected, encode_body(body))

    def post(self, path: str, expected: Expected) -> Envelope:
        return self._send(HttpMethod.POST, path, expected)

    def post_json(self, path: str, body: Any, expected: Expected) -> Envelope:
        return self._send(HttpMethod.POST, path, expected, encode_body(body))

    def delete(self, path: str, expected: Expected) -> Envelope:
        return self._send(HttpMethod.DELETE, path, expected)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _send(
        self,
        method: HttpMethod,
        path: str,
        expected: Expected,
        body: bytes | None = None,
    ) -> Envelope:
        """Send one request and check its status.

        Raises
        ------
        UnexpectedHttpResponse
            When the status code is not among the *expected* ones.  A 409
            raises the :class:`ConflictError` subclass.
        TransportError
            Propagated from the transport unchanged.
        """
        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = _JSON_CONTENT_TYPE

        response = self._transport.request(method, path, headers=headers, body=body)

        if not _accepts(expected, response.status_code):
            logger.debug(
                "%s %s: expected %s, got %d", method.value, path, expected, response.status_code,
            )
            if response.status_code == 409:
                raise ConflictError(response.status_code, response.body)
            raise UnexpectedHttpResponse(response.status_code, response.body)

        return Envelope(response.body)
