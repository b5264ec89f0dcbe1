"""Tests for HttpxTransport (infra/http_transport.py).

HTTP is intercepted inside httpx by ``pytest-httpx`` — no network.
These tests verify:

* Request URLs (base path prefix, port override)
* Authentication and TLS options handed to ``httpx.Client``
* httpx exceptions mapped to :class:`TransportError`
* Non-2xx responses are returned, not raised
"""

from __future__ import annotations

import base64
import logging
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
from pytest_httpx import HTTPXMock

from gerlib.core.api import GerritRestApi
from gerlib.core.models import HttpAuthMethod, HttpMethod
from gerlib.core.rest import MAGIC_PREFIX
from gerlib.exceptions import InvalidURLError, TransportError, UnexpectedHttpResponse
from gerlib.infra.http_transport import DEFAULT_TIMEOUT, HttpxTransport, build_base_url

HOST = "https://review.example.org"


# ---------------------------------------------------------------------------
# Base URL
# ---------------------------------------------------------------------------

class TestBuildBaseUrl:
    def test_trailing_slash_added(self) -> None:
        assert str(build_base_url(HOST)) == "https://review.example.org/"

    def test_path_prefix_kept(self) -> None:
        assert str(build_base_url("https://example.org/gerrit")) == "https://example.org/gerrit/"

    def test_port_applied(self) -> None:
        assert build_base_url(HOST, 8443).port == 8443

    @pytest.mark.parametrize("host", ["", "review.example.org", "ftp://review.example.org"])
    def test_invalid_host(self, host: str) -> None:
        with pytest.raises(InvalidURLError):
            build_base_url(host)

    @pytest.mark.parametrize("port", [0, 70000])
    def test_invalid_port(self, port: int) -> None:
        with pytest.raises(InvalidURLError):
            build_base_url(HOST, port)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class TestRequest:
    def test_get_returns_raw_response(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{HOST}/a/changes/1/topic",
            method="GET",
            content=MAGIC_PREFIX + b'"mytopic"',
        )
        with HttpxTransport(HOST) as transport:
            response = transport.request(HttpMethod.GET, "/a/changes/1/topic")

        assert response.status_code == 200
        assert response.body == MAGIC_PREFIX + b'"mytopic"'

    def test_redirect_is_followed(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{HOST}/a/changes/1/topic",
            status_code=302,
            headers={"Location": f"{HOST}/gerrit/a/changes/1/topic"},
        )
        httpx_mock.add_response(
            url=f"{HOST}/gerrit/a/changes/1/topic",
            content=MAGIC_PREFIX + b'"mytopic"',
        )
        with HttpxTransport(HOST) as transport:
            response = transport.request(HttpMethod.GET, "/a/changes/1/topic")

        assert response.status_code == 200
        assert response.body == MAGIC_PREFIX + b'"mytopic"'
        assert len(httpx_mock.get_requests()) == 2

    def test_path_prefix(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://example.org/gerrit/a/changes/", content=b"")
        with HttpxTransport("https://example.org/gerrit") as transport:
            assert transport.request(HttpMethod.GET, "/a/changes/").status_code == 200

    def test_port_override(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://review.example.org:8443/a/changes/", content=b"")
        with HttpxTransport(HOST, port=8443) as transport:
            transport.request(HttpMethod.GET, "/a/changes/")

    def test_query_string_preserved(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{HOST}/a/changes/1/?o=LABELS", content=b"")
        with HttpxTransport(HOST) as transport:
            transport.request(HttpMethod.GET, "/a/changes/1/?o=LABELS")

    def test_headers_and_body_forwarded(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{HOST}/a/changes/1/abandon", method="POST", content=b"")
        with HttpxTransport(HOST) as transport:
            transport.request(
                HttpMethod.POST,
                "/a/changes/1/abandon",
                headers={"Content-Type": "application/json; charset=UTF-8"},
                body=b'{"message": "x"}',
            )

        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["Content-Type"] == "application/json; charset=UTF-8"
        assert request.content == b'{"message": "x"}'

    @pytest.mark.parametrize("status", [204, 404, 409, 500])
    def test_error_statuses_are_returned(self, httpx_mock: HTTPXMock, status: int) -> None:
        httpx_mock.add_response(url=f"{HOST}/a/changes/1", status_code=status, content=b"nope")
        with HttpxTransport(HOST) as transport:
            response = transport.request(HttpMethod.DELETE, "/a/changes/1")
        assert response.status_code == status

    def test_basic_auth_header(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{HOST}/a/accounts/self", content=b"")
        with HttpxTransport(HOST, username="jdoe", password="secret") as transport:
            transport.request(HttpMethod.GET, "/a/accounts/self")

        request = httpx_mock.get_request()
        assert request is not None
        expected = "Basic " + base64.b64encode(b"jdoe:secret").decode("ascii")
        assert request.headers["Authorization"] == expected

    def test_anonymous_without_credentials(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{HOST}/a/changes/", content=b"")
        with HttpxTransport(HOST, username="jdoe") as transport:
            transport.request(HttpMethod.GET, "/a/changes/")

        request = httpx_mock.get_request()
        assert request is not None
        assert "Authorization" not in request.headers


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

class TestErrorMapping:
    def test_connect_error(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))
        with HttpxTransport(HOST) as transport:
            with pytest.raises(TransportError, match="Low-level HTTP handler failure"):
                transport.request(HttpMethod.GET, "/a/changes/")

    def test_timeout(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))
        with HttpxTransport(HOST) as transport:
            with pytest.raises(TransportError, match="Timed out") as exc_info:
                transport.request(HttpMethod.GET, "/a/changes/")
        assert exc_info.value.hint is not None

    def test_original_exception_is_chained(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_exception(httpx.RemoteProtocolError("bad"))
        with HttpxTransport(HOST) as transport:
            with pytest.raises(TransportError) as exc_info:
                transport.request(HttpMethod.GET, "/a/changes/")
        assert isinstance(exc_info.value.__cause__, httpx.RemoteProtocolError)


# ---------------------------------------------------------------------------
# Client options
# ---------------------------------------------------------------------------

class TestClientOptions:
    def _capture_client(self, monkeypatch: pytest.MonkeyPatch) -> MagicMock:
        client_cls = MagicMock()
        monkeypatch.setattr(httpx, "Client", client_cls)
        return client_cls

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client_cls = self._capture_client(monkeypatch)
        HttpxTransport(HOST)

        kwargs: dict[str, Any] = client_cls.call_args.kwargs
        assert kwargs["auth"] is None
        assert kwargs["verify"] is True
        assert kwargs["timeout"] == DEFAULT_TIMEOUT
        assert kwargs["follow_redirects"] is True

    def test_digest_auth(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client_cls = self._capture_client(monkeypatch)
        HttpxTransport(HOST, username="jdoe", password="pw", auth_method=HttpAuthMethod.DIGEST)
        assert isinstance(client_cls.call_args.kwargs["auth"], httpx.DigestAuth)

    def test_basic_auth(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client_cls = self._capture_client(monkeypatch)
        HttpxTransport(HOST, username="jdoe", password="pw")
        assert isinstance(client_cls.call_args.kwargs["auth"], httpx.BasicAuth)

    def test_insecure_disables_verification(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture,
    ) -> None:
        client_cls = self._capture_client(monkeypatch)
        with caplog.at_level(logging.WARNING, logger="gerlib.infra.http_transport"):
            HttpxTransport(HOST, insecure=True)

        assert client_cls.call_args.kwargs["verify"] is False
        assert "TLS verification disabled" in caplog.text

    def test_custom_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client_cls = self._capture_client(monkeypatch)
        HttpxTransport(HOST, timeout=5.0)
        assert client_cls.call_args.kwargs["timeout"] == 5.0

    def test_close_closes_client(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client_cls = self._capture_client(monkeypatch)
        HttpxTransport(HOST).close()
        client_cls.return_value.close.assert_called_once()


# ---------------------------------------------------------------------------
# End to end through the client
# ---------------------------------------------------------------------------

class TestRestApiOverHttpx:
    def test_get_topic(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{HOST}/a/changes/myProject~master~I8473/topic",
            method="GET",
            content=MAGIC_PREFIX + b'"mytopic"',
        )
        with GerritRestApi.connect(HOST, "jdoe", "secret") as api:
            assert api.get_topic("myProject~master~I8473") == "mytopic"

        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["Accept"] == "application/json"

    def test_not_found(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{HOST}/a/changes/123",
            method="DELETE",
            status_code=404,
            content=b"Not found: 123",
        )
        with GerritRestApi.connect(HOST) as api:
            with pytest.raises(UnexpectedHttpResponse) as exc_info:
                api.delete_change("123")
        assert exc_info.value.status_code == 404
        assert exc_info.value.body == b"Not found: 123"
