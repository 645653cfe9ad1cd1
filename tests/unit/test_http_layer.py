# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
import logging

import httpx
import pytest

from influxwire.http.adapters import AsyncStubTransport, StubTransport
from influxwire.http.headers import build_headers, header_value
from influxwire.http.httpx_transport import AsyncHttpxTransport, HttpxTransport
from influxwire.http.models import HttpRequest, HttpResponse
from influxwire.http.url import build_url, redact_url


def test_build_url_schemes_and_query():
    assert build_url("localhost", 8086, "/ping") == "http://localhost:8086/ping"
    assert build_url("db.example", 443, "/write", [("db", "x")], ssl=True) == "https://db.example:443/write?db=x"


def test_build_url_keeps_order_and_duplicates_and_encodes():
    url = build_url("h", 1, "/query", [("q", "select * from m"), ("db", "a"), ("db", "b")])
    assert url == "http://h:1/query?q=select+%2A+from+m&db=a&db=b"


def test_build_url_brackets_ipv6_hosts():
    assert build_url("::1", 8086, "ping") == "http://[::1]:8086/ping"


def test_redact_url_drops_query():
    assert redact_url("http://h:1/query?q=secret") == "http://h:1/query"


def test_build_headers_only_sets_auth_when_present():
    assert build_headers() == {}
    assert build_headers("", "UA/1") == {"User-Agent": "UA/1"}
    assert build_headers("Token abc")["Authorization"] == "Token abc"


def test_build_headers_returns_fresh_dicts():
    first = build_headers("Token a")
    first["X-Extra"] = "1"
    assert "X-Extra" not in build_headers("Token a")


def test_header_value_is_case_insensitive():
    headers = {"X-Influxdb-Version": " 1.8.10 "}
    assert header_value(headers, "x-influxdb-version") == "1.8.10"
    assert header_value(headers, "X-Influxdb-Version") == "1.8.10"
    assert header_value(headers, "missing", "n/a") == "n/a"
    assert header_value(None, "x") == ""


def test_http_response_json_and_header():
    resp = HttpResponse(status_code=200, headers={"Content-Type": "application/json"}, text='{"results": []}')
    assert resp.json() == {"results": []}
    assert resp.header("content-type") == "application/json"


def _mock_client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_httpx_transport_sends_request_and_normalizes_response():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204, headers={"X-Influxdb-Version": "1.8.10"})

    transport = HttpxTransport(client=_mock_client(handler))
    resp = transport.send(
        HttpRequest(url="http://h:8086/write?db=x", method="POST", headers={"Authorization": "Token t"}, body="m f=1i")
    )
    assert resp.status_code == 204
    assert resp.header("x-influxdb-version") == "1.8.10"
    assert resp.url == "http://h:8086/write?db=x"
    assert seen[0].method == "POST"
    assert seen[0].headers["Authorization"] == "Token t"
    assert seen[0].content == b"m f=1i"
    transport.close()


def test_httpx_transport_sends_no_body_for_empty_string():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    transport = HttpxTransport(client=_mock_client(handler))
    transport.send(HttpRequest(url="http://h:8086/ping", body=""))
    assert seen[0].content == b""


def test_httpx_transport_propagates_transport_errors(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxTransport(client=_mock_client(handler))
    with caplog.at_level(logging.DEBUG, logger="influxwire.http.httpx_transport"):
        with pytest.raises(httpx.ConnectError):
            transport.send(HttpRequest(url="http://h:8086/ping?u=admin&p=secret"))
    assert "CONNECTION_ERROR" in caplog.text
    assert "secret" not in caplog.text


def test_httpx_transport_does_not_raise_for_error_status():
    transport = HttpxTransport(client=_mock_client(lambda request: httpx.Response(500, text="boom")))
    resp = transport.send(HttpRequest(url="http://h:8086/query"))
    assert resp.status_code == 500
    assert resp.text == "boom"


def test_async_httpx_transport_roundtrip():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": [{"statement_id": 0}]})

    async def run():
        transport = AsyncHttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        try:
            return await transport.send(HttpRequest(url="http://h:8086/query?q=show+databases"))
        finally:
            await transport.close()

    resp = asyncio.run(run())
    assert resp.status_code == 200
    assert resp.json()["results"][0]["statement_id"] == 0
    assert seen[0].method == "GET"


def test_async_httpx_transport_propagates_timeouts():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    async def run():
        transport = AsyncHttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        try:
            await transport.send(HttpRequest(url="http://h:8086/ping"))
        finally:
            await transport.close()

    with pytest.raises(httpx.ReadTimeout):
        asyncio.run(run())


def test_stub_transport_records_and_routes_by_path():
    stub = StubTransport({"/ping": HttpResponse(status_code=204)})
    assert stub.send(HttpRequest(url="http://h:1/ping")).status_code == 204
    assert stub.send(HttpRequest(url="http://h:1/nope?x=1")).status_code == 404
    assert [r.url for r in stub.requests] == ["http://h:1/ping", "http://h:1/nope?x=1"]
    stub.close()
    assert stub.closed is True


def test_async_stub_transport():
    stub = AsyncStubTransport()
    stub.add("/write", HttpResponse(status_code=204))

    async def run():
        resp = await stub.send(HttpRequest(url="http://h:1/write", method="POST"))
        await stub.close()
        return resp

    assert asyncio.run(run()).status_code == 204
    assert stub.closed is True
