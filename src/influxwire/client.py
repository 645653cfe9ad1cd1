# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
InfluxDB 1.x HTTP API clients.

``InfluxClient`` blocks on every call; ``AsyncInfluxClient`` returns awaitables.
Both build requests through ``_ClientBase`` and differ only in how the transport
is invoked.

Each client owns exactly one transport (one connection pool), opened at
construction and released by ``close()``. A client is not synchronized: the
auth value is read while each request is built, so changing it from another
thread or task while requests are in flight is a race. Callers that need
independent concurrent traffic should create one client per worker.

>>> client = InfluxClient("localhost", "metrics")  # doctest: +SKIP
>>> point = DataPoint("temp").add_tag("loc", "home").add_field("ambient", 22.0)
>>> response, status = client.write(point)  # doctest: +SKIP
>>> status is InfluxStatus.OK  # doctest: +SKIP
True
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Iterable

from .config import DEFAULT_PORT, DEFAULT_USER_AGENT, ClientSettings
from .errors import ClientClosedError
from .http.headers import build_headers
from .http.models import HttpRequest, HttpResponse
from .http.transport import (
    AsyncTransport,
    SslOption,
    Transport,
    create_default_async_transport,
    create_default_transport,
)
from .http.url import QueryParams, build_url
from .point import DataPoint, encode_points
from .status import InfluxResult

logger = logging.getLogger(__name__)

WriteData = str | DataPoint | Iterable[DataPoint]

_READ_PREFIXES = ("select", "show")


def query_method(q: str) -> str:
    """
    Pick the HTTP method for an InfluxQL statement.

    Statements starting with SELECT or SHOW are reads and go out as GET;
    everything else is POSTed. This is a prefix heuristic: a read that starts
    with anything else (a comment, a parenthesis, ``EXPLAIN``) is sent as POST.
    """
    return "GET" if q.lstrip().lower().startswith(_READ_PREFIXES) else "POST"


def server_version(response: HttpResponse) -> str:
    """Return the ``X-Influxdb-Version`` reported by the server, or ''."""
    return response.header("X-Influxdb-Version")


def _to_line_protocol(data: WriteData) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, DataPoint):
        return data.to_line()
    return encode_points(data)


class _ClientBase:
    def __init__(
        self,
        host: str = "localhost",
        database: str = "",
        port: int = DEFAULT_PORT,
        ssl: SslOption = False,
        timeout: float | None = None,
        *,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.host = host
        self.port = port
        self.ssl = ssl
        self.database = database
        self.timeout = timeout
        self.user_agent = user_agent
        self.settings = ClientSettings(
            host=host,
            port=port,
            database=database,
            ssl=bool(ssl),
            verify_ssl=verify_ssl,
            timeout=timeout,
            user_agent=user_agent,
        )
        self._auth = ""
        self._closed = False

    @property
    def auth(self) -> str:
        return self._auth

    @property
    def closed(self) -> bool:
        return self._closed

    def set_basic_auth(self, user: str, password: str) -> None:
        """Use Basic authentication."""
        token = base64.b64encode(f"{user}:{password}".encode()).decode("ascii")
        self._auth = f"Basic {token}"

    def set_token_auth(self, token: str) -> None:
        """Use Token authentication."""
        self._auth = f"Token {token}"

    def _apply_settings_auth(self, settings: ClientSettings) -> None:
        if settings.token:
            self.set_token_auth(settings.token)
        elif settings.username:
            self.set_basic_auth(settings.username, settings.password)

    def _resolve_database(self, database: str) -> str:
        return database or self.database

    def _build_request(self, endpoint: str, method: str, body: str, params: QueryParams) -> HttpRequest:
        if self._closed:
            raise ClientClosedError(f"{type(self).__name__} is closed")
        return HttpRequest(
            url=build_url(self.host, self.port, endpoint, params, ssl=bool(self.ssl)),
            method=method,
            headers=build_headers(self._auth, self.user_agent),
            body=body,
        )

    def _query_args(
        self,
        q: str,
        database: str,
        chunked: bool,
        chunk_size: int,
        epoch: str,
        pretty: bool,
        method: str | None,
    ) -> tuple[str, list[tuple[str, str]]]:
        params = [
            ("q", q),
            ("epoch", epoch),
            ("pretty", "true" if pretty else "false"),
        ]
        if chunked:
            params.append(("chunked", "true"))
            params.append(("chunk_size", str(chunk_size)))
        db = self._resolve_database(database)
        if db:
            params.append(("db", db))
        return (method.upper() if method else query_method(q)), params

    def _write_args(self, data: WriteData, database: str) -> tuple[str, list[tuple[str, str]]]:
        body = _to_line_protocol(data)
        db = self._resolve_database(database)
        logger.debug("Writing %d line(s) to db=%r", body.count("\n") + 1, db)
        return body, [("db", db)]


class InfluxClient(_ClientBase):
    """Blocking client for the InfluxDB HTTP API."""

    def __init__(
        self,
        host: str = "localhost",
        database: str = "",
        port: int = DEFAULT_PORT,
        ssl: SslOption = False,
        timeout: float | None = None,
        *,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Transport | None = None,
    ):
        super().__init__(host, database, port, ssl, timeout, verify_ssl=verify_ssl, user_agent=user_agent)
        self._transport = transport or create_default_transport(self.settings, ssl)

    @classmethod
    def from_settings(cls, settings: ClientSettings, *, transport: Transport | None = None) -> InfluxClient:
        client = cls(
            settings.host,
            settings.database,
            settings.port,
            settings.ssl,
            settings.timeout,
            verify_ssl=settings.verify_ssl,
            user_agent=settings.user_agent,
            transport=transport,
        )
        client._apply_settings_auth(settings)
        return client

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: str = "",
        params: QueryParams = (),
    ) -> HttpResponse:
        """
        Send one request to ``endpoint`` and return the raw response.

        Non-2xx replies are returned, not raised; transport errors propagate.
        """
        return self._transport.send(self._build_request(endpoint, method, body, params))

    def ping(self) -> InfluxResult:
        """Ping InfluxDB to check instance status."""
        return InfluxResult.from_response(self.request("/ping", "GET"))

    def query(
        self,
        q: str,
        database: str = "",
        chunked: bool = False,
        chunk_size: int = 10000,
        epoch: str = "ns",
        pretty: bool = False,
        method: str | None = None,
    ) -> InfluxResult:
        """
        Run an InfluxQL statement.

        ``database`` overrides the client default. ``method`` forces the HTTP
        method; by default it is chosen by ``query_method``.
        """
        http_method, params = self._query_args(q, database, chunked, chunk_size, epoch, pretty, method)
        return InfluxResult.from_response(self.request("/query", http_method, params=params))

    def write(self, data: WriteData, database: str = "") -> InfluxResult:
        """Write line protocol text, one DataPoint, or several DataPoints."""
        body, params = self._write_args(data, database)
        return InfluxResult.from_response(self.request("/write", "POST", body, params))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._transport.close()

    def __enter__(self) -> InfluxClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


class AsyncInfluxClient(_ClientBase):
    """Non-blocking client for the InfluxDB HTTP API; every operation is awaitable."""

    def __init__(
        self,
        host: str = "localhost",
        database: str = "",
        port: int = DEFAULT_PORT,
        ssl: SslOption = False,
        timeout: float | None = None,
        *,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: AsyncTransport | None = None,
    ):
        super().__init__(host, database, port, ssl, timeout, verify_ssl=verify_ssl, user_agent=user_agent)
        self._transport = transport or create_default_async_transport(self.settings, ssl)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, *, transport: AsyncTransport | None = None
    ) -> AsyncInfluxClient:
        client = cls(
            settings.host,
            settings.database,
            settings.port,
            settings.ssl,
            settings.timeout,
            verify_ssl=settings.verify_ssl,
            user_agent=settings.user_agent,
            transport=transport,
        )
        client._apply_settings_auth(settings)
        return client

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: str = "",
        params: QueryParams = (),
    ) -> HttpResponse:
        return await self._transport.send(self._build_request(endpoint, method, body, params))

    async def ping(self) -> InfluxResult:
        return InfluxResult.from_response(await self.request("/ping", "GET"))

    async def query(
        self,
        q: str,
        database: str = "",
        chunked: bool = False,
        chunk_size: int = 10000,
        epoch: str = "ns",
        pretty: bool = False,
        method: str | None = None,
    ) -> InfluxResult:
        http_method, params = self._query_args(q, database, chunked, chunk_size, epoch, pretty, method)
        return InfluxResult.from_response(await self.request("/query", http_method, params=params))

    async def write(self, data: WriteData, database: str = "") -> InfluxResult:
        body, params = self._write_args(data, database)
        return InfluxResult.from_response(await self.request("/write", "POST", body, params))

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._transport.close()

    async def __aenter__(self) -> AsyncInfluxClient:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.close()


__all__ = ["AsyncInfluxClient", "InfluxClient", "WriteData", "query_method", "server_version"]
