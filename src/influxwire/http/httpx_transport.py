# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementations."""

from __future__ import annotations

import logging
import ssl

import httpx

from ..errors import categorize_exception
from .models import HttpRequest, HttpResponse
from .url import redact_url

logger = logging.getLogger(__name__)


def _to_response(resp: httpx.Response) -> HttpResponse:
    return HttpResponse(
        status_code=resp.status_code,
        headers=dict(resp.headers),
        text=resp.text,
        content=resp.content,
        url=str(resp.url),
    )


def _log_failure(request: HttpRequest, exc: Exception) -> None:
    logger.debug(
        "%s %s failed (%s): %s",
        request.method,
        redact_url(request.url),
        categorize_exception(exc).value,
        exc,
    )


class HttpxTransport:
    """Blocking transport over one shared ``httpx.Client``."""

    def __init__(
        self,
        *,
        verify: bool | ssl.SSLContext = True,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        self._client = client or httpx.Client(verify=verify, timeout=timeout)

    def send(self, request: HttpRequest) -> HttpResponse:
        try:
            resp = self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body or None,
            )
        except Exception as exc:
            _log_failure(request, exc)
            raise
        logger.debug("%s %s -> %s", request.method, redact_url(request.url), resp.status_code)
        return _to_response(resp)

    def close(self) -> None:
        self._client.close()


class AsyncHttpxTransport:
    """Non-blocking transport over one shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        verify: bool | ssl.SSLContext = True,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._client = client or httpx.AsyncClient(verify=verify, timeout=timeout)

    async def send(self, request: HttpRequest) -> HttpResponse:
        try:
            resp = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body or None,
            )
        except Exception as exc:
            _log_failure(request, exc)
            raise
        logger.debug("%s %s -> %s", request.method, redact_url(request.url), resp.status_code)
        return _to_response(resp)

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["AsyncHttpxTransport", "HttpxTransport"]
