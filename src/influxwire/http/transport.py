# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factories.

A transport owns one long-lived connection pool and knows how to send one
``HttpRequest``. The blocking and non-blocking clients build requests the same
way and differ only in which of these protocols they hold.
"""

from __future__ import annotations

import ssl as ssl_module
from typing import Protocol

from ..config import ClientSettings, load_client_settings
from .models import HttpRequest, HttpResponse

SslOption = bool | ssl_module.SSLContext


class Transport(Protocol):
    """Minimal protocol for issuing blocking HTTP requests."""

    def send(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


class AsyncTransport(Protocol):
    """Minimal protocol for issuing non-blocking HTTP requests."""

    async def send(self, request: HttpRequest) -> HttpResponse: ...

    async def close(self) -> None: ...


def create_default_transport(settings: ClientSettings | None = None, ssl: SslOption | None = None) -> Transport:
    """Factory for the default httpx-backed blocking transport."""
    from .httpx_transport import HttpxTransport

    settings = settings or load_client_settings()
    return HttpxTransport(
        verify=_verify_option(settings, ssl),
        timeout=settings.timeout,
    )


def create_default_async_transport(
    settings: ClientSettings | None = None, ssl: SslOption | None = None
) -> AsyncTransport:
    """Factory for the default httpx-backed non-blocking transport."""
    from .httpx_transport import AsyncHttpxTransport

    settings = settings or load_client_settings()
    return AsyncHttpxTransport(
        verify=_verify_option(settings, ssl),
        timeout=settings.timeout,
    )


def _verify_option(settings: ClientSettings, ssl: SslOption | None) -> bool | ssl_module.SSLContext:
    if isinstance(ssl, ssl_module.SSLContext):
        return ssl
    return settings.verify_ssl


__all__ = [
    "AsyncTransport",
    "SslOption",
    "Transport",
    "create_default_async_transport",
    "create_default_transport",
]
