# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers.

Transport failures are never wrapped: they reach the caller as the original
httpx/socket/ssl exception. ``categorize_exception`` only labels them for logs.
Rejections by the database (bad query, bad auth, oversized body) are not
exceptions at all; see :mod:`influxwire.status`.
"""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class InfluxWireError(Exception):
    """Base class for errors raised by influxwire itself."""


class ClientClosedError(InfluxWireError, RuntimeError):
    """Raised when a client is used after ``close()``."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def _walk_causes(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx chains the low-level socket/ssl error as ``__cause__``, so the chain is
    inspected for the more specific TLS and DNS failures first.
    """
    for item in _walk_causes(exc):
        if isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(item, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "ClientClosedError",
    "ErrorCategory",
    "InfluxWireError",
    "categorize_exception",
]
