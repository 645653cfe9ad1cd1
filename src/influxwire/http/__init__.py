# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import AsyncStubTransport, StubTransport
from .headers import build_headers, header_value
from .httpx_transport import AsyncHttpxTransport, HttpxTransport
from .models import Headers, HttpRequest, HttpResponse
from .transport import (
    AsyncTransport,
    Transport,
    create_default_async_transport,
    create_default_transport,
)
from .url import build_url

__all__ = [
    "AsyncHttpxTransport",
    "AsyncStubTransport",
    "AsyncTransport",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "StubTransport",
    "Transport",
    "build_headers",
    "build_url",
    "create_default_async_transport",
    "create_default_transport",
    "header_value",
]
