# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for the InfluxDB endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlencode, urlunsplit

QueryParams = Iterable[tuple[str, str]]


def _netloc(host: str, port: int) -> str:
    # bare IPv6 literals need brackets before a port can follow
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    return f"{host}:{port}"


def build_url(host: str, port: int, endpoint: str, params: QueryParams = (), *, ssl: bool = False) -> str:
    """
    Assemble ``scheme://host:port/endpoint?query``.

    ``params`` are ordered key/value pairs; order is kept and duplicate keys are
    allowed. The query string is left out when there are no params.

    Example:
      build_url("localhost", 8086, "/write", [("db", "x")]) -> http://localhost:8086/write?db=x
    """
    scheme = "https" if ssl else "http"
    path = endpoint if endpoint.startswith("/") else f"/{endpoint}"
    query = urlencode(list(params))
    return urlunsplit((scheme, _netloc(host, port), path, query, ""))


def redact_url(url: str) -> str:
    """Drop the query string, which may carry statements, before logging."""
    return url.split("?", 1)[0]


__all__ = ["QueryParams", "build_url", "redact_url"]
