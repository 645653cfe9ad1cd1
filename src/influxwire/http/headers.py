# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header helpers.

HTTP header field names are case-insensitive (RFC 9110). Responses keep headers
as plain dicts, so reads go through ``header_value``.
"""

from __future__ import annotations

from collections.abc import Mapping


def build_headers(auth: str = "", user_agent: str = "") -> dict[str, str]:
    """
    Return a fresh header dict for one request.

    ``Authorization`` is only present when ``auth`` is non-empty, so a cleared
    credential never lingers on a reused connection.
    """
    headers: dict[str, str] = {}
    if user_agent:
        headers["User-Agent"] = user_agent
    if auth:
        headers["Authorization"] = auth
    return headers


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    if name in headers:
        value = headers[name]
        return default if value is None else str(value).strip()

    lower = name.lower()
    for key, value in headers.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


__all__ = ["build_headers", "header_value"]
