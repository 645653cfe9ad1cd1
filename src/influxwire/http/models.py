# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models shared by the transports and clients."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .headers import header_value

Headers = Dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by Transport implementations."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    body: Optional[bytes | str] = None


@dataclass
class HttpResponse:
    """Normalized HTTP response returned by every transport."""

    status_code: int
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: Optional[str] = None

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        return header_value(self.headers, name, default)

    def json(self) -> Any:
        return json.loads(self.text or self.content.decode("utf-8"))


__all__ = ["Headers", "HttpRequest", "HttpResponse"]
