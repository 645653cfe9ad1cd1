# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable in-memory transports."""

from __future__ import annotations

from .models import HttpRequest, HttpResponse


class StubTransport:
    """
    Deterministic, programmable Transport for tests.

    Responses are keyed by endpoint path (``/ping``, ``/write``, ``/query``);
    unknown paths answer 404 like the database would.
    """

    def __init__(self, responses: dict[str, HttpResponse] | None = None):
        self._responses = responses or {}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, path: str, response: HttpResponse) -> None:
        self._responses[path] = response

    def _respond(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        path = request.url.split("?", 1)[0]
        for key, response in self._responses.items():
            if path.endswith(key):
                return response
        return HttpResponse(status_code=404, text="404 page not found\n", url=request.url)

    def send(self, request: HttpRequest) -> HttpResponse:
        return self._respond(request)

    def close(self) -> None:
        self.closed = True


class AsyncStubTransport(StubTransport):
    """Non-blocking flavour of StubTransport."""

    async def send(self, request: HttpRequest) -> HttpResponse:  # type: ignore[override]
        return self._respond(request)

    async def close(self) -> None:  # type: ignore[override]
        self.closed = True


__all__ = ["AsyncStubTransport", "StubTransport"]
