# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Domain status derived from HTTP status codes."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from .http.models import HttpResponse


class InfluxStatus(str, Enum):
    OK = "Ok"
    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    REQUEST_TOO_LARGE = "RequestTooLarge"
    SERVER_ERROR = "ServerError"
    UNKNOWN_ERROR = "UnknownError"


_CLIENT_ERRORS = {
    400: InfluxStatus.BAD_REQUEST,
    401: InfluxStatus.UNAUTHORIZED,
    404: InfluxStatus.NOT_FOUND,
    413: InfluxStatus.REQUEST_TOO_LARGE,
}


def classify_status(code: int | None) -> InfluxStatus:
    """Map an HTTP status code to an InfluxStatus. Total over all inputs."""
    if code is None:
        return InfluxStatus.UNKNOWN_ERROR
    if 200 <= code <= 299:
        return InfluxStatus.OK
    if 400 <= code <= 499:
        return _CLIENT_ERRORS.get(code, InfluxStatus.UNKNOWN_ERROR)
    if 500 <= code <= 599:
        return InfluxStatus.SERVER_ERROR
    return InfluxStatus.UNKNOWN_ERROR


class InfluxResult(NamedTuple):
    """Transport response paired with its classified status."""

    response: HttpResponse
    status: InfluxStatus

    @property
    def ok(self) -> bool:
        return self.status is InfluxStatus.OK

    @classmethod
    def from_response(cls, response: HttpResponse) -> InfluxResult:
        return cls(response, classify_status(response.status_code))


__all__ = ["InfluxResult", "InfluxStatus", "classify_status"]
