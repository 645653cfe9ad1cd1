# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
influxwire package entrypoint.

This package provides a client for the InfluxDB 1.x HTTP API: a DataPoint type
that renders line protocol, and blocking/non-blocking clients for the ping,
write and query endpoints. HTTP behavior is abstracted behind an injectable
transport interface, and domain objects are modeled with typed dataclasses.
"""

from .client import AsyncInfluxClient, InfluxClient, query_method, server_version
from .config import ClientSettings, load_client_settings
from .errors import ClientClosedError, ErrorCategory, InfluxWireError
from .http import (
    AsyncTransport,
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    Transport,
)
from .log import setup_logging
from .point import DataPoint, FieldValue, encode_point, encode_points, format_field_value
from .status import InfluxResult, InfluxStatus, classify_status
from .version import __version__

__all__ = [
    "AsyncInfluxClient",
    "AsyncTransport",
    "ClientClosedError",
    "ClientSettings",
    "DataPoint",
    "ErrorCategory",
    "FieldValue",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "InfluxClient",
    "InfluxResult",
    "InfluxStatus",
    "InfluxWireError",
    "Transport",
    "classify_status",
    "encode_point",
    "encode_points",
    "format_field_value",
    "load_client_settings",
    "query_method",
    "server_version",
    "setup_logging",
    "__version__",
]
