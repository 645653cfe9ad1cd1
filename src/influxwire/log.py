# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for influxwire."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "INFLUXWIRE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(level: str | None = None) -> int:
    """Numeric level from ``level``, else $INFLUXWIRE_LOG_LEVEL (read now), else WARNING."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["resolve_log_level", "setup_logging"]
