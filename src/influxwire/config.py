# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for influxwire."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"influxwire/{__version__}"
DEFAULT_PORT = 8086


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_timeout_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class ClientSettings:
    """Connection defaults for InfluxClient / AsyncInfluxClient.

    ``timeout`` is a single fixed value in seconds handed to the transport at
    construction; ``None`` disables it.
    """

    host: str = "localhost"
    port: int = DEFAULT_PORT
    database: str = ""
    ssl: bool = False
    verify_ssl: bool = True
    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    username: str = ""
    password: str = ""
    token: str = ""

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        port = _int_env("INFLUXWIRE_PORT", cls.port)
        if port <= 0:
            port = cls.port
        return cls(
            host=os.getenv("INFLUXWIRE_HOST", cls.host),
            port=port,
            database=os.getenv("INFLUXWIRE_DATABASE", cls.database),
            ssl=_bool_env("INFLUXWIRE_SSL", cls.ssl),
            verify_ssl=_bool_env("INFLUXWIRE_VERIFY_SSL", cls.verify_ssl),
            timeout=_optional_timeout_env("INFLUXWIRE_TIMEOUT", cls.timeout),
            user_agent=os.getenv("INFLUXWIRE_USER_AGENT", cls.user_agent),
            username=os.getenv("INFLUXWIRE_USERNAME", cls.username),
            password=os.getenv("INFLUXWIRE_PASSWORD", cls.password),
            token=os.getenv("INFLUXWIRE_TOKEN", cls.token),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()
