# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""influxwire CLI."""

from __future__ import annotations

import argparse
import json
import sys

from ..client import InfluxClient, server_version
from ..config import ClientSettings, load_client_settings
from ..log import setup_logging
from ..status import InfluxResult

CLI_BODY_TRUNCATION_BYTES = 4096


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Talk to an InfluxDB 1.x HTTP API")
    parser.add_argument("--host", help="Server host (default: $INFLUXWIRE_HOST or localhost)")
    parser.add_argument("--port", type=int, help="Server port (default: $INFLUXWIRE_PORT or 8086)")
    parser.add_argument("--database", "-d", help="Default database")
    parser.add_argument("--ssl", action="store_true", default=None, help="Use HTTPS")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS verification (useful for self-signed servers)",
    )
    parser.add_argument("--token", help="Token authentication")
    parser.add_argument("--username", "-u", help="Basic authentication user")
    parser.add_argument("--password", "-p", help="Basic authentication password")
    parser.add_argument("--log-level", help="Python logging level (default: WARNING)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("ping", help="Check that the server is up")

    write = sub.add_parser("write", help="Write line protocol")
    write.add_argument("data", help="Line protocol text, or '-' to read stdin")

    query = sub.add_parser("query", help="Run an InfluxQL statement")
    query.add_argument("q", help="InfluxQL statement")
    query.add_argument("--epoch", default="ns", help="Timestamp precision of results")
    query.add_argument("--pretty", action="store_true", help="Ask the server to pretty-print JSON")
    query.add_argument("--method", choices=["GET", "POST"], help="Override the HTTP method")
    return parser


def _settings_from_args(args: argparse.Namespace) -> ClientSettings:
    settings = load_client_settings()
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.database is not None:
        settings.database = args.database
    if args.ssl is not None:
        settings.ssl = args.ssl
    if args.insecure:
        settings.verify_ssl = False
    if args.token:
        settings.token = args.token
    if args.username:
        settings.username = args.username
        settings.password = args.password or ""
    return settings


def _truncate_body(text: str, max_bytes: int = CLI_BODY_TRUNCATION_BYTES) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    return raw[:max_bytes].decode("utf-8", errors="ignore") + "...[truncated]"


def _print_result(result: InfluxResult, *, show_version: bool = False) -> None:
    response, status = result
    print(f"{response.status_code} {status.value}")
    if show_version:
        version = server_version(response)
        if version:
            print(f"Version: {version}")
    body = response.text.strip()
    if not body:
        return
    try:
        print(json.dumps(json.loads(body), indent=2, sort_keys=True))
    except ValueError:
        print(_truncate_body(body))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings = _settings_from_args(args)
    with InfluxClient.from_settings(settings) as client:
        if args.command == "ping":
            result = client.ping()
        elif args.command == "write":
            data = sys.stdin.read() if args.data == "-" else args.data
            result = client.write(data.strip("\n"))
        else:
            result = client.query(args.q, epoch=args.epoch, pretty=args.pretty, method=args.method)

    _print_result(result, show_version=args.command == "ping")
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
