from __future__ import annotations

"""
mxnetworking, a thin HTTP client with a closed error taxonomy.
Copyright (C) 2025  Theori Inc.

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""mxnetworking CLI."""

import argparse
import asyncio
import json
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import ApiError, error_to_message
from ..http import HttpMethod, Request, create_default_transport
from ..log import setup_logging
from ..networker import Networker


def _key_value(raw: str, separator: str) -> tuple[str, str]:
    key, sep, value = raw.partition(separator)
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected NAME{separator}VALUE, got {raw!r}")
    return key.strip(), value.strip()


def _query_param(raw: str) -> tuple[str, str]:
    return _key_value(raw, "=")


def _header(raw: str) -> tuple[str, str]:
    return _key_value(raw, ":")


def _json_body(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"body is not valid JSON: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a GET/POST request and print the response body")
    parser.add_argument("url", help="Target URL")
    parser.add_argument(
        "-X",
        "--method",
        choices=[m.value for m in HttpMethod],
        default=HttpMethod.GET.value,
        help="HTTP method (default: GET)",
    )
    parser.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        type=_query_param,
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        type=_header,
        default=[],
        metavar="NAME:VALUE",
        help="Request header (repeatable; later values win)",
    )
    parser.add_argument("-d", "--data", type=_json_body, default=None, help="JSON request body")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    return parser


def build_request(args: argparse.Namespace) -> Request:
    request = Request(
        args.url,
        method=HttpMethod(args.method),
        parameters=dict(args.params) or None,
        body=args.data,
    )
    for name, value in args.headers:
        request = request.with_header(name, value)
    return request


def _print_body(body: bytes) -> None:
    try:
        payload = json.loads(body)
    except ValueError:
        sys.stdout.write(body.decode("utf-8", errors="replace"))
        sys.stdout.write("\n")
        return
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout is not None and args.timeout > 0:
        settings.timeout = args.timeout

    request = build_request(args)
    transport = create_default_transport(settings)

    with Networker(transport, settings=settings) as networker:
        try:
            body = asyncio.run(networker.data_async(request))
        except ApiError as exc:
            sys.stderr.write(f"{error_to_message(exc)}\n")
            return 1
        finally:
            transport.close()

    if body:
        _print_body(body)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
