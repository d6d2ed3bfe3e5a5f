"""CLI utilities for developer workflows."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Sequence

import httpx

from .client import DealNewsClient
from .dispatcher import ACCEPTED_FORMATS
from .exceptions import DealNewsValidationError


def _parse_pairs(values: Sequence[str] | None, flag: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for item in values or ():
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"{flag} expects KEY=VALUE, got {item!r}")
        pairs[key] = value
    return pairs


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dealnews-api",
        description="Issue a signed request against the DealNews API.",
    )
    parser.add_argument("method", type=str.upper, choices=["GET", "POST"])
    parser.add_argument("path")
    parser.add_argument("--query", action="append", metavar="KEY=VALUE")
    parser.add_argument("--form", action="append", metavar="KEY=VALUE")
    parser.add_argument("--header", action="append", metavar="NAME=VALUE")
    parser.add_argument("--format", choices=sorted(ACCEPTED_FORMATS))
    parser.add_argument("--base-url")
    parser.add_argument("--nocache", action="store_true")
    tls = parser.add_mutually_exclusive_group()
    tls.add_argument("--insecure", action="store_true", help="disable TLS certificate verification")
    tls.add_argument("--ca-bundle", help="path to a CA bundle used to verify the server")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _request_options(args: argparse.Namespace) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if args.format:
        options["format"] = args.format
    if args.header:
        options["headers"] = _parse_pairs(args.header, "--header")
    if args.query:
        options["query"] = _parse_pairs(args.query, "--query")
    if args.form:
        options["form_params"] = _parse_pairs(args.form, "--form")
    return options


def _main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        options = _request_options(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    try:
        with DealNewsClient(base_host=args.base_url) as client:
            client.nocache = args.nocache
            if args.insecure:
                client.verify_tls = False
            elif args.ca_bundle:
                client.verify_tls = args.ca_bundle
            if args.method == "GET":
                response = client.get(args.path, options)
            else:
                response = client.post(args.path, options)
    except (DealNewsValidationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except httpx.HTTPError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"HTTP {response.status}")
    for name, values in response.headers.items():
        for value in values:
            print(f"{name}: {value}")
    print()
    sys.stdout.write(response.body.decode("utf-8", errors="replace"))
    sys.stdout.write("\n")
    return 0 if 200 <= response.status < 300 else 1


def main() -> None:
    raise SystemExit(_main())
