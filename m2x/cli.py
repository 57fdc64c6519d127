#!/usr/bin/env python3
# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""Query the M2X API from the command line.

Usage:
    m2x status
    m2x feeds --type datasource --tags garage,door
    m2x values <feed-id> temperature --limit 10
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from .api import M2X
from .client import M2XError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="m2x",
        description="Query the M2X API",
    )
    parser.add_argument(
        "--api-key",
        help="M2X API key (default: M2X_API_KEY environment variable)",
    )
    parser.add_argument(
        "--api-version",
        help="API version (default: M2X_API_VERSION or v1)",
    )
    parser.add_argument(
        "--base-url",
        help="API base URL (default: M2X_API_BASE or the public endpoint)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("status", help="Check API status and credentials")

    feeds = commands.add_parser("feeds", help="List or search feeds")
    feeds.add_argument("--q", help="Text matching name and description")
    feeds.add_argument(
        "--type", choices=["blueprint", "batch", "datasource"], help="Feed type"
    )
    feeds.add_argument("--tags", help="Comma separated list of tags")
    feeds.add_argument("--limit", type=int, help="Results per page")
    feeds.add_argument("--page", type=int, help="Results page, starting by 1")

    for name, help_text in (
        ("feed", "Show feed details"),
        ("location", "Show feed location"),
        ("streams", "List feed streams"),
        ("triggers", "List feed triggers"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("feed_id", help="Feed ID")

    values = commands.add_parser("values", help="List stream values")
    values.add_argument("feed_id", help="Feed ID")
    values.add_argument("stream", help="Stream name")
    values.add_argument("--start", help="ISO 8601 start of the range")
    values.add_argument("--end", help="ISO 8601 end of the range")
    values.add_argument("--limit", type=int, help="Maximum number of values")

    keys = commands.add_parser("keys", help="List API keys")
    keys.add_argument("--feed", help="Only keys associated with this feed")

    return parser


def _run(m2x: M2X, args: argparse.Namespace) -> Any:
    if args.command == "status":
        return m2x.status()
    if args.command == "feeds":
        return m2x.feeds.search(
            {
                "q": args.q,
                "type": args.type,
                "tags": args.tags,
                "limit": args.limit,
                "page": args.page,
            }
        )
    if args.command == "feed":
        return m2x.feeds.view(args.feed_id)
    if args.command == "location":
        return m2x.feeds.location(args.feed_id)
    if args.command == "streams":
        return m2x.feeds.streams(args.feed_id)
    if args.command == "triggers":
        return m2x.feeds.triggers(args.feed_id)
    if args.command == "values":
        return m2x.feeds.stream_values(
            args.feed_id,
            args.stream,
            start=args.start,
            end=args.end,
            limit=args.limit,
        )
    if args.command == "keys":
        if args.feed:
            return m2x.feeds.keys(args.feed)
        return m2x.keys.list()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        with M2X(
            api_key=args.api_key,
            api_version=args.api_version,
            base_url=args.base_url,
        ) as m2x:
            result = _run(m2x, args)
    except M2XError as e:
        print(f"Error: {e}", file=sys.stderr)
        if isinstance(e.body, str):
            print(e.body, file=sys.stderr)
        elif e.body:
            print(json.dumps(e.body, indent=2), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted", file=sys.stderr)
        sys.exit(130)

    if result is None:
        print("(no content)")
    else:
        print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
