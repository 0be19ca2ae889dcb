from __future__ import annotations

import argparse
import asyncio
import json
import logging
import re
import sys

import yaml
from pydantic import ValidationError

from .forum_config import load_forum_config
from .search.forum import google_fallback_url, search_forum
from .search.models import SearchFailure, SearchResponse
from .settings import Settings, get_settings

EXAMPLES = """\
Examples:
  b4x-search "CustomListView tutorial"
  b4x-search "httpjob example" --limit 5
  b4x-search "SQL database" --json
"""

PREVIEW_CHARS = 150

_LEADING_INT_RX = re.compile(r"\s*-?\d+")


def _lenient_limit(default: int):
    # Leading digits are used ("5x" -> 5); anything else, or a non-positive value, gives the default.
    def parse(value: str) -> int:
        m = _LEADING_INT_RX.match(value)
        if not m:
            return default
        n = int(m.group(0))
        return n if n > 0 else default

    return parse


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="b4x-search",
        description="B4X Forum Search Tool: search the B4X community forums and print parsed results.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("query", nargs="?", help="Search query")
    parser.add_argument(
        "--limit",
        "-l",
        nargs="?",
        type=_lenient_limit(settings.default_limit),
        const=settings.default_limit,
        default=settings.default_limit,
        help=f"Maximum results (default: {settings.default_limit})",
    )
    parser.add_argument("--json", "-j", dest="json_output", action="store_true", help="Output raw JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests to stderr")
    return parser


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def print_text(response: SearchResponse, fallback_site: str) -> int:
    if isinstance(response, SearchFailure):
        print(f"\nError: {response.error}")
        if response.google_fallback:
            print(f"\nGoogle fallback: {response.google_fallback}")
        return 1

    print(f"\n=== B4X Forum Search: '{response.query}' ===")
    print(f"Found {response.result_count} results\n")
    for i, r in enumerate(response.results, start=1):
        print(f"{i}. {r.title}")
        print(f"   URL: {r.url}")
        if r.author:
            date = f" | Date: {r.date}" if r.date else ""
            print(f"   Author: {r.author}{date}")
        if r.forum:
            print(f"   Forum: {r.forum}")
        if r.snippet:
            print(f"   Preview: {r.snippet[:PREVIEW_CHARS]}...")
        print("")

    if not response.results:
        print(f"No results found. Try Google:\n{google_fallback_url(response.query, fallback_site)}")
    return 0


async def cmd_search(args: argparse.Namespace, settings: Settings) -> int:
    try:
        forum = load_forum_config(settings.forum_config_path)
    except (OSError, yaml.YAMLError) as e:
        print(f"Error: could not read forum config: {e}", file=sys.stderr)
        return 1
    response = await search_forum(args.query, args.limit, settings=settings, forum=forum)
    if args.json_output:
        print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
        return 0
    return print_text(response, forum.fallback_site)


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1
    parser = build_parser(settings)
    # Unknown flags are ignored rather than rejected.
    args, _unknown = parser.parse_known_args(argv)
    if not args.query:
        print("Error: No search query provided", file=sys.stderr)
        return 1
    _configure_logging(settings, args.verbose)
    return asyncio.run(cmd_search(args, settings))


if __name__ == "__main__":
    raise SystemExit(main())
