"""Standalone CLI for a single tag lookup.

Usage::

    python -m radio_browser.cli.search jazz
    python -m radio_browser.cli.search "drum and bass" --limit 20 --json
    python -m radio_browser.cli.search rock --base-url https://fi1.api.radio-browser.info

Stations are printed to stdout; log lines go to stderr.  Exits with 0 on
success and 1 when the lookup fails with a transport or API error.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from radio_browser.config.settings import Settings
from radio_browser.models.station import RadioStation
from radio_browser.utils.errors import RadioBrowserError
from radio_browser.utils.logging import configure_logging

_DEFAULT_LIMIT = 10


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _format_text_output(tag: str, stations: list[RadioStation]) -> str:
    if not stations:
        return f"No stations found for tag '{tag}'."

    lines: list[str] = []
    sep = "=" * 60
    lines.append(sep)
    lines.append(f"  {len(stations)} station(s) tagged '{tag}'")
    lines.append(sep)

    for index, station in enumerate(stations, start=1):
        votes = station.votes if station.votes is not None else "-"
        lines.append(f"{index:>3}. {station.name}")
        lines.append(f"     {station.url}")
        details = [f"votes: {votes}"]
        if station.country:
            details.append(f"country: {station.country}")
        if station.tags:
            details.append(f"tags: {station.tags}")
        lines.append(f"     {'  |  '.join(details)}")

    return "\n".join(lines)


def _format_json_output(stations: list[RadioStation]) -> str:
    return json.dumps([station.model_dump() for station in stations], indent=2, ensure_ascii=False)


async def _run(args: argparse.Namespace, app_settings: Settings) -> int:
    # Deferred so that logging is configured before any provider module
    # binds its logger.
    from radio_browser.main import build_client

    async with build_client(app_settings) as client:
        try:
            stations = await client.search_by_tag(args.tag, args.limit)
        except RadioBrowserError as exc:
            print(f"Error ({exc.kind.value.lower()}): {exc}", file=sys.stderr)
            return 1

    if args.json_output:
        print(_format_json_output(stations))
    else:
        print(_format_text_output(args.tag, stations))
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m radio_browser.cli.search",
        description="Search the radio-browser directory for stations by tag.",
    )
    parser.add_argument("tag", type=str, help="Tag to search for, e.g. 'jazz'.")
    parser.add_argument(
        "--limit", "-n",
        type=_positive_int,
        default=_DEFAULT_LIMIT,
        help=f"Maximum number of stations to return (default: {_DEFAULT_LIMIT}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output stations as a JSON array.",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Directory server to query (overrides RADIO_BROWSER_BASE_URL).",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit code."""
    args = _build_parser().parse_args(argv)

    app_settings = Settings()
    if args.base_url:
        app_settings = app_settings.model_copy(update={"base_url": args.base_url})

    configure_logging(
        log_level="WARNING" if args.quiet else app_settings.log_level,
        json_output=app_settings.app_env == "production",
    )
    return asyncio.run(_run(args, app_settings))


if __name__ == "__main__":
    sys.exit(main())
