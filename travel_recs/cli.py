#!/usr/bin/env python3
"""
Travel Recs CLI — search the dataset, look up local times, or start the API server.

USAGE:
  python -m travel_recs.cli search japan                       # Cities in matching countries
  python -m travel_recs.cli search beach                       # All beaches
  python -m travel_recs.cli search "ancient temple" --json     # JSON output
  python -m travel_recs.cli search country --xlsx out.xlsx     # Excel export
  python -m travel_recs.cli search japan --source https://example.com/data.json

  python -m travel_recs.cli time "Tokyo, Japan"                # Current local time

  python -m travel_recs.cli serve                              # Start API server
  python -m travel_recs.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys

from travel_recs.config import DATA_SOURCE
from travel_recs.data.store import TravelSession
from travel_recs.errors import LoadError
from travel_recs.logging_setup import configure_logging
from travel_recs.render.base import Renderer
from travel_recs.render.text import TextRenderer
from travel_recs.render.views import build_error_view, build_results_view
from travel_recs.search.clock import current_time, timezone_for


def cmd_search(args) -> int:
    """Run one search and print (or export) the results."""
    session = TravelSession(source=args.source)
    text: Renderer = TextRenderer()

    try:
        result = asyncio.run(session.search(args.term))
    except LoadError as exc:
        error_view = build_error_view(exc)
        print(text.render_error(error_view), file=sys.stderr)
        if args.xlsx:
            from travel_recs.excel.writer import ExcelRenderer
            out = ExcelRenderer().save(error_view, args.xlsx)
            print(f"  Error report saved to: {out}", file=sys.stderr)
        return 1

    view = build_results_view(result)

    if args.xlsx:
        from travel_recs.excel.writer import ExcelRenderer
        out = ExcelRenderer().save(view, args.xlsx)
        print(f"  {result.count} result(s) saved to: {out}")
        return 0

    if args.json:
        payload = {
            "query": result.query,
            "normalized": result.normalized,
            "category": result.category_label,
            "count": result.count,
            "notice": view.notice,
            "items": [card.to_dict() for card in view.cards],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    print(text.render(view))
    return 0


def cmd_time(args) -> int:
    """Print the current local time for a known place."""
    now = current_time(args.place)
    if not now:
        print(f"  No timezone known for '{args.place}'", file=sys.stderr)
        return 1
    print(f"{args.place} ({timezone_for(args.place)}): {now}")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Travel Recs API on port {args.port}...")
    uvicorn.run("travel_recs.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Travel Recs — beach, temple, and city recommendations",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Search the dataset")
    search_parser.add_argument("term", help="beach | temple | country | a country name")
    search_parser.add_argument("--source", default=DATA_SOURCE, help="Data URL or path (default: bundled dataset)")
    output = search_parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print JSON instead of text cards")
    output.add_argument("--xlsx", metavar="PATH", help="Write results to an Excel workbook")
    search_parser.set_defaults(func=cmd_search)

    time_parser = subparsers.add_parser("time", help="Current local time for a place")
    time_parser.add_argument("place", help='Place name, e.g. "Tokyo, Japan"')
    time_parser.set_defaults(func=cmd_time)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
