"""Command-line front end: search directory trees for matching files."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, Sequence

from .engine import SearchEngine
from .filters import ContentsFilter, Filter, NameFilter
from .models import SearchResultModel
from .query import SearchQuery

__all__ = ["build_parser", "build_filters", "status_message", "main"]

_UPDATE_INTERVAL = 0.5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lightningsearch",
        description="Search directories for files by name and contents.",
    )
    parser.add_argument("directories", nargs="+", help="directories to search")
    parser.add_argument(
        "-n", "--name", action="append", default=[], metavar="TEXT",
        help="file name filter (may be given more than once)",
    )
    parser.add_argument(
        "-C", "--contents", action="append", default=[], metavar="TEXT",
        help="file contents filter (may be given more than once)",
    )
    parser.add_argument(
        "-c", "--case-sensitive", action="store_true",
        help="match case exactly",
    )
    parser.add_argument(
        "-w", "--whole-match", action="store_true",
        help="the whole name or contents must match",
    )
    parser.add_argument(
        "-r", "--regex", action="store_true",
        help="treat filter text as regular expressions",
    )
    parser.add_argument(
        "-j", "--workers", type=int, default=None,
        help="number of worker threads (default: number of CPUs)",
    )
    parser.add_argument(
        "-p", "--progress", action="store_true",
        help="report progress on standard error while searching",
    )
    return parser


def build_filters(args: argparse.Namespace) -> list[Filter]:
    """Create the name filters, then the contents filters, from parsed options."""
    options = dict(
        case_insensitive=not args.case_sensitive,
        whole_match=args.whole_match,
        is_regex=args.regex,
    )
    filters: list[Filter] = [NameFilter(text, **options) for text in args.name]
    filters.extend(ContentsFilter(text, **options) for text in args.contents)
    return filters


def status_message(engine: Optional[SearchEngine]) -> str:
    """Describe the progress of a search, or readiness when there is none."""
    if engine is None:
        return "Ready"
    pending = engine.pending_operations
    searched = f"Searched: {engine.total_files_searched}"
    matches = f"Matches: {engine.total_matches}"
    if pending == 0:
        return f"Search completed! {searched} | {matches}"
    total = f"Total files: {engine.total_files_to_search}"
    return f"Searching... {total} | {searched} | {matches}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")
    try:
        filters = build_filters(args)
    except re.error as error:
        parser.error(f"invalid regular expression: {error}")

    results = SearchResultModel()
    query = SearchQuery(directories=args.directories, filters=filters)
    query.add_result_observer(results)

    with SearchEngine(query, args.workers) as engine:
        engine.perform_search()
        while not engine.wait(_UPDATE_INTERVAL):
            if args.progress:
                print(status_message(engine), file=sys.stderr)
        final_status = status_message(engine)

    for path in results.results():
        print(path)
    print(final_status, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())