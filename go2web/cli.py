"""Command-line entry point: fetch a URL or search the web."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from contextlib import suppress

from go2web.browser import open_browser
from go2web.client import RequestError, make_request
from go2web.models import SearchResult
from go2web.search import SearchError, search_term

_NUMBER_RE = re.compile(r"[+-]?\d+")

HELP_TEXT = (
    "Usage of go2web:\n"
    "  go2web -u <URL>         # make an HTTP request to the specified URL and print the response\n"
    "  go2web -s <search-term> # make an HTTP request to search the term using a search engine "
    "and print top 10 results\n"
    "  go2web -h               # show this help"
)


def print_help() -> None:
    """Print usage information."""
    print(HELP_TEXT)


def format_results(results: Iterable[SearchResult]) -> str:
    """Render search results as a numbered list."""
    return "".join(
        f"{number}. {result.title}\n  {result.description}\n   URL: {result.url}\n\n"
        for number, result in enumerate(results, start=1)
    )


def handle_url_request(url: str) -> None:
    """Fetch ``url`` and print its rendered content."""
    print(make_request(url, True, 0))


def handle_search_request(term: str) -> None:
    """Search for ``term``, print the results and offer to open one."""
    results = search_term(term)
    print(format_results(results), end="")

    print(
        "Enter a number to open a result (1-10), or press Enter to exit: ",
        end="",
        flush=True,
    )
    choice = sys.stdin.readline().strip()
    if not choice:
        return

    if not _NUMBER_RE.fullmatch(choice) or not 1 <= int(choice) <= len(results):
        print("Invalid selection.")
        return

    selected = results[int(choice) - 1].url
    print(f"Opening: {selected}")
    with suppress(OSError):
        open_browser(selected)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="go2web", add_help=False)
    parser.add_argument("-u", dest="url", help="The URL to connect to.")
    parser.add_argument("-s", dest="search", help="The search term to look for.")
    parser.add_argument(
        "-h", dest="help", action="store_true", help="Display help information."
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.help or (args.url is None and args.search is None):
        print_help()
        return 0

    try:
        if args.url:
            handle_url_request(args.url)
        elif args.search:
            handle_search_request(args.search)
    except (RequestError, SearchError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())