"""Web search through the DuckDuckGo lite front end."""

from __future__ import annotations

import logging
import re
from urllib.parse import quote_plus, unquote_plus

from bs4 import BeautifulSoup, Tag

from go2web.client import RequestError, make_request
from go2web.htmltext import (
    extract_text_content,
    find_element_by_class,
    find_next_sibling,
    find_parent_by_tag_name,
    parse_html,
)
from go2web.models import SearchResult

logger = logging.getLogger(__name__)

SEARCH_URL = "https://lite.duckduckgo.com/lite?q={}"
MAX_RESULTS = 10

_REDIRECT_MARKER = "duckduckgo.com/l/?uddg="
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class SearchError(Exception):
    """Raised when a search cannot be made or yields no results."""


def _class_of(node: Tag) -> str | None:
    value = node.get("class")
    if isinstance(value, list):
        return " ".join(value)
    return value


def search_term(term: str) -> list[SearchResult]:
    """Search for ``term`` and return at most ten results."""
    url = SEARCH_URL.format(quote_plus(term))
    try:
        response = make_request(url, False, 0)
    except RequestError as exc:
        raise SearchError(f"search request failed: {exc}") from exc

    results = parse_search_results(parse_html(response))[:MAX_RESULTS]
    if not results:
        raise SearchError("no search results found")
    return results


def _result_for_link(link: Tag, href: str) -> SearchResult | None:
    title = extract_text_content(link)
    result_row = find_parent_by_tag_name(link, "tr")
    if result_row is None:
        return None

    description = ""
    original_url = ""

    next_row = find_next_sibling(result_row)
    if next_row is not None:
        snippet = find_element_by_class(next_row, "result-snippet")
        if snippet is not None:
            description = extract_text_content(snippet)

    url_row = find_next_sibling(next_row)
    if url_row is not None:
        link_text = find_element_by_class(url_row, "link-text")
        if link_text is not None:
            original_url = extract_text_content(link_text)

    actual_url = extract_actual_url(href) or original_url
    if not title or not actual_url:
        return None
    return SearchResult(title=title, url=actual_url, description=description)


def parse_search_results(doc: BeautifulSoup) -> list[SearchResult]:
    """Collect the results listed on a DuckDuckGo lite result page."""
    results = []
    for link in doc.find_all("a"):
        href = link.get("href") or ""
        if _class_of(link) != "result-link" or not href:
            continue
        result = _result_for_link(link, href)
        if result is not None:
            results.append(result)

    if not results:
        logger.warning("No Results found.")
    return results


def extract_actual_url(ddg_url: str) -> str:
    """Return the target of a DuckDuckGo redirect link, or the link itself."""
    if _REDIRECT_MARKER in ddg_url:
        encoded = ddg_url.split("uddg=")[1]
        cut = encoded.find("&")
        if cut > 0:
            encoded = encoded[:cut]
        if not _BAD_ESCAPE_RE.search(encoded):
            return unquote_plus(encoded)

    if not ddg_url.startswith("//"):
        return ddg_url
    return "https:" + ddg_url