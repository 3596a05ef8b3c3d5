"""Turn HTTP responses and HTML documents into readable text."""

from __future__ import annotations

import itertools
import json
import re
from collections.abc import Iterator
from typing import Any

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PageElement, PreformattedString

_CONTENT_TYPE_RE = re.compile(r"Content-Type:\s*([^\r\n]+)", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"[\t\n\f\r ]+")

_BREAK_BEFORE = frozenset(
    {"div", "p", "br", "li", "h1", "h2", "h3", "h4", "h5", "h6", "tr"}
)
_BREAK_AFTER = frozenset({"div", "p", "tr", "li", "h1", "h2", "h3", "h4", "h5", "h6"})
_SKIPPED_PARENTS = frozenset({"script", "style"})

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_JSON_ESCAPE_RE = re.compile("[<>&\u2028\u2029]")


def _is_text(node: Any) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _is_element(node: Any) -> bool:
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def _class_of(node: Tag) -> str | None:
    value = node.get("class")
    if isinstance(value, list):
        return " ".join(value)
    return value


def _self_and_descendants(node: PageElement) -> Iterator[PageElement]:
    return itertools.chain((node,), getattr(node, "descendants", ()))


def parse_html(html_str: str) -> BeautifulSoup:
    """Parse an HTML document into a tree, keeping attributes as written."""
    return BeautifulSoup(html_str, "html.parser", multi_valued_attributes=None)


def process_response(raw_response: str) -> str:
    """Render a raw HTTP response according to its Content-Type."""
    headers, sep, body = raw_response.partition("\r\n\r\n")
    if not sep:
        headers, sep, body = raw_response.partition("\n\n")
        if not sep:
            return raw_response

    match = _CONTENT_TYPE_RE.search(headers)
    content_type = match.group(1).lower() if match else ""

    if "application/json" in content_type:
        return format_json(body)
    if "text/html" in content_type:
        return extract_text_from_html(body)
    return body.strip()


def format_json(json_str: str) -> str:
    """Pretty-print a JSON document; return it unchanged if it is not valid."""
    try:
        value = json.loads(json_str)
    except ValueError:
        return json_str
    pretty = json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
    return _JSON_ESCAPE_RE.sub(lambda m: _JSON_ESCAPES[m.group(0)], pretty)


def extract_text_from_html(html_str: str) -> str:
    """Return the visible text of an HTML document with whitespace collapsed."""
    try:
        doc = parse_html(html_str)
    except ParserRejectedMarkup:
        return _TAG_RE.sub(" ", html_str).strip()
    return _SPACE_RE.sub(" ", extract_text(doc)).strip()


def _text_pieces(node: PageElement) -> Iterator[str]:
    if _is_text(node):
        parent = node.parent
        if parent is None or parent.name not in _SKIPPED_PARENTS:
            yield str(node)
            yield " "
        return

    element = _is_element(node)
    if element and node.name in _BREAK_BEFORE:
        yield "\n"
    for child in getattr(node, "contents", ()):
        yield from _text_pieces(child)
    if element and node.name in _BREAK_AFTER:
        yield "\n"


def extract_text(node: PageElement) -> str:
    """Return the text under ``node``, with line breaks around block elements.

    Text inside ``script`` and ``style`` elements is left out.
    """
    return "".join(_text_pieces(node))


def extract_text_content(node: PageElement | None) -> str:
    """Return all text under ``node`` joined together and stripped."""
    if node is None:
        return ""
    return "".join(str(n) for n in _self_and_descendants(node) if _is_text(n)).strip()


def find_parent_by_tag_name(node: PageElement | None, tag_name: str) -> Tag | None:
    """Return the nearest ancestor element named ``tag_name``."""
    if node is None:
        return None
    current = node.parent
    while current is not None:
        if _is_element(current) and current.name == tag_name:
            return current
        current = current.parent
    return None


def find_next_sibling(node: PageElement | None) -> Tag | None:
    """Return the next sibling that is an element, skipping text and comments."""
    if node is None:
        return None
    current = node.next_sibling
    while current is not None:
        if _is_element(current):
            return current
        current = current.next_sibling
    return None


def find_element_by_class(node: PageElement | None, class_name: str) -> Tag | None:
    """Return the first element at or under ``node`` whose class is exactly ``class_name``."""
    if node is None:
        return None
    for candidate in _self_and_descendants(node):
        if _is_element(candidate) and _class_of(candidate) == class_name:
            return candidate
    return None