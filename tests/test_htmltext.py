import json

from go2web.htmltext import (
    extract_text,
    extract_text_content,
    extract_text_from_html,
    find_element_by_class,
    find_next_sibling,
    find_parent_by_tag_name,
    format_json,
    parse_html,
    process_response,
)

TABLE = (
    "<table>"
    "<tr id='first'><td><a class='result-link' href='/x'>Title <b>One</b></a></td></tr>\n"
    "<!-- note -->\n"
    "<tr id='second'><td class='result-snippet'>  Snippet text </td></tr>"
    "<tr id='third'><td><span class='link-text'>example.com</span></td></tr>"
    "</table>"
)


def test_process_response_html_strips_tags_and_scripts():
    raw = (
        "HTTP/1.1 200 OK\r\nContent-Type: text/html; charset=utf-8\r\n\r\n"
        "<html><body><p>Hi <b>there</b></p><script>run()</script>"
        "<style>p{}</style></body></html>"
    )
    assert process_response(raw) == "Hi there"


def test_process_response_content_type_is_case_insensitive():
    raw = "HTTP/1.1 200 OK\r\ncontent-type: TEXT/HTML\r\n\r\n<div>a</div>"
    assert process_response(raw) == "a"


def test_process_response_json_is_pretty_printed():
    raw = 'HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n{"b":[1,2],"a":"x"}'
    result = process_response(raw)
    assert json.loads(result) == {"a": "x", "b": [1, 2]}
    assert "\n  " in result


def test_process_response_other_types_are_trimmed():
    raw = "HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n  plain body \n"
    assert process_response(raw) == "plain body"


def test_process_response_accepts_bare_newline_separator():
    raw = "HTTP/1.1 200 OK\nContent-Type: text/plain\n\n body "
    assert process_response(raw) == "body"


def test_process_response_without_separator_returns_input():
    raw = "HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n"
    assert process_response(raw) == raw


def test_format_json_sorts_keys_and_indents():
    result = format_json('{"b":1,"a":{"c":true}}')
    lines = result.splitlines()
    assert lines[0] == "{"
    assert lines[1].startswith('  "a"')
    assert json.loads(result) == {"a": {"c": True}, "b": 1}


def test_format_json_escapes_html_characters():
    result = format_json('{"k":"<a>&"}')
    assert "<" not in result and ">" not in result and "&" not in result
    assert json.loads(result) == {"k": "<a>&"}


def test_format_json_keeps_non_ascii_text():
    assert "é" in format_json('["café"]')


def test_format_json_invalid_returns_input():
    assert format_json("{not json") == "{not json"


def test_extract_text_breaks_around_blocks():
    assert extract_text(parse_html("<div>a</div><p>b</p>")) == "\na \n\nb \n"


def test_extract_text_skips_comments_and_script():
    text = extract_text(parse_html("<span>x<!-- hidden --><script>y</script></span>"))
    assert "hidden" not in text and "y" not in text
    assert "x" in text


def test_extract_text_from_html_collapses_whitespace():
    result = extract_text_from_html("<ul><li>one</li>\n\n<li>two\t three</li></ul>")
    assert result == "one two three"


def test_extract_text_from_html_decodes_entities():
    assert extract_text_from_html("<p>a &amp; b</p>") == "a & b"


def test_extract_text_content_joins_and_strips():
    doc = parse_html("<td>  A <b>B</b> <!-- c --></td>")
    assert extract_text_content(doc.td) == "A B"


def test_extract_text_content_of_none_is_empty():
    assert extract_text_content(None) == ""


def test_find_parent_by_tag_name_finds_row():
    doc = parse_html(TABLE)
    link = find_element_by_class(doc, "result-link")
    row = find_parent_by_tag_name(link, "tr")
    assert row["id"] == "first"


def test_find_parent_by_tag_name_missing_returns_none():
    doc = parse_html(TABLE)
    assert find_parent_by_tag_name(doc.a, "ul") is None
    assert find_parent_by_tag_name(None, "tr") is None


def test_find_next_sibling_skips_text_and_comments():
    doc = parse_html(TABLE)
    first = doc.find("tr")
    second = find_next_sibling(first)
    assert second["id"] == "second"
    assert find_next_sibling(second)["id"] == "third"


def test_find_next_sibling_at_end_returns_none():
    doc = parse_html(TABLE)
    last = doc.find("tr", id="third")
    assert find_next_sibling(last) is None
    assert find_next_sibling(None) is None


def test_find_element_by_class_needs_exact_match():
    doc = parse_html("<div class='a b'><span class='a'>x</span></div>")
    assert find_element_by_class(doc, "a b").name == "div"
    assert find_element_by_class(doc, "a").name == "span"
    assert find_element_by_class(doc, "b") is None


def test_find_element_by_class_includes_start_node():
    doc = parse_html(TABLE)
    cell = doc.find("td", class_="result-snippet")
    assert find_element_by_class(cell, "result-snippet") is cell
    assert extract_text_content(cell) == "Snippet text"


def test_find_element_by_class_none_input():
    assert find_element_by_class(None, "x") is None