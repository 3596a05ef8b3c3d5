# go2web

A small command-line web client. It sends HTTP/1.1 `GET` requests over plain
sockets (with TLS for `https://`), follows up to five redirects, and prints
the response in a readable form:

- `text/html` responses are reduced to their visible text: `script` and
  `style` contents are dropped, block elements get line breaks, and all
  whitespace is then collapsed to single spaces.
- `application/json` responses are pretty-printed with two-space indentation
  and sorted keys.
- Anything else is printed as-is, with surrounding whitespace trimmed.

It can also search the web through DuckDuckGo's lite interface, list the top
ten results, and open one of them in your default browser.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
go2web -u <URL>          # fetch the URL and print the response
go2web -s <search-term>  # search and print the top 10 results
go2web -h                # show help
```

Running `go2web` with no options also prints the help. A URL without a scheme
is fetched over `http://`. A port may be given after the host, e.g.
`go2web -u localhost:8080/status`. Each redirect that is followed is reported
as `Following redirect to: <location>`.

After a search, the results are listed as:

```
1. Result title
  Short description of the page
   URL: https://example.com/page
```

You are then asked for a number; entering one in the range of the listed
results opens that result in the default browser (`xdg-open` on Linux,
`open` on macOS, `rundll32` on Windows). Pressing Enter exits; anything else
prints `Invalid selection.`

On a network failure, too many redirects, or a search with no results, the
command prints `Error: <message>` to standard error and exits with status 1.

## Library use

The pieces are also usable from Python:

```python
from go2web.client import make_request, parse_url
from go2web.htmltext import extract_text_from_html, format_json
from go2web.search import search_term

print(parse_url("https://example.com:8443/docs"))
# ParsedURL(scheme='https', host='example.com', path='/docs', port=8443)

print(extract_text_from_html("<p>Hello <b>world</b></p>"))
# Hello world

print(format_json('{"b": 1, "a": [1, 2]}'))

raw_body = make_request("example.com", process_html=False)

for result in search_term("python sockets"):
    print(result.title, result.url, result.description)
```

- `go2web.client` — `parse_url`, `build_request`, `resolve_location`,
  `make_request`, and the `ParsedURL` and `RequestError` types.
- `go2web.htmltext` — `process_response`, `format_json`,
  `extract_text_from_html`, and helpers for walking parsed HTML
  (`parse_html`, `extract_text`, `extract_text_content`,
  `find_parent_by_tag_name`, `find_next_sibling`, `find_element_by_class`).
- `go2web.search` — `search_term`, `parse_search_results`,
  `extract_actual_url`, and `SearchError`.
- `go2web.models` — the `SearchResult` dataclass (`title`, `url`,
  `description`).
- `go2web.browser` — `browser_command` and `open_browser`.

Request failures raise `go2web.client.RequestError`; search failures raise
`go2web.search.SearchError`.

## Limitations

- Only `GET` requests are sent; there is no way to set a method, headers or
  a request body.
- The response body is read until the connection closes. Chunked transfer
  encoding and compressed bodies are not decoded, and any trailing data
  without a final newline is dropped.
- There is no caching and no cookie handling.