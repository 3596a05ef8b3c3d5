"""A small HTTP/1.1 client over raw sockets that follows redirects."""

from __future__ import annotations

import re
import socket
import ssl
from dataclasses import dataclass
from typing import BinaryIO

from go2web.htmltext import process_response

MAX_REDIRECTS = 5

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/135.0.0.0 Safari/537.36"
)
ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
ACCEPT_LANGUAGE = "en-US,en;q=0.5"

_STATUS_RE = re.compile(r"HTTP/[\d.]+\s+(\d+)")
_PORT_RE = re.compile(r"\s*([+-]?\d+)")


class RequestError(Exception):
    """Raised when a request cannot be made or its response cannot be read."""


@dataclass(frozen=True)
class ParsedURL:
    """The parts of a URL needed to open a connection and send a request."""

    scheme: str
    host: str
    path: str
    port: int


def parse_url(raw_url: str) -> ParsedURL:
    """Split a URL into scheme, host, path and port; plain hosts default to http."""
    if raw_url.startswith("https://"):
        scheme, port, rest = "https", 443, raw_url[len("https://"):]
    elif raw_url.startswith("http://"):
        scheme, port, rest = "http", 80, raw_url[len("http://"):]
    else:
        scheme, port, rest = "http", 80, raw_url

    host, sep, tail = rest.partition("/")
    path = "/" + tail if sep else "/"

    if ":" in host:
        host, _, port_text = host.partition(":")
        match = _PORT_RE.match(port_text)
        if match:
            port = int(match.group(1))

    return ParsedURL(scheme=scheme, host=host, path=path, port=port)


def build_request(path: str, host: str) -> str:
    """Return the GET request sent for ``path`` on ``host``."""
    return (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Connection: close\r\n"
        f"User-Agent: {USER_AGENT}\r\n"
        f"Accept: {ACCEPT}\r\n"
        f"Accept-Language: {ACCEPT_LANGUAGE}\r\n\r\n"
    )


def resolve_location(location: str, scheme: str, host: str, path: str) -> str:
    """Turn a redirect's Location value into an absolute URL."""
    if location.startswith("http"):
        return location
    if location.startswith("/"):
        return f"{scheme}://{host}{location}"
    cut = path.rfind("/")
    base_path = path[: cut + 1] if cut != -1 else "/"
    return f"{scheme}://{host}{base_path}{location}"


def _connect(target: ParsedURL) -> socket.socket:
    try:
        sock = socket.create_connection((target.host, target.port))
    except OSError as exc:
        raise RequestError(f"error connecting to {target.host}: {exc}") from exc
    if target.scheme != "https":
        return sock
    try:
        context = ssl.create_default_context()
        return context.wrap_socket(sock, server_hostname=target.host)
    except OSError as exc:
        sock.close()
        raise RequestError(f"error connecting to {target.host}: {exc}") from exc


def _read_line(stream: BinaryIO, what: str) -> str:
    try:
        line = stream.readline()
    except OSError as exc:
        raise RequestError(f"error reading {what}: {exc}") from exc
    if not line.endswith(b"\n"):
        raise RequestError(f"error reading {what}: EOF")
    return line.decode("utf-8", errors="replace")


def make_request(url: str, process_html: bool = True, redirect_count: int = 0) -> str:
    """Fetch ``url`` and return its body, or its rendered text if ``process_html``.

    Redirects are followed up to ``MAX_REDIRECTS`` times.
    """
    if redirect_count > MAX_REDIRECTS:
        raise RequestError(f"Too many redirects, max number is {MAX_REDIRECTS}")

    target = parse_url(url)
    location: str | None = None

    with _connect(target) as sock:
        try:
            sock.sendall(build_request(target.path, target.host).encode("utf-8"))
        except OSError as exc:
            raise RequestError(f"failed to send request: {exc}") from exc

        with sock.makefile("rb") as stream:
            status_line = _read_line(stream, "status line")
            head = [status_line]
            match = _STATUS_RE.search(status_line)
            status_code = int(match.group(1)) if match else 0

            headers: dict[str, str] = {}
            while True:
                line = _read_line(stream, "header")
                head.append(line)
                stripped = line.strip()
                if not stripped:
                    break
                name, sep, value = stripped.partition(":")
                if sep:
                    headers[name.strip().lower()] = value.strip()

            if 300 <= status_code < 400 and "location" in headers:
                location = headers["location"]
            else:
                try:
                    data = stream.read()
                except OSError as exc:
                    raise RequestError(f"error reading response: {exc}") from exc

    if location is not None:
        print(f"Following redirect to: {location}")
        next_url = resolve_location(location, target.scheme, target.host, target.path)
        return make_request(next_url, process_html, redirect_count + 1)

    # Only complete lines make it into the body; a trailing fragment is dropped.
    body = data[: data.rfind(b"\n") + 1].decode("utf-8", errors="replace")
    if not process_html:
        return body
    return process_response("".join(head) + body)