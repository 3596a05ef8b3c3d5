"""Open a URL in the system's default web browser."""

from __future__ import annotations

import subprocess
import sys


def browser_command(url: str, platform: str) -> list[str]:
    """Return the command line that opens ``url`` on ``platform``."""
    if platform.startswith("win"):
        return ["rundll32", "url.dll,FileProtocolHandler", url]
    if platform == "darwin":
        return ["open", url]
    return ["xdg-open", url]


def open_browser(url: str) -> subprocess.Popen:
    """Start the default browser on ``url`` without waiting for it."""
    return subprocess.Popen(browser_command(url, sys.platform))