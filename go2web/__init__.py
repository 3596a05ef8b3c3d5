"""Command-line HTTP client with readable HTML/JSON output and DuckDuckGo search."""

__version__ = "0.1.0"