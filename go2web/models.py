"""Data types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """One entry of a search engine's result list."""

    title: str
    url: str
    description: str = ""