"""Query catalog — the boards to search, in digest order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from jobdigest.config.defaults import DEFAULT_QUERIES


@dataclass(frozen=True)
class Query:
    """A named job board search page."""

    name: str
    url: str


QueryCatalog = tuple[Query, ...]


def build_catalog(entries: Iterable[tuple[str, str]]) -> QueryCatalog:
    """Turn ``(name, url)`` pairs into an immutable catalog, preserving order."""
    return tuple(Query(name=name, url=url) for name, url in entries)


def default_catalog() -> QueryCatalog:
    return build_catalog(DEFAULT_QUERIES)
