"""Page fetching with Playwright — one shared page, one board at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from playwright.sync_api import Page, sync_playwright

from jobdigest.config.defaults import (
    BROWSER_ARGS,
    DEFAULT_NAVIGATION_TIMEOUT_SECONDS,
)
from jobdigest.core.extractor import Candidate, extract_candidates

if TYPE_CHECKING:
    from jobdigest.config.settings import Settings
    from jobdigest.core.catalog import Query, QueryCatalog

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = DEFAULT_NAVIGATION_TIMEOUT_SECONDS * 1000


class BoardPage(Protocol):
    """The slice of ``playwright.sync_api.Page`` the fetcher drives."""

    def goto(self, url: str, **kwargs: Any) -> Any: ...

    def evaluate(self, expression: str, arg: Any = None) -> Any: ...


@dataclass(frozen=True)
class FetchResult:
    """Outcome for one board. ``error`` set means ``jobs`` is empty."""

    board: str
    url: str
    jobs: tuple[Candidate, ...] = field(default_factory=tuple)
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.jobs:
            raise ValueError(f"FetchResult for {self.board} has an error and jobs")

    @property
    def failed(self) -> bool:
        return self.error is not None


@contextmanager
def browser_session(settings: Settings) -> Iterator[Page]:
    """Launch headless Chromium and yield a single page.

    The browser is closed and the Playwright driver stopped on every exit
    path, including exceptions raised by the caller.
    """
    logger.info("Starting browser...")
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(
            headless=settings.headless,
            args=list(BROWSER_ARGS),
        )
        try:
            page = browser.new_page()
            yield page
        finally:
            browser.close()
            logger.info("Browser closed")


def fetch_board(
    query: Query,
    page: BoardPage,
    *,
    max_per_board: int,
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
) -> FetchResult:
    """Load one board and extract its candidates.

    Any failure is logged and recorded on the result instead of raised.
    """
    logger.info("Fetching %s | %s", query.name, query.url)
    try:
        page.goto(query.url, wait_until="domcontentloaded", timeout=timeout_ms)
        jobs = extract_candidates(page, max_per_board)
    except Exception as exc:
        message = str(exc) or type(exc).__name__
        logger.error("Error fetching %s: %s", query.name, message)
        return FetchResult(board=query.name, url=query.url, error=message)

    logger.info("  → %d candidates from %s", len(jobs), query.name)
    return FetchResult(board=query.name, url=query.url, jobs=tuple(jobs))


def fetch_all(
    catalog: QueryCatalog,
    page: BoardPage,
    *,
    max_per_board: int,
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
) -> list[FetchResult]:
    """Fetch every board in catalog order; one failure never stops the rest."""
    results = [
        fetch_board(
            query, page, max_per_board=max_per_board, timeout_ms=timeout_ms
        )
        for query in catalog
    ]
    failed = [r.board for r in results if r.failed]
    if failed:
        logger.warning("Boards with errors: %s", ", ".join(failed))
    return results
