"""Site-agnostic candidate extraction from rendered job board pages.

The page side only collects raw anchors; all filtering happens in
``select_candidates`` so it can run (and be tested) without a browser.
The heuristic picks up navigation and footer links too.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)

# Titles must be longer than this after trimming.
MIN_TITLE_EXCLUSIVE = 5

# Evaluated inside the page. ``a.href`` is already resolved to an absolute URL.
ANCHOR_SCRIPT = """
() => Array.from(document.querySelectorAll('a')).map(a => ({
    title: (a.innerText || a.getAttribute('title') || '').trim(),
    href: a.href || ''
}))
"""


class ScriptPage(Protocol):
    """The slice of ``playwright.sync_api.Page`` the extractor needs."""

    def evaluate(self, expression: str, arg: Any = None) -> Any: ...


@dataclass(frozen=True)
class Candidate:
    """A title/link pair that may be a job posting."""

    title: str
    href: str


def select_candidates(
    anchors: Iterable[Mapping[str, Any]], max_count: int
) -> list[Candidate]:
    """Filter raw anchors down to at most *max_count* candidates.

    Drops anchors with an empty href or a title of 5 characters or fewer,
    keeps the first occurrence of each href, preserves document order.
    """
    if max_count <= 0:
        return []

    seen: set[str] = set()
    result: list[Candidate] = []
    for anchor in anchors:
        title = str(anchor.get("title") or "").strip()
        href = str(anchor.get("href") or "").strip()
        if not href or len(title) <= MIN_TITLE_EXCLUSIVE:
            continue
        if href in seen:
            continue
        seen.add(href)
        result.append(Candidate(title=title, href=href))
        if len(result) >= max_count:
            break
    return result


def extract_candidates(page: ScriptPage, max_count: int) -> list[Candidate]:
    """Collect anchors from the rendered *page* and select candidates."""
    anchors = page.evaluate(ANCHOR_SCRIPT) or []
    logger.debug("Collected %d raw anchors", len(anchors))
    return select_candidates(anchors, max_count)
