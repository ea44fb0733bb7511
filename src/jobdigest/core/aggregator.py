"""Merge per-board results into one capped, board-tagged sequence."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from itertools import islice
from typing import TYPE_CHECKING

from jobdigest.utils.text_utils import contains_any_keyword

if TYPE_CHECKING:
    from jobdigest.core.fetcher import FetchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregatedJob:
    """A candidate tagged with the board it came from."""

    board: str
    title: str
    href: str


def filter_by_keywords(
    results: Sequence[FetchResult], keywords: Sequence[str]
) -> list[FetchResult]:
    """Keep only candidates whose title mentions one of *keywords*.

    Failed results pass through untouched. An empty keyword list keeps
    everything.
    """
    if not keywords:
        return list(results)

    filtered: list[FetchResult] = []
    for result in results:
        if result.failed:
            filtered.append(result)
            continue
        kept = tuple(j for j in result.jobs if contains_any_keyword(j.title, keywords))
        dropped = len(result.jobs) - len(kept)
        if dropped:
            logger.info("Keyword filter dropped %d from %s", dropped, result.board)
        filtered.append(replace(result, jobs=kept))
    return filtered


def aggregate(results: Sequence[FetchResult], max_total: int) -> list[AggregatedJob]:
    """Flatten in catalog order, then page order, and keep the first *max_total*.

    No re-sorting and no cross-board dedup: the same link listed by two
    boards appears twice.
    """
    flat = (
        AggregatedJob(board=result.board, title=job.title, href=job.href)
        for result in results
        for job in result.jobs
    )
    return list(islice(flat, max(max_total, 0)))
