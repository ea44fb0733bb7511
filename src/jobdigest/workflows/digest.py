"""Digest workflow — one pass of fetch, aggregate, render and mail."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jobdigest.core.aggregator import aggregate, filter_by_keywords
from jobdigest.core.catalog import default_catalog
from jobdigest.core.fetcher import browser_session, fetch_all
from jobdigest.core.mailer import send_digest
from jobdigest.core.renderer import build_html

if TYPE_CHECKING:
    from jobdigest.config.settings import Settings
    from jobdigest.core.aggregator import AggregatedJob
    from jobdigest.core.catalog import QueryCatalog

logger = logging.getLogger(__name__)


class DigestWorkflow:
    """Sequential pipeline over an explicit query catalog."""

    def __init__(
        self, settings: Settings, catalog: QueryCatalog | None = None
    ) -> None:
        self.settings = settings
        self.catalog: QueryCatalog = (
            catalog if catalog is not None else default_catalog()
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Execute the full pipeline. Returns 0 on success, 1 on fatal error.

        Failed boards and an empty digest still count as success.
        """
        try:
            logger.info("Starting job fetch...")
            jobs = self._collect()
            logger.info("Found %d job links.", len(jobs))

            html = build_html(jobs, tz_name=self.settings.digest_timezone)

            if self.settings.dry_run:
                logger.info("[DRY RUN] Digest not sent:\n%s", html)
                return 0

            logger.info("Sending email...")
            message_id = send_digest(html, self.settings)
            logger.info("Email sent. MessageId: %s", message_id)
        except Exception:
            logger.exception("Fatal error")
            return 1

        return 0

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _collect(self) -> list[AggregatedJob]:
        with browser_session(self.settings) as page:
            results = fetch_all(
                self.catalog,
                page,
                max_per_board=self.settings.max_per_board,
                timeout_ms=self.settings.navigation_timeout_ms,
            )

        if self.settings.keyword_filter_enabled:
            results = filter_by_keywords(results, self.settings.keywords)

        return aggregate(results, self.settings.max_total)
