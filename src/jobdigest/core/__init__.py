"""Core pipeline: fetch → extract → aggregate → render → mail."""

from jobdigest.core.aggregator import AggregatedJob, aggregate, filter_by_keywords
from jobdigest.core.catalog import Query, QueryCatalog, build_catalog, default_catalog
from jobdigest.core.extractor import Candidate, extract_candidates, select_candidates
from jobdigest.core.fetcher import FetchResult, browser_session, fetch_all, fetch_board
from jobdigest.core.mailer import MailDeliveryError, send_digest
from jobdigest.core.renderer import build_html

__all__ = [
    "AggregatedJob",
    "Candidate",
    "FetchResult",
    "MailDeliveryError",
    "Query",
    "QueryCatalog",
    "aggregate",
    "browser_session",
    "build_catalog",
    "build_html",
    "default_catalog",
    "extract_candidates",
    "fetch_all",
    "fetch_board",
    "filter_by_keywords",
    "select_candidates",
    "send_digest",
]
