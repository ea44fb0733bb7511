"""Default constants for job-digest.

The query catalog is edited here by the operator; everything else is
overridable via environment variables.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Query Catalog
# (board name, search URL) in the order boards appear in the digest.
# RSS feeds or official APIs are more reliable than scraping where available.
# ---------------------------------------------------------------------------
DEFAULT_QUERIES: tuple[tuple[str, str], ...] = (
    ("Wellfound", "https://wellfound.com/jobs?term=react+native+entry+level"),
    ("Indeed", "https://in.indeed.com/jobs?q=entry+level+react+native&l=India"),
)

# ---------------------------------------------------------------------------
# Keywords
# Parsed from KEYWORDS (comma-separated). Only applied when
# KEYWORD_FILTER_ENABLED=true.
# ---------------------------------------------------------------------------
DEFAULT_KEYWORDS: tuple[str, ...] = (
    "entry level",
    "junior",
    "fresher",
    "0-2 years",
    "react native",
    "web developer",
)

# ---------------------------------------------------------------------------
# Caps
# ---------------------------------------------------------------------------
DEFAULT_MAX_PER_BOARD: int = 6
DEFAULT_MAX_TOTAL: int = 20

# ---------------------------------------------------------------------------
# Browser
# ---------------------------------------------------------------------------
DEFAULT_NAVIGATION_TIMEOUT_SECONDS: float = 30.0
BROWSER_ARGS: tuple[str, ...] = ("--no-sandbox", "--disable-setuid-sandbox")

# ---------------------------------------------------------------------------
# Digest
# ---------------------------------------------------------------------------
DEFAULT_TIMEZONE: str = "Asia/Kolkata"

DIGEST_HEADING: str = "Daily Job Roundup — {timestamp}"
DIGEST_SUBJECT: str = "Daily job roundup — {date}"
EMPTY_NOTICE: str = "No jobs found for configured queries/keywords."
DIGEST_FOOTER: str = (
    "Sources searched: configured job boards. "
    "(Consider using official APIs or RSS for reliable results.)"
)
