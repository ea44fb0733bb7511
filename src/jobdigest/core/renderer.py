"""HTML digest rendering."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from html import escape
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from jobdigest.config.defaults import (
    DEFAULT_TIMEZONE,
    DIGEST_FOOTER,
    DIGEST_HEADING,
    EMPTY_NOTICE,
)

if TYPE_CHECKING:
    from jobdigest.core.aggregator import AggregatedJob


def _localize(now: datetime | None, tz_name: str) -> datetime:
    """Convert *now* (default: current time) into *tz_name*.

    Naive datetimes are taken as system local time.
    """
    current = now if now is not None else datetime.now(timezone.utc)
    return current.astimezone(ZoneInfo(tz_name))


def format_date(now: datetime | None = None, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """Indian English numeric date, e.g. ``5/3/2026``."""
    local = _localize(now, tz_name)
    return f"{local.day}/{local.month}/{local.year}"


def format_timestamp(
    now: datetime | None = None, tz_name: str = DEFAULT_TIMEZONE
) -> str:
    """Indian English date and 12-hour time, e.g. ``5/3/2026, 7:05:09 am``."""
    local = _localize(now, tz_name)
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{format_date(local, tz_name)}, {hour}:{local:%M:%S} {meridiem}"


def _render_item(job: AggregatedJob) -> str:
    return (
        f"<li><strong>{escape(job.title)}</strong> — "
        f"<em>{escape(job.board)}</em> — "
        f'<a href="{escape(job.href, quote=True)}">Link</a></li>'
    )


def build_html(
    jobs: Sequence[AggregatedJob] | None,
    *,
    now: datetime | None = None,
    tz_name: str = DEFAULT_TIMEZONE,
) -> str:
    """Render the digest body.

    An empty *jobs* renders an explicit notice instead of a list. Scraped
    text is HTML-escaped. The footer is always present.
    """
    heading = DIGEST_HEADING.format(timestamp=format_timestamp(now, tz_name))
    parts = [f"<h2>{escape(heading)}</h2>"]

    if not jobs:
        parts.append(f"<p>{escape(EMPTY_NOTICE)}</p>")
    else:
        parts.append("<ul>")
        parts.extend(_render_item(job) for job in jobs)
        parts.append("</ul>")

    parts.append(f"<p>{escape(DIGEST_FOOTER)}</p>")
    return "".join(parts)
