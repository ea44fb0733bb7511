"""Send a sample digest to TO_EMAIL without launching a browser.

Checks SMTP settings end to end before wiring up the scheduler.

Usage:
    uv run python scripts/send_test_digest.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure src/ is on sys.path when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from jobdigest.config.settings import get_settings  # noqa: E402
from jobdigest.core.aggregator import AggregatedJob  # noqa: E402
from jobdigest.core.mailer import MailDeliveryError, send_digest  # noqa: E402
from jobdigest.core.renderer import build_html  # noqa: E402

# ── Sample postings to simulate a real run ───────────────────────────────────
SAMPLE_JOBS = [
    AggregatedJob(
        board="Wellfound",
        title="[TEST] Junior React Native Developer",
        href="https://example.com/jobs/1",
    ),
    AggregatedJob(
        board="Indeed",
        title="[TEST] Entry Level Web Developer",
        href="https://example.com/jobs/2",
    ),
]


def main() -> int:
    settings = get_settings()

    print("=" * 60)
    print("TEST DIGEST")
    print("=" * 60)
    print(f"To:   {settings.to_email}")
    print(f"From: {settings.from_email}")
    print(f"SMTP: {settings.smtp_host}:{settings.smtp_port} (secure={settings.smtp_secure})")
    print()

    html = build_html(SAMPLE_JOBS, tz_name=settings.digest_timezone)
    print(html)
    print("-" * 60)

    try:
        message_id = send_digest(html, settings)
    except MailDeliveryError as exc:
        print(f"✗ Failed to send: {exc}")
        return 1

    print(f"✓ Digest sent. MessageId: {message_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
