"""Command-line entry point for the daily job digest."""

from __future__ import annotations

import logging
import sys

from pydantic import ValidationError

from jobdigest.config import get_settings
from jobdigest.workflows.digest import DigestWorkflow

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(level: str = "INFO") -> None:
    """Progress to stdout, warnings and errors to stderr."""
    formatter = logging.Formatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError:
        setup_logging()
        logger.exception("Invalid configuration")
        return 1

    setup_logging(settings.log_level)
    return DigestWorkflow(settings).run()


if __name__ == "__main__":
    sys.exit(main())
