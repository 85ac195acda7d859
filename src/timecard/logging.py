"""Package logger.

Entry points (CLI, API) import ``logger`` from here; library modules use
``logging.getLogger(__name__)`` and inherit this configuration.
"""
from __future__ import annotations
import logging
import sys
import uuid

from timecard.config import settings

_RUN_ID = uuid.uuid4().hex[:8]


def get_run_id() -> str:
    """Identifier for this process, stamped on every log record."""
    return _RUN_ID


class _RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID
        return True


def _configure() -> logging.Logger:
    log = logging.getLogger("timecard")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(run_id)s] %(levelname)s %(name)s: %(message)s"
        ))
        handler.addFilter(_RunIdFilter())
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = _configure()
