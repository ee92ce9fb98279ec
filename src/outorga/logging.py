"""Package logger. One configuration per process; the run id tags every line."""
from __future__ import annotations
import logging
import sys
import uuid
from outorga.config import settings

_RUN_ID = uuid.uuid4().hex[:12]


class _RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID
        return True


def get_run_id() -> str:
    return _RUN_ID


def _configure() -> logging.Logger:
    log = logging.getLogger("outorga")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [%(run_id)s] %(name)s: %(message)s"
        ))
        handler.addFilter(_RunIdFilter())
        log.addHandler(handler)
    log.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    return log


logger = _configure()

__all__ = ["logger", "get_run_id"]
