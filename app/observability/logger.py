"""
observability/logger.py — Structured JSON logging.

Every log line is a single JSON object, so a chat transcript can be
reconstructed with grep / jq without parsing free text.

Example output:
{"ts": "2026-10-19T10:00:00+00:00", "level": "INFO", "logger": "app.responder.pipeline",
 "message": "reply_generated", "session_id": "abc", "rule": "template", "latency_ms": 2}
"""
import json
import logging
import time
from datetime import datetime, timezone

# Attributes every LogRecord carries; anything else came in through extra={...}
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """Formats every log record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Get a structured logger at the configured level.
    Usage:
        logger = get_logger(__name__)
        logger.info("cache_hit", extra={"session_id": "abc"})
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.setLevel(_configured_level())
        logger.propagate = False
    return logger


def _configured_level() -> int:
    # Imported lazily so config errors never prevent logging from coming up
    try:
        from app.config import get_settings
        name = get_settings().log_level.upper()
    except Exception:
        return logging.INFO
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


class Timer:
    """Context manager for measuring latency."""

    def __init__(self) -> None:
        self._start: float = 0.0
        self.elapsed_ms: int = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_) -> None:
        self.elapsed_ms = int((time.perf_counter() - self._start) * 1000)
