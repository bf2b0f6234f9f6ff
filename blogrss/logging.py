"""Logging configuration for the blog RSS bridge."""

import json
import logging
import sys

from blogrss.config import get_settings

# Third-party loggers that log every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")

# Attributes passed through ``extra=`` that are copied into JSON records
_CONTEXT_FIELDS = ("url",)


class JsonFormatter(logging.Formatter):
    """JSON formatter for production logging.

    Besides level, logger and message, each record carries the upstream
    ``url`` it concerns (when logged with ``extra={"url": ...}``) and, for
    failures, the exception type and traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON line."""
        base = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in _CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                base[field] = value
        if record.exc_info:
            base["exc_type"] = record.exc_info[0].__name__
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def setup_logging() -> None:
    """Configure root logging from the ``env`` and ``log_level`` settings."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
