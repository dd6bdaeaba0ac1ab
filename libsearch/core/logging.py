from __future__ import annotations

import logging
import sys
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s]: %(message)s"

# Set per inbound request; worker tasks inherit it when they are created
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

# Attributes every LogRecord has; anything else came in through ``extra=``
_RESERVED = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
    "request_id",
    "taskName",
}

_configured = False


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class FieldsFormatter(logging.Formatter):
    """Append ``extra=`` fields to the line as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if not fields:
            return line
        return line + " " + " ".join(f"{k}={v}" for k, v in sorted(fields.items()))


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout at the configured level.

    Safe to call more than once; only the level is updated after the first call.
    """
    global _configured

    root = logging.getLogger("libsearch")
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(FieldsFormatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)
    root.propagate = False
    _configured = True
