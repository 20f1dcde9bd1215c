"""Structured Logging — logfmt and JSON formatters plus root handler setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Call fields (method, input, output, err, took) surfaced when present
    - One line per record, safe for concurrent writers (logging.Handler locks)

Design Decisions:
    - logfmt default: key=value lines, greppable and scrape-friendly
    - Formatters over third-party libs: stdlib logging is already thread safe
    - setup_logging owns exactly one root handler; reconfiguring swaps it
"""

import json
import logging
from enum import Enum
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "method", "input", "output", "err", "took", "error_code", "path",
)


def _extra_fields(record: logging.LogRecord) -> dict:
    fields = {}
    for key in EXTRA_FIELDS:
        if key in record.__dict__:
            fields[key] = record.__dict__[key]
    return fields


def _logfmt_value(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    text = str(value.value) if isinstance(value, Enum) else str(value)
    if text == "" or any(c in text for c in ' ="\\\n\t'):
        return json.dumps(text, ensure_ascii=False)
    return text


class LogfmtFormatter(logging.Formatter):
    """Format logs as logfmt key=value lines."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("ts", datetime.now(timezone.utc).isoformat()),
            ("level", record.levelname.lower()),
            ("logger", record.name),
            ("msg", record.getMessage()),
        ]
        pairs.extend(_extra_fields(record).items())
        line = " ".join(f"{key}={_logfmt_value(val)}" for key, val in pairs)
        if record.exc_info:
            line += " exception=" + _logfmt_value(self.formatException(record.exc_info))
        return line


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_extra_fields(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


_installed_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "logfmt"):
    """Configure logging for the application.

    Handlers installed by others are left alone; the handler installed by a
    previous call is replaced so the latest format wins.
    """
    global _installed_handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    elif fmt == "logfmt":
        handler.setFormatter(LogfmtFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    _installed_handler = handler
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
