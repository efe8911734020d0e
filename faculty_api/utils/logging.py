"""Logging setup for the faculty API.

In production every record is one line of key="value" pairs, so request
context passed through ``extra`` (teacher IDs, failing model, database error
text) can be grepped and parsed. Other environments use a readable format.
"""

import logging
import sys
from typing import Any, Dict

from faculty_api.config import get_settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

# Third-party loggers and the level below which they stay quiet
_LIBRARY_LEVELS = {
    "uvicorn": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "alembic": logging.INFO,
}


class StructuredFormatter(logging.Formatter):
    """One key="value" line per record, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        fields: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)

        return " ".join(f'{key}="{_quote(value)}"' for key, value in fields.items())


def _quote(value: Any) -> str:
    # Escaped so a value never ends its pair early or spills onto a new line
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return text.replace("\n", "\\n")


def setup_logging() -> None:
    """Send all logging to stdout through a single handler.

    Safe to call more than once: earlier root handlers are replaced, not
    stacked.
    """
    settings = get_settings()

    if settings.is_production:
        formatter: logging.Formatter = StructuredFormatter(datefmt=DATE_FORMAT)
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt=DATE_FORMAT,
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(settings.log_level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(settings.log_level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)

    for name, level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).info(
        "Faculty API logging ready",
        extra={"log_level": settings.log_level, "environment": settings.environment},
    )
