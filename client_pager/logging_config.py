from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "CLIENT_PAGER_LOG_FORMAT"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


class PlainExtrasFormatter(logging.Formatter):
    """
    Plain-text formatter that appends the structured `extra` fields the views
    log (page, per_page, total_records, ...) as `key=value` pairs, so dev logs
    carry the same context as the JSON ones.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            k: v for k, v in vars(record).items()
            if k not in _RECORD_ATTRS and not k.startswith("_")
        }
        if not extras:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        head, sep, tail = line.partition("\n")
        return f"{head} | {pairs}{sep}{tail}"


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for hosts embedding the pager

    Modes:
    - JSON (default) in prod, extra fields become JSON keys
    - plain text (dev mode), extra fields are appended as key=value

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var CLIENT_PAGER_LOG_FORMAT
        3) default = "json"
    """

    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = PlainExtrasFormatter(PLAIN_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT)

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)
