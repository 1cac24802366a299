"""
Logging setup for the Interview Insights CLI.

``configure_logging()`` runs once per CLI command, before any payload is
read.  Library modules only ever do ``logger = logging.getLogger(__name__)``.

Every handler writes to stderr (or a file), so ``--format json`` output on
stdout can be piped straight into another tool.

With ``json_format = true`` under ``[logging]`` each record becomes one line::

    {"ts": "2026-05-04T09:12:33Z", "level": "INFO",
     "logger": "interview_insights.assembly.dashboard", "msg": "Dashboard assembled: ..."}

Keys passed through ``extra=`` are copied onto the same object.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from interview_insights.config import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_BUILTIN_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonLineFormatter(logging.Formatter):
    """One JSON object per record, timestamps in UTC."""

    converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "ts":     self.formatTime(record, TIMESTAMP_FORMAT),
            "level":  record.levelname,
            "logger": record.name,
            "msg":    record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _BUILTIN_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def _text_formatter() -> logging.Formatter:
    formatter = logging.Formatter(TEXT_FORMAT, datefmt=TIMESTAMP_FORMAT)
    formatter.converter = time.gmtime
    return formatter


def configure_logging(config: "LoggingConfig") -> None:
    """Install stderr (and optional file) handlers on the root logger.

    Replaces whatever handlers were there, so calling it twice is harmless.
    """
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        level = logging.INFO
    formatter = _JsonLineFormatter() if config.json_format else _text_formatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
