"""Logging setup shared by the API server and the export command."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers and the level they are held at unless DEBUG is requested
LIBRARY_LEVELS: dict[str, int] = {
    "faker": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "httpx": logging.WARNING,
}


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Install a single stdout handler on the root logger.

    uvicorn is started with ``log_config=None`` so its own loggers
    propagate here and share the format.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        ``"json"`` for one JSON object per line, anything else for the
        human-readable pipe-separated format.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(format_type))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("cre_mock").setLevel(log_level)
    for name, library_level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(log_level if log_level <= logging.DEBUG else library_level)


def build_formatter(format_type: str) -> logging.Formatter:
    """Formatter for ``format_type`` (``"json"`` or ``"standard"``)."""
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Values passed through ``extra={"extra": {...}}`` are merged into the
    top-level object; anything json cannot encode is written with ``str``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_data.update(extra)
        return json.dumps(log_data, default=str)
