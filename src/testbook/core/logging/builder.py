# src/testbook/core/logging/builder.py
"""
Logging builder: build a dictConfig mapping from Settings and apply it.

Layout produced by make_dict_config():
 - formatters: "standard" (ColorFormatter when LOG_FORMAT=text) and "json"
 - filters: "request_id", "redact"
 - handlers: see handlers.build_handlers(); the console follows LOG_TO_STDOUT
 - loggers: root at LOG_LEVEL; httpx/httpcore held at WARNING so the user-name
   lookup does not log every connection at INFO
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from testbook.utils.logging import get_project_name
from testbook.config.settings import Settings

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import build_handlers, writes_files

STANDARD_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s"

# Third-party loggers that are chatty at INFO/DEBUG.
QUIET_LOGGERS = ("httpx", "httpcore")


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping for `settings`.

    Pure function: nothing is created on disk and no logger is touched, so tests
    can assert on the returned mapping directly.
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": STANDARD_FORMAT,
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers = build_handlers(settings)

    loggers: dict[str, dict] = {
        "": {
            "handlers": list(handlers.keys()),
            "level": settings.LOG_LEVEL,
            "propagate": True,
        },
    }
    for name in QUIET_LOGGERS:
        loggers[name] = {"level": "WARNING", "propagate": True}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": loggers,
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging from settings.

    Steps:
      1. Create LOG_DIR when file handlers are configured.
      2. Apply dictConfig(make_dict_config(settings)).
      3. Add a RequestIdFilter to the root logger, so records handled by handlers
         attached outside dictConfig (pytest's caplog, for one) still carry request_id.
    """
    if writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    root = logging.getLogger()
    if not any(isinstance(f, RequestIdFilter) for f in root.filters):
        root.addFilter(RequestIdFilter())


__all__ = ["make_dict_config", "setup_logging", "STANDARD_FORMAT"]
