# src/testbook/core/logging/handlers.py
"""
Handler configs for logging.dictConfig.

build_handlers(settings) returns the whole "handlers" section, keyed by the
names the root logger refers to:

    LOG_TO_STDOUT=True   console (stdout), error_console (stderr, JSON)
    LOG_TO_STDOUT=False  console (stderr), file, error_file (JSON)
                         file/error_file only when LOG_DIR is set

Formatter and filter names ("json", "standard", "request_id", "redact") are
declared by builder.make_dict_config().
"""

from pathlib import Path

from testbook.config.settings import Settings

HANDLER_FILTERS = ("request_id", "redact")

STDOUT = "ext://sys.stdout"
STDERR = "ext://sys.stderr"

LOG_FILE = "testbook.log"
ERROR_LOG_FILE = "errors.log"


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def console_stream(settings: Settings) -> str:
    return STDOUT if settings.LOG_TO_STDOUT else STDERR


def writes_files(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def stream_handler(settings: Settings, *, stream: str, level: str | None = None, formatter: str | None = None) -> dict:
    return {
        "class": "logging.StreamHandler",
        "stream": stream,
        "formatter": formatter or _formatter_name(settings),
        "level": level or settings.LOG_LEVEL,
        "filters": list(HANDLER_FILTERS),
    }


def rotating_file_handler(
    settings: Settings, filename: str, *, level: str | None = None, formatter: str | None = None
) -> dict:
    """
    RotatingFileHandler writing LOG_DIR/filename, rotated at LOG_MAX_BYTES with
    LOG_BACKUP_COUNT backups.
    """
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": str(Path(settings.LOG_DIR) / filename),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "formatter": formatter or _formatter_name(settings),
        "level": level or settings.LOG_LEVEL,
        "filters": list(HANDLER_FILTERS),
    }


def build_handlers(settings: Settings) -> dict[str, dict]:
    handlers = {"console": stream_handler(settings, stream=console_stream(settings))}

    # Errors are always JSON, in their own file or on stderr.
    if writes_files(settings):
        handlers["file"] = rotating_file_handler(settings, LOG_FILE)
        handlers["error_file"] = rotating_file_handler(settings, ERROR_LOG_FILE, level="ERROR", formatter="json")
    else:
        handlers["error_console"] = stream_handler(settings, stream=STDERR, level="ERROR", formatter="json")
    return handlers


__all__ = [
    "build_handlers",
    "console_stream",
    "rotating_file_handler",
    "stream_handler",
    "writes_files",
]
