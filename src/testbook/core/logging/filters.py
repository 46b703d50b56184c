# src/testbook/core/logging/filters.py
"""
Logging filters

Request ID filter, redaction filter and the context-var helpers behind them.

The user-name lookup sets a fresh request id for every outbound call and sends it
as the `X-Request-ID` header; every record logged while the call is in flight
carries the same id, so a log line can be matched to the request that produced it.

A `contextvars.ContextVar` holds the id because the lookup is a coroutine:
concurrent lookups running on one event loop each see their own value, which
`threading.local()` would not give us.

Usage
-----
    token = set_request_id("3f2c...")
    try:
        logger.info("Fetching user name")   # record.request_id == "3f2c..."
    finally:
        reset_request_id(token)

Records logged outside any lookup get the sentinel "-", so a format string that
references %(request_id)s never raises KeyError.
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None) -> contextvars.Token:
    """
    Set the request id in the current context and return the token to allow reset.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    """
    Restore the request id that was current before the matching set_request_id() call.
    """
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every LogRecord has a `request_id` attribute.

    Precedence:
      1. an explicit `extra={"request_id": ...}` on the logging call
      2. the context var set by set_request_id()
      3. the sentinel "-"

    Always returns True; the filter annotates, it never drops.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """
    Mask sensitive `extra` attributes before a formatter sees them.
    """

    SENSITIVE = {
        "password",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "api_key",
        "authorization",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True


__all__ = [
    "set_request_id",
    "reset_request_id",
    "get_request_id",
    "RequestIdFilter",
    "RedactFilter",
]
