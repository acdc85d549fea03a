"""
Logging setup.

Every record carries the correlation id of the request that produced it.
The id lives in a ContextVar, so it follows the request across awaits.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar, Token
from uuid import uuid4

from . import settings

CORRELATION_ID_HEADER = "X-Correlation-ID"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [correlation-id = %(correlation_id)s] %(message)s"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")
_handler: logging.Handler | None = None


def new_correlation_id() -> str:
    return uuid4().hex


def get_correlation_id() -> str:
    return _correlation_id.get()


def set_correlation_id(value: str) -> Token[str]:
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: str | None = None) -> None:
    """
    Install a single stdout handler on the root logger.

    Safe to call more than once; the previous handler is replaced.
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _handler.addFilter(CorrelationIdFilter())
    root.addHandler(_handler)
    root.setLevel(level or settings.log_level())
