"""
Logging setup: stdout plus an optional rotating file, every line tagged with
the correlation id of the request that produced it.

The id lives in a ContextVar so it follows the request across awaits.
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator

from dashcomments.config.settings import Config

PACKAGE_LOGGER = "dashcomments"
NO_CORRELATION_ID = "NO Correlation ID"
HANDLER_PREFIX = "dashcomments."

correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


@contextmanager
def correlation_id_scope(correlation_id: str) -> Iterator[str]:
    """Bind a correlation id for the duration of the block."""
    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


class CorrelationIdFilter(logging.Filter):
    """Stamps each record with the current correlation id."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


def _build_handlers(log_file: str | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].set_name(HANDLER_PREFIX + "stdout")

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.set_name(HANDLER_PREFIX + "file")
        handlers.append(file_handler)

    formatter = logging.Formatter(Config.LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(CorrelationIdFilter())
    return handlers


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """
    Install the handlers on the root logger. Safe to call more than once:
    handlers from a previous call are replaced, not duplicated.

    Third-party loggers stay at WARNING; only `dashcomments.*` follows `level`.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()
    for handler in _build_handlers(log_file):
        root.addHandler(handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.info(f"Logging is set up: level={level}, log_file={log_file or '-'}")
    return root
