"""Structured logging setup with correlation ID support."""

import logging
import sys
import uuid
from contextvars import ContextVar

# One correlation ID per adaptation run
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

HTTP_LOGGERS = (
    "httpx",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
)


def get_correlation_id() -> str:
    """
    Get current correlation ID or generate a new one.

    Returns:
        Correlation ID string (UUID)
    """
    corr_id = correlation_id_var.get()
    if corr_id is None:
        corr_id = new_correlation_id()
    return corr_id


def new_correlation_id() -> str:
    """Generate a fresh correlation ID and make it current."""
    corr_id = str(uuid.uuid4())
    correlation_id_var.set(corr_id)
    return corr_id


class CorrelationIDFilter(logging.Filter):
    """Logging filter that adds correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation_id to log record."""
        record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        return True


def configure_logging(level: int = logging.INFO, verbose: bool = False) -> None:
    """
    Configure structured logging with correlation ID support.

    Args:
        level: Logging level (default: INFO)
        verbose: If True, log at DEBUG and show httpx request logs.
            If False, httpx/httpcore are limited to WARNING.
    """
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s correlation_id=%(correlation_id)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIDFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else level)

    # Ollama calls go through httpx; one INFO line per request is noise at default verbosity
    http_level = logging.INFO if verbose else logging.WARNING
    for logger_name in HTTP_LOGGERS:
        logging.getLogger(logger_name).setLevel(http_level)
