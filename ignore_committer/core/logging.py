"""Structured logging setup using structlog with correlation IDs."""

import logging
import sys
import uuid
from contextlib import AbstractContextManager
from contextvars import ContextVar

import structlog
from structlog.types import EventDict, WrappedLogger

# Correlation ID for tracing a single build decision
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def add_correlation_id(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add correlation ID to log event if set."""
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def setup_logging(log_level: str = "INFO") -> None:
    """Configure structured JSON logging on stderr.

    Stdout is left to the host harness, which prints the build verdict there.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        level=level,
        stream=sys.stderr,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_correlation_id,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID for the current decision context."""
    correlation_id_var.set(correlation_id)


def bound_decision_context(
    branch: str, curr_revision: object, prev_revision: object
) -> AbstractContextManager[None]:
    """Bind the branch and revisions of one decision to every event logged inside."""
    return structlog.contextvars.bound_contextvars(
        branch=branch,
        curr_revision=str(curr_revision) if curr_revision is not None else None,
        prev_revision=str(prev_revision) if prev_revision is not None else None,
    )


def new_correlation_id() -> str:
    """Generate and set a fresh correlation ID.

    Returns:
        The generated ID (hex uuid4)
    """
    correlation_id = uuid.uuid4().hex
    set_correlation_id(correlation_id)
    return correlation_id
