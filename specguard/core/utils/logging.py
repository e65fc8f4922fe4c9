"""
Structured logging utilities.

Provides logging setup plus a context manager for structured operation logging
with timing and error tracking.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

from specguard.core.config.logging_config import LoggingConfig

logger = structlog.get_logger(__name__)


def configure_logging(logging_config: LoggingConfig) -> None:
    """
    Wire stdlib logging and structlog together.

    Args:
        logging_config: Level, stdlib format and renderer choice.
    """
    level = getattr(logging, logging_config.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=logging_config.format, stream=sys.stdout)

    renderer: Any = (
        structlog.processors.JSONRenderer() if logging_config.json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


@contextmanager
def log_operation(
    operation: str,
    subject_ids: dict[str, str] | None = None,
    **context: Any,
) -> Iterator[None]:
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.

    Args:
        operation: Name of the operation being performed
        subject_ids: Dictionary of subject identifiers (e.g., {"spec": "typescript-basic"})
        **context: Additional context to include in logs

    Example:
        with log_operation("spec_compile", statements=12):
            result = compiler.compile(text)
    """
    start_time = time.time()
    log_context = {
        "operation": operation,
        **(subject_ids or {}),
        **context,
    }

    logger.debug("operation_started", **log_context)

    try:
        yield
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.error("operation_failed", error=str(e), latency_ms=latency_ms, exc_info=True, **log_context)
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.debug("operation_completed", latency_ms=latency_ms, **log_context)
