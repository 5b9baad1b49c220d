"""
Centralized logging configuration for the contacts application.

This module provides standardized logging configuration using structlog
for all components. Directory operations report their outcome through
log_directory_operation so every add, lookup, removal and update leaves
one structured event behind.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_directory_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the directory subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for directory operations
    """
    # Initial values keep the proxy lazy so later configure_logging calls apply
    return structlog.get_logger(
        name,
        subsystem="directory",
        audit_trail=True
    )


def log_directory_operation(
    logger: FilteringBoundLogger,
    operation: str,
    succeeded: bool,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a directory operation with standardized format.

    Expected failures (not found, full, duplicate) are normal outcomes and
    are logged at info level with result FAIL.

    Args:
        logger: Structlog logger instance
        operation: Name of the directory operation (add, remove, ...)
        succeeded: Whether the operation changed or found what was asked
        reason: Short machine-readable outcome
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        result="OK" if succeeded else "FAIL",
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Directory operation")
