"""
Centralized logging configuration for the colour contrast package.

This module provides standardized logging configuration using structlog.
Parsers and the evaluator obtain their loggers from here so that output
is consistently formatted and structured.
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
) -> None:
    """
    Configure structlog for the whole package.

    Parsers log rejected input at DEBUG and the evaluator logs conformance
    verdicts at INFO/WARNING, so INFO is enough to see verdicts only.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
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


def get_evaluation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for contrast evaluation output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying the evaluation subsystem binding
    """
    return get_logger(name).bind(subsystem="contrast_evaluation")


def log_conformance_decision(
    logger: FilteringBoundLogger,
    level: str,
    passed: bool,
    ratio: float,
    required: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a WCAG conformance verdict with standardized format.

    Args:
        logger: Structlog logger instance
        level: Conformance level checked (e.g. "AA", "AAA-large")
        passed: Whether the ratio met the required threshold
        ratio: Measured contrast ratio
        required: Minimum ratio for the level
        context: Additional context data
    """
    bound_logger = logger.bind(
        wcag_level=level,
        result="PASS" if passed else "FAIL",
        ratio=ratio,
        required=required,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if passed:
        bound_logger.info("Contrast level met")
    else:
        bound_logger.warning("Contrast level not met")
