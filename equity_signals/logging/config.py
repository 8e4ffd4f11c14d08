"""
Centralized logging configuration for the equity signals engine.

This module provides standardized logging configuration using structlog
for all components. Library modules only obtain loggers here; configuring
output is left to the application that drives the engine.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..models.signal import Signal


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


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for signal rule evaluation.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for signal decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="signals",
        audit_trail=True
    )


def log_rule_decision(
    logger: FilteringBoundLogger,
    rule_name: str,
    passed: bool,
    symbol: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a single rule evaluation with standardized format.

    Args:
        logger: Structlog logger instance
        rule_name: Rule group and attribute, e.g. "intraday.buy.rsi"
        passed: Whether the rule condition held
        symbol: Symbol whose snapshot was evaluated
        reason: Human-readable reason attached to the rule
        context: Additional context data
    """
    bound_logger = logger.bind(
        rule_name=rule_name,
        rule_result="PASS" if passed else "FAIL",
        symbol=symbol,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Rule evaluated")


def log_signal(
    logger: FilteringBoundLogger,
    symbol: str,
    mode: str,
    signal: "Signal",
) -> None:
    """
    Log an emitted signal with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Symbol the signal was derived for
        mode: Evaluator that produced it ("intraday" or "long_term")
        signal: The emitted signal
    """
    logger.info(
        "Signal evaluated",
        symbol=symbol,
        mode=mode,
        signal_type=signal.signal_type.value,
        price=signal.price,
        target=signal.target,
        stop_loss=signal.stop_loss,
        reason_count=len(signal.reasons),
    )
