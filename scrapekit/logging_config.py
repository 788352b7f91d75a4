"""
Structlog configuration for scrapekit.

Library modules only call ``structlog.get_logger``; the CLI calls
``setup_logging`` once at startup. Output goes to stderr so extracted
fragments on stdout stay pipeable.
"""

import logging
import sys

import structlog
from structlog.types import EventDict


def add_app_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to log events."""
    event_dict["app"] = "scrapekit"
    return event_dict


def setup_logging(verbose: bool = False, log_format: str = "console", level: str = "INFO") -> None:
    """
    Configure structured logging.

    Args:
        verbose: Force DEBUG level
        log_format: "console" for humans, "json" for log collectors
        level: Level name used when not verbose
    """
    log_level = "DEBUG" if verbose else level.upper()

    processors = [
        add_app_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            [structlog.processors.CallsiteParameter.FILENAME]
        ),
    ]

    if log_format == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
