"""
Structured logging for conversions.

Events go to stderr so a PMML document written to stdout stays clean.
Every event carries the name of the module that emitted it under the
``logger`` key.
"""

import logging
import sys
from typing import Any

import structlog

from skpmml.config.settings import LoggingConfig


def _processors(json_output: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Configure structlog from a LoggingConfig.

    Console rendering is meant for interactive use; JSON lines (with
    tracebacks as nested dicts) for log aggregation. Defaults to INFO on
    the console.
    """
    config = config or LoggingConfig()
    log_level = logging.getLevelNamesMapping()[config.level]

    structlog.configure(
        processors=_processors(config.json_output),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for a module.

    Args:
        name: Module name, usually ``__name__``. Bound as ``logger`` on
            every event.

    Returns:
        Lazily configured structlog logger.
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger().bind(logger=name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Bind key-value pairs to every event logged inside a ``with`` block.

    Example:
        with log_context(pipeline="churn", step="domain"):
            log.info("Registering statistics")  # carries pipeline and step
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
