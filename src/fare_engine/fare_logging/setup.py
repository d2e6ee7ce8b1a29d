"""Root logger configuration for applications embedding the fare engine."""

import logging
import sys

from .context import ContextFilter
from .filters import DefaultCorrelationFilter
from .formatters import DevFormatter, JSONFormatter


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    environment: str = "development",
) -> None:
    """Install a single stdout handler on the root logger.

    ContextFilter runs before DefaultCorrelationFilter, so a correlation_id
    set through log_context wins over the "-" placeholder.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    formatter: logging.Formatter = JSONFormatter(environment) if json_output else DevFormatter()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(ContextFilter())
    handler.addFilter(DefaultCorrelationFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))
