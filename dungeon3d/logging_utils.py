"""Logging setup for applications that embed the generator.

Library modules only call ``structlog.get_logger``; the host calls
:func:`setup_logging` once at startup.
"""

import logging

import structlog
from structlog.stdlib import add_log_level, add_logger_name


def setup_logging(level: int = logging.INFO, json_output: bool = False) -> None:
    """Configure structlog and standard logging with the given level.

    ``json_output`` swaps the coloured console renderer for one JSON object
    per line, which is easier to feed into log tooling.
    """
    logging.basicConfig(level=level, format="%(message)s")
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
