"""Structured logging configuration for the dev-services tooling."""

import logging

import structlog
from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SHARED_PROCESSORS = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Configure structured logging for the application.

    In JSON mode structlog hands the event dict to the stdlib record as
    ``msg``/``extra`` and python-json-logger writes one object per event, with
    the event name under ``message``.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output JSON formatted logs
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr, so CLI output on stdout stays machine readable
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    if json_output:
        console_handler.setFormatter(jsonlogger.JsonFormatter())
        renderer = structlog.stdlib.render_to_log_kwargs
    else:
        console_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        renderer = structlog.dev.ConsoleRenderer()

    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[*SHARED_PROCESSORS, renderer],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)
