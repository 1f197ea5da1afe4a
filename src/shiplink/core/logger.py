"""Logging configuration for the client."""

import logging

import structlog
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer
from structlog.types import EventDict, Processor, WrappedLogger

from .config import ClientSettings

PACKAGE_LOGGER_NAME = "shiplink"


def build_console_filter(settings: ClientSettings) -> Processor:
    """Drop the request path, method and status code from the event dict if the
    corresponding setting is False."""

    def console_log_filter_processors(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
        if not settings.CONSOLE_LOG_INCLUDE_PATH:
            event_dict.pop("path", None)
        if not settings.CONSOLE_LOG_INCLUDE_METHOD:
            event_dict.pop("method", None)
        if not settings.CONSOLE_LOG_INCLUDE_STATUS_CODE:
            event_dict.pop("status_code", None)
        return event_dict

    return console_log_filter_processors


# Shared processors for all loggers
timestamper = structlog.processors.TimeStamper(fmt="iso")
SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.stdlib.ExtraAdder(),
    timestamper,
    structlog.processors.StackInfoRenderer(),
]


def build_formatter(*, json_output: bool, pre_chain: list[Processor]) -> structlog.stdlib.ProcessorFormatter:
    """Build a ProcessorFormatter with the specified renderer and processors."""
    renderer = JSONRenderer() if json_output else ConsoleRenderer()

    processors = [structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer]

    if json_output:
        pre_chain = pre_chain + [structlog.processors.format_exc_info]

    return structlog.stdlib.ProcessorFormatter(foreign_pre_chain=pre_chain, processors=processors)


def configure_logging(settings: ClientSettings | None = None) -> logging.Logger:
    """
    Attach a structlog-formatted console handler to the package logger.

    The root logger is left alone. Calling this again replaces the handler
    installed by the previous call.

    Args:
        settings: Settings to read log level and format from. Defaults to a
                  fresh ClientSettings() read from the environment.

    Returns:
        The configured ``shiplink`` logger.
    """
    settings = settings or ClientSettings()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.CONSOLE_LOG_LEVEL)
    console_handler.setFormatter(
        build_formatter(
            json_output=settings.CONSOLE_LOG_FORMAT_JSON,
            pre_chain=SHARED_PROCESSORS + [build_console_filter(settings)],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(settings.CONSOLE_LOG_LEVEL)
    package_logger.handlers.clear()  # avoid duplicate logs
    package_logger.addHandler(console_handler)
    package_logger.propagate = False
    return package_logger
