"""Structured logging configuration using structlog."""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from hotel_booking.config.settings import settings


def add_hotel_id_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add [HOTEL_ID] prefix to log message if hotel_id is present.

    This processor runs before formatters so the prefix appears
    in both JSON and console outputs.

    Args:
        logger: The logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary containing log data

    Returns:
        Modified event dictionary with hotel id prefix
    """
    hotel_id = event_dict.get("hotel_id")
    if hotel_id:
        current_event = event_dict.get("event", "")
        event_dict["event"] = f"[{hotel_id}] {current_event}"
    return event_dict


def configure_logging() -> None:
    """Configure structlog for the application."""

    log_level = getattr(logging, settings.logging.level)

    handlers: list[logging.Handler] = []

    if settings.logging.format == "json":
        json_handler = logging.StreamHandler(sys.stdout)
        json_handler.setFormatter(jsonlogger.JsonFormatter())
        json_handler.setLevel(log_level)
        handlers.append(json_handler)
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        console_handler.setLevel(log_level)
        handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_hotel_id_prefix,  # Add [HOTEL_ID] prefix before rendering
            structlog.processors.JSONRenderer()
            if settings.logging.format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)
