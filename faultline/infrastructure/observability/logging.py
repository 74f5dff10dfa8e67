"""Structured logging configuration with structlog.

Supports both production (JSON) and development (console) output modes.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "firewall_command_issued",
        "fault_id": "partition-1",
        "correlation_id": "uuid",
        ...additional context
    }

Usage:
    from faultline.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from faultline.infrastructure.observability.fault_context import fault_context_processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for the harness process.

    Should be called once at startup, before any fault is activated.

    Args:
        environment: 'production' for JSON output, anything else for console.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, fault_context_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "fault"
) -> structlog.BoundLogger:
    """Get a logger with service and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "fault").
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
