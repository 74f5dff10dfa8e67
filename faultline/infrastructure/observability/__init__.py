"""Observability infrastructure for structured logging and fault context.

Usage:
    from faultline.infrastructure.observability import (
        bind_fault_context,
        configure_structlog,
    )

    configure_structlog(environment="production")

    with bind_fault_context(fault.id):
        fault.activate(platform)
"""

from faultline.infrastructure.observability.fault_context import (
    bind_fault_context,
    fault_context_processor,
    generate_correlation_id,
    get_correlation_id,
    get_fault_id,
)
from faultline.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "bind_fault_context",
    "configure_structlog",
    "fault_context_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_fault_id",
    "get_logger_for_service",
]
