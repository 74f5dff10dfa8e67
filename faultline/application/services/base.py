"""Base logging mixin for faults and services.

Usage:
    class MyFault(LoggingMixin):
        def __init__(self) -> None:
            self._init_logger()

        def activate(self, platform: Platform) -> None:
            log = self._log_operation("activate", node=platform.current_node().name)
            log.info("fault_activating")
"""

import structlog

from faultline.infrastructure.observability.fault_context import get_correlation_id


class LoggingMixin:
    """Mixin providing structured logging with service/component binding.

    Attributes:
        _log: The structlog BoundLogger for this instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "fault") -> None:
        """Initialize the logger with service name binding.

        Args:
            component: The component type for log categorization.
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger.

        Binds the operation name, the correlation id from context and any
        extra keyword context.
        """
        bound = self._log.bind(operation=operation, **context)
        correlation_id = get_correlation_id()
        if correlation_id:
            bound = bound.bind(correlation_id=correlation_id)
        return bound
