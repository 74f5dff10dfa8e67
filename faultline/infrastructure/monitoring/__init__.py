"""Infrastructure monitoring components.

Prometheus metrics for fault activation and teardown.
"""

from faultline.infrastructure.monitoring.fault_metrics import (
    FaultMetricsCollector,
    get_fault_metrics_collector,
    reset_fault_metrics_collector,
)

__all__: list[str] = [
    "FaultMetricsCollector",
    "get_fault_metrics_collector",
    "reset_fault_metrics_collector",
]
