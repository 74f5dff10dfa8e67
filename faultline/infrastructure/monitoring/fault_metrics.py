"""Fault metrics for Prometheus exposition.

Counts firewall commands issued by faults, and the ones that failed, so
a harness dashboard can tell a partially applied partition apart from a
clean one.
"""

from __future__ import annotations

import os
import threading

from prometheus_client import CollectorRegistry, Counter, generate_latest

# Thread lock for singleton initialization
_metrics_lock = threading.Lock()


class FaultMetricsCollector:
    """Collects per-fault firewall command metrics.

    Attributes:
        firewall_commands_total: Commands that completed, by action.
        firewall_command_failures_total: Commands that raised, by action.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize fault metrics collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")

        self.firewall_commands_total = Counter(
            name="fault_firewall_commands_total",
            documentation="Firewall commands issued by faults",
            labelnames=["fault_id", "action", "environment"],
            registry=self._registry,
        )

        self.firewall_command_failures_total = Counter(
            name="fault_firewall_command_failures_total",
            documentation="Firewall commands that failed to resolve or execute",
            labelnames=["fault_id", "action", "environment"],
            registry=self._registry,
        )

    def record_command(self, fault_id: str, action: str) -> None:
        """Record a firewall command that completed.

        Args:
            fault_id: Id of the fault that issued the command.
            action: "insert" or "delete".
        """
        self.firewall_commands_total.labels(
            fault_id=fault_id,
            action=action,
            environment=self._environment,
        ).inc()

    def record_failure(self, fault_id: str, action: str) -> None:
        """Record a firewall command that aborted its activation."""
        self.firewall_command_failures_total.labels(
            fault_id=fault_id,
            action=action,
            environment=self._environment,
        ).inc()

    def get_registry(self) -> CollectorRegistry:
        """Get the collector registry."""
        return self._registry

    def generate(self) -> bytes:
        """Render the registry in Prometheus text exposition format."""
        return generate_latest(self._registry)


# Singleton instance
_fault_metrics_collector: FaultMetricsCollector | None = None


def get_fault_metrics_collector() -> FaultMetricsCollector:
    """Get the singleton FaultMetricsCollector instance (thread-safe).

    Uses double-checked locking pattern for thread-safe lazy initialization.
    """
    global _fault_metrics_collector
    if _fault_metrics_collector is None:
        with _metrics_lock:
            if _fault_metrics_collector is None:
                _fault_metrics_collector = FaultMetricsCollector()
    return _fault_metrics_collector


def reset_fault_metrics_collector() -> None:
    """Reset the singleton collector (for testing only)."""
    global _fault_metrics_collector
    with _metrics_lock:
        _fault_metrics_collector = None
