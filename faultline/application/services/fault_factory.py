"""Fault factory.

Turns a fault spec into a live fault without raising for expected
validation failures: a spec listing a node in two partitions comes back
as a result carrying a FaultConfigurationError instead of an exception.

Usage:
    result = create_fault("partition-1", spec)
    if not result.is_success:
        log.warning("fault_rejected", error=str(result.error))
        return
    fault = result.unwrap()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from faultline.application.faults.network_partition import NetworkPartitionFault
from faultline.application.faults.no_op import NoOpFault
from faultline.application.ports.fault import Fault
from faultline.config.firewall_config import DEFAULT_FIREWALL_CONFIG, FirewallConfig
from faultline.domain.errors.fault import FaultConfigurationError
from faultline.domain.models.fault_spec import (
    FaultSpec,
    NetworkPartitionFaultSpec,
    NoOpFaultSpec,
)
from faultline.infrastructure.monitoring.fault_metrics import FaultMetricsCollector

logger = structlog.get_logger(__name__)

FaultBuilder = Callable[
    [str, FaultSpec, FaultMetricsCollector | None, FirewallConfig], Fault
]


def _build_network_partition(
    fault_id: str,
    spec: FaultSpec,
    metrics: FaultMetricsCollector | None,
    firewall_config: FirewallConfig,
) -> Fault:
    return NetworkPartitionFault(
        fault_id, spec, metrics=metrics, firewall_config=firewall_config
    )


def _build_no_op(
    fault_id: str,
    spec: FaultSpec,
    metrics: FaultMetricsCollector | None,
    firewall_config: FirewallConfig,
) -> Fault:
    return NoOpFault(fault_id, spec)


FAULT_BUILDERS: dict[type[FaultSpec], FaultBuilder] = {
    NetworkPartitionFaultSpec: _build_network_partition,
    NoOpFaultSpec: _build_no_op,
}


@dataclass(frozen=True)
class FaultCreationResult:
    """Outcome of create_fault(): exactly one of fault or error is set.

    Attributes:
        fault_id: Id the fault was requested under.
        fault: The built fault, when the spec was valid.
        error: Why the spec was rejected, otherwise.
    """

    fault_id: str
    fault: Fault | None = None
    error: FaultConfigurationError | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one outcome is present."""
        if (self.fault is None) == (self.error is None):
            raise ValueError("exactly one of fault or error must be set")

    @property
    def is_success(self) -> bool:
        """True when a fault was built."""
        return self.fault is not None

    def unwrap(self) -> Fault:
        """Return the fault, raising the stored error if there is none.

        Raises:
            FaultConfigurationError: If the spec was rejected.
        """
        if self.fault is not None:
            return self.fault
        if self.error is not None:
            raise self.error
        raise ValueError(f"{self.fault_id}: result carries neither fault nor error")


def create_fault(
    fault_id: str,
    spec: FaultSpec,
    metrics: FaultMetricsCollector | None = None,
    firewall_config: FirewallConfig = DEFAULT_FIREWALL_CONFIG,
) -> FaultCreationResult:
    """Build the fault described by spec.

    Args:
        fault_id: Harness-assigned identifier.
        spec: Any registered fault spec.
        metrics: Optional collector passed to faults that record metrics.
        firewall_config: Passed to faults that issue firewall commands.

    Returns:
        FaultCreationResult carrying either the fault or a
        FaultConfigurationError. Validation failures never raise.
    """
    builder = FAULT_BUILDERS.get(type(spec))
    if builder is None:
        error = FaultConfigurationError(
            f"No fault kind registered for spec {type(spec).__name__}"
        )
        logger.warning("fault_spec_unsupported", fault_id=fault_id, error=str(error))
        return FaultCreationResult(fault_id=fault_id, error=error)

    try:
        fault = builder(fault_id, spec, metrics, firewall_config)
    except FaultConfigurationError as exc:
        logger.warning(
            "fault_spec_rejected",
            fault_id=fault_id,
            fault_class=spec.fault_class,
            node_name=exc.node_name,
            error=str(exc),
        )
        return FaultCreationResult(fault_id=fault_id, error=exc)

    logger.info("fault_created", fault_id=fault_id, fault_class=spec.fault_class)
    return FaultCreationResult(fault_id=fault_id, fault=fault)
