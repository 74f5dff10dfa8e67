"""No-op fault.

Does nothing on the host. Lets a harness exercise scheduling and the
activate/deactivate pairing without touching any firewall.
"""

from __future__ import annotations

import json

from faultline.application.faults.base import BaseFault
from faultline.application.ports.platform import Platform
from faultline.domain.errors.fault import FaultConfigurationError
from faultline.domain.models.fault_spec import FaultSpec, NoOpFaultSpec
from faultline.domain.models.topology import Topology


class NoOpFault(BaseFault):
    """Fault that only logs its activation and deactivation."""

    def __init__(self, fault_id: str, spec: FaultSpec) -> None:
        if not isinstance(spec, NoOpFaultSpec):
            raise FaultConfigurationError(
                f"NoOpFault requires a NoOpFaultSpec, got {type(spec).__name__}"
            )
        super().__init__(fault_id, spec)

    def activate(self, platform: Platform) -> tuple[()]:
        self._log_operation("insert", fault_id=self.id).info("no_op_fault_activated")
        return ()

    def deactivate(self, platform: Platform) -> tuple[()]:
        self._log_operation("delete", fault_id=self.id).info("no_op_fault_deactivated")
        return ()

    def target_nodes(self, topology: Topology) -> frozenset[str]:
        return frozenset()

    def __repr__(self) -> str:
        spec_json = json.dumps(self.spec.to_dict(), sort_keys=True)
        return f"NoOpFault(id={self.id}, spec={spec_json})"
