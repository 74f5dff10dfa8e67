"""Network partition fault.

Splits the cluster into disjoint groups of nodes by installing iptables
DROP rules on every node. Each node blocks inbound TCP from every peer
outside its own group; nodes listed in no group block everyone listed.

Behavioral notes:
- Partitions are validated when the fault is built; a node listed in two
  groups is a FaultConfigurationError and no fault is produced
- activate() and deactivate() derive the same sorted peer list, so
  deactivate() removes exactly the rules activate() inserted as long as
  the spec is unchanged, however many times activate() ran before
- activate() twice in a row inserts duplicate rules; callers pair calls
- The first resolution or command failure aborts the call; commands
  already issued in that call stay applied
"""

from __future__ import annotations

import json

from faultline.application.faults.base import BaseFault
from faultline.application.ports.platform import Platform
from faultline.application.services.firewall import FirewallAction, FirewallCommand
from faultline.config.firewall_config import DEFAULT_FIREWALL_CONFIG, FirewallConfig
from faultline.domain.errors.fault import (
    AddressResolutionError,
    CommandExecutionError,
    FaultConfigurationError,
)
from faultline.domain.models.fault_spec import FaultSpec, NetworkPartitionFaultSpec
from faultline.domain.models.partition_set import PartitionSet
from faultline.domain.models.topology import Topology
from faultline.infrastructure.monitoring.fault_metrics import FaultMetricsCollector
from faultline.infrastructure.observability.fault_context import bind_fault_context


class NetworkPartitionFault(BaseFault):
    """Fault that partitions the cluster with host firewall rules.

    Example:
        >>> spec = NetworkPartitionFaultSpec(partitions=(("n1", "n2"), ("n3",)))
        >>> fault = NetworkPartitionFault("partition-1", spec)
        >>> fault.blocked_peers("n1")
        ('n3',)
        >>> fault.blocked_peers("n3")
        ('n1', 'n2')
    """

    def __init__(
        self,
        fault_id: str,
        spec: FaultSpec,
        metrics: FaultMetricsCollector | None = None,
        firewall_config: FirewallConfig = DEFAULT_FIREWALL_CONFIG,
    ) -> None:
        """Validate the spec and build the fault.

        Args:
            fault_id: Harness-assigned identifier.
            spec: Must be a NetworkPartitionFaultSpec.
            metrics: Optional collector; nothing is recorded when None.
            firewall_config: How iptables commands are rendered.

        Raises:
            FaultConfigurationError: If the spec is of another kind or a
                node appears in more than one partition.
        """
        if not isinstance(spec, NetworkPartitionFaultSpec):
            raise FaultConfigurationError(
                f"NetworkPartitionFault requires a NetworkPartitionFaultSpec, "
                f"got {type(spec).__name__}"
            )
        super().__init__(fault_id, spec)
        self._partitions = PartitionSet.from_groups(spec.partitions)
        self._metrics = metrics
        self._firewall_config = firewall_config

    @property
    def partitions(self) -> PartitionSet:
        """The validated partitions."""
        return self._partitions

    def blocked_peers(self, node_name: str) -> tuple[str, ...]:
        """Sorted names of the peers node_name must block."""
        return self._partitions.blocked_peers(node_name)

    def plan(
        self, platform: Platform, action: FirewallAction
    ) -> tuple[FirewallCommand, ...]:
        """Compute the commands activate/deactivate would issue, without running them.

        Raises:
            AddressResolutionError: If a peer address cannot be resolved.
        """
        node = platform.current_node()
        return tuple(
            FirewallCommand(action, peer, platform.resolve_address(peer))
            for peer in self.blocked_peers(node.name)
        )

    def activate(self, platform: Platform) -> tuple[FirewallCommand, ...]:
        """Insert a DROP rule for every blocked peer."""
        return self._run_iptables_commands(platform, FirewallAction.INSERT)

    def deactivate(self, platform: Platform) -> tuple[FirewallCommand, ...]:
        """Delete the DROP rule for every blocked peer."""
        return self._run_iptables_commands(platform, FirewallAction.DELETE)

    def target_nodes(self, topology: Topology) -> frozenset[str]:
        """Every node named in any partition."""
        return self._partitions.members()

    def _run_iptables_commands(
        self, platform: Platform, action: FirewallAction
    ) -> tuple[FirewallCommand, ...]:
        with bind_fault_context(self.id):
            node = platform.current_node()
            peers = self.blocked_peers(node.name)
            log = self._log_operation(action.verb, node=node.name, platform=platform.name)
            log.info("network_partition_applying", peers=list(peers))

            issued: list[FirewallCommand] = []
            for peer in peers:
                try:
                    command = FirewallCommand(
                        action, peer, platform.resolve_address(peer)
                    )
                    platform.run_command(command.argv(self._firewall_config))
                except (AddressResolutionError, CommandExecutionError) as exc:
                    log.error(
                        "firewall_command_failed",
                        peer=peer,
                        error=str(exc),
                        issued_count=len(issued),
                    )
                    if self._metrics is not None:
                        self._metrics.record_failure(self.id, action.verb)
                    raise
                if self._metrics is not None:
                    self._metrics.record_command(self.id, action.verb)
                log.debug("firewall_command_issued", peer=peer, address=command.address)
                issued.append(command)

            log.info("network_partition_applied", issued_count=len(issued))
            return tuple(issued)

    def _identity(self) -> tuple[object, ...]:
        return (self.id, self.spec, self._partitions)

    def __repr__(self) -> str:
        spec_json = json.dumps(self.spec.to_dict(), sort_keys=True)
        return f"NetworkPartitionFault(id={self.id}, spec={spec_json})"

