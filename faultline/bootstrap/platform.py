"""Bootstrap wiring for the host platform."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from faultline.application.ports.platform import Platform
from faultline.config.firewall_config import FirewallConfig
from faultline.domain.models.topology import Topology
from faultline.infrastructure.adapters.platform import BasicPlatform


def build_platform(
    node_name: str,
    topology: Topology | Mapping[str, Any],
    config: FirewallConfig | None = None,
) -> Platform:
    """Build the host platform for node_name.

    Args:
        node_name: Name of the node this process runs on.
        topology: A Topology, or its dictionary form.
        config: Firewall config; read from the environment when None.

    Raises:
        FaultConfigurationError: If the topology dictionary is malformed.
        UnknownNodeError: If node_name is not in the topology.
    """
    if not isinstance(topology, Topology):
        topology = Topology.from_dict(topology)
    return BasicPlatform(
        node_name,
        topology,
        config=config or FirewallConfig.from_environment(),
    )


__all__ = ["build_platform"]
