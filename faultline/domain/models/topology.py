"""Cluster topology models.

The topology is the static registry that maps node identifiers to the
hostnames they are reachable at. It is loaded once by the harness and
treated as read-only by faults.

Usage:
    from faultline.domain.models.topology import Node, Topology

    topology = Topology.from_dict(
        {
            "nodes": {
                "node01": {"hostname": "10.0.0.1"},
                "node02": {"hostname": "node02.cluster.local"},
            }
        }
    )
    topology.node("node01").hostname  # "10.0.0.1"
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from faultline.domain.errors.fault import FaultConfigurationError, UnknownNodeError


@dataclass(frozen=True)
class Node:
    """A single cluster node.

    Attributes:
        name: Unique node identifier within the topology.
        hostname: DNS name or literal address the node is reachable at.
        tags: Free-form labels (e.g. "broker", "zookeeper").
        config: Extra per-node settings, kept as strings.
    """

    name: str
    hostname: str
    tags: frozenset[str] = field(default_factory=frozenset)
    config: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate node fields."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if not self.hostname:
            raise ValueError(f"hostname cannot be empty for node {self.name}")
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "config", MappingProxyType(dict(self.config)))

    def __hash__(self) -> int:
        return hash((self.name, self.hostname, self.tags))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.name == other.name
            and self.hostname == other.hostname
            and self.tags == other.tags
            and dict(self.config) == dict(other.config)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {"hostname": self.hostname}
        if self.tags:
            data["tags"] = sorted(self.tags)
        if self.config:
            data["config"] = dict(self.config)
        return data

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> Node:
        """Create a node from its dictionary form.

        Args:
            name: Node identifier (the key in the topology mapping).
            data: Mapping with "hostname" and optional "tags"/"config".

        Raises:
            FaultConfigurationError: If "hostname" is missing.
        """
        hostname = data.get("hostname")
        if not hostname:
            raise FaultConfigurationError(
                f"Node {name} has no hostname", node_name=name
            )
        return cls(
            name=name,
            hostname=str(hostname),
            tags=frozenset(data.get("tags", ())),
            config={k: str(v) for k, v in data.get("config", {}).items()},
        )


class Topology:
    """Read-only registry of cluster nodes keyed by name."""

    def __init__(self, nodes: Iterable[Node]) -> None:
        registry: dict[str, Node] = {}
        for node in nodes:
            if node.name in registry:
                raise FaultConfigurationError(
                    f"Node {node.name} is defined more than once in the topology",
                    node_name=node.name,
                )
            registry[node.name] = node
        self._nodes: Mapping[str, Node] = MappingProxyType(registry)

    @property
    def nodes(self) -> Mapping[str, Node]:
        """All nodes keyed by name."""
        return self._nodes

    def node(self, name: str) -> Node:
        """Look up a node by name.

        Raises:
            UnknownNodeError: If no node has that name.
        """
        try:
            return self._nodes[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Topology):
            return NotImplemented
        return dict(self._nodes) == dict(other._nodes)

    def __repr__(self) -> str:
        return f"Topology(nodes={sorted(self._nodes)})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "nodes": {name: node.to_dict() for name, node in sorted(self._nodes.items())}
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Topology:
        """Create a topology from {"nodes": {name: {...}}}.

        Raises:
            FaultConfigurationError: If a node entry is malformed.
        """
        return cls(
            Node.from_dict(name, node_data)
            for name, node_data in data.get("nodes", {}).items()
        )
