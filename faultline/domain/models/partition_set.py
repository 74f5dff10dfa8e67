"""Partition set model and blocking-set derivation.

A partition set is an ordered collection of disjoint groups of node
identifiers. Nodes inside one group stay mutually reachable; nodes in
different groups cannot reach each other while the fault is active.

Invariants:
- A node identifier appears in at most one partition (checked eagerly)
- Nodes listed in no partition belong to none
- Blocking between listed nodes is symmetric: if X blocks Y then Y
  blocks X

A node that belongs to no partition is "not contained" by every
partition, so it blocks the members of all of them. No member blocks it
back, since it lies outside every partition a member could block.

Usage:
    partitions = PartitionSet.from_groups([["n1", "n2"], ["n3"]])
    partitions.blocked_peers("n1")  # ("n3",)
    partitions.blocked_peers("n3")  # ("n1", "n2")
    partitions.blocked_peers("n4")  # ("n1", "n2", "n3")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from faultline.domain.errors.fault import FaultConfigurationError


@dataclass(frozen=True)
class PartitionSet:
    """Validated, immutable collection of disjoint partitions.

    Build instances with from_groups(); the constructor trusts its input.

    Attributes:
        partitions: The partitions, in spec order.
    """

    partitions: tuple[frozenset[str], ...]
    _index: Mapping[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        index: dict[str, int] = {}
        for position, partition in enumerate(self.partitions):
            for node_name in partition:
                index[node_name] = position
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_groups(cls, groups: Iterable[Iterable[str]]) -> PartitionSet:
        """Validate raw groups and build a partition set.

        Groups and their members are scanned in input order, so the first
        repeated name met is the one reported. A name repeated inside one
        group collapses into the set; a name already seen in an earlier
        group is an error.

        Args:
            groups: Ordered groups of node identifiers.

        Returns:
            The validated PartitionSet.

        Raises:
            FaultConfigurationError: If a node appears in more than one group.
        """
        seen: set[str] = set()
        partitions: list[frozenset[str]] = []
        for group in groups:
            members = list(group)
            for node_name in members:
                if node_name in seen:
                    raise FaultConfigurationError.duplicate_node(node_name)
            partition = frozenset(members)
            seen.update(partition)
            partitions.append(partition)
        return cls(partitions=tuple(partitions))

    def partition_of(self, node_name: str) -> int | None:
        """Position of the partition containing node_name, None if it has none."""
        return self._index.get(node_name)

    def members(self) -> frozenset[str]:
        """Union of all partition members."""
        return frozenset(self._index)

    def blocked_peers(self, node_name: str) -> tuple[str, ...]:
        """Peers that node_name must block, sorted lexicographically.

        Every partition that does not contain node_name contributes all
        of its members.
        """
        own = self.partition_of(node_name)
        return tuple(
            sorted(
                peer
                for peer, position in self._index.items()
                if position != own
            )
        )

    def to_groups(self) -> list[list[str]]:
        """Groups in spec order, each sorted, for serialization."""
        return [sorted(partition) for partition in self.partitions]
