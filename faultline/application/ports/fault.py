"""Fault port.

Every fault kind the harness can schedule implements this interface.
The harness builds faults through the fault factory, then calls
activate() and deactivate() in pairs around the fault window.

Contract:
- A fault is immutable after construction
- activate()/deactivate() recompute everything from the spec; they do
  not remember what an earlier call did
- target_nodes() reports the full footprint of the fault, used to check
  overlap with other faults scheduled at the same time
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from faultline.domain.models.fault_spec import FaultSpec
from faultline.domain.models.topology import Topology

if TYPE_CHECKING:
    from faultline.application.ports.platform import Platform


class Fault(ABC):
    """Abstract interface shared by all fault kinds."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Harness-assigned identifier of this fault."""
        ...

    @property
    @abstractmethod
    def spec(self) -> FaultSpec:
        """The spec this fault was built from."""
        ...

    @abstractmethod
    def activate(self, platform: Platform) -> Sequence[object]:
        """Start the fault on the platform's current node.

        Returns:
            The commands or actions issued, in order.
        """
        ...

    @abstractmethod
    def deactivate(self, platform: Platform) -> Sequence[object]:
        """Stop the fault on the platform's current node.

        Returns:
            The commands or actions issued, in order.
        """
        ...

    @abstractmethod
    def target_nodes(self, topology: Topology) -> frozenset[str]:
        """Names of every node this fault affects."""
        ...
