"""Platform port.

The platform is the faults' only window onto the host they run on: who
the local node is, where the other nodes live, and how to run a command.

Failure contract:
- resolve_address() raises AddressResolutionError, never returns None
- run_command() raises CommandExecutionError on launch failure or non-zero exit
- Neither method retries; timeouts are the adapter's concern
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from faultline.domain.models.topology import Node, Topology


class Platform(ABC):
    """Abstract interface to the host a fault runs on."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short adapter name, used in logs."""
        ...

    @abstractmethod
    def current_node(self) -> Node:
        """Return the node this process is running on."""
        ...

    @abstractmethod
    def topology(self) -> Topology:
        """Return the cluster topology."""
        ...

    @abstractmethod
    def resolve_address(self, node_name: str) -> str:
        """Resolve a node's network address.

        Looks the node up in the topology, then resolves its hostname.

        Args:
            node_name: Identifier of the node to resolve.

        Returns:
            The node's address as a string (e.g. "10.0.0.3").

        Raises:
            AddressResolutionError: If the node is unknown or DNS fails.
        """
        ...

    @abstractmethod
    def run_command(self, argv: Sequence[str]) -> str:
        """Run a command on this host and wait for it to finish.

        Args:
            argv: Program and arguments; never passed through a shell.

        Returns:
            Captured output of the command.

        Raises:
            CommandExecutionError: If the command cannot start or exits non-zero.
        """
        ...
