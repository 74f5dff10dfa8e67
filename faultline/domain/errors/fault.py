"""Fault injection errors.

This module provides exception classes for the fault lifecycle:
- FaultConfigurationError: Fault spec is malformed (fatal, construction time)
- UnknownNodeError: Topology has no node with the requested name
- AddressResolutionError: Node address could not be resolved during activation
- CommandExecutionError: Firewall command failed to launch or exited non-zero

None of these errors are retried internally. Retry and rollback belong
to the orchestrating harness.
"""

from __future__ import annotations

from collections.abc import Sequence

from faultline.domain.exceptions import FaultlineError


class FaultConfigurationError(FaultlineError):
    """Raised when a fault spec cannot produce a usable fault.

    The fault object MUST NOT be usable if this occurs.

    Attributes:
        node_name: Offending node identifier, if the error is about a node.
    """

    def __init__(self, message: str, node_name: str | None = None) -> None:
        self.node_name = node_name
        super().__init__(message)

    @classmethod
    def duplicate_node(cls, node_name: str) -> FaultConfigurationError:
        """Build the error for a node listed in more than one partition."""
        return cls(
            f"Node {node_name} appears in more than one partition.",
            node_name=node_name,
        )


class UnknownNodeError(FaultlineError):
    """Raised when the topology has no node with the given name.

    Attributes:
        node_name: The name that was looked up.
    """

    def __init__(self, node_name: str) -> None:
        self.node_name = node_name
        super().__init__(f"Unknown node {node_name!r} in topology")


class AddressResolutionError(FaultlineError):
    """Raised when a node's network address cannot be resolved.

    Aborts the current activate/deactivate call.

    Attributes:
        node_name: Node whose address was requested.
        hostname: Hostname from the topology, None if the lookup itself failed.
    """

    def __init__(
        self,
        node_name: str,
        hostname: str | None = None,
        reason: str = "",
    ) -> None:
        self.node_name = node_name
        self.hostname = hostname
        self.reason = reason
        target = f"{node_name} ({hostname})" if hostname else node_name
        message = f"Unable to resolve address for node {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CommandExecutionError(FaultlineError):
    """Raised when a platform command fails to launch or exits non-zero.

    Propagated unchanged to the caller of activate/deactivate.

    Attributes:
        argv: The command that was run.
        exit_code: Process exit code, None if the process never started.
        output: Captured combined output, possibly empty.
    """

    def __init__(
        self,
        argv: Sequence[str],
        exit_code: int | None = None,
        output: str = "",
    ) -> None:
        self.argv = tuple(argv)
        self.exit_code = exit_code
        self.output = output
        command = " ".join(self.argv)
        if exit_code is None:
            message = f"Failed to launch command: {command}"
        else:
            message = f"Command exited with status {exit_code}: {command}"
        if output:
            message = f"{message}\n{output.rstrip()}"
        super().__init__(message)
