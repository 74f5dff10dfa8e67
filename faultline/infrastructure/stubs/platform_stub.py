"""Platform stub for testing.

Records every command instead of running it, and keeps an in-memory
copy of the iptables rule table so tests can check what a host would
look like after activate/deactivate.

Rule table semantics follow iptables:
- "-A" appends a rule, duplicates included
- "-D" removes the first identical rule; deleting a missing rule fails
  with exit status 1
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from faultline.application.ports.platform import Platform
from faultline.domain.errors.fault import (
    AddressResolutionError,
    CommandExecutionError,
    UnknownNodeError,
)
from faultline.domain.models.topology import Node, Topology


@dataclass
class FailureMode:
    """Configuration for simulating platform failures.

    Attributes:
        unresolvable_nodes: Node names whose address lookup fails.
        failing_command_numbers: 1-based command numbers (counted across
            the stub's lifetime) that exit non-zero.
        launch_fails: Every command fails to launch.
    """

    unresolvable_nodes: frozenset[str] = field(default_factory=frozenset)
    failing_command_numbers: frozenset[int] = field(default_factory=frozenset)
    launch_fails: bool = False


class PlatformStub(Platform):
    """Stub implementation of Platform for testing.

    Usage:
        topology = Topology.from_dict({"nodes": {...}})
        platform = PlatformStub("n1", topology)
        fault.activate(platform)
        assert platform.commands[0][:3] == ["sudo", "iptables", "-A"]

        platform.set_failure_mode(FailureMode(unresolvable_nodes=frozenset({"n3"})))
    """

    def __init__(
        self,
        current_node_name: str,
        topology: Topology,
        addresses: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize stub bound to one node.

        Args:
            current_node_name: Name of the local node; need not be in the topology.
            topology: Cluster topology.
            addresses: Optional name -> address overrides; nodes without an
                override resolve to their topology hostname.
        """
        self._current_node_name = current_node_name
        self._topology = topology
        self._addresses = dict(addresses or {})
        self._failure_mode = FailureMode()
        self._commands: list[list[str]] = []
        self._rules: list[tuple[str, ...]] = []
        self._resolve_count = 0

    @property
    def name(self) -> str:
        return "stub"

    def current_node(self) -> Node:
        if self._current_node_name in self._topology:
            return self._topology.node(self._current_node_name)
        return Node(name=self._current_node_name, hostname="localhost")

    def topology(self) -> Topology:
        return self._topology

    def resolve_address(self, node_name: str) -> str:
        self._resolve_count += 1
        if node_name in self._failure_mode.unresolvable_nodes:
            raise AddressResolutionError(node_name, reason="simulated DNS failure")
        if node_name in self._addresses:
            return self._addresses[node_name]
        try:
            return self._topology.node(node_name).hostname
        except UnknownNodeError as exc:
            raise AddressResolutionError(node_name, reason=str(exc)) from exc

    def run_command(self, argv: Sequence[str]) -> str:
        args = list(argv)
        self._commands.append(args)
        if self._failure_mode.launch_fails:
            raise CommandExecutionError(args, output="simulated launch failure")
        if len(self._commands) in self._failure_mode.failing_command_numbers:
            raise CommandExecutionError(args, exit_code=1, output="simulated failure")
        self._apply_to_rule_table(args)
        return ""

    def _apply_to_rule_table(self, args: list[str]) -> None:
        if "-A" in args:
            position = args.index("-A")
            self._rules.append(tuple(args[position + 1 :]))
        elif "-D" in args:
            position = args.index("-D")
            rule = tuple(args[position + 1 :])
            if rule not in self._rules:
                raise CommandExecutionError(
                    args,
                    exit_code=1,
                    output="iptables: Bad rule (does a matching rule exist in that chain?).",
                )
            self._rules.remove(rule)

    def set_failure_mode(self, mode: FailureMode) -> None:
        """Configure failure simulation for testing."""
        self._failure_mode = mode

    def clear_failure_mode(self) -> None:
        """Clear failure mode (all calls succeed)."""
        self._failure_mode = FailureMode()

    def clear(self) -> None:
        """Clear recorded commands, rules and failure mode."""
        self._commands.clear()
        self._rules.clear()
        self._failure_mode = FailureMode()
        self._resolve_count = 0

    @property
    def commands(self) -> list[list[str]]:
        """Every argv passed to run_command(), in order."""
        return [list(args) for args in self._commands]

    @property
    def rules(self) -> list[tuple[str, ...]]:
        """Current simulated rule table (chain onwards), in insertion order."""
        return list(self._rules)

    @property
    def resolve_count(self) -> int:
        """Number of resolve_address() calls."""
        return self._resolve_count

    def blocked_comments(self) -> list[str]:
        """Comment (node name) of every rule in the simulated table."""
        return [_comment_of(rule) for rule in self._rules]


def _comment_of(rule: Iterable[str]) -> str:
    parts = list(rule)
    return parts[parts.index("--comment") + 1] if "--comment" in parts else ""
