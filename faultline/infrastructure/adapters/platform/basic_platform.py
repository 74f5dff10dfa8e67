"""Host platform adapter.

Runs commands with subprocess (never through a shell) and resolves node
addresses through the topology plus DNS.

Failure mapping:
- Unknown node, DNS failure -> AddressResolutionError
- Missing executable, OS error, timeout -> CommandExecutionError (exit_code None)
- Non-zero exit -> CommandExecutionError (exit_code set, output captured)
"""

from __future__ import annotations

import socket
import subprocess
from collections.abc import Sequence

import structlog

from faultline.application.ports.platform import Platform
from faultline.config.firewall_config import DEFAULT_FIREWALL_CONFIG, FirewallConfig
from faultline.domain.errors.fault import (
    AddressResolutionError,
    CommandExecutionError,
    UnknownNodeError,
)
from faultline.domain.models.topology import Node, Topology

logger = structlog.get_logger(__name__)


class BasicPlatform(Platform):
    """Platform backed by the local host.

    Attributes:
        config: Supplies the per-command timeout.
    """

    def __init__(
        self,
        current_node_name: str,
        topology: Topology,
        config: FirewallConfig = DEFAULT_FIREWALL_CONFIG,
    ) -> None:
        """Bind the platform to one node of the topology.

        Raises:
            UnknownNodeError: If current_node_name is not in the topology.
        """
        self._current_node = topology.node(current_node_name)
        self._topology = topology
        self.config = config

    @property
    def name(self) -> str:
        return "basic"

    def current_node(self) -> Node:
        return self._current_node

    def topology(self) -> Topology:
        return self._topology

    def resolve_address(self, node_name: str) -> str:
        try:
            hostname = self._topology.node(node_name).hostname
        except UnknownNodeError as exc:
            raise AddressResolutionError(node_name, reason=str(exc)) from exc
        try:
            return socket.gethostbyname(hostname)
        except OSError as exc:
            raise AddressResolutionError(node_name, hostname, reason=str(exc)) from exc

    def run_command(self, argv: Sequence[str]) -> str:
        args = list(argv)
        log = logger.bind(argv=args, node=self._current_node.name)
        try:
            completed = subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self.config.command_timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            log.error("command_timed_out", timeout=exc.timeout)
            raise CommandExecutionError(
                args, output=f"timed out after {exc.timeout} seconds"
            ) from exc
        except OSError as exc:
            log.error("command_launch_failed", error=str(exc))
            raise CommandExecutionError(args, output=str(exc)) from exc

        if completed.returncode != 0:
            log.error(
                "command_failed",
                exit_code=completed.returncode,
                output=completed.stdout,
            )
            raise CommandExecutionError(
                args, exit_code=completed.returncode, output=completed.stdout or ""
            )
        log.debug("command_completed")
        return completed.stdout or ""
