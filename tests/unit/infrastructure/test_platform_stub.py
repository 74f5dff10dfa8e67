"""Unit tests for PlatformStub."""

from __future__ import annotations

import pytest

from faultline.domain.errors.fault import AddressResolutionError, CommandExecutionError
from faultline.domain.models.topology import Topology
from faultline.infrastructure.stubs.platform_stub import FailureMode, PlatformStub

RULE = ["INPUT", "-p", "tcp", "-s", "10.0.0.3", "-j", "DROP", "-m", "comment", "--comment", "n3"]


class TestPlatformStub:
    def test_current_node_outside_topology(self, topology: Topology) -> None:
        platform = PlatformStub("n9", topology)

        assert platform.current_node().name == "n9"

    def test_address_override(self, topology: Topology) -> None:
        platform = PlatformStub("n1", topology, addresses={"n2": "192.168.0.2"})

        assert platform.resolve_address("n2") == "192.168.0.2"
        assert platform.resolve_address("n3") == "10.0.0.3"
        assert platform.resolve_count == 2

    def test_rule_table_insert_and_delete(self, topology: Topology) -> None:
        platform = PlatformStub("n1", topology)

        platform.run_command(["iptables", "-A", *RULE])
        assert platform.blocked_comments() == ["n3"]

        platform.run_command(["iptables", "-D", *RULE])
        assert platform.rules == []

    def test_delete_missing_rule_fails(self, topology: Topology) -> None:
        platform = PlatformStub("n1", topology)

        with pytest.raises(CommandExecutionError) as exc_info:
            platform.run_command(["iptables", "-D", *RULE])

        assert exc_info.value.exit_code == 1

    def test_failure_modes(self, topology: Topology) -> None:
        platform = PlatformStub("n1", topology)
        platform.set_failure_mode(
            FailureMode(unresolvable_nodes=frozenset({"n2"}), launch_fails=True)
        )

        with pytest.raises(AddressResolutionError):
            platform.resolve_address("n2")
        with pytest.raises(CommandExecutionError):
            platform.run_command(["true"])

        platform.clear_failure_mode()
        assert platform.resolve_address("n2") == "10.0.0.2"
        assert platform.run_command(["true"]) == ""

    def test_clear(self, topology: Topology) -> None:
        platform = PlatformStub("n1", topology)
        platform.run_command(["iptables", "-A", *RULE])

        platform.clear()

        assert platform.commands == []
        assert platform.rules == []
