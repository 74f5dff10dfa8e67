"""Unit tests for firewall command rendering."""

from __future__ import annotations

from faultline.application.services.firewall import FirewallAction, FirewallCommand
from faultline.config.firewall_config import FirewallConfig


class TestFirewallCommand:
    def test_insert_argv_shape(self) -> None:
        """The rule shape is fixed for compatibility with teardown tooling."""
        command = FirewallCommand(FirewallAction.INSERT, "n3", "10.0.0.3")

        assert command.argv() == [
            "sudo", "iptables", "-A", "INPUT", "-p", "tcp", "-s", "10.0.0.3",
            "-j", "DROP", "-m", "comment", "--comment", "n3",
        ]

    def test_delete_differs_only_in_action(self) -> None:
        insert = FirewallCommand(FirewallAction.INSERT, "n3", "10.0.0.3").argv()
        delete = FirewallCommand(FirewallAction.DELETE, "n3", "10.0.0.3").argv()

        assert delete[2] == "-D"
        assert insert[:2] + insert[3:] == delete[:2] + delete[3:]

    def test_config_overrides(self) -> None:
        config = FirewallConfig(
            iptables_binary="/usr/sbin/iptables-legacy", use_sudo=False, chain="FAULTS"
        )
        argv = FirewallCommand(FirewallAction.DELETE, "n1", "10.0.0.1").argv(config)

        assert argv[:3] == ["/usr/sbin/iptables-legacy", "-D", "FAULTS"]
        assert argv[-2:] == ["--comment", "n1"]

    def test_action_verbs(self) -> None:
        assert FirewallAction.INSERT.verb == "insert"
        assert FirewallAction.DELETE.verb == "delete"
