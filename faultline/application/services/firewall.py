"""Firewall command rendering.

Block rules drop inbound TCP from a single source address and carry the
blocked node's name as an iptables comment, so teardown tooling can find
them without relying on rule position:

    sudo iptables -A INPUT -p tcp -s 10.0.0.3 -j DROP -m comment --comment node03

The argument order is part of the interface with existing teardown
tooling and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from faultline.config.firewall_config import DEFAULT_FIREWALL_CONFIG, FirewallConfig


class FirewallAction(str, Enum):
    """What a firewall command does to the rule table.

    Values are the iptables flags.
    """

    INSERT = "-A"
    DELETE = "-D"

    @property
    def verb(self) -> str:
        """Lowercase name used in logs and metric labels."""
        return self.name.lower()


@dataclass(frozen=True)
class FirewallCommand:
    """A single rule change blocking or unblocking one peer.

    Attributes:
        action: Whether the rule is inserted or deleted.
        node_name: Blocked peer; used as the rule comment.
        address: Resolved source address of the peer.
    """

    action: FirewallAction
    node_name: str
    address: str

    def argv(self, config: FirewallConfig = DEFAULT_FIREWALL_CONFIG) -> list[str]:
        """Render the command as an argument vector."""
        prefix = ["sudo"] if config.use_sudo else []
        return prefix + [
            config.iptables_binary,
            self.action.value,
            config.chain,
            "-p",
            "tcp",
            "-s",
            self.address,
            "-j",
            "DROP",
            "-m",
            "comment",
            "--comment",
            self.node_name,
        ]
