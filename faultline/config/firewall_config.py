"""Firewall command configuration.

This module defines how firewall commands are rendered and run, with
environment variable overrides for the hosts a harness runs on.

Environment Variables:
- FAULTLINE_IPTABLES_BINARY: iptables executable (default: iptables)
- FAULTLINE_USE_SUDO: Prefix commands with sudo (default: true)
- FAULTLINE_IPTABLES_CHAIN: Chain the block rules go into (default: INPUT)
- FAULTLINE_COMMAND_TIMEOUT_SECONDS: Per-command timeout (default: 30.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        The stripped value or default.
    """
    value = os.environ.get(key, "").strip()
    return value or default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognised.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class FirewallConfig:
    """How block rules are rendered and executed.

    Attributes:
        iptables_binary: Executable name or path for iptables.
        use_sudo: Whether commands are prefixed with sudo.
        chain: Chain the DROP rules are appended to and deleted from.
        command_timeout_seconds: Timeout applied by BasicPlatform per command.
    """

    iptables_binary: str = "iptables"
    use_sudo: bool = True
    chain: str = "INPUT"
    command_timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.iptables_binary:
            raise ValueError("iptables_binary cannot be empty")
        if not self.chain:
            raise ValueError("chain cannot be empty")
        if self.command_timeout_seconds <= 0:
            raise ValueError(
                f"command_timeout_seconds must be positive, "
                f"got {self.command_timeout_seconds}"
            )

    @classmethod
    def from_environment(cls) -> FirewallConfig:
        """Create config from environment variables with defaults.

        Returns:
            FirewallConfig with values from environment or defaults.
        """
        timeout = _get_float_env("FAULTLINE_COMMAND_TIMEOUT_SECONDS", 30.0)
        return cls(
            iptables_binary=_get_str_env("FAULTLINE_IPTABLES_BINARY", "iptables"),
            use_sudo=_get_bool_env("FAULTLINE_USE_SUDO", True),
            chain=_get_str_env("FAULTLINE_IPTABLES_CHAIN", "INPUT"),
            command_timeout_seconds=timeout if timeout > 0 else 30.0,
        )


# Default config matching the rule shape existing teardown tooling expects
DEFAULT_FIREWALL_CONFIG = FirewallConfig()

# Testing config: no sudo, short timeout
TEST_FIREWALL_CONFIG = FirewallConfig(
    use_sudo=False,
    command_timeout_seconds=1.0,
)
