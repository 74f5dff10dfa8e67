"""Configuration module for Faultline.

Available Configurations:
- FirewallConfig: iptables rendering and command execution settings
"""

from faultline.config.firewall_config import (
    DEFAULT_FIREWALL_CONFIG,
    TEST_FIREWALL_CONFIG,
    FirewallConfig,
)

__all__ = [
    "FirewallConfig",
    "DEFAULT_FIREWALL_CONFIG",
    "TEST_FIREWALL_CONFIG",
]
