"""Application services for Faultline.

- fault_factory: Build faults from specs, returning typed errors
- firewall: Render iptables block/unblock commands
- base: Structured logging mixin

fault_factory is imported from its module directly; it depends on the
fault kinds, which depend on this package.
"""

from faultline.application.services.firewall import FirewallAction, FirewallCommand

__all__: list[str] = [
    "FirewallAction",
    "FirewallCommand",
]
