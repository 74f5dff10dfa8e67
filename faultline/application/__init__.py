"""
Application layer - Fault kinds and orchestration for Faultline.

This layer contains:
- Port definitions (Fault, Platform)
- Concrete fault kinds
- Fault factory and firewall command rendering

IMPORT RULES:
- CAN import from: domain, config
- Uses infrastructure only for logging context and metrics
"""

from faultline.application.ports import Fault, Platform

__all__: list[str] = ["Fault", "Platform"]
