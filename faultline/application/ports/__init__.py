"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- Fault: Capability contract shared by every fault kind
- Platform: Local node identity, topology, address resolution, command execution
"""

from faultline.application.ports.fault import Fault
from faultline.application.ports.platform import Platform

__all__: list[str] = ["Fault", "Platform"]
