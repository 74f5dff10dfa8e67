"""
Domain layer - Pure fault model for Faultline.

This layer contains:
- Partition sets and the blocking-set derivation
- Topology (node registry) value objects
- Fault specifications
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or config.
Only stdlib and typing imports are allowed.
"""

from faultline.domain.errors import (
    AddressResolutionError,
    CommandExecutionError,
    FaultConfigurationError,
    UnknownNodeError,
)
from faultline.domain.exceptions import FaultlineError

__all__: list[str] = [
    "FaultlineError",
    "FaultConfigurationError",
    "UnknownNodeError",
    "AddressResolutionError",
    "CommandExecutionError",
]
