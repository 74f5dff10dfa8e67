"""Domain errors for Faultline.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from FaultlineError.
"""

from faultline.domain.errors.fault import (
    AddressResolutionError,
    CommandExecutionError,
    FaultConfigurationError,
    UnknownNodeError,
)

__all__: list[str] = [
    "FaultConfigurationError",
    "UnknownNodeError",
    "AddressResolutionError",
    "CommandExecutionError",
]
