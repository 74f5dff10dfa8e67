"""
Infrastructure layer - External adapters for Faultline.

This layer contains:
- Host platform adapter (subprocess + DNS)
- Platform stub for tests
- Structured logging and fault context
- Prometheus metrics

IMPORT RULES:
- CAN import from: domain, application, config
- Implements ports defined in application layer
"""

from faultline.infrastructure.adapters import BasicPlatform

__all__: list[str] = ["BasicPlatform"]
