"""Infrastructure stubs for development and testing.

Available stubs:
- PlatformStub: Records commands, simulates the iptables rule table,
  supports injected resolution and command failures

WARNING: These stubs are NOT for production use.
Production implementations are in faultline/infrastructure/adapters/.
"""

from faultline.infrastructure.stubs.platform_stub import FailureMode, PlatformStub

__all__: list[str] = ["FailureMode", "PlatformStub"]
