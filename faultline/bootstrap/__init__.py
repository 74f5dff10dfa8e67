"""Bootstrap wiring for harness processes."""

from faultline.bootstrap.logging import configure_structlog
from faultline.bootstrap.platform import build_platform

__all__: list[str] = ["build_platform", "configure_structlog"]
