"""Platform adapters."""

from faultline.infrastructure.adapters.platform.basic_platform import BasicPlatform

__all__: list[str] = ["BasicPlatform"]
