"""Infrastructure adapters - production implementations of application ports."""

from faultline.infrastructure.adapters.platform import BasicPlatform

__all__: list[str] = ["BasicPlatform"]
