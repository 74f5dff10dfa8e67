"""Data transfer objects for harness documents."""

from faultline.application.dtos.fault_document import (
    FaultDocument,
    HarnessDocument,
    NetworkPartitionSpecDocument,
    NodeDocument,
    NoOpSpecDocument,
    TopologyDocument,
    load_harness_document,
)

__all__: list[str] = [
    "FaultDocument",
    "HarnessDocument",
    "NetworkPartitionSpecDocument",
    "NoOpSpecDocument",
    "NodeDocument",
    "TopologyDocument",
    "load_harness_document",
]
