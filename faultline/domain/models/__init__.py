"""Domain models for Faultline.

Contains value objects that describe faults and the cluster they
target. These models are immutable and contain no infrastructure
dependencies.
"""

from faultline.domain.models.fault_spec import (
    FAULT_SPEC_SCHEMA_VERSION,
    FaultSpec,
    NetworkPartitionFaultSpec,
    NoOpFaultSpec,
)
from faultline.domain.models.partition_set import PartitionSet
from faultline.domain.models.topology import Node, Topology

__all__: list[str] = [
    "FAULT_SPEC_SCHEMA_VERSION",
    "FaultSpec",
    "NetworkPartitionFaultSpec",
    "NoOpFaultSpec",
    "Node",
    "PartitionSet",
    "Topology",
]
