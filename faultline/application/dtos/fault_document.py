"""Fault document DTOs.

Pydantic models for the JSON documents a harness hands to a node agent:
the cluster topology and the faults to schedule on it. Schema problems
surface as FaultConfigurationError, the same error a bad spec raises.

Document shape:
    {
        "topology": {"nodes": {"node01": {"hostname": "10.0.0.1"}}},
        "faults": [
            {
                "id": "partition-1",
                "spec": {
                    "class": "network_partition",
                    "start_ms": 0,
                    "duration_ms": 60000,
                    "partitions": [["node01"], ["node02", "node03"]]
                }
            }
        ]
    }
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from faultline.domain.errors.fault import FaultConfigurationError
from faultline.domain.models.fault_spec import (
    FaultSpec,
    NetworkPartitionFaultSpec,
    NoOpFaultSpec,
)
from faultline.domain.models.topology import Node, Topology


class NodeDocument(BaseModel):
    """One node entry of a topology document."""

    model_config = ConfigDict(frozen=True)

    hostname: Annotated[str, Field(min_length=1, description="DNS name or address")]
    tags: list[str] = Field(default_factory=list)
    config: dict[str, str] = Field(default_factory=dict)


class TopologyDocument(BaseModel):
    """Topology document: node name -> node entry."""

    model_config = ConfigDict(frozen=True)

    nodes: dict[str, NodeDocument] = Field(default_factory=dict)

    def to_topology(self) -> Topology:
        """Convert to the domain Topology."""
        return Topology(
            Node(
                name=name,
                hostname=node.hostname,
                tags=frozenset(node.tags),
                config=node.config,
            )
            for name, node in self.nodes.items()
        )


class _SpecDocument(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_ms: Annotated[int, Field(ge=0)] = 0
    duration_ms: Annotated[int, Field(ge=0)] = 0


class NoOpSpecDocument(_SpecDocument):
    """No-op fault spec document."""

    fault_class: Literal["no_op"] = Field(alias="class")

    def to_spec(self) -> FaultSpec:
        return NoOpFaultSpec(start_ms=self.start_ms, duration_ms=self.duration_ms)


class NetworkPartitionSpecDocument(_SpecDocument):
    """Network partition fault spec document.

    Duplicate nodes across groups are not rejected here; the fault
    factory reports them with the offending node name.
    """

    fault_class: Literal["network_partition"] = Field(alias="class")
    partitions: list[list[str]] = Field(default_factory=list)

    def to_spec(self) -> FaultSpec:
        return NetworkPartitionFaultSpec(
            start_ms=self.start_ms,
            duration_ms=self.duration_ms,
            partitions=tuple(tuple(group) for group in self.partitions),
        )


SpecDocument = Annotated[
    Union[NetworkPartitionSpecDocument, NoOpSpecDocument],
    Field(discriminator="fault_class"),
]


class FaultDocument(BaseModel):
    """A fault to schedule: harness id plus spec."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[str, Field(min_length=1)]
    spec: SpecDocument


class HarnessDocument(BaseModel):
    """Topology plus the faults scheduled on it."""

    model_config = ConfigDict(frozen=True)

    topology: TopologyDocument = Field(default_factory=TopologyDocument)
    faults: list[FaultDocument] = Field(default_factory=list)

    def fault_specs(self) -> list[tuple[str, FaultSpec]]:
        """(fault id, domain spec) pairs in document order."""
        return [(fault.id, fault.spec.to_spec()) for fault in self.faults]


def load_harness_document(raw: str | bytes) -> HarnessDocument:
    """Parse and validate a JSON harness document.

    Raises:
        FaultConfigurationError: If the JSON is malformed or fails validation.
    """
    try:
        return HarnessDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise FaultConfigurationError(f"Invalid harness document: {exc}") from exc
