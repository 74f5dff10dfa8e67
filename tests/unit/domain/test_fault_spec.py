"""Unit tests for fault spec models."""

from __future__ import annotations

import pytest

from faultline.domain.errors.fault import FaultConfigurationError
from faultline.domain.models.fault_spec import (
    FAULT_SPEC_SCHEMA_VERSION,
    FaultSpec,
    NetworkPartitionFaultSpec,
    NoOpFaultSpec,
)


class TestFaultSpecTiming:
    """Tests for shared timing fields."""

    def test_end_ms(self) -> None:
        spec = NoOpFaultSpec(start_ms=1_000, duration_ms=500)

        assert spec.end_ms == 1_500

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError, match="start_ms"):
            NoOpFaultSpec(start_ms=-1)

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError, match="duration_ms"):
            NetworkPartitionFaultSpec(duration_ms=-5)


class TestNetworkPartitionFaultSpec:
    """Tests for NetworkPartitionFaultSpec."""

    def test_groups_normalized_to_tuples(self) -> None:
        spec = NetworkPartitionFaultSpec(
            partitions=[["n1", "n2"], ["n3"]]  # type: ignore[arg-type]
        )

        assert spec.partitions == (("n1", "n2"), ("n3",))

    def test_duplicates_kept_until_fault_is_built(self) -> None:
        """The spec holds raw groups; validation happens in the fault."""
        spec = NetworkPartitionFaultSpec(partitions=(("n1", "n2"), ("n2", "n3")))

        assert spec.partitions == (("n1", "n2"), ("n2", "n3"))

    def test_to_dict(self, partition_spec: NetworkPartitionFaultSpec) -> None:
        assert partition_spec.to_dict() == {
            "class": "network_partition",
            "start_ms": 1_000,
            "duration_ms": 60_000,
            "partitions": [["n1", "n2"], ["n3"]],
            "schema_version": FAULT_SPEC_SCHEMA_VERSION,
        }

    def test_from_dict_dispatches_on_class(
        self, partition_spec: NetworkPartitionFaultSpec
    ) -> None:
        restored = FaultSpec.from_dict(partition_spec.to_dict())

        assert isinstance(restored, NetworkPartitionFaultSpec)
        assert restored == partition_spec

    def test_specs_are_hashable(self, partition_spec: NetworkPartitionFaultSpec) -> None:
        assert len({partition_spec, FaultSpec.from_dict(partition_spec.to_dict())}) == 1


class TestFaultSpecFromDict:
    """Tests for FaultSpec.from_dict() dispatch."""

    def test_no_op(self) -> None:
        spec = FaultSpec.from_dict({"class": "no_op", "start_ms": 5})

        assert spec == NoOpFaultSpec(start_ms=5)

    def test_unknown_class_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError, match="process_kill"):
            FaultSpec.from_dict({"class": "process_kill"})

    def test_missing_class_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError):
            FaultSpec.from_dict({"start_ms": 0})

    def test_non_integer_start_rejected(self) -> None:
        """A bad timing value is a configuration error, not a bare ValueError."""
        with pytest.raises(FaultConfigurationError, match="start_ms"):
            FaultSpec.from_dict({"class": "no_op", "start_ms": "soon"})

    def test_null_duration_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError, match="duration_ms"):
            FaultSpec.from_dict({"class": "network_partition", "duration_ms": None})


class TestPartitionShapeValidation:
    """Malformed partition lists are rejected instead of reinterpreted."""

    def test_flat_string_groups_rejected(self) -> None:
        """A group given as a string is not split into one node per character."""
        with pytest.raises(FaultConfigurationError, match="'ab'"):
            FaultSpec.from_dict(
                {"class": "network_partition", "partitions": ["ab", "cd"]}
            )

    def test_string_partitions_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError, match="partitions"):
            NetworkPartitionFaultSpec(partitions="n1")  # type: ignore[arg-type]

    def test_null_partitions_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError, match="partitions"):
            FaultSpec.from_dict({"class": "network_partition", "partitions": None})

    def test_non_string_node_name_rejected(self) -> None:
        with pytest.raises(FaultConfigurationError, match="strings"):
            FaultSpec.from_dict(
                {"class": "network_partition", "partitions": [["n1", 2]]}
            )

    def test_missing_partitions_means_no_groups(self) -> None:
        spec = FaultSpec.from_dict({"class": "network_partition"})

        assert spec == NetworkPartitionFaultSpec()
