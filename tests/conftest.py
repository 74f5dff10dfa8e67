"""
Pytest configuration and shared fixtures for Faultline tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Multi-node fault scenarios go in tests/chaos/
- Host side effects go through PlatformStub; nothing touches a real firewall
"""

from __future__ import annotations

import pytest

from faultline.domain.models.fault_spec import NetworkPartitionFaultSpec
from faultline.domain.models.topology import Topology


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from faultline import __version__

    return __version__


@pytest.fixture
def topology() -> Topology:
    """Four-node topology with literal addresses as hostnames."""
    return Topology.from_dict(
        {
            "nodes": {
                "n1": {"hostname": "10.0.0.1"},
                "n2": {"hostname": "10.0.0.2"},
                "n3": {"hostname": "10.0.0.3"},
                "n4": {"hostname": "10.0.0.4", "tags": ["spare"]},
            }
        }
    )


@pytest.fixture
def partition_spec() -> NetworkPartitionFaultSpec:
    """[{n1, n2}, {n3}] partition, n4 left out."""
    return NetworkPartitionFaultSpec(
        start_ms=1_000,
        duration_ms=60_000,
        partitions=(("n1", "n2"), ("n3",)),
    )
