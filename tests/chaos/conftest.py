"""Chaos test configuration and fixtures.

Chaos tests run a fault across a whole simulated cluster: one
PlatformStub per node, each with its own in-memory rule table.
"""

from __future__ import annotations

import pytest

from faultline.domain.models.topology import Topology

from .cluster import SimulatedCluster


@pytest.fixture
def cluster_topology() -> Topology:
    """Six-node cluster."""
    return Topology.from_dict(
        {
            "nodes": {
                f"broker{i}": {"hostname": f"10.1.0.{i}"}
                for i in range(1, 7)
            }
        }
    )


@pytest.fixture
def cluster(cluster_topology: Topology) -> SimulatedCluster:
    return SimulatedCluster(cluster_topology)
