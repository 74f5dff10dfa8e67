"""Concrete fault kinds.

- NetworkPartitionFault: iptables-enforced network partition
- NoOpFault: does nothing, for exercising the harness
"""

from faultline.application.faults.network_partition import NetworkPartitionFault
from faultline.application.faults.no_op import NoOpFault

__all__: list[str] = ["NetworkPartitionFault", "NoOpFault"]
