"""
Faultline - Network partition fault injection

Turns a declarative partition description into a deterministic, per-node
set of host firewall rules, and removes them again on teardown.

Layers:
- domain: partition model, topology, fault specs, errors
- application: fault port, platform port, fault kinds, factory
- infrastructure: platform adapters, stubs, logging, metrics
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
