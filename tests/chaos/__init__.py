"""Chaos tests for Faultline.

Multi-node fault scenarios run against one PlatformStub per node, so the
firewall rules every node would hold can be checked together.

These tests are separate from unit tests and are marked with
@pytest.mark.chaos for selective execution:

    pytest -m chaos
"""
