"""Unit tests for FirewallConfig."""

from __future__ import annotations

import pytest

from faultline.config.firewall_config import (
    DEFAULT_FIREWALL_CONFIG,
    TEST_FIREWALL_CONFIG,
    FirewallConfig,
)

ENV_VARS = (
    "FAULTLINE_IPTABLES_BINARY",
    "FAULTLINE_USE_SUDO",
    "FAULTLINE_IPTABLES_CHAIN",
    "FAULTLINE_COMMAND_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_default_config(self) -> None:
        assert DEFAULT_FIREWALL_CONFIG.iptables_binary == "iptables"
        assert DEFAULT_FIREWALL_CONFIG.use_sudo is True
        assert DEFAULT_FIREWALL_CONFIG.chain == "INPUT"
        assert DEFAULT_FIREWALL_CONFIG.command_timeout_seconds == 30.0

    def test_test_config_skips_sudo(self) -> None:
        assert TEST_FIREWALL_CONFIG.use_sudo is False

    def test_from_environment_without_overrides(self) -> None:
        assert FirewallConfig.from_environment() == DEFAULT_FIREWALL_CONFIG


class TestValidation:
    def test_empty_binary_rejected(self) -> None:
        with pytest.raises(ValueError, match="iptables_binary"):
            FirewallConfig(iptables_binary="")

    def test_empty_chain_rejected(self) -> None:
        with pytest.raises(ValueError, match="chain"):
            FirewallConfig(chain="")

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="command_timeout_seconds"):
            FirewallConfig(command_timeout_seconds=0)


class TestFromEnvironment:
    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAULTLINE_IPTABLES_BINARY", "/sbin/iptables-nft")
        monkeypatch.setenv("FAULTLINE_USE_SUDO", "no")
        monkeypatch.setenv("FAULTLINE_IPTABLES_CHAIN", "FAULTS")
        monkeypatch.setenv("FAULTLINE_COMMAND_TIMEOUT_SECONDS", "2.5")

        config = FirewallConfig.from_environment()

        assert config == FirewallConfig(
            iptables_binary="/sbin/iptables-nft",
            use_sudo=False,
            chain="FAULTS",
            command_timeout_seconds=2.5,
        )

    @pytest.mark.parametrize("value", ["maybe", ""])
    def test_unrecognised_bool_uses_default(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("FAULTLINE_USE_SUDO", value)

        assert FirewallConfig.from_environment().use_sudo is True

    @pytest.mark.parametrize("value", ["soon", "-1", "0"])
    def test_invalid_timeout_uses_default(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("FAULTLINE_COMMAND_TIMEOUT_SECONDS", value)

        assert FirewallConfig.from_environment().command_timeout_seconds == 30.0

    def test_blank_strings_use_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAULTLINE_IPTABLES_CHAIN", "   ")

        assert FirewallConfig.from_environment().chain == "INPUT"
