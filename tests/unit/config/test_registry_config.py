"""Unit tests for RegistryConfig."""

import pytest

from plantcert.config.registry_config import (
    DEFAULT_GATEWAY_ADDRESS,
    DEFAULT_REGISTRY_CONFIG,
    DEFAULT_SUPER_ADMIN,
    TEST_REGISTRY_CONFIG,
    RegistryConfig,
)
from plantcert.domain.models.address import ZERO_ADDRESS


class TestRegistryConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_REGISTRY_CONFIG.super_admin == DEFAULT_SUPER_ADMIN
        assert DEFAULT_REGISTRY_CONFIG.gateway_address == DEFAULT_GATEWAY_ADDRESS
        assert DEFAULT_REGISTRY_CONFIG.auto_configure_gateway
        assert not DEFAULT_REGISTRY_CONFIG.is_production

    def test_test_preset(self) -> None:
        assert TEST_REGISTRY_CONFIG.super_admin == "0xsuperadmin"
        assert TEST_REGISTRY_CONFIG.gateway_address == "0xgateway"

    def test_rejects_null_super_admin(self) -> None:
        with pytest.raises(ValueError, match="super_admin"):
            RegistryConfig(super_admin=ZERO_ADDRESS)

    def test_rejects_blank_gateway(self) -> None:
        with pytest.raises(ValueError, match="gateway_address"):
            RegistryConfig(gateway_address="  ")

    def test_rejects_same_addresses(self) -> None:
        with pytest.raises(ValueError, match="differ"):
            RegistryConfig(super_admin="0xABC", gateway_address="0xabc")


class TestFromEnvironment:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in (
            "PLANTCERT_SUPER_ADMIN",
            "PLANTCERT_GATEWAY_ADDRESS",
            "PLANTCERT_ENVIRONMENT",
            "PLANTCERT_AUTO_CONFIGURE_GATEWAY",
        ):
            monkeypatch.delenv(key, raising=False)

    def test_defaults_when_unset(self) -> None:
        assert RegistryConfig.from_environment() == DEFAULT_REGISTRY_CONFIG

    def test_reads_and_lowercases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PLANTCERT_SUPER_ADMIN", " 0xAdmin ")
        monkeypatch.setenv("PLANTCERT_GATEWAY_ADDRESS", "0xGATEWAY")
        monkeypatch.setenv("PLANTCERT_ENVIRONMENT", "production")
        config = RegistryConfig.from_environment()
        assert config.super_admin == "0xadmin"
        assert config.gateway_address == "0xgateway"
        assert config.is_production

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("false", False), ("0", False), ("YES", True), ("maybe", True)],
    )
    def test_auto_configure_flag(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
    ) -> None:
        monkeypatch.setenv("PLANTCERT_AUTO_CONFIGURE_GATEWAY", raw)
        assert RegistryConfig.from_environment().auto_configure_gateway is expected
