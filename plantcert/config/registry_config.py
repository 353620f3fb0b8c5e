"""Certification registry configuration.

Environment Variables:
- PLANTCERT_SUPER_ADMIN: Address seeded with SUPER_ADMIN at startup
- PLANTCERT_GATEWAY_ADDRESS: Principal the lifecycle service writes as
- PLANTCERT_ENVIRONMENT: 'production' for JSON logs, anything else for console
  (default: development)
- PLANTCERT_AUTO_CONFIGURE_GATEWAY: Bind the gateway during bootstrap
  (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from plantcert.domain.models.address import is_null_address

DEFAULT_SUPER_ADMIN = "0x" + "1" * 40
DEFAULT_GATEWAY_ADDRESS = "0x" + "9" * 40

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognized.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for wiring the certification registry.

    Attributes:
        super_admin: Address seeded with SUPER_ADMIN.
        gateway_address: Principal used by the lifecycle service.
        environment: Logging environment name.
        auto_configure_gateway: Whether bootstrap binds the gateway itself,
            acting as super_admin.
    """

    super_admin: str = DEFAULT_SUPER_ADMIN
    gateway_address: str = DEFAULT_GATEWAY_ADDRESS
    environment: str = "development"
    auto_configure_gateway: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if is_null_address(self.super_admin):
            raise ValueError("super_admin must not be a null address")
        if is_null_address(self.gateway_address):
            raise ValueError("gateway_address must not be a null address")
        if self.super_admin.lower() == self.gateway_address.lower():
            raise ValueError("gateway_address must differ from super_admin")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> RegistryConfig:
        """Create config from environment variables with defaults.

        Addresses are lowercased, matching how the HTTP boundary
        normalizes caller addresses.
        """
        return cls(
            super_admin=_get_str_env("PLANTCERT_SUPER_ADMIN", DEFAULT_SUPER_ADMIN).lower(),
            gateway_address=_get_str_env(
                "PLANTCERT_GATEWAY_ADDRESS", DEFAULT_GATEWAY_ADDRESS
            ).lower(),
            environment=_get_str_env("PLANTCERT_ENVIRONMENT", "development"),
            auto_configure_gateway=_get_bool_env(
                "PLANTCERT_AUTO_CONFIGURE_GATEWAY", True
            ),
        )


DEFAULT_REGISTRY_CONFIG = RegistryConfig()

# Test preset with readable fixed addresses
TEST_REGISTRY_CONFIG = RegistryConfig(
    super_admin="0xsuperadmin",
    gateway_address="0xgateway",
    environment="test",
    auto_configure_gateway=True,
)
