"""Configuration for the certification registry."""

from plantcert.config.registry_config import (
    DEFAULT_REGISTRY_CONFIG,
    TEST_REGISTRY_CONFIG,
    RegistryConfig,
)

__all__: list[str] = [
    "DEFAULT_REGISTRY_CONFIG",
    "TEST_REGISTRY_CONFIG",
    "RegistryConfig",
]
