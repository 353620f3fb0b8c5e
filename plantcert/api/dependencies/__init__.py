"""API dependency providers."""

from plantcert.api.dependencies.certification import (
    get_access_policy_service,
    get_certification_system,
    get_integrity_service,
    get_lifecycle_service,
    get_query_service,
    get_registry,
    reset_certification_system,
    set_certification_system,
)

__all__: list[str] = [
    "get_access_policy_service",
    "get_certification_system",
    "get_integrity_service",
    "get_lifecycle_service",
    "get_query_service",
    "get_registry",
    "reset_certification_system",
    "set_certification_system",
]
