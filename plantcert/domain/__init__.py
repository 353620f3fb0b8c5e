"""
Domain layer - Pure business logic for the certification registry.

This layer contains:
- Domain models (Plant, Equipment, Document, Actor, Role)
- Domain events (registry audit events)
- Domain services (access matrix, lifecycle guards)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from plantcert.domain.exceptions import CertificationRegistryError

__all__: list[str] = [
    "CertificationRegistryError",
]
