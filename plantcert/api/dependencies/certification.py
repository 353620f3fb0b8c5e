"""Certification registry API dependencies.

One CertificationSystem is built lazily per process and shared by every
route. Tests replace it with set_certification_system() or clear it with
reset_certification_system().
"""

from plantcert.application.services.access_policy_service import AccessPolicyService
from plantcert.application.services.certification_lifecycle_service import (
    CertificationLifecycleService,
)
from plantcert.application.services.certification_query_service import (
    CertificationQueryService,
)
from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)
from plantcert.application.services.integrity_verification_service import (
    IntegrityVerificationService,
)
from plantcert.bootstrap.certification import (
    CertificationSystem,
    build_certification_system,
)
from plantcert.config.registry_config import RegistryConfig

_certification_system: CertificationSystem | None = None


async def get_certification_system() -> CertificationSystem:
    """Get the process-wide certification system, building it on first use.

    Returns:
        CertificationSystem wired from RegistryConfig.from_environment().
    """
    global _certification_system
    if _certification_system is None:
        _certification_system = await build_certification_system(
            RegistryConfig.from_environment()
        )
    return _certification_system


def set_certification_system(system: CertificationSystem) -> None:
    """Install a pre-built system (for tests or custom wiring)."""
    global _certification_system
    _certification_system = system


def reset_certification_system() -> None:
    """Drop the singleton so the next request rebuilds it (for testing)."""
    global _certification_system
    _certification_system = None


async def get_lifecycle_service() -> CertificationLifecycleService:
    return (await get_certification_system()).lifecycle


async def get_registry() -> EntityRegistryService:
    return (await get_certification_system()).registry


async def get_access_policy_service() -> AccessPolicyService:
    return (await get_certification_system()).access_policy


async def get_query_service() -> CertificationQueryService:
    return (await get_certification_system()).queries


async def get_integrity_service() -> IntegrityVerificationService:
    return (await get_certification_system()).integrity
