"""Application services for the certification registry."""

from plantcert.application.services.access_policy_service import AccessPolicyService
from plantcert.application.services.base import LoggingMixin
from plantcert.application.services.certification_hash_service import (
    Blake3CertificationHashService,
)
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
from plantcert.application.services.ownership_binding_service import (
    OwnershipBindingService,
)
from plantcert.application.services.role_directory_service import RoleDirectoryService

__all__: list[str] = [
    "AccessPolicyService",
    "Blake3CertificationHashService",
    "CertificationLifecycleService",
    "CertificationQueryService",
    "EntityRegistryService",
    "IntegrityVerificationService",
    "LoggingMixin",
    "OwnershipBindingService",
    "RoleDirectoryService",
]
