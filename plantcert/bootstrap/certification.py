"""Bootstrap wiring for the certification registry.

build_certification_system() assembles every service around one shared
role directory, registry and event sink, and (unless disabled) binds the
lifecycle service's principal as the registry gateway.
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from plantcert.application.ports.event_sink import EventSinkProtocol
from plantcert.application.ports.time_authority import TimeAuthorityProtocol
from plantcert.application.services.access_policy_service import AccessPolicyService
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
from plantcert.config.registry_config import RegistryConfig
from plantcert.infrastructure.adapters.structlog_event_sink import StructlogEventSink
from plantcert.infrastructure.adapters.system_time_authority import SystemTimeAuthority

logger = get_logger()


@dataclass(frozen=True)
class CertificationSystem:
    """All wired services of one registry instance."""

    config: RegistryConfig
    role_directory: RoleDirectoryService
    ownership: OwnershipBindingService
    registry: EntityRegistryService
    lifecycle: CertificationLifecycleService
    access_policy: AccessPolicyService
    queries: CertificationQueryService
    hash_service: Blake3CertificationHashService
    integrity: IntegrityVerificationService
    event_sink: EventSinkProtocol
    time_authority: TimeAuthorityProtocol


async def build_certification_system(
    config: RegistryConfig,
    *,
    event_sink: EventSinkProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
) -> CertificationSystem:
    """Wire a complete registry.

    Args:
        config: Addresses and bootstrap behaviour.
        event_sink: Audit sink (default: StructlogEventSink).
        time_authority: Clock (default: SystemTimeAuthority).

    Returns:
        The wired system. When config.auto_configure_gateway is set, the
        gateway is already bound and the system accepts writes.
    """
    sink = event_sink or StructlogEventSink()
    clock = time_authority or SystemTimeAuthority()

    role_directory = RoleDirectoryService(super_admin=config.super_admin)
    ownership = OwnershipBindingService()
    registry = EntityRegistryService(
        role_directory=role_directory,
        ownership=ownership,
        event_sink=sink,
        time_authority=clock,
    )
    hash_service = Blake3CertificationHashService()
    system = CertificationSystem(
        config=config,
        role_directory=role_directory,
        ownership=ownership,
        registry=registry,
        lifecycle=CertificationLifecycleService(
            registry=registry,
            role_directory=role_directory,
            principal=config.gateway_address,
        ),
        access_policy=AccessPolicyService(registry=registry, role_directory=role_directory),
        queries=CertificationQueryService(registry=registry, role_directory=role_directory),
        hash_service=hash_service,
        integrity=IntegrityVerificationService(
            registry=registry,
            hash_service=hash_service,
            event_sink=sink,
            time_authority=clock,
        ),
        event_sink=sink,
        time_authority=clock,
    )

    if config.auto_configure_gateway:
        await registry.configure_gateway(config.super_admin, config.gateway_address)

    logger.info(
        "certification_system_built",
        environment=config.environment,
        gateway_configured=registry.gateway is not None,
        event_sink=type(sink).__name__,
    )
    return system


__all__ = ["CertificationSystem", "build_certification_system"]
