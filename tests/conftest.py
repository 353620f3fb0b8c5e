"""
Pytest configuration and shared fixtures for the certification registry tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async port mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)
from plantcert.application.services.ownership_binding_service import (
    OwnershipBindingService,
)
from plantcert.application.services.role_directory_service import RoleDirectoryService
from plantcert.bootstrap.certification import (
    CertificationSystem,
    build_certification_system,
)
from plantcert.config.registry_config import TEST_REGISTRY_CONFIG
from plantcert.domain.models.equipment import Equipment
from plantcert.infrastructure.stubs.event_sink_stub import EventSinkStub
from tests.helpers.addresses import (
    GATEWAY,
    LABORATORY,
    MANUFACTURER,
    OFFICER,
    OPERATOR,
    REGULATOR,
    SUPER_ADMIN,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from plantcert import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Time frozen at 2026-01-15T10:00:00Z."""
    return FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def event_sink() -> EventSinkStub:
    return EventSinkStub()


@pytest.fixture
def role_directory() -> RoleDirectoryService:
    return RoleDirectoryService(super_admin=SUPER_ADMIN)


@pytest.fixture
def ownership() -> OwnershipBindingService:
    return OwnershipBindingService()


@pytest.fixture
def unconfigured_registry(
    role_directory: RoleDirectoryService,
    ownership: OwnershipBindingService,
    event_sink: EventSinkStub,
    fake_time_authority: FakeTimeAuthority,
) -> EntityRegistryService:
    """Registry whose gateway has not been bound yet."""
    return EntityRegistryService(
        role_directory=role_directory,
        ownership=ownership,
        event_sink=event_sink,
        time_authority=fake_time_authority,
    )


@pytest.fixture
async def registry(
    unconfigured_registry: EntityRegistryService, event_sink: EventSinkStub
) -> EntityRegistryService:
    """Registry with GATEWAY bound and the bootstrap event cleared."""
    await unconfigured_registry.configure_gateway(SUPER_ADMIN, GATEWAY)
    event_sink.clear()
    return unconfigured_registry


@pytest.fixture
async def system(
    event_sink: EventSinkStub, fake_time_authority: FakeTimeAuthority
) -> CertificationSystem:
    """Fully wired system with the gateway configured."""
    return await build_certification_system(
        TEST_REGISTRY_CONFIG,
        event_sink=event_sink,
        time_authority=fake_time_authority,
    )


@pytest.fixture
async def staffed_system(system: CertificationSystem) -> CertificationSystem:
    """System with plant 0 and one participant per operational role."""
    lifecycle = system.lifecycle
    await lifecycle.register_plant(SUPER_ADMIN, "Plant Alpha", "Test plant", "Area 51")
    await lifecycle.register_plant_operator(SUPER_ADMIN, OPERATOR, 0, "Alice Admin")
    await lifecycle.register_manufacturer(OPERATOR, MANUFACTURER, 0, "Pump Works")
    await lifecycle.register_laboratory(OPERATOR, LABORATORY, 0, "Test Lab")
    await lifecycle.register_regulatory_authority(OPERATOR, REGULATOR, 0, "Regulator")
    await lifecycle.register_certification_officer(OPERATOR, OFFICER, 0, "Officer")
    return system


@pytest.fixture
async def registered_equipment(staffed_system: CertificationSystem) -> Equipment:
    """Equipment 0 on plant 0, owned by OPERATOR, in its entry state."""
    return await staffed_system.lifecycle.register_equipment(
        OPERATOR, "Reactor Pump", "Primary cooling", 0
    )
