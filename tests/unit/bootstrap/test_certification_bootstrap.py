"""Unit tests for build_certification_system."""

from dataclasses import replace

import pytest

from plantcert.bootstrap.certification import build_certification_system
from plantcert.config.registry_config import TEST_REGISTRY_CONFIG
from plantcert.domain.errors import GatewayNotConfiguredError
from plantcert.domain.models.role import Role
from plantcert.infrastructure.adapters.structlog_event_sink import StructlogEventSink
from plantcert.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from plantcert.infrastructure.stubs.event_sink_stub import EventSinkStub
from tests.helpers.addresses import GATEWAY, SUPER_ADMIN


class TestBuildCertificationSystem:
    @pytest.mark.asyncio
    async def test_shared_wiring(self, event_sink: EventSinkStub) -> None:
        system = await build_certification_system(TEST_REGISTRY_CONFIG, event_sink=event_sink)

        assert system.registry.role_directory is system.role_directory
        assert system.registry.ownership is system.ownership
        assert system.lifecycle.principal == GATEWAY
        assert system.event_sink is event_sink
        assert isinstance(system.time_authority, SystemTimeAuthority)

    @pytest.mark.asyncio
    async def test_configures_gateway(self, event_sink: EventSinkStub) -> None:
        system = await build_certification_system(TEST_REGISTRY_CONFIG, event_sink=event_sink)

        assert system.registry.gateway == GATEWAY
        assert system.role_directory.has_role(Role.GATEWAY, GATEWAY)
        assert system.role_directory.has_role(Role.SUPER_ADMIN, SUPER_ADMIN)
        assert event_sink.kinds() == ["gateway.configured"]

    @pytest.mark.asyncio
    async def test_without_auto_configuration(self, event_sink: EventSinkStub) -> None:
        config = replace(TEST_REGISTRY_CONFIG, auto_configure_gateway=False)
        system = await build_certification_system(config, event_sink=event_sink)

        assert system.registry.gateway is None
        with pytest.raises(GatewayNotConfiguredError):
            await system.lifecycle.register_plant(SUPER_ADMIN, "Plant", "d", "l")

        await system.registry.configure_gateway(SUPER_ADMIN, system.lifecycle.principal)
        plant = await system.lifecycle.register_plant(SUPER_ADMIN, "Plant", "d", "l")
        assert plant.id == 0

    @pytest.mark.asyncio
    async def test_default_event_sink(self) -> None:
        system = await build_certification_system(TEST_REGISTRY_CONFIG)
        assert isinstance(system.event_sink, StructlogEventSink)
        assert system.event_sink.emitted_count == 1
