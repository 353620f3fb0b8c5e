"""Unit tests for CertificationQueryService."""

import pytest

from plantcert.bootstrap.certification import CertificationSystem
from plantcert.domain.errors import EquipmentNotFoundError, UnauthorizedError
from plantcert.domain.models.document import DocumentType
from plantcert.domain.models.equipment import Equipment
from tests.helpers.addresses import (
    LABORATORY,
    MANUFACTURER,
    OFFICER,
    OPERATOR,
    REGULATOR,
    SUPER_ADMIN,
)


async def _with_documents(system: CertificationSystem) -> None:
    for caller, content_id in ((MANUFACTURER, "bafy-1"), (LABORATORY, "bafy-2")):
        await system.lifecycle.register_document(
            caller,
            0,
            doc_type=DocumentType.CERTIFICATION,
            name="Doc",
            description="d",
            content_id=content_id,
        )


class TestOpenReads:
    @pytest.mark.asyncio
    async def test_all_plants(self, staffed_system: CertificationSystem) -> None:
        plants = staffed_system.queries.get_all_plants()
        assert [plant.name for plant in plants] == ["Plant Alpha"]

    @pytest.mark.asyncio
    async def test_document_ids_and_hashes_in_order(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        await _with_documents(staffed_system)
        queries = staffed_system.queries
        assert queries.get_equipment_documents(0) == [0, 1]
        assert queries.get_equipment_document_hashes(0) == ["bafy-1", "bafy-2"]

    @pytest.mark.asyncio
    async def test_unknown_equipment_is_empty(self, system: CertificationSystem) -> None:
        assert system.queries.get_equipment_documents(5) == []
        assert system.queries.get_equipment_document_hashes(5) == []


class TestActorLists:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("caller", [SUPER_ADMIN, OPERATOR, REGULATOR])
    async def test_allowed(self, staffed_system: CertificationSystem, caller: str) -> None:
        assert len(staffed_system.queries.get_all_actors(caller)) == 5
        assert len(staffed_system.queries.get_actors_by_plant(caller, 0)) == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("caller", [OFFICER, MANUFACTURER, LABORATORY])
    async def test_refused(self, staffed_system: CertificationSystem, caller: str) -> None:
        with pytest.raises(UnauthorizedError):
            staffed_system.queries.get_all_actors(caller)


class TestPlantRecords:
    @pytest.mark.asyncio
    async def test_officer_sees_plant_records(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        await _with_documents(staffed_system)
        queries = staffed_system.queries
        assert [e.id for e in queries.get_equipment_by_plant(OFFICER, 0)] == [0]
        assert [d.content_id for d in queries.get_documents_by_plant(OFFICER, 0)] == [
            "bafy-1",
            "bafy-2",
        ]
        assert len(queries.get_documents_for_equipment(REGULATOR, 0)) == 2

    @pytest.mark.asyncio
    async def test_manufacturer_refused(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        with pytest.raises(UnauthorizedError):
            staffed_system.queries.get_equipment_by_plant(MANUFACTURER, 0)
        with pytest.raises(UnauthorizedError):
            staffed_system.queries.get_documents_by_plant(LABORATORY, 0)

    @pytest.mark.asyncio
    async def test_documents_for_unknown_equipment(
        self, staffed_system: CertificationSystem
    ) -> None:
        with pytest.raises(EquipmentNotFoundError):
            staffed_system.queries.get_documents_for_equipment(OPERATOR, 9)
