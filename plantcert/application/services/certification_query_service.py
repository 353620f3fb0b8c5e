"""Oversight queries over the registry.

Read-only projections for dashboards and regulators. Projections that
expose who works where or what a plant has submitted are restricted to
oversight roles; the remaining reads are open.
"""

from __future__ import annotations

from collections.abc import Collection

from plantcert.application.services.base import LoggingMixin
from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)
from plantcert.application.services.role_directory_service import RoleDirectoryService
from plantcert.domain.errors.authorization import UnauthorizedError
from plantcert.domain.errors.not_found import EquipmentNotFoundError
from plantcert.domain.models.actor import Actor
from plantcert.domain.models.address import Address
from plantcert.domain.models.document import Document
from plantcert.domain.models.equipment import Equipment
from plantcert.domain.models.plant import Plant
from plantcert.domain.models.role import Role

ACTOR_LIST_ROLES: tuple[Role, ...] = (
    Role.SUPER_ADMIN,
    Role.PLANT_OPERATOR_ADMIN,
    Role.REGULATORY_AUTHORITY,
)

PLANT_RECORDS_ROLES: tuple[Role, ...] = (
    Role.SUPER_ADMIN,
    Role.PLANT_OPERATOR_ADMIN,
    Role.REGULATORY_AUTHORITY,
    Role.CERTIFICATION_OFFICER,
)


class CertificationQueryService(LoggingMixin):
    """Role-filtered read projections."""

    def __init__(
        self,
        registry: EntityRegistryService,
        role_directory: RoleDirectoryService,
    ) -> None:
        self._registry = registry
        self._roles = role_directory
        self._init_logger(component="query")

    # Open reads

    def get_all_plants(self) -> list[Plant]:
        return [self._registry.get_plant(pid) for pid in self._registry.all_plant_ids()]

    def get_equipment_documents(self, equipment_id: int) -> list[int]:
        """Document ids of equipment in submission order."""
        return self._registry.equipment_document_ids(equipment_id)

    def get_equipment_document_hashes(self, equipment_id: int) -> list[str]:
        """Content ids of the equipment's documents in submission order."""
        return [
            self._registry.get_document(doc_id).content_id
            for doc_id in self._registry.equipment_document_ids(equipment_id)
        ]

    # Restricted reads

    def get_all_actors(self, caller: Address) -> list[Actor]:
        self._require(caller, ACTOR_LIST_ROLES, "view the actor list")
        return [self._registry.get_actor(aid) for aid in self._registry.all_actor_ids()]

    def get_actors_by_plant(self, caller: Address, plant_id: int) -> list[Actor]:
        self._require(caller, ACTOR_LIST_ROLES, "view the actor list")
        return [
            self._registry.get_actor(aid)
            for aid in self._registry.plant_actor_ids(plant_id)
        ]

    def get_equipment_by_plant(self, caller: Address, plant_id: int) -> list[Equipment]:
        self._require(caller, PLANT_RECORDS_ROLES, "view plant records")
        return [
            self._registry.get_equipment(eid)
            for eid in self._registry.plant_equipment_ids(plant_id)
        ]

    def get_documents_by_plant(self, caller: Address, plant_id: int) -> list[Document]:
        """All documents of all equipment of a plant, equipment by equipment."""
        self._require(caller, PLANT_RECORDS_ROLES, "view plant records")
        return [
            self._registry.get_document(doc_id)
            for eid in self._registry.plant_equipment_ids(plant_id)
            for doc_id in self._registry.equipment_document_ids(eid)
        ]

    def get_documents_for_equipment(
        self, caller: Address, equipment_id: int
    ) -> list[Document]:
        """Raises EquipmentNotFoundError for an unknown equipment id."""
        self._require(caller, PLANT_RECORDS_ROLES, "view plant records")
        if not self._registry.equipment_exists(equipment_id):
            raise EquipmentNotFoundError(equipment_id)
        return [
            self._registry.get_document(doc_id)
            for doc_id in self._registry.equipment_document_ids(equipment_id)
        ]

    def _require(self, caller: Address, roles: Collection[Role], action: str) -> None:
        if self._roles.roles_of(caller).isdisjoint(roles):
            self._log_operation("query", caller=caller, action=action).warning(
                "query_refused"
            )
            raise UnauthorizedError(caller, roles, action)
