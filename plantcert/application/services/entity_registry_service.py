"""Entity registry service.

Append-only storage of plants, equipment, documents and actors plus the
reverse indexes used by oversight queries. Every mutator is accepted only
from the gateway principal, which is bound once through
configure_gateway(). The registry performs structural validation (non-empty
fields, parent existence) but no role or lifecycle checks; those belong to
CertificationLifecycleService, which calls in here as the gateway.

Writes are serialized by an internal asyncio.Lock. Each mutator builds its
new record, hands the audit event to the sink and only then stores the
record, so a sink failure leaves the registry untouched. Callers that need
several mutations to stand or fall together wrap them in atomic(); every
stored change then registers an undo that runs if a later step raises.

Stored records are frozen dataclasses replaced wholesale, so readers
never need the lock.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any

from plantcert.application.ports.event_sink import EventSinkProtocol
from plantcert.application.ports.time_authority import TimeAuthorityProtocol
from plantcert.application.services.base import LoggingMixin
from plantcert.application.services.ownership_binding_service import (
    OwnershipBindingService,
)
from plantcert.application.services.role_directory_service import RoleDirectoryService
from plantcert.domain.errors.authorization import (
    GatewayNotConfiguredError,
    GatewayOnlyError,
    UnauthorizedError,
)
from plantcert.domain.errors.bootstrap import AlreadyConfiguredError
from plantcert.domain.errors.not_found import (
    ActorNotFoundError,
    DocumentNotFoundError,
    EquipmentNotFoundError,
    PlantNotFoundError,
)
from plantcert.domain.errors.validation import InvalidInputError, require_text
from plantcert.domain.events.registry_event import (
    ACTOR_REGISTERED_EVENT,
    CERTIFICATION_HASH_SET_EVENT,
    DOCUMENT_SUBMITTED_EVENT,
    EQUIPMENT_REGISTERED_EVENT,
    EQUIPMENT_STATUS_UPDATED_EVENT,
    GATEWAY_CONFIGURED_EVENT,
    OWNERSHIP_BOUND_EVENT,
    PLANT_REGISTERED_EVENT,
    REJECTION_REASON_SET_EVENT,
    ROLE_GRANTED_EVENT,
    ROLE_REVOKED_EVENT,
    RegistryEvent,
)
from plantcert.domain.models.actor import Actor
from plantcert.domain.models.address import Address, is_null_address
from plantcert.domain.models.certification_hash import hash_to_hex, validate_hash
from plantcert.domain.models.document import Document, DocumentStatus, DocumentType
from plantcert.domain.models.equipment import Equipment, LifecycleState
from plantcert.domain.models.plant import Plant
from plantcert.domain.models.role import Role
from plantcert.domain.primitives.ensure_atomicity import (
    AtomicOperationContext,
    RollbackHandler,
)

# Per-task, so concurrent callers never share an open operation
_active_operation: ContextVar[AtomicOperationContext | None] = ContextVar(
    "registry_atomic_operation", default=None
)


class EntityRegistryService(LoggingMixin):
    """Gateway-guarded storage for certification entities.

    Identifiers start at 0 and come from one counter per entity kind.
    Nothing is ever deleted.

    Attributes:
        gateway: The configured gateway principal, or None before bootstrap.
    """

    def __init__(
        self,
        role_directory: RoleDirectoryService,
        ownership: OwnershipBindingService,
        event_sink: EventSinkProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        """Initialize an empty registry.

        Args:
            role_directory: Membership store shared with the lifecycle service.
            ownership: Soulbound ownership store bound on equipment creation.
            event_sink: Receives one event per successful mutation.
            time_authority: Source of record and event timestamps.
        """
        self._roles = role_directory
        self._ownership = ownership
        self._events = event_sink
        self._time = time_authority
        self._lock = asyncio.Lock()
        self._gateway: Address | None = None

        self._plants: dict[int, Plant] = {}
        self._equipment: dict[int, Equipment] = {}
        self._documents: dict[int, Document] = {}
        self._actors: dict[int, Actor] = {}
        self._next_ids: dict[str, int] = {
            "plant": 0,
            "equipment": 0,
            "document": 0,
            "actor": 0,
        }

        self._plant_ids: list[int] = []
        self._actor_ids: list[int] = []
        self._plant_equipment: defaultdict[int, list[int]] = defaultdict(list)
        self._plant_actors: defaultdict[int, list[int]] = defaultdict(list)
        self._equipment_documents: defaultdict[int, list[int]] = defaultdict(list)

        self._init_logger(component="registry")

    @property
    def gateway(self) -> Address | None:
        return self._gateway

    @property
    def role_directory(self) -> RoleDirectoryService:
        return self._roles

    @property
    def ownership(self) -> OwnershipBindingService:
        return self._ownership

    @asynccontextmanager
    async def atomic(self, operation: str = "") -> AsyncIterator[AtomicOperationContext]:
        """Group mutations so that a failure anywhere undoes all of them.

        Nested calls join the outermost operation. create_equipment is
        never undone (its ownership binding is permanent) and must not be
        grouped.

        Example:
            async with registry.atomic("finalize_certification"):
                await registry.set_final_certification_hash(...)
                await registry.update_equipment_status(...)
        """
        current = _active_operation.get()
        if current is not None:
            yield current
            return
        async with AtomicOperationContext(operation) as context:
            token = _active_operation.set(context)
            try:
                yield context
            finally:
                _active_operation.reset(token)

    # ------------------------------------------------------------------
    # Bootstrap
    # ------------------------------------------------------------------

    async def configure_gateway(self, caller: Address, gateway: Address) -> None:
        """Bind the gateway principal and grant it the GATEWAY role.

        Args:
            caller: Must hold SUPER_ADMIN.
            gateway: Principal that will be allowed to call mutators.

        Raises:
            UnauthorizedError: caller is not a super admin.
            AlreadyConfiguredError: a gateway is already bound.
            InvalidInputError: gateway is a null address.
        """
        log = self._log_operation("configure_gateway", caller=caller, gateway=gateway)
        if not self._roles.has_role(Role.SUPER_ADMIN, caller):
            log.warning("configure_gateway_refused")
            raise UnauthorizedError(caller, (Role.SUPER_ADMIN,), "configure the gateway")

        async with self._lock:
            if self._gateway is not None:
                raise AlreadyConfiguredError(self._gateway)
            if is_null_address(gateway):
                raise InvalidInputError("gateway", "must not be a null address")
            self._roles.require_admin(Role.GATEWAY, caller)

            await self._emit(
                GATEWAY_CONFIGURED_EVENT,
                None,
                caller,
                gateway=gateway,
                role=Role.GATEWAY.value,
            )
            self._roles.grant_role(Role.GATEWAY, gateway, acting_as=caller)
            self._gateway = gateway
        log.info("gateway_configured")

    def _require_gateway(self, caller: Address, operation: str) -> None:
        if self._gateway is None:
            raise GatewayNotConfiguredError(caller, operation)
        if not self._roles.has_role(Role.GATEWAY, caller):
            self._log_operation(operation, caller=caller).warning("non_gateway_write_refused")
            raise GatewayOnlyError(caller, operation)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    async def create_plant(
        self,
        caller: Address,
        registered_by: Address,
        name: str,
        description: str,
        location: str,
        is_active: bool = True,
    ) -> Plant:
        """Create a plant record.

        Raises:
            UnauthorizedError: caller is not the gateway.
            InvalidInputError: name, description or location is empty.
        """
        self._require_gateway(caller, "create_plant")
        require_text("name", name)
        require_text("description", description)
        require_text("location", location)

        async with self._lock:
            plant = Plant(
                id=self._next_ids["plant"],
                name=name,
                description=description,
                location=location,
                registered_at=self._time.utcnow(),
                is_active=is_active,
                registered_by=registered_by,
            )
            await self._emit(
                PLANT_REGISTERED_EVENT,
                plant.id,
                registered_by,
                name=name,
                registered_by=registered_by,
            )
            self._next_ids["plant"] += 1
            self._plants[plant.id] = plant
            self._plant_ids.append(plant.id)

            def undo() -> None:
                del self._plants[plant.id]
                self._plant_ids.remove(plant.id)

            self._on_rollback(undo)

        self._log_operation("create_plant", plant_id=plant.id).info("plant_created")
        return plant

    async def create_equipment(
        self,
        caller: Address,
        owner: Address,
        name: str,
        description: str,
        plant_id: int,
    ) -> Equipment:
        """Create equipment in its entry state and bind its soulbound owner.

        Both events are emitted before anything is stored. The binding is
        permanent, so this call does not take part in atomic().

        Raises:
            UnauthorizedError: caller is not the gateway.
            InvalidInputError: empty name/description or null owner.
            PlantNotFoundError: plant_id does not exist.
        """
        self._require_gateway(caller, "create_equipment")
        require_text("name", name)
        require_text("description", description)
        if is_null_address(owner):
            raise InvalidInputError("owner", "must not be a null address")
        if plant_id not in self._plants:
            raise PlantNotFoundError(plant_id)

        async with self._lock:
            equipment = Equipment(
                id=self._next_ids["equipment"],
                name=name,
                description=description,
                plant_id=plant_id,
                registered_at=self._time.utcnow(),
            )
            await self._emit(OWNERSHIP_BOUND_EVENT, equipment.id, owner, owner=owner)
            await self._emit(
                EQUIPMENT_REGISTERED_EVENT,
                equipment.id,
                owner,
                name=name,
                owner=owner,
                plant_id=plant_id,
            )
            self._next_ids["equipment"] += 1
            self._ownership.bind(equipment.id, owner)
            self._equipment[equipment.id] = equipment
            self._plant_equipment[plant_id].append(equipment.id)

        self._log_operation(
            "create_equipment", equipment_id=equipment.id, plant_id=plant_id
        ).info("equipment_created")
        return equipment

    async def create_document(
        self,
        caller: Address,
        submitter: Address,
        equipment_id: int,
        doc_type: DocumentType,
        name: str,
        description: str,
        content_id: str,
    ) -> Document:
        """Attach a document reference to equipment.

        Raises:
            UnauthorizedError: caller is not the gateway.
            InvalidInputError: empty name, description or content_id.
            EquipmentNotFoundError: equipment_id does not exist.
        """
        self._require_gateway(caller, "create_document")
        require_text("name", name)
        require_text("description", description)
        require_text("content_id", content_id)
        if equipment_id not in self._equipment:
            raise EquipmentNotFoundError(equipment_id)

        async with self._lock:
            document = Document(
                id=self._next_ids["document"],
                name=name,
                description=description,
                doc_type=doc_type,
                status=DocumentStatus.SUBMITTED,
                submitter=submitter,
                submitted_at=self._time.utcnow(),
                content_id=content_id,
                equipment_id=equipment_id,
            )
            await self._emit(
                DOCUMENT_SUBMITTED_EVENT,
                document.id,
                submitter,
                equipment_id=equipment_id,
                doc_type=doc_type.value,
                submitter=submitter,
                content_id=content_id,
            )
            self._next_ids["document"] += 1
            self._documents[document.id] = document
            self._equipment_documents[equipment_id].append(document.id)

            def undo() -> None:
                del self._documents[document.id]
                self._equipment_documents[equipment_id].remove(document.id)

            self._on_rollback(undo)

        self._log_operation(
            "create_document", document_id=document.id, equipment_id=equipment_id
        ).info("document_created")
        return document

    async def create_actor(
        self,
        caller: Address,
        name: str,
        address: Address,
        role: Role,
        plant_id: int,
    ) -> Actor:
        """Record a participant.

        The plant is not required to exist. The actor is listed under the
        plant only when it does.

        Raises:
            UnauthorizedError: caller is not the gateway.
            InvalidInputError: empty name or null address.
        """
        self._require_gateway(caller, "create_actor")
        require_text("name", name)
        if is_null_address(address):
            raise InvalidInputError("address", "must not be a null address")

        async with self._lock:
            actor = Actor(
                id=self._next_ids["actor"],
                name=name,
                address=address,
                role=role,
                registered_at=self._time.utcnow(),
                plant_id=plant_id,
            )
            await self._emit(
                ACTOR_REGISTERED_EVENT,
                actor.id,
                address,
                name=name,
                role=role.value,
                plant_id=plant_id,
            )
            self._next_ids["actor"] += 1
            self._actors[actor.id] = actor
            self._actor_ids.append(actor.id)
            indexed = plant_id in self._plants
            if indexed:
                self._plant_actors[plant_id].append(actor.id)

            def undo() -> None:
                del self._actors[actor.id]
                self._actor_ids.remove(actor.id)
                if indexed:
                    self._plant_actors[plant_id].remove(actor.id)

            self._on_rollback(undo)

        self._log_operation("create_actor", actor_id=actor.id, role=role.value).info(
            "actor_created"
        )
        return actor

    # ------------------------------------------------------------------
    # Equipment mutation
    # ------------------------------------------------------------------

    async def update_equipment_status(
        self,
        caller: Address,
        acting_as: Address,
        equipment_id: int,
        new_state: LifecycleState,
    ) -> Equipment:
        """Overwrite the (status, step) pair and stamp the matching timestamp.

        No role or transition checks are made here.

        Raises:
            UnauthorizedError: caller is not the gateway.
            EquipmentNotFoundError: equipment_id does not exist.
        """
        self._require_gateway(caller, "update_equipment_status")
        async with self._lock:
            current = self.get_equipment(equipment_id)
            updated = current.with_state(new_state, self._time.utcnow())
            await self._emit(
                EQUIPMENT_STATUS_UPDATED_EVENT,
                equipment_id,
                acting_as,
                previous_status=current.status.value,
                previous_step=current.step.value,
                status=new_state.status.value,
                step=new_state.step.value,
            )
            self._replace_equipment(current, updated)

        self._log_operation(
            "update_equipment_status",
            equipment_id=equipment_id,
            state=str(new_state),
            acting_as=acting_as,
        ).info("equipment_status_updated")
        return updated

    async def set_final_certification_hash(
        self,
        caller: Address,
        acting_as: Address,
        equipment_id: int,
        certification_hash: bytes,
    ) -> Equipment:
        """Store (or clear, with the zero hash) the final certification hash.

        Raises:
            UnauthorizedError: caller is not the gateway.
            EquipmentNotFoundError: equipment_id does not exist.
            InvalidInputError: the hash is not 32 bytes.
        """
        self._require_gateway(caller, "set_final_certification_hash")
        try:
            value = validate_hash(certification_hash)
        except ValueError as exc:
            raise InvalidInputError("certification_hash", str(exc)) from None

        async with self._lock:
            current = self.get_equipment(equipment_id)
            updated = current.with_certification_hash(value)
            await self._emit(
                CERTIFICATION_HASH_SET_EVENT,
                equipment_id,
                acting_as,
                certification_hash=hash_to_hex(value),
            )
            self._replace_equipment(current, updated)
        return updated

    async def set_rejection_reason(
        self,
        caller: Address,
        acting_as: Address,
        equipment_id: int,
        reason: str,
    ) -> Equipment:
        """Store the rejection reason.

        Raises:
            UnauthorizedError: caller is not the gateway.
            EquipmentNotFoundError: equipment_id does not exist.
        """
        self._require_gateway(caller, "set_rejection_reason")
        async with self._lock:
            current = self.get_equipment(equipment_id)
            updated = current.with_rejection_reason(reason)
            await self._emit(
                REJECTION_REASON_SET_EVENT, equipment_id, acting_as, reason=reason
            )
            self._replace_equipment(current, updated)
        return updated

    # ------------------------------------------------------------------
    # Role forwarding
    # ------------------------------------------------------------------

    async def grant_role_with_caller(
        self, caller: Address, role: Role, account: Address, acting_as: Address
    ) -> bool:
        """Grant a role on behalf of acting_as.

        Returns:
            True if membership changed. An event is emitted only then.

        Raises:
            UnauthorizedError: caller is not the gateway, or acting_as lacks
                the role's admin role.
            InvalidInputError: account is a null address.
        """
        self._require_gateway(caller, "grant_role_with_caller")
        async with self._lock:
            self._roles.require_admin(role, acting_as)
            if is_null_address(account):
                raise InvalidInputError("account", "must not be a null address")
            if self._roles.has_role(role, account):
                return False
            await self._emit(
                ROLE_GRANTED_EVENT, None, acting_as, role=role.value, account=account
            )
            self._roles.grant_role(role, account, acting_as)
            self._on_rollback(lambda: self._roles.revoke_role(role, account, acting_as))
        return True

    async def revoke_role_with_caller(
        self, caller: Address, role: Role, account: Address, acting_as: Address
    ) -> bool:
        """Revoke a role on behalf of acting_as. See grant_role_with_caller."""
        self._require_gateway(caller, "revoke_role_with_caller")
        async with self._lock:
            self._roles.require_admin(role, acting_as)
            if not self._roles.has_role(role, account):
                return False
            await self._emit(
                ROLE_REVOKED_EVENT, None, acting_as, role=role.value, account=account
            )
            self._roles.revoke_role(role, account, acting_as)
            self._on_rollback(lambda: self._roles.grant_role(role, account, acting_as))
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_plant(self, plant_id: int) -> Plant:
        try:
            return self._plants[plant_id]
        except KeyError:
            raise PlantNotFoundError(plant_id) from None

    def get_equipment(self, equipment_id: int) -> Equipment:
        try:
            return self._equipment[equipment_id]
        except KeyError:
            raise EquipmentNotFoundError(equipment_id) from None

    def get_document(self, document_id: int) -> Document:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def get_actor(self, actor_id: int) -> Actor:
        try:
            return self._actors[actor_id]
        except KeyError:
            raise ActorNotFoundError(actor_id) from None

    def all_plant_ids(self) -> list[int]:
        return list(self._plant_ids)

    def all_actor_ids(self) -> list[int]:
        return list(self._actor_ids)

    def plant_equipment_ids(self, plant_id: int) -> list[int]:
        """Equipment ids of a plant in creation order (empty if unknown)."""
        return list(self._plant_equipment.get(plant_id, ()))

    def plant_actor_ids(self, plant_id: int) -> list[int]:
        return list(self._plant_actors.get(plant_id, ()))

    def equipment_document_ids(self, equipment_id: int) -> list[int]:
        """Document ids of equipment in submission order (empty if unknown)."""
        return list(self._equipment_documents.get(equipment_id, ()))

    def plant_exists(self, plant_id: int) -> bool:
        return plant_id in self._plants

    def equipment_exists(self, equipment_id: int) -> bool:
        return equipment_id in self._equipment

    def document_exists(self, document_id: int) -> bool:
        return document_id in self._documents

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _replace_equipment(self, current: Equipment, updated: Equipment) -> None:
        self._equipment[current.id] = updated
        self._on_rollback(lambda: self._equipment.__setitem__(current.id, current))

    def _on_rollback(self, handler: RollbackHandler) -> None:
        operation = _active_operation.get()
        if operation is not None:
            operation.add_rollback(handler)

    async def _emit(
        self, kind: str, entity_id: int | None, actor: Address, **payload: Any
    ) -> None:
        await self._events.emit(
            RegistryEvent(
                kind=kind,
                entity_id=entity_id,
                actor=actor,
                timestamp=self._time.utcnow(),
                payload=payload,
            )
        )
