"""Certification lifecycle service.

Drives equipment through the certification workflow and owns every
role-gated entry point of the system. It is the gateway: the registry
accepts its writes because it calls in as the configured gateway
principal, while the human identity that initiated the call travels
alongside as acting_as.

Workflow:

    register_equipment        -> (REGISTERED, REGISTERED)
    request_documents         -> (PENDING, DOCUMENTS_PENDING)
    mark_ready_for_review     -> (PENDING, READY_FOR_REVIEW)
    review_equipment          -> (PENDING, UNDER_REVIEW)
    finalize_certification    -> (CERTIFIED, CERTIFIED) | (REJECTED, REJECTED)
    deprecate_equipment       -> (DEPRECATED, <step unchanged>)

Every mutating call runs its checks and writes under one asyncio.Lock,
so concurrent calls on the same equipment are totally ordered and never
interleave between a guard and its write. The registry lock is always
taken after this one. Calls that make several registry writes run them
inside registry.atomic(), so a failure part way restores every record
the call had already changed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Collection

from plantcert.application.services.base import LoggingMixin
from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)
from plantcert.application.services.role_directory_service import RoleDirectoryService
from plantcert.domain.errors.authorization import UnauthorizedError
from plantcert.domain.errors.role_assignment import RoleAlreadyAssignedError
from plantcert.domain.errors.validation import InvalidInputError, require_text
from plantcert.domain.models.actor import Actor
from plantcert.domain.models.address import Address, is_null_address
from plantcert.domain.models.certification_hash import (
    ZERO_HASH,
    is_zero_hash,
    validate_hash,
)
from plantcert.domain.models.document import Document, DocumentType
from plantcert.domain.models.equipment import (
    CertificationStep,
    Equipment,
    EquipmentStatus,
    LifecycleState,
)
from plantcert.domain.models.plant import Plant
from plantcert.domain.models.role import DOCUMENT_SUBMITTER_ROLES, Role
from plantcert.domain.services.lifecycle_guard import (
    ensure_not_certified_or_under_review,
    ensure_not_deprecated,
    ensure_pending,
    ensure_ready_for_review,
    ensure_registered,
    ensure_under_review,
)

DOCUMENTS_PENDING_STATE = LifecycleState(
    EquipmentStatus.PENDING, CertificationStep.DOCUMENTS_PENDING
)
READY_FOR_REVIEW_STATE = LifecycleState(
    EquipmentStatus.PENDING, CertificationStep.READY_FOR_REVIEW
)
UNDER_REVIEW_STATE = LifecycleState(EquipmentStatus.PENDING, CertificationStep.UNDER_REVIEW)
CERTIFIED_STATE = LifecycleState(EquipmentStatus.CERTIFIED, CertificationStep.CERTIFIED)
REJECTED_STATE = LifecycleState(EquipmentStatus.REJECTED, CertificationStep.REJECTED)


class CertificationLifecycleService(LoggingMixin):
    """Role-gated workflow engine acting as the registry gateway.

    Attributes:
        principal: Address this service writes to the registry as.
    """

    def __init__(
        self,
        registry: EntityRegistryService,
        role_directory: RoleDirectoryService,
        principal: Address,
    ) -> None:
        """Initialize the lifecycle service.

        Args:
            registry: Registry to write through. Its gateway must be (or
                become) principal before any mutating call.
            role_directory: Membership store used for caller checks.
            principal: Gateway address this service acts as.
        """
        if is_null_address(principal):
            raise InvalidInputError("principal", "must not be a null address")
        self._registry = registry
        self._roles = role_directory
        self._principal = principal
        self._lock = asyncio.Lock()
        self._init_logger(component="lifecycle")

    @property
    def principal(self) -> Address:
        return self._principal

    # ------------------------------------------------------------------
    # Plants and roles
    # ------------------------------------------------------------------

    async def register_plant(
        self,
        caller: Address,
        name: str,
        description: str,
        location: str,
        is_active: bool = True,
    ) -> Plant:
        """Register a plant. SUPER_ADMIN only."""
        self._require_any_role(caller, (Role.SUPER_ADMIN,), "register plants")
        async with self._lock:
            plant = await self._registry.create_plant(
                self._principal,
                registered_by=caller,
                name=name,
                description=description,
                location=location,
                is_active=is_active,
            )
        self._log_operation("register_plant", caller=caller, plant_id=plant.id).info(
            "plant_registered"
        )
        return plant

    async def register_plant_operator(
        self, caller: Address, account: Address, plant_id: int, name: str
    ) -> Actor:
        """Grant PLANT_OPERATOR_ADMIN to account and record the actor. SUPER_ADMIN only."""
        self._require_any_role(caller, (Role.SUPER_ADMIN,), "register plant operators")
        return await self._register_participant(
            caller, Role.PLANT_OPERATOR_ADMIN, account, plant_id, name
        )

    async def register_manufacturer(
        self, caller: Address, account: Address, plant_id: int, name: str
    ) -> Actor:
        self._require_operator_admin(caller, "register manufacturers")
        return await self._register_participant(
            caller, Role.MANUFACTURER, account, plant_id, name
        )

    async def register_laboratory(
        self, caller: Address, account: Address, plant_id: int, name: str
    ) -> Actor:
        self._require_operator_admin(caller, "register laboratories")
        return await self._register_participant(
            caller, Role.LABORATORY, account, plant_id, name
        )

    async def register_regulatory_authority(
        self, caller: Address, account: Address, plant_id: int, name: str
    ) -> Actor:
        self._require_operator_admin(caller, "register regulatory authorities")
        return await self._register_participant(
            caller, Role.REGULATORY_AUTHORITY, account, plant_id, name
        )

    async def register_certification_officer(
        self, caller: Address, account: Address, plant_id: int, name: str
    ) -> Actor:
        self._require_operator_admin(caller, "register certification officers")
        return await self._register_participant(
            caller, Role.CERTIFICATION_OFFICER, account, plant_id, name
        )

    async def _register_participant(
        self,
        caller: Address,
        role: Role,
        account: Address,
        plant_id: int,
        name: str,
    ) -> Actor:
        require_text("name", name)
        if is_null_address(account):
            raise InvalidInputError("account", "must not be a null address")

        async with self._lock:
            if self._roles.has_role(role, account):
                raise RoleAlreadyAssignedError(role, account)
            async with self._registry.atomic("register_participant"):
                await self._registry.grant_role_with_caller(
                    self._principal, role, account, acting_as=caller
                )
                actor = await self._registry.create_actor(
                    self._principal,
                    name=name,
                    address=account,
                    role=role,
                    plant_id=plant_id,
                )

        self._log_operation(
            "register_participant",
            caller=caller,
            role=role.value,
            account=account,
            actor_id=actor.id,
        ).info("participant_registered")
        return actor

    # ------------------------------------------------------------------
    # Equipment and documents
    # ------------------------------------------------------------------

    async def register_equipment(
        self, caller: Address, name: str, description: str, plant_id: int
    ) -> Equipment:
        """Register equipment owned by the calling plant operator admin.

        Raises:
            UnauthorizedError: caller is not a plant operator admin.
            InvalidInputError: empty name or description.
            PlantNotFoundError: plant_id does not exist.
        """
        self._require_operator_admin(caller, "register equipment")
        async with self._lock:
            equipment = await self._registry.create_equipment(
                self._principal,
                owner=caller,
                name=name,
                description=description,
                plant_id=plant_id,
            )
        self._log_operation(
            "register_equipment", caller=caller, equipment_id=equipment.id
        ).info("equipment_registered")
        return equipment

    async def register_document(
        self,
        caller: Address,
        equipment_id: int,
        doc_type: DocumentType,
        name: str,
        description: str,
        content_id: str,
    ) -> Document:
        """Submit a document for equipment. Does not change equipment state.

        Raises:
            UnauthorizedError: caller holds no document-submitting role.
            EquipmentNotFoundError: equipment_id does not exist.
            EquipmentAlreadyDeprecatedError: equipment is deprecated.
            ActionNotAllowedInCurrentStepError: under review and caller is
                not a regulatory authority.
            EquipmentAlreadyCertifiedError: certified and caller is neither
                regulatory authority nor plant operator admin.
            InvalidInputError: empty name, description or content_id.
        """
        held = self._require_any_role(
            caller, DOCUMENT_SUBMITTER_ROLES, "register documents", equipment_id
        )
        async with self._lock:
            equipment = self._registry.get_equipment(equipment_id)
            ensure_not_deprecated(equipment)
            ensure_not_certified_or_under_review(equipment, held)
            document = await self._registry.create_document(
                self._principal,
                submitter=caller,
                equipment_id=equipment_id,
                doc_type=doc_type,
                name=name,
                description=description,
                content_id=content_id,
            )
        self._log_operation(
            "register_document",
            caller=caller,
            equipment_id=equipment_id,
            document_id=document.id,
            doc_type=doc_type.value,
        ).info("document_registered")
        return document

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def request_documents(self, caller: Address, equipment_id: int) -> Equipment:
        """Open the document collection phase: (REGISTERED, REGISTERED) -> (PENDING, DOCUMENTS_PENDING)."""
        held = self._require_operator_admin(caller, "request documents", equipment_id)
        async with self._lock:
            equipment = self._registry.get_equipment(equipment_id)
            ensure_not_deprecated(equipment)
            ensure_not_certified_or_under_review(equipment, held)
            ensure_registered(equipment)
            return await self._transition(caller, equipment, DOCUMENTS_PENDING_STATE)

    async def mark_ready_for_review(self, caller: Address, equipment_id: int) -> Equipment:
        """Declare equipment ready for regulatory review.

        Accepted from PENDING, and from REGISTERED directly (which then
        passes through PENDING, stamping pending_at).

        Raises:
            UnauthorizedError: caller is not a plant operator admin.
            EquipmentNotPendingError: status is neither PENDING nor REGISTERED.
        """
        held = self._require_operator_admin(
            caller, "mark equipment ready for review", equipment_id
        )
        async with self._lock:
            equipment = self._registry.get_equipment(equipment_id)
            ensure_not_deprecated(equipment)
            ensure_not_certified_or_under_review(equipment, held)
            ensure_pending(equipment)
            return await self._transition(caller, equipment, READY_FOR_REVIEW_STATE)

    async def review_equipment(self, caller: Address, equipment_id: int) -> Equipment:
        """Open the regulatory review. REGULATORY_AUTHORITY only."""
        self._require_regulator(caller, "review equipment", equipment_id)
        async with self._lock:
            equipment = self._registry.get_equipment(equipment_id)
            ensure_not_deprecated(equipment)
            ensure_ready_for_review(equipment)
            return await self._transition(caller, equipment, UNDER_REVIEW_STATE)

    async def finalize_certification(
        self,
        caller: Address,
        equipment_id: int,
        approve: bool,
        certification_hash: bytes = ZERO_HASH,
        reason: str = "",
    ) -> Equipment:
        """Close the review with an approval or a rejection.

        Args:
            caller: Must hold REGULATORY_AUTHORITY.
            equipment_id: Equipment under review.
            approve: True to certify, False to reject.
            certification_hash: Required non-zero 32-byte anchor on approval.
            reason: Required non-empty explanation on rejection.

        Raises:
            EquipmentNotUnderReviewError: step is not UNDER_REVIEW.
            InvalidInputError: zero hash on approval, empty reason on rejection.
        """
        self._require_regulator(caller, "finalize certification", equipment_id)
        if approve:
            try:
                anchor = validate_hash(certification_hash)
            except ValueError as exc:
                raise InvalidInputError("certification_hash", str(exc)) from None
            if is_zero_hash(anchor):
                raise InvalidInputError("certification_hash", "must not be the zero hash")

        async with self._lock:
            equipment = self._registry.get_equipment(equipment_id)
            ensure_not_deprecated(equipment)
            ensure_under_review(equipment)
            if not approve:
                require_text("reason", reason)
            async with self._registry.atomic("finalize_certification"):
                if approve:
                    await self._registry.set_final_certification_hash(
                        self._principal, caller, equipment_id, anchor
                    )
                    result = await self._transition(caller, equipment, CERTIFIED_STATE)
                else:
                    await self._registry.set_rejection_reason(
                        self._principal, caller, equipment_id, reason
                    )
                    await self._registry.set_final_certification_hash(
                        self._principal, caller, equipment_id, ZERO_HASH
                    )
                    result = await self._transition(caller, equipment, REJECTED_STATE)

        self._log_operation(
            "finalize_certification",
            caller=caller,
            equipment_id=equipment_id,
            approved=approve,
        ).info("certification_finalized")
        return result

    async def deprecate_equipment(self, caller: Address, equipment_id: int) -> Equipment:
        """Retire equipment permanently. The certification step is preserved."""
        self._require_regulator(caller, "deprecate equipment", equipment_id)
        async with self._lock:
            equipment = self._registry.get_equipment(equipment_id)
            ensure_not_deprecated(equipment)
            return await self._transition(
                caller,
                equipment,
                LifecycleState(EquipmentStatus.DEPRECATED, equipment.step),
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _transition(
        self, caller: Address, equipment: Equipment, target: LifecycleState
    ) -> Equipment:
        updated = await self._registry.update_equipment_status(
            self._principal, caller, equipment.id, target
        )
        self._log_operation(
            "transition",
            caller=caller,
            equipment_id=equipment.id,
            from_state=str(equipment.state),
            to_state=str(target),
        ).info("equipment_transitioned")
        return updated

    def _require_any_role(
        self,
        caller: Address,
        roles: Collection[Role],
        action: str,
        equipment_id: int | None = None,
    ) -> frozenset[Role]:
        held = self._roles.roles_of(caller)
        if held.isdisjoint(roles):
            self._log_operation(
                action.replace(" ", "_"), caller=caller, equipment_id=equipment_id
            ).warning("caller_role_refused")
            raise UnauthorizedError(
                caller,
                sorted(roles, key=lambda r: r.value),
                action,
                equipment_id=equipment_id,
            )
        return held

    def _require_operator_admin(
        self, caller: Address, action: str, equipment_id: int | None = None
    ) -> frozenset[Role]:
        return self._require_any_role(
            caller, (Role.PLANT_OPERATOR_ADMIN,), action, equipment_id
        )

    def _require_regulator(
        self, caller: Address, action: str, equipment_id: int | None = None
    ) -> frozenset[Role]:
        return self._require_any_role(
            caller, (Role.REGULATORY_AUTHORITY,), action, equipment_id
        )
