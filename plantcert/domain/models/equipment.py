"""Equipment domain model and certification lifecycle state.

Equipment lifecycle is described by two orthogonal facets carried
together in one LifecycleState value:

- status: the coarse outcome category
- step: the fine-grained position in the certification workflow

Workflow (status, step):

    (REGISTERED, REGISTERED)          entry state, set at creation
        -> (PENDING, DOCUMENTS_PENDING)   documents requested
        -> (PENDING, READY_FOR_REVIEW)    operator declares readiness
        -> (PENDING, UNDER_REVIEW)        regulator opens review
        -> (CERTIFIED, CERTIFIED)         regulator approves with hash
        -> (REJECTED, REJECTED)           regulator rejects with reason
    any -> (DEPRECATED, <step unchanged>) regulator retires equipment

Guards read status and step independently, so both stay distinct fields
even though they travel together.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from plantcert.domain.models.certification_hash import ZERO_HASH, validate_hash


class EquipmentStatus(str, Enum):
    """Coarse outcome category of equipment certification."""

    REGISTERED = "REGISTERED"
    PENDING = "PENDING"
    CERTIFIED = "CERTIFIED"
    REJECTED = "REJECTED"
    DEPRECATED = "DEPRECATED"


class CertificationStep(str, Enum):
    """Fine-grained position in the certification workflow."""

    REGISTERED = "REGISTERED"
    DOCUMENTS_PENDING = "DOCUMENTS_PENDING"
    READY_FOR_REVIEW = "READY_FOR_REVIEW"
    UNDER_REVIEW = "UNDER_REVIEW"
    CERTIFIED = "CERTIFIED"
    REJECTED = "REJECTED"


@dataclass(frozen=True, eq=True)
class LifecycleState:
    """The (status, step) pair describing where equipment stands."""

    status: EquipmentStatus
    step: CertificationStep

    def __str__(self) -> str:
        return f"({self.status.value}, {self.step.value})"


INITIAL_STATE = LifecycleState(EquipmentStatus.REGISTERED, CertificationStep.REGISTERED)


@dataclass(frozen=True, eq=True)
class Equipment:
    """A piece of regulated equipment under certification.

    Equipment is the only record mutated after creation. Because the
    dataclass is frozen, every mutation produces a new instance that
    replaces the old one atomically in the registry.

    Attributes:
        id: Registry-allocated identifier (starts at 0).
        name: Equipment name.
        description: Free-form description.
        plant_id: Plant hosting the equipment (must exist at creation).
        registered_at: Creation time (UTC).
        state: Current (status, step) pair.
        certified_at: When status last became CERTIFIED.
        rejected_at: When status last became REJECTED.
        pending_at: When status last became PENDING.
        deprecated_at: When status became DEPRECATED.
        final_certification_hash: 32-byte anchor, zero when absent.
        rejection_reason: Reason given on rejection, empty otherwise.
    """

    id: int
    name: str
    description: str
    plant_id: int
    registered_at: datetime
    state: LifecycleState = field(default=INITIAL_STATE)
    certified_at: datetime | None = field(default=None)
    rejected_at: datetime | None = field(default=None)
    pending_at: datetime | None = field(default=None)
    deprecated_at: datetime | None = field(default=None)
    final_certification_hash: bytes = field(default=ZERO_HASH)
    rejection_reason: str = field(default="")

    def __post_init__(self) -> None:
        """Validate the stored certification hash size."""
        validate_hash(self.final_certification_hash)

    @property
    def status(self) -> EquipmentStatus:
        return self.state.status

    @property
    def step(self) -> CertificationStep:
        return self.state.step

    def with_state(self, new_state: LifecycleState, at: datetime) -> Equipment:
        """Return a copy moved to new_state.

        Stamps the timestamp that belongs to the new status and clears
        the rejection reason when entering CERTIFIED. No transition
        rules are checked here; callers are expected to have passed the
        lifecycle guards already.

        Args:
            new_state: Target (status, step).
            at: Time of the transition.

        Returns:
            Updated Equipment instance.
        """
        changes: dict[str, object] = {"state": new_state}
        status = new_state.status
        if status is EquipmentStatus.CERTIFIED:
            changes["certified_at"] = at
            changes["rejection_reason"] = ""
        elif status is EquipmentStatus.REJECTED:
            changes["rejected_at"] = at
        elif status is EquipmentStatus.PENDING:
            changes["pending_at"] = at
        elif status is EquipmentStatus.DEPRECATED:
            changes["deprecated_at"] = at
        return replace(self, **changes)

    def with_certification_hash(self, value: bytes) -> Equipment:
        return replace(self, final_certification_hash=validate_hash(value))

    def with_rejection_reason(self, reason: str) -> Equipment:
        return replace(self, rejection_reason=reason)
