"""Lifecycle guards (domain service).

Pure checks applied before every lifecycle transition. Each guard reads
the equipment's current (status, step) and the caller's held roles and
either returns silently or raises an InvalidLifecycleStateError subclass.
"""

from __future__ import annotations

from collections.abc import Collection

from plantcert.domain.errors.lifecycle import (
    ActionNotAllowedInCurrentStepError,
    EquipmentAlreadyCertifiedError,
    EquipmentAlreadyDeprecatedError,
    EquipmentNotPendingError,
    EquipmentNotUnderReviewError,
)
from plantcert.domain.models.equipment import (
    CertificationStep,
    Equipment,
    EquipmentStatus,
)
from plantcert.domain.models.role import Role

# Roles that may still act on certified equipment
CERTIFIED_OVERRIDE_ROLES: frozenset[Role] = frozenset(
    {Role.REGULATORY_AUTHORITY, Role.PLANT_OPERATOR_ADMIN}
)


def ensure_not_certified_or_under_review(
    equipment: Equipment, held_roles: Collection[Role]
) -> None:
    """Block non-regulators during review and unprivileged roles after certification.

    Raises:
        ActionNotAllowedInCurrentStepError: Step is UNDER_REVIEW and the
            caller is not a regulatory authority.
        EquipmentAlreadyCertifiedError: Status is CERTIFIED and the caller
            is neither regulatory authority nor plant operator admin.
    """
    if (
        equipment.step is CertificationStep.UNDER_REVIEW
        and Role.REGULATORY_AUTHORITY not in held_roles
    ):
        raise ActionNotAllowedInCurrentStepError(
            equipment.id,
            equipment.state,
            expected="a step other than UNDER_REVIEW",
        )
    if equipment.status is EquipmentStatus.CERTIFIED and not any(
        role in CERTIFIED_OVERRIDE_ROLES for role in held_roles
    ):
        raise EquipmentAlreadyCertifiedError(equipment.id, equipment.state)


def ensure_not_deprecated(equipment: Equipment) -> None:
    """Raises EquipmentAlreadyDeprecatedError if the equipment is deprecated."""
    if equipment.status is EquipmentStatus.DEPRECATED:
        raise EquipmentAlreadyDeprecatedError(equipment.id, equipment.state)


def ensure_registered(equipment: Equipment) -> None:
    if equipment.status is not EquipmentStatus.REGISTERED:
        raise ActionNotAllowedInCurrentStepError(
            equipment.id, equipment.state, expected="status REGISTERED"
        )


def ensure_pending(equipment: Equipment) -> None:
    """Readiness may be declared from PENDING, or from REGISTERED directly."""
    if equipment.status not in (EquipmentStatus.PENDING, EquipmentStatus.REGISTERED):
        raise EquipmentNotPendingError(equipment.id, equipment.state)


def ensure_ready_for_review(equipment: Equipment) -> None:
    if equipment.step is not CertificationStep.READY_FOR_REVIEW:
        raise ActionNotAllowedInCurrentStepError(
            equipment.id, equipment.state, expected="step READY_FOR_REVIEW"
        )


def ensure_under_review(equipment: Equipment) -> None:
    if equipment.step is not CertificationStep.UNDER_REVIEW:
        raise EquipmentNotUnderReviewError(equipment.id, equipment.state)


def ensure_verifiable(equipment: Equipment) -> None:
    """Integrity checks only make sense once a final hash has been anchored."""
    if equipment.status not in (EquipmentStatus.CERTIFIED, EquipmentStatus.DEPRECATED):
        raise ActionNotAllowedInCurrentStepError(
            equipment.id, equipment.state, expected="status CERTIFIED or DEPRECATED"
        )
