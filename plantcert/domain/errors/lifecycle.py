"""Certification lifecycle errors.

Raised by the lifecycle guards and transitions when equipment is not in
a (status, step) position that permits the requested action. Each error
names the equipment and the state it was found in.
"""

from __future__ import annotations

from plantcert.domain.exceptions import CertificationRegistryError
from plantcert.domain.models.equipment import LifecycleState


class InvalidLifecycleStateError(CertificationRegistryError):
    """Base error for step/status guard failures.

    Attributes:
        equipment_id: Equipment the action targeted.
        current_state: The (status, step) the equipment was in.
    """

    def __init__(
        self,
        equipment_id: int,
        current_state: LifecycleState,
        message: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            equipment_id: Equipment the action targeted.
            current_state: The (status, step) the equipment was in.
            message: Optional override of the default message.
        """
        self.equipment_id = equipment_id
        self.current_state = current_state
        super().__init__(
            message
            or f"Equipment {equipment_id} is in state {current_state}; action not allowed"
        )


class ActionNotAllowedInCurrentStepError(InvalidLifecycleStateError):
    """Raised when the certification step forbids the action.

    Attributes:
        expected: Description of the step(s) that would have been accepted.
    """

    def __init__(
        self,
        equipment_id: int,
        current_state: LifecycleState,
        expected: str = "",
    ) -> None:
        self.expected = expected
        hint = f"; expected {expected}" if expected else ""
        super().__init__(
            equipment_id,
            current_state,
            f"Action not allowed for equipment {equipment_id} "
            f"in step {current_state.step.value}{hint}",
        )


class EquipmentAlreadyCertifiedError(InvalidLifecycleStateError):
    """Raised when certified equipment is touched by an unprivileged role."""

    def __init__(self, equipment_id: int, current_state: LifecycleState) -> None:
        super().__init__(
            equipment_id,
            current_state,
            f"Equipment {equipment_id} is already certified",
        )


class EquipmentDeprecatedError(InvalidLifecycleStateError):
    """Raised when deprecated equipment is the target of a mutation."""

    def __init__(self, equipment_id: int, current_state: LifecycleState) -> None:
        super().__init__(
            equipment_id,
            current_state,
            f"Equipment {equipment_id} is deprecated",
        )


class EquipmentAlreadyDeprecatedError(EquipmentDeprecatedError):
    """Raised by the not-deprecated guard and by repeat deprecation."""


class EquipmentNotPendingError(InvalidLifecycleStateError):
    """Raised when readiness is declared outside the pending phase."""

    def __init__(self, equipment_id: int, current_state: LifecycleState) -> None:
        super().__init__(
            equipment_id,
            current_state,
            f"Equipment {equipment_id} is not pending "
            f"(status {current_state.status.value})",
        )


class EquipmentNotUnderReviewError(InvalidLifecycleStateError):
    """Raised when certification is finalized outside an open review."""

    def __init__(self, equipment_id: int, current_state: LifecycleState) -> None:
        super().__init__(
            equipment_id,
            current_state,
            f"Equipment {equipment_id} is not under review "
            f"(step {current_state.step.value})",
        )
