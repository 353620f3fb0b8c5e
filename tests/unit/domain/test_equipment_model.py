"""Unit tests for the Equipment domain model."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from plantcert.domain.models.certification_hash import ZERO_HASH
from plantcert.domain.models.equipment import (
    INITIAL_STATE,
    CertificationStep,
    Equipment,
    EquipmentStatus,
    LifecycleState,
)

T0 = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
T1 = T0 + timedelta(hours=1)


def _equipment(**overrides: object) -> Equipment:
    fields: dict[str, object] = {
        "id": 0,
        "name": "Reactor Pump",
        "description": "Primary cooling",
        "plant_id": 0,
        "registered_at": T0,
    }
    fields.update(overrides)
    return Equipment(**fields)  # type: ignore[arg-type]


class TestEquipmentDefaults:
    """New equipment starts in the entry state with no anchors."""

    def test_initial_state(self) -> None:
        equipment = _equipment()
        assert equipment.state == INITIAL_STATE
        assert equipment.status is EquipmentStatus.REGISTERED
        assert equipment.step is CertificationStep.REGISTERED

    def test_no_timestamps_or_hash(self) -> None:
        equipment = _equipment()
        assert equipment.certified_at is None
        assert equipment.rejected_at is None
        assert equipment.pending_at is None
        assert equipment.deprecated_at is None
        assert equipment.final_certification_hash == ZERO_HASH
        assert equipment.rejection_reason == ""

    def test_is_frozen(self) -> None:
        equipment = _equipment()
        with pytest.raises(FrozenInstanceError):
            equipment.name = "other"  # type: ignore[misc]

    def test_rejects_wrong_hash_size(self) -> None:
        with pytest.raises(ValueError, match="32 bytes"):
            _equipment(final_certification_hash=b"\x01" * 16)


class TestWithState:
    """with_state() stamps the timestamp belonging to the new status."""

    def test_pending_stamps_pending_at(self) -> None:
        target = LifecycleState(EquipmentStatus.PENDING, CertificationStep.DOCUMENTS_PENDING)
        updated = _equipment().with_state(target, T1)
        assert updated.state == target
        assert updated.pending_at == T1

    def test_each_pending_step_restamps(self) -> None:
        first = _equipment().with_state(
            LifecycleState(EquipmentStatus.PENDING, CertificationStep.DOCUMENTS_PENDING), T0
        )
        second = first.with_state(
            LifecycleState(EquipmentStatus.PENDING, CertificationStep.READY_FOR_REVIEW), T1
        )
        assert second.pending_at == T1

    def test_certified_stamps_and_clears_reason(self) -> None:
        rejected = _equipment().with_rejection_reason("missing tests")
        updated = rejected.with_state(
            LifecycleState(EquipmentStatus.CERTIFIED, CertificationStep.CERTIFIED), T1
        )
        assert updated.certified_at == T1
        assert updated.rejection_reason == ""

    def test_rejected_stamps_rejected_at(self) -> None:
        updated = _equipment().with_state(
            LifecycleState(EquipmentStatus.REJECTED, CertificationStep.REJECTED), T1
        )
        assert updated.rejected_at == T1
        assert updated.certified_at is None

    def test_deprecated_keeps_step(self) -> None:
        under_review = _equipment().with_state(
            LifecycleState(EquipmentStatus.PENDING, CertificationStep.UNDER_REVIEW), T0
        )
        updated = under_review.with_state(
            LifecycleState(EquipmentStatus.DEPRECATED, under_review.step), T1
        )
        assert updated.status is EquipmentStatus.DEPRECATED
        assert updated.step is CertificationStep.UNDER_REVIEW
        assert updated.deprecated_at == T1

    def test_original_is_untouched(self) -> None:
        original = _equipment()
        original.with_state(
            LifecycleState(EquipmentStatus.PENDING, CertificationStep.DOCUMENTS_PENDING), T1
        )
        assert original.state == INITIAL_STATE


class TestWithCertificationHash:
    def test_stores_hash(self) -> None:
        anchor = b"\xab" * 32
        assert _equipment().with_certification_hash(anchor).final_certification_hash == anchor

    def test_rejects_short_hash(self) -> None:
        with pytest.raises(ValueError):
            _equipment().with_certification_hash(b"\xab" * 31)


def test_lifecycle_state_str() -> None:
    assert str(INITIAL_STATE) == "(REGISTERED, REGISTERED)"
