"""Unit tests for OwnershipBindingService (soulbound ownership)."""

import pytest

from plantcert.application.services.ownership_binding_service import (
    OwnershipBindingService,
)
from plantcert.domain.errors import (
    EquipmentNotFoundError,
    InvalidInputError,
    SoulboundTokenError,
)
from plantcert.domain.models.address import ZERO_ADDRESS
from tests.helpers.addresses import MANUFACTURER, OPERATOR, OUTSIDER


@pytest.fixture
def bound(ownership: OwnershipBindingService) -> OwnershipBindingService:
    ownership.bind(0, OPERATOR)
    ownership.bind(1, OPERATOR)
    ownership.bind(2, MANUFACTURER)
    return ownership


class TestBinding:
    def test_owner_and_balance(self, bound: OwnershipBindingService) -> None:
        assert bound.owner_of(0) == OPERATOR
        assert bound.balance_of(OPERATOR) == 2
        assert bound.balance_of(OUTSIDER) == 0
        assert bound.equipment_of(OPERATOR) == [0, 1]

    def test_rebinding_refused(self, bound: OwnershipBindingService) -> None:
        with pytest.raises(SoulboundTokenError):
            bound.bind(0, OUTSIDER)
        assert bound.owner_of(0) == OPERATOR

    def test_null_owner_refused(self, ownership: OwnershipBindingService) -> None:
        with pytest.raises(InvalidInputError):
            ownership.bind(0, ZERO_ADDRESS)

    def test_unknown_equipment(self, ownership: OwnershipBindingService) -> None:
        with pytest.raises(EquipmentNotFoundError):
            ownership.owner_of(9)
        with pytest.raises(EquipmentNotFoundError):
            ownership.get_approved(9)

    def test_balance_of_null_refused(self, ownership: OwnershipBindingService) -> None:
        with pytest.raises(InvalidInputError):
            ownership.balance_of(ZERO_ADDRESS)

    def test_no_approvals(self, bound: OwnershipBindingService) -> None:
        assert bound.get_approved(0) is None
        assert not bound.is_approved_for_all(OPERATOR, OUTSIDER)


class TestSoulbound:
    """Every transfer, approval or burn is refused and changes nothing."""

    def test_transfer_from(self, bound: OwnershipBindingService) -> None:
        with pytest.raises(SoulboundTokenError) as exc_info:
            bound.transfer_from(OPERATOR, OPERATOR, OUTSIDER, 0)
        assert exc_info.value.equipment_id == 0
        assert bound.owner_of(0) == OPERATOR

    def test_safe_transfer_from(self, bound: OwnershipBindingService) -> None:
        with pytest.raises(SoulboundTokenError):
            bound.safe_transfer_from(OPERATOR, OPERATOR, OUTSIDER, 1, data=b"\x01")
        assert bound.balance_of(OUTSIDER) == 0

    def test_approve(self, bound: OwnershipBindingService) -> None:
        with pytest.raises(SoulboundTokenError):
            bound.approve(OPERATOR, OUTSIDER, 0)
        assert bound.get_approved(0) is None

    def test_set_approval_for_all_reports_id_zero(
        self, bound: OwnershipBindingService
    ) -> None:
        with pytest.raises(SoulboundTokenError) as exc_info:
            bound.set_approval_for_all(OPERATOR, OUTSIDER, True)
        assert exc_info.value.equipment_id == 0

    def test_burn(self, bound: OwnershipBindingService) -> None:
        with pytest.raises(SoulboundTokenError):
            bound.burn(MANUFACTURER, 2)
        assert bound.owner_of(2) == MANUFACTURER
