"""Soulbound equipment ownership.

Each equipment id is bound to exactly one owner address when the
equipment is created. Bindings never change: every transfer, approval or
burn attempt raises SoulboundTokenError and leaves ownership untouched.
"""

from __future__ import annotations

from collections import Counter

from plantcert.application.services.base import LoggingMixin
from plantcert.domain.errors.not_found import EquipmentNotFoundError
from plantcert.domain.errors.ownership import SoulboundTokenError
from plantcert.domain.errors.validation import InvalidInputError
from plantcert.domain.models.address import Address, is_null_address


class OwnershipBindingService(LoggingMixin):
    """Records who owns each equipment id.

    Only EntityRegistryService calls bind(); everything else here is
    read-only or refuses.
    """

    def __init__(self) -> None:
        self._owners: dict[int, Address] = {}
        self._balances: Counter[Address] = Counter()
        self._init_logger(component="ownership")

    def bind(self, equipment_id: int, owner: Address) -> None:
        """Bind equipment_id to owner, once.

        Raises:
            InvalidInputError: owner is a null address.
            SoulboundTokenError: equipment_id is already bound.
        """
        if is_null_address(owner):
            raise InvalidInputError("owner", "must not be a null address")
        if equipment_id in self._owners:
            raise SoulboundTokenError(equipment_id)
        self._owners[equipment_id] = owner
        self._balances[owner] += 1
        self._log_operation("bind", equipment_id=equipment_id, owner=owner).info(
            "ownership_bound"
        )

    def owner_of(self, equipment_id: int) -> Address:
        """Return the owner of equipment_id.

        Raises:
            EquipmentNotFoundError: equipment_id was never bound.
        """
        try:
            return self._owners[equipment_id]
        except KeyError:
            raise EquipmentNotFoundError(equipment_id) from None

    def balance_of(self, owner: Address) -> int:
        """Number of equipment ids bound to owner."""
        if is_null_address(owner):
            raise InvalidInputError("owner", "must not be a null address")
        return self._balances[owner]

    def equipment_of(self, owner: Address) -> list[int]:
        """Equipment ids bound to owner, in creation order."""
        return [eid for eid, bound in self._owners.items() if bound == owner]

    def get_approved(self, equipment_id: int) -> Address | None:
        """Always None: bindings admit no approved operator."""
        self.owner_of(equipment_id)
        return None

    def is_approved_for_all(self, owner: Address, operator: Address) -> bool:
        return False

    def transfer_from(
        self, caller: Address, from_: Address, to: Address, equipment_id: int
    ) -> None:
        self._refuse("transfer_from", caller, equipment_id)

    def safe_transfer_from(
        self,
        caller: Address,
        from_: Address,
        to: Address,
        equipment_id: int,
        data: bytes = b"",
    ) -> None:
        self._refuse("safe_transfer_from", caller, equipment_id)

    def approve(self, caller: Address, to: Address, equipment_id: int) -> None:
        self._refuse("approve", caller, equipment_id)

    def set_approval_for_all(
        self, caller: Address, operator: Address, approved: bool
    ) -> None:
        # No equipment is named, so the error reports id 0
        self._refuse("set_approval_for_all", caller, 0)

    def burn(self, caller: Address, equipment_id: int) -> None:
        self._refuse("burn", caller, equipment_id)

    def _refuse(self, operation: str, caller: Address, equipment_id: int) -> None:
        self._log_operation(
            operation, caller=caller, equipment_id=equipment_id
        ).warning("soulbound_violation_refused")
        raise SoulboundTokenError(equipment_id)
