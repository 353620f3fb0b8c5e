"""Soulbound ownership errors."""

from __future__ import annotations

from plantcert.domain.exceptions import CertificationRegistryError


class SoulboundTokenError(CertificationRegistryError):
    """Raised on any attempt to transfer, approve or burn an ownership binding.

    Equipment ownership records who is answerable for the equipment; it
    is bound once at creation and can never move.

    Attributes:
        equipment_id: Equipment whose binding was targeted (0 for
            operator-wide approvals that name no equipment).
    """

    def __init__(self, equipment_id: int) -> None:
        self.equipment_id = equipment_id
        super().__init__(
            f"Ownership of equipment {equipment_id} is soulbound: "
            "non-transferable and not burnable"
        )
