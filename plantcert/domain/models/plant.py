"""Plant domain model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from plantcert.domain.models.address import Address


@dataclass(frozen=True, eq=True)
class Plant:
    """A regulated plant site that hosts equipment.

    Plants are created once and never updated.

    Attributes:
        id: Registry-allocated identifier (starts at 0).
        name: Plant name.
        description: Free-form description.
        location: Site location.
        registered_at: When the plant was registered (UTC).
        is_active: Whether the plant is operating.
        registered_by: Address of the caller that registered the plant.
    """

    id: int
    name: str
    description: str
    location: str
    registered_at: datetime
    is_active: bool
    registered_by: Address
