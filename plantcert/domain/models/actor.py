"""Actor domain model.

An Actor is a descriptive record of a participant (name, address, role,
plant). It is deliberately separate from role membership: creating an
Actor grants nothing, and granting a role creates no Actor. The role
registration helpers do both together.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from plantcert.domain.models.address import Address
from plantcert.domain.models.role import Role


@dataclass(frozen=True, eq=True)
class Actor:
    """A named participant in the certification process.

    Attributes:
        id: Registry-allocated identifier (starts at 0).
        name: Display name.
        address: Account address of the participant.
        role: Role the participant acts under.
        registered_at: When the actor was recorded (UTC).
        plant_id: Plant the actor works for. May reference no plant,
            in which case the actor is not plant-scoped.
    """

    id: int
    name: str
    address: Address
    role: Role
    registered_at: datetime
    plant_id: int
