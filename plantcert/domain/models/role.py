"""Role definitions and the fixed role-admin hierarchy.

The role set is closed. Five operational roles are granted to
organisations taking part in certification; two implicit roles exist
for system principals:

    SUPER_ADMIN            bootstraps the system, administers itself,
                           PLANT_OPERATOR_ADMIN and GATEWAY
    GATEWAY                the single principal allowed to write registry
                           records on behalf of callers
    PLANT_OPERATOR_ADMIN   administers the four roles below
    MANUFACTURER
    LABORATORY
    REGULATORY_AUTHORITY
    CERTIFICATION_OFFICER

Admin relation (who may grant/revoke a role):

    SUPER_ADMIN            -> SUPER_ADMIN
    GATEWAY                -> SUPER_ADMIN
    PLANT_OPERATOR_ADMIN   -> SUPER_ADMIN
    MANUFACTURER           -> PLANT_OPERATOR_ADMIN
    LABORATORY             -> PLANT_OPERATOR_ADMIN
    REGULATORY_AUTHORITY   -> PLANT_OPERATOR_ADMIN
    CERTIFICATION_OFFICER  -> PLANT_OPERATOR_ADMIN
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Role(str, Enum):
    """Closed set of roles known to the registry."""

    SUPER_ADMIN = "SUPER_ADMIN"
    GATEWAY = "GATEWAY"
    PLANT_OPERATOR_ADMIN = "PLANT_OPERATOR_ADMIN"
    MANUFACTURER = "MANUFACTURER"
    LABORATORY = "LABORATORY"
    REGULATORY_AUTHORITY = "REGULATORY_AUTHORITY"
    CERTIFICATION_OFFICER = "CERTIFICATION_OFFICER"

    @property
    def admin_role(self) -> Role:
        """The role whose holders may grant or revoke this role."""
        return ROLE_ADMINS[self]

    @property
    def is_operational(self) -> bool:
        """True for the five roles granted to participating organisations."""
        return self in OPERATIONAL_ROLES


ROLE_ADMINS: MappingProxyType[Role, Role] = MappingProxyType(
    {
        Role.SUPER_ADMIN: Role.SUPER_ADMIN,
        Role.GATEWAY: Role.SUPER_ADMIN,
        Role.PLANT_OPERATOR_ADMIN: Role.SUPER_ADMIN,
        Role.MANUFACTURER: Role.PLANT_OPERATOR_ADMIN,
        Role.LABORATORY: Role.PLANT_OPERATOR_ADMIN,
        Role.REGULATORY_AUTHORITY: Role.PLANT_OPERATOR_ADMIN,
        Role.CERTIFICATION_OFFICER: Role.PLANT_OPERATOR_ADMIN,
    }
)

# Order matters: document visibility resolves a viewer to the FIRST role
# of this tuple they hold.
OPERATIONAL_ROLES: tuple[Role, ...] = (
    Role.PLANT_OPERATOR_ADMIN,
    Role.MANUFACTURER,
    Role.LABORATORY,
    Role.REGULATORY_AUTHORITY,
    Role.CERTIFICATION_OFFICER,
)

# Roles allowed to submit documents against equipment
DOCUMENT_SUBMITTER_ROLES: frozenset[Role] = frozenset(
    {
        Role.MANUFACTURER,
        Role.LABORATORY,
        Role.PLANT_OPERATOR_ADMIN,
        Role.REGULATORY_AUTHORITY,
    }
)
