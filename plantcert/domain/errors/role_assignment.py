"""Role assignment conflicts."""

from __future__ import annotations

from plantcert.domain.exceptions import CertificationRegistryError
from plantcert.domain.models.role import Role


class RoleAlreadyAssignedError(CertificationRegistryError):
    """Raised when a registration helper targets an account that already
    holds the role.

    Raw grants are idempotent; only the registration helpers (which also
    create an Actor record) refuse duplicates.

    Attributes:
        role: The role that is already held.
        account: The account holding it.
    """

    def __init__(self, role: Role, account: str) -> None:
        self.role = role
        self.account = account
        super().__init__(f"Account {account} already holds role {role.value}")
