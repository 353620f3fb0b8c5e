"""Role directory service.

Holds role membership and enforces the fixed role-admin hierarchy: a
role may only be granted or revoked by an identity holding that role's
admin role. The acting identity is always passed explicitly; the
directory never infers it.

Grants and revokes are idempotent. Both return whether membership
actually changed so callers can decide whether to emit an audit event.
"""

from __future__ import annotations

from plantcert.application.services.base import LoggingMixin
from plantcert.domain.errors.authorization import MissingAdminRoleError
from plantcert.domain.errors.validation import InvalidInputError
from plantcert.domain.models.address import Address, is_null_address
from plantcert.domain.models.role import ROLE_ADMINS, Role


class RoleDirectoryService(LoggingMixin):
    """In-memory role membership with hierarchical administration.

    Membership changes are synchronous and never yield to the event loop,
    so each call is atomic with respect to other coroutines.

    Example:
        >>> directory = RoleDirectoryService(super_admin="0xadmin")
        >>> directory.grant_role(Role.PLANT_OPERATOR_ADMIN, "0xop", acting_as="0xadmin")
        True
        >>> directory.has_role(Role.PLANT_OPERATOR_ADMIN, "0xop")
        True
    """

    def __init__(self, super_admin: Address) -> None:
        """Initialize the directory with its bootstrap super admin.

        Args:
            super_admin: Address that receives SUPER_ADMIN at construction.

        Raises:
            InvalidInputError: If super_admin is a null address.
        """
        if is_null_address(super_admin):
            raise InvalidInputError("super_admin", "must not be a null address")
        self._members: dict[Role, set[Address]] = {role: set() for role in Role}
        self._members[Role.SUPER_ADMIN].add(super_admin)
        self._super_admin = super_admin
        self._init_logger(component="roles")

    @property
    def super_admin(self) -> Address:
        return self._super_admin

    def role_admin(self, role: Role) -> Role:
        """Return the role whose holders administer the given role."""
        return ROLE_ADMINS[role]

    def has_role(self, role: Role, account: Address) -> bool:
        return account in self._members[role]

    def roles_of(self, account: Address) -> frozenset[Role]:
        """All roles currently held by account."""
        return frozenset(role for role, members in self._members.items() if account in members)

    def members_of(self, role: Role) -> frozenset[Address]:
        return frozenset(self._members[role])

    def grant_role(self, role: Role, account: Address, acting_as: Address) -> bool:
        """Grant role to account on behalf of acting_as.

        Args:
            role: Role to grant.
            account: Recipient address.
            acting_as: Identity performing the grant.

        Returns:
            True if membership changed, False if account already held role.

        Raises:
            MissingAdminRoleError: acting_as does not hold role's admin role.
            InvalidInputError: account is a null address.
        """
        self.require_admin(role, acting_as)
        if is_null_address(account):
            raise InvalidInputError("account", "must not be a null address")

        members = self._members[role]
        if account in members:
            return False
        members.add(account)
        self._log_operation(
            "grant_role", role=role.value, account=account, acting_as=acting_as
        ).info("role_granted")
        return True

    def revoke_role(self, role: Role, account: Address, acting_as: Address) -> bool:
        """Revoke role from account on behalf of acting_as.

        Returns:
            True if membership changed, False if account did not hold role.

        Raises:
            MissingAdminRoleError: acting_as does not hold role's admin role.
        """
        self.require_admin(role, acting_as)

        members = self._members[role]
        if account not in members:
            return False
        members.discard(account)
        self._log_operation(
            "revoke_role", role=role.value, account=account, acting_as=acting_as
        ).info("role_revoked")
        return True

    def require_admin(self, role: Role, acting_as: Address) -> None:
        """Raise MissingAdminRoleError unless acting_as administers role."""
        if not self.has_role(ROLE_ADMINS[role], acting_as):
            self._log_operation(
                "require_admin", role=role.value, acting_as=acting_as
            ).warning("missing_admin_role")
            raise MissingAdminRoleError(role, acting_as)
