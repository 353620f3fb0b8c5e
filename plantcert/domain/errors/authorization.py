"""Authorization errors.

Every authorization failure names the caller that was refused and, where
one applies, the role(s) that would have been accepted, so a caller can
diagnose the refusal without inspecting registry internals.
"""

from __future__ import annotations

from collections.abc import Iterable

from plantcert.domain.exceptions import CertificationRegistryError
from plantcert.domain.models.role import Role


class UnauthorizedError(CertificationRegistryError):
    """Raised when a caller lacks the role an operation requires.

    Attributes:
        caller: Address that was refused.
        required_roles: Roles any one of which would have been accepted.
        action: Short description of the refused operation.
        equipment_id: Equipment the refused operation targeted, if any.
    """

    def __init__(
        self,
        caller: str,
        required_roles: Iterable[Role] = (),
        action: str = "",
        equipment_id: int | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            caller: Address that was refused.
            required_roles: Roles any one of which would have been accepted.
            action: Short description of the refused operation.
            equipment_id: Equipment the refused operation targeted, if any.
        """
        self.caller = caller
        self.required_roles = tuple(required_roles)
        self.action = action
        self.equipment_id = equipment_id
        roles = ", ".join(r.value for r in self.required_roles)
        target = f" to {action}" if action else ""
        if equipment_id is not None:
            target += f" on equipment {equipment_id}"
        needed = f"; requires one of [{roles}]" if roles else ""
        super().__init__(f"Caller {caller} is not authorized{target}{needed}")


class MissingAdminRoleError(UnauthorizedError):
    """Raised when the acting identity does not hold a role's admin role.

    Attributes:
        role: The role being granted or revoked.
        admin_role: The admin role the acting identity lacks.
    """

    def __init__(self, role: Role, acting_as: str) -> None:
        self.role = role
        self.admin_role = role.admin_role
        super().__init__(
            caller=acting_as,
            required_roles=(role.admin_role,),
            action=f"administer role {role.value}",
        )


class GatewayOnlyError(UnauthorizedError):
    """Raised when anyone other than the gateway calls a registry mutator."""

    def __init__(self, caller: str, operation: str) -> None:
        self.operation = operation
        super().__init__(
            caller=caller,
            required_roles=(Role.GATEWAY,),
            action=operation,
        )


class GatewayNotConfiguredError(GatewayOnlyError):
    """Raised when a registry mutator is called before the gateway is set."""

    def __init__(self, caller: str, operation: str) -> None:
        super().__init__(caller=caller, operation=operation)
        self.args = (f"Gateway is not configured; {operation} refused for {caller}",)


class UnauthorizedDocumentAccessError(UnauthorizedError):
    """Raised when a viewer may not read a document.

    Attributes:
        document_id: The document that was requested.
        viewer: Address that requested it.
    """

    def __init__(self, document_id: int, viewer: str) -> None:
        self.document_id = document_id
        self.viewer = viewer
        super().__init__(caller=viewer, action=f"view document {document_id}")
