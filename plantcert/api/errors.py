"""Translation of domain errors into RFC 7807 style HTTP exceptions.

Routes catch CertificationRegistryError and re-raise the result of
to_http_exception() with ``from None``.

    EntityNotFoundError           404
    UnauthorizedError             403
    InvalidLifecycleStateError    409
    RoleAlreadyAssignedError      409
    AlreadyConfiguredError        409
    SoulboundTokenError           409
    InvalidInputError             400
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

from plantcert.domain.errors import (
    AlreadyConfiguredError,
    EntityNotFoundError,
    InvalidInputError,
    InvalidLifecycleStateError,
    RoleAlreadyAssignedError,
    SoulboundTokenError,
    UnauthorizedError,
)
from plantcert.domain.exceptions import CertificationRegistryError

ERROR_TYPE_PREFIX = "urn:plantcert:error:"

# First match wins
_ERROR_MAP: tuple[tuple[type[CertificationRegistryError], int, str, str], ...] = (
    (EntityNotFoundError, 404, "not-found", "Not Found"),
    (UnauthorizedError, 403, "unauthorized", "Unauthorized"),
    (InvalidLifecycleStateError, 409, "invalid-lifecycle-state", "Invalid Lifecycle State"),
    (RoleAlreadyAssignedError, 409, "role-already-assigned", "Role Already Assigned"),
    (AlreadyConfiguredError, 409, "already-configured", "Already Configured"),
    (SoulboundTokenError, 409, "soulbound", "Soulbound Ownership"),
    (InvalidInputError, 400, "invalid-input", "Invalid Input"),
)


def _extensions(error: CertificationRegistryError) -> dict[str, Any]:
    extensions: dict[str, Any] = {}
    if isinstance(error, EntityNotFoundError):
        extensions["entity"] = error.entity_kind
        extensions["entity_id"] = error.entity_id
    elif isinstance(error, UnauthorizedError):
        extensions["caller"] = error.caller
        extensions["required_roles"] = [role.value for role in error.required_roles]
        if error.equipment_id is not None:
            extensions["equipment_id"] = error.equipment_id
    elif isinstance(error, InvalidLifecycleStateError):
        extensions["equipment_id"] = error.equipment_id
        extensions["equipment_status"] = error.current_state.status.value
        extensions["equipment_step"] = error.current_state.step.value
    elif isinstance(error, RoleAlreadyAssignedError):
        extensions["role"] = error.role.value
        extensions["account"] = error.account
    elif isinstance(error, SoulboundTokenError):
        extensions["equipment_id"] = error.equipment_id
    elif isinstance(error, InvalidInputError):
        extensions["field"] = error.field
    return extensions


def to_http_exception(error: CertificationRegistryError, request: Request) -> HTTPException:
    """Build the HTTPException for a domain error."""
    status_code, slug, title = 500, "internal", "Registry Error"
    for error_type, code, error_slug, error_title in _ERROR_MAP:
        if isinstance(error, error_type):
            status_code, slug, title = code, error_slug, error_title
            break
    return HTTPException(
        status_code=status_code,
        detail={
            "type": f"{ERROR_TYPE_PREFIX}{slug}",
            "title": title,
            "status": status_code,
            "detail": str(error),
            "instance": str(request.url),
            "error": type(error).__name__,
            **_extensions(error),
        },
    )
