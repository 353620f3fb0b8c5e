"""Domain services: pure policy and guard logic with no I/O."""

from plantcert.domain.services.document_access_policy import (
    CALLER_SIDE_ACCESS_MATRIX,
    DOCUMENT_ACCESS_MATRIX,
    OVERSIGHT_ROLES,
    is_accessible_to_roles,
    is_visible,
    is_visible_to_viewer,
    resolve_viewer_role,
)
from plantcert.domain.services.lifecycle_guard import (
    CERTIFIED_OVERRIDE_ROLES,
    ensure_not_certified_or_under_review,
    ensure_not_deprecated,
    ensure_pending,
    ensure_ready_for_review,
    ensure_registered,
    ensure_under_review,
    ensure_verifiable,
)

__all__ = [
    "CALLER_SIDE_ACCESS_MATRIX",
    "CERTIFIED_OVERRIDE_ROLES",
    "DOCUMENT_ACCESS_MATRIX",
    "OVERSIGHT_ROLES",
    "ensure_not_certified_or_under_review",
    "ensure_not_deprecated",
    "ensure_pending",
    "ensure_ready_for_review",
    "ensure_registered",
    "ensure_under_review",
    "ensure_verifiable",
    "is_accessible_to_roles",
    "is_visible",
    "is_visible_to_viewer",
    "resolve_viewer_role",
]
