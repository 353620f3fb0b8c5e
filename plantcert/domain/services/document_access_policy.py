"""Document visibility policy (domain service).

The access matrix decides which document types each operational role may
read. It is fixed at import time and never mutated.

    Role                   Certification LabReport TechFile Compliance RegulatoryReview
    PLANT_OPERATOR_ADMIN        x            x        x         x            x
    REGULATORY_AUTHORITY        x            x        x         x            x
    CERTIFICATION_OFFICER       x            x        x
    MANUFACTURER                x                     x
    LABORATORY                  x            x

Two resolution modes exist:

- strict (resolve_viewer_role + is_visible): a viewer holding several
  roles is judged by the FIRST role they hold in OPERATIONAL_ROLES order,
  and only that role's row counts.
- permissive (is_accessible_to_roles): oversight roles see everything and
  any held role whose row allows the type grants access. Laboratories may
  additionally read technical files of the equipment they test.
"""

from __future__ import annotations

from collections.abc import Collection
from types import MappingProxyType

from plantcert.domain.models.document import DocumentType
from plantcert.domain.models.role import OPERATIONAL_ROLES, Role

_ALL_TYPES: frozenset[DocumentType] = frozenset(DocumentType)

DOCUMENT_ACCESS_MATRIX: MappingProxyType[Role, frozenset[DocumentType]] = MappingProxyType(
    {
        Role.PLANT_OPERATOR_ADMIN: _ALL_TYPES,
        Role.REGULATORY_AUTHORITY: _ALL_TYPES,
        Role.CERTIFICATION_OFFICER: frozenset(
            {DocumentType.CERTIFICATION, DocumentType.LAB_REPORT, DocumentType.TECH_FILE}
        ),
        Role.MANUFACTURER: frozenset(
            {DocumentType.CERTIFICATION, DocumentType.TECH_FILE}
        ),
        Role.LABORATORY: frozenset(
            {DocumentType.CERTIFICATION, DocumentType.LAB_REPORT}
        ),
    }
)

# Permissive (dashboard) view: laboratories also read technical files
CALLER_SIDE_ACCESS_MATRIX: MappingProxyType[Role, frozenset[DocumentType]] = MappingProxyType(
    {
        **DOCUMENT_ACCESS_MATRIX,
        Role.LABORATORY: DOCUMENT_ACCESS_MATRIX[Role.LABORATORY] | {DocumentType.TECH_FILE},
    }
)

OVERSIGHT_ROLES: frozenset[Role] = frozenset(
    {
        Role.PLANT_OPERATOR_ADMIN,
        Role.REGULATORY_AUTHORITY,
        Role.CERTIFICATION_OFFICER,
    }
)


def is_visible(doc_type: DocumentType, role: Role) -> bool:
    """Matrix lookup. Roles without a row (SUPER_ADMIN, GATEWAY) see nothing."""
    return doc_type in DOCUMENT_ACCESS_MATRIX.get(role, frozenset())


def resolve_viewer_role(held_roles: Collection[Role]) -> Role | None:
    """Return the first operational role held, in priority order.

    Args:
        held_roles: All roles the viewer currently holds.

    Returns:
        The deciding role, or None if the viewer holds no operational role.
    """
    for role in OPERATIONAL_ROLES:
        if role in held_roles:
            return role
    return None


def is_visible_to_viewer(doc_type: DocumentType, held_roles: Collection[Role]) -> bool:
    """Strict first-match decision for a viewer who is not the submitter."""
    role = resolve_viewer_role(held_roles)
    if role is None:
        return False
    return is_visible(doc_type, role)


def is_accessible_to_roles(doc_type: DocumentType, held_roles: Collection[Role]) -> bool:
    """Permissive decision used by dashboards.

    Any oversight role grants access to every type; otherwise any held
    role whose extended row lists the type does.
    """
    if any(role in OVERSIGHT_ROLES for role in held_roles):
        return True
    return any(
        doc_type in CALLER_SIDE_ACCESS_MATRIX.get(role, frozenset())
        for role in held_roles
    )
