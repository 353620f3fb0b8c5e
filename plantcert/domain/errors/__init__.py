"""Domain errors for the certification registry.

All errors derive from CertificationRegistryError. Families:

- not_found: unknown plant, equipment, document or actor ids
- authorization: missing roles, gateway-only mutators, document access
- lifecycle: step/status guard failures
- validation: empty or malformed input
- role_assignment: duplicate role registration
- ownership: soulbound transfer/approve/burn attempts
- bootstrap: repeated gateway configuration
"""

from plantcert.domain.errors.authorization import (
    GatewayNotConfiguredError,
    GatewayOnlyError,
    MissingAdminRoleError,
    UnauthorizedDocumentAccessError,
    UnauthorizedError,
)
from plantcert.domain.errors.bootstrap import AlreadyConfiguredError
from plantcert.domain.errors.lifecycle import (
    ActionNotAllowedInCurrentStepError,
    EquipmentAlreadyCertifiedError,
    EquipmentAlreadyDeprecatedError,
    EquipmentDeprecatedError,
    EquipmentNotPendingError,
    EquipmentNotUnderReviewError,
    InvalidLifecycleStateError,
)
from plantcert.domain.errors.not_found import (
    ActorNotFoundError,
    DocumentNotFoundError,
    EntityNotFoundError,
    EquipmentNotFoundError,
    PlantNotFoundError,
)
from plantcert.domain.errors.ownership import SoulboundTokenError
from plantcert.domain.errors.role_assignment import RoleAlreadyAssignedError
from plantcert.domain.errors.validation import InvalidInputError, require_text
from plantcert.domain.exceptions import CertificationRegistryError

__all__ = [
    "ActionNotAllowedInCurrentStepError",
    "ActorNotFoundError",
    "AlreadyConfiguredError",
    "CertificationRegistryError",
    "DocumentNotFoundError",
    "EntityNotFoundError",
    "EquipmentAlreadyCertifiedError",
    "EquipmentAlreadyDeprecatedError",
    "EquipmentDeprecatedError",
    "EquipmentNotFoundError",
    "EquipmentNotPendingError",
    "EquipmentNotUnderReviewError",
    "GatewayNotConfiguredError",
    "GatewayOnlyError",
    "InvalidInputError",
    "InvalidLifecycleStateError",
    "MissingAdminRoleError",
    "PlantNotFoundError",
    "RoleAlreadyAssignedError",
    "SoulboundTokenError",
    "UnauthorizedDocumentAccessError",
    "UnauthorizedError",
    "require_text",
]
