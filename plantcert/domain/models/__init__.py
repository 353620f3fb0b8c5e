"""Domain models for the certification registry.

Available models:
- Plant: Regulated plant site
- Equipment / LifecycleState: Equipment and its (status, step) pair
- Document: Supporting document reference
- Actor: Descriptive participant record
- Role: Closed role enumeration with the fixed admin hierarchy
"""

from plantcert.domain.models.actor import Actor
from plantcert.domain.models.address import ZERO_ADDRESS, Address, is_null_address
from plantcert.domain.models.certification_hash import (
    HASH_SIZE,
    ZERO_HASH,
    hash_from_hex,
    hash_to_hex,
    hashes_match,
    is_zero_hash,
)
from plantcert.domain.models.document import Document, DocumentStatus, DocumentType
from plantcert.domain.models.equipment import (
    INITIAL_STATE,
    CertificationStep,
    Equipment,
    EquipmentStatus,
    LifecycleState,
)
from plantcert.domain.models.plant import Plant
from plantcert.domain.models.role import (
    DOCUMENT_SUBMITTER_ROLES,
    OPERATIONAL_ROLES,
    ROLE_ADMINS,
    Role,
)

__all__: list[str] = [
    "Actor",
    "Address",
    "ZERO_ADDRESS",
    "is_null_address",
    "HASH_SIZE",
    "ZERO_HASH",
    "hash_from_hex",
    "hash_to_hex",
    "hashes_match",
    "is_zero_hash",
    "Document",
    "DocumentStatus",
    "DocumentType",
    "INITIAL_STATE",
    "CertificationStep",
    "Equipment",
    "EquipmentStatus",
    "LifecycleState",
    "Plant",
    "DOCUMENT_SUBMITTER_ROLES",
    "OPERATIONAL_ROLES",
    "ROLE_ADMINS",
    "Role",
]
