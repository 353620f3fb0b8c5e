"""Certification registry API request/response models.

Pydantic v2 models for the /v1 endpoints. Hashes travel as 0x-prefixed
hex strings; datetimes serialize as ISO 8601 with a Z suffix.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from plantcert.api.models.common import DateTimeWithZ, OptionalDateTimeWithZ
from plantcert.domain.models.actor import Actor
from plantcert.domain.models.certification_hash import hash_from_hex, hash_to_hex
from plantcert.domain.models.document import Document, DocumentStatus, DocumentType
from plantcert.domain.models.equipment import (
    CertificationStep,
    Equipment,
    EquipmentStatus,
)
from plantcert.domain.models.plant import Plant
from plantcert.domain.models.role import Role


def _validate_hex_hash(value: str) -> str:
    try:
        hash_from_hex(value)
    except ValueError as exc:
        raise ValueError(f"must be a 32-byte hex digest: {exc}") from exc
    return value.lower()


class ParticipantRoleEnum(str, Enum):
    """Roles that can be assigned through the registration endpoints."""

    PLANT_OPERATOR_ADMIN = "PLANT_OPERATOR_ADMIN"
    MANUFACTURER = "MANUFACTURER"
    LABORATORY = "LABORATORY"
    REGULATORY_AUTHORITY = "REGULATORY_AUTHORITY"
    CERTIFICATION_OFFICER = "CERTIFICATION_OFFICER"


# =============================================================================
# Requests
# =============================================================================


class RegisterPlantRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1, max_length=4096)
    location: str = Field(..., min_length=1, max_length=512)
    is_active: bool = Field(default=True)


class RegisterParticipantRequest(BaseModel):
    """Register an account under a role and record it as an actor."""

    role: ParticipantRoleEnum
    account: str = Field(..., min_length=1, description="Account address")
    plant_id: int = Field(..., ge=0)
    name: str = Field(..., min_length=1, max_length=256)

    @field_validator("account")
    @classmethod
    def normalize_account(cls, value: str) -> str:
        return value.strip().lower()


class RegisterEquipmentRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1, max_length=4096)
    plant_id: int = Field(..., ge=0)


class RegisterDocumentRequest(BaseModel):
    doc_type: DocumentType
    name: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1, max_length=4096)
    content_id: str = Field(
        ..., min_length=1, max_length=512, description="Opaque content-store identifier"
    )


class FinalizeCertificationRequest(BaseModel):
    """Approve with a certification hash, or reject with a reason."""

    approve: bool
    certification_hash: str | None = Field(
        default=None, description="0x-prefixed 32-byte hex digest (approval only)"
    )
    reason: str = Field(default="", max_length=4096)

    @field_validator("certification_hash")
    @classmethod
    def validate_hash(cls, value: str | None) -> str | None:
        return None if value is None else _validate_hex_hash(value)


class IntegrityCheckRequest(BaseModel):
    candidate_hash: str = Field(..., description="0x-prefixed 32-byte hex digest")

    @field_validator("candidate_hash")
    @classmethod
    def validate_hash(cls, value: str) -> str:
        return _validate_hex_hash(value)


# =============================================================================
# Responses
# =============================================================================


class PlantResponse(BaseModel):
    id: int
    name: str
    description: str
    location: str
    registered_at: DateTimeWithZ
    is_active: bool
    registered_by: str

    @classmethod
    def from_domain(cls, plant: Plant) -> "PlantResponse":
        return cls(
            id=plant.id,
            name=plant.name,
            description=plant.description,
            location=plant.location,
            registered_at=plant.registered_at,
            is_active=plant.is_active,
            registered_by=plant.registered_by,
        )


class ActorResponse(BaseModel):
    id: int
    name: str
    address: str
    role: Role
    registered_at: DateTimeWithZ
    plant_id: int

    @classmethod
    def from_domain(cls, actor: Actor) -> "ActorResponse":
        return cls(
            id=actor.id,
            name=actor.name,
            address=actor.address,
            role=actor.role,
            registered_at=actor.registered_at,
            plant_id=actor.plant_id,
        )


class EquipmentResponse(BaseModel):
    id: int
    name: str
    description: str
    plant_id: int
    status: EquipmentStatus
    step: CertificationStep
    registered_at: DateTimeWithZ
    certified_at: OptionalDateTimeWithZ = None
    rejected_at: OptionalDateTimeWithZ = None
    pending_at: OptionalDateTimeWithZ = None
    deprecated_at: OptionalDateTimeWithZ = None
    final_certification_hash: str
    rejection_reason: str
    owner: str

    @classmethod
    def from_domain(cls, equipment: Equipment, owner: str) -> "EquipmentResponse":
        return cls(
            id=equipment.id,
            name=equipment.name,
            description=equipment.description,
            plant_id=equipment.plant_id,
            status=equipment.status,
            step=equipment.step,
            registered_at=equipment.registered_at,
            certified_at=equipment.certified_at,
            rejected_at=equipment.rejected_at,
            pending_at=equipment.pending_at,
            deprecated_at=equipment.deprecated_at,
            final_certification_hash=hash_to_hex(equipment.final_certification_hash),
            rejection_reason=equipment.rejection_reason,
            owner=owner,
        )


class DocumentResponse(BaseModel):
    id: int
    name: str
    description: str
    doc_type: DocumentType
    status: DocumentStatus
    submitter: str
    submitted_at: DateTimeWithZ
    content_id: str
    equipment_id: int

    @classmethod
    def from_domain(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            name=document.name,
            description=document.description,
            doc_type=document.doc_type,
            status=document.status,
            submitter=document.submitter,
            submitted_at=document.submitted_at,
            content_id=document.content_id,
            equipment_id=document.equipment_id,
        )


class DocumentAccessResponse(BaseModel):
    document_id: int
    viewer: str
    can_view: bool
    accessible: bool


class DocumentHashesResponse(BaseModel):
    equipment_id: int
    content_ids: list[str]


class AccountRolesResponse(BaseModel):
    account: str
    roles: list[Role]


class IntegrityCheckResponse(BaseModel):
    equipment_id: int
    candidate_hash: str
    matches: bool


class BundleHashResponse(BaseModel):
    equipment_id: int
    bundle_hash: str


class GatewayResponse(BaseModel):
    gateway: str | None
    configured: bool
