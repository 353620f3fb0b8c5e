"""Integrity verification API routes."""

from fastapi import APIRouter, Depends, Request

from plantcert.api.auth.caller import get_caller_address
from plantcert.api.dependencies.certification import get_integrity_service
from plantcert.api.errors import to_http_exception
from plantcert.api.models.certification import (
    BundleHashResponse,
    IntegrityCheckRequest,
    IntegrityCheckResponse,
)
from plantcert.api.models.common import ErrorResponse
from plantcert.application.services.integrity_verification_service import (
    IntegrityVerificationService,
)
from plantcert.domain.exceptions import CertificationRegistryError
from plantcert.domain.models.certification_hash import hash_from_hex, hash_to_hex

router = APIRouter(prefix="/v1/equipment", tags=["integrity"])

_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Equipment not found"},
    409: {"model": ErrorResponse, "description": "Equipment not certified"},
}


@router.post(
    "/{equipment_id}/integrity/verify",
    response_model=IntegrityCheckResponse,
    responses=_RESPONSES,
    summary="Compare a hash with the stored certification anchor",
)
async def verify_integrity(
    equipment_id: int,
    request_data: IntegrityCheckRequest,
    request: Request,
    integrity: IntegrityVerificationService = Depends(get_integrity_service),
) -> IntegrityCheckResponse:
    try:
        matches = integrity.verify(equipment_id, hash_from_hex(request_data.candidate_hash))
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return IntegrityCheckResponse(
        equipment_id=equipment_id,
        candidate_hash=request_data.candidate_hash,
        matches=matches,
    )


@router.post(
    "/{equipment_id}/integrity/check",
    response_model=IntegrityCheckResponse,
    responses=_RESPONSES,
    summary="Verify and record an integrity check",
)
async def check_integrity(
    equipment_id: int,
    request_data: IntegrityCheckRequest,
    request: Request,
    caller: str = Depends(get_caller_address),
    integrity: IntegrityVerificationService = Depends(get_integrity_service),
) -> IntegrityCheckResponse:
    try:
        matches = await integrity.check_and_log(
            caller, equipment_id, hash_from_hex(request_data.candidate_hash)
        )
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return IntegrityCheckResponse(
        equipment_id=equipment_id,
        candidate_hash=request_data.candidate_hash,
        matches=matches,
    )


@router.get(
    "/{equipment_id}/integrity/bundle-hash",
    response_model=BundleHashResponse,
    responses={404: {"model": ErrorResponse, "description": "Equipment not found"}},
)
async def get_bundle_hash(
    equipment_id: int,
    request: Request,
    integrity: IntegrityVerificationService = Depends(get_integrity_service),
) -> BundleHashResponse:
    try:
        bundle_hash = integrity.compute_bundle_hash(equipment_id)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return BundleHashResponse(equipment_id=equipment_id, bundle_hash=hash_to_hex(bundle_hash))
