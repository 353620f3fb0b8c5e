"""Equipment and certification lifecycle API routes.

Each transition endpoint maps one-to-one onto a
CertificationLifecycleService method; the caller header supplies the
acting identity.
"""

from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends, Request

from plantcert.api.auth.caller import get_caller_address
from plantcert.api.dependencies.certification import (
    get_lifecycle_service,
    get_query_service,
    get_registry,
)
from plantcert.api.errors import to_http_exception
from plantcert.api.models.certification import (
    DocumentHashesResponse,
    DocumentResponse,
    EquipmentResponse,
    FinalizeCertificationRequest,
    RegisterDocumentRequest,
    RegisterEquipmentRequest,
)
from plantcert.api.models.common import ErrorResponse
from plantcert.application.services.certification_lifecycle_service import (
    CertificationLifecycleService,
)
from plantcert.application.services.certification_query_service import (
    CertificationQueryService,
)
from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)
from plantcert.domain.exceptions import CertificationRegistryError
from plantcert.domain.models.certification_hash import ZERO_HASH, hash_from_hex
from plantcert.domain.models.equipment import Equipment

router = APIRouter(prefix="/v1/equipment", tags=["equipment"])

_TRANSITION_RESPONSES = {
    403: {"model": ErrorResponse, "description": "Caller lacks the required role"},
    404: {"model": ErrorResponse, "description": "Equipment not found"},
    409: {"model": ErrorResponse, "description": "Not allowed in the current state"},
}


def _to_response(registry: EntityRegistryService, equipment: Equipment) -> EquipmentResponse:
    return EquipmentResponse.from_domain(equipment, registry.ownership.owner_of(equipment.id))


async def _run_transition(
    request: Request,
    registry: EntityRegistryService,
    action: Callable[[], Awaitable[Equipment]],
) -> EquipmentResponse:
    try:
        equipment = await action()
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return _to_response(registry, equipment)


@router.post(
    "",
    response_model=EquipmentResponse,
    status_code=201,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid equipment data"},
        403: {"model": ErrorResponse, "description": "Caller is not a plant operator admin"},
        404: {"model": ErrorResponse, "description": "Plant not found"},
    },
    summary="Register equipment owned by the caller",
)
async def register_equipment(
    request_data: RegisterEquipmentRequest,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
    registry: EntityRegistryService = Depends(get_registry),
) -> EquipmentResponse:
    return await _run_transition(
        request,
        registry,
        lambda: lifecycle.register_equipment(
            caller,
            name=request_data.name,
            description=request_data.description,
            plant_id=request_data.plant_id,
        ),
    )


@router.get(
    "/{equipment_id}",
    response_model=EquipmentResponse,
    responses={404: {"model": ErrorResponse, "description": "Equipment not found"}},
)
async def get_equipment(
    equipment_id: int,
    request: Request,
    registry: EntityRegistryService = Depends(get_registry),
) -> EquipmentResponse:
    try:
        return _to_response(registry, registry.get_equipment(equipment_id))
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None


@router.post(
    "/{equipment_id}/documents",
    response_model=DocumentResponse,
    status_code=201,
    responses={**_TRANSITION_RESPONSES, 400: {"model": ErrorResponse}},
    summary="Submit a document for equipment",
)
async def register_document(
    equipment_id: int,
    request_data: RegisterDocumentRequest,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
) -> DocumentResponse:
    try:
        document = await lifecycle.register_document(
            caller,
            equipment_id,
            doc_type=request_data.doc_type,
            name=request_data.name,
            description=request_data.description,
            content_id=request_data.content_id,
        )
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return DocumentResponse.from_domain(document)


@router.get(
    "/{equipment_id}/documents",
    response_model=list[DocumentResponse],
    responses={
        403: {"model": ErrorResponse, "description": "Not an oversight role"},
        404: {"model": ErrorResponse, "description": "Equipment not found"},
    },
)
async def list_equipment_documents(
    equipment_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    queries: CertificationQueryService = Depends(get_query_service),
) -> list[DocumentResponse]:
    try:
        documents = queries.get_documents_for_equipment(caller, equipment_id)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return [DocumentResponse.from_domain(doc) for doc in documents]


@router.get("/{equipment_id}/document-hashes", response_model=DocumentHashesResponse)
async def list_equipment_document_hashes(
    equipment_id: int,
    queries: CertificationQueryService = Depends(get_query_service),
) -> DocumentHashesResponse:
    return DocumentHashesResponse(
        equipment_id=equipment_id,
        content_ids=queries.get_equipment_document_hashes(equipment_id),
    )


@router.post(
    "/{equipment_id}/request-documents",
    response_model=EquipmentResponse,
    responses=_TRANSITION_RESPONSES,
)
async def request_documents(
    equipment_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
    registry: EntityRegistryService = Depends(get_registry),
) -> EquipmentResponse:
    return await _run_transition(
        request, registry, lambda: lifecycle.request_documents(caller, equipment_id)
    )


@router.post(
    "/{equipment_id}/ready-for-review",
    response_model=EquipmentResponse,
    responses=_TRANSITION_RESPONSES,
)
async def mark_ready_for_review(
    equipment_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
    registry: EntityRegistryService = Depends(get_registry),
) -> EquipmentResponse:
    return await _run_transition(
        request, registry, lambda: lifecycle.mark_ready_for_review(caller, equipment_id)
    )


@router.post(
    "/{equipment_id}/review",
    response_model=EquipmentResponse,
    responses=_TRANSITION_RESPONSES,
)
async def review_equipment(
    equipment_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
    registry: EntityRegistryService = Depends(get_registry),
) -> EquipmentResponse:
    return await _run_transition(
        request, registry, lambda: lifecycle.review_equipment(caller, equipment_id)
    )


@router.post(
    "/{equipment_id}/finalize",
    response_model=EquipmentResponse,
    responses={**_TRANSITION_RESPONSES, 400: {"model": ErrorResponse}},
)
async def finalize_certification(
    equipment_id: int,
    request_data: FinalizeCertificationRequest,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
    registry: EntityRegistryService = Depends(get_registry),
) -> EquipmentResponse:
    certification_hash = (
        hash_from_hex(request_data.certification_hash)
        if request_data.certification_hash
        else ZERO_HASH
    )
    return await _run_transition(
        request,
        registry,
        lambda: lifecycle.finalize_certification(
            caller,
            equipment_id,
            approve=request_data.approve,
            certification_hash=certification_hash,
            reason=request_data.reason,
        ),
    )


@router.post(
    "/{equipment_id}/deprecate",
    response_model=EquipmentResponse,
    responses=_TRANSITION_RESPONSES,
)
async def deprecate_equipment(
    equipment_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
    registry: EntityRegistryService = Depends(get_registry),
) -> EquipmentResponse:
    return await _run_transition(
        request, registry, lambda: lifecycle.deprecate_equipment(caller, equipment_id)
    )
