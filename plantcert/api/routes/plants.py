"""Plant API routes.

Registration is restricted to super admins; listing plants is open;
per-plant projections go through the role-filtered query service.
"""

from fastapi import APIRouter, Depends, Request

from plantcert.api.auth.caller import get_caller_address
from plantcert.api.dependencies.certification import (
    get_lifecycle_service,
    get_query_service,
    get_registry,
)
from plantcert.api.errors import to_http_exception
from plantcert.api.models.certification import (
    ActorResponse,
    DocumentResponse,
    EquipmentResponse,
    PlantResponse,
    RegisterPlantRequest,
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

router = APIRouter(prefix="/v1/plants", tags=["plants"])


@router.post(
    "",
    response_model=PlantResponse,
    status_code=201,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid plant data"},
        403: {"model": ErrorResponse, "description": "Caller is not a super admin"},
    },
    summary="Register a plant",
)
async def register_plant(
    request_data: RegisterPlantRequest,
    request: Request,
    caller: str = Depends(get_caller_address),
    lifecycle: CertificationLifecycleService = Depends(get_lifecycle_service),
) -> PlantResponse:
    try:
        plant = await lifecycle.register_plant(
            caller,
            name=request_data.name,
            description=request_data.description,
            location=request_data.location,
            is_active=request_data.is_active,
        )
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return PlantResponse.from_domain(plant)


@router.get("", response_model=list[PlantResponse], summary="List all plants")
async def list_plants(
    queries: CertificationQueryService = Depends(get_query_service),
) -> list[PlantResponse]:
    return [PlantResponse.from_domain(plant) for plant in queries.get_all_plants()]


@router.get(
    "/{plant_id}",
    response_model=PlantResponse,
    responses={404: {"model": ErrorResponse, "description": "Plant not found"}},
)
async def get_plant(
    plant_id: int,
    request: Request,
    registry: EntityRegistryService = Depends(get_registry),
) -> PlantResponse:
    try:
        return PlantResponse.from_domain(registry.get_plant(plant_id))
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None


@router.get(
    "/{plant_id}/equipment",
    response_model=list[EquipmentResponse],
    responses={403: {"model": ErrorResponse, "description": "Not an oversight role"}},
)
async def get_plant_equipment(
    plant_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    queries: CertificationQueryService = Depends(get_query_service),
    registry: EntityRegistryService = Depends(get_registry),
) -> list[EquipmentResponse]:
    try:
        equipment = queries.get_equipment_by_plant(caller, plant_id)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return [
        EquipmentResponse.from_domain(item, registry.ownership.owner_of(item.id))
        for item in equipment
    ]


@router.get(
    "/{plant_id}/documents",
    response_model=list[DocumentResponse],
    responses={403: {"model": ErrorResponse, "description": "Not an oversight role"}},
)
async def get_plant_documents(
    plant_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    queries: CertificationQueryService = Depends(get_query_service),
) -> list[DocumentResponse]:
    try:
        documents = queries.get_documents_by_plant(caller, plant_id)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return [DocumentResponse.from_domain(doc) for doc in documents]


@router.get(
    "/{plant_id}/actors",
    response_model=list[ActorResponse],
    responses={403: {"model": ErrorResponse, "description": "Cannot view actors"}},
)
async def get_plant_actors(
    plant_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    queries: CertificationQueryService = Depends(get_query_service),
) -> list[ActorResponse]:
    try:
        actors = queries.get_actors_by_plant(caller, plant_id)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return [ActorResponse.from_domain(actor) for actor in actors]
