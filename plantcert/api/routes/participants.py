"""Participant (role + actor) API routes and gateway bootstrap."""

from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends, Request

from plantcert.api.auth.caller import get_caller_address
from plantcert.api.dependencies.certification import (
    get_certification_system,
    get_query_service,
    get_registry,
)
from plantcert.api.errors import to_http_exception
from plantcert.api.models.certification import (
    AccountRolesResponse,
    ActorResponse,
    GatewayResponse,
    ParticipantRoleEnum,
    RegisterParticipantRequest,
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
from plantcert.bootstrap.certification import CertificationSystem
from plantcert.domain.exceptions import CertificationRegistryError
from plantcert.domain.models.actor import Actor

router = APIRouter(prefix="/v1", tags=["participants"])

_Registrar = Callable[[str, str, int, str], Awaitable[Actor]]


def _registrar_for(
    lifecycle: CertificationLifecycleService, role: ParticipantRoleEnum
) -> _Registrar:
    return {
        ParticipantRoleEnum.PLANT_OPERATOR_ADMIN: lifecycle.register_plant_operator,
        ParticipantRoleEnum.MANUFACTURER: lifecycle.register_manufacturer,
        ParticipantRoleEnum.LABORATORY: lifecycle.register_laboratory,
        ParticipantRoleEnum.REGULATORY_AUTHORITY: lifecycle.register_regulatory_authority,
        ParticipantRoleEnum.CERTIFICATION_OFFICER: lifecycle.register_certification_officer,
    }[role]


@router.post(
    "/participants",
    response_model=ActorResponse,
    status_code=201,
    responses={
        403: {"model": ErrorResponse, "description": "Caller may not assign this role"},
        409: {"model": ErrorResponse, "description": "Role already assigned"},
    },
    summary="Register a participant under a role",
)
async def register_participant(
    request_data: RegisterParticipantRequest,
    request: Request,
    caller: str = Depends(get_caller_address),
    system: CertificationSystem = Depends(get_certification_system),
) -> ActorResponse:
    registrar = _registrar_for(system.lifecycle, request_data.role)
    try:
        actor = await registrar(
            caller, request_data.account, request_data.plant_id, request_data.name
        )
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return ActorResponse.from_domain(actor)


@router.get(
    "/actors",
    response_model=list[ActorResponse],
    responses={403: {"model": ErrorResponse, "description": "Cannot view actors"}},
)
async def list_actors(
    request: Request,
    caller: str = Depends(get_caller_address),
    queries: CertificationQueryService = Depends(get_query_service),
) -> list[ActorResponse]:
    try:
        actors = queries.get_all_actors(caller)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return [ActorResponse.from_domain(actor) for actor in actors]


@router.get(
    "/actors/{actor_id}",
    response_model=ActorResponse,
    responses={404: {"model": ErrorResponse, "description": "Actor not found"}},
)
async def get_actor(
    actor_id: int,
    request: Request,
    registry: EntityRegistryService = Depends(get_registry),
) -> ActorResponse:
    try:
        return ActorResponse.from_domain(registry.get_actor(actor_id))
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None


@router.get("/accounts/{account}/roles", response_model=AccountRolesResponse)
async def get_account_roles(
    account: str,
    registry: EntityRegistryService = Depends(get_registry),
) -> AccountRolesResponse:
    normalized = account.strip().lower()
    roles = registry.role_directory.roles_of(normalized)
    return AccountRolesResponse(
        account=normalized, roles=sorted(roles, key=lambda role: role.value)
    )


@router.get("/gateway", response_model=GatewayResponse)
async def get_gateway(
    registry: EntityRegistryService = Depends(get_registry),
) -> GatewayResponse:
    return GatewayResponse(gateway=registry.gateway, configured=registry.gateway is not None)


@router.post(
    "/gateway",
    response_model=GatewayResponse,
    responses={
        403: {"model": ErrorResponse, "description": "Caller is not a super admin"},
        409: {"model": ErrorResponse, "description": "Gateway already configured"},
    },
    summary="Bind the lifecycle service as registry gateway",
)
async def configure_gateway(
    request: Request,
    caller: str = Depends(get_caller_address),
    system: CertificationSystem = Depends(get_certification_system),
) -> GatewayResponse:
    try:
        await system.registry.configure_gateway(caller, system.lifecycle.principal)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return GatewayResponse(gateway=system.registry.gateway, configured=True)
