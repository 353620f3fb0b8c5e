"""Health check endpoint."""

from fastapi import APIRouter, Depends

from plantcert.api.dependencies.certification import get_registry
from plantcert.api.models.health import HealthResponse
from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    registry: EntityRegistryService = Depends(get_registry),
) -> HealthResponse:
    """Report readiness. Degraded until the gateway is configured."""
    configured = registry.gateway is not None
    return HealthResponse(
        status="healthy" if configured else "degraded",
        gateway_configured=configured,
    )
