"""FastAPI application entry point for the certification registry."""

from fastapi import FastAPI

from plantcert.api.middleware.logging_middleware import LoggingMiddleware
from plantcert.api.routes.documents import router as documents_router
from plantcert.api.routes.equipment import router as equipment_router
from plantcert.api.routes.health import router as health_router
from plantcert.api.routes.integrity import router as integrity_router
from plantcert.api.routes.participants import router as participants_router
from plantcert.api.routes.plants import router as plants_router
from plantcert.bootstrap.logging import configure_structlog
from plantcert.config.registry_config import RegistryConfig

configure_structlog(RegistryConfig.from_environment().environment)

app = FastAPI(
    title="Plant Equipment Certification Registry",
    description="Role-gated equipment certification lifecycle and document registry",
    version="0.1.0",
)

app.add_middleware(LoggingMiddleware)

app.include_router(health_router)
app.include_router(plants_router)
app.include_router(participants_router)
app.include_router(equipment_router)
app.include_router(documents_router)
app.include_router(integrity_router)
