"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string ("healthy" or "degraded").
        gateway_configured: Whether the registry accepts writes.
    """

    status: str
    gateway_configured: bool
