"""Health check endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from common.config import APP_VERSION

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns the service status and version. Does not touch Twilio
    or validate the token configuration.
    """
    return HealthResponse(status="healthy", version=APP_VERSION)
