"""
Payload API - Route Table

Health check plus URL-segment version routing. A request without a version
segment (/api/payload) is served by version 1.
"""

from fastapi import APIRouter

from .. import __version__
from ..config import get_settings
from ..models import HealthResponse
from . import v1, v2


SUPPORTED_VERSIONS = ("1.0", "2.0")

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check for load balancers."""
    settings = get_settings()
    return HealthResponse(service=settings.service_name, version=__version__)


router.include_router(v1.router, prefix="/api/v1")
router.include_router(v2.router, prefix="/api/v2")

# Unversioned path falls back to the default version
router.include_router(v1.router, prefix="/api", include_in_schema=False)
