"""
Health check router.

Liveness and readiness endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_catalog, get_settings
from backend.core.catalog import ExerciseCatalog
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/ready")
def ready(
    catalog: ExerciseCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Readiness: the catalog loaded and whether remote matching is on."""
    return {
        "status": "ok",
        "catalog_size": len(catalog),
        "remote_matching": settings.remote_matching_enabled,
    }
