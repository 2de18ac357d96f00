"""
System router: health and effective engine configuration.
"""

from fastapi import APIRouter

from beacon_api import __version__
from beacon_api.config import get_settings
from beacon_api.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health")
async def system_health():
    """Liveness check with version and environment."""
    settings = get_settings()
    return {
        "success": True,
        "data": {
            "status": "healthy",
            "version": __version__,
            "environment": settings.environment,
        },
    }


@router.get("/config")
async def engine_config():
    """Effective cascade engine configuration."""
    settings = get_settings()
    logger.info("engine_config_fetch")
    return {
        "success": True,
        "data": {
            "max_depth": settings.cascade_max_depth,
            "magnitude_cutoff": settings.cascade_magnitude_cutoff,
            "default_region": settings.default_region,
            "batch_max_workers": settings.batch_max_workers,
            "batch_max_requests": settings.batch_max_requests,
        },
    }
