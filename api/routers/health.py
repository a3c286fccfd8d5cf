"""
api.routers.health - Health check endpoints.

Provides endpoints for monitoring service health and status.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends

from api import __version__
from api.dependencies import get_app_context
from api.models import ConfigResponse, HealthResponse
from armoury.stats import compute_stats

if TYPE_CHECKING:
    from armoury.app_context import AppContext

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    ctx: "AppContext" = Depends(get_app_context),
) -> HealthResponse:
    """
    Check API health status.

    Verifies the config is readable and the stat tables answer a known
    lookup.
    """
    services: dict[str, str] = {}

    try:
        _ = ctx.config.include_waccf
        services["config"] = "loaded"
    except Exception as e:
        logger.warning(f"Config health check failed: {e}")
        services["config"] = f"error: {str(e)[:50]}"

    services["stat_tables"] = "available" if compute_stats("claw", "steel") else "unavailable"

    healthy = all(v in ("loaded", "available") for v in services.values())
    return HealthResponse(
        status="healthy" if healthy else "degraded",
        version=__version__,
        services=services,
    )


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """
    Kubernetes-style liveness probe.

    Returns 200 if the service is alive.
    """
    return {"status": "alive"}


@router.get("/config", response_model=ConfigResponse)
async def get_config(
    ctx: "AppContext" = Depends(get_app_context),
) -> ConfigResponse:
    """Get the current rebalance configuration."""
    config = ctx.config
    return ConfigResponse(
        include_waccf=config.include_waccf,
        included_plugins=config.included_plugins,
        max_workers=config.max_workers,
    )
