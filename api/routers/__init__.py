"""API routers package."""

from api.routers.health import router as health_router
from api.routers.classify import router as classify_router
from api.routers.rebalance import router as rebalance_router
from api.routers.stats import router as stats_router

__all__ = [
    "health_router",
    "classify_router",
    "rebalance_router",
    "stats_router",
]
