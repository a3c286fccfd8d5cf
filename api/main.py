"""
api.main - FastAPI application entry point.

Run with:
    uvicorn api.main:app --reload
    python -m api.main
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.middleware import setup_error_handlers
from api.routers import (
    classify_router,
    health_router,
    rebalance_router,
    stats_router,
)

if TYPE_CHECKING:
    from armoury.app_context import AppContext

logger = logging.getLogger(__name__)

# Global app context (initialized at startup)
_app_context: "AppContext | None" = None


def get_app_context() -> "AppContext":
    """Get the global app context. Must be called after app startup."""
    if _app_context is None:
        raise RuntimeError("App context not initialized. Server not started?")
    return _app_context


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    global _app_context

    logger.info("Starting Animated Armoury API...")
    if _app_context is None:
        from armoury.app_context import create_app_context

        _app_context = create_app_context()
    logger.info("App context initialized successfully")

    yield

    logger.info("Shutting down Animated Armoury API...")
    if _app_context is not None:
        _app_context.close()
        _app_context = None
    logger.info("Shutdown complete")


app = FastAPI(
    title="Animated Armoury Rebalancer API",
    description="Weapon classification and stat rebalancing for animated weapon types",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_error_handlers(app)

app.include_router(health_router, tags=["Health"])
app.include_router(classify_router, prefix="/api/v1", tags=["Classification"])
app.include_router(rebalance_router, prefix="/api/v1", tags=["Rebalance"])
app.include_router(stats_router, prefix="/api/v1", tags=["Stat Tables"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - points at the docs."""
    return {
        "message": "Animated Armoury Rebalancer API",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level="info",
    )
