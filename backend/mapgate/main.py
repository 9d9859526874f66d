"""
MapGate FastAPI Application Entry Point.

Configures logging, loads the map graph once at startup and registers the
access gating routes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mapgate.config import settings
from mapgate.dal.map_config import MapConfigError, load_configured_map_graph
from mapgate.logs import configure_logging
from mapgate.routes.health import router as health_router
from mapgate.routes.auth import router as auth_router
from mapgate.routes.maps import router as maps_router
from mapgate.routes.admin import router as admin_router

logger = logging.getLogger("mapgate.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.
    Loads the map graph on startup.
    """
    configure_logging()
    try:
        load_configured_map_graph()
        logger.info(
            "MapGate v%s started (map validation %s)",
            settings.APP_VERSION,
            "on" if settings.VALIDATE_MAPS else "off",
        )
    except MapConfigError as e:
        # Start anyway; map endpoints answer 503 and health reports degraded
        logger.error("Failed to load map config: %s", str(e))
        logger.info("MapGate v%s started WITHOUT a map graph", settings.APP_VERSION)

    yield

    logger.info("MapGate shutdown complete")


# Initialize FastAPI application
app = FastAPI(
    title="MapGate API",
    description="Map access gating for the ghost racing game server",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Register routers
app.include_router(health_router)  # Health endpoint at root level
app.include_router(health_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(maps_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mapgate.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
