"""Health check endpoint."""

import logging
from fastapi import APIRouter
from mapgate.dal.map_config import get_map_graph
from mapgate.config import settings

logger = logging.getLogger("mapgate.routes.health")
router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """
    Health check endpoint with map graph status.

    Returns 200 OK even if the map graph failed to load so the service
    stays reachable. The graph status is reported in the response body
    for monitoring purposes.

    Returns:
        dict: Health status, version, map count and map graph status.
    """
    health_response = {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "maps": 0,
        "checks": {
            "map_graph": "unknown"
        }
    }

    try:
        graph = get_map_graph()
        health_response["checks"]["map_graph"] = "ok"
        health_response["maps"] = len(graph.map_tokens)
    except RuntimeError as e:
        logger.warning("Map graph health check failed: %s", str(e))
        health_response["checks"]["map_graph"] = "down"
        health_response["status"] = "degraded"

    return health_response
