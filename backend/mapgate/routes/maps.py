"""Map access route handlers.

Endpoints:
    GET  /api/maps/{map_id}/mixing  -- Ghost mixing group for a map.
    POST /api/maps/{map_id}/access  -- Decide whether the caller may load a map.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from mapgate.auth.dependencies import get_current_username
from mapgate.dal.map_config import get_map_graph
from mapgate.models.access import AccessCheckRequest, AccessDecision, MixingResponse
from mapgate.models.map_graph import MapGraph
from mapgate.services.access_service import AccessService
from mapgate.services.map_mixing import mixing_for_map
from mapgate.services.token_chain import get_token_chain_authorizer

logger = logging.getLogger("mapgate.routes.maps")

router = APIRouter(prefix="/maps", tags=["Maps"])


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def require_map_graph() -> MapGraph:
    """Return the loaded map graph.

    Raises:
        HTTPException 503: Map configuration not loaded.
    """
    try:
        return get_map_graph()
    except RuntimeError:
        logger.error("Map request received before the map graph was loaded")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Map configuration not loaded",
        )


def get_access_service(graph: MapGraph = Depends(require_map_graph)) -> AccessService:
    """Build the access service over the loaded map graph."""
    return AccessService(graph, get_token_chain_authorizer(graph))


# ---------------------------------------------------------------------------
# GET /api/maps/{map_id}/mixing
# ---------------------------------------------------------------------------

@router.get("/{map_id}/mixing", response_model=MixingResponse)
async def get_mixing(
    map_id: str = Path(..., min_length=1, max_length=128),
    graph: MapGraph = Depends(require_map_graph),
) -> MixingResponse:
    """Return the mixing group of ``map_id`` (a singleton if ungrouped)."""
    group = mixing_for_map(map_id, graph.ghost_mixing)
    return MixingResponse(map_id=map_id, group=list(group))


# ---------------------------------------------------------------------------
# POST /api/maps/{map_id}/access
# ---------------------------------------------------------------------------

@router.post("/{map_id}/access", response_model=AccessDecision)
async def check_access(
    body: AccessCheckRequest,
    map_id: str = Path(..., min_length=1, max_length=128),
    username: str = Depends(get_current_username),
    service: AccessService = Depends(get_access_service),
) -> AccessDecision:
    """Decide whether the caller may load ``map_id`` with the tokens they hold.

    Raises:
        HTTPException 401: Missing or malformed ``me`` header.
        HTTPException 503: Map configuration not loaded.
    """
    return service.check_access(username, map_id, body.tokens)
