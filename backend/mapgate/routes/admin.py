"""Admin route handlers.

All endpoints require the ``ed``/``au`` privilege headers.

Endpoints:
    GET /api/admin/maps  -- Configured maps with their token chains.
"""

from fastapi import APIRouter, Depends

from mapgate.auth.dependencies import require_authorized
from mapgate.logs import admin_log
from mapgate.models.access import MapGraphEntry
from mapgate.routes.maps import get_access_service
from mapgate.services.access_service import AccessService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/maps", response_model=list[MapGraphEntry])
async def list_maps(
    authorized: bool = Depends(require_authorized),
    service: AccessService = Depends(get_access_service),
) -> list[MapGraphEntry]:
    """List every configured map, its required token and where that token comes from."""
    entries = service.describe_graph()
    admin_log("Map graph listed (%d maps)", len(entries))
    return entries
