"""Authentication route handlers.

Endpoints:
    GET /api/auth/validate  -- Validate the ``me`` identity header.
"""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, status

from mapgate.auth.codec import InvalidCharacterError, encode
from mapgate.auth.dependencies import get_is_authorized
from mapgate.auth.identity import validate_username
from mapgate.models.access import ValidateResponse

logger = logging.getLogger("mapgate.routes.auth")

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/validate", response_model=ValidateResponse)
async def validate_identity(
    me: str | None = Header(None),
    authorized: bool = Depends(get_is_authorized),
) -> ValidateResponse:
    """Validate a claimed username and return its wire encoding.

    Returns:
        ``{"valid": bool, "authorized": bool, "encoded_name": str | None}``.
        ``encoded_name`` is only filled in for valid names.

    Raises:
        HTTPException 400: A privileged caller sent a name the codec
            cannot encode.
    """
    if me is None or not validate_username(me, authorized):
        logger.debug("Validate: invalid or missing username")
        return ValidateResponse(valid=False, authorized=authorized)

    try:
        encoded = encode(me)
    except InvalidCharacterError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Username cannot be encoded: {e}",
        )

    return ValidateResponse(valid=True, authorized=authorized, encoded_name=encoded)
