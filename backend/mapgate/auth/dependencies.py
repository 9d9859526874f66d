"""FastAPI dependency-injection callables for authentication and authorization.

Each callable is designed to be used with ``Depends()`` in route signatures.
They read the ``ed``/``au`` privilege headers and the ``me`` identity
header, validate them, and return the caller's privilege flag or username.
"""

import logging

from fastapi import Depends, Header, HTTPException, Request, status

from mapgate.auth.identity import validate_username
from mapgate.auth.request_auth import is_authorized
from mapgate.logs import shorten_name

logger = logging.getLogger("mapgate.auth.dependencies")


# ---------------------------------------------------------------------------
# Privilege dependencies
# ---------------------------------------------------------------------------

async def get_is_authorized(request: Request) -> bool:
    """Return whether the request carries valid privilege headers."""
    return is_authorized(request.headers)


async def require_authorized(
    authorized: bool = Depends(get_is_authorized),
) -> bool:
    """Reject callers without privilege.

    Raises:
        HTTPException 403: Privilege headers missing or wrong.
    """
    if not authorized:
        logger.warning("Privileged endpoint called without authorization")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Authorization required",
        )
    return True


# ---------------------------------------------------------------------------
# Identity dependency
# ---------------------------------------------------------------------------

async def get_current_username(
    me: str | None = Header(None),
    authorized: bool = Depends(get_is_authorized),
) -> str:
    """Return the validated username from the ``me`` header.

    Privileged callers skip the format check.

    Raises:
        HTTPException 401: Header missing or username malformed.
    """
    if me is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing me header",
        )

    if not validate_username(me, authorized):
        logger.debug("Rejected malformed username %s", shorten_name(me))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username",
        )

    return me
