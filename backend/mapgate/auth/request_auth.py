"""Privileged request detection.

A request is privileged when it carries ``ed: 1`` together with an ``au``
header equal to the configured authorizer hash.
"""

import hmac
import logging
from collections.abc import Mapping

from mapgate.config import settings

logger = logging.getLogger("mapgate.auth.request_auth")

EDIT_HEADER = "ed"
AUTH_HEADER = "au"

_EDIT_DEFAULT = "0"
_AUTH_DEFAULT = "something"


def is_authorized(headers: Mapping[str, str], secret: str | None = None) -> bool:
    """Decide whether a request holds elevated privilege.

    Args:
        headers: Request metadata. Starlette ``Headers`` or any mapping.
        secret: Authorizer hash to compare against. Defaults to
            ``settings.AUTHORIZER_HASH``.

    Returns:
        True iff ``ed`` is ``"1"`` and ``au`` matches the secret exactly.
    """
    expected = settings.AUTHORIZER_HASH if secret is None else secret
    if not expected:
        return False

    ed = headers.get(EDIT_HEADER, _EDIT_DEFAULT)
    au = headers.get(AUTH_HEADER, _AUTH_DEFAULT)

    if ed != "1":
        return False

    # Bytes, so non-ASCII header values compare instead of raising
    try:
        return hmac.compare_digest(au.encode("utf-8"), expected.encode("utf-8"))
    except AttributeError:
        logger.debug("Non-string authorizer header ignored")
        return False
