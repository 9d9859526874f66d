"""Username validation.

Player identities are 64 lowercase ASCII letters. Privileged callers (see
:mod:`mapgate.auth.request_auth`) may act under any name.
"""

import re

USERNAME_LENGTH = 64

_USERNAME_CHARS = re.compile(r"[a-z]+")


def validate_username(name: str, already_authorized: bool) -> bool:
    """Check that a claimed username is structurally acceptable.

    Args:
        name: The candidate username. Never normalised.
        already_authorized: Whether the caller holds elevated privilege.

    Returns:
        True for privileged callers, otherwise True only if ``name`` is
        exactly 64 characters of ``a``-``z``.
    """
    if already_authorized:
        return True

    if not isinstance(name, str):
        return False
    if len(name) != USERNAME_LENGTH:
        return False
    return _USERNAME_CHARS.fullmatch(name) is not None
