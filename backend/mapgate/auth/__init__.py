"""Authentication and authorization utilities."""

from mapgate.auth.codec import InvalidCharacterError, decode, encode
from mapgate.auth.identity import validate_username
from mapgate.auth.request_auth import is_authorized
from mapgate.auth.dependencies import (
    get_current_username,
    get_is_authorized,
    require_authorized,
)

__all__ = [
    "InvalidCharacterError",
    "decode",
    "encode",
    "validate_username",
    "is_authorized",
    "get_current_username",
    "get_is_authorized",
    "require_authorized",
]
