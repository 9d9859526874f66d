"""Request/response models for the map access API."""

from typing import Optional

from pydantic import BaseModel, Field

from mapgate.models.common import ChainOutcome, MapId, TokenId


class AccessCheckRequest(BaseModel):
    """Tokens the player currently holds."""
    tokens: list[TokenId] = Field(default_factory=list, max_length=1024)


class AccessDecision(BaseModel):
    """Outcome of a map access check."""
    map_id: MapId
    allowed: bool
    has_map_token: bool
    mixing: list[MapId]


class MixingResponse(BaseModel):
    map_id: MapId
    group: list[MapId]


class ValidateResponse(BaseModel):
    """Identity check result for the ``me`` header."""
    valid: bool
    authorized: bool
    encoded_name: Optional[str] = None


class MapGraphEntry(BaseModel):
    """One configured map, as shown to operators."""
    map_id: MapId
    required_token: TokenId
    source_map: Optional[MapId] = None
    outcome_without_tokens: ChainOutcome
