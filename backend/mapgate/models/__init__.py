"""Pydantic models for MapGate."""

from mapgate.models.common import NO_TOKEN, ChainOutcome, MapId, TokenId
from mapgate.models.map_graph import MapGraph, UnknownMapError, UnknownTokenError
from mapgate.models.access import (
    AccessCheckRequest,
    AccessDecision,
    MapGraphEntry,
    MixingResponse,
    ValidateResponse,
)

__all__ = [
    # Identifiers and enums
    "NO_TOKEN",
    "ChainOutcome",
    "MapId",
    "TokenId",
    # Graph
    "MapGraph",
    "UnknownMapError",
    "UnknownTokenError",
    # API models
    "AccessCheckRequest",
    "AccessDecision",
    "MapGraphEntry",
    "MixingResponse",
    "ValidateResponse",
]
