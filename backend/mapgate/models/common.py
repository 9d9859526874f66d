"""Common identifiers and shared types for MapGate models."""

from enum import StrEnum

MapId = str
TokenId = str

# Required-token value meaning "anyone may enter"
NO_TOKEN: TokenId = ""


class ChainOutcome(StrEnum):
    """Result of walking a map's token chain."""
    GRANTED = "GRANTED"
    MISSING_TOKEN = "MISSING_TOKEN"
    UNKNOWN_MAP = "UNKNOWN_MAP"
    UNKNOWN_TOKEN = "UNKNOWN_TOKEN"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"
    INVALID_INPUT = "INVALID_INPUT"
