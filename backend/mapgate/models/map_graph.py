"""Map/token graph model.

Loaded once from the JSON map config (``mapTokens``, ``tokenMapping``,
``ghostMixing``) and read-only afterwards.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mapgate.models.common import MapId, TokenId

logger = logging.getLogger("mapgate.models.map_graph")


class UnknownMapError(KeyError):
    """Raised when a map has no entry in the token requirements."""


class UnknownTokenError(KeyError):
    """Raised when a token has no source map."""


class MapGraph(BaseModel):
    """The static map -> token -> map dependency graph plus mixing groups."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    map_tokens: dict[MapId, TokenId] = Field(default_factory=dict, alias="mapTokens")
    token_mapping: dict[TokenId, MapId] = Field(default_factory=dict, alias="tokenMapping")
    ghost_mixing: tuple[tuple[MapId, ...], ...] = Field(default=(), alias="ghostMixing")

    @model_validator(mode="after")
    def warn_overlapping_groups(self) -> "MapGraph":
        seen: dict[MapId, int] = {}
        for index, group in enumerate(self.ghost_mixing):
            for map_id in group:
                if map_id in seen and seen[map_id] != index:
                    logger.warning(
                        "Map %s appears in mixing groups %d and %d; first group wins",
                        map_id, seen[map_id], index,
                    )
                else:
                    seen.setdefault(map_id, index)
        return self

    @property
    def maps(self) -> list[MapId]:
        return list(self.map_tokens)

    def required_token(self, map_id: MapId) -> TokenId:
        """Return the token needed to enter ``map_id``.

        Raises:
            UnknownMapError: The map is not configured.
        """
        try:
            return self.map_tokens[map_id]
        except KeyError:
            raise UnknownMapError(map_id) from None

    def source_map(self, token: TokenId) -> MapId:
        """Return the map that grants ``token``.

        Raises:
            UnknownTokenError: No map produces this token.
        """
        try:
            return self.token_mapping[token]
        except KeyError:
            raise UnknownTokenError(token) from None
