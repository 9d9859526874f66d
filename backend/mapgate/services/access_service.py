"""Map access business logic.

Sits between route handlers and the token-chain/mixing services.
"""

import logging
from collections.abc import Iterable

from mapgate.logs import server_log, shorten_name
from mapgate.models.access import AccessDecision, MapGraphEntry
from mapgate.models.common import NO_TOKEN, ChainOutcome, MapId, TokenId
from mapgate.models.map_graph import MapGraph
from mapgate.services.map_mixing import mixing_for_map
from mapgate.services.token_chain import TokenChainAuthorizer

logger = logging.getLogger("mapgate.services.access")


class AccessService:
    """Service layer for map access decisions."""

    def __init__(self, graph: MapGraph, authorizer: TokenChainAuthorizer) -> None:
        self._graph = graph
        self._authorizer = authorizer

    def check_access(
        self,
        username: str,
        map_id: MapId,
        held_tokens: Iterable[TokenId],
    ) -> AccessDecision:
        """Decide whether ``username`` may load ``map_id``."""
        held = frozenset(held_tokens)
        outcome = self._authorizer.evaluate(map_id, held)
        allowed = outcome is ChainOutcome.GRANTED
        has_map_token = self._authorizer.has_token_for_map(map_id, held)
        if not allowed:
            logger.debug("Map %s denied: %s", map_id, outcome.value)

        server_log(
            "%s %s map %s",
            shorten_name(username),
            "entered" if allowed else "was denied",
            map_id,
        )
        return AccessDecision(
            map_id=map_id,
            allowed=allowed,
            has_map_token=has_map_token,
            mixing=list(mixing_for_map(map_id, self._graph.ghost_mixing)),
        )

    def describe_graph(self) -> list[MapGraphEntry]:
        """List every configured map with its chain status for a token-less player."""
        entries = []
        for map_id, token in self._graph.map_tokens.items():
            source = None
            if token != NO_TOKEN:
                source = self._graph.token_mapping.get(token)
            entries.append(
                MapGraphEntry(
                    map_id=map_id,
                    required_token=token,
                    source_map=source,
                    outcome_without_tokens=self._authorizer.evaluate(map_id, ()),
                )
            )
        return entries
