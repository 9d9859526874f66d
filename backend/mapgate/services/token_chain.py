"""Token-chain map authorization.

A map may require a token; that token is produced by another map, which may
itself require a token, and so on back to a map anyone can enter. A player
may load a map only when every link of that chain is satisfied by the
tokens they hold AND they hold the map's own token.

The walk is not memoised. Cyclic or runaway chains stop at
``max_depth`` and are denied.
"""

import logging
from collections.abc import Iterable

from mapgate.config import settings
from mapgate.dal.map_config import get_map_graph
from mapgate.models.common import NO_TOKEN, ChainOutcome, MapId, TokenId
from mapgate.models.map_graph import MapGraph, UnknownMapError, UnknownTokenError

logger = logging.getLogger("mapgate.services.token_chain")

# Outcomes that point at a broken map config rather than a missing token
_MISCONFIGURED = frozenset({
    ChainOutcome.UNKNOWN_MAP,
    ChainOutcome.UNKNOWN_TOKEN,
    ChainOutcome.DEPTH_EXCEEDED,
})


def _freeze(held_tokens: Iterable[TokenId]) -> frozenset[TokenId] | None:
    """Snapshot the held tokens, or None when they are not a set of hashables."""
    try:
        return frozenset(held_tokens)
    except TypeError:
        return None


class TokenChainAuthorizer:
    """Evaluates map access against one map graph."""

    def __init__(
        self,
        graph: MapGraph,
        validate_maps: bool = True,
        max_depth: int = 64,
    ) -> None:
        self._graph = graph
        self._validate_maps = validate_maps
        self._max_depth = max_depth

    # ------------------------------------------------------------------
    # Immediate requirement
    # ------------------------------------------------------------------

    def _check_map_token(self, map_id: MapId, held: frozenset[TokenId]) -> ChainOutcome:
        if not self._validate_maps:
            return ChainOutcome.GRANTED
        try:
            token = self._graph.required_token(map_id)
        except UnknownMapError:
            return ChainOutcome.UNKNOWN_MAP
        if token == NO_TOKEN or token in held:
            return ChainOutcome.GRANTED
        return ChainOutcome.MISSING_TOKEN

    def has_token_for_map(self, map_id: MapId, held_tokens: Iterable[TokenId]) -> bool:
        """Check only the token ``map_id`` itself requires."""
        if not self._validate_maps:
            return True
        held = _freeze(held_tokens)
        if held is None or not isinstance(map_id, str):
            logger.warning("Denied map %r: invalid input", map_id)
            return False
        return self._check_map_token(map_id, held) is ChainOutcome.GRANTED

    # ------------------------------------------------------------------
    # Full chain
    # ------------------------------------------------------------------

    def _walk(self, map_id: MapId, held: frozenset[TokenId], depth: int) -> ChainOutcome:
        if depth > self._max_depth:
            return ChainOutcome.DEPTH_EXCEEDED

        try:
            token = self._graph.required_token(map_id)
        except UnknownMapError:
            return ChainOutcome.UNKNOWN_MAP
        if token == NO_TOKEN:
            return ChainOutcome.GRANTED

        try:
            source = self._graph.source_map(token)
        except UnknownTokenError:
            return ChainOutcome.UNKNOWN_TOKEN

        upstream = self._walk(source, held, depth + 1)
        if upstream is not ChainOutcome.GRANTED:
            return upstream
        return self._check_map_token(map_id, held)

    def evaluate(self, map_id: MapId, held_tokens: Iterable[TokenId]) -> ChainOutcome:
        """Walk the whole chain for ``map_id`` and report why it stopped."""
        if not self._validate_maps:
            return ChainOutcome.GRANTED

        held = _freeze(held_tokens)
        if held is None or not isinstance(map_id, str):
            logger.warning("Denied map %r: invalid input", map_id)
            return ChainOutcome.INVALID_INPUT

        try:
            outcome = self._walk(map_id, held, 0)
        except RecursionError:
            outcome = ChainOutcome.DEPTH_EXCEEDED

        if outcome in _MISCONFIGURED:
            logger.warning("Denied map %s: token chain %s", map_id, outcome.value)
        return outcome

    def has_all_tokens(self, map_id: MapId, held_tokens: Iterable[TokenId]) -> bool:
        """Check the full prerequisite chain of ``map_id``."""
        return self.evaluate(map_id, held_tokens) is ChainOutcome.GRANTED


def get_token_chain_authorizer(graph: MapGraph | None = None) -> TokenChainAuthorizer:
    """Build an authorizer over the process-wide settings.

    Args:
        graph: Graph to check against. Defaults to the loaded map graph.

    Raises:
        RuntimeError: If the map graph has not been loaded.
    """
    return TokenChainAuthorizer(
        graph if graph is not None else get_map_graph(),
        validate_maps=settings.VALIDATE_MAPS,
        max_depth=settings.MAX_CHAIN_DEPTH,
    )


def has_token_for_map(map_id: MapId, held_tokens: Iterable[TokenId]) -> bool:
    if not settings.VALIDATE_MAPS:
        return True
    try:
        authorizer = get_token_chain_authorizer()
    except RuntimeError:
        logger.error("Map graph not loaded; denying map %s", map_id)
        return False
    return authorizer.has_token_for_map(map_id, held_tokens)


def has_all_tokens(map_id: MapId, held_tokens: Iterable[TokenId]) -> bool:
    if not settings.VALIDATE_MAPS:
        return True
    try:
        authorizer = get_token_chain_authorizer()
    except RuntimeError:
        logger.error("Map graph not loaded; denying map %s", map_id)
        return False
    return authorizer.has_all_tokens(map_id, held_tokens)
