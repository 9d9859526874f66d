"""Process-wide map graph store.

The graph is loaded from JSON once during application startup and served
read-only to every request through :func:`get_map_graph`.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from mapgate.config import settings
from mapgate.models.map_graph import MapGraph

logger = logging.getLogger("mapgate.dal.map_config")

# Global graph instance
_graph: MapGraph | None = None


class MapConfigError(Exception):
    """Raised when the map config file cannot be read or is invalid."""


def load_map_graph(path: str | Path) -> MapGraph:
    """Read and validate a map config file.

    Args:
        path: JSON file with ``mapTokens``, ``tokenMapping`` and
            ``ghostMixing`` keys.

    Returns:
        The validated, frozen graph.

    Raises:
        MapConfigError: The file is unreadable, not JSON, or fails validation.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MapConfigError(f"Cannot read map config {path}: {e}") from e

    try:
        graph = MapGraph.model_validate_json(raw)
    except ValidationError as e:
        raise MapConfigError(f"Invalid map config {path}: {e}") from e

    logger.info(
        "Loaded map config %s: %d maps, %d tokens, %d mixing groups",
        path, len(graph.map_tokens), len(graph.token_mapping), len(graph.ghost_mixing),
    )
    return graph


def init_map_graph(graph: MapGraph) -> None:
    """Install ``graph`` as the process-wide map graph."""
    global _graph
    _graph = graph


def load_configured_map_graph() -> MapGraph:
    """Load the graph named by ``MAP_CONFIG_PATH`` and install it.

    Called during FastAPI application startup. Without a configured path
    an empty graph is installed, which denies every gated map.
    """
    if settings.MAP_CONFIG_PATH:
        graph = load_map_graph(settings.MAP_CONFIG_PATH)
    else:
        logger.warning(
            "MAP_CONFIG_PATH not set. Starting with an empty map graph; "
            "every map lookup will be denied."
        )
        graph = MapGraph()
    init_map_graph(graph)
    return graph


def get_map_graph() -> MapGraph:
    """Get the process-wide map graph.

    Raises:
        RuntimeError: If the graph has not been loaded.
    """
    if _graph is None:
        raise RuntimeError(
            "Map graph not initialized. Call load_configured_map_graph() first."
        )
    return _graph


def is_map_graph_loaded() -> bool:
    return _graph is not None


def reset_map_graph() -> None:
    """Forget the installed graph. Used for testing."""
    global _graph
    _graph = None
