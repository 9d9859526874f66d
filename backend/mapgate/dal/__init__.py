"""Data Access Layer -- load-once map config store."""

from mapgate.dal.map_config import (
    MapConfigError,
    get_map_graph,
    init_map_graph,
    is_map_graph_loaded,
    load_configured_map_graph,
    load_map_graph,
    reset_map_graph,
)

__all__ = [
    "MapConfigError",
    "get_map_graph",
    "init_map_graph",
    "is_map_graph_loaded",
    "load_configured_map_graph",
    "load_map_graph",
    "reset_map_graph",
]
