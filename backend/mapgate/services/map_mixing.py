"""Ghost mixing group lookup.

Maps in the same mixing group are interchangeable when picking ghosts to
race against.
"""

from collections.abc import Iterable, Sequence

from mapgate.dal.map_config import get_map_graph
from mapgate.models.common import MapId


def mixing_for_map(
    map_id: MapId,
    groups: Iterable[Sequence[MapId]] | None = None,
) -> tuple[MapId, ...]:
    """Return the mixing group containing ``map_id``.

    Args:
        map_id: The map to look up.
        groups: Groups to scan in order. Defaults to the loaded graph's
            ``ghostMixing`` groups.

    Returns:
        The first group that contains ``map_id``, or ``(map_id,)`` when the
        map belongs to no group.
    """
    if groups is None:
        groups = get_map_graph().ghost_mixing

    match = next((group for group in groups if map_id in group), None)
    if match is None:
        return (map_id,)
    return tuple(match)
