from __future__ import annotations

import logging

from .map import DungeonMap
from .rect import Point
from .tiles import TileType

logger = logging.getLogger(__name__)


def try_move_player(dmap: DungeonMap, pos: Point, dx: int, dy: int) -> Point:
    """
    Attempt to move from pos by (dx, dy) and return the resulting position.

    The destination tile is looked up through the flat index, exactly as the
    renderer lays tiles out. A wall destination leaves pos unchanged. An index
    with no tile behind it (before the first or past the last cell) is treated
    the same way. Otherwise the new coordinates are clamped into the grid.
    """
    tx = pos.x + dx
    ty = pos.y + dy
    destination = dmap.xy_to_index(tx, ty)
    if not 0 <= destination < len(dmap.tiles):
        logger.debug("Blocked move by (%d, %d) from %s: index %d outside map", dx, dy, pos, destination)
        return pos
    if dmap.tiles[destination] is TileType.WALL:
        logger.debug("Blocked move by (%d, %d) from %s: wall", dx, dy, pos)
        return pos
    return Point(
        min(dmap.width - 1, max(0, tx)),
        min(dmap.height - 1, max(0, ty)),
    )
