from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .dungeon.map import DungeonMap
from .dungeon.rect import Point
from .dungeon.tiles import TileType

PLAYER_GLYPH = '@'


def iter_tiles(dmap: DungeonMap) -> Iterator[Tuple[int, int, TileType]]:
    """Walk the tile buffer in index order, yielding (x, y, tile).

    x advances every step and wraps to the next row after ``width`` tiles,
    which keeps drawing in step with ``DungeonMap.xy_to_index``.
    """
    x = 0
    y = 0
    for tile in dmap.tiles:
        yield x, y, tile
        x += 1
        if x > dmap.width - 1:
            x = 0
            y += 1


def render_lines(dmap: DungeonMap, player: Optional[Point] = None) -> List[str]:
    rows: List[List[str]] = [[] for _ in range(dmap.height)]
    for x, y, tile in iter_tiles(dmap):
        if player is not None and (x, y) == (player.x, player.y):
            rows[y].append(PLAYER_GLYPH)
        else:
            rows[y].append(tile.glyph)
    return [''.join(r) for r in rows]


def render_text(dmap: DungeonMap, player: Optional[Point] = None) -> str:
    return "\n".join(render_lines(dmap, player))
