from enum import Enum, auto
from typing import Tuple


class TileType(Enum):
    """Dungeon tile types.

    - WALL: Non-walkable obstacle
    - FLOOR: Walkable open tile, carved by rooms and corridors
    """

    WALL = auto()
    FLOOR = auto()

    @property
    def is_walkable(self) -> bool:
        return self is TileType.FLOOR

    @property
    def glyph(self) -> str:
        """Single-character form used by the text renderer and logs."""
        return {TileType.WALL: '#', TileType.FLOOR: '.'}[self]

    @property
    def color(self) -> Tuple[int, int, int]:
        """RGB foreground colour for 2D rendering (Arcade)."""
        return {
            TileType.WALL: (0, 255, 0),
            TileType.FLOOR: (128, 128, 128),
        }[self]
