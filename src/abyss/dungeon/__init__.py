"""
Dungeon layout for Lands of the Abyss.

Contains the room rectangle primitive, the flat tile map, the random
room-and-corridor generator and the movement check that reads the map.
"""
from .generator import MapGenerator, generate
from .map import DungeonMap
from .movement import try_move_player
from .rect import Point, Rect
from .tiles import TileType

__all__ = [
    "DungeonMap",
    "MapGenerator",
    "Point",
    "Rect",
    "TileType",
    "generate",
    "try_move_player",
]
