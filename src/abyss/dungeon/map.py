from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence, Set, Tuple

from ..errors import MapSealedError, NoRoomsError
from .rect import Point, Rect
from .tiles import TileType


class DungeonMap:
    """
    Flat, row-major tile buffer plus the rooms carved into it.

    ``xy_to_index`` is the only place 2D coordinates become buffer positions;
    generation, movement and rendering all go through it. A map starts all wall,
    is carved by the generator and then sealed: after ``seal()`` tiles and rooms
    are tuples and every carve raises MapSealedError.
    """

    def __init__(self, width: int, height: int, default: TileType = TileType.WALL) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Map size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: List[TileType] = [default] * (width * height)
        self._rooms: List[Rect] = []
        self._sealed = False

    # ---- Index mapping ---------------------------------------------------
    def xy_to_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def index_to_xy(self, index: int) -> Point:
        return Point(index % self.width, index // self.width)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # ---- Read access -----------------------------------------------------
    @property
    def tiles(self) -> Sequence[TileType]:
        return self._tiles if self._sealed else tuple(self._tiles)

    @property
    def rooms(self) -> Sequence[Rect]:
        return self._rooms if self._sealed else tuple(self._rooms)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def tile_at(self, x: int, y: int) -> TileType:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in [0,{self.width})x[0,{self.height})")
        return self._tiles[self.xy_to_index(x, y)]

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self._tiles[self.xy_to_index(x, y)].is_walkable

    def spawn_point(self) -> Point:
        """Center of the first room placed."""
        if not self._rooms:
            raise NoRoomsError("Map has no rooms; cannot pick a spawn point")
        return self._rooms[0].center()

    def neighbors_4(self, x: int, y: int) -> Iterable[Point]:
        # Ordered for deterministic traversal
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield Point(nx, ny)

    # ---- Carving (generation only) ---------------------------------------
    def _check_writable(self) -> None:
        if self._sealed:
            raise MapSealedError("Map is sealed; generation has already finished")

    def add_room(self, room: Rect) -> None:
        """Carve the room interior and append it to the room list.

        The generator clamps rooms into the grid, so an out-of-range cell here
        is a bug and raises IndexError rather than wrapping around.
        """
        self._check_writable()
        for x, y in room.interior():
            if not self.in_bounds(x, y):
                raise IndexError(f"Room {room} reaches outside the map at ({x},{y})")
            self._tiles[self.xy_to_index(x, y)] = TileType.FLOOR
        self._rooms.append(room)

    def _carve_index(self, index: int) -> None:
        # Index 0 and anything past the buffer are never carved
        if 0 < index < len(self._tiles):
            self._tiles[index] = TileType.FLOOR

    def carve_h_corridor(self, x1: int, x2: int, y: int) -> None:
        self._check_writable()
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self._carve_index(self.xy_to_index(x, y))

    def carve_v_corridor(self, y1: int, y2: int, x: int) -> None:
        self._check_writable()
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self._carve_index(self.xy_to_index(x, y))

    def seal(self) -> "DungeonMap":
        if not self._sealed:
            self._tiles = tuple(self._tiles)  # type: ignore[assignment]
            self._rooms = tuple(self._rooms)  # type: ignore[assignment]
            self._sealed = True
        return self

    # ---- Search ----------------------------------------------------------
    def flood_fill(self, start: Point) -> Set[int]:
        """
        Indices of all walkable tiles reachable from start by 4-neighbour steps.
        Empty if start is out of bounds or not walkable.
        """
        if not self.is_walkable(start.x, start.y):
            return set()
        seen = {self.xy_to_index(start.x, start.y)}
        dq = deque([start])
        while dq:
            p = dq.popleft()
            for n in self.neighbors_4(p.x, p.y):
                idx = self.xy_to_index(n.x, n.y)
                if idx in seen or not self._tiles[idx].is_walkable:
                    continue
                seen.add(idx)
                dq.append(n)
        return seen

    # ---- Export / Compare ------------------------------------------------
    def floor_count(self) -> int:
        return sum(1 for t in self._tiles if t is TileType.FLOOR)

    def snapshot(self) -> Tuple[Tuple[str, ...], Tuple[Tuple[int, int, int, int], ...]]:
        """
        Deterministic, hashable snapshot of tiles and rooms for equality tests.
        """
        tiles = tuple(t.name for t in self._tiles)
        rooms = tuple((r.x1, r.y1, r.x2, r.y2) for r in self._rooms)
        return tiles, rooms
