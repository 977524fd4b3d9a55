from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_MAP_CONFIG, MapConfig
from ..errors import NoRoomsError
from ..rng import RandomSource
from .map import DungeonMap
from .rect import Rect

logger = logging.getLogger(__name__)


class MapGenerator:
    """
    Random room placement with L-shaped corridors.

    Each of ``max_rooms`` attempts samples one candidate room and keeps it only
    if it touches no room placed so far. Every kept room after the first is
    joined to the room kept just before it (not the nearest one) by a corridor
    between the two centers, so the rooms form a single chain and the map is
    always connected.

    The first attempt can never collide, so a generated map always has at
    least one room.
    """

    def __init__(self, rng: Optional[RandomSource] = None, config: MapConfig = DEFAULT_MAP_CONFIG) -> None:
        self.rng = rng if rng is not None else RandomSource()
        self.config = config

    def generate(self) -> DungeonMap:
        cfg = self.config
        rng = self.rng
        dmap = DungeonMap(cfg.width, cfg.height)
        rejected = 0

        for attempt in range(cfg.max_rooms):
            room = self._sample_room()
            collision = next((other for other in dmap.rooms if room.does_intersect(other)), None)
            if collision is not None:
                rejected += 1
                logger.debug("Attempt %d: %s overlaps %s; skipped", attempt, room, collision)
                continue

            if dmap.rooms:
                prev_x, prev_y = dmap.rooms[-1].center()
                curr_x, curr_y = room.center()
                if rng.range(0, 2) == 1:
                    dmap.carve_h_corridor(prev_x, curr_x, prev_y)
                    dmap.carve_v_corridor(prev_y, curr_y, curr_x)
                else:
                    dmap.carve_v_corridor(prev_y, curr_y, prev_x)
                    dmap.carve_h_corridor(prev_x, curr_x, curr_y)
            dmap.add_room(room)

        if not dmap.rooms:
            raise NoRoomsError(f"Generation placed no rooms in {cfg.max_rooms} attempts")

        logger.info(
            "Generated %dx%d map: %d rooms placed, %d candidates rejected",
            cfg.width,
            cfg.height,
            len(dmap.rooms),
            rejected,
        )
        return dmap.seal()

    def _sample_room(self) -> Rect:
        cfg = self.config
        rng = self.rng
        w = rng.range(cfg.min_room_size, cfg.max_room_size)
        h = rng.range(cfg.min_room_size, cfg.max_room_size)
        x = rng.roll_dice(1, cfg.width - w - 1) - 1
        # The y bound subtracts the room width, not its height; layouts for a
        # given seed depend on it. Rooms taller than wide are then pulled back
        # up so the last carved row stays on the map.
        y = rng.roll_dice(1, cfg.height - w - 1) - 1
        y = min(y, cfg.height - h - 2)
        return Rect.new(x, y, w, h)


def generate(rng: Optional[RandomSource] = None, config: Optional[MapConfig] = None) -> DungeonMap:
    """Generate a sealed dungeon map.

    Without an rng every call draws from a fresh, unseeded RandomSource.
    """
    return MapGenerator(rng, config or DEFAULT_MAP_CONFIG).generate()
