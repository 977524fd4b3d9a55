from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..config import MapConfig
from ..dungeon.generator import generate
from ..dungeon.map import DungeonMap
from ..dungeon.movement import try_move_player
from ..dungeon.rect import Point
from ..rng import RandomSource
from .events import GameEvent

logger = logging.getLogger(__name__)


class GameState:
    """Holds the session map and the player position.

    The map is generated once and never changes afterwards; only the player
    moves.
    """

    def __init__(self, dmap: DungeonMap):
        self._listeners: List[Callable[[GameEvent, "GameState"], None]] = []
        self.map = dmap
        self.player: Point = dmap.spawn_point()
        logger.info("Initialized GameState on %dx%d map, player at %s", dmap.width, dmap.height, self.player)

    @classmethod
    def new(cls, seed: Optional[int] = None, config: Optional[MapConfig] = None) -> "GameState":
        return cls(generate(RandomSource(seed), config))

    def add_listener(self, listener: Callable[[GameEvent, "GameState"], None]) -> None:
        """Subscribe to game events."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for l in list(self._listeners):
            try:
                l(event, self)
            except Exception as ex:  # pragma: no cover - listeners shouldn't crash engine
                logger.exception("Listener errored on %s: %s", event, ex)

    def move(self, dx: int, dy: int) -> bool:
        """Attempt to move the player by (dx, dy).

        Returns True if the position changed.
        """
        new_pos = try_move_player(self.map, self.player, dx, dy)
        if new_pos == self.player:
            return False
        self.player = new_pos
        logger.debug("Player moved to %s", self.player)
        self._emit(GameEvent.PLAYER_MOVED)
        return True
