from __future__ import annotations

import logging
from typing import Optional

try:
    import arcade  # type: ignore
except ImportError:  # pragma: no cover - optional for headless installs
    arcade = None

from ..config import MapConfig
from ..engine.events import GameEvent
from ..engine.game_state import GameState
from ..render import iter_tiles

logger = logging.getLogger(__name__)

TILE_SIZE = 8
PLAYER_COLOR = (255, 255, 0)
WINDOW_TITLE = "Lands of the Abyss"


class DungeonWindow:
    """Arcade window that draws the map and moves the player.

    Only created when Arcade is available. Tests cover the logic layer, not
    rendering.
    """

    def __init__(self, state: GameState):
        if arcade is None:
            raise RuntimeError("Arcade package is not installed; cannot create window")
        self.state = state
        width = state.map.width * TILE_SIZE
        height = state.map.height * TILE_SIZE
        self._window = arcade.Window(width, height, title=WINDOW_TITLE)
        self._window.on_draw = self.on_draw
        self._window.on_key_press = self.on_key_press
        state.add_listener(self._on_event)
        logger.info("Arcade window initialized (%dx%d)", width, height)

    def _on_event(self, event: GameEvent, state: GameState):
        if event is GameEvent.PLAYER_MOVED:
            self._window.set_caption(f"{WINDOW_TITLE} - {state.player.x},{state.player.y}")

    def run(self):
        arcade.run()

    def _draw_cell(self, x: int, y: int, color) -> None:
        # Arcade's origin is bottom-left; map rows grow downwards
        left = x * TILE_SIZE
        bottom = (self.state.map.height - 1 - y) * TILE_SIZE
        arcade.draw_lrbt_rectangle_filled(left, left + TILE_SIZE - 1, bottom, bottom + TILE_SIZE - 1, color)

    def on_draw(self):
        self._window.clear()
        for x, y, tile in iter_tiles(self.state.map):
            self._draw_cell(x, y, tile.color)
        px, py = self.state.player
        self._draw_cell(px, py, PLAYER_COLOR)

    def on_key_press(self, symbol, modifiers):
        if symbol in (arcade.key.LEFT, arcade.key.A):
            self.state.move(-1, 0)
        elif symbol in (arcade.key.RIGHT, arcade.key.D):
            self.state.move(1, 0)
        elif symbol in (arcade.key.UP, arcade.key.W):
            self.state.move(0, -1)
        elif symbol in (arcade.key.DOWN, arcade.key.S):
            self.state.move(0, 1)


def run(seed: Optional[int] = None, config: Optional[MapConfig] = None) -> int:  # pragma: no cover - manual usage
    """Launch the interactive window."""
    if arcade is None:
        raise RuntimeError("Arcade is not installed. Please install 'arcade' to run the app.")
    state = GameState.new(seed=seed, config=config)
    DungeonWindow(state).run()
    return 0
