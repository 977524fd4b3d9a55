from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import load_map_config
from .engine.game_state import GameState
from .errors import AbyssError
from .render import render_text

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abyss",
        description="Lands of the Abyss - dungeon generator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible layout")
    parser.add_argument("--config", default=None, help="YAML file overriding map settings")
    parser.add_argument("--gui", action="store_true", help="Open the Arcade window instead of printing the map")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_map_config(args.config)
    except AbyssError as ex:
        logger.error("%s", ex)
        return 2

    if args.gui:
        from .app.arcade_app import run

        return run(seed=args.seed, config=config)

    state = GameState.new(seed=args.seed, config=config)
    print(render_text(state.map, state.player))
    print(f"rooms={len(state.map.rooms)} spawn={tuple(state.player)} floor_tiles={state.map.floor_count()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
