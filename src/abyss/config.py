from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapConfig:
    """Dungeon generation constants.

    - width/height: grid size in tiles.
    - max_rooms: number of placement attempts; each attempt places at most one room.
    - min_room_size/max_room_size: half-open range [min, max) for room sides.
    """

    width: int = 160
    height: int = 80
    max_rooms: int = 30
    min_room_size: int = 10
    max_room_size: int = 15

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")
        if self.max_rooms < 1:
            raise ConfigError(f"max_rooms must be at least 1, got {self.max_rooms}")
        # A room needs two floor columns and rows so its center is carved
        if self.min_room_size < 2:
            raise ConfigError(f"min_room_size must be at least 2, got {self.min_room_size}")
        if self.min_room_size >= self.max_room_size:
            raise ConfigError(
                f"min_room_size ({self.min_room_size}) must be below max_room_size ({self.max_room_size})"
            )
        # Rooms need room_size + 2 tiles so x/y sampling never has an empty range
        if self.width <= self.max_room_size + 2 or self.height <= self.max_room_size + 2:
            raise ConfigError(
                f"Map {self.width}x{self.height} too small for rooms up to {self.max_room_size - 1} tiles"
            )

    @property
    def tile_count(self) -> int:
        return self.width * self.height

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MapConfig":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown map config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, int]:
        return dataclasses.asdict(self)


DEFAULT_MAP_CONFIG = MapConfig()


def load_map_config(path: Optional[Union[str, Path]] = None) -> MapConfig:
    """Load map configuration from YAML.

    If path is None, returns the built-in defaults. The file may hold the keys
    at top level or under a ``map:`` section; missing keys keep their defaults.
    """
    if path is None:
        return DEFAULT_MAP_CONFIG

    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as ex:
            raise ConfigError(f"Invalid YAML in {p}: {ex}") from ex
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping in {p}, got {type(raw).__name__}")
    section = raw.get("map", raw)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'map' to be a mapping in {p}")

    merged = {**DEFAULT_MAP_CONFIG.to_dict(), **section}
    cfg = MapConfig.from_dict(merged)
    logger.debug("Loaded map config from path: %s -> %s", p, cfg)
    return cfg
