import pytest

from abyss.config import DEFAULT_MAP_CONFIG, MapConfig, load_map_config
from abyss.errors import ConfigError


def test_defaults_match_classic_layout():
    cfg = load_map_config()
    assert cfg is DEFAULT_MAP_CONFIG
    assert (cfg.width, cfg.height) == (160, 80)
    assert cfg.max_rooms == 30
    assert (cfg.min_room_size, cfg.max_room_size) == (10, 15)
    assert cfg.tile_count == 12800


def test_load_top_level_keys(tmp_path):
    p = tmp_path / "map.yaml"
    p.write_text("width: 60\nheight: 40\nmax_rooms: 5\n", encoding="utf-8")
    cfg = load_map_config(p)
    assert (cfg.width, cfg.height, cfg.max_rooms) == (60, 40, 5)
    assert cfg.min_room_size == 10


def test_load_map_section(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("map:\n  min_room_size: 4\n  max_room_size: 8\n", encoding="utf-8")
    cfg = load_map_config(str(p))
    assert (cfg.min_room_size, cfg.max_room_size) == (4, 8)
    assert cfg.width == 160


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_map_config(p) == DEFAULT_MAP_CONFIG


def test_unknown_key_rejected(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("rooms: 3\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="rooms"):
        load_map_config(p)


def test_missing_file_rejected(tmp_path):
    with pytest.raises(ConfigError):
        load_map_config(tmp_path / "nope.yaml")


def test_non_mapping_rejected(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_map_config(p)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_rooms": 0},
        {"min_room_size": 0},
        {"min_room_size": 1, "max_room_size": 5},
        {"min_room_size": 15, "max_room_size": 15},
        {"width": 17},
        {"height": 10},
        {"width": "wide"},
        {"max_rooms": True},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        MapConfig(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        MapConfig(max_rooms=-1)


def test_smallest_allowed_rooms_spawn_on_floor():
    from abyss.dungeon.generator import generate
    from abyss.dungeon.tiles import TileType
    from abyss.rng import RandomSource

    cfg = MapConfig(width=40, height=30, max_rooms=1, min_room_size=2, max_room_size=3)
    for seed in range(10):
        dmap = generate(RandomSource(seed), cfg)
        assert dmap.tile_at(*dmap.spawn_point()) is TileType.FLOOR
