import pytest

from wolfcast.raycast import cast_ray
from wolfcast.world import SCREEN_HEIGHT, SCREEN_WIDTH, GameMap, Player

ROOM = GameMap(("11111", "10001", "10001", "10001", "11111"))


def test_center_ray_hits_west_wall():
    player = Player(x=2.5, y=2.5)
    hit = cast_ray(player, ROOM, SCREEN_WIDTH // 2)
    assert hit is not None
    assert hit.column == SCREEN_WIDTH // 2
    assert hit.side == 0
    assert (hit.map_x, hit.map_y) == (0, 2)
    assert hit.step_x == -1
    assert hit.perp_wall_dist == pytest.approx(1.5)
    assert hit.line_height == int(SCREEN_HEIGHT / hit.perp_wall_dist)
    assert hit.draw_start + hit.draw_end == SCREEN_HEIGHT


def test_center_ray_along_y_hits_south_wall():
    player = Player(x=2.5, y=2.5, dir_x=0.0, dir_y=1.0, plane_x=0.66, plane_y=0.0)
    hit = cast_ray(player, ROOM, SCREEN_WIDTH // 2)
    assert hit is not None
    assert hit.side == 1
    assert hit.map_y == ROOM.height - 1
    assert hit.step_y == 1
    assert hit.perp_wall_dist == pytest.approx(1.5)


def test_every_column_hits_inside_closed_room():
    player = Player(x=2.3, y=1.7)
    player.rotate(0.4)
    for column in range(0, SCREEN_WIDTH, 16):
        hit = cast_ray(player, ROOM, column)
        assert hit is not None
        assert ROOM.cell(hit.map_x, hit.map_y) == "1"
        assert hit.perp_wall_dist > 0
        assert 0 <= hit.draw_start <= hit.draw_end <= SCREEN_HEIGHT - 1


def test_wall_symbol_is_reported_cell():
    game_map = GameMap(("00000", "05000", "00000"))
    player = Player(x=3.5, y=1.5)
    hit = cast_ray(player, game_map, SCREEN_WIDTH // 2)
    assert hit is not None
    assert game_map.cell(hit.map_x, hit.map_y) == "5"
    assert (hit.map_x, hit.map_y) == (1, 1)


def test_ray_leaving_map_returns_none():
    game_map = GameMap(("000", "000", "000"))
    assert cast_ray(Player(x=1.5, y=1.5), game_map, 100) is None


def test_closer_wall_is_drawn_taller():
    near = cast_ray(Player(x=1.5, y=2.5), ROOM, SCREEN_WIDTH // 2)
    far = cast_ray(Player(x=3.5, y=2.5), ROOM, SCREEN_WIDTH // 2)
    assert near is not None and far is not None
    assert near.perp_wall_dist < far.perp_wall_dist
    assert near.line_height > far.line_height


def test_very_close_wall_is_clamped_to_screen():
    hit = cast_ray(Player(x=1.01, y=2.5), ROOM, SCREEN_WIDTH // 2)
    assert hit is not None
    assert hit.draw_start == 0
    assert hit.draw_end == SCREEN_HEIGHT - 1
    assert hit.line_height > SCREEN_HEIGHT