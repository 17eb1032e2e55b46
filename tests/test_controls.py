import dataclasses

import pytest

from wolfcast.controls import (
    Key,
    apply_joystick,
    apply_keys,
    mouse_rotation,
    move,
    stick_intensity,
)
from wolfcast.world import GameMap, Player

OPEN_ROOM = GameMap(("11111", "10001", "10001", "10001", "11111"))


def centred_player():
    return Player(x=2.5, y=2.5, dir_x=-1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)


def test_stick_intensity_dead_zone():
    assert stick_intensity(0) == 0.0
    assert stick_intensity(10) == 0.0
    assert stick_intensity(-10) == 0.0


def test_stick_intensity_saturates_and_is_symmetric():
    assert stick_intensity(100) == 1.0
    assert stick_intensity(150) == 1.0
    assert stick_intensity(-50) == stick_intensity(50)
    assert 0.0 < stick_intensity(50) < 1.0


def test_forward_key_moves_along_view():
    player = centred_player()
    assert apply_keys(player, OPEN_ROOM, {Key.Z}, 0.05) is True
    assert player.x == pytest.approx(2.5 - 0.05)
    assert player.y == pytest.approx(2.5)


def test_forward_and_back_cancel():
    player = centred_player()
    apply_keys(player, OPEN_ROOM, {Key.Z, Key.S}, 0.05)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_strafe_keys_move_sideways():
    right = centred_player()
    apply_keys(right, OPEN_ROOM, {Key.D}, 0.1)
    assert right.x == pytest.approx(2.5)
    assert right.y == pytest.approx(2.5 + 0.1)
    left = centred_player()
    apply_keys(left, OPEN_ROOM, {Key.Q}, 0.1)
    assert left.y == pytest.approx(2.5 - 0.1)


def test_non_movement_keys_do_nothing():
    player = centred_player()
    assert apply_keys(player, OPEN_ROOM, {Key.F, Key.ESCAPE}, 0.05) is False
    assert (player.x, player.y) == (2.5, 2.5)


def test_wall_blocks_movement():
    player = Player(x=1.02, y=2.5)
    moved_x, moved_y = move(player, OPEN_ROOM, 1, 0, 0.05)
    assert moved_x is False
    assert player.x == 1.02


def test_move_backward_is_inverse_of_forward():
    player = centred_player()
    move(player, OPEN_ROOM, 1, 0, 0.2)
    move(player, OPEN_ROOM, -1, 0, 0.2)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_joystick_inside_dead_zone_changes_nothing():
    player = centred_player()
    before = dataclasses.replace(player)
    apply_joystick(player, OPEN_ROOM, 5.0, -9.0, 10.0, 0.05, 0.07)
    assert player == before


def test_joystick_full_forward_matches_key():
    stick = centred_player()
    keys = centred_player()
    apply_joystick(stick, OPEN_ROOM, 0.0, -100.0, 0.0, 0.05, 0.07)
    apply_keys(keys, OPEN_ROOM, {Key.Z}, 0.05)
    assert stick.x == pytest.approx(keys.x)
    assert stick.y == pytest.approx(keys.y)


def test_joystick_strafe_matches_keys():
    stick = centred_player()
    keys = centred_player()
    apply_joystick(stick, OPEN_ROOM, 100.0, 0.0, 0.0, 0.05, 0.07)
    apply_keys(keys, OPEN_ROOM, {Key.D}, 0.05)
    assert stick.y == pytest.approx(keys.y)


def test_joystick_right_stick_turns_opposite_to_axis():
    right = centred_player()
    left = centred_player()
    apply_joystick(right, OPEN_ROOM, 0.0, 0.0, 100.0, 0.05, 0.07)
    apply_joystick(left, OPEN_ROOM, 0.0, 0.0, -100.0, 0.05, 0.07)
    expected = centred_player()
    expected.rotate(-0.07)
    assert right.dir_x == pytest.approx(expected.dir_x)
    assert right.dir_y == pytest.approx(expected.dir_y)
    assert left.dir_y == pytest.approx(-right.dir_y)
    assert right.x == 2.5 and right.y == 2.5


def test_mouse_rotation_sign_and_scale():
    assert mouse_rotation(0, 0.07) == 0
    assert mouse_rotation(10, 0.07) < 0
    assert mouse_rotation(-10, 0.07) == pytest.approx(-mouse_rotation(10, 0.07))
    assert mouse_rotation(20, 0.07) == pytest.approx(2 * mouse_rotation(10, 0.07))