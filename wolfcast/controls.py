"""Player movement and turning from keyboard, mouse and gamepad input."""

from __future__ import annotations

import enum
from typing import Collection

from wolfcast.world import GameMap, Player

STICK_DEAD_ZONE = 10.0
STICK_FULL_SCALE = 100.0
MOUSE_SENSITIVITY = 0.01

BUTTON_FLASHLIGHT = 3
BUTTON_SHOOT = 7
BUTTON_PAUSE = 9


class Key(enum.Enum):
    """Keys the game reacts to (ZQSD layout)."""

    Z = "z"
    S = "s"
    Q = "q"
    D = "d"
    F = "f"
    F4 = "f4"
    F11 = "f11"
    ESCAPE = "escape"
    SPACE = "space"


# Applied one after another, each from the position the previous one left.
_MOVEMENT_KEYS: tuple[tuple[Key, int, int], ...] = (
    (Key.Z, 1, 0),
    (Key.S, -1, 0),
    (Key.D, 0, 1),
    (Key.Q, 0, -1),
)


def stick_intensity(axis: float) -> float:
    """Strength of a stick axis in [0, 1]; zero inside the dead zone."""
    magnitude = abs(axis)
    if magnitude <= STICK_DEAD_ZONE:
        return 0.0
    return min(1.0, magnitude / STICK_FULL_SCALE)


def move(player: Player, game_map: GameMap, forward: int, strafe: int, speed: float) -> tuple[bool, bool]:
    """Step the player along its view (forward) and sideways (strafe, +1 right).

    Each axis is checked against the map separately so the player slides
    along walls. Returns whether the x and the y coordinate changed.
    """
    new_x = player.x + (player.dir_x * forward + player.dir_y * strafe) * speed
    new_y = player.y + (player.dir_y * forward - player.dir_x * strafe) * speed
    return player.slide_to(new_x, new_y, game_map)


def apply_keys(player: Player, game_map: GameMap, pressed: Collection[Key], move_speed: float) -> bool:
    """Move the player for the held movement keys; True if it moved at all."""
    moved = False
    for key, forward, strafe in _MOVEMENT_KEYS:
        if key in pressed:
            moved_x, moved_y = move(player, game_map, forward, strafe, move_speed)
            moved = moved or moved_x or moved_y
    return moved


def apply_joystick(
    player: Player,
    game_map: GameMap,
    axis_x: float,
    axis_y: float,
    axis_u: float,
    move_speed: float,
    rot_speed: float,
) -> None:
    """Move with the left stick (x strafes, y walks) and turn with the right stick (u)."""
    walk = stick_intensity(axis_y)
    if axis_y < -STICK_DEAD_ZONE:
        move(player, game_map, 1, 0, move_speed * walk)
    if axis_y > STICK_DEAD_ZONE:
        move(player, game_map, -1, 0, move_speed * walk)
    side = stick_intensity(axis_x)
    if axis_x < -STICK_DEAD_ZONE:
        move(player, game_map, 0, -1, move_speed * side)
    if axis_x > STICK_DEAD_ZONE:
        move(player, game_map, 0, 1, move_speed * side)
    turn = stick_intensity(axis_u)
    if turn:
        amount = rot_speed * turn
        player.rotate(-amount if axis_u > 0 else amount)


def mouse_rotation(delta_x: float, rot_speed: float) -> float:
    """Turn angle in radians for a horizontal mouse movement of delta_x pixels."""
    return -delta_x * rot_speed * MOUSE_SENSITIVITY