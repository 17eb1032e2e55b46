"""Grid ray casting (DDA) from the player through one screen column."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from wolfcast.world import SCREEN_HEIGHT, SCREEN_WIDTH, GameMap, Player, is_wall

# A wall hit exactly on the player's cell border would give zero distance.
_MIN_DISTANCE = 1e-9


@dataclass(frozen=True)
class RayHit:
    """Where the ray through one column met a wall and how tall it is drawn."""

    column: int
    ray_dir_x: float
    ray_dir_y: float
    map_x: int
    map_y: int
    side: int
    step_x: int
    step_y: int
    perp_wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int


def _axis_setup(position: float, cell: int, direction: float) -> tuple[int, float, float]:
    delta = math.inf if direction == 0 else abs(1.0 / direction)
    if direction < 0:
        return -1, (position - cell) * delta, delta
    return 1, (cell + 1.0 - position) * delta, delta


def cast_ray(player: Player, game_map: GameMap, column: int) -> Optional[RayHit]:
    """Cast the ray for a screen column; None when it leaves the map."""
    camera_x = 2.0 * column / SCREEN_WIDTH - 1.0
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    map_x, map_y = int(player.x), int(player.y)
    step_x, side_dist_x, delta_x = _axis_setup(player.x, map_x, ray_dir_x)
    step_y, side_dist_y, delta_y = _axis_setup(player.y, map_y, ray_dir_y)

    while True:
        if side_dist_x < side_dist_y:
            side_dist_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_dist_y += delta_y
            map_y += step_y
            side = 1
        if not game_map.in_bounds(map_x, map_y):
            return None
        if is_wall(game_map.cell(map_x, map_y)):
            break

    if side == 0:
        perp = (map_x - player.x + (1 - step_x) / 2.0) / ray_dir_x
    else:
        perp = (map_y - player.y + (1 - step_y) / 2.0) / ray_dir_y
    line_height = int(SCREEN_HEIGHT / max(perp, _MIN_DISTANCE))
    draw_start = max(0, -(line_height // 2) + SCREEN_HEIGHT // 2)
    draw_end = min(SCREEN_HEIGHT - 1, line_height // 2 + SCREEN_HEIGHT // 2)
    return RayHit(
        column=column,
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
        map_x=map_x,
        map_y=map_y,
        side=side,
        step_x=step_x,
        step_y=step_y,
        perp_wall_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
    )