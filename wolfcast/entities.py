"""Monsters: placement, projection onto the screen, shooting and chasing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from wolfcast.framebuffer import Flashlight, Framebuffer
from wolfcast.textures import Texture
from wolfcast.world import MONSTER, SCREEN_HEIGHT, SCREEN_WIDTH, GameMap, Player, is_wall

DEATH_FRAMES = 4
DEATH_FRAME_TIME = 0.12
FRAME_SIZE = 64
SIGHT_RANGE = 8.0
STOP_DISTANCE = 0.4
DEFAULT_SPEED = 0.03
_SIGHT_SAMPLES_PER_CELL = 20


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class Monster:
    """A sprite in the world that chases the player and can be shot."""

    x: float
    y: float
    image: Optional[Texture] = None
    is_dead: bool = False
    death_frame: int = 0
    death_started: float = 0.0

    def advance_death(self, now: float) -> bool:
        """Step the death animation when its frame time has passed."""
        if not self.is_dead or self.death_frame >= DEATH_FRAMES:
            return False
        if now - self.death_started <= DEATH_FRAME_TIME:
            return False
        self.death_frame += 1
        self.death_started = now
        return True

    def distance_squared(self, player: Player) -> float:
        dx = self.x - player.x
        dy = self.y - player.y
        return dx * dx + dy * dy


@dataclass(frozen=True)
class Projection:
    """A monster's position in camera space and its size on screen."""

    transform_x: float
    transform_y: float
    screen_x: int
    height: int

    @property
    def width(self) -> int:
        return self.height


def spawn_monsters(game_map: GameMap, image: Optional[Texture], now: float = 0.0) -> list[Monster]:
    """Place a monster at the centre of every 'M' cell."""
    return [
        Monster(x + 0.5, y + 0.5, image, death_started=now)
        for x, y in game_map.positions_of(MONSTER)
    ]


def sort_by_distance(monsters: list[Monster], player: Player) -> None:
    """Order monsters in place from farthest to nearest, keeping ties in order."""
    monsters.sort(key=lambda monster: monster.distance_squared(player), reverse=True)


def project(monster: Monster, player: Player) -> Optional[Projection]:
    """Project a monster onto the screen; None when it is behind the camera."""
    dx = monster.x - player.x
    dy = monster.y - player.y
    det = player.plane_x * player.dir_y - player.dir_x * player.plane_y
    if det == 0:
        return None
    inv_det = 1.0 / det
    transform_x = inv_det * (player.dir_y * dx - player.dir_x * dy)
    transform_y = inv_det * (-player.plane_y * dx + player.plane_x * dy)
    if transform_y <= 0:
        return None
    screen_x = int((SCREEN_WIDTH // 2) * (1 + transform_x / transform_y))
    height = abs(int(SCREEN_HEIGHT / transform_y))
    return Projection(transform_x, transform_y, screen_x, height)


def _draw_monster(
    frame: Framebuffer,
    monster: Monster,
    proj: Projection,
    zbuffer: Sequence[float],
    flashlight: Flashlight,
) -> None:
    image = monster.image
    height, width = proj.height, proj.width
    left = -(width // 2) + proj.screen_x
    start_y = max(0, -(height // 2) + SCREEN_HEIGHT // 2)
    end_y = min(SCREEN_HEIGHT - 1, height // 2 + SCREEN_HEIGHT // 2)
    start_x = max(0, left)
    end_x = min(SCREEN_WIDTH - 1, width // 2 + proj.screen_x)
    frame_offset = (monster.death_frame if monster.is_dead else 0) * FRAME_SIZE

    for stripe in range(start_x, end_x):
        if proj.transform_y >= zbuffer[stripe]:
            continue
        px = _cdiv((stripe - left) * FRAME_SIZE, width) + frame_offset
        if not 0 <= px < image.width:
            continue
        for y in range(start_y, end_y):
            d = y * 2 - SCREEN_HEIGHT + height
            tex_y = _cdiv(_cdiv(d * FRAME_SIZE, height), 2)
            if not 0 <= tex_y < image.height:
                continue
            color = image.get_pixel(px, tex_y)
            if color[3] == 0:
                continue
            frame.put_lit_pixel(stripe, y, color, flashlight)


def draw_entities(
    frame: Framebuffer,
    monsters: list[Monster],
    player: Player,
    zbuffer: Sequence[float],
    flashlight: Flashlight,
    now: float,
) -> None:
    """Draw visible monsters far to near, hidden where a wall is closer."""
    sort_by_distance(monsters, player)
    for monster in monsters:
        if monster.image is None:
            continue
        proj = project(monster, player)
        if proj is None:
            continue
        monster.advance_death(now)
        _draw_monster(frame, monster, proj, zbuffer, flashlight)


def check_monster_hit(
    monsters: Sequence[Monster], player: Player, zbuffer: Sequence[float], now: float
) -> Optional[Monster]:
    """Kill the first living monster under the crosshair that no wall hides."""
    center_x = SCREEN_WIDTH // 2
    wall_distance = zbuffer[center_x]
    for monster in monsters:
        if monster.is_dead:
            continue
        proj = project(monster, player)
        if proj is None:
            continue
        start_x = proj.screen_x - proj.width // 2
        end_x = proj.screen_x + proj.width // 2
        if start_x <= center_x <= end_x and proj.transform_y < wall_distance:
            monster.is_dead = True
            monster.death_frame = 0
            monster.death_started = now
            return monster
    return None


def can_see_player(monster: Monster, player: Player, game_map: GameMap) -> bool:
    """Whether the player is in range with no wall on the straight line between."""
    dx = player.x - monster.x
    dy = player.y - monster.y
    distance = math.hypot(dx, dy)
    if distance > SIGHT_RANGE:
        return False
    steps = int(distance * _SIGHT_SAMPLES_PER_CELL)
    for i in range(1, steps):
        t = i / steps
        mx = int(monster.x + dx * t)
        my = int(monster.y + dy * t)
        if not game_map.in_bounds(mx, my):
            return False
        if is_wall(game_map.cell(mx, my)):
            return False
    return True


def _is_open(game_map: GameMap, x: float, y: float) -> bool:
    mx, my = int(x), int(y)
    return game_map.in_bounds(mx, my) and not is_wall(game_map.cell(mx, my))


def _move_monster(monster: Monster, player: Player, game_map: GameMap, speed: float) -> None:
    if monster.is_dead or not can_see_player(monster, player, game_map):
        return
    dx = player.x - monster.x
    dy = player.y - monster.y
    distance = math.hypot(dx, dy)
    if distance < STOP_DISTANCE:
        return
    new_x = monster.x + dx / distance * speed
    new_y = monster.y + dy / distance * speed
    if _is_open(game_map, new_x, monster.y):
        monster.x = new_x
    if _is_open(game_map, monster.x, new_y):
        monster.y = new_y


def update_monsters(
    monsters: Sequence[Monster], player: Player, game_map: GameMap, speed: float = DEFAULT_SPEED
) -> None:
    """Move every living monster that sees the player a step toward them."""
    for monster in monsters:
        _move_monster(monster, player, game_map, speed)