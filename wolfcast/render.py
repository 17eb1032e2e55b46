"""Drawing the walls, floor, sky and sprites into the framebuffer."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence

from wolfcast.entities import Monster, draw_entities
from wolfcast.framebuffer import Flashlight, Framebuffer
from wolfcast.raycast import RayHit, cast_ray
from wolfcast.textures import FLOOR_SLOT, SKY_SLOT, Texture
from wolfcast.world import SCREEN_HEIGHT, SCREEN_WIDTH, TEX_HEIGHT, TEX_WIDTH, GameMap, Player, is_wall

_SIDE_SHADE = 0.6
_FLOOR_MIN_LIGHT = 0.3
_FLOOR_FADE = 0.03
_SKY_FOG_DISTANCE = 20.0


class SceneResult(NamedTuple):
    """Per-column wall distances of a rendered frame and the last one found."""

    zbuffer: list[float]
    last_distance: Optional[float]


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _sample(texture: Texture, x: int, y: int):
    return texture.get_pixel(x % texture.width, y % texture.height)


def texture_column(hit: RayHit, player: Player) -> int:
    """Horizontal texture coordinate of the wall point the ray struck."""
    if hit.side == 0:
        wall_x = player.y + hit.perp_wall_dist * hit.ray_dir_y
    else:
        wall_x = player.x + hit.perp_wall_dist * hit.ray_dir_x
    wall_x -= math.floor(wall_x)
    tex_x = min(max(int(wall_x * TEX_WIDTH), 0), TEX_WIDTH - 1)
    if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
        tex_x = TEX_WIDTH - tex_x - 1
    return tex_x


def texture_row(hit: RayHit, y: int) -> int:
    """Vertical texture coordinate for screen row y of the wall slice."""
    d = y * 256 - SCREEN_HEIGHT * 128 + hit.line_height * 128
    tex_y = _cdiv(_cdiv(d * TEX_HEIGHT, hit.line_height), 256)
    return min(max(tex_y, 0), TEX_HEIGHT - 1)


def draw_textured_column(
    frame: Framebuffer,
    hit: RayHit,
    player: Player,
    game_map: GameMap,
    textures: Sequence[Optional[Texture]],
    flashlight: Flashlight,
    column: int,
) -> None:
    """Draw the textured wall slice for one screen column."""
    if not game_map.in_bounds(hit.map_x, hit.map_y):
        return
    cell = game_map.cell(hit.map_x, hit.map_y)
    if not is_wall(cell):
        return
    wall_type = ord(cell) - ord("1")
    if not 0 <= wall_type < len(textures):
        return
    texture = textures[wall_type]
    if texture is None:
        return
    tex_x = texture_column(hit, player)
    for y in range(hit.draw_start, hit.draw_end):
        red, green, blue, alpha = _sample(texture, tex_x, texture_row(hit, y))
        if hit.side == 1:
            red, green, blue = int(red * _SIDE_SHADE), int(green * _SIDE_SHADE), int(blue * _SIDE_SHADE)
        frame.put_lit_pixel(column, y, (red, green, blue, alpha), flashlight)


def _wrap(coord: float, size: int) -> int:
    if not math.isfinite(coord):
        return 0
    return int(size * (coord - math.floor(coord))) % size


def draw_floor(frame: Framebuffer, player: Player, texture: Optional[Texture], flashlight: Flashlight) -> None:
    """Draw the textured floor over the lower half of the frame."""
    if texture is None:
        return
    width, height = frame.width, frame.height
    half = height // 2
    pos_z = 0.5 * height
    ray_x0 = player.dir_x - player.plane_x
    ray_y0 = player.dir_y - player.plane_y
    ray_x1 = player.dir_x + player.plane_x
    ray_y1 = player.dir_y + player.plane_y
    for y in range(half, height):
        vertical = y - half
        row_distance = pos_z / vertical if vertical else math.inf
        step_x = row_distance * (ray_x1 - ray_x0) / width
        step_y = row_distance * (ray_y1 - ray_y0) / width
        floor_x = player.x + row_distance * ray_x0
        floor_y = player.y + row_distance * ray_y0
        light = max(_FLOOR_MIN_LIGHT, 1.0 - row_distance * _FLOOR_FADE)
        for x in range(width):
            red, green, blue, alpha = _sample(texture, _wrap(floor_x, TEX_WIDTH), _wrap(floor_y, TEX_HEIGHT))
            color = (int(red * light), int(green * light), int(blue * light), alpha)
            frame.put_lit_pixel(x, y, color, flashlight)
            floor_x += step_x
            floor_y += step_y


def draw_ceiling(frame: Framebuffer, player: Player, sky: Optional[Texture], flashlight: Flashlight) -> None:
    """Draw the fogged sky over the upper half of the frame."""
    if sky is None:
        return
    width, height = frame.width, frame.height
    tex_w, tex_h = sky.width, sky.height
    rotation = math.atan2(player.dir_y, player.dir_x) / (2 * math.pi)
    pos_z = 0.5 * height
    for x in range(width):
        camera_x = 2.0 * x / width - 1.0
        ray_x = player.dir_x + player.plane_x * camera_x
        ray_y = player.dir_y + player.plane_y * camera_x
        for y in range(height // 2):
            row_distance = pos_z / (height / 2.0 - y)
            point_x = row_distance * ray_x + player.x
            point_y = row_distance * ray_y + player.y
            tex_x = math.fmod(point_x + rotation, 1.0) * tex_w
            tex_y = math.fmod(point_y, 1.0) * tex_h
            tex_x = math.fmod(tex_x + tex_w, tex_w)
            tex_y = math.fmod(tex_y + tex_h, tex_h)
            red, green, blue, alpha = _sample(sky, int(tex_x), int(tex_y))
            fog = max(0.0, 1.0 - row_distance / _SKY_FOG_DISTANCE)
            frame.put_lit_pixel(x, y, (int(red * fog), int(green * fog), int(blue * fog), alpha), flashlight)


def render_scene(
    frame: Framebuffer,
    player: Player,
    game_map: GameMap,
    textures: Sequence[Optional[Texture]],
    flashlight: Flashlight,
    monsters: list[Monster],
    now: float,
) -> SceneResult:
    """Render one full frame: sky, floor, walls, then monsters."""
    frame.clear()
    draw_ceiling(frame, player, textures[SKY_SLOT], flashlight)
    draw_floor(frame, player, textures[FLOOR_SLOT], flashlight)
    zbuffer = [math.inf] * SCREEN_WIDTH
    last_distance: Optional[float] = None
    for column in range(SCREEN_WIDTH):
        hit = cast_ray(player, game_map, column)
        if hit is None:
            continue
        draw_textured_column(frame, hit, player, game_map, textures, flashlight, column)
        zbuffer[column] = hit.perp_wall_dist
        last_distance = hit.perp_wall_dist
    draw_entities(frame, monsters, player, zbuffer, flashlight, now)
    return SceneResult(zbuffer, last_distance)