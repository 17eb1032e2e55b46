"""RGBA images used for walls, floor, sky and sprites."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from wolfcast.world import TEXTURE_COUNT  # noqa: E402

Color = tuple[int, int, int, int]

# Slot i holds the texture for wall symbol str(i + 1); slot 6 is the floor,
# slot 7 the sky.  Slot 0 is deliberately left empty.
TEXTURE_FILES: tuple[Optional[str], ...] = (
    None,
    "wall_1.png",
    "wall_2.png",
    "wall_3.png",
    "wall_4.png",
    "wall_5.png",
    "wall_6.png",
    "sky.png",
    "wall_7.png",
)
FLOOR_SLOT = 6
SKY_SLOT = 7


@dataclass(frozen=True)
class Texture:
    """An immutable width x height grid of RGBA pixels, row by row."""

    width: int
    height: int
    pixels: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"texture size must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(f"expected {expected} pixel bytes, got {len(self.pixels)}")
        object.__setattr__(self, "pixels", bytes(self.pixels))

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the RGBA colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} texture")
        offset = (y * self.width + x) * 4
        red, green, blue, alpha = self.pixels[offset:offset + 4]
        return red, green, blue, alpha

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Texture":
        """Load an image file; raises FileNotFoundError or OSError."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"no image at {path}")
        try:
            surface = pygame.image.load(str(path))
        except pygame.error as exc:
            raise OSError(f"cannot read image {path}: {exc}") from exc
        width, height = surface.get_size()
        return cls(width, height, pygame.image.tostring(surface, "RGBA"))

    @classmethod
    def solid(cls, width: int, height: int, color: Color) -> "Texture":
        """A texture filled with one colour."""
        return cls(width, height, bytes(color) * (width * height))


def load_textures(directory: Union[str, Path]) -> list[Optional[Texture]]:
    """Load the wall, floor and sky textures; a missing or broken file gives None."""
    directory = Path(directory)
    textures: list[Optional[Texture]] = []
    for name in TEXTURE_FILES[:TEXTURE_COUNT]:
        texture = None
        if name is not None:
            try:
                texture = Texture.from_file(directory / name)
            except OSError:
                texture = None
        textures.append(texture)
    return textures