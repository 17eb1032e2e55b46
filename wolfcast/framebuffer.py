"""RGBA pixel buffer and the flashlight shading applied to it."""

from __future__ import annotations

from dataclasses import dataclass, field

from wolfcast.world import SCREEN_HEIGHT, SCREEN_WIDTH

Color = tuple[int, int, int, int]

_DARK_FACTOR = 0.2
_TOGGLE_DELAY = 0.3


@dataclass
class Flashlight:
    """Torch state: when off the scene is dimmed, when on the centre is lit."""

    enabled: bool = False
    intensity: float = 1.2
    radius: float = 1.0
    angle: float = 0.5
    falloff: float = 1.5
    last_toggle: float = 0.0

    def light_factor(self, x: int, y: int, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> float:
        """Brightness multiplier for screen pixel (x, y), between 0.2 and 1."""
        if not self.enabled:
            return _DARK_FACTOR
        center_x = width / 2.0
        center_y = height / 2.0
        dx = abs(x - center_x) / center_x
        dy = (y - center_y) / center_y
        h_factor = 1.0 - (dx / self.radius) ** 1.2
        v_factor = 1.0 - (abs(dy) / 0.8) ** 0.8
        factor = h_factor * v_factor * self.intensity
        return max(_DARK_FACTOR, min(factor, 1.0))

    def shade(self, x: int, y: int, color: Color, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> Color:
        """Return color scaled by the light at (x, y); alpha is kept."""
        factor = self.light_factor(x, y, width, height)
        red, green, blue, alpha = color
        return int(red * factor), int(green * factor), int(blue * factor), alpha

    def toggle(self, now: float) -> bool:
        """Switch the torch if enough time has passed since the last switch."""
        if now - self.last_toggle <= _TOGGLE_DELAY:
            return False
        self.enabled = not self.enabled
        self.last_toggle = now
        return True


@dataclass
class Framebuffer:
    """A width x height grid of RGBA bytes."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    pixels: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.pixels = bytearray(self.width * self.height * 4)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 4

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Store color at (x, y); positions off the buffer are ignored."""
        if not self._contains(x, y):
            return
        offset = self._offset(x, y)
        self.pixels[offset:offset + 4] = bytes(color)

    def put_lit_pixel(self, x: int, y: int, color: Color, flashlight: Flashlight) -> None:
        """Store color at (x, y) after flashlight shading."""
        if not self._contains(x, y):
            return
        self.put_pixel(x, y, flashlight.shade(x, y, color, self.width, self.height))

    def get_pixel(self, x: int, y: int) -> Color:
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} buffer")
        offset = self._offset(x, y)
        red, green, blue, alpha = self.pixels[offset:offset + 4]
        return red, green, blue, alpha

    def clear(self) -> None:
        """Set every byte to zero."""
        self.pixels[:] = bytes(len(self.pixels))