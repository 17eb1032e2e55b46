"""The gun shown at the bottom of the screen and its firing animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

FRAME_WIDTH = 160
FRAME_HEIGHT = 128
FRAME_COUNT = 3
FRAME_TIME = 0.1
_SCREEN_SHARE = 0.45
_X_DIVISOR = 0.75
_Y_DIVISOR = 1.1


class WeaponLayout(NamedTuple):
    """Uniform scale and top-left position of the gun sprite in the window."""

    scale: float
    x: float
    y: float


@dataclass
class Weapon:
    """Firing animation state of the gun sprite sheet."""

    frame: int = 0
    max_frame: int = FRAME_COUNT
    animating: bool = False
    last_frame_time: float = 0.0
    frame_width: int = FRAME_WIDTH
    frame_height: int = FRAME_HEIGHT

    def trigger(self, now: float) -> bool:
        """Start the firing animation unless one is already running."""
        if self.animating:
            return False
        self.animating = True
        self.frame = 0
        self.last_frame_time = now
        return True

    def update(self, now: float) -> bool:
        """Advance to the next frame once its time has passed; True if it changed."""
        if not self.animating or now - self.last_frame_time <= FRAME_TIME:
            return False
        self.frame += 1
        if self.frame >= self.max_frame:
            self.frame = 0
            self.animating = False
        self.last_frame_time = now
        return True

    def frame_rect(self) -> tuple[int, int, int, int]:
        """Left, top, width and height of the current frame in the sheet."""
        return self.frame * self.frame_width, 0, self.frame_width, self.frame_height

    def layout(self, window_width: int, window_height: int) -> WeaponLayout:
        """Scale the gun to a share of the window width and anchor it bottom right."""
        scale = window_width * _SCREEN_SHARE / self.frame_width
        x = window_width - (self.frame_width * scale) / _X_DIVISOR
        y = window_height - (self.frame_height * scale) / _Y_DIVISOR
        return WeaponLayout(scale, x, y)