"""Menu buttons, their layout in the window and the moves between screens."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

BUTTON_FRAME_HEIGHT = 32
BUTTON_SHARE_OF_HEIGHT = 0.2
SHEET_FRAMES = 3

# (image file, frame width, horizontal divisor, vertical divisor)
MAIN_MENU_BUTTONS: tuple[tuple[str, int, float, float], ...] = (
    ("button_play.png", 64, 2.0, 2.0),
    ("button_quit.png", 64, 2.0, 1.3),
    ("button_settings.png", 32, 1.3, 1.3),
)
SETTINGS_BUTTONS: tuple[tuple[str, int, float, float], ...] = (
    ("button_back.png", 64, 2.0, 1.5),
    ("button_main_menu.png", 96, 2.0, 2.4),
    ("button_music.png", 64, 2.0, 1.1),
)
BACKGROUND_FILE = "background.png"


class GameState(enum.IntEnum):
    """Which screen the game shows."""

    MAIN_MENU = 0
    GAME = 1
    END = 2
    SETTINGS = 3


class ButtonState(enum.IntEnum):
    """Visual state of a button, also its frame in the sprite sheet."""

    IDLE = 0
    HOVER = 1
    PRESSED = 2


class BackgroundFit(NamedTuple):
    """Uniform scale and top-left offset that letterbox a background."""

    scale: float
    x: float
    y: float


def fit_background(
    window_width: int, window_height: int, texture_width: int, texture_height: int
) -> BackgroundFit:
    """Scale a background to fit inside the window, keeping its aspect, centred."""
    if texture_width <= 0 or texture_height <= 0:
        raise ValueError(f"texture size must be positive, got {texture_width}x{texture_height}")
    scale = min(window_width / texture_width, window_height / texture_height)
    x = (window_width - texture_width * scale) / 2.0
    y = (window_height - texture_height * scale) / 2.0
    return BackgroundFit(scale, x, y)


@dataclass
class Button:
    """A three-frame button placed relative to the window size."""

    frame_width: int
    divisor_x: float = 2.0
    divisor_y: float = 2.0
    frame_height: int = BUTTON_FRAME_HEIGHT
    state: ButtonState = ButtonState.IDLE
    frame_left: int = 0
    scale: float = 1.0
    x: float = 0.0
    y: float = 0.0

    @property
    def width(self) -> float:
        return self.frame_width * self.scale

    @property
    def height(self) -> float:
        return self.frame_height * self.scale

    def layout(self, window_width: int, window_height: int) -> tuple[float, float]:
        """Scale the button to a share of the window height and place it.

        Returns the new top-left position.
        """
        self.scale = window_height * BUTTON_SHARE_OF_HEIGHT / self.frame_height
        self.x = (window_width - self.width) / self.divisor_x
        self.y = (window_height - self.height) / self.divisor_y
        return self.x, self.y

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies on the button (right and bottom edges excluded)."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def update(self, mouse_x: float, mouse_y: float, released: bool, sheet_width: int) -> ButtonState:
        """Set hover or pressed state from the mouse and pick the matching frame."""
        frame_step = sheet_width // SHEET_FRAMES
        if self.contains(mouse_x, mouse_y):
            self.state = ButtonState.PRESSED if released else ButtonState.HOVER
        else:
            self.state = ButtonState.IDLE
        self.frame_left = frame_step * int(self.state)
        return self.state


@dataclass
class MenuFlow:
    """Current screen, the screen before it, and the window and music flags."""

    state: GameState = GameState.MAIN_MENU
    previous: GameState = GameState.MAIN_MENU
    window_open: bool = True
    music_on: bool = True

    @property
    def shows_main_menu_button(self) -> bool:
        """The settings screen offers 'main menu' only when not opened from it."""
        return self.previous != GameState.MAIN_MENU

    def press_main(self, index: int) -> GameState:
        """Act on main-menu button index: 0 play, 1 quit, 2 settings."""
        if index == 0:
            self.previous = GameState.MAIN_MENU
            self.state = GameState.GAME
        elif index == 1:
            self.window_open = False
        elif index == 2:
            self.previous = GameState.MAIN_MENU
            self.state = GameState.SETTINGS
        else:
            raise IndexError(f"main menu has no button {index}")
        return self.state

    def press_settings(self, index: int) -> GameState:
        """Act on settings button index: 0 back, 1 main menu, 2 music on/off."""
        if index == 0:
            self.state, self.previous = self.previous, GameState.SETTINGS
        elif index == 1:
            if self.shows_main_menu_button:
                self.state = GameState.MAIN_MENU
                self.previous = GameState.SETTINGS
        elif index == 2:
            self.music_on = not self.music_on
        else:
            raise IndexError(f"settings menu has no button {index}")
        return self.state

    def pause(self) -> GameState:
        """Leave the game for the settings screen."""
        self.previous = GameState.GAME
        self.state = GameState.SETTINGS
        return self.state