"""Map grid, player state and the rules for what each cell holds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TEX_WIDTH = 128
TEX_HEIGHT = 128
TEXTURE_COUNT = 9

EMPTY = "0"
ELEVATOR = "9"
MONSTER = "M"

_BLANKS = frozenset({" ", "\n", "\0"})
_LOOK_AHEAD = 0.6


def is_wall(cell: str) -> bool:
    """Return True for the wall symbols '1' to '9'."""
    return "1" <= cell <= "9"


def is_walkable_cell(cell: str) -> bool:
    """Return True for empty floor and for upper-case marker cells."""
    return cell == EMPTY or "A" <= cell <= "Z"


@dataclass(frozen=True)
class GameMap:
    """A rectangular grid of one-character cells; short rows are padded with '0'."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        width = max((len(row) for row in rows), default=0)
        object.__setattr__(self, "rows", tuple(row.ljust(width, EMPTY) for row in rows))

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> str:
        """Return the symbol at grid position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.width}x{self.height} map")
        return self.rows[y][x]

    def is_walkable_at(self, x: float, y: float) -> bool:
        """Whether the cell containing (x, y), truncated toward zero, can be entered."""
        ix, iy = int(x), int(y)
        return self.in_bounds(ix, iy) and is_walkable_cell(self.rows[iy][ix])

    def positions_of(self, symbol: str) -> Iterator[tuple[int, int]]:
        """Yield (x, y) of every cell holding symbol, row by row."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell == symbol:
                    yield x, y


def load_map(path: Union[str, Path]) -> GameMap:
    """Read a map file: one row per line, blanks become empty floor."""
    text = Path(path).read_text(encoding="latin-1")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    rows = tuple("".join(EMPTY if ch in _BLANKS else ch for ch in line) for line in lines)
    return GameMap(rows)


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float = 3.0
    y: float = 2.0
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by angle radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def slide_to(self, new_x: float, new_y: float, game_map: GameMap) -> tuple[bool, bool]:
        """Move toward (new_x, new_y) one axis at a time, stopping at blocked cells.

        Returns whether the x and the y coordinate changed.
        """
        moved_x = game_map.is_walkable_at(new_x, self.y)
        if moved_x:
            self.x = new_x
        moved_y = game_map.is_walkable_at(self.x, new_y)
        if moved_y:
            self.y = new_y
        return moved_x, moved_y

    def elevator_ahead(self, game_map: GameMap) -> bool:
        """Whether the cell just in front of the player is an elevator."""
        next_x = int(self.x + self.dir_x * _LOOK_AHEAD)
        next_y = int(self.y + self.dir_y * _LOOK_AHEAD)
        return game_map.in_bounds(next_x, next_y) and game_map.cell(next_x, next_y) == ELEVATOR