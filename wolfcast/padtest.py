"""A small terminal tool that shows what a connected gamepad reports."""

from __future__ import annotations

import os
import sys
from typing import Optional, Protocol, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

AXIS_SCALE = 100.0
FPS = 60

# Axis indices as reported for a Dualsense pad.
AXIS_LEFT_X = 0
AXIS_LEFT_Y = 1
AXIS_RIGHT_X = 2
AXIS_RIGHT_Y = 3
AXIS_L2 = 4
AXIS_R2 = 5

BUTTON_A = 0
BUTTON_B = 1
BUTTON_Y = 2
BUTTON_X = 3
BUTTON_L1 = 4
BUTTON_R1 = 5
BUTTON_SHARE = 8
BUTTON_PAUSE = 9
BUTTON_PS = 10
BUTTON_L3 = 11
BUTTON_R3 = 12

TITLE = "=== CONTROLLER DEBUG INTERFACE ==="
FOOTER = "Press CTRL+C to quit."


class Pad(Protocol):
    """The parts of a joystick object that are read."""

    def get_numbuttons(self) -> int: ...
    def get_button(self, index: int) -> int: ...
    def get_numaxes(self) -> int: ...
    def get_axis(self, index: int) -> float: ...
    def get_numhats(self) -> int: ...
    def get_hat(self, index: int) -> tuple[int, int]: ...


class _Reading:
    def __init__(self, joystick: Pad) -> None:
        self.joystick = joystick
        self.buttons = joystick.get_numbuttons()
        self.axes = joystick.get_numaxes()

    def button(self, index: int) -> float:
        """1.0 when the button exists and is held down, otherwise 0.0."""
        if index >= self.buttons:
            return 0.0
        pressed = bool(self.joystick.get_button(index))
        return float(pressed)

    def axis(self, index: int) -> float:
        if index >= self.axes:
            return 0.0
        return self.joystick.get_axis(index) * AXIS_SCALE

    def hat(self) -> tuple[float, float]:
        if self.joystick.get_numhats() == 0:
            return 0.0, 0.0
        hat_x, hat_y = self.joystick.get_hat(0)
        return hat_x * AXIS_SCALE, hat_y * AXIS_SCALE


def describe_controller(joystick: Optional[Pad]) -> str:
    """Text listing the buttons, sticks and triggers of a pad, or that none is connected."""
    text = "Controller Status:\n"
    if joystick is None:
        return text + "No controller connected"
    pad = _Reading(joystick)
    pressed = "".join(f"{i} " for i in range(pad.buttons) if joystick.get_button(i))
    pov_x, pov_y = pad.hat()
    lines = [
        f"Connected - {pad.buttons} buttons",
        f"ID of button(s) pressed : {pressed}",
        f"Arrows : PovX={pov_x:.0f}, PovY={pov_y:.0f}",
        "Left joystick : X={:.1f}, Y={:.1f}, L3={:.0f}".format(
            pad.axis(AXIS_LEFT_X), pad.axis(AXIS_LEFT_Y), pad.button(BUTTON_L3)
        ),
        "Central Buttons : Share={:.0f}, PS={:.0f}, Pause={:.0f}".format(
            pad.button(BUTTON_SHARE), pad.button(BUTTON_PS), pad.button(BUTTON_PAUSE)
        ),
        "Right joystick : X={:.1f}, Y={:.1f}, R3={:.0f}".format(
            pad.axis(AXIS_RIGHT_X), pad.axis(AXIS_RIGHT_Y), pad.button(BUTTON_R3)
        ),
        "Buttons : A={:.0f}, B={:.0f}, Y={:.0f}, X={:.0f}".format(
            pad.button(BUTTON_A), pad.button(BUTTON_B), pad.button(BUTTON_Y), pad.button(BUTTON_X)
        ),
        "Triggers Up : L1={:.0f}, R1={:.0f}".format(pad.button(BUTTON_L1), pad.button(BUTTON_R1)),
        "Triggers Down : L2={:.1f}, R2={:.1f}".format(pad.axis(AXIS_L2), pad.axis(AXIS_R2)),
    ]
    return text + "".join(line + "\n" for line in lines)


def help_text() -> str:
    """Help shown for the -h option."""
    return (
        "\033[1;36m=== Controller Test Help ===\033[0m\n\n"
        "\033[37mThis program is made to test the output of your controller.\033[0m\n\n"
        "\033[1;36mUsage:\033[0m\n"
        "\033[37mYou can launch the program using the following command:\033[0m\n"
        "\033[33m\tpython -m wolfcast.padtest\033[0m\n"
    )


def _draw(screen, info: str) -> None:
    import curses

    screen.erase()
    lines, cols = screen.getmaxyx()
    try:
        screen.box()
        screen.addstr(1, 2, TITLE, curses.color_pair(1) | curses.A_BOLD)
        screen.addstr(3, 2, info, curses.color_pair(2))
        screen.addstr(lines - 3, 2, FOOTER, curses.color_pair(3) | curses.A_BOLD)
        screen.hline(lines - 4, 1, curses.ACS_HLINE, cols - 2)
    except curses.error:
        pass
    screen.refresh()


def _watch(screen) -> int:
    import curses

    curses.start_color()
    curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(2, curses.COLOR_CYAN, curses.COLOR_BLACK)
    curses.init_pair(3, curses.COLOR_YELLOW, curses.COLOR_BLACK)

    window = pygame.display.set_mode((1, 1), pygame.RESIZABLE)
    pygame.display.set_caption("controller_test")
    pygame.joystick.init()
    pad = pygame.joystick.Joystick(0) if pygame.joystick.get_count() else None
    clock = pygame.time.Clock()
    while True:
        window.fill((0, 0, 0))
        pygame.display.flip()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.JOYDEVICEADDED and pad is None:
                pad = pygame.joystick.Joystick(event.device_index)
            elif event.type == pygame.JOYDEVICEREMOVED:
                pad = pygame.joystick.Joystick(0) if pygame.joystick.get_count() else None
        _draw(screen, describe_controller(pad))
        clock.tick(FPS)


def _run_monitor() -> int:
    import curses

    pygame.init()
    try:
        return curses.wrapper(_watch)
    except KeyboardInterrupt:
        return 0
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the pad monitor; each '-h' argument prints help, any other starts the monitor."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _run_monitor()
    for arg in args:
        if arg == "-h":
            print(help_text(), end="")
        else:
            _run_monitor()
    return 0


if __name__ == "__main__":
    sys.exit(main())