"""Command line entry point: start the game or print help and controls."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

EXIT_FAILURE = 84

MAG = "\033[0;35m"
GRN = "\033[0;32m"
BLU = "\033[0;34m"
BRED = "\033[1;31m"
BGRN = "\033[1;32m"
BBLU = "\033[1;34m"
BMAG = "\033[1;35m"
BCYN = "\033[1;36m"
COLOR_RESET = "\033[0m"

_HELP_FLAGS = frozenset({"-h", "--help"})
_CONTROLS_FLAGS = frozenset({"-c", "--controls"})


def help_text() -> str:
    """Usage and a short description of the game, with terminal colours."""
    usage = (
        f"{BMAG}Usage: wolfcast [OPTION]\n"
        f"{BRED}\t-h, --help\t\tDisplay this help message\n"
        f"{BBLU}\t-c, --controls\t\tDisplay the controls of the game\n"
        f"{BGRN}\tNo option\t\tStart the game\n\n{COLOR_RESET}"
    )
    project = (
        f"{MAG}Project: \n"
        f"{BRED}\tGame type : FPS \n"
        f"{BLU}\tInspired Game : Wolfenstein 3D \n{COLOR_RESET}"
    )
    return usage + project


def _keyboard_controls() -> str:
    return (
        f"{BMAG}Keyboard Controls: \n"
        f"{BRED}\tZ : Move forward \n"
        f"{BBLU}\tS : Move backward \n"
        f"{BGRN}\tQ : Strafe left \n"
        f"{BCYN}\tD : Strafe right \n"
        f"{BMAG}\tF : Toggle flashlight \n"
        f"{BGRN}\tMouse : Look around \n"
        f"{BBLU}\tF11 : Toggle fullscreen \n"
        f"{BGRN}\tF4 : Quit the game \n"
        f"{BRED}\tESC : Pause the game \n"
        f"{BGRN}\tLeft Click : Shoot \n{COLOR_RESET}"
    )


def _controller_controls() -> str:
    return (
        f"{BMAG}\nController Controls: (Only for Dualsense Controller)\n"
        f"{BRED}\tLeft Stick: Move forward/backward, Strafe Left/Right\n"
        f"{BBLU}\tRight Stick: Look around \n"
        f"{BGRN}\tR2 (Button 7): Shoot \n"
        f"{BMAG}\t\u25fb (Button 3): Toggle flashlight \n"
        f"{BBLU}\tStart (Button 9): Pause the game \n{COLOR_RESET}"
    )


def _controller_test_hint() -> str:
    return (
        "\nTo test your controller input please use the following command:\n"
        f"{BRED}\tpython -m wolfcast.padtest\n{COLOR_RESET}"
    )


def controls_text() -> str:
    """Keyboard and gamepad controls, then how to check a gamepad."""
    return _keyboard_controls() + _controller_controls() + _controller_test_hint()


def _unknown_argument_text() -> str:
    return (
        f"{BRED}Unknown argument, please use '-h' for complementary information.\n"
        "To see the controls please use '-c' or '--controls'.\n"
        f"To start the game please run 'wolfcast' without arguments.\n{COLOR_RESET}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; only the first argument is looked at."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        from wolfcast.app import run_game

        run_game()
        return 0
    option = args[0]
    if option in _HELP_FLAGS:
        print(help_text(), end="")
        return 0
    if option in _CONTROLS_FLAGS:
        print(controls_text(), end="")
        return 0
    print(_unknown_argument_text(), end="")
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())