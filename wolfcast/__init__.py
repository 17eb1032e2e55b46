"""A raycasting first person shooter on pygame, with menus, monsters and a gamepad monitor."""

__version__ = "0.1.0"