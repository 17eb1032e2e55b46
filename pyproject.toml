[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfcast"
version = "0.1.0"
description = "A Wolfenstein-style raycasting first person shooter with menus, monsters and gamepad support"
requires-python = ">=3.10"
keywords = ["raycasting", "fps", "game", "wolfenstein", "pygame", "gamepad"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: X11 Applications",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wolfcast = "wolfcast.cli:main"
wolfcast-padtest = "wolfcast.padtest:main"

[tool.hatch.build.targets.wheel]
packages = ["wolfcast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
