# wolfcast

A small first person shooter in the spirit of Wolfenstein 3D, built on
pygame. A textured raycaster draws walls, a fogged sky and a shaded floor
over a grid map. Monsters chase you once they can see you, a flashlight
lights the middle of the screen, and elevators take you from one level to
the next. A separate terminal tool shows what a connected gamepad reports.

## Installing

```
pip install .
```

## Playing

Run the game from a directory that holds an `assets/` folder:

```
wolfcast
```

Other options (only the first argument is looked at):

```
wolfcast -h          # usage and project information
wolfcast --help
wolfcast -c          # keyboard and controller controls
wolfcast --controls
```

Any other argument prints a short hint and exits with status 84.

The game opens on the main menu (Play, Quit, Settings). The settings screen
has Back, Music on/off and, when opened from inside the game, Main menu.

### Keyboard and mouse (ZQSD layout)

| Input      | Action                             |
|------------|------------------------------------|
| Z          | Move forward                       |
| S          | Move backward                      |
| Q          | Strafe left                        |
| D          | Strafe right                       |
| F          | Toggle flashlight                  |
| Mouse      | Look around                        |
| Left click | Shoot                              |
| Esc        | Pause (opens the settings screen)  |
| Space      | Release the mouse pointer          |
| F11        | Toggle fullscreen                  |
| F4         | Quit                               |

### Controller (DualSense layout)

| Input           | Action              |
|-----------------|---------------------|
| Left stick      | Move and strafe     |
| Right stick     | Look around         |
| R2 (button 7)   | Shoot               |
| Square (button 3) | Toggle flashlight |
| Start (button 9)  | Pause the game    |

## Assets

The game reads these files below `assets/`:

- `map/map.txt` – the first level (required); `map/map2.txt` and
  `map/map3.txt` – the levels reached through elevators
- `texture/wall_1.png` … `wall_7.png`, `sky.png`, `monster.png`,
  `weapon.png`, `background.png` and the menu button sheets
  `button_play.png`, `button_quit.png`, `button_settings.png`,
  `button_back.png`, `button_main_menu.png`, `button_music.png`
- `fonts/Pixel_Digivolve.otf` – menu titles (a default font is used if it
  is missing)
- `music/music.ogg` and `music/shot.ogg` – background music and gun shot

Missing images and sounds are skipped; a missing `map/map.txt` stops the
game from starting.

## Maps

Maps are plain text files, one row per line. Digits `1` to `9` are walls,
`9` being an elevator to the next level. `0` and spaces are floor, and `M`
places a monster at the centre of its cell. Shorter lines are padded with
floor. Wall symbol `2` is drawn with `wall_1.png`, `3` with `wall_2.png`
and so on; symbol `1` blocks movement but has no texture.

## Checking a controller

A terminal tool shows the live state of the first connected controller:
its buttons, sticks, triggers and D-pad.

```
wolfcast-padtest
wolfcast-padtest -h
```

It can also be started with `python -m wolfcast.padtest`. It uses the
standard `curses` module, so it needs a terminal where `curses` is
available. Press Ctrl+C to quit.

## Using the pieces

The game logic works without a window:

```python
from wolfcast.world import GameMap, Player
from wolfcast.raycast import cast_ray

game_map = GameMap(("11111", "10001", "10001", "11111"))
player = Player(x=2.5, y=1.5)
hit = cast_ray(player, game_map, 320)   # RayHit, or None if the ray leaves the map
```

`wolfcast.render.render_scene` draws a full frame into a
`wolfcast.framebuffer.Framebuffer`, and `wolfcast.app.Game.step` runs one
frame of play from the input attributes set on the game.

## What it does not do

There is no end-of-game screen, no player health and no score: monsters
follow you but cannot hurt you, and shooting one only plays its death
animation.

## Running the tests

```
pip install .[test]
pytest
```