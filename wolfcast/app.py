"""The game object: world state, the per-frame update and the window loop."""

from __future__ import annotations

import math
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, Union

from wolfcast.controls import (
    BUTTON_FLASHLIGHT,
    BUTTON_PAUSE,
    BUTTON_SHOOT,
    Key,
    apply_joystick,
    apply_keys,
    mouse_rotation,
)
from wolfcast.entities import Monster, check_monster_hit, spawn_monsters, update_monsters
from wolfcast.framebuffer import Flashlight, Framebuffer
from wolfcast.menu import (
    BACKGROUND_FILE,
    MAIN_MENU_BUTTONS,
    SETTINGS_BUTTONS,
    SHEET_FRAMES,
    Button,
    ButtonState,
    GameState,
    MenuFlow,
    fit_background,
)
from wolfcast.render import SceneResult, render_scene
from wolfcast.textures import Texture, load_textures
from wolfcast.weapon import Weapon
from wolfcast.world import (
    MONSTER,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TEXTURE_COUNT,
    GameMap,
    Player,
    load_map,
)

import pygame  # noqa: E402

EXIT_FAILURE = 84
BASE_MOVE_SPEED = 0.050
BASE_ROT_SPEED = 0.07
MAX_SPEED_FACTOR = 1.5
START_MAP = "map.txt"
LEVEL_MAPS: tuple[str, ...] = ("map2.txt", "map3.txt")
LEVEL_START = (2.0, 2.0)
MUSIC_FILE = "music.ogg"
SHOT_FILE = "shot.ogg"
FONT_FILE = "Pixel_Digivolve.otf"
START_VOLUME = 0.25
RESUME_VOLUME = 0.5
STICK_SCALE = 100.0
FPS = 60

_KEY_CODES = {
    Key.Z: pygame.K_z,
    Key.S: pygame.K_s,
    Key.Q: pygame.K_q,
    Key.D: pygame.K_d,
    Key.F: pygame.K_f,
    Key.F4: pygame.K_F4,
    Key.F11: pygame.K_F11,
    Key.ESCAPE: pygame.K_ESCAPE,
    Key.SPACE: pygame.K_SPACE,
}


class Game:
    """All state of a running game and the update of one game frame.

    The input attributes (pressed_keys, mouse_dx, shooting, stick and
    pad_buttons) describe the current frame and are read by step().
    """

    def __init__(
        self,
        game_map: GameMap,
        textures: Optional[Sequence[Optional[Texture]]] = None,
        monster_image: Optional[Texture] = None,
        assets_dir: Union[str, Path, None] = None,
    ) -> None:
        self.assets_dir = Path(assets_dir) if assets_dir is not None else Path("assets")
        self.game_map = game_map
        self.player = Player()
        self.flashlight = Flashlight()
        self.weapon = Weapon()
        self.menu = MenuFlow()
        self.frame = Framebuffer()
        loaded = list(textures or [])[:TEXTURE_COUNT]
        self.textures: list[Optional[Texture]] = loaded + [None] * (TEXTURE_COUNT - len(loaded))
        self.monster_image = monster_image
        self.monsters: list[Monster] = spawn_monsters(game_map, monster_image)
        self.zbuffer: list[float] = [math.inf] * SCREEN_WIDTH
        self.level = 0
        self.last_wall_distance = 1.0
        self.shots_fired = 0
        self.pressed_keys: set[Key] = set()
        self.mouse_dx = 0.0
        self.shooting = False
        self.stick: Optional[tuple[float, float, float]] = None
        self.pad_buttons: frozenset[int] = frozenset()

    @property
    def speed_factor(self) -> float:
        """Speed boost that grows as the last wall seen gets closer, capped at 1.5."""
        return min(MAX_SPEED_FACTOR, 1.0 + 1.0 / (self.last_wall_distance + 0.5))

    @property
    def map_dir(self) -> Path:
        return self.assets_dir / "map"

    def change_level(self, path: Union[str, Path]) -> GameMap:
        """Load the map at path, respawn its monsters and put the player at the start."""
        new_map = load_map(path)
        self.game_map = new_map
        self.monsters = spawn_monsters(new_map, self.monster_image)
        self.player.x, self.player.y = LEVEL_START
        return new_map

    def _check_elevators(self) -> None:
        for index, name in enumerate(LEVEL_MAPS):
            if self.level != index or not self.player.elevator_ahead(self.game_map):
                continue
            self.level += 1
            path = self.map_dir / name
            try:
                self.change_level(path)
            except OSError:
                print(f"Error: cannot load {path}", file=sys.stderr)

    def step(self, now: float) -> Optional[SceneResult]:
        """Run one frame of play: input, level change, render, shooting, monsters.

        Returns the rendered scene, or None when a menu is shown instead.
        """
        if self.menu.state != GameState.GAME:
            return None
        factor = self.speed_factor
        move_speed = BASE_MOVE_SPEED * factor
        rot_speed = BASE_ROT_SPEED * factor
        shoot = self.shooting

        if self.stick is not None:
            axis_x, axis_y, axis_u = self.stick
            apply_joystick(self.player, self.game_map, axis_x, axis_y, axis_u, move_speed, rot_speed)
            if BUTTON_SHOOT in self.pad_buttons:
                shoot = True
            if BUTTON_PAUSE in self.pad_buttons:
                self.menu.pause()
            if BUTTON_FLASHLIGHT in self.pad_buttons:
                self.flashlight.toggle(now)

        apply_keys(self.player, self.game_map, self.pressed_keys, move_speed)
        if self.mouse_dx:
            self.player.rotate(mouse_rotation(self.mouse_dx, rot_speed))
        if Key.F in self.pressed_keys:
            self.flashlight.toggle(now)
        if Key.F4 in self.pressed_keys:
            self.menu.window_open = False
        if Key.ESCAPE in self.pressed_keys:
            self.menu.pause()

        self._check_elevators()
        result = render_scene(
            self.frame, self.player, self.game_map, self.textures, self.flashlight, self.monsters, now
        )
        self.zbuffer = result.zbuffer
        if result.last_distance is not None:
            self.last_wall_distance = result.last_distance

        if shoot and self.weapon.trigger(now):
            self.shots_fired += 1
            check_monster_hit(self.monsters, self.player, self.zbuffer, now)
        self.weapon.update(now)
        update_monsters(self.monsters, self.player, self.game_map)
        return result

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            _Window(self).loop()
        finally:
            pygame.quit()


def _load_surface(path: Path) -> Optional["pygame.Surface"]:
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        return None


def _load_sound(path: Path) -> Optional["pygame.mixer.Sound"]:
    if pygame.mixer.get_init() is None:
        return None
    try:
        sound = pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError):
        return None
    sound.set_volume(1.0)
    return sound


def _start_music(path: Path, volume: float) -> bool:
    if pygame.mixer.get_init() is None:
        return False
    try:
        pygame.mixer.music.load(str(path))
    except (pygame.error, FileNotFoundError):
        return False
    pygame.mixer.music.set_volume(volume)
    pygame.mixer.music.play(-1)
    return True


def _crop(sheet: "pygame.Surface", rect: tuple[int, int, int, int]) -> Optional["pygame.Surface"]:
    area = pygame.Rect(rect)
    if not sheet.get_rect().contains(area):
        return None
    return sheet.subsurface(area)


class _Window:
    """Window, images and sounds used to show a Game."""

    def __init__(self, game: Game) -> None:
        self.game = game
        assets = game.assets_dir
        self.surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Wolf3D")
        textures = assets / "texture"
        self.background = _load_surface(textures / BACKGROUND_FILE)
        self.gun = _load_surface(textures / "weapon.png")
        self.main_buttons = [
            (Button(width, div_x, div_y), _load_surface(textures / name))
            for name, width, div_x, div_y in MAIN_MENU_BUTTONS
        ]
        self.settings_buttons = [
            (Button(width, div_x, div_y), _load_surface(textures / name))
            for name, width, div_x, div_y in SETTINGS_BUTTONS
        ]
        self.font_path = assets / "fonts" / FONT_FILE
        self.music_path = assets / "music" / MUSIC_FILE
        self.shot = _load_sound(assets / "music" / SHOT_FILE)
        pygame.joystick.init()
        self.joystick = pygame.joystick.Joystick(0) if pygame.joystick.get_count() else None

    def loop(self) -> None:
        game = self.game
        menu = game.menu
        if not _start_music(self.music_path, START_VOLUME):
            print("Warning: Cannot initialize sounds", file=sys.stderr)
        music_playing = menu.music_on
        previous_state: Optional[GameState] = None
        pending_click = False
        clock = pygame.time.Clock()

        while menu.window_open:
            now = time.monotonic()
            released = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    menu.window_open = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    pending_click = True
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    released = True
                elif event.type == pygame.JOYDEVICEADDED:
                    self.joystick = pygame.joystick.Joystick(event.device_index)
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    try:
                        pygame.display.toggle_fullscreen()
                    except pygame.error:
                        pass

            if menu.state != previous_state:
                pygame.event.clear()
                self._set_mouse_captured(menu.state == GameState.GAME)
                previous_state = menu.state

            if menu.state == GameState.GAME:
                shots = game.shots_fired
                self._read_inputs()
                game.step(now)
                if game.shots_fired != shots and self.shot is not None:
                    self.shot.play()
                self._present()
            elif menu.state == GameState.MAIN_MENU:
                pressed = self._menu_frame(self.main_buttons, "Wolf3D", released, {0, 1, 2})
                if pressed is not None and pending_click:
                    menu.press_main(pressed)
                    pending_click = False
            elif menu.state == GameState.SETTINGS:
                visible = {0, 1, 2} if menu.shows_main_menu_button else {0, 2}
                pressed = self._menu_frame(self.settings_buttons, "Settings", released, visible)
                if pressed is not None and pending_click:
                    menu.press_settings(pressed)
                    pending_click = False

            if menu.music_on != music_playing:
                if menu.music_on:
                    _start_music(self.music_path, RESUME_VOLUME)
                elif pygame.mixer.get_init() is not None:
                    pygame.mixer.music.stop()
                music_playing = menu.music_on

            pygame.display.flip()
            clock.tick(FPS)

    @staticmethod
    def _set_mouse_captured(captured: bool) -> None:
        pygame.mouse.set_visible(not captured)
        pygame.event.set_grab(captured)
        pygame.mouse.get_rel()

    def _read_inputs(self) -> None:
        game = self.game
        keys = pygame.key.get_pressed()
        game.pressed_keys = {key for key, code in _KEY_CODES.items() if keys[code]}
        delta_x, _ = pygame.mouse.get_rel()
        game.mouse_dx = float(delta_x) if pygame.key.get_focused() else 0.0
        game.shooting = bool(pygame.mouse.get_pressed()[0])
        if Key.SPACE in game.pressed_keys:
            self._set_mouse_captured(False)
            pygame.mouse.set_pos((SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))
        pad = self.joystick
        if pad is not None and pad.get_init():
            axes = pad.get_numaxes()

            def axis(index: int) -> float:
                return pad.get_axis(index) * STICK_SCALE if index < axes else 0.0

            game.stick = (axis(0), axis(1), axis(2))
            game.pad_buttons = frozenset(i for i in range(pad.get_numbuttons()) if pad.get_button(i))
        else:
            game.stick = None
            game.pad_buttons = frozenset()

    def _present(self) -> None:
        game = self.game
        frame = game.frame
        size = self.surface.get_size()
        image = pygame.image.frombuffer(bytes(frame.pixels), (frame.width, frame.height), "RGBA")
        self.surface.blit(pygame.transform.scale(image, size), (0, 0))
        if self.gun is None:
            return
        rect = game.weapon.frame_rect()
        sprite = _crop(self.gun, rect)
        if sprite is None:
            return
        layout = game.weapon.layout(*size)
        scaled_size = (max(1, int(rect[2] * layout.scale)), max(1, int(rect[3] * layout.scale)))
        self.surface.blit(pygame.transform.scale(sprite, scaled_size), (layout.x, layout.y))

    def _menu_frame(self, buttons, title: str, released: bool, visible: set[int]) -> Optional[int]:
        window = self.surface
        width, height = window.get_size()
        window.fill((0, 0, 0))
        if self.background is not None:
            fit = fit_background(width, height, *self.background.get_size())
            scaled = (int(self.background.get_width() * fit.scale), int(self.background.get_height() * fit.scale))
            window.blit(pygame.transform.scale(self.background, scaled), (fit.x, fit.y))
        mouse_x, mouse_y = pygame.mouse.get_pos()
        pressed: Optional[int] = None
        for index, (button, sheet) in enumerate(buttons):
            if index not in visible:
                continue
            button.layout(width, height)
            sheet_width = sheet.get_width() if sheet is not None else button.frame_width * SHEET_FRAMES
            state = button.update(mouse_x, mouse_y, released, sheet_width)
            if state == ButtonState.PRESSED and pressed is None:
                pressed = index
            if sheet is None:
                continue
            sprite = _crop(sheet, (button.frame_left, 0, button.frame_width, button.frame_height))
            if sprite is not None:
                scaled = (max(1, int(button.width)), max(1, int(button.height)))
                window.blit(pygame.transform.scale(sprite, scaled), (button.x, button.y))
        self._draw_title(title, width, height)
        return pressed

    def _draw_title(self, title: str, width: int, height: int) -> None:
        size = max(1, height // 5)
        try:
            font = pygame.font.Font(str(self.font_path), size)
        except (pygame.error, FileNotFoundError, OSError):
            font = pygame.font.Font(None, size)
        text = font.render(title, True, (255, 255, 255))
        self.surface.blit(text, text.get_rect(center=(width / 2.0, height * 0.15)))


def run_game(assets_dir: Union[str, Path] = "assets") -> int:
    """Load the first level and its images, then play; returns the exit status."""
    assets = Path(assets_dir)
    try:
        game_map = load_map(assets / "map" / START_MAP)
    except OSError:
        return EXIT_FAILURE
    textures = load_textures(assets / "texture")
    try:
        monster_image: Optional[Texture] = Texture.from_file(assets / "texture" / "monster.png")
    except OSError:
        monster_image = None
        if any(True for _ in game_map.positions_of(MONSTER)):
            print("Error 'monster.png' not found!", file=sys.stderr)
    Game(game_map, textures, monster_image, assets).run()
    return 0