"""Draws the current screen each frame and runs the main loop."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import pygame

from . import logger
from .definitions import (
    DEFAULT_PLAYER_HEIGHT,
    DEFAULT_PLAYER_WIDTH,
    FPS,
    ObjectType,
    Rect,
    RenderState,
    TextureName,
)
from .game import InputState
from .gui import (
    BLACK,
    GREEN,
    WHITE,
    DebugPanel,
    _fill,
    _pg_rect,
    draw_enemy_health_bar,
    draw_player_health_bar,
    draw_time,
    draw_xp_bar,
    draw_zombies_killed,
)
from .logger import LogLevel
from .tools import rectangle_center, world_to_screen, world_to_screen_f

# Wobble applied to experience orbs.
_WAVE_FREQ_X = 25.0
_WAVE_FREQ_Y = 25.0
_WAVE_AMP_X = 5.0
_WAVE_AMP_Y = 5.0
_WAVE_SPEED_X = 8.0
_WAVE_SPEED_Y = 8.0

_MOVE_KEYS = (pygame.K_w, pygame.K_a, pygame.K_s, pygame.K_d)


@dataclass
class FrameInput:
    """Mouse and keyboard input for one frame."""

    mouse_pos: tuple[float, float] = (0, 0)
    mouse_down: bool = False
    mouse_released: bool = False
    controls: InputState = field(default_factory=InputState)
    quit: bool = False


class Renderer:
    """Chooses what to draw from the render state and draws it."""

    def __init__(
        self,
        textures: Any,
        game: Any,
        level_up_screen: Any,
        main_menu: Any,
        options_menu: Any,
        surface: pygame.Surface | None = None,
        *,
        debug_panel: DebugPanel | None = None,
    ) -> None:
        self.textures = textures
        self.game = game
        self.level_up_screen = level_up_screen
        self.main_menu = main_menu
        self.options_menu = options_menu
        self.surface = surface
        self.debug_panel = debug_panel if debug_panel is not None else DebugPanel()
        self.state = RenderState.MAIN_MENU
        self.running = False

        self.frames_counter = 0
        self.player_frames_speed = 60
        self.current_player_frame = 0

    def _target(self) -> pygame.Surface:
        surface = self.surface if self.surface is not None else pygame.display.get_surface()
        if surface is None:
            raise RuntimeError("no surface to draw on")
        return surface

    # Main loop

    def run(self) -> None:
        """Draw frames until the window is closed or `running` is cleared."""
        clock = pygame.time.Clock()
        self.running = True
        while self.running:
            frame = self._poll_input()
            if frame.quit:
                self.running = False
                break
            self.render_frame(frame)
            pygame.display.flip()
            clock.tick(FPS)

    @staticmethod
    def _poll_input() -> FrameInput:
        quit_requested = released = key_released = toggle_debug = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                released = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_DELETE:
                toggle_debug = True
            elif event.type == pygame.KEYUP and event.key in _MOVE_KEYS:
                key_released = True
        keys = pygame.key.get_pressed()
        controls = InputState(
            up=bool(keys[pygame.K_w]),
            down=bool(keys[pygame.K_s]),
            left=bool(keys[pygame.K_a]),
            right=bool(keys[pygame.K_d]),
            released=key_released,
            toggle_debug=toggle_debug,
        )
        return FrameInput(
            mouse_pos=pygame.mouse.get_pos(),
            mouse_down=bool(pygame.mouse.get_pressed()[0]),
            mouse_released=released,
            controls=controls,
            quit=quit_requested,
        )

    def render_frame(self, frame_input: FrameInput | None = None) -> None:
        """Draw one frame of the current screen."""
        frame = frame_input if frame_input is not None else FrameInput()
        surface = self._target()
        surface.fill(BLACK)
        if self.state is RenderState.MAIN_MENU:
            self.main_menu.update(surface, frame.mouse_pos, frame.mouse_down, frame.mouse_released)
        elif self.state in (RenderState.GAME, RenderState.LEVEL_UP):
            self._render_game(surface, frame)
        elif self.state is RenderState.OPTIONS:
            self._render_options(surface, frame)

    def return_to_main_menu(self) -> None:
        self.state = RenderState.MAIN_MENU

    # Screens

    def _render_game(self, surface: pygame.Surface, frame: FrameInput) -> None:
        self.game.update(frame.controls)

        objects = self.game.objects_in_viewport()
        enemies = self.game.enemies_in_viewport()
        projectiles = self.game.projectiles_in_viewport()
        other_players = self.game.other_players_in_viewport()

        self._draw_background(surface)
        self._draw_gui(surface)
        self._draw_player(surface)
        self._draw_other_players(surface, other_players)
        self._draw_objects(surface, objects)
        self._draw_enemies(surface, enemies)
        self._draw_projectiles(surface, projectiles)

        if self.state is RenderState.LEVEL_UP:
            self.level_up_screen.update(
                surface, frame.mouse_pos, frame.mouse_down, frame.mouse_released
            )

        if self.game.debug_mode:
            self._draw_debug(surface, frame)

    def _render_options(self, surface: pygame.Surface, frame: FrameInput) -> None:
        self._blit_scaled_background(surface, TextureName.ALT_MENU_BACKGROUND_TEXTURE)
        self.options_menu.update(surface, frame.mouse_pos, frame.mouse_released)

    def _blit_scaled_background(self, surface: pygame.Surface, name: TextureName) -> None:
        background = self.textures.texture(name)
        screen_w, screen_h = surface.get_size()
        bg_w, bg_h = background.get_size()
        scale = (screen_w / bg_w + screen_h / bg_h) / 2.0
        size = (max(1, math.trunc(bg_w * scale)), max(1, math.trunc(bg_h * scale)))
        surface.blit(pygame.transform.scale(background, size), (0, 0))

    # Game drawing

    def _screen_pos(self, surface: pygame.Surface, target) -> tuple[int, int]:
        width, height = surface.get_size()
        pos = world_to_screen(target, self.game.player_position, width, height)
        return math.trunc(pos.x), math.trunc(pos.y)

    def _draw_background(self, surface: pygame.Surface) -> None:
        background = self.textures.texture(TextureName.BACKGROUND_TEXTURE)
        player_pos = self.game.player_position
        screen_w, screen_h = surface.get_size()
        x = math.fmod(-player_pos.x + screen_w / 2.0, background.get_width())
        y = math.fmod(-player_pos.y + screen_h / 2.0, background.get_height())

        if player_pos.x + screen_w // 2 > self.game.world.size.x:
            surface.blit(background, (math.trunc(player_pos.x + screen_w / 2.0), math.trunc(y)))
        surface.blit(background, (math.trunc(x), math.trunc(y)))

    def _draw_gui(self, surface: pygame.Surface) -> None:
        draw_xp_bar(surface, self.game.player)
        draw_zombies_killed(surface, self.game.zombies_killed)
        draw_time(surface, self.game.elapsed_time)

    def _draw_player(self, surface: pygame.Surface) -> None:
        if self.game.player_is_moving:
            texture = self.textures.texture(TextureName.PLAYER_MOVE_ANIMATION)
            frames, last_frame = 2, 2
        else:
            texture = self.textures.texture(TextureName.PLAYER_IDLE_ANIMATION)
            frames, last_frame = 5, 5

        frame_width = texture.get_width() / frames
        frame_rec = Rect(0.0, 0.0, frame_width, float(texture.get_height()))
        self.frames_counter += 1
        if self.frames_counter >= 60 // self.player_frames_speed:
            self.frames_counter = 0
            self.current_player_frame += 1
            if self.current_player_frame > last_frame:
                self.current_player_frame = 0
            frame_rec.x = self.current_player_frame * frame_width

        center_x = surface.get_width() // 2
        center_y = surface.get_height() // 2
        surface.blit(texture, (center_x, center_y), area=_pg_rect(frame_rec))

        player = self.game.player
        draw_player_health_bar(surface, player)

        if self.game.debug_mode:
            x, y = self._screen_pos(surface, player.hitbox.source)
            width = math.trunc(player.hitbox.area.width)
            if width > 0:
                pygame.draw.rect(surface, GREEN, pygame.Rect(x, y, width, width), 1)
            center = rectangle_center(center_x, center_y, DEFAULT_PLAYER_WIDTH, DEFAULT_PLAYER_HEIGHT)
            radius = math.trunc(player.pickup_radius)
            if radius > 0:
                pygame.draw.circle(surface, GREEN, (center.x, center.y), radius, 1)

    def _draw_other_players(self, surface: pygame.Surface, players) -> None:
        texture = self.textures.texture(TextureName.PLAYER_MOVE_ANIMATION)
        player_pos = self.game.player_position
        width, height = surface.get_size()
        for other in players:
            pos = world_to_screen(type(player_pos)(other.x, other.y), player_pos, width, height)
            surface.blit(texture, (math.trunc(pos.x), math.trunc(pos.y)))

    def _draw_objects(self, surface: pygame.Surface, objects) -> None:
        for obj in objects:
            x, y = self._screen_pos(surface, obj.position)
            if obj.type is ObjectType.NONE:
                _fill(surface, x, y, 10, 10, WHITE)
            elif obj.type is ObjectType.XP_ORB:
                seconds = float(self.frames_counter)
                dx = _WAVE_AMP_X * math.sin(seconds * _WAVE_SPEED_X / _WAVE_FREQ_X)
                dy = _WAVE_AMP_Y * math.cos(seconds * _WAVE_SPEED_Y / _WAVE_FREQ_Y)
                surface.blit(
                    self.textures.texture(TextureName.XP_ORB_TEXTURE),
                    (math.trunc(x + dx), math.trunc(y + dy)),
                )
            elif obj.type is ObjectType.CHEST:
                surface.blit(self.textures.texture(TextureName.CHEST_TEXTURE), (x, y))
            else:
                logger.log(LogLevel.ERROR, "Object type not implement")

    def _draw_enemies(self, surface: pygame.Surface, enemies) -> None:
        texture = self.textures.texture(TextureName.ZOMBIE_TEXTURE)
        player_pos = self.game.player_position
        for zombie in enemies:
            surface.blit(texture, self._screen_pos(surface, zombie.position))
            draw_enemy_health_bar(surface, zombie, player_pos)
            if self.game.debug_mode:
                x, y = self._screen_pos(surface, zombie.hitbox.source)
                width = math.trunc(zombie.hitbox.area.width)
                if width > 0:
                    pygame.draw.rect(surface, GREEN, pygame.Rect(x, y, width, width), 1)

    def _draw_projectiles(self, surface: pygame.Surface, projectiles) -> None:
        texture = self.textures.texture(TextureName.BOLT_TEXTURE)
        player_pos = self.game.player_position
        width, height = surface.get_size()
        for projectile in projectiles:
            pos = projectile.position
            screen = world_to_screen_f(pos, player_pos, width, height)
            dest = projectile.destination
            rotation = math.degrees(math.atan2(dest.y - pos.y, dest.x - pos.x)) + 90.0
            # Screen y points down, so a clockwise angle is negative for pygame.
            rotated = pygame.transform.rotate(texture, -rotation)
            surface.blit(rotated, (math.trunc(screen.x), math.trunc(screen.y)))

    def _draw_debug(self, surface: pygame.Surface, frame: FrameInput) -> None:
        center_x = surface.get_width() // 2
        center_y = surface.get_height() // 2
        destination = self.game.player_fire_destination
        if destination.x != 0 and destination.y != 0:
            end = self._screen_pos(surface, destination)
            start = rectangle_center(center_x, center_y, DEFAULT_PLAYER_WIDTH, DEFAULT_PLAYER_HEIGHT)
            pygame.draw.line(surface, GREEN, (start.x, start.y), end)
        self.debug_panel.draw(surface, self.game, frame.mouse_pos, frame.mouse_released)