"""The playable game: window, assets, title menu and the frame loop."""

from __future__ import annotations

import argparse
import enum
import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

import pygame

from leapup.collision import AlphaMask, Rect
from leapup.world import GameConfig, Outcome, World

MENU_ASSETS = Path("assets")
GAME_ASSETS = Path(".")
MENU_SIZE = (1000, 1400)
MENU_TITLE = "LEAP UP!"
GAME_TITLE = "Leap UP"
MENU_BACKGROUND = (255, 165, 0)
BUTTON_SCALE = 0.85
VOLUME_SCALE = 0.2
FADE_DURATION = 2.0
FRAME_RATE = 60
AURA_COLOR = (0, 0, 255, 100)
PLATFORM_TEXTURE_OFFSET = (10, 10)


class AssetError(Exception):
    """An image or sound the game needs could not be loaded."""


class MenuButton(enum.Enum):
    """The clickable items of the title menu."""

    START = "start"
    CREDITS = "credits"
    QUIT = "quit"
    VOLUME = "volume"


@dataclass
class VolumeToggle:
    """Switches the background music on and off."""

    on_play: Callable[[], None]
    on_pause: Callable[[], None]
    music_on: bool = True

    @property
    def icon(self) -> str:
        """Name of the icon that shows the current state."""
        return "volume" if self.music_on else "mute"

    def toggle(self) -> bool:
        """Flip the music state, play or pause accordingly, and return the new state."""
        self.music_on = not self.music_on
        if self.music_on:
            self.on_play()
        else:
            self.on_pause()
        return self.music_on


@dataclass(frozen=True)
class MenuLayout:
    """Where the menu buttons sit, in the order clicks are tested."""

    buttons: Tuple[Tuple[MenuButton, Rect], ...]

    @classmethod
    def from_sizes(
        cls,
        start: Tuple[float, float],
        credits: Tuple[float, float],
        quit: Tuple[float, float],
        volume: Tuple[float, float],
    ) -> "MenuLayout":
        """Place buttons of the given texture sizes at their menu positions."""

        def scaled(position: Tuple[float, float], size: Tuple[float, float], scale: float) -> Rect:
            return Rect(position[0], position[1], size[0] * scale, size[1] * scale)

        return cls(
            buttons=(
                (MenuButton.QUIT, scaled((230.0, 800.0), quit, BUTTON_SCALE)),
                (MenuButton.START, scaled((230.0, 400.0), start, BUTTON_SCALE)),
                (MenuButton.VOLUME, scaled((0.0, 0.0), volume, VOLUME_SCALE)),
                (MenuButton.CREDITS, scaled((230.0, 600.0), credits, BUTTON_SCALE)),
            )
        )

    def rect(self, button: MenuButton) -> Rect:
        return next(rect for name, rect in self.buttons if name is button)

    def hit(self, x: float, y: float) -> Optional[MenuButton]:
        """The button under a point, or None."""
        return next((name for name, rect in self.buttons if rect.contains(x, y)), None)


def fade_alpha(elapsed: float, duration: float) -> int:
    """Opacity of the black fade-in overlay after ``elapsed`` seconds."""
    if duration <= 0:
        raise ValueError("fade duration must be positive")
    alpha = 255 - (elapsed / duration) * 255
    return int(min(255.0, max(0.0, alpha)))


def load_mask(surface: pygame.Surface) -> AlphaMask:
    """The alpha channel of a surface as a collision mask."""
    width, height = surface.get_size()
    return AlphaMask.from_rows(
        [surface.get_at((x, y)).a for x in range(width)] for y in range(height)
    )


def _load_image(path: Path, area: Optional[Tuple[int, int, int, int]] = None) -> pygame.Surface:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as exc:
        raise AssetError(f"error loading texture: {path}") from exc
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    if area is not None:
        clipped = pygame.Rect(area).clip(image.get_rect())
        if clipped.width == 0 or clipped.height == 0:
            raise AssetError(f"error loading texture: {path}")
        image = image.subsurface(clipped).copy()
    return image


def _scale(image: pygame.Surface, factor: float) -> pygame.Surface:
    width, height = image.get_size()
    return pygame.transform.smoothscale(image, (max(1, round(width * factor)), max(1, round(height * factor))))


def _quit_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def run_game(screen: pygame.Surface) -> Optional[Outcome]:
    """Play one game on ``screen``; return how it ended, or None if the window was closed."""
    base = GameConfig()
    platform_image = _load_image(
        GAME_ASSETS / "plat.png",
        (*PLATFORM_TEXTURE_OFFSET, base.platform_width, base.platform_height),
    )
    player_image = _load_image(GAME_ASSETS / "player.png", (0, 0, base.player_width, base.player_height))
    background = _load_image(GAME_ASSETS / "bg.png", (0, 0, base.window_width, base.window_height))
    fireball_image = _load_image(GAME_ASSETS / "fireball.png", (0, 0, base.fireball_width, base.fireball_height))
    shield_image = _load_image(GAME_ASSETS / "shield.png")

    config = GameConfig(
        shield_texture_width=float(shield_image.get_width()),
        shield_texture_height=float(shield_image.get_height()),
    )
    world = World.new(
        config,
        random.Random(),
        load_mask(player_image),
        load_mask(platform_image),
        load_mask(fireball_image),
    )
    shield_sprite = _scale(shield_image, world.shield.scale)
    radius = int(config.aura_radius)
    aura = pygame.Surface((2 * radius, 2 * radius), pygame.SRCALPHA)
    pygame.draw.circle(aura, AURA_COLOR, (radius, radius), radius)

    clock = pygame.time.Clock()
    started = time.monotonic()
    while True:
        if _quit_requested():
            return None
        keys = pygame.key.get_pressed()
        outcome = world.step(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], time.monotonic() - started)
        if outcome is Outcome.FELL:
            print("Game Over!")
            return outcome
        if outcome is Outcome.HIT:
            print("Hit by fireball!")
            return outcome

        screen.fill((0, 0, 0))
        screen.blit(background, (0, 0))
        for platform in world.platforms:
            screen.blit(platform_image, (platform.x, platform.y))
        if world.shield.active:
            screen.blit(shield_sprite, (world.shield.x, world.shield.y))
        if world.fireball.active:
            screen.blit(fireball_image, (world.fireball.x, world.fireball.y))
        player = world.sprite_bounds()
        screen.blit(player_image, (player.left, player.top))
        if world.shielded:
            screen.blit(aura, (world.sprite_x - radius, world.sprite_y - radius))
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def _fade_in(screen: pygame.Surface, draw: Callable[[], None]) -> None:
    overlay = pygame.Surface(screen.get_size())
    overlay.fill((0, 0, 0))
    started = time.monotonic()
    alpha = 255
    while alpha > 0:
        pygame.event.pump()
        alpha = fade_alpha(time.monotonic() - started, FADE_DURATION)
        overlay.set_alpha(alpha)
        screen.fill((0, 0, 0))
        draw()
        screen.blit(overlay, (0, 0))
        pygame.display.flip()


def run_menu(screen: pygame.Surface) -> None:
    """Show the title menu until the player quits or a game ends."""
    background = _load_image(MENU_ASSETS / "bg.png")
    start = _load_image(MENU_ASSETS / "start.png")
    credits = _load_image(MENU_ASSETS / "credits.png")
    quit_image = _load_image(MENU_ASSETS / "quit.png")
    volume = _load_image(MENU_ASSETS / "volume.png")
    mute = _load_image(MENU_ASSETS / "mute.png")

    try:
        pygame.mixer.music.load(str(MENU_ASSETS / "music1.mp3"))
        pygame.mixer.music.play(loops=-1)
    except (pygame.error, FileNotFoundError) as exc:
        raise AssetError("Failed to load music") from exc

    layout = MenuLayout.from_sizes(start.get_size(), credits.get_size(), quit_image.get_size(), volume.get_size())
    volume_rect = layout.rect(MenuButton.VOLUME)
    icon_size = (max(1, round(volume_rect.width)), max(1, round(volume_rect.height)))
    icons = {
        "volume": pygame.transform.smoothscale(volume, icon_size),
        "mute": pygame.transform.smoothscale(mute, icon_size),
    }
    sprites = {
        MenuButton.START: _scale(start, BUTTON_SCALE),
        MenuButton.CREDITS: _scale(credits, BUTTON_SCALE),
        MenuButton.QUIT: _scale(quit_image, BUTTON_SCALE),
    }
    music = VolumeToggle(on_play=pygame.mixer.music.unpause, on_pause=pygame.mixer.music.pause)

    def draw() -> None:
        screen.blit(background, (0, 0))
        for button, sprite in sprites.items():
            rect = layout.rect(button)
            screen.blit(sprite, (rect.left, rect.top))
        screen.blit(icons[music.icon], (volume_rect.left, volume_rect.top))

    _fade_in(screen, draw)

    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.MOUSEBUTTONDOWN:
                button = layout.hit(float(event.pos[0]), float(event.pos[1]))
                if button is MenuButton.QUIT:
                    return
                if button is MenuButton.START:
                    run_game(screen)
                    return
                if button is MenuButton.VOLUME:
                    music.toggle()
        screen.fill(MENU_BACKGROUND)
        draw()
        pygame.display.flip()
        clock.tick(FRAME_RATE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the menu, or with --game a single game in its own window."""
    parser = argparse.ArgumentParser(prog="leapup", description="A vertical platform jumping game.")
    parser.add_argument("--game", action="store_true", help="skip the menu and play straight away")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        if args.game:
            config = GameConfig()
            screen = pygame.display.set_mode((config.window_width, config.window_height))
            pygame.display.set_caption(GAME_TITLE)
            run_game(screen)
        else:
            screen = pygame.display.set_mode(MENU_SIZE)
            pygame.display.set_caption(MENU_TITLE)
            run_menu(screen)
    except AssetError as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0