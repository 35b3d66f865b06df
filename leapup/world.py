"""The state of one run of the game and the rules that advance it frame by frame."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import List, Sequence

from leapup.collision import AlphaMask, Rect, pixel_perfect_collision
from leapup.entities import Fireball, Platform, Shield


@dataclass(frozen=True)
class GameConfig:
    """Sizes, speeds and timings of the game."""

    window_width: int = 400
    window_height: int = 533
    platform_count: int = 7
    platform_width: int = 60
    platform_height: int = 15
    player_width: int = 58
    player_height: int = 83
    fireball_width: int = 30
    fireball_height: int = 30
    move_speed: float = 3.0
    jump_speed: float = 10.0
    gravity: float = 0.2
    scroll_height: float = 200.0
    moving_chance: int = 30
    fireball_interval: float = 3.0
    shield_spawn_min: int = 5
    shield_spawn_spread: int = 10
    shield_duration: float = 20.0
    shield_lifetime: float = 10.0
    shield_texture_width: float = 500.0
    shield_texture_height: float = 500.0
    aura_radius: float = 50.0


class Outcome(enum.Enum):
    """What a frame ended with."""

    RUNNING = "running"
    FELL = "fell"
    HIT = "hit"


def find_gaps(platforms: Sequence[Platform], platform_height: float, fireball_height: float) -> List[float]:
    """Heights at which a fireball fits centred between consecutive platforms."""
    gaps = []
    for upper_platform, lower_platform in zip(platforms, platforms[1:]):
        upper = upper_platform.y + platform_height
        lower = lower_platform.y
        if lower - upper > fireball_height + 10.0:
            gaps.append(upper + (lower - upper) / 2.0 - fireball_height / 2.0)
    return gaps


@dataclass
class World:
    """Platforms, player, fireball and shield of one game.

    Times passed to :meth:`step` are seconds since the world was created.
    """

    config: GameConfig
    rng: random.Random
    player_mask: AlphaMask
    platform_mask: AlphaMask
    fireball_mask: AlphaMask
    platforms: List[Platform]
    shield: Shield
    x: float
    y: float
    vy: float = 0.0
    fireball: Fireball = field(default_factory=Fireball)
    sprite_x: float = 0.0
    sprite_y: float = 0.0
    shielded: bool = False
    fireball_timer: float = 0.0
    shield_spawn_timer: float = 0.0
    shield_started: float = 0.0
    shield_spawned: float = 0.0

    @classmethod
    def new(
        cls,
        config: GameConfig,
        rng: random.Random,
        player_mask: AlphaMask,
        platform_mask: AlphaMask,
        fireball_mask: AlphaMask,
    ) -> "World":
        """Lay out evenly spaced platforms and stand the player on the middle one."""
        spacing = config.window_height // config.platform_count
        platforms = []
        for i in range(config.platform_count):
            x = float(rng.randrange(config.window_width - config.platform_width))
            y = float(i * spacing)
            moving = rng.randrange(100) < config.moving_chance
            platforms.append(Platform.create(x, y, moving, rng))
        middle = platforms[config.platform_count // 2]
        x = middle.x + config.platform_width / 2.0
        y = middle.y - config.player_height / 2.0
        return cls(
            config=config,
            rng=rng,
            player_mask=player_mask,
            platform_mask=platform_mask,
            fireball_mask=fireball_mask,
            platforms=platforms,
            shield=Shield(config.shield_texture_width, config.shield_texture_height),
            x=x,
            y=y,
            sprite_x=x,
            sprite_y=y,
        )

    def player_bounds(self) -> Rect:
        """The player's rectangle at its current logical position."""
        c = self.config
        return Rect(self.x - c.player_width / 2.0, self.y - c.player_height / 2.0, c.player_width, c.player_height)

    def sprite_bounds(self) -> Rect:
        """The player's rectangle where it was last drawn."""
        c = self.config
        return Rect(
            self.sprite_x - c.player_width / 2.0,
            self.sprite_y - c.player_height / 2.0,
            c.player_width,
            c.player_height,
        )

    def aura_bounds(self) -> Rect:
        """The shield aura's bounding box around the drawn player."""
        r = self.config.aura_radius
        return Rect(self.sprite_x - r, self.sprite_y - r, 2 * r, 2 * r)

    def step(self, left: bool, right: bool, now: float) -> Outcome:
        """Advance the world by one frame with the given keys held."""
        c = self.config

        for platform in self.platforms:
            platform.update(c.window_width, c.platform_width)

        if not self.fireball.active and now - self.fireball_timer > c.fireball_interval:
            gaps = find_gaps(self.platforms, c.platform_height, c.fireball_height)
            if gaps:
                self.fireball.spawn(gaps[self.rng.randrange(len(gaps))])
                self.fireball_timer = now

        if right:
            self.x += c.move_speed
        if left:
            self.x -= c.move_speed

        self.vy += c.gravity
        self.y += self.vy

        if self.y - c.player_height / 2.0 > c.window_height:
            return Outcome.FELL

        if self.y < c.scroll_height:
            self.y = c.scroll_height
            for platform in self.platforms:
                platform.y -= self.vy
                if platform.y > c.window_height:
                    platform.y = 0.0
                    platform.x = float(self.rng.randrange(c.window_width - c.platform_width))
            if self.fireball.active:
                self.fireball.y -= self.vy
            if self.shield.active:
                self.shield.y -= self.vy

        self.fireball.update(c.window_width)

        player = self.player_bounds()

        if (
            not self.shield.active
            and not self.shielded
            and now - self.shield_spawn_timer > c.shield_spawn_min + self.rng.randrange(c.shield_spawn_spread)
        ):
            candidates = [p for p in self.platforms if 0.0 < p.y <= c.scroll_height]
            if candidates:
                chosen = candidates[self.rng.randrange(len(candidates))]
                self.shield.spawn(
                    chosen.x + (c.platform_width - self.shield.width) / 2.0,
                    chosen.y - self.shield.height,
                )
                self.shield_spawned = now
                self.shield_spawn_timer = now

        if self.shielded and now - self.shield_started > c.shield_duration:
            self.shielded = False

        if self.fireball.active and self.shielded:
            fireball_rect = self.fireball.bounds(c.fireball_width, c.fireball_height)
            if fireball_rect.intersection(self.aura_bounds()) is not None:
                self.fireball.reset()
                self.shielded = False
                return Outcome.RUNNING

        sprite_origin = (self.sprite_x - c.player_width / 2.0, self.sprite_y - c.player_height / 2.0)

        if self.fireball.active:
            fireball_rect = self.fireball.bounds(c.fireball_width, c.fireball_height)
            if fireball_rect.intersection(self.sprite_bounds()) is not None:
                region = _overlap(player, fireball_rect)
                if not self.shielded and pixel_perfect_collision(
                    self.player_mask,
                    sprite_origin,
                    self.fireball_mask,
                    (self.fireball.x, self.fireball.y),
                    region,
                ):
                    return Outcome.HIT

        for platform in self.platforms:
            plat = Rect(platform.x, platform.y, c.platform_width, c.platform_height)
            if (
                player.right > plat.left
                and player.left < plat.right
                and player.bottom > plat.top
                and player.top < plat.bottom
                and self.vy > 0
            ):
                region = _overlap(player, plat)
                if pixel_perfect_collision(
                    self.player_mask, sprite_origin, self.platform_mask, (plat.left, plat.top), region
                ):
                    self.y = plat.top - c.player_height / 2.0
                    self.vy = -c.jump_speed

        self.sprite_x, self.sprite_y = self.x, self.y

        if self.shield.active and self.shield.bounds().intersection(self.sprite_bounds()) is not None:
            self.shield.deactivate()
            self.shielded = True
            self.shield_started = now

        if self.shield.active and now - self.shield_spawned > c.shield_lifetime:
            self.shield.deactivate()

        return Outcome.RUNNING


def _overlap(a: Rect, b: Rect) -> Rect:
    """The overlap of two rectangles, possibly with a non-positive size."""
    left = max(a.left, b.left)
    top = max(a.top, b.top)
    return Rect(left, top, min(a.right, b.right) - left, min(a.bottom, b.bottom) - top)