"""The moving things of the game: fireballs, platforms and shield pickups."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

from leapup.collision import Rect

OFFSCREEN: Tuple[float, float] = (-100.0, -100.0)
FIREBALL_SPAWN_X = -30.0
FIREBALL_SPEED = 7.0
SHIELD_SCALE = 0.1


@dataclass
class Fireball:
    """A fireball that flies from the left edge of the screen to the right."""

    x: float = OFFSCREEN[0]
    y: float = OFFSCREEN[1]
    speed: float = FIREBALL_SPEED
    active: bool = False

    def spawn(self, y: float) -> None:
        """Place the fireball just off the left edge at height ``y`` and activate it."""
        self.x, self.y = FIREBALL_SPAWN_X, y
        self.active = True

    def update(self, window_width: float) -> None:
        """Advance one frame; the fireball resets once it leaves the right edge."""
        if not self.active:
            return
        self.x += self.speed
        if self.x > window_width:
            self.reset()

    def reset(self) -> None:
        """Deactivate and move off screen."""
        self.active = False
        self.x, self.y = OFFSCREEN

    def bounds(self, width: float, height: float) -> Rect:
        return Rect(self.x, self.y, width, height)


@dataclass
class Platform:
    """A platform, optionally sliding back and forth between the screen edges."""

    x: float
    y: float
    moving: bool = False
    speed: float = 0.0
    moving_left: bool = True

    @classmethod
    def create(cls, x: float, y: float, moving: bool = False, rng: random.Random | None = None) -> "Platform":
        """Make a platform; a moving one gets a random speed of 2-6 and direction."""
        platform = cls(x=x, y=y, moving=moving)
        if moving:
            rng = rng or random.Random()
            platform.speed = 2.0 + rng.randrange(5)
            platform.moving_left = bool(rng.randrange(2))
        return platform

    def update(self, window_width: float, platform_width: float) -> None:
        """Advance one frame, bouncing off the screen edges."""
        if not self.moving:
            return
        if self.moving_left:
            self.x -= self.speed
            if self.x < 0:
                self.x = 0.0
                self.moving_left = False
        else:
            self.x += self.speed
            if self.x + platform_width > window_width:
                self.x = window_width - platform_width
                self.moving_left = True


@dataclass
class Shield:
    """A shield pickup drawn scaled down from its texture."""

    texture_width: float
    texture_height: float
    scale: float = SHIELD_SCALE
    x: float = OFFSCREEN[0]
    y: float = OFFSCREEN[1]
    active: bool = False

    @property
    def width(self) -> float:
        return self.texture_width * self.scale

    @property
    def height(self) -> float:
        return self.texture_height * self.scale

    def spawn(self, x: float, y: float) -> None:
        self.x, self.y = x, y
        self.active = True

    def deactivate(self) -> None:
        self.active = False
        self.x, self.y = OFFSCREEN

    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)