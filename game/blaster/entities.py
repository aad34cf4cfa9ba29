"""
Game entity dataclasses
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .config import (
    BULLET_SPRITE,
    ENEMY_SPRITE,
    EXPLOSION_SPRITE,
    PLAYER_DISPLAY_SIZE,
    PLAYER_SPRITE,
    SPRITE_SHEET,
)
from .sprite import Sprite

# All bullets share one frame; only their position differs
BULLET_SIZE: Tuple[int, int] = BULLET_SPRITE["size"]


class Direction(str, Enum):
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"

    @property
    def angle(self) -> float:
        """Clockwise render rotation in degrees; sprites face right"""
        return {"up": -90.0, "left": 180.0, "down": 90.0, "right": 0.0}[self.value]


@dataclass
class Player:
    """Player ship entity"""
    pos: List[float]
    sprite: Sprite
    direction: Direction = Direction.RIGHT
    display_size: Tuple[int, int] = PLAYER_DISPLAY_SIZE  # cosmetic only

    @property
    def size(self) -> Tuple[int, int]:
        # collision and bounds both use the sprite frame
        return self.sprite.size

    @property
    def center(self) -> Tuple[float, float]:
        return (self.pos[0] + self.size[0] / 2,
                self.pos[1] + self.size[1] / 2)


@dataclass
class Bullet:
    """Projectile fired by the player"""
    pos: List[float]
    direction: Direction = Direction.RIGHT

    @property
    def size(self) -> Tuple[int, int]:
        return BULLET_SIZE


@dataclass
class Enemy:
    """Enemy entity that flies in from the right edge"""
    pos: List[float]
    sprite: Sprite

    @property
    def size(self) -> Tuple[int, int]:
        return self.sprite.size


@dataclass
class Explosion:
    """One-shot explosion left behind by a destroyed enemy"""
    pos: List[float]
    sprite: Sprite

    @property
    def size(self) -> Tuple[int, int]:
        return self.sprite.size

    @property
    def done(self) -> bool:
        return self.sprite.done


def make_player(x: float = 0.0, y: float = 0.0) -> Player:
    return Player(pos=[x, y], sprite=Sprite.from_layout(SPRITE_SHEET, PLAYER_SPRITE))


def make_bullet_sprite() -> Sprite:
    return Sprite.from_layout(SPRITE_SHEET, BULLET_SPRITE)


def make_enemy(x: float, y: float) -> Enemy:
    return Enemy(pos=[x, y], sprite=Sprite.from_layout(SPRITE_SHEET, ENEMY_SPRITE))


def make_explosion(x: float, y: float) -> Explosion:
    return Explosion(pos=[x, y], sprite=Sprite.from_layout(SPRITE_SHEET, EXPLOSION_SPRITE))
