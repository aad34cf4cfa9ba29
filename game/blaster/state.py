"""
Game state aggregate: entity store, clocks and lifecycle phase
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .config import GameConfig
from .entities import Bullet, Enemy, Explosion, Player, make_player


class Phase(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Everything the simulation step reads and mutates"""
    config: GameConfig
    player: Player
    bullets: List[Bullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)
    phase: Phase = Phase.PLAYING
    game_time: float = 0.0       # seconds since the last reset
    clock: float = 0.0           # seconds of simulation, never reset
    last_fire: Optional[float] = None  # clock value of the last shot

    @classmethod
    def new(cls, config: Optional[GameConfig] = None) -> "GameState":
        config = config or GameConfig()
        return cls(config=config, player=make_player(*config.player_start))

    @property
    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    # ----------------------------
    # Entity store
    # ----------------------------

    def add_bullet(self, bullet: Bullet):
        self.bullets.append(bullet)

    def add_enemy(self, enemy: Enemy):
        self.enemies.append(enemy)

    def add_explosion(self, explosion: Explosion):
        self.explosions.append(explosion)

    def remove_bullet(self, index: int) -> Bullet:
        return self.bullets.pop(index)

    def remove_enemy(self, index: int) -> Enemy:
        return self.enemies.pop(index)

    def remove_explosion(self, index: int) -> Explosion:
        return self.explosions.pop(index)
