"""
Enemy spawn policy: difficulty grows with elapsed play time
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .config import ENEMY_SPRITE, REFERENCE_FPS, GameConfig
from .entities import Enemy, make_enemy
from .state import GameState

logger = logging.getLogger(__name__)


def spawn_probability(game_time: float, dt: float, base: float = 0.993,
                      policy: str = "per_frame") -> float:
    """Chance that a step of length ``dt`` spawns an enemy.

    ``per_frame`` is ``1 - base**game_time`` regardless of ``dt``, so the
    spawn rate follows the frame rate. ``dt_normalized`` scales that chance
    to a REFERENCE_FPS frame so the rate is the same at any frame rate.
    """
    keep = base ** game_time
    if policy == "per_frame":
        return 1.0 - keep
    if policy == "dt_normalized":
        return 1.0 - keep ** (dt * REFERENCE_FPS)
    raise ValueError(f"Unknown spawn policy: {policy!r}")


class Spawner:
    """Decides once per step whether a new enemy enters from the right"""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random(config.seed)

    def probability(self, state: GameState, dt: float) -> float:
        return spawn_probability(state.game_time, dt,
                                 self.config.spawn_base, self.config.spawn_policy)

    def __call__(self, state: GameState, dt: float) -> Optional[Enemy]:
        if self.rng.random() >= self.probability(state, dt):
            return None

        enemy_h = ENEMY_SPRITE["size"][1]
        enemy = make_enemy(self.config.width,
                           self.rng.random() * (self.config.height - enemy_h))
        state.add_enemy(enemy)
        logger.debug("Spawned enemy at y=%.1f (t=%.2fs)", enemy.pos[1], state.game_time)
        return enemy
