"""
Simulation step and collision resolution
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .entities import Bullet, make_explosion
from .input import FIRE_KEY, MOVE_KEYS, InputState
from .lifecycle import LifecycleController
from .spawner import Spawner
from .state import GameState
from .utils import box_collides, clamp

logger = logging.getLogger(__name__)


@dataclass
class CollisionReport:
    kills: int = 0
    player_hit: bool = False


@dataclass
class StepReport:
    dt: float
    fired: bool = False
    spawned: bool = False
    kills: int = 0
    player_hit: bool = False


def resolve_collisions(state: GameState, lifecycle: LifecycleController) -> CollisionReport:
    """Destroy enemies hit by bullets, then end the round on player contact.

    Enemies are checked in order against bullets in order; the first
    overlapping bullet wins, so one bullet removes at most one enemy and one
    enemy absorbs at most one bullet. Only enemies that survived their bullet
    check can hit the player. The round ends only after the enemy list has
    been compacted, so lifecycle listeners see the settled field.
    """
    report = CollisionReport()
    player = state.player
    survivors = []

    for enemy in state.enemies:
        hit = next((j for j, b in enumerate(state.bullets)
                    if box_collides(enemy.pos, enemy.size, b.pos, b.size)), None)
        if hit is not None:
            state.remove_bullet(hit)
            state.add_explosion(make_explosion(*enemy.pos))
            report.kills += 1
            logger.debug("Enemy destroyed at (%.1f, %.1f)", *enemy.pos)
            continue

        survivors.append(enemy)
        if box_collides(enemy.pos, enemy.size, player.pos, player.size):
            report.player_hit = True

    state.enemies = survivors
    if report.player_hit:
        lifecycle.game_over()
    return report


class Simulation:
    """Advances a lifecycle-owned GameState by one frame delta at a time"""

    def __init__(self, lifecycle: LifecycleController,
                 keys: Optional[InputState] = None,
                 spawner: Optional[Spawner] = None):
        self.lifecycle = lifecycle
        self.keys = keys if keys is not None else InputState()
        self.spawner = spawner or Spawner(lifecycle.config)

    @property
    def state(self) -> GameState:
        return self.lifecycle.state

    def step(self, dt: float) -> StepReport:
        assert dt >= 0, f"Frame delta must be non-negative, got {dt}"
        state = self.state
        report = StepReport(dt=dt)

        state.game_time += dt
        state.clock += dt

        self._apply_move(dt)
        report.fired = self._apply_shoot()
        self._clamp_player()
        state.player.sprite.update(dt)

        self._update_bullets(dt)
        self._update_enemies(dt)
        self._update_explosions(dt)

        report.spawned = self.spawner(state, dt) is not None

        collisions = resolve_collisions(state, self.lifecycle)
        report.kills = collisions.kills
        report.player_hit = collisions.player_hit
        return report

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _apply_move(self, dt: float):
        # axes are checked independently, so diagonals move sqrt(2) faster
        pos = self.state.player.pos
        step = self.state.config.player_speed * dt
        if self.keys.any_down(MOVE_KEYS["down"]):
            pos[1] += step
        if self.keys.any_down(MOVE_KEYS["up"]):
            pos[1] -= step
        if self.keys.any_down(MOVE_KEYS["left"]):
            pos[0] -= step
        if self.keys.any_down(MOVE_KEYS["right"]):
            pos[0] += step

    def _apply_shoot(self) -> bool:
        state = self.state
        if not self.keys.is_down(FIRE_KEY) or state.is_game_over:
            return False
        # tolerance absorbs float drift in the summed clock
        if (state.last_fire is not None
                and state.clock - state.last_fire < state.config.fire_interval - 1e-9):
            return False

        cx, cy = state.player.center
        state.add_bullet(Bullet(pos=[cx, cy]))
        state.last_fire = state.clock
        return True

    def _clamp_player(self):
        state = self.state
        player = state.player
        w, h = player.size
        player.pos[0] = clamp(player.pos[0], 0, state.config.width - w)
        player.pos[1] = clamp(player.pos[1], 0, state.config.height - h)

    def _update_bullets(self, dt: float):
        state = self.state
        for b in state.bullets:
            b.pos[0] += state.config.bullet_speed * dt

        state.bullets = [b for b in state.bullets if b.pos[0] <= state.config.width]

    def _update_enemies(self, dt: float):
        state = self.state
        for e in state.enemies:
            e.pos[0] -= state.config.enemy_speed * dt
            e.sprite.update(dt)

        state.enemies = [e for e in state.enemies if e.pos[0] + e.size[0] >= 0]

    def _update_explosions(self, dt: float):
        state = self.state
        for x in state.explosions:
            x.sprite.update(dt)

        state.explosions = [x for x in state.explosions if not x.done]
