"""Unit tests for the game state entity store."""

from __future__ import annotations

import pytest

from game.blaster.config import GameConfig
from game.blaster.entities import Bullet, make_enemy, make_explosion
from game.blaster.state import GameState, Phase

pytestmark = pytest.mark.unit


class TestGameState:
    def test_new_state_defaults(self):
        state = GameState.new(GameConfig())
        assert state.phase is Phase.PLAYING
        assert state.player.pos == [50.0, 240.0]
        assert state.bullets == [] and state.enemies == [] and state.explosions == []
        assert state.last_fire is None

    def test_remove_by_index_returns_the_entity(self):
        state = GameState.new()
        for x in (10.0, 20.0, 30.0):
            state.add_bullet(Bullet(pos=[x, 0.0]))
            state.add_enemy(make_enemy(x, 0.0))
            state.add_explosion(make_explosion(x, 0.0))

        assert state.remove_bullet(1).pos[0] == 20.0
        assert state.remove_enemy(0).pos[0] == 10.0
        assert state.remove_explosion(2).pos[0] == 30.0

        assert [b.pos[0] for b in state.bullets] == [10.0, 30.0]
        assert [e.pos[0] for e in state.enemies] == [20.0, 30.0]
        assert [x.pos[0] for x in state.explosions] == [10.0, 20.0]

    def test_remove_out_of_range(self):
        state = GameState.new()
        with pytest.raises(IndexError):
            state.remove_enemy(0)
