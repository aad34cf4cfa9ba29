"""Unit tests for the playing / game-over state machine."""

from __future__ import annotations

import pytest

from game.blaster.config import GameConfig
from game.blaster.entities import Bullet, make_enemy, make_explosion
from game.blaster.lifecycle import LifecycleController, LifecycleError
from game.blaster.state import Phase

pytestmark = pytest.mark.unit


class TestReset:
    def test_startup_reset_enters_playing(self):
        controller = LifecycleController(GameConfig())
        controller.reset()
        assert controller.phase is Phase.PLAYING
        assert controller.state.player.pos == [50.0, 240.0]
        assert not controller.panels.game_over
        assert not controller.panels.overlay

    def test_play_again_restores_clean_round(self, lifecycle):
        state = lifecycle.state
        player = state.player
        state.game_time = 42.0
        state.player.pos = [300.0, 10.0]
        state.add_enemy(make_enemy(100.0, 100.0))
        state.add_bullet(Bullet(pos=[10.0, 10.0]))
        lifecycle.game_over()

        lifecycle.play_again()

        assert state.phase is Phase.PLAYING
        assert state.game_time == 0.0
        assert state.bullets == []
        assert state.enemies == []
        assert state.player.pos == [50.0, 480 / 2]
        assert state.player is player

    def test_explosions_survive_reset_by_default(self, lifecycle):
        lifecycle.state.add_explosion(make_explosion(10.0, 10.0))
        lifecycle.game_over()
        lifecycle.play_again()
        assert len(lifecycle.state.explosions) == 1

    def test_explosions_cleared_when_configured(self):
        controller = LifecycleController(GameConfig(clear_explosions_on_reset=True))
        controller.reset()
        controller.state.add_explosion(make_explosion(10.0, 10.0))
        controller.game_over()
        controller.play_again()
        assert controller.state.explosions == []


class TestGameOver:
    def test_game_over_shows_panels(self, lifecycle):
        lifecycle.game_over()
        assert lifecycle.phase is Phase.GAME_OVER
        assert lifecycle.state.is_game_over
        assert lifecycle.panels.game_over
        assert lifecycle.panels.overlay

    def test_game_over_is_idempotent(self, lifecycle):
        seen = []
        lifecycle.subscribe(seen.append)
        lifecycle.game_over()
        lifecycle.game_over()
        assert seen == [Phase.GAME_OVER]

    def test_play_again_hides_panels(self, lifecycle):
        lifecycle.game_over()
        lifecycle.play_again()
        assert not lifecycle.panels.game_over
        assert not lifecycle.panels.overlay

    def test_play_again_while_playing_is_illegal(self, lifecycle):
        with pytest.raises(LifecycleError):
            lifecycle.play_again()
        assert lifecycle.phase is Phase.PLAYING

    def test_listeners_see_each_transition(self, lifecycle):
        seen = []
        lifecycle.subscribe(seen.append)
        lifecycle.game_over()
        lifecycle.play_again()
        assert seen == [Phase.GAME_OVER, Phase.PLAYING]
