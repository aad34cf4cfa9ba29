"""
Playing / game-over state machine
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import GameConfig
from .state import GameState, Phase

logger = logging.getLogger(__name__)

# (from, to) pairs; anything else is a programming error
TRANSITIONS = {
    (Phase.PLAYING, Phase.GAME_OVER),
    (Phase.GAME_OVER, Phase.PLAYING),
}


class LifecycleError(RuntimeError):
    """Raised on a transition the state machine does not allow"""


@dataclass
class PanelVisibility:
    """Visibility of the game-over panel and the dimming overlay"""
    game_over: bool = False
    overlay: bool = False


class LifecycleController:
    """Owns the GameState and gates it between PLAYING and GAME_OVER"""

    def __init__(self, config: Optional[GameConfig] = None,
                 state: Optional[GameState] = None):
        self.state = state or GameState.new(config)
        self.panels = PanelVisibility()
        self._listeners: List[Callable[[Phase], None]] = []

    @property
    def config(self) -> GameConfig:
        return self.state.config

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def subscribe(self, callback: Callable[[Phase], None]):
        """Call ``callback(phase)`` after every transition and reset"""
        self._listeners.append(callback)

    def reset(self):
        """Start (or restart) a round from a clean field"""
        state = self.state
        self.panels.game_over = False
        self.panels.overlay = False
        state.phase = Phase.PLAYING
        state.game_time = 0.0

        state.enemies = []
        state.bullets = []
        if state.config.clear_explosions_on_reset:
            state.explosions = []

        # the player is moved back, never recreated
        state.player.pos = list(state.config.player_start)
        logger.info("Round started")
        self._notify()

    def game_over(self):
        if self.state.phase is Phase.GAME_OVER:
            return
        self._transition(Phase.GAME_OVER)
        self.panels.game_over = True
        self.panels.overlay = True
        logger.info("Game over after %.2fs", self.state.game_time)
        self._notify()

    def play_again(self):
        """Handle the external "play again" request"""
        if self.state.phase is not Phase.GAME_OVER:
            raise LifecycleError("play again is only possible after game over")
        self._transition(Phase.PLAYING)
        self.reset()

    def _transition(self, target: Phase):
        if (self.state.phase, target) not in TRANSITIONS:
            raise LifecycleError(f"illegal transition {self.state.phase.value} -> {target.value}")
        self.state.phase = target

    def _notify(self):
        for callback in self._listeners:
            callback(self.state.phase)
