"""Shared fixtures for the blaster tests."""

from __future__ import annotations

import pytest

from game.blaster.config import GameConfig
from game.blaster.input import InputState
from game.blaster.lifecycle import LifecycleController
from game.blaster.simulation import Simulation
from game.blaster.spawner import Spawner


class FixedRandom:
    """random.Random stand-in that replays a fixed sequence of draws."""

    def __init__(self, *values: float) -> None:
        self.values = list(values) or [0.0]
        self.calls = 0

    def random(self) -> float:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def config() -> GameConfig:
    # spawn_base 1.0 makes the spawn chance zero at any game time
    return GameConfig(spawn_base=1.0)


@pytest.fixture
def lifecycle(config) -> LifecycleController:
    controller = LifecycleController(config)
    controller.reset()
    return controller


@pytest.fixture
def keys() -> InputState:
    return InputState()


@pytest.fixture
def sim(lifecycle, keys) -> Simulation:
    return Simulation(lifecycle, keys, Spawner(lifecycle.config, FixedRandom(0.5)))


@pytest.fixture
def fixed_random():
    return FixedRandom
