"""2D Game module - side-scrolling blaster simulation"""

from .blaster_env import BlasterEnv, run_random_episode
from .config import GameConfig
from .lifecycle import LifecycleController, LifecycleError
from .simulation import Simulation, resolve_collisions
from .state import GameState, Phase

__all__ = [
    'BlasterEnv', 'run_random_episode', 'GameConfig', 'LifecycleController',
    'LifecycleError', 'Simulation', 'resolve_collisions', 'GameState', 'Phase',
]
