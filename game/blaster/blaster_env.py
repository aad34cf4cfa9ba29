"""
BlasterEnv - headless Gymnasium wrapper around the blaster simulation
---------------------------------------------------------------------
- Same Simulation / LifecycleController the window plays
- Discrete MultiDiscrete action space: [vertical(3), horizontal(3), fire(2)]
- Vector observation: player position + game time + K nearest enemies
- Episode ends on game over (terminated) or after max_steps (truncated)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ASSETS, GameConfig
from .input import InputState
from .lifecycle import LifecycleController
from .simulation import Simulation
from .spawner import Spawner
from .utils import clamp, seed_everything

# action index -> held key
VERTICAL_KEYS = (None, "UP", "DOWN")
HORIZONTAL_KEYS = (None, "LEFT", "RIGHT")


class BlasterEnv(gym.Env):
    """Side-scrolling blaster as a Gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 30,
        max_steps: int = 1800,  # 60s at 30 FPS
        k_enemies: int = 5,
        time_scale: float = 60.0,  # game_time seen as 1.0 at this many seconds
        r_kill: float = 1.0,
        r_death: float = 5.0,
        r_time: float = 0.001,
        **config_overrides,
    ):
        super().__init__()
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.config = GameConfig.from_dict(config_overrides)

        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.time_scale = time_scale
        self.r_kill = r_kill
        self.r_death = r_death
        self.r_time = r_time

        self.action_space = spaces.MultiDiscrete([3, 3, 2])

        # Player: pos(2) game_time(1); each enemy: rel pos(2)
        obs_dim = 2 + 1 + self.k_enemies * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.keys = InputState()
        self.lifecycle: LifecycleController = None  # type: ignore
        self.simulation: Simulation = None  # type: ignore
        self._step_count = 0
        self._kills = 0
        self._window = None
        self._renderer = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        rng = seed_everything(seed if seed is not None else self.config.seed)

        self.keys.clear()
        self.lifecycle = LifecycleController(self.config)
        self.simulation = Simulation(self.lifecycle, self.keys, Spawner(self.config, rng))
        self.lifecycle.reset()
        self._step_count = 0
        self._kills = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        vertical, horizontal, fire = int(action[0]), int(action[1]), int(action[2])
        held = [VERTICAL_KEYS[vertical], HORIZONTAL_KEYS[horizontal], "SPACE" if fire else None]
        self.keys.set_held(k for k in held if k is not None)

        report = self.simulation.step(self.dt)
        self._kills += report.kills
        self._step_count += 1

        terminated = self.lifecycle.state.is_game_over
        truncated = self._step_count >= self.max_steps

        reward = self.r_kill * report.kills - self.r_time
        if report.player_hit:
            reward -= self.r_death

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    def render(self):
        if self.render_mode != "human":
            return None
        if self._window is None:
            from .window import ArcadeCanvas
            from .render import Renderer
            from .resources import ResourceCache
            import arcade

            self._window = arcade.Window(self.config.width, self.config.height, "BlasterEnv - Arcade")
            resources = ResourceCache()
            resources.load(ASSETS)
            self._renderer = Renderer(ArcadeCanvas(resources, self.config.width, self.config.height))

        self._window.dispatch_events()
        self._window.clear()
        self._renderer.render(self.lifecycle.state, self.lifecycle.panels)
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
        self._renderer = None

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        state = self.lifecycle.state
        w, h = self.config.width, self.config.height
        px, py = state.player.center

        obs_parts = [
            px / w * 2 - 1,
            py / h * 2 - 1,
            clamp(state.game_time / self.time_scale * 2 - 1, -1, 1),
        ]

        enemies_sorted = sorted(
            state.enemies,
            key=lambda e: (e.pos[0] - px) ** 2 + (e.pos[1] - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.pos[0] - px) / w, -1, 1),
                    clamp((e.pos[1] - py) / h, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        state = self.lifecycle.state
        return {
            "game_time": state.game_time,
            "kills": self._kills,
            "num_enemies": len(state.enemies),
            "num_bullets": len(state.bullets),
            "num_explosions": len(state.explosions),
            "phase": state.phase.value,
            "step": self._step_count,
        }


def run_random_episode(seed: Optional[int] = 42, render: bool = False, **kwargs) -> float:
    """Run one episode with random actions and return its total reward"""
    env = BlasterEnv(render_mode="human" if render else None, **kwargs)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.3f}  "
          f"(kills={info['kills']}, time={info['game_time']:.1f}s, steps={info['step']})")
    env.close()
    return total
