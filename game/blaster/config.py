"""
Game configuration for the blaster simulation
Default tuning values plus the sprite sheet layout
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple

# Gameplay parameters
GAME_CONFIG = {
    "width": 512,
    "height": 480,
    "player_speed": 200.0,   # px/s
    "bullet_speed": 500.0,   # px/s
    "enemy_speed": 100.0,    # px/s
    "fire_interval": 0.1,    # seconds between shots while fire is held
    "spawn_base": 0.993,     # spawn chance per frame is 1 - base**game_time
    "spawn_policy": "per_frame",
    "max_dt": None,          # None leaves frame deltas unclamped
    "clear_explosions_on_reset": False,
    "player_start_x": 50.0,
    "seed": None,
}

SPAWN_POLICIES = ("per_frame", "dt_normalized")

# Frame rate the per-frame spawn chance was tuned against
REFERENCE_FPS = 60.0

# ==============================================================================
# SPRITE SHEET LAYOUT
# Offsets and frame sizes inside img/sprites.png
# ==============================================================================

SPRITE_SHEET = "img/sprites.png"
TERRAIN_TILE = "img/terrain.png"
ASSETS = [SPRITE_SHEET, TERRAIN_TILE]

PLAYER_SPRITE = {
    "pos": (0, 0),
    "size": (39, 39),
    "speed": 16,
    "frames": (0, 1),
}
PLAYER_DISPLAY_SIZE = (100, 100)

BULLET_SPRITE = {
    "pos": (0, 39),
    "size": (18, 8),
}

ENEMY_SPRITE = {
    "pos": (0, 78),
    "size": (80, 39),
    "speed": 6,
    "frames": (0, 1, 2, 3, 2, 1),
}

EXPLOSION_SPRITE = {
    "pos": (0, 117),
    "size": (39, 39),
    "speed": 16,
    "frames": tuple(range(13)),
    "once": True,
}


@dataclass(frozen=True)
class GameConfig:
    """Resolved gameplay settings"""
    width: int = GAME_CONFIG["width"]
    height: int = GAME_CONFIG["height"]
    player_speed: float = GAME_CONFIG["player_speed"]
    bullet_speed: float = GAME_CONFIG["bullet_speed"]
    enemy_speed: float = GAME_CONFIG["enemy_speed"]
    fire_interval: float = GAME_CONFIG["fire_interval"]
    spawn_base: float = GAME_CONFIG["spawn_base"]
    spawn_policy: str = GAME_CONFIG["spawn_policy"]
    max_dt: Optional[float] = GAME_CONFIG["max_dt"]
    clear_explosions_on_reset: bool = GAME_CONFIG["clear_explosions_on_reset"]
    player_start_x: float = GAME_CONFIG["player_start_x"]
    seed: Optional[int] = GAME_CONFIG["seed"]

    def __post_init__(self):
        assert self.width > 0 and self.height > 0, "Canvas size must be positive"
        assert 0.0 < self.spawn_base <= 1.0, "spawn_base must be in (0, 1]"
        assert self.spawn_policy in SPAWN_POLICIES, f"Unknown spawn policy {self.spawn_policy!r}"
        assert self.max_dt is None or self.max_dt > 0, "max_dt must be positive"

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def player_start(self) -> Tuple[float, float]:
        return self.player_start_x, self.height / 2

    @classmethod
    def from_dict(cls, overrides: Optional[Dict[str, Any]] = None) -> "GameConfig":
        """Build a config from GAME_CONFIG updated with ``overrides``.

        ``None`` values in ``overrides`` are ignored so argparse namespaces
        can be passed straight through.
        """
        known = {f.name for f in fields(cls)}
        values = dict(GAME_CONFIG)
        for key, value in (overrides or {}).items():
            if key not in known:
                raise ValueError(f"Unknown game config key: {key!r}")
            if value is not None:
                values[key] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_overrides(self, **overrides) -> "GameConfig":
        return replace(self, **overrides)
