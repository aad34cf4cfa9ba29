"""
Arcade window: hosts the frame driver, keyboard input and drawing
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import arcade

from .config import ASSETS, GameConfig
from .driver import FrameDriver
from .input import InputState
from .lifecycle import LifecycleController
from .render import PLAY_AGAIN_BUTTON, Renderer, point_in_rect
from .resources import ResourceCache
from .simulation import Simulation
from .spawner import Spawner
from .utils import seed_everything

logger = logging.getLogger(__name__)

# arcade key codes -> input vocabulary names
KEY_MAP = {
    arcade.key.UP: "UP",
    arcade.key.DOWN: "DOWN",
    arcade.key.LEFT: "LEFT",
    arcade.key.RIGHT: "RIGHT",
    arcade.key.SPACE: "SPACE",
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
}


class ArcadeCanvas:
    """Top-left-origin drawing surface on top of arcade's bottom-left one"""

    def __init__(self, resources: ResourceCache, width: int, height: int):
        self.resources = resources
        self.width = width
        self.height = height
        self._frames: Dict[Tuple[str, Tuple[int, int, int, int]], arcade.Texture] = {}

    def _frame_texture(self, sheet: str, frame: Tuple[int, int, int, int]) -> Optional[arcade.Texture]:
        key = (sheet, frame)
        if key not in self._frames:
            image = self.resources.get(sheet)
            if image is None:
                return None
            x, y, w, h = frame
            self._frames[key] = arcade.Texture(
                image.crop((x, y, x + w, y + h)),
                hash=f"{sheet}:{x},{y},{w},{h}",
            )
        return self._frames[key]

    def draw_frame(self, sheet, frame, origin, angle=0.0):
        texture = self._frame_texture(sheet, frame)
        if texture is None:
            return
        x, y = origin
        w, h = frame[2], frame[3]
        arcade.draw_texture_rect(texture, arcade.LBWH(x, self.height - y - h, w, h), angle=angle)

    def fill_pattern(self, name: str):
        image = self.resources.get(name)
        if image is None:
            return
        w, h = image.size
        texture = self._frame_texture(name, (0, 0, w, h))
        for tx in range(0, self.width, w):
            for ty in range(0, self.height, h):
                arcade.draw_texture_rect(texture, arcade.LBWH(tx, self.height - ty - h, w, h))

    def fill_rect(self, rect, color):
        x, y, w, h = rect
        arcade.draw_lrbt_rectangle_filled(x, x + w, self.height - y - h, self.height - y, color)

    def draw_text(self, text, origin, color, size):
        x, y = origin
        arcade.draw_text(text, x, self.height - y - size, color, size, anchor_x="center")


class BlasterWindow(arcade.Window):
    """Arcade window for playing the game"""

    def __init__(self, config: Optional[GameConfig] = None, assets_root=None):
        config = config or GameConfig()
        super().__init__(config.width, config.height, "Blaster - Arcade")
        self.config = config

        self.keys = InputState()
        self.lifecycle = LifecycleController(config)
        self.simulation = Simulation(
            self.lifecycle, self.keys,
            Spawner(config, seed_everything(config.seed)),
        )
        self.resources = ResourceCache(assets_root)
        self.renderer = Renderer(ArcadeCanvas(self.resources, config.width, config.height))
        self.driver = FrameDriver(self.simulation.step, self._draw_state, max_dt=config.max_dt)
        self.started = False

        arcade.set_background_color((18, 18, 22))
        self.resources.on_ready(self.start)
        self.resources.load(ASSETS)

    def start(self):
        logger.info("Assets ready, starting")
        self.lifecycle.reset()
        self.driver.start()
        self.started = True

    def _draw_state(self):
        self.renderer.render(self.lifecycle.state, self.lifecycle.panels)

    def on_draw(self):
        self.clear()
        # nothing runs until every asset has loaded
        if self.started:
            self.driver.tick()

    def on_key_press(self, symbol: int, modifiers: int):
        name = KEY_MAP.get(symbol)
        if name is not None:
            self.keys.press(name)
        elif symbol == arcade.key.ENTER and self.lifecycle.state.is_game_over:
            self.lifecycle.play_again()

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_MAP.get(symbol)
        if name is not None:
            self.keys.release(name)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if not self.lifecycle.panels.game_over:
            return
        if point_in_rect(x, self.height - y, PLAY_AGAIN_BUTTON):
            self.lifecycle.play_again()

    def on_deactivate(self):
        # keys released while unfocused never reach us
        self.keys.clear()


def run(config: Optional[GameConfig] = None, assets_root=None):
    BlasterWindow(config, assets_root)
    arcade.run()
