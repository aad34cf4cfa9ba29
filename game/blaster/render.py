"""
Frame rendering: draws the game state onto a canvas
"""

from __future__ import annotations

from typing import Tuple

from .config import TERRAIN_TILE
from .entities import make_bullet_sprite
from .lifecycle import PanelVisibility
from .state import GameState

OVERLAY_COLOR = (0, 0, 0, 160)
PANEL_COLOR = (40, 40, 48)
TEXT_COLOR = (230, 230, 230)

# Game-over panel and its button, in top-left canvas coordinates (x, y, w, h)
GAME_OVER_PANEL = (106, 150, 300, 180)
PLAY_AGAIN_BUTTON = (181, 260, 150, 40)
BUTTON_COLOR = (90, 160, 90)


def point_in_rect(x: float, y: float, rect: Tuple[float, float, float, float]) -> bool:
    rx, ry, rw, rh = rect
    return rx <= x < rx + rw and ry <= y < ry + rh


class Renderer:
    """Draws terrain, entities and the game-over UI in back-to-front order.

    The canvas works in top-left coordinates; every entity draws its own
    sprite at its own position.
    """

    def __init__(self, canvas):
        self.canvas = canvas
        self.bullet_sprite = make_bullet_sprite()

    def render(self, state: GameState, panels: PanelVisibility):
        canvas = self.canvas
        canvas.fill_pattern(TERRAIN_TILE)

        # the ship disappears once it has been hit
        if not state.is_game_over:
            state.player.sprite.render(canvas, tuple(state.player.pos))

        for bullet in state.bullets:
            self.bullet_sprite.render(canvas, tuple(bullet.pos), bullet.direction.angle)

        for enemy in state.enemies:
            enemy.sprite.render(canvas, tuple(enemy.pos))

        for explosion in state.explosions:
            explosion.sprite.render(canvas, tuple(explosion.pos))

        self._render_ui(state, panels)

    def _render_ui(self, state: GameState, panels: PanelVisibility):
        canvas = self.canvas
        if panels.overlay:
            canvas.fill_rect((0, 0, state.config.width, state.config.height), OVERLAY_COLOR)
        if panels.game_over:
            px, py, pw, _ = GAME_OVER_PANEL
            canvas.fill_rect(GAME_OVER_PANEL, PANEL_COLOR)
            canvas.draw_text("GAME OVER", (px + pw / 2, py + 30), TEXT_COLOR, 28)
            bx, by, bw, bh = PLAY_AGAIN_BUTTON
            canvas.fill_rect(PLAY_AGAIN_BUTTON, BUTTON_COLOR)
            canvas.draw_text("Play again", (bx + bw / 2, by + bh / 2 - 8), TEXT_COLOR, 16)
