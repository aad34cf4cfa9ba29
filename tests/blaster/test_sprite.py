"""Unit tests for sprite sheet animation."""

from __future__ import annotations

import pytest

from game.blaster.config import ENEMY_SPRITE, EXPLOSION_SPRITE, PLAYER_SPRITE
from game.blaster.sprite import Sprite

pytestmark = pytest.mark.unit


class RecordingCanvas:
    def __init__(self) -> None:
        self.frames: list[tuple] = []

    def draw_frame(self, sheet, frame, origin, angle=0.0):
        self.frames.append((sheet, frame, origin, angle))


class TestSpriteFrames:
    def test_static_sprite_stays_on_first_frame(self):
        s = Sprite("sheet", (0, 39), (18, 8))
        s.update(10.0)
        assert s.frame_rect() == (0, 39, 18, 8)
        assert not s.done

    def test_looping_sequence(self):
        s = Sprite.from_layout("sheet", ENEMY_SPRITE)
        assert s.frame_rect() == (0, 78, 80, 39)
        s.update(0.5)  # 3 frames at 6 fps
        assert s.current_frame() == 3
        assert s.frame_rect() == (240, 78, 80, 39)
        s.update(0.5)  # index 6 wraps to the start
        assert s.current_frame() == 0
        assert not s.done

    def test_player_alternates_two_frames(self):
        s = Sprite.from_layout("sheet", PLAYER_SPRITE)
        s.update(1 / 16)
        assert s.current_frame() == 1
        s.update(1 / 16)
        assert s.current_frame() == 0

    def test_vertical_layout(self):
        s = Sprite("sheet", (10, 0), (20, 30), speed=1, frames=(0, 1, 2),
                   direction="vertical")
        s.update(2.0)
        assert s.frame_rect() == (10, 60, 20, 30)

    def test_unknown_direction_rejected(self):
        with pytest.raises(AssertionError):
            Sprite("sheet", (0, 0), (1, 1), direction="diagonal")


class TestOneShotSprite:
    def test_explosion_finishes_after_last_frame(self):
        s = Sprite.from_layout("sheet", EXPLOSION_SPRITE)
        s.update(0.75)  # 12 frames in
        assert not s.done
        assert s.current_frame() == 12
        s.update(0.1)
        assert s.done

    def test_done_sprite_draws_nothing(self):
        canvas = RecordingCanvas()
        s = Sprite.from_layout("sheet", EXPLOSION_SPRITE)
        s.render(canvas, (5, 5))
        s.update(2.0)
        s.render(canvas, (5, 5))
        assert len(canvas.frames) == 1

    def test_advance_is_update(self):
        s = Sprite.from_layout("sheet", EXPLOSION_SPRITE)
        s.advance(1.0)
        assert s.done


class TestRender:
    def test_render_passes_origin_and_angle(self):
        canvas = RecordingCanvas()
        s = Sprite("img/sprites.png", (0, 39), (18, 8))
        s.render(canvas, (100.0, 50.0), -90.0)
        assert canvas.frames == [("img/sprites.png", (0, 39, 18, 8), (100.0, 50.0), -90.0)]
