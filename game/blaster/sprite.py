"""
Sprite sheet animation
"""

from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence, Tuple


class Canvas(Protocol):
    """Drawing surface a sprite renders onto (see render.ArcadeCanvas)"""

    def draw_frame(self, sheet: str, frame: Tuple[int, int, int, int],
                   origin: Tuple[float, float], angle: float = 0.0) -> None:
        ...


class Sprite:
    """Animated region of a sprite sheet.

    ``pos`` is the top-left of the first frame on the sheet and ``size`` the
    frame size. Frames are laid out next to each other along ``direction``;
    ``frames`` is the sequence of frame indices to play at ``speed`` frames
    per second. A sprite with ``once`` set stops at the end of the sequence
    and reports ``done``.
    """

    def __init__(self, sheet: str, pos: Sequence[int], size: Sequence[int],
                 speed: float = 0, frames: Optional[Sequence[int]] = None,
                 direction: str = "horizontal", once: bool = False):
        assert direction in ("horizontal", "vertical"), f"Unknown direction {direction!r}"
        self.sheet = sheet
        self.pos = (int(pos[0]), int(pos[1]))
        self.size = (int(size[0]), int(size[1]))
        self.speed = speed
        self.frames = tuple(frames) if frames else (0,)
        self.direction = direction
        self.once = once
        self.done = False
        self._index = 0.0

    @classmethod
    def from_layout(cls, sheet: str, layout: dict) -> "Sprite":
        return cls(sheet, **layout)

    def update(self, dt: float):
        self._index += self.speed * dt
        if self.once and math.floor(self._index) >= len(self.frames):
            self.done = True

    # the animation contract names this step "advance"
    advance = update

    def current_frame(self) -> int:
        if self.speed <= 0:
            return 0
        idx = math.floor(self._index)
        if self.once and idx >= len(self.frames):
            return self.frames[-1]
        return self.frames[idx % len(self.frames)]

    def frame_rect(self) -> Tuple[int, int, int, int]:
        """Sheet rectangle (x, y, w, h) of the current frame"""
        x, y = self.pos
        frame = self.current_frame()
        if self.direction == "vertical":
            y += frame * self.size[1]
        else:
            x += frame * self.size[0]
        return x, y, self.size[0], self.size[1]

    def render(self, canvas: Canvas, origin: Tuple[float, float], angle: float = 0.0):
        if self.done:
            return
        canvas.draw_frame(self.sheet, self.frame_rect(), origin, angle)
