"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Optional, Sequence

import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def collides(x: float, y: float, r: float, b: float,
             x2: float, y2: float, r2: float, b2: float) -> bool:
    """Check if two boxes given as (left, top, right, bottom) overlap.

    Edges are half-open on both sides, so boxes that only share an edge
    (``r == x2`` or ``x == r2``) do not collide and the test is symmetric.
    """
    return not (r <= x2 or x >= r2 or
                b <= y2 or y >= b2)


def box_collides(pos: Sequence[float], size: Sequence[float],
                 pos2: Sequence[float], size2: Sequence[float]) -> bool:
    """Check if two boxes given as position + size overlap"""
    return collides(pos[0], pos[1],
                    pos[0] + size[0], pos[1] + size[1],
                    pos2[0], pos2[1],
                    pos2[0] + size2[0], pos2[1] + size2[1])


def seed_everything(py_seed: Optional[int]) -> random.Random:
    """Seed all random number generators and return a dedicated game RNG"""
    if py_seed is None:
        return random.Random()
    random.seed(py_seed)
    np.random.seed(py_seed)
    return random.Random(py_seed)
