"""
Random number source for the show.

Wraps a numpy Generator so a seed reproduces the exact same show.
"""

import numpy as np
from typing import Optional

from .physics import Vec2


class RandomSource:
    """Uniform floats, inclusive integers and unit vectors from one seeded generator"""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_float(self, min_val: float, max_val: float) -> float:
        """Uniform float in [min_val, max_val)"""
        return float(self._rng.random() * (max_val - min_val) + min_val)

    def next_int(self, min_val: int, max_val: int) -> int:
        """Uniform integer in [min_val, max_val], both ends inclusive"""
        return int(self._rng.integers(min_val, max_val, endpoint=True))

    def next_unit_vector(self) -> Vec2:
        """Random direction on the unit circle"""
        return Vec2.from_angle(self.next_float(0.0, 2 * np.pi))

    def reseed(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)
