from __future__ import annotations

import math
import random
from typing import Optional

import numpy as np
from pygame.math import Vector2


class DeterministicRng:
    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)
        # Separate stream for bulk array draws; scalar draws stay on self._random.
        self._generator = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_range(self, low: float, high: float) -> float:
        # [low, high) like random.random(); uniform() may return high.
        return low + (high - low) * self._random.random()

    def next_array(self, low: float, high: float, shape: tuple[int, ...]) -> np.ndarray:
        return low + (high - low) * self._generator.random(shape)

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)

    def next_angle(self) -> float:
        return self.next_range(0.0, 2.0 * math.pi)

    def next_point(self, low: Vector2, high: Vector2) -> Vector2:
        return Vector2(self.next_range(low.x, high.x), self.next_range(low.y, high.y))
