from __future__ import annotations

import math
from typing import List, Optional, Sequence

BOUNDARY_DISTANCE = 0
BOUNDARY_ANGLE = 1
FOOD_DISTANCE = 2
FOOD_ANGLE = 3
PERCEPT_SLOTS = 4

TURN_LEFT = 0
TURN_RIGHT = 1
IDLE = 2


class Environment:
    """Percept vector for one bot on one tick.

    Slots: 0/1 nearest boundary distance and angle, 2/3 nearest food distance
    and angle. A distance of 0 means nothing was sensed. Any slots past the
    fourth stay 0 so the vector matches the network width.
    """

    def __init__(self, size: int = PERCEPT_SLOTS):
        if size < PERCEPT_SLOTS:
            raise ValueError(f"environment needs at least {PERCEPT_SLOTS} slots, got {size}")
        self._input: List[float] = [0.0] * size

    def __len__(self) -> int:
        return len(self._input)

    @property
    def input(self) -> List[float]:
        return self._input

    def set_input(self, index: int, value: float) -> None:
        self._input[index] = value

    def set_boundary(self, distance: float, angle: float) -> None:
        self._input[BOUNDARY_DISTANCE] = distance
        self._input[BOUNDARY_ANGLE] = angle

    def set_food(self, distance: float, angle: float) -> None:
        self._input[FOOD_DISTANCE] = distance
        self._input[FOOD_ANGLE] = angle

    def get_expected_output(self, output: Optional[Sequence[float]] = None) -> List[float]:
        """Heuristic training target: steer away from walls, otherwise towards food.

        ``output`` is the bot's own latest inference; the heuristic does not
        depend on it.
        """
        target = [0.0] * len(self._input)

        if self._input[BOUNDARY_DISTANCE] > 0.0:
            angle = self._input[BOUNDARY_ANGLE]
            if 0.0 < angle < math.pi:
                target[TURN_RIGHT] = 1.0
            elif -math.pi < angle < 0.0:
                target[TURN_LEFT] = 1.0
            target[IDLE] = 0.0
        elif self._input[FOOD_DISTANCE] > 0.0:
            angle = self._input[FOOD_ANGLE]
            if angle > 0.0:
                target[TURN_LEFT] = angle
            elif angle < 0.0:
                target[TURN_RIGHT] = -angle
            target[IDLE] = 0.5
        else:
            target[IDLE] = 1.0

        return target
