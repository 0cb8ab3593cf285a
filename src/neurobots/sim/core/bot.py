from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from pygame import Color
from pygame.math import Vector2

from .config import BotConfig
from .environment import TURN_LEFT, TURN_RIGHT, Environment
from .food import Food
from .neural_net import NeuralNet
from .rng import DeterministicRng

logger = logging.getLogger(__name__)


class Bot:
    """Agent with a pose, an energy budget and its own online-trained network.

    The heading accumulates without wrapping; only its sine and cosine are
    ever used.
    """

    def __init__(
        self,
        layers: int,
        units: int,
        size: float,
        speed: float,
        rng: Optional[DeterministicRng] = None,
        *,
        fov: float = math.pi / 2.0,
        turn_rate: float = math.pi / 15.0,
        learning_rate: float = 1.0,
        view_radius_factor: float = 8.0,
        energy: float = 0.0,
        weight_range: Tuple[float, float] = (-1.0, 1.0),
    ):
        self._rng = rng if rng is not None else DeterministicRng()
        self._net = NeuralNet(layers, units, self._rng)
        self._net.randomize(*weight_range)
        self.position = Vector2()
        self.heading = 0.0
        self._size = size
        self.speed = speed
        self._view_radius = view_radius_factor * size
        self._fov = fov
        self.turn_rate = turn_rate
        self.learning_rate = learning_rate
        self.energy = energy
        self.last_loss = 0.0
        self.color = Color(0xFF, 0xFF, 0xFF)
        self.randomize_color()

    @classmethod
    def from_config(cls, config: BotConfig, rng: Optional[DeterministicRng] = None) -> "Bot":
        return cls(
            config.layers,
            config.units,
            config.size,
            config.speed,
            rng,
            fov=config.fov,
            turn_rate=config.turn_rate,
            learning_rate=config.learning_rate,
            view_radius_factor=config.view_radius_factor,
            energy=config.initial_energy,
            weight_range=config.weight_range,
        )

    @property
    def net(self) -> NeuralNet:
        return self._net

    @property
    def size(self) -> float:
        return self._size

    @property
    def view_radius(self) -> float:
        return self._view_radius

    @property
    def fov(self) -> float:
        return self._fov

    def process(self, environment: Environment) -> List[float]:
        """Sense, turn, move and train against the heuristic target in one step."""
        actions = self._net.feed_forward(environment.input)

        if actions[TURN_LEFT] > actions[TURN_RIGHT]:
            self.rotate(actions[TURN_LEFT])
        else:
            self.rotate(-actions[TURN_RIGHT])

        self.shift()

        target = environment.get_expected_output(actions)
        self.last_loss = self._net.backpropagate(target, self.learning_rate)
        return actions

    def rotate(self, strength: float) -> None:
        self.heading += self.turn_rate * strength

    def shift(self) -> None:
        self.position.update(
            self.position.x + self.speed * math.cos(self.heading),
            self.position.y + self.speed * math.sin(self.heading),
        )

    def eat(self, food: Food) -> None:
        self.energy += food.energy
        logger.debug("bot at (%.1f, %.1f) ate %.1f energy", self.position.x, self.position.y, food.energy)

    def metabolize(self, cost: float) -> None:
        self.energy -= cost

    def is_starving(self) -> bool:
        return self.energy <= 0.0

    def in_boundary(self, field_size: Tuple[float, float]) -> bool:
        width, height = field_size
        return 0.0 <= self.position.x < width and 0.0 <= self.position.y < height

    def randomize_pos_rot(self, field_size: Tuple[float, float]) -> None:
        width, height = field_size
        self.position = self._rng.next_point(Vector2(), Vector2(width, height))
        self.heading = self._rng.next_angle()

    def randomize_color(self) -> None:
        rng = self._rng
        self.color = Color(rng.next_int(0x100), rng.next_int(0x100), rng.next_int(0x100))

    def randomize_net(self, low: float, high: float) -> None:
        self._net.randomize(low, high)
