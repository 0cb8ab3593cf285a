from __future__ import annotations

from dataclasses import dataclass, field

from pygame import Color
from pygame.math import Vector2

FOOD_COLOR = (0x70, 0x20, 0x0F)


@dataclass(slots=True)
class Food:
    position: Vector2
    size: float
    energy: float
    color: Color = field(default_factory=lambda: Color(*FOOD_COLOR))

    # Renderable view; food has no orientation or vision cone.
    @property
    def heading(self) -> float:
        return 0.0

    @property
    def view_radius(self) -> float:
        return 0.0

    @property
    def fov(self) -> float:
        return 0.0
