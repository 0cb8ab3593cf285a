from __future__ import annotations

from typing import Protocol, runtime_checkable

from pygame import Color
from pygame.math import Vector2


@runtime_checkable
class Renderable(Protocol):
    """What a drawing layer may read from a bot or a food item."""

    @property
    def position(self) -> Vector2: ...

    @property
    def heading(self) -> float: ...

    @property
    def size(self) -> float: ...

    @property
    def view_radius(self) -> float: ...

    @property
    def fov(self) -> float: ...

    @property
    def color(self) -> Color: ...


def render_payload(entity: Renderable) -> dict:
    color = entity.color
    return {
        "x": entity.position.x,
        "y": entity.position.y,
        "heading": entity.heading,
        "size": entity.size,
        "view_radius": entity.view_radius,
        "fov": entity.fov,
        "color": (color.r, color.g, color.b),
    }
