from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from pygame.math import Vector2

from ..core.environment import Environment
from ..utils.math2d import (
    PI_HALF,
    Line,
    direction,
    distance,
    dot,
    get_angle_diff,
    line_intersects_line,
    sub,
)

if TYPE_CHECKING:
    from ..core.bot import Bot
    from ..core.food import Food

Percept = Tuple[float, float]

# Edge rays land on the cone boundary only up to rounding in get_angle_diff.
FOV_EPSILON = 1e-9


def build_boundaries(field_size: Tuple[float, float]) -> List[Line]:
    """Top, bottom, left and right field edges."""
    width, height = field_size
    return [
        Line(Vector2(0.0, 0.0), 0.0),
        Line(Vector2(0.0, height), 0.0),
        Line(Vector2(0.0, 0.0), PI_HALF),
        Line(Vector2(width, 0.0), PI_HALF),
    ]


def _within_fov(bot: "Bot", angle: float) -> bool:
    half_fov = bot.fov / 2.0 + FOV_EPSILON
    return -half_fov <= angle <= half_fov


def sees_point(bot: "Bot", point: Vector2) -> Optional[Percept]:
    offset = sub(point, bot.position)
    dist = distance(point, bot.position)
    if dist >= bot.view_radius or dist == 0.0:
        return None
    angle = get_angle_diff(direction(bot.heading), offset)
    if not _within_fov(bot, angle):
        return None
    return dist, angle


def sees_line(bot: "Bot", boundary: Line) -> Optional[Percept]:
    """Nearest visible point of ``boundary`` as (distance, angle from heading).

    The perpendicular foot is used when it falls inside the vision cone;
    otherwise the cone's two edge rays are intersected with the boundary and
    the nearer forward hit is reported at its edge angle.
    """
    position = bot.position
    view_radius = bot.view_radius

    nearest = line_intersects_line(Line(position, boundary.angle + PI_HALF), boundary)
    if nearest is not None:
        dist = distance(nearest, position)
        if 0.0 < dist < view_radius:
            angle = get_angle_diff(direction(bot.heading), sub(nearest, position))
            if _within_fov(bot, angle):
                return dist, angle

    half_fov = bot.fov / 2.0
    best: Optional[Percept] = None
    for edge_angle in (-half_fov, half_fov):
        ray_angle = bot.heading + edge_angle
        hit = line_intersects_line(Line(position, ray_angle), boundary)
        if hit is None:
            continue
        offset = sub(hit, position)
        if dot(offset, direction(ray_angle)) <= 0.0:
            continue
        dist = distance(hit, position)
        if dist >= view_radius:
            continue
        if best is None or dist < best[0]:
            best = (dist, edge_angle)
    return best


def nearest_boundary(bot: "Bot", boundaries: Sequence[Line]) -> Optional[Percept]:
    best: Optional[Percept] = None
    for boundary in boundaries:
        percept = sees_line(bot, boundary)
        if percept is not None and (best is None or percept[0] < best[0]):
            best = percept
    return best


def nearest_food(bot: "Bot", foods: Iterable["Food"]) -> Optional[Percept]:
    best: Optional[Percept] = None
    for food in foods:
        percept = sees_point(bot, food.position)
        if percept is not None and (best is None or percept[0] < best[0]):
            best = percept
    return best


def sense(bot: "Bot", boundaries: Sequence[Line], foods: Iterable["Food"], size: int) -> Environment:
    environment = Environment(size)
    boundary = nearest_boundary(bot, boundaries)
    if boundary is not None:
        environment.set_boundary(*boundary)
    food = nearest_food(bot, foods)
    if food is not None:
        environment.set_food(*food)
    return environment
