from __future__ import annotations

import math
from typing import NamedTuple, Optional, Tuple

from pygame.math import Vector2

PI_DOUBLE = math.pi * 2.0
PI_HALF = math.pi / 2.0

_PARALLEL_EPSILON = 1e-9
_VERTICAL_EPSILON = 1e-9


class Line(NamedTuple):
    """Infinite line (or ray, where the caller checks direction) through ``anchor`` at ``angle`` radians."""

    anchor: Vector2
    angle: float


def length(v: Vector2) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def distance(a: Vector2, b: Vector2) -> float:
    dist_x = a.x - b.x
    dist_y = a.y - b.y
    return math.sqrt(dist_x * dist_x + dist_y * dist_y)


def normalize(v: Vector2) -> Vector2:
    """Unit vector along ``v``; raises ``ZeroDivisionError`` for a zero vector."""
    magnitude = length(v)
    return Vector2(v.x / magnitude, v.y / magnitude)


def dot(a: Vector2, b: Vector2) -> float:
    return a.x * b.x + a.y * b.y


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def is_clockwise(a: Vector2, b: Vector2) -> bool:
    return -a.x * b.y + a.y * b.x > 0.0


def direction(angle: float) -> Vector2:
    return Vector2(math.cos(angle), math.sin(angle))


def wrap_angle(angle: float) -> float:
    """Map ``angle`` into [-pi, pi]."""
    if -math.pi <= angle <= math.pi:
        return angle
    wrapped = math.fmod(angle + math.pi, PI_DOUBLE)
    if wrapped < 0.0:
        wrapped += PI_DOUBLE
    return wrapped - math.pi


def get_angle_diff(a: Vector2, b: Vector2) -> float:
    """Signed angle from ``a`` to ``b``; positive is counter-clockwise."""
    a_norm = normalize(a)
    b_norm = normalize(b)
    return wrap_angle(math.atan2(b_norm.y, b_norm.x) - math.atan2(a_norm.y, a_norm.x))


def _is_vertical(angle: float) -> bool:
    return abs(math.cos(angle)) < _VERTICAL_EPSILON


def _slope_intercept(line: Line) -> Tuple[float, float]:
    slope = math.tan(line.angle)
    return slope, line.anchor.y - slope * line.anchor.x


def line_intersects_line(line_a: Line, line_b: Line) -> Optional[Vector2]:
    vertical_a = _is_vertical(line_a.angle)
    vertical_b = _is_vertical(line_b.angle)
    if vertical_a and vertical_b:
        return None
    if vertical_a or vertical_b:
        vertical, other = (line_a, line_b) if vertical_a else (line_b, line_a)
        slope, intercept = _slope_intercept(other)
        x = vertical.anchor.x
        return Vector2(x, slope * x + intercept)

    slope_a, intercept_a = _slope_intercept(line_a)
    slope_b, intercept_b = _slope_intercept(line_b)
    if abs(slope_a - slope_b) < _PARALLEL_EPSILON:
        return None
    x = (intercept_b - intercept_a) / (slope_a - slope_b)
    return Vector2(x, slope_a * x + intercept_a)


def circle_intersects_line(
    center: Vector2, radius: float, line: Line
) -> Tuple[Optional[Vector2], Optional[Vector2]]:
    """Intersections of a circle with an infinite line.

    Returns ``(None, None)`` when they miss, ``(point, None)`` when the line is
    tangent and two points otherwise.
    """
    if _is_vertical(line.angle):
        x = line.anchor.x
        remainder = radius * radius - (x - center.x) ** 2
        if remainder < 0.0:
            return None, None
        if remainder == 0.0:
            return Vector2(x, center.y), None
        offset = math.sqrt(remainder)
        return Vector2(x, center.y + offset), Vector2(x, center.y - offset)

    slope, intercept = _slope_intercept(line)
    shifted = intercept - center.y
    a = 1.0 + slope * slope
    b = 2.0 * (slope * shifted - center.x)
    c = center.x * center.x + shifted * shifted - radius * radius
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None, None
    if discriminant == 0.0:
        x = -b / (2.0 * a)
        return Vector2(x, slope * x + intercept), None
    root = math.sqrt(discriminant)
    x1 = (-b + root) / (2.0 * a)
    x2 = (-b - root) / (2.0 * a)
    return Vector2(x1, slope * x1 + intercept), Vector2(x2, slope * x2 + intercept)
