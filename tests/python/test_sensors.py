from __future__ import annotations

import math

import pytest
from pygame.math import Vector2
from pytest import approx

from neurobots.sim.core.bot import Bot
from neurobots.sim.core.environment import BOUNDARY_ANGLE, BOUNDARY_DISTANCE, FOOD_ANGLE, FOOD_DISTANCE
from neurobots.sim.core.food import Food
from neurobots.sim.core.rng import DeterministicRng
from neurobots.sim.systems.sensors import (
    build_boundaries,
    nearest_boundary,
    nearest_food,
    sees_line,
    sees_point,
    sense,
)
from neurobots.sim.utils.math2d import Line, direction

FIELD = (800.0, 600.0)


def _make_bot(x: float, y: float, heading: float) -> Bot:
    bot = Bot(4, 4, 10.0, 5.0, DeterministicRng(1))
    bot.position = Vector2(x, y)
    bot.heading = heading
    return bot


def test_bot_vision_defaults():
    bot = _make_bot(0.0, 0.0, 0.0)
    assert bot.view_radius == approx(80.0)
    assert bot.fov == approx(math.pi / 2)


def test_point_at_view_radius_is_not_seen():
    bot = _make_bot(0.0, 0.0, 0.0)
    assert sees_point(bot, Vector2(80.0, 0.0)) is None
    hit = sees_point(bot, Vector2(79.9, 0.0))
    assert hit is not None
    assert hit == approx((79.9, 0.0))


def test_point_on_fov_edge_is_seen():
    bot = _make_bot(0.0, 0.0, 0.0)

    left = sees_point(bot, Vector2(10.0, 10.0))
    right = sees_point(bot, Vector2(10.0, -10.0))

    assert left is not None and left[1] == approx(math.pi / 4)
    assert right is not None and right[1] == approx(-math.pi / 4)
    assert sees_point(bot, Vector2(10.0, 10.5)) is None


@pytest.mark.parametrize("heading", [-9.7, -7.3, -2.2, 0.9, 2.4, 5.5, 9.1])
@pytest.mark.parametrize("side", [1.0, -1.0])
def test_point_on_fov_edge_is_seen_at_rotated_headings(heading, side):
    bot = _make_bot(100.0, 100.0, heading)
    edge = bot.position + direction(heading + side * math.pi / 4) * 20.0
    outside = bot.position + direction(heading + side * (math.pi / 4 + 0.01)) * 20.0

    hit = sees_point(bot, edge)

    assert hit is not None
    assert hit[0] == approx(20.0)
    assert hit[1] == approx(side * math.pi / 4)
    assert sees_point(bot, outside) is None


def test_point_behind_is_not_seen():
    bot = _make_bot(100.0, 100.0, math.pi)
    assert sees_point(bot, Vector2(120.0, 100.0)) is None
    hit = sees_point(bot, Vector2(80.0, 100.0))
    assert hit is not None and hit[0] == approx(20.0)
    assert hit[1] == approx(0.0, abs=1e-9)


def test_boundaries_cover_field_edges():
    top, bottom, left, right = build_boundaries(FIELD)
    assert top.anchor.y == 0.0 and top.angle == 0.0
    assert bottom.anchor.y == 600.0
    assert left.anchor.x == 0.0 and left.angle == approx(math.pi / 2)
    assert right.anchor.x == 800.0


def test_wall_straight_ahead_uses_perpendicular_foot():
    bot = _make_bot(760.0, 300.0, 0.0)
    right = build_boundaries(FIELD)[3]

    hit = sees_line(bot, right)

    assert hit is not None
    assert hit[0] == approx(40.0)
    assert hit[1] == approx(0.0, abs=1e-9)


def test_wall_off_centre_uses_edge_ray():
    # Heading 50 degrees away from the wall normal: the foot is outside the
    # cone but the right edge ray (heading - 45 degrees) still reaches the wall.
    heading = math.radians(50)
    bot = _make_bot(760.0, 300.0, heading)
    right = build_boundaries(FIELD)[3]

    hit = sees_line(bot, right)

    assert hit is not None
    edge = heading - math.pi / 4
    assert hit[1] == approx(-math.pi / 4)
    assert hit[0] == approx(40.0 / math.cos(edge))


def test_wall_behind_is_not_seen():
    bot = _make_bot(760.0, 300.0, math.pi)
    right = build_boundaries(FIELD)[3]
    assert sees_line(bot, right) is None


def test_wall_out_of_range_is_not_seen():
    bot = _make_bot(400.0, 300.0, 0.0)
    assert sees_line(bot, build_boundaries(FIELD)[3]) is None
    assert nearest_boundary(bot, build_boundaries(FIELD)) is None


def test_edge_ray_beyond_view_radius_is_dropped():
    # Foot is 60 degrees off heading, so only the edge ray at 15 degrees can hit.
    # At 70 away it lands at ~72.5; at 80 away it lands at ~82.8, past the view radius.
    heading = math.radians(60)
    near = _make_bot(730.0, 300.0, heading)
    far = _make_bot(720.0, 300.0, heading)
    right = build_boundaries(FIELD)[3]

    hit = sees_line(near, right)
    assert hit is not None
    assert hit[0] == approx(70.0 / math.cos(math.radians(15)))
    assert sees_line(far, right) is None


def test_nearest_boundary_picks_closest_wall_in_corner():
    bot = _make_bot(780.0, 570.0, math.pi / 4)
    hit = nearest_boundary(bot, build_boundaries(FIELD))
    assert hit is not None
    assert hit[0] == approx(20.0)
    assert hit[1] == approx(-math.pi / 4)


def test_sees_line_accepts_any_line():
    bot = _make_bot(0.0, 0.0, math.pi / 2)
    hit = sees_line(bot, Line(Vector2(0.0, 30.0), 0.0))
    assert hit is not None and hit[0] == approx(30.0)


def test_nearest_food_and_sense():
    bot = _make_bot(400.0, 300.0, 0.0)
    foods = [
        Food(position=Vector2(450.0, 300.0), size=5.0, energy=10.0),
        Food(position=Vector2(420.0, 310.0), size=5.0, energy=10.0),
        Food(position=Vector2(380.0, 300.0), size=5.0, energy=10.0),
    ]

    hit = nearest_food(bot, foods)
    assert hit is not None
    assert hit[0] == approx(math.hypot(20.0, 10.0))
    assert hit[1] == approx(math.atan2(10.0, 20.0))

    environment = sense(bot, build_boundaries(FIELD), foods, 4)
    assert environment.input[BOUNDARY_DISTANCE] == 0.0
    assert environment.input[BOUNDARY_ANGLE] == 0.0
    assert environment.input[FOOD_DISTANCE] == approx(hit[0])
    assert environment.input[FOOD_ANGLE] == approx(hit[1])
