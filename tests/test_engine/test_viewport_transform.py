"""Tests for remapping geometry between viewports."""

import math

import pytest

from visbase.engine.geometry import circle, group, square
from visbase.engine.transforms import Composition, ReflectionX, ReflectionY, Scale, Translation
from visbase.engine.viewport import viewport_of, viewport_transformation
from visbase.models.primitives import Position2, Size2, Vector2
from visbase.models.viewport import Viewport2
from tests.conftest import assert_position


def test_steps_without_flip(unit_viewport):
    target = Viewport2(Position2(5.0, 5.0), Size2(20.0, 40.0))
    op = viewport_transformation(unit_viewport, target)
    assert isinstance(op, Composition)
    assert op.name == "ViewportTransformation"
    assert op.ops == (
        Translation(Vector2(0.0, 0.0)),
        Scale(2.0, 4.0),
        Translation(Vector2(5.0, 5.0)),
    )


def test_flip_steps_only_when_flags_differ(unit_viewport):
    both = unit_viewport.with_flipped_x(True).with_flipped_y(True)
    op = viewport_transformation(unit_viewport, both)
    assert [type(step) for step in op.ops] == [Translation, ReflectionY, ReflectionX, Scale, Translation]
    assert len(viewport_transformation(both, both).ops) == 3


def test_maps_into_flipped_screen(unit_viewport, screen_viewport):
    c = circle(Position2(1.0, 2.0), 1.0).transform(unit_viewport, screen_viewport)
    assert_position(c.center_of_bounding_box(), 60.0, 30.0)
    size = c.size_of_bounding_box()
    assert size.width == pytest.approx(20.0)
    assert size.height == pytest.approx(20.0)


def test_round_trip_restores_box(unit_viewport, screen_viewport):
    original = group([circle(Position2(1.0, 2.0), 1.0), square(Position2(-3.0, 0.5), 2.0)])
    there = original.transform(unit_viewport, screen_viewport)
    back = there.transform(screen_viewport, unit_viewport)
    low, high = back.bounding_box()
    expected_low, expected_high = original.bounding_box()
    assert_position(low, expected_low.x, expected_low.y)
    assert_position(high, expected_high.x, expected_high.y)


def test_zero_sized_source_gives_infinite_scale(screen_viewport):
    degenerate = Viewport2(Position2(0.0, 0.0), Size2(0.0, 10.0))
    op = viewport_transformation(degenerate, screen_viewport)
    scale = op.ops[-2]
    assert scale.x_factor == math.inf
    assert scale.y_factor == 10.0


def test_viewport_of_geometry():
    vp = viewport_of(circle(Position2(3.0, 4.0), 2.0), flipped_y=True)
    assert vp.center == Position2(3.0, 4.0)
    assert vp.size == Size2(4.0, 4.0)
    assert vp.flipped_y is True
