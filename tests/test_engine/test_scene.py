"""Tests for scene snapshots and the environment/visualiser contracts."""

import pytest
from pydantic import ValidationError

from visbase.contracts import (
    PixelArrayDrawableEnvironment,
    TextVisualiser,
    TwoDimensionalDrawableEnvironment,
    TwoDimensionalVisualiser,
)
from visbase.engine.geometry import circle, line
from visbase.models.pixels import PixelArray
from visbase.models.primitives import WHITE, Position2, Size2
from visbase.models.scene import SceneDescription
from visbase.models.viewport import Viewport2, Viewport2Mode


class TwoCircles(TwoDimensionalDrawableEnvironment):
    def draw_two_dimensional(self):
        return [circle(Position2(0.0, 0.0), 5.0), circle(Position2(20.0, 0.0), 5.0)]

    def preferred_view(self):
        return Viewport2(Position2(10.0, 0.0), Size2(40.0, 20.0)), Viewport2Mode.KEEP_ASPECT_RATIO

    def preferred_background_color(self):
        return WHITE


class Bare(TwoDimensionalDrawableEnvironment):
    def draw_two_dimensional(self):
        return [line(Position2(0.0, 0.0), Position2(1.0, 1.0))]


class RecordingVisualiser(TwoDimensionalVisualiser):
    def __init__(self):
        self.scenes = []
        self.open = True

    def is_open(self):
        return self.open

    def close(self):
        self.open = False

    def render_two_dimensional(self, environment):
        self.scenes.append(SceneDescription.from_environment(environment))


def test_scene_from_environment():
    scene = SceneDescription.from_environment(TwoCircles())
    assert len(scene.geometries) == 2
    assert scene.preferred_view[1] is Viewport2Mode.KEEP_ASPECT_RATIO
    assert scene.preferred_background_color == WHITE
    assert scene.bounding_box() == (Position2(-5.0, -5.0), Position2(25.0, 5.0))
    assert scene.size_of_bounding_box() == Size2(30.0, 10.0)


def test_environment_defaults():
    env = Bare()
    assert env.preferred_view() is None
    assert env.preferred_background_color() is None
    assert env.suggested_rendered_steps_per_second() is None
    scene = SceneDescription.from_environment(env)
    assert scene.preferred_view is None


def test_scene_rejects_non_geometry():
    with pytest.raises(ValidationError):
        SceneDescription(geometries=["circle"])


def test_scene_is_frozen():
    scene = SceneDescription()
    with pytest.raises(ValidationError):
        scene.preferred_background_color = WHITE


def test_visualiser_renders_snapshots():
    visualiser = RecordingVisualiser()
    visualiser.render_two_dimensional(TwoCircles())
    assert visualiser.is_open()
    visualiser.close()
    assert not visualiser.is_open()
    assert len(visualiser.scenes) == 1


def test_contracts_are_abstract():
    with pytest.raises(TypeError):
        TwoDimensionalDrawableEnvironment()
    with pytest.raises(TypeError):
        TextVisualiser()

    class Blank(PixelArrayDrawableEnvironment):
        def draw_pixel_array(self):
            return PixelArray(1, 1)

    assert Blank().draw_pixel_array() == PixelArray(1, 1)
