"""Tests for the per-geometry transform pipeline."""

import math

import numpy as np

from visbase.engine.pipeline import TransformPipeline
from visbase.engine.transforms import Rotation, Scale, Translation
from visbase.models.primitives import Position2, Vector2
from tests.conftest import assert_position


def test_empty_pipeline_is_identity():
    pipeline = TransformPipeline()
    assert len(pipeline) == 0
    np.testing.assert_allclose(pipeline.matrix(), np.eye(3))


def test_append_returns_new_pipeline():
    base = TransformPipeline()
    moved = base.append(Translation(Vector2(1.0, 0.0)))
    assert len(base) == 0
    assert len(moved) == 1
    assert list(moved) == [Translation(Vector2(1.0, 0.0))]


def test_first_appended_is_applied_first():
    pipeline = TransformPipeline().append(Translation(Vector2(1.0, 0.0))).append(Rotation(math.pi / 2))
    assert_position(Position2(0.0, 0.0).transform(pipeline), 0.0, 1.0)


def test_branches_do_not_share_ops():
    base = TransformPipeline().append(Scale(2.0, 2.0))
    left = base.append(Rotation(1.0))
    right = base.append(Translation(Vector2(1.0, 1.0)))
    assert left.ops[1] != right.ops[1]
    assert len(base) == 1


def test_reverse_undoes_pipeline():
    pipeline = (
        TransformPipeline()
        .append(Translation(Vector2(4.0, -1.0)))
        .append(Rotation(0.9))
        .append(Scale(3.0, 0.5))
    )
    p = Position2(7.0, 2.0)
    assert_position(p.transform(pipeline).transform(pipeline.reverse()), 7.0, 2.0)


def test_reverse_twice_restores_matrix():
    pipeline = TransformPipeline((Rotation(0.4), Translation(Vector2(2.0, 3.0)), Scale(2.0, 5.0)))
    np.testing.assert_allclose(pipeline.reverse().reverse().matrix(), pipeline.matrix(), atol=1e-12)


def test_matrix_3x2():
    pipeline = TransformPipeline((Translation(Vector2(2.0, 3.0)),))
    np.testing.assert_allclose(pipeline.matrix_3x2(), [[1.0, 0.0, 2.0], [0.0, 1.0, 3.0]])
