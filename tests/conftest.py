"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from visbase.models.primitives import Position2, Size2
from visbase.models.viewport import Viewport2


# Reference matrices with hand-checked products, determinants and inverses

MATRIX_A = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]
MATRIX_B = [[10.0, 11.0, 12.0], [13.0, 14.0, 15.0], [16.0, 17.0, 18.0]]

# multiply(A, B): A applied first, then B
PRODUCT_A_THEN_B = [[138.0, 171.0, 204.0], [174.0, 216.0, 258.0], [210.0, 261.0, 312.0]]

INVERTIBLE = [[2.0, -1.0, 0.0], [-1.0, 2.0, -1.0], [0.0, -1.0, 2.0]]
INVERTIBLE_INVERSE = [[0.75, 0.5, 0.25], [0.5, 1.0, 0.5], [0.25, 0.5, 0.75]]


def assert_position(actual: Position2, x: float, y: float, abs_tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(x, abs=abs_tol)
    assert actual.y == pytest.approx(y, abs=abs_tol)


@pytest.fixture
def eye() -> np.ndarray:
    return np.eye(3)


@pytest.fixture
def unit_viewport() -> Viewport2:
    return Viewport2(Position2(0.0, 0.0), Size2(10.0, 10.0))


@pytest.fixture
def screen_viewport() -> Viewport2:
    """Top-left origin surface with y growing downward."""
    return Viewport2(Position2(50.0, 50.0), Size2(100.0, 100.0), flipped_y=True)
