"""Tests for 3x3 homogeneous matrix helpers."""

import numpy as np
import pytest

from visbase.utils.matrices import (
    as_2d,
    as_3x2,
    as_homogeneous,
    as_homogeneous_vector,
    determinant,
    identity,
    invert,
    is_finite,
    multiply,
    transform_vector,
)
from tests.conftest import (
    INVERTIBLE,
    INVERTIBLE_INVERSE,
    MATRIX_A,
    MATRIX_B,
    PRODUCT_A_THEN_B,
)


def test_identity_is_fresh_each_call():
    first = identity()
    first[0, 0] = 5.0
    assert identity()[0, 0] == 1.0


def test_multiply_applies_first_argument_first():
    np.testing.assert_allclose(multiply(MATRIX_A, MATRIX_B), PRODUCT_A_THEN_B)


def test_multiply_not_commutative():
    assert not np.allclose(multiply(MATRIX_A, MATRIX_B), multiply(MATRIX_B, MATRIX_A))


def test_multiply_identity_neutral(eye):
    np.testing.assert_allclose(multiply(eye, MATRIX_A), MATRIX_A)
    np.testing.assert_allclose(multiply(MATRIX_A, eye), MATRIX_A)


def test_transform_vector():
    np.testing.assert_allclose(transform_vector([1.0, 4.0, 7.0], MATRIX_B), [138.0, 174.0, 210.0])
    np.testing.assert_allclose(transform_vector([1.0, 4.0, 7.0], MATRIX_A), [30.0, 66.0, 102.0])


def test_3x2_round_trip():
    affine = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [0.0, 0.0, 1.0]]
    reduced = as_3x2(affine)
    assert reduced.shape == (2, 3)
    np.testing.assert_allclose(as_homogeneous(reduced), affine)


def test_vector_conversions():
    np.testing.assert_allclose(as_homogeneous_vector([3.0, 4.0]), [3.0, 4.0, 1.0])
    np.testing.assert_allclose(as_2d([3.0, 4.0, 1.0]), [3.0, 4.0])


def test_determinant():
    assert determinant(INVERTIBLE) == pytest.approx(4.0)
    assert determinant(MATRIX_A) == pytest.approx(0.0)
    assert determinant(np.eye(3)) == pytest.approx(1.0)


def test_determinant_matches_numpy_on_general_matrix():
    m = [[3.0, 1.0, 4.0], [1.0, 5.0, 9.0], [2.0, 6.0, 5.0]]
    assert determinant(m) == pytest.approx(np.linalg.det(m))


def test_invert():
    np.testing.assert_allclose(invert(INVERTIBLE), INVERTIBLE_INVERSE)
    np.testing.assert_allclose(multiply(INVERTIBLE, invert(INVERTIBLE)), np.eye(3), atol=1e-12)


def test_invert_singular_is_non_finite():
    result = invert(MATRIX_A)
    assert not is_finite(result)


def test_invert_zero_matrix_does_not_raise():
    result = invert(np.zeros((3, 3)))
    assert np.all(np.isnan(result))


def test_is_finite():
    assert is_finite(np.eye(3))
    m = np.eye(3)
    m[1, 2] = np.inf
    assert not is_finite(m)
