"""3x3 homogeneous matrix helpers. Leaf module, no engine imports.

Matrices are row-major and act on column vectors ``[x, y, 1]``.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


def identity() -> NDArray[np.float64]:
    return np.eye(3, dtype=np.float64)


def multiply(matrix_a: ArrayLike, matrix_b: ArrayLike) -> NDArray[np.float64]:
    """Fold step for transform sequences: apply ``matrix_a`` first, then ``matrix_b``.

    Equivalent to ``matrix_b @ matrix_a``. Not commutative.
    """
    a = np.asarray(matrix_a, dtype=np.float64)
    b = np.asarray(matrix_b, dtype=np.float64)
    return b @ a


def transform_vector(vector: ArrayLike, matrix: ArrayLike) -> NDArray[np.float64]:
    """Apply a 3x3 matrix to a homogeneous 3-vector."""
    return np.asarray(matrix, dtype=np.float64) @ np.asarray(vector, dtype=np.float64)


def as_3x2(matrix: ArrayLike) -> NDArray[np.float64]:
    """Drop the homogeneous row, keeping the affine coefficients."""
    return np.array(np.asarray(matrix, dtype=np.float64)[:2], dtype=np.float64)


def as_homogeneous(matrix: ArrayLike) -> NDArray[np.float64]:
    """Inverse of ``as_3x2``: append the ``[0, 0, 1]`` row."""
    m = np.asarray(matrix, dtype=np.float64)
    return np.vstack([m, [0.0, 0.0, 1.0]])


def as_2d(vector: ArrayLike) -> NDArray[np.float64]:
    return np.array(np.asarray(vector, dtype=np.float64)[:2], dtype=np.float64)


def as_homogeneous_vector(vector: ArrayLike) -> NDArray[np.float64]:
    v = np.asarray(vector, dtype=np.float64)
    return np.array([v[0], v[1], 1.0], dtype=np.float64)


def determinant(matrix: ArrayLike) -> float:
    """Cofactor expansion along the first row."""
    m = np.asarray(matrix, dtype=np.float64)
    return float(
        m[0, 0] * (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1])
        - m[0, 1] * (m[1, 0] * m[2, 2] - m[1, 2] * m[2, 0])
        + m[0, 2] * (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0])
    )


def invert(matrix: ArrayLike) -> NDArray[np.float64]:
    """Adjugate over determinant.

    A singular matrix is not special-cased: the division yields ``inf``/``nan``
    entries and callers must check finiteness themselves.
    """
    m = np.asarray(matrix, dtype=np.float64)
    det = determinant(m)
    if det == 0.0:
        logger.debug("Inverting singular matrix, result will be non-finite")

    adjugate = np.array(
        [
            [
                m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1],
                m[0, 2] * m[2, 1] - m[0, 1] * m[2, 2],
                m[0, 1] * m[1, 2] - m[0, 2] * m[1, 1],
            ],
            [
                m[1, 2] * m[2, 0] - m[1, 0] * m[2, 2],
                m[0, 0] * m[2, 2] - m[0, 2] * m[2, 0],
                m[0, 2] * m[1, 0] - m[0, 0] * m[1, 2],
            ],
            [
                m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0],
                m[0, 1] * m[2, 0] - m[0, 0] * m[2, 1],
                m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0],
            ],
        ],
        dtype=np.float64,
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        return adjugate / np.float64(det)


def is_finite(matrix: ArrayLike) -> bool:
    """True when every entry is a finite float."""
    return bool(np.all(np.isfinite(np.asarray(matrix, dtype=np.float64))))
