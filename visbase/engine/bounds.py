"""Bounding-box engine: axis-aligned extents of transformed geometry trees.

Leaves contribute their vertices after their own pipeline is applied. Groups
fold the extreme corners of the children that have an extent. A geometry
without any vertices (an empty group, an empty polyline) yields the sentinel
corners ``(MAX, MAX)`` for the minimum and ``(-MAX, -MAX)`` for the maximum,
an inverted box that callers must read as "no extent".

Nothing is cached; every query walks the tree again.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Callable

import numpy as np
from numpy.typing import NDArray

from visbase.config import settings
from visbase.models.primitives import Position2, Size2

if TYPE_CHECKING:
    from visbase.engine.geometry import Geometry

logger = logging.getLogger(__name__)

MAX_COORDINATE = sys.float_info.max
EMPTY_MIN_CORNER = Position2(MAX_COORDINATE, MAX_COORDINATE)
EMPTY_MAX_CORNER = Position2(-MAX_COORDINATE, -MAX_COORDINATE)

Reducer = Callable[..., NDArray[np.float64]]


def transformed_vertices(geometry: Geometry) -> NDArray[np.float64]:
    """Nx2 array of a leaf's vertices mapped through its pipeline."""
    vertices = geometry.vertices()
    if not vertices:
        return np.empty((0, 2), dtype=np.float64)
    homogeneous = np.array([[v.x, v.y, 1.0] for v in vertices], dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        transformed = homogeneous @ geometry.pipeline.matrix().T
    return transformed[:, :2]


def check_group_depth(depth: int) -> None:
    """Reject a group nested ``depth`` groups below the root (the root is 0)."""
    limit = settings.visbase_max_group_depth
    if depth >= limit:
        logger.warning("Group nesting exceeds %d levels", limit)
        raise ValueError(f"Groups nested deeper than {limit} levels")


def _extreme_corner(geometry: Geometry, reducer: Reducer, depth: int = 0) -> NDArray[np.float64] | None:
    if geometry.is_group:
        check_group_depth(depth)
        corners = []
        for child in geometry.children:
            corner = _extreme_corner(child, reducer, depth + 1)
            if corner is not None:
                corners.append(corner)
        if not corners:
            return None
        return reducer(np.stack(corners), axis=0)

    points = transformed_vertices(geometry)
    if len(points) == 0:
        return None
    return reducer(points, axis=0)


def _as_position(corner: NDArray[np.float64] | None, sentinel: Position2) -> Position2:
    if corner is None:
        return sentinel
    return Position2(float(corner[0]), float(corner[1]))


def min_corner(geometry: Geometry) -> Position2:
    return _as_position(_extreme_corner(geometry, np.min), EMPTY_MIN_CORNER)


def max_corner(geometry: Geometry) -> Position2:
    return _as_position(_extreme_corner(geometry, np.max), EMPTY_MAX_CORNER)


def bounding_box(geometry: Geometry) -> tuple[Position2, Position2]:
    """``(min_corner, max_corner)`` of the transformed geometry."""
    return min_corner(geometry), max_corner(geometry)


def center_of_bounding_box(geometry: Geometry) -> Position2:
    low, high = bounding_box(geometry)
    # halves first: the empty sentinel box stays finite and centers on the origin
    return Position2(high.x / 2.0 + low.x / 2.0, high.y / 2.0 + low.y / 2.0)


def size_of_bounding_box(geometry: Geometry) -> Size2:
    low, high = bounding_box(geometry)
    return Size2(high.x - low.x, high.y - low.y)


def is_empty_box(low: Position2, high: Position2) -> bool:
    """True for the inverted sentinel box of a geometry without extent."""
    return low.x > high.x or low.y > high.y
