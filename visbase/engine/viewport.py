"""Viewport remapping between producer and visualiser coordinate systems."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from visbase.engine.bounds import center_of_bounding_box, size_of_bounding_box
from visbase.engine.transforms import (
    Composition,
    ReflectionX,
    ReflectionY,
    Scale,
    TransformOp,
    Translation,
)
from visbase.models.primitives import Position2
from visbase.models.viewport import Viewport2
from visbase.utils.math_helpers import ieee_divide

if TYPE_CHECKING:
    from visbase.engine.geometry import Geometry

logger = logging.getLogger(__name__)


def viewport_transformation(source: Viewport2, target: Viewport2) -> Composition:
    """Composition mapping ``source`` coordinates onto ``target`` coordinates.

    Steps, in application order:
    1. translate the source center to the origin
    2. reflect y if the viewports disagree on the y flip
    3. reflect x if they disagree on the x flip
    4. scale by target size / source size, per axis
    5. translate the origin to the target center

    A zero-sized source gives infinite scale factors.
    """
    origin = Position2.zero()
    ops: list[TransformOp] = [Translation(source.center.vector_to(origin))]
    if source.flipped_y != target.flipped_y:
        ops.append(ReflectionY())
    if source.flipped_x != target.flipped_x:
        ops.append(ReflectionX())
    ops.append(
        Scale(
            ieee_divide(target.size.width, source.size.width),
            ieee_divide(target.size.height, source.size.height),
        )
    )
    ops.append(Translation(origin.vector_to(target.center)))

    logger.debug("Viewport transformation %s -> %s: %d steps", source, target, len(ops))
    return Composition("ViewportTransformation", tuple(ops))


def viewport_of(geometry: Geometry, flipped_x: bool = False, flipped_y: bool = False) -> Viewport2:
    """The viewport exactly covering a geometry's bounding box."""
    return Viewport2(
        center_of_bounding_box(geometry),
        size_of_bounding_box(geometry),
        flipped_x,
        flipped_y,
    )
