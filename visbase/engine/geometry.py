"""Geometry model: drawable primitives and nested groups.

Every variant is a frozen value carrying its own style and its own
``TransformPipeline``. Builders never mutate; they return a new geometry
with exactly one field changed.

Style builders are silent no-ops on variants they do not apply to: a fill
color on a ``Line`` or a corner shape on a ``Circle`` returns the geometry
unchanged. ``Group`` forwards every builder to all of its children, and an
appended transform lands in each child's own pipeline (groups carry no
pipeline of their own).

Usage:
    scene = group([circle(Position2(0, 0), 5), circle(Position2(20, 0), 5)])
    scene = scene.with_fill_color(RED).rotate_around_self(math.pi / 4)
    scene.bounding_box()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from visbase.engine.bounds import (
    bounding_box,
    center_of_bounding_box,
    check_group_depth,
    max_corner,
    min_corner,
    size_of_bounding_box,
    transformed_vertices,
)
from visbase.engine.pipeline import TransformPipeline
from visbase.engine.transforms import TransformOp, Translation, rotation_around_position
from visbase.engine.viewport import viewport_transformation
from visbase.models.primitives import BLACK, TRANSPARENT, Color, Position2, Size2, Vector2
from visbase.models.style import CornerShape, LineShape, SquareCorner
from visbase.models.texture import TextureRef
from visbase.models.viewport import Viewport2


class Geometry(ABC):
    """Base of every drawable variant."""

    is_group = False

    # Field each style builder writes; None makes the builder a no-op
    _fill_field: str | None = None
    _stroke_color_field: str | None = None
    _stroke_width_field: str | None = None
    _line_shape_field: str | None = None
    _corner_shape_field: str | None = None

    @abstractmethod
    def vertices(self) -> tuple[Position2, ...]:
        """Defining vertices before the pipeline is applied."""

    def _restyle(self, slot: str, value: Any, depth: int = 0) -> Geometry:
        field_name = getattr(self, slot)
        if field_name is None:
            return self
        return replace(self, **{field_name: value})

    # --- style builders ---

    def with_fill_color(self, color: Color) -> Geometry:
        return self._restyle("_fill_field", color)

    def with_line_or_border_color(self, color: Color) -> Geometry:
        return self._restyle("_stroke_color_field", color)

    def with_line_or_border_width(self, width: float) -> Geometry:
        return self._restyle("_stroke_width_field", width)

    def with_line_shape(self, shape: LineShape) -> Geometry:
        return self._restyle("_line_shape_field", shape)

    def with_corner_shape(self, shape: CornerShape) -> Geometry:
        return self._restyle("_corner_shape_field", shape)

    # --- transform builders ---

    def append_transformation(self, op: TransformOp) -> Geometry:
        return self._append(op)

    def _append(self, op: TransformOp, depth: int = 0) -> Geometry:
        return replace(self, pipeline=self.pipeline.append(op))

    def move_by(self, distance: Vector2) -> Geometry:
        return self.append_transformation(Translation(distance))

    def move_to(self, position: Position2) -> Geometry:
        """Translate so the bounding-box center lands on ``position``."""
        return self.move_by(center_of_bounding_box(self).vector_to(position))

    def rotate_around(self, position: Position2, angle: float) -> Geometry:
        return self.append_transformation(rotation_around_position(position, angle))

    def rotate_around_origin(self, angle: float) -> Geometry:
        return self.rotate_around(Position2.zero(), angle)

    def rotate_around_self(self, angle: float) -> Geometry:
        return self.rotate_around(center_of_bounding_box(self), angle)

    def scale_position(self, factor: float) -> Geometry:
        """Move the bounding-box center ``c`` to ``c * factor``. The extent is kept."""
        center = center_of_bounding_box(self)
        origin = Position2.zero()
        return self.move_to(origin + origin.vector_to(center) * factor)

    def transform(self, source: Viewport2, target: Viewport2) -> Geometry:
        """Remap from ``source`` viewport coordinates into ``target`` coordinates."""
        return self.append_transformation(viewport_transformation(source, target))

    # --- bounding-box queries ---

    def min_corner(self) -> Position2:
        return min_corner(self)

    def max_corner(self) -> Position2:
        return max_corner(self)

    def bounding_box(self) -> tuple[Position2, Position2]:
        return bounding_box(self)

    def center_of_bounding_box(self) -> Position2:
        return center_of_bounding_box(self)

    def size_of_bounding_box(self) -> Size2:
        return size_of_bounding_box(self)


def _box_corners(center: Position2, width: float, height: float) -> tuple[Position2, ...]:
    half_w, half_h = width / 2.0, height / 2.0
    return (
        center - Vector2(half_w, half_h),
        center - Vector2(-half_w, half_h),
        center - Vector2(-half_w, -half_h),
        center - Vector2(half_w, -half_h),
    )


def _freeze_points(geometry: Geometry, expected: int | None = None) -> None:
    points = tuple(geometry.points)
    if expected is not None and len(points) != expected:
        raise ValueError(
            f"{type(geometry).__name__} needs exactly {expected} points, got {len(points)}"
        )
    object.__setattr__(geometry, "points", points)


@dataclass(frozen=True)
class Point(Geometry):
    position: Position2
    color: Color = BLACK
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "color"

    def vertices(self) -> tuple[Position2, ...]:
        return (self.position,)


@dataclass(frozen=True)
class Line(Geometry):
    points: tuple[Position2, Position2]
    line_color: Color = BLACK
    line_width: float = 1.0
    line_shape: LineShape = LineShape.SQUARE
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _stroke_color_field = "line_color"
    _stroke_width_field = "line_width"
    _line_shape_field = "line_shape"

    def __post_init__(self) -> None:
        _freeze_points(self, 2)

    def vertices(self) -> tuple[Position2, ...]:
        return self.points


@dataclass(frozen=True)
class Polyline(Geometry):
    points: tuple[Position2, ...]
    line_color: Color = BLACK
    line_width: float = 1.0
    line_shape: LineShape = LineShape.SQUARE
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _stroke_color_field = "line_color"
    _stroke_width_field = "line_width"
    _line_shape_field = "line_shape"

    def __post_init__(self) -> None:
        _freeze_points(self)

    def vertices(self) -> tuple[Position2, ...]:
        return self.points


@dataclass(frozen=True)
class Triangle(Geometry):
    points: tuple[Position2, Position2, Position2]
    fill_color: Color = BLACK
    border_color: Color = TRANSPARENT
    border_width: float = 0.0
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "fill_color"
    _stroke_color_field = "border_color"
    _stroke_width_field = "border_width"

    def __post_init__(self) -> None:
        _freeze_points(self, 3)

    def vertices(self) -> tuple[Position2, ...]:
        return self.points


@dataclass(frozen=True)
class Square(Geometry):
    center: Position2
    edge_length: float
    fill_color: Color = BLACK
    border_color: Color = TRANSPARENT
    border_width: float = 0.0
    corner_shape: CornerShape = field(default_factory=SquareCorner)
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "fill_color"
    _stroke_color_field = "border_color"
    _stroke_width_field = "border_width"
    _corner_shape_field = "corner_shape"

    def vertices(self) -> tuple[Position2, ...]:
        return _box_corners(self.center, self.edge_length, self.edge_length)


@dataclass(frozen=True)
class Rectangle(Geometry):
    center: Position2
    size: Size2
    fill_color: Color = BLACK
    border_color: Color = TRANSPARENT
    border_width: float = 0.0
    corner_shape: CornerShape = field(default_factory=SquareCorner)
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "fill_color"
    _stroke_color_field = "border_color"
    _stroke_width_field = "border_width"
    _corner_shape_field = "corner_shape"

    def vertices(self) -> tuple[Position2, ...]:
        return _box_corners(self.center, self.size.width, self.size.height)


@dataclass(frozen=True)
class Polygon(Geometry):
    points: tuple[Position2, ...]
    fill_color: Color = BLACK
    border_color: Color = TRANSPARENT
    border_width: float = 0.0
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "fill_color"
    _stroke_color_field = "border_color"
    _stroke_width_field = "border_width"

    def __post_init__(self) -> None:
        _freeze_points(self)

    def vertices(self) -> tuple[Position2, ...]:
        return self.points


@dataclass(frozen=True)
class Circle(Geometry):
    center: Position2
    radius: float
    fill_color: Color = BLACK
    border_color: Color = TRANSPARENT
    border_width: float = 0.0
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "fill_color"
    _stroke_color_field = "border_color"
    _stroke_width_field = "border_width"

    def vertices(self) -> tuple[Position2, ...]:
        return _box_corners(self.center, 2.0 * self.radius, 2.0 * self.radius)


@dataclass(frozen=True)
class Ellipse(Geometry):
    center: Position2
    size: Size2
    fill_color: Color = BLACK
    border_color: Color = TRANSPARENT
    border_width: float = 0.0
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "fill_color"
    _stroke_color_field = "border_color"
    _stroke_width_field = "border_width"

    def vertices(self) -> tuple[Position2, ...]:
        return _box_corners(self.center, self.size.width, self.size.height)


@dataclass(frozen=True)
class Image(Geometry):
    """A texture drawn into the rectangle ``center`` +/- ``size / 2``.

    ``source_rect`` is ``(x, y, width, height)`` in texture pixels; ``fill_tint``
    is multiplied into the texture by the visualiser.
    """

    center: Position2
    size: Size2
    texture: TextureRef
    source_rect: tuple[float, float, float, float] | None = None
    fill_tint: Color | None = None
    pipeline: TransformPipeline = field(default_factory=TransformPipeline)

    _fill_field = "fill_tint"

    def vertices(self) -> tuple[Position2, ...]:
        return _box_corners(self.center, self.size.width, self.size.height)


@dataclass(frozen=True)
class Group(Geometry):
    """Owns its children by value; nesting is a tree, never a graph.

    Builders and bounding-box queries share one nesting limit,
    ``settings.visbase_max_group_depth``, and raise ``ValueError`` past it.
    """

    children: tuple[Geometry, ...] = ()

    is_group = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def vertices(self) -> tuple[Position2, ...]:
        """Vertices of every descendant leaf, each mapped through its own pipeline."""
        return self._collect_vertices(0)

    def _collect_vertices(self, depth: int) -> tuple[Position2, ...]:
        check_group_depth(depth)
        collected: list[Position2] = []
        for child in self.children:
            if child.is_group:
                collected.extend(child._collect_vertices(depth + 1))
            else:
                collected.extend(Position2(float(x), float(y)) for x, y in transformed_vertices(child))
        return tuple(collected)

    def _restyle(self, slot: str, value: Any, depth: int = 0) -> Group:
        check_group_depth(depth)
        children = []
        for child in self.children:
            children.append(child._restyle(slot, value, depth + 1))
        return Group(tuple(children))

    def _append(self, op: TransformOp, depth: int = 0) -> Group:
        check_group_depth(depth)
        children = []
        for child in self.children:
            children.append(child._append(op, depth + 1))
        return Group(tuple(children))


# Constructors with the default styles


def point(position: Position2) -> Point:
    return Point(position)


def line(start: Position2, end: Position2) -> Line:
    return Line((start, end))


def polyline(points: Iterable[Position2]) -> Polyline:
    return Polyline(tuple(points))


def triangle(a: Position2, b: Position2, c: Position2) -> Triangle:
    return Triangle((a, b, c))


def square(center: Position2, edge_length: float) -> Square:
    return Square(center, edge_length)


def rectangle(center: Position2, size: Size2) -> Rectangle:
    return Rectangle(center, size)


def polygon(points: Iterable[Position2]) -> Polygon:
    return Polygon(tuple(points))


def circle(center: Position2, radius: float) -> Circle:
    return Circle(center, radius)


def ellipse(center: Position2, size: Size2) -> Ellipse:
    return Ellipse(center, size)


def image(center: Position2, size: Size2, texture: TextureRef) -> Image:
    return Image(center, size, texture)


def group(geometries: Iterable[Geometry]) -> Group:
    return Group(tuple(geometries))
