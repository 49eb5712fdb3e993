"""visbase: 2D affine transforms, geometry values and viewport remapping."""

from visbase.engine import (
    Circle,
    Composition,
    Custom,
    Ellipse,
    Geometry,
    Group,
    Identity,
    Image,
    IsotropicScale,
    Line,
    Point,
    Polygon,
    Polyline,
    Rectangle,
    ReflectionX,
    ReflectionY,
    Rotation,
    Scale,
    ShearX,
    ShearXByAngle,
    ShearY,
    ShearYByAngle,
    Square,
    TransformOp,
    TransformPipeline,
    Translation,
    Triangle,
    viewport_transformation,
)
from visbase.models.primitives import Color, Position2, Size2, Vector2
from visbase.models.viewport import Viewport2, Viewport2Mode

__version__ = "0.1.0"

__all__ = [
    "Circle",
    "Color",
    "Composition",
    "Custom",
    "Ellipse",
    "Geometry",
    "Group",
    "Identity",
    "Image",
    "IsotropicScale",
    "Line",
    "Point",
    "Polygon",
    "Polyline",
    "Position2",
    "Rectangle",
    "ReflectionX",
    "ReflectionY",
    "Rotation",
    "Scale",
    "ShearX",
    "ShearXByAngle",
    "ShearY",
    "ShearYByAngle",
    "Size2",
    "Square",
    "TransformOp",
    "TransformPipeline",
    "Translation",
    "Triangle",
    "Vector2",
    "Viewport2",
    "Viewport2Mode",
    "viewport_transformation",
]
