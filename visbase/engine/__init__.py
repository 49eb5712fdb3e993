"""visbase transform and geometry engine."""

from visbase.engine.transforms import (
    Composition,
    Custom,
    Identity,
    IsotropicScale,
    ReflectionX,
    ReflectionY,
    Rotation,
    Scale,
    ShearX,
    ShearXByAngle,
    ShearY,
    ShearYByAngle,
    TransformOp,
    Translation,
    rotation_around_position,
)
from visbase.engine.pipeline import TransformPipeline
from visbase.engine.geometry import (
    Circle,
    Ellipse,
    Geometry,
    Group,
    Image,
    Line,
    Point,
    Polygon,
    Polyline,
    Rectangle,
    Square,
    Triangle,
)
from visbase.engine.viewport import viewport_of, viewport_transformation

__all__ = [
    "Circle",
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
    "Rectangle",
    "ReflectionX",
    "ReflectionY",
    "Rotation",
    "Scale",
    "ShearX",
    "ShearXByAngle",
    "ShearY",
    "ShearYByAngle",
    "Square",
    "TransformOp",
    "TransformPipeline",
    "Translation",
    "Triangle",
    "rotation_around_position",
    "viewport_of",
    "viewport_transformation",
]
