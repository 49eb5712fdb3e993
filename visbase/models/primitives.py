"""2D value types: vectors, positions, sizes and colors.

All types are frozen; arithmetic returns new values. Non-finite floats are
accepted and propagate through every operation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, overload

import numpy as np

from visbase.utils.math_helpers import ieee_divide
from visbase.utils.matrices import as_homogeneous_vector, transform_vector


@dataclass(frozen=True)
class Vector2:
    """A displacement in the plane."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector. A zero vector yields nan components."""
        return self / self.length()

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(ieee_divide(self.x, divisor), ieee_divide(self.y, divisor))

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class Position2:
    """An affine point in the plane."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Position2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Position2:
        return cls(1.0, 1.0)

    def vector_to(self, other: Position2) -> Vector2:
        return Vector2(other.x - self.x, other.y - self.y)

    def distance_to(self, other: Position2) -> float:
        return self.vector_to(other).length()

    def transform(self, transformation: Any) -> Position2:
        """Apply a 3x3 matrix, or anything exposing ``matrix()`` (ops, pipelines)."""
        if hasattr(transformation, "matrix"):
            matrix = transformation.matrix()
        else:
            matrix = np.asarray(transformation, dtype=np.float64)
        result = transform_vector(as_homogeneous_vector((self.x, self.y)), matrix)
        return Position2(float(result[0]), float(result[1]))

    def __add__(self, other: Vector2) -> Position2:
        return Position2(self.x + other.x, self.y + other.y)

    @overload
    def __sub__(self, other: Position2) -> Vector2: ...

    @overload
    def __sub__(self, other: Vector2) -> Position2: ...

    def __sub__(self, other: Vector2 | Position2) -> Vector2 | Position2:
        # point - point is a displacement; point - vector is a point
        if isinstance(other, Position2):
            return Vector2(self.x - other.x, self.y - other.y)
        return Position2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size2:
    width: float
    height: float

    @classmethod
    def zero(cls) -> Size2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Size2:
        return cls(1.0, 1.0)

    def scale(self, width_factor: float, height_factor: float) -> Size2:
        return Size2(self.width * width_factor, self.height * height_factor)


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 integer channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Color channel {name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} out of range 0-255: {value}")
            object.__setattr__(self, name, int(value))

    @classmethod
    def named(cls, name: str) -> Color:
        """Look up a preset by name, e.g. ``Color.named("magenta")``."""
        try:
            return PRESETS[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown color preset: {name!r}") from None

    def float_array(self) -> tuple[float, float, float, float]:
        """Channels normalized to 0..1."""
        return (
            self.red / 255.0,
            self.green / 255.0,
            self.blue / 255.0,
            self.alpha / 255.0,
        )


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)

PRESETS: dict[str, Color] = {
    "transparent": TRANSPARENT,
    "white": WHITE,
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "cyan": CYAN,
    "magenta": MAGENTA,
}
