"""Affine transform operations and their 3x3 homogeneous matrices.

Every operation is an immutable value. ``matrix()`` realizes it as a fresh
numpy array, so callers can never mutate shared state through the result.

Angles are radians everywhere, shear-by-angle included.

Usage:
    op = Composition("spin", (Translation(Vector2(1, 0)), Rotation(math.pi / 2)))
    Position2(0, 0).transform(op)   # -> Position2(0, 1)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce

import numpy as np
from numpy.typing import NDArray

from visbase.models.primitives import Position2, Vector2
from visbase.utils.matrices import as_3x2, identity, invert, multiply


def _tan(angle: float) -> float:
    # non-finite angles give nan instead of raising
    with np.errstate(invalid="ignore"):
        return float(np.tan(angle))



class TransformOp(ABC):
    """Base of every transform operation."""

    @abstractmethod
    def matrix(self) -> NDArray[np.float64]: ...

    def matrix_3x2(self) -> NDArray[np.float64]:
        return as_3x2(self.matrix())

    def reverse(self) -> TransformOp:
        """The op undoing this one, as a ``Custom`` holding the inverted matrix."""
        return Custom(f"Reverse-{self!r}", invert(self.matrix()))


@dataclass(frozen=True)
class Translation(TransformOp):
    direction: Vector2

    def matrix(self) -> NDArray[np.float64]:
        return np.array(
            [
                [1.0, 0.0, self.direction.x],
                [0.0, 1.0, self.direction.y],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )


@dataclass(frozen=True)
class Identity(TransformOp):
    def matrix(self) -> NDArray[np.float64]:
        return identity()


@dataclass(frozen=True)
class Rotation(TransformOp):
    angle: float

    def matrix(self) -> NDArray[np.float64]:
        with np.errstate(invalid="ignore"):
            cos_a, sin_a = np.cos(self.angle), np.sin(self.angle)
        return np.array(
            [[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )


@dataclass(frozen=True)
class Scale(TransformOp):
    x_factor: float
    y_factor: float

    def matrix(self) -> NDArray[np.float64]:
        return np.diag([self.x_factor, self.y_factor, 1.0]).astype(np.float64)


@dataclass(frozen=True)
class IsotropicScale(TransformOp):
    factor: float

    def matrix(self) -> NDArray[np.float64]:
        return np.diag([self.factor, self.factor, 1.0]).astype(np.float64)


@dataclass(frozen=True)
class ReflectionX(TransformOp):
    """Mirror across the y axis (negates x)."""

    def matrix(self) -> NDArray[np.float64]:
        return np.diag([-1.0, 1.0, 1.0])


@dataclass(frozen=True)
class ReflectionY(TransformOp):
    """Mirror across the x axis (negates y)."""

    def matrix(self) -> NDArray[np.float64]:
        return np.diag([1.0, -1.0, 1.0])


@dataclass(frozen=True)
class ShearX(TransformOp):
    amount: float

    def matrix(self) -> NDArray[np.float64]:
        m = identity()
        m[0, 1] = self.amount
        return m


@dataclass(frozen=True)
class ShearY(TransformOp):
    amount: float

    def matrix(self) -> NDArray[np.float64]:
        m = identity()
        m[1, 0] = self.amount
        return m


@dataclass(frozen=True)
class ShearXByAngle(TransformOp):
    angle: float

    def matrix(self) -> NDArray[np.float64]:
        return ShearX(_tan(self.angle)).matrix()


@dataclass(frozen=True)
class ShearYByAngle(TransformOp):
    angle: float

    def matrix(self) -> NDArray[np.float64]:
        return ShearY(_tan(self.angle)).matrix()


def compose_matrices(ops: tuple[TransformOp, ...]) -> NDArray[np.float64]:
    """Fold op matrices in list order; the first op is applied first. Empty -> identity."""
    return reduce(multiply, (op.matrix() for op in ops), identity())


@dataclass(frozen=True)
class Composition(TransformOp):
    """A named ordered sequence of ops, applied first to last."""

    name: str
    ops: tuple[TransformOp, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ops", tuple(self.ops))

    def matrix(self) -> NDArray[np.float64]:
        return compose_matrices(self.ops)

    def reverse(self) -> Composition:
        # undoing A, B, C means undoing C, then B, then A
        return Composition(
            f"Reverse-{self.name}",
            tuple(op.reverse() for op in reversed(self.ops)),
        )


@dataclass(frozen=True)
class Custom(TransformOp):
    """An arbitrary 3x3 matrix, stored as nested tuples so the op stays hashable."""

    name: str
    values: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        arr = np.asarray(self.values, dtype=np.float64)
        if arr.shape != (3, 3):
            raise ValueError(f"Custom transform {self.name!r} needs a 3x3 matrix, got {arr.shape}")
        object.__setattr__(self, "values", tuple(tuple(float(v) for v in row) for row in arr))

    def matrix(self) -> NDArray[np.float64]:
        return np.array(self.values, dtype=np.float64)


def matrix_of(op: TransformOp) -> NDArray[np.float64]:
    return op.matrix()


def reverse(op: TransformOp) -> TransformOp:
    return op.reverse()


def rotation_around_position(position: Position2, angle: float) -> Composition:
    """Rotate by ``angle`` radians around ``position`` instead of the origin."""
    return Composition(
        "RotationAroundPosition",
        (
            Translation(position.vector_to(Position2.zero())),
            Rotation(angle),
            Translation(Position2.zero().vector_to(position)),
        ),
    )
