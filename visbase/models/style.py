"""Line end and corner styles. Pure values, no behavior."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class LineShape(enum.Enum):
    """End shape of a line or polyline."""

    SQUARE = "square"
    ROUND = "round"
    BEVEL = "bevel"


class CornerShape:
    """Corner style of squares and rectangles: square, round or bevel."""

    @staticmethod
    def square() -> SquareCorner:
        return SquareCorner()

    @staticmethod
    def round(radius: float, resolution: int) -> RoundCorner:
        return RoundCorner(radius, resolution)

    @staticmethod
    def bevel(amount: float) -> BevelCorner:
        return BevelCorner(amount)


@dataclass(frozen=True)
class SquareCorner(CornerShape):
    pass


@dataclass(frozen=True)
class RoundCorner(CornerShape):
    radius: float
    # segments per corner
    resolution: int

    def __post_init__(self) -> None:
        if self.resolution < 1:
            raise ValueError(f"Round corner resolution must be >= 1, got {self.resolution}")


@dataclass(frozen=True)
class BevelCorner(CornerShape):
    amount: float
