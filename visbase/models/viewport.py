"""Viewports: visible rectangles plus their axis orientation convention."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from visbase.models.primitives import Position2, Size2


@dataclass(frozen=True)
class Viewport2:
    """A visible rectangle.

    The flip flags record the axis convention of a back-end, e.g. a y axis
    growing downward from a top-left origin.
    """

    center: Position2
    size: Size2
    flipped_x: bool = False
    flipped_y: bool = False

    def with_flipped_x(self, flipped: bool) -> Viewport2:
        return replace(self, flipped_x=flipped)

    def with_flipped_y(self, flipped: bool) -> Viewport2:
        return replace(self, flipped_y=flipped)

    @property
    def min_corner(self) -> Position2:
        return Position2(
            self.center.x - self.size.width / 2.0,
            self.center.y - self.size.height / 2.0,
        )

    @property
    def max_corner(self) -> Position2:
        return Position2(
            self.center.x + self.size.width / 2.0,
            self.center.y + self.size.height / 2.0,
        )


class Viewport2Mode(enum.Enum):
    """How a visualiser fits a preferred viewport into its drawing surface.

    Interpreted by the visualiser; nothing in this package computes it.
    """

    LOOSE_ASPECT_RATIO = "loose_aspect_ratio"
    KEEP_ASPECT_RATIO = "keep_aspect_ratio"
    KEEP_ASPECT_RATIO_AND_SCISSOR_REMAINS = "keep_aspect_ratio_and_scissor_remains"

    @classmethod
    def default(cls) -> Viewport2Mode:
        return cls.LOOSE_ASPECT_RATIO
