"""Snapshot of what a two-dimensional environment wants drawn."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from visbase.contracts import TwoDimensionalDrawableEnvironment
from visbase.engine.geometry import Geometry, Group
from visbase.models.primitives import Color, Position2, Size2
from visbase.models.viewport import Viewport2, Viewport2Mode


class SceneDescription(BaseModel):
    """One frame: geometries plus the optional view and background hints."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    geometries: list[InstanceOf[Geometry]] = Field(default_factory=list)
    preferred_view: tuple[InstanceOf[Viewport2], Viewport2Mode] | None = None
    preferred_background_color: InstanceOf[Color] | None = None

    @classmethod
    def from_environment(cls, environment: TwoDimensionalDrawableEnvironment) -> SceneDescription:
        return cls(
            geometries=list(environment.draw_two_dimensional()),
            preferred_view=environment.preferred_view(),
            preferred_background_color=environment.preferred_background_color(),
        )

    def as_group(self) -> Group:
        return Group(tuple(self.geometries))

    def bounding_box(self) -> tuple[Position2, Position2]:
        return self.as_group().bounding_box()

    def size_of_bounding_box(self) -> Size2:
        return self.as_group().size_of_bounding_box()
