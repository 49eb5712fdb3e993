"""Contracts between drawable environments and visualisers.

Environments describe what to draw; visualisers decide how. Implementations
raise their own exceptions, which propagate to the caller unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from visbase.engine.geometry import Geometry
    from visbase.models.pixels import PixelArray
    from visbase.models.primitives import Color
    from visbase.models.viewport import Viewport2, Viewport2Mode


class DrawableEnvironment(ABC):
    @classmethod
    def suggested_rendered_steps_per_second(cls) -> float | None:
        """Preferred render rate; None lets the visualiser choose."""
        return None


class TwoDimensionalDrawableEnvironment(DrawableEnvironment):
    @abstractmethod
    def draw_two_dimensional(self) -> list[Geometry]: ...

    def preferred_view(self) -> tuple[Viewport2, Viewport2Mode] | None:
        return None

    def preferred_background_color(self) -> Color | None:
        return None


class PixelArrayDrawableEnvironment(DrawableEnvironment):
    @abstractmethod
    def draw_pixel_array(self) -> PixelArray: ...


class TextDrawableEnvironment(DrawableEnvironment):
    @abstractmethod
    def draw_text(self) -> str: ...


class Visualiser(ABC):
    @abstractmethod
    def is_open(self) -> bool: ...

    @abstractmethod
    def close(self) -> None: ...


class TwoDimensionalVisualiser(Visualiser):
    @abstractmethod
    def render_two_dimensional(self, environment: TwoDimensionalDrawableEnvironment) -> None: ...


class PixelArrayVisualiser(Visualiser):
    @abstractmethod
    def render_pixel_array(self, environment: PixelArrayDrawableEnvironment) -> None: ...


class TextVisualiser(Visualiser):
    @abstractmethod
    def render_text(self, environment: TextDrawableEnvironment) -> None: ...
