"""Opaque texture references carried by image geometries.

Nothing here decodes or validates image bytes; that is the visualiser's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from visbase.models.pixels import PixelArray


@dataclass(frozen=True)
class TexturePath:
    path: str


@dataclass(frozen=True)
class TextureData:
    """Raw texture bytes with their pixel dimensions."""

    width: int
    height: int
    data: bytes

    @classmethod
    def from_pixel_array(cls, pixels: PixelArray) -> TextureData:
        return cls(pixels.width, pixels.height, pixels.to_bytes())


TextureRef = Union[TexturePath, TextureData]
