"""Pixel buffer exchanged with pixel-array visualisers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Pixel:
    red: int
    green: int
    blue: int

    @classmethod
    def white(cls) -> Pixel:
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> Pixel:
        return cls(0, 0, 0)

    @classmethod
    def named(cls, name: str) -> Pixel:
        """Preset by name: white, black, red, green, blue, yellow, cyan, magenta."""
        try:
            return PRESETS[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown pixel preset: {name!r}") from None


PRESETS: dict[str, Pixel] = {
    "white": Pixel(255, 255, 255),
    "black": Pixel(0, 0, 0),
    "red": Pixel(255, 0, 0),
    "green": Pixel(0, 255, 0),
    "blue": Pixel(0, 0, 255),
    "yellow": Pixel(255, 255, 0),
    "cyan": Pixel(0, 255, 255),
    "magenta": Pixel(255, 0, 255),
}


class PixelArray:
    """Row-major RGB buffer indexed by ``(x, y)``.

    Storage is a ``(height, width, 3)`` uint8 array.
    """

    def __init__(self, width: int, height: int, data: NDArray[np.uint8] | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Invalid pixel array dimensions {width}x{height}")
        self.width = width
        self.height = height
        if data is None:
            self.data = np.zeros((height, width, 3), dtype=np.uint8)
        else:
            arr = np.asarray(data, dtype=np.uint8)
            if arr.shape != (height, width, 3):
                raise ValueError(
                    f"Pixel data shape {arr.shape} does not match {(height, width, 3)}"
                )
            self.data = arr.copy()

    def _check(self, index: tuple[int, int]) -> tuple[int, int]:
        x, y = index
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel {index} outside {self.width}x{self.height} array")
        return x, y

    def __getitem__(self, index: tuple[int, int]) -> Pixel:
        x, y = self._check(index)
        r, g, b = self.data[y, x]
        return Pixel(int(r), int(g), int(b))

    def __setitem__(self, index: tuple[int, int], pixel: Pixel) -> None:
        x, y = self._check(index)
        self.data[y, x] = (pixel.red, pixel.green, pixel.blue)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelArray):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self.data, other.data))
        )

    def fill(self, pixel: Pixel) -> None:
        self.data[:, :] = (pixel.red, pixel.green, pixel.blue)

    def to_bytes(self) -> bytes:
        """Packed RGB rows, top row first."""
        return self.data.tobytes()
