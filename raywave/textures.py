"""Textures: constant colors, checkerboards and filtered images."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from enum import Enum

from raywave.geometry import Color


def _indent(text: object) -> str:
    return str(text).replace("\n", "\n  ")


class Image:
    """Grid of colors addressed by integer pixel coordinates, row by row."""

    def __init__(
        self, width: int, height: int, pixels: Iterable[Color] | None = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        if pixels is None:
            self._pixels = [Color(0) for _ in range(width * height)]
        else:
            self._pixels = list(pixels)
            if len(self._pixels) != width * height:
                raise ValueError(
                    f"expected {width * height} pixels, got {len(self._pixels)}"
                )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> Image:
        """Build an image from a list of rows, top row first."""
        if not rows:
            raise ValueError("an image needs at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls(width, len(rows), (pixel for row in rows for pixel in row))

    @property
    def resolution(self) -> tuple[int, int]:
        return self.width, self.height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside image of size {self.width}x{self.height}"
            )
        return y * self.width + x

    def get(self, x: int, y: int) -> Color:
        return self._pixels[self._offset(x, y)]

    def __getitem__(self, key: tuple[int, int]) -> Color:
        return self.get(*key)

    def __setitem__(self, key: tuple[int, int], color: Color) -> None:
        self._pixels[self._offset(*key)] = color

    def __str__(self) -> str:
        return f"Image[\n  resolution = {self.width}x{self.height}\n]"


class Texture(ABC):
    """Maps texture coordinates to a color."""

    @abstractmethod
    def evaluate(self, uv: tuple[float, float]) -> Color:
        """Color at the given texture coordinates."""


class ConstantTexture(Texture):
    """Texture with the same color everywhere."""

    def __init__(self, value: Color) -> None:
        self.value = value

    def evaluate(self, uv: tuple[float, float]) -> Color:
        return self.value

    def __str__(self) -> str:
        return f"ConstantTexture[\n  value = {_indent(self.value)}\n]"


class CheckerboardTexture(Texture):
    """Alternating squares of two colors."""

    def __init__(
        self,
        scale: tuple[float, float],
        color0: Color | None = None,
        color1: Color | None = None,
    ) -> None:
        self.scale = scale
        self.color0 = Color(0) if color0 is None else color0
        self.color1 = Color(1) if color1 is None else color1

    def evaluate(self, uv: tuple[float, float]) -> Color:
        x_checker = int(math.fmod(math.floor(uv[0] * self.scale[0]), 2))
        y_checker = int(math.fmod(math.floor(uv[1] * self.scale[1]), 2))
        if (x_checker == 0) == (y_checker == 0):
            return self.color0
        return self.color1

    def __str__(self) -> str:
        return (
            "CheckerboardTexture[\n"
            f"  color0 = {_indent(self.color0)}\n"
            f"  color1 = {self.color1}\n"
            f"  scale = {self.scale}\n"
            "]"
        )


class BorderMode(Enum):
    """How pixel coordinates outside the image are handled."""

    CLAMP = "clamp"
    REPEAT = "repeat"


class FilterMode(Enum):
    """How the image is sampled between pixel centers."""

    NEAREST = "nearest"
    BILINEAR = "bilinear"


class ImageTexture(Texture):
    """Texture looked up from an image, with v pointing up."""

    def __init__(
        self,
        image: Image,
        exposure: float = 1.0,
        border: BorderMode | str = BorderMode.REPEAT,
        filter: FilterMode | str = FilterMode.BILINEAR,
    ) -> None:
        self.image = image
        self.exposure = exposure
        self.border = BorderMode(border)
        self.filter = FilterMode(filter)

    def evaluate(self, uv: tuple[float, float]) -> Color:
        return self._filtered(uv[0], 1 - uv[1])

    def _filtered(self, u: float, v: float) -> Color:
        width, height = self.image.resolution
        sx = u * width
        sy = v * height

        if self.filter is FilterMode.NEAREST:
            pixel = self._border(math.floor(sx), math.floor(sy))
            return self.image.get(*pixel) * self.exposure

        fx = math.floor(sx - 0.5)
        fy = math.floor(sy - 0.5)
        fu = sx - 0.5 - fx
        fv = sy - 0.5 - fy
        c00 = self.image.get(*self._border(fx, fy))
        c10 = self.image.get(*self._border(fx, fy + 1))
        c01 = self.image.get(*self._border(fx + 1, fy))
        c11 = self.image.get(*self._border(fx + 1, fy + 1))
        blended = (
            (1 - fu) * (1 - fv) * c00
            + (1 - fu) * fv * c10
            + fu * (1 - fv) * c01
            + fu * fv * c11
        )
        return blended * self.exposure

    def _border(self, x: int, y: int) -> tuple[int, int]:
        width, height = self.image.resolution
        if self.border is BorderMode.REPEAT:
            return x % width, y % height
        return min(max(x, 0), width - 1), min(max(y, 0), height - 1)

    def __str__(self) -> str:
        return (
            "ImageTexture[\n"
            f"  image = {_indent(self.image)},\n"
            f"  exposure = {self.exposure:f},\n"
            "]"
        )