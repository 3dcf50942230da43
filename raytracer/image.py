"""Images made of RGB pixels, and their PPM form."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Union

from raytracer.errors import OutOfBounds

Color = tuple[float, float, float]

PPM_EXTENSION = ".ppm"
MAX_COLOR_SHADES = 1024

_BLACK: Color = (0.0, 0.0, 0.0)


def _as_color(value: Sequence[float]) -> Color:
    color = tuple(float(component) for component in value)
    if len(color) != 3:
        raise ValueError(f"a color has 3 components, got {len(color)}")
    return color  # type: ignore[return-value]


class Image(ABC):
    """A width by height grid of colors, stored row after row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions cannot be negative")
        self._width = width
        self._height = height
        self._data: list[Color] = [_BLACK] * (width * height)

    def _index(self, x: int, y: int) -> int:
        raw = y * self._width + x
        if not 0 <= raw < len(self._data):
            raise OutOfBounds(raw)
        return raw

    def at(self, x: int, y: int) -> Color:
        """Color of the pixel at (x, y)."""
        return self._data[self._index(x, y)]

    def set_at(self, x: int, y: int, color: Sequence[float]) -> None:
        """Set the color of the pixel at (x, y)."""
        self._data[self._index(x, y)] = _as_color(color)

    def dimensions(self) -> tuple[int, int]:
        """The pair (width, height)."""
        return (self._width, self._height)

    def data(self) -> list[Color]:
        """The pixel buffer itself, row after row."""
        return self._data

    @abstractmethod
    def save(self, filepath: str) -> None:
        """Write the image to a file."""

    def __iadd__(self, other: Union[Image, Iterable[Sequence[float]]]) -> Image:
        pixels = other._data if isinstance(other, Image) else list(other)
        if len(pixels) != len(self._data):
            raise ValueError(
                f"cannot add {len(pixels)} pixels to an image of {len(self._data)}"
            )
        self._data[:] = [
            (a[0] + b[0], a[1] + b[1], a[2] + b[2])
            for a, b in zip(self._data, map(_as_color, pixels))
        ]
        return self


class Ppm(Image):
    """An image saved in the plain-text PPM (P3) format."""

    def render(self) -> str:
        """The PPM text of the image."""
        width, height = self.dimensions()
        lines = ["P3", f"{width} {height}", str(MAX_COLOR_SHADES - 1)]
        lines.extend(
            " ".join(str(int(component * MAX_COLOR_SHADES)) for component in color)
            for color in self._data
        )
        return "\n".join(lines) + "\n"

    def save(self, filepath: str) -> None:
        """Write the image to ``filepath`` with the ``.ppm`` extension added."""
        with open(filepath + PPM_EXTENSION, "w", encoding="ascii") as handle:
            handle.write(self.render())