"""Images registered with a printer and the options used to print them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple

from .style import Color


@dataclass(frozen=True)
class ImageSource:
    """Where an image came from: a file on disk, or generated when ``path`` is None."""

    path: Optional[Path] = None

    @property
    def is_generated(self) -> bool:
        return self.path is None


class Image:
    """A registered image together with its source.

    Images compare equal when they come from the same source.
    """

    __slots__ = ("image", "source")

    def __init__(self, image: Any, source: ImageSource) -> None:
        self.image = image
        self.source = source

    def dimensions(self) -> Tuple[int, int]:
        """The image's width and height in pixels."""
        return self.image.dimensions()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.source == other.source

    def __hash__(self) -> int:
        return hash(self.source)

    def __repr__(self) -> str:
        width, height = self.dimensions()
        return f"Image<{width}x{height}>"


@dataclass(frozen=True)
class PrintOptions:
    """How large an image is printed, in cells, and on top of what."""

    columns: int
    rows: int
    z_index: int = 0
    background_color: Optional[Color] = None
    # Width and height of a single cell in pixels.
    column_width: int = 0
    row_height: int = 0


class RegisterImageError(Exception):
    """An image could not be loaded or registered."""

    default_message = "printer can't register images"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class PrintImageError(Exception):
    """An image could not be printed."""

    default_message = "unsupported image type"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)