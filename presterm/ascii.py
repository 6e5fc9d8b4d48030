"""Printing images with coloured half-block characters."""

from __future__ import annotations

import io
from dataclasses import dataclass
from itertools import zip_longest
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from PIL import Image as PilImage

from .images import PrintImageError, PrintOptions, RegisterImageError
from .style import Color, Colors, TextStyle
from .terminal import MoveDown, MoveLeft, MoveRight, PrintText, TerminalIo

TOP_CHAR = "▀"
BOTTOM_CHAR = "▄"

Pixel = Tuple[int, int, int, int]


@dataclass(frozen=True)
class AsciiImage:
    """An image printed as half-block characters."""

    image: PilImage.Image

    @classmethod
    def from_image(cls, image: PilImage.Image) -> AsciiImage:
        """Wrap an image after converting it to RGBA."""
        return cls(image.convert("RGBA"))

    def dimensions(self) -> Tuple[int, int]:
        return self.image.size


def _read_image(path: Union[str, Path]) -> PilImage.Image:
    try:
        contents = Path(path).read_bytes()
    except OSError as error:
        raise RegisterImageError(str(error)) from error
    try:
        image = PilImage.open(io.BytesIO(contents))
        image.load()
    except (OSError, ValueError, SyntaxError, PilImage.DecompressionBombError) as error:
        raise RegisterImageError(f"image decoding: {error}") from error
    return image


def _pixel_rows(image: PilImage.Image, width: int, height: int) -> List[List[Pixel]]:
    if width == 0:
        return [[] for _ in range(height)]
    raw = image.tobytes()
    stride = width * 4
    return [
        [tuple(raw[offset:offset + 4]) for offset in range(start, start + stride, 4)]
        for start in range(0, len(raw), stride)
    ]


def _blend(pixel: Pixel, other: Pixel) -> Pixel:
    """Composite ``other`` over ``pixel``."""
    if other[3] == 0:
        return pixel
    if other[3] == 255:
        return other
    bg = [component / 255 for component in pixel]
    fg = [component / 255 for component in other]
    bg_alpha, fg_alpha = bg[3], fg[3]
    alpha_final = bg_alpha + fg_alpha - bg_alpha * fg_alpha
    if alpha_final == 0:
        return pixel
    channels = [
        (f * fg_alpha + b * bg_alpha * (1.0 - fg_alpha)) / alpha_final
        for f, b in zip(fg[:3], bg[:3])
    ]
    r, g, b = (int(255 * channel) for channel in channels)
    return (r, g, b, int(255 * alpha_final))


class AsciiPrinter:
    """Prints images using half blocks so each cell holds two vertical pixels."""

    def __repr__(self) -> str:
        return "AsciiPrinter()"

    @staticmethod
    def _pixel_color(pixel: Pixel, background: Optional[Color]) -> Optional[Color]:
        r, g, b, alpha = pixel
        if alpha == 0:
            return None
        if alpha < 255 and background is not None and background.is_rgb:
            # Blend partially transparent pixels with the background to smooth edges.
            blended = _blend(pixel, (background.r, background.g, background.b, 255 - alpha))
            return Color.rgb(*blended[:3])
        # With no known background there is no telling whether to blend towards light or dark.
        return Color.rgb(r, g, b)

    def register(self, image: PilImage.Image) -> AsciiImage:
        return AsciiImage(image)

    def register_from_path(self, path: Union[str, Path]) -> AsciiImage:
        return AsciiImage(_read_image(path))

    def _rows(self, image: AsciiImage, options: PrintOptions) -> List[List[Pixel]]:
        width, height = options.columns, 2 * options.rows
        if width == 0 or height == 0:
            return _pixel_rows(image.image, width, height) if height else []
        try:
            resized = image.image.resize((width, height), PilImage.Resampling.BILINEAR)
        except (OSError, ValueError) as error:
            raise PrintImageError(f"image decoding: {error}") from error
        return _pixel_rows(resized.convert("RGBA"), width, height)

    def _commands(self, image: AsciiImage, options: PrintOptions) -> Iterator[object]:
        background = options.background_color
        rows = self._rows(image, options)
        for top_row, bottom_row in zip_longest(rows[0::2], rows[1::2]):
            for top_pixel, bottom_pixel in zip_longest(top_row, bottom_row or []):
                top = self._pixel_color(top_pixel, background)
                bottom = None if bottom_pixel is None else self._pixel_color(bottom_pixel, background)
                if top is not None and bottom is not None:
                    yield PrintText(TOP_CHAR, TextStyle().fg_color(top).bg_color(bottom))
                elif top is not None:
                    yield PrintText(TOP_CHAR, TextStyle.colored(Colors(top, background)))
                elif bottom is not None:
                    yield PrintText(BOTTOM_CHAR, TextStyle.colored(Colors(bottom, background)))
                else:
                    yield MoveRight(1)
            yield MoveDown(1)
            yield MoveLeft(options.columns)

    def print(self, image: AsciiImage, options: PrintOptions, terminal: TerminalIo) -> None:
        """Draw the image at the cursor, two pixel rows per terminal row."""
        for command in self._commands(image, options):
            terminal.execute(command)