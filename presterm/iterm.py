"""Printing images with the iTerm2 inline image protocol."""

from __future__ import annotations

import base64
import io
from pathlib import Path
from typing import Tuple, Union

from PIL import Image as PilImage

from .images import PrintOptions, RegisterImageError
from .style import TextStyle
from .terminal import PrintText, TerminalIo

_DECODE_ERRORS = (OSError, ValueError, SyntaxError, PilImage.DecompressionBombError)


class ItermImage:
    """An encoded image ready to be sent inline."""

    __slots__ = ("size", "raw_length", "base64_contents")

    def __init__(self, contents: bytes, dimensions: Tuple[int, int]) -> None:
        self.size = dimensions
        self.raw_length = len(contents)
        self.base64_contents = base64.b64encode(contents).decode("ascii")

    def __repr__(self) -> str:
        return f"ItermImage(size={self.size}, raw_length={self.raw_length})"

    def dimensions(self) -> Tuple[int, int]:
        return self.size

    def as_rgba8(self) -> PilImage.Image:
        """Decode the image into RGBA pixels."""
        contents = base64.b64decode(self.base64_contents)
        image = PilImage.open(io.BytesIO(contents))
        return image.convert("RGBA")


class ItermPrinter:
    """Prints images using the iTerm2 inline image escape sequence."""

    def __repr__(self) -> str:
        return "ItermPrinter()"

    def register(self, image: PilImage.Image) -> ItermImage:
        buffer = io.BytesIO()
        try:
            image.save(buffer, format="PNG")
        except _DECODE_ERRORS as error:
            raise RegisterImageError(f"image decoding: {error}") from error
        return ItermImage(buffer.getvalue(), image.size)

    def register_from_path(self, path: Union[str, Path]) -> ItermImage:
        try:
            contents = Path(path).read_bytes()
        except OSError as error:
            raise RegisterImageError(str(error)) from error
        try:
            image = PilImage.open(io.BytesIO(contents))
            image.load()
        except _DECODE_ERRORS as error:
            raise RegisterImageError(f"image decoding: {error}") from error
        return ItermImage(contents, image.size)

    def print(self, image: ItermImage, options: PrintOptions, terminal: TerminalIo) -> None:
        content = (
            f"\x1b]1337;File=size={image.raw_length};width={options.columns};height={options.rows};"
            f"inline=1;preserveAspectRatio=1:{image.base64_contents}\x07"
        )
        terminal.execute(PrintText(content, TextStyle()))