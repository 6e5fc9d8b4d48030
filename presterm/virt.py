"""An in-memory terminal that records what is drawn on it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .ascii import AsciiImage, AsciiPrinter
from .images import Image, PrintImageError, PrintOptions
from .iterm import ItermImage
from .properties import WindowSize
from .style import Color, Colors, Text, TextStyle
from .terminal import (
    BeginUpdate,
    ClearScreen,
    EndUpdate,
    Flush,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveTo,
    MoveToColumn,
    MoveToNextLine,
    MoveToRow,
    PrintImage,
    PrintText,
    SetBackgroundColor,
    SetColors,
    TerminalIo,
)


@dataclass(frozen=True)
class PrintedImage:
    """An image stored at a position of the virtual terminal."""

    image: Any
    width_columns: int


@dataclass(frozen=True)
class StyledChar:
    """A single cell: a character and its style."""

    character: str = " "
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class TerminalGrid:
    """The contents of a virtual terminal."""

    rows: List[List[StyledChar]]
    background_color: Optional[Color] = None
    images: Dict[Tuple[int, int], PrintedImage] = field(default_factory=dict)


class ImageBehavior(enum.Enum):
    """What the virtual terminal does with printed images."""

    STORE = "store"
    PRINT_ASCII = "print-ascii"


def iter_row_texts(row: Iterable[StyledChar]) -> Iterator[Text]:
    """Group consecutive cells with the same style into texts."""
    content: List[str] = []
    style: Optional[TextStyle] = None
    for cell in row:
        if style is not None and cell.style != style:
            yield Text("".join(content), style)
            content = []
        style = cell.style
        content.append(cell.character)
    if style is not None:
        yield Text("".join(content), style)


class VirtualTerminal(TerminalIo):
    """A terminal that draws into a grid of styled cells."""

    def __init__(self, dimensions: WindowSize, image_behavior: ImageBehavior = ImageBehavior.STORE) -> None:
        self.row = 0
        self.column = 0
        self.colors = Colors()
        self.rows = [[StyledChar() for _ in range(dimensions.columns)] for _ in range(dimensions.rows)]
        self.background_color: Optional[Color] = None
        self.images: Dict[Tuple[int, int], PrintedImage] = {}
        self.row_heights = [1] * dimensions.rows
        self.image_behavior = image_behavior

    def cursor_row(self) -> int:
        return self.row

    def into_contents(self) -> TerminalGrid:
        """The grid drawn so far."""
        return TerminalGrid(rows=self.rows, background_color=self.background_color, images=self.images)

    def _current_row_height(self) -> int:
        if 0 <= self.row < len(self.row_heights):
            return self.row_heights[self.row]
        return 1

    def _set_current_row_height(self, height: int) -> None:
        if 0 <= self.row < len(self.row_heights):
            self.row_heights[self.row] = height

    def _in_bounds(self) -> bool:
        return 0 <= self.row < len(self.rows) and 0 <= self.column < len(self.rows[self.row])

    def execute(self, command: Any) -> None:
        match command:
            case BeginUpdate() | EndUpdate() | Flush():
                pass
            case MoveTo(column=column, row=row):
                self.column = column
                self.row = row
            case MoveToRow(row=row):
                self.row = row
                self._set_current_row_height(1)
            case MoveToColumn(column=column):
                self.column = column
            case MoveDown(amount=amount):
                self.row += amount
            case MoveRight(amount=amount):
                self.column += amount
            case MoveLeft(amount=amount):
                self.column = max(self.column - amount, 0)
            case MoveToNextLine():
                self.row += self._current_row_height()
                self.column = 0
                self._set_current_row_height(1)
            case PrintText(content=content, style=style):
                self._print_text(content, style)
            case ClearScreen():
                for row in self.rows:
                    row[:] = [replace(cell, character=" ") for cell in row]
                self.background_color = self.colors.background
            case SetColors(colors=colors):
                self.colors = colors
            case SetBackgroundColor(color=color):
                self.colors = replace(self.colors, background=color)
            case PrintImage(image=image, options=options):
                self._print_image(image, options)
            case _:
                raise TypeError(f"unknown terminal command: {command!r}")

    def _print_text(self, content: str, style: TextStyle) -> None:
        style = style.merged(TextStyle().colors(self.colors))
        for char in content:
            # Characters that fall outside the grid are dropped without moving the cursor.
            if not self._in_bounds():
                continue
            self.rows[self.row][self.column] = StyledChar(char, style)
            self.column += style.font_size
        self._set_current_row_height(max(self._current_row_height(), style.font_size))

    def _print_image(self, image: Any, options: PrintOptions) -> None:
        if self.image_behavior is ImageBehavior.STORE:
            self.images[(self.row, self.column)] = PrintedImage(image, options.columns)
            return
        inner = image.image if isinstance(image, Image) else image
        if isinstance(inner, ItermImage):
            inner = AsciiImage.from_image(inner.as_rgba8())
        if not isinstance(inner, AsciiImage):
            raise PrintImageError()
        AsciiPrinter().print(inner, options, self)