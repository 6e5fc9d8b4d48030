"""Terminal commands and a terminal that writes them as escape sequences."""

from __future__ import annotations

import abc
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Optional, TextIO

from .style import Color, Colors, TextStyle, _color_sgr

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - not available on every platform
    termios = None
    tty = None

_CSI = "\x1b["


class TerminalError(Exception):
    """Writing to the terminal failed."""


@dataclass(frozen=True)
class BeginUpdate:
    pass


@dataclass(frozen=True)
class EndUpdate:
    pass


@dataclass(frozen=True)
class MoveTo:
    column: int
    row: int


@dataclass(frozen=True)
class MoveToRow:
    row: int


@dataclass(frozen=True)
class MoveToColumn:
    column: int


@dataclass(frozen=True)
class MoveDown:
    amount: int


@dataclass(frozen=True)
class MoveRight:
    amount: int


@dataclass(frozen=True)
class MoveLeft:
    amount: int


@dataclass(frozen=True)
class MoveToNextLine:
    pass


@dataclass(frozen=True)
class PrintText:
    content: str
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(frozen=True)
class ClearScreen:
    pass


@dataclass(frozen=True)
class SetColors:
    colors: Colors


@dataclass(frozen=True)
class SetBackgroundColor:
    color: Color


@dataclass(frozen=True)
class Flush:
    pass


@dataclass(frozen=True)
class PrintImage:
    image: Any
    options: Any


class TerminalIo(abc.ABC):
    """Something that executes terminal commands and tracks the cursor row."""

    @abc.abstractmethod
    def execute(self, command: Any) -> None:
        """Execute a single terminal command."""

    @abc.abstractmethod
    def cursor_row(self) -> int:
        """The row the cursor is on."""


def _is_windows_based_os() -> bool:
    return sys.platform == "win32" or "WSL_DISTRO_NAME" in os.environ


def should_hide_cursor() -> bool:
    """Whether the cursor should be hidden while presenting."""
    # WezTerm on Windows fails to display images when the cursor is hidden.
    is_wezterm = os.environ.get("TERM_PROGRAM") == "WezTerm"
    return not (_is_windows_based_os() and is_wezterm)


class StreamWriter:
    """A terminal write handle over a text stream such as stdout."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._saved_mode: Optional[list] = None

    def write(self, data: str) -> None:
        self.stream.write(data)

    def flush(self) -> None:
        self.stream.flush()

    def _fileno(self) -> Optional[int]:
        if termios is None or not self.stream.isatty():
            return None
        return self.stream.fileno()

    def init(self) -> None:
        """Enter raw mode and the alternate screen."""
        fd = self._fileno()
        if fd is not None:
            self._saved_mode = termios.tcgetattr(fd)
            tty.setraw(fd)
        if should_hide_cursor():
            self.write(f"{_CSI}?25l")
        self.write(f"{_CSI}?1049h")

    def deinit(self) -> None:
        """Leave the alternate screen and restore the terminal mode."""
        try:
            self.write(f"{_CSI}?1049l")
            if should_hide_cursor():
                self.write(f"{_CSI}?25h")
            self.flush()
        except (OSError, ValueError):
            pass
        if self._saved_mode is not None:
            try:
                termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_mode)
            except (OSError, ValueError):
                pass
            self._saved_mode = None


def _color_sequence(colors: Colors) -> str:
    params = []
    if colors.foreground is not None:
        params.append(_color_sgr(colors.foreground, background=False))
    if colors.background is not None:
        params.append(_color_sgr(colors.background, background=True))
    if not params:
        return ""
    return f"{_CSI}{';'.join(params)}m"


class Terminal(TerminalIo):
    """A terminal that writes commands to a write handle and tracks the cursor row."""

    def __init__(self, writer: Any, image_printer: Any) -> None:
        writer.init()
        self._writer = writer
        self._image_printer = image_printer
        self._cursor_row = 0
        self._current_row_height = 1
        self._closed = False

    def __enter__(self) -> Terminal:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def cursor_row(self) -> int:
        return self._cursor_row

    def execute(self, command: Any) -> None:
        try:
            self._execute(command)
        except OSError as error:
            raise TerminalError(f"io: {error}") from error

    def _execute(self, command: Any) -> None:
        write = self._writer.write
        match command:
            case BeginUpdate():
                write(f"{_CSI}?2026h")
            case EndUpdate():
                write(f"{_CSI}?2026l")
            case MoveTo(column=column, row=row):
                write(f"{_CSI}{row + 1};{column + 1}H")
                self._cursor_row = row
            case MoveToRow(row=row):
                write(f"{_CSI}{row + 1}d")
                self._cursor_row = row
            case MoveToColumn(column=column):
                write(f"{_CSI}{column + 1}G")
            case MoveDown(amount=amount):
                if amount:
                    write(f"{_CSI}{amount}B")
                self._cursor_row += amount
            case MoveRight(amount=amount):
                if amount:
                    write(f"{_CSI}{amount}C")
            case MoveLeft(amount=amount):
                if amount:
                    write(f"{_CSI}{amount}D")
            case MoveToNextLine():
                amount = self._current_row_height
                write(f"{_CSI}{amount}E")
                self._cursor_row += amount
                self._current_row_height = 1
            case PrintText(content=content, style=style):
                write(style.apply(content))
                self._current_row_height = max(self._current_row_height, style.font_size)
            case ClearScreen():
                write(f"{_CSI}2J")
                self._cursor_row = 0
                self._current_row_height = 1
            case SetColors(colors=colors):
                write(f"{_CSI}0m")
                write(_color_sequence(colors))
            case SetBackgroundColor(color=color):
                write(f"{_CSI}{_color_sgr(color, background=True)}m")
            case Flush():
                self._writer.flush()
            case PrintImage(image=image, options=options):
                self._image_printer.print(image, options, self)
                self._cursor_row += options.rows
            case _:
                raise TypeError(f"unknown terminal command: {command!r}")

    def suspend(self) -> None:
        self._writer.deinit()

    def resume(self) -> None:
        try:
            self._writer.init()
        except OSError:
            pass

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._writer.deinit()