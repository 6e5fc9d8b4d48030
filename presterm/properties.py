"""Terminal window size and cursor position."""

from __future__ import annotations

import math
import os
import struct
import sys
from dataclasses import dataclass, replace

try:
    import fcntl
    import termios
except ImportError:  # pragma: no cover - not available on every platform
    fcntl = None
    termios = None

_U16_MAX = 0xFFFF


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _to_u16(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0), _U16_MAX))


@dataclass(frozen=True)
class WindowSize:
    """The size of the terminal window in cells and pixels."""

    rows: int
    columns: int
    height: int
    width: int

    @classmethod
    def current(cls, font_size_fallback: int = 1) -> WindowSize:
        """Query the current window size, estimating pixel sizes when unavailable."""
        size = _query_window_size()
        fallback = max(font_size_fallback, 1)
        width = size.width or _to_u16(size.columns * fallback)
        height = size.height or _to_u16(size.rows * fallback * 2)
        return replace(size, width=width, height=height)

    def shrink_rows(self, amount: int) -> WindowSize:
        """Shrink by a number of rows, keeping the pixels-per-row ratio."""
        height_to_shrink = _to_u16(self.pixels_per_row() * amount)
        return replace(
            self,
            rows=max(self.rows - amount, 0),
            height=max(self.height - height_to_shrink, 0),
        )

    def shrink_columns(self, amount: int) -> WindowSize:
        """Shrink by a number of columns, keeping the pixels-per-column ratio."""
        width_to_shrink = _to_u16(self.pixels_per_column() * amount)
        return replace(
            self,
            columns=max(self.columns - amount, 0),
            width=max(self.width - width_to_shrink, 0),
        )

    def pixels_per_column(self) -> float:
        return _divide(self.width, self.columns)

    def pixels_per_row(self) -> float:
        return _divide(self.height, self.rows)

    def aspect_ratio(self) -> float:
        return _divide(_divide(self.rows, self.height), _divide(self.columns, self.width))


def _query_window_size() -> WindowSize:
    if fcntl is not None:
        try:
            fd = sys.__stdout__.fileno()
            packed = fcntl.ioctl(fd, termios.TIOCGWINSZ, bytes(8))
            rows, columns, width, height = struct.unpack("HHHH", packed)
            return WindowSize(rows=rows, columns=columns, height=height, width=width)
        except (AttributeError, OSError, ValueError, struct.error):
            pass
    columns, rows = os.get_terminal_size()
    return WindowSize(rows=rows, columns=columns, height=0, width=0)


@dataclass(frozen=True)
class CursorPosition:
    """A cursor position in cells."""

    column: int = 0
    row: int = 0