"""Rectangles of the terminal window that rendering is confined to."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

from .properties import WindowSize

_U16_MAX = 0xFFFF


def _saturating_add(left: int, right: int) -> int:
    return min(left + right, _U16_MAX)


class MaxColumnsAlignment(enum.Enum):
    """Where the usable area sits horizontally when the window is wider than allowed."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class MaxRowsAlignment(enum.Enum):
    """Where the usable area sits vertically when the window is taller than allowed."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class MaxSize:
    """The largest area, in cells, that rendering may use."""

    max_columns: int = _U16_MAX
    max_columns_alignment: MaxColumnsAlignment = MaxColumnsAlignment.CENTER
    max_rows: int = _U16_MAX
    max_rows_alignment: MaxRowsAlignment = MaxRowsAlignment.CENTER


@dataclass(frozen=True)
class RenderEngineOptions:
    """Options that control how the render engine lays things out."""

    validate_overflows: bool = False
    max_size: MaxSize = field(default_factory=MaxSize)
    column_layout_margin: int = 4


@dataclass(frozen=True)
class WindowRect:
    """A region of the window: its size and where it starts."""

    dimensions: WindowSize
    start_column: int = 0
    start_row: int = 0

    def shrink_horizontal(self, margin: int) -> WindowRect:
        """Remove ``margin`` columns on both the left and the right."""
        dimensions = self.dimensions.shrink_columns(min(margin * 2, _U16_MAX))
        return replace(self, dimensions=dimensions, start_column=_saturating_add(self.start_column, margin))

    def shrink_left(self, size: int) -> WindowRect:
        """Remove ``size`` columns on the left."""
        dimensions = self.dimensions.shrink_columns(size)
        return replace(self, dimensions=dimensions, start_column=_saturating_add(self.start_column, size))

    def shrink_right(self, size: int) -> WindowRect:
        """Remove ``size`` columns on the right."""
        return replace(self, dimensions=self.dimensions.shrink_columns(size))

    def shrink_top(self, rows: int) -> WindowRect:
        """Remove ``rows`` rows at the top."""
        dimensions = self.dimensions.shrink_rows(rows)
        return replace(self, dimensions=dimensions, start_row=_saturating_add(self.start_row, rows))

    def shrink_bottom(self, rows: int) -> WindowRect:
        """Remove ``rows`` rows at the bottom."""
        return replace(self, dimensions=self.dimensions.shrink_rows(rows))


def starting_rect(dimensions: WindowSize, options: RenderEngineOptions) -> WindowRect:
    """The initial rectangle for a window, honouring the maximum size and its alignment."""
    max_size = options.max_size
    start_row = 0
    start_column = 0
    if dimensions.columns > max_size.max_columns:
        extra_width = dimensions.columns - max_size.max_columns
        dimensions = dimensions.shrink_columns(extra_width)
        start_column = {
            MaxColumnsAlignment.LEFT: 0,
            MaxColumnsAlignment.CENTER: extra_width // 2,
            MaxColumnsAlignment.RIGHT: extra_width,
        }[max_size.max_columns_alignment]
    if dimensions.rows > max_size.max_rows:
        extra_height = dimensions.rows - max_size.max_rows
        dimensions = dimensions.shrink_rows(extra_height)
        start_row = {
            MaxRowsAlignment.TOP: 0,
            MaxRowsAlignment.CENTER: extra_height // 2,
            MaxRowsAlignment.BOTTOM: extra_height,
        }[max_size.max_rows_alignment]
    return WindowRect(dimensions=dimensions, start_column=start_column, start_row=start_row)