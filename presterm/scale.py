"""Fitting images into a region of the terminal."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .properties import CursorPosition, WindowSize

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _round(value: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _saturate(value: float, maximum: int) -> int:
    if math.isnan(value):
        return 0
    if value >= maximum:
        return maximum
    if value <= 0:
        return 0
    return int(value)


@dataclass(frozen=True)
class TerminalRect:
    """A size in terminal cells."""

    columns: int
    rows: int


class ImageScaler:
    """Scales images so they fit the window they are drawn in."""

    def __init__(self, horizontal_margin: float = 0.05) -> None:
        self.horizontal_margin = horizontal_margin

    def __repr__(self) -> str:
        return f"ImageScaler(horizontal_margin={self.horizontal_margin})"

    def scale_image(
        self,
        scale_size: WindowSize,
        window_dimensions: WindowSize,
        image_width: int,
        image_height: int,
        position: CursorPosition,
    ) -> TerminalRect:
        """Scale an image so its width spans ``scale_size``, then fit it into the window."""
        aspect_ratio = _divide(image_height, image_width)
        scaled_width = scale_size.columns * scale_size.pixels_per_column()
        scaled_height = scaled_width * aspect_ratio
        return self.fit_image_to_rect(
            window_dimensions,
            _saturate(scaled_width, _U32_MAX),
            _saturate(scaled_height, _U32_MAX),
            position,
        )

    def fit_image_to_rect(
        self,
        dimensions: WindowSize,
        image_width: int,
        image_height: int,
        position: CursorPosition,
    ) -> TerminalRect:
        """Shrink an image so it fits the dimensions of the layout it is shown in."""
        aspect_ratio = _divide(image_height, image_width)

        column_margin = _saturate(dimensions.columns * (1.0 - self.horizontal_margin), _U32_MAX)
        width_in_columns = _saturate(_divide(image_width, dimensions.pixels_per_column()), _U32_MAX)
        height_in_rows = _saturate(_divide(image_height, dimensions.pixels_per_row()), _U32_MAX)

        # Only the width is used when drawing, so shrink it by how much the height overflows.
        available_height = max(dimensions.rows - position.row, 0)
        if height_in_rows > available_height:
            shrink_ratio = available_height / height_in_rows
            width_in_columns = _saturate(_round(width_in_columns * shrink_ratio), _U32_MAX)
        width_in_columns = min(width_in_columns, column_margin)

        # Derive the height from the original aspect ratio and the window's cell aspect ratio.
        height_in_rows = _saturate(
            _round(width_in_columns * aspect_ratio * dimensions.aspect_ratio()), _U16_MAX
        )
        columns = max(width_in_columns, 1) & _U16_MAX
        rows = max(height_in_rows, 1)
        return TerminalRect(columns=columns, rows=rows)