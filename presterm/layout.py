"""Horizontal placement of text within a window."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass

from .properties import WindowSize

_U16_MAX = 0xFFFF


def _clamp(value: int) -> int:
    return max(0, min(value, _U16_MAX))


class MarginKind(enum.Enum):
    FIXED = "fixed"
    PERCENT = "percent"


@dataclass(frozen=True)
class Margin:
    """A margin expressed in characters or as a percentage of the screen."""

    kind: MarginKind = MarginKind.FIXED
    value: int = 0

    @classmethod
    def fixed(cls, value: int) -> Margin:
        return cls(MarginKind.FIXED, value)

    @classmethod
    def percent(cls, value: int) -> Margin:
        return cls(MarginKind.PERCENT, value)

    def as_characters(self, screen_size: int) -> int:
        """The margin size in characters for a screen of the given width."""
        if self.kind is MarginKind.FIXED:
            return self.value
        return _clamp(int(screen_size * self.value / 100))


class AlignmentKind(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class Alignment:
    """How text is aligned; for center alignment the margin is a minimum."""

    kind: AlignmentKind
    margin: Margin = Margin()
    minimum_size: int = 0

    @classmethod
    def left(cls, margin: Margin) -> Alignment:
        return cls(AlignmentKind.LEFT, margin)

    @classmethod
    def right(cls, margin: Margin) -> Alignment:
        return cls(AlignmentKind.RIGHT, margin)

    @classmethod
    def center(cls, minimum_margin: Margin, minimum_size: int) -> Alignment:
        return cls(AlignmentKind.CENTER, minimum_margin, minimum_size)


@dataclass(frozen=True)
class Positioning:
    max_line_length: int
    start_column: int


class Layout:
    """Computes where a line of text starts and how long it may be."""

    def __init__(self, alignment: Alignment) -> None:
        self.alignment = alignment
        self.start_column_offset = 0
        self.font_size = 1

    def __repr__(self) -> str:
        return (
            f"Layout(alignment={self.alignment!r}, start_column_offset={self.start_column_offset}, "
            f"font_size={self.font_size})"
        )

    def with_start_column(self, column: int) -> Layout:
        layout = copy.copy(self)
        layout.start_column_offset = column
        return layout

    def with_font_size(self, font_size: int) -> Layout:
        layout = copy.copy(self)
        layout.font_size = font_size
        return layout

    def compute(self, dimensions: WindowSize, text_length: int) -> Positioning:
        columns = dimensions.columns
        text_length = _clamp(text_length * self.font_size)
        alignment = self.alignment
        if alignment.kind is AlignmentKind.LEFT:
            margin = alignment.margin.as_characters(columns)
            # A margin that can't be satisfied is ignored altogether.
            margin = _fit_to_columns(dimensions, _clamp(margin * 2), margin)
            start_column = margin
            max_line_length = columns - _clamp(margin * 2)
        elif alignment.kind is AlignmentKind.RIGHT:
            margin = alignment.margin.as_characters(columns)
            margin = _fit_to_columns(dimensions, _clamp(margin * 2), margin)
            start_column = max(columns - margin - text_length, 0, margin)
            max_line_length = (columns - margin) - start_column
        else:
            minimum_margin = alignment.margin.as_characters(columns)
            minimum_size = min(columns, alignment.minimum_size)
            minimum_margin = _fit_to_columns(
                dimensions,
                _clamp(_clamp(minimum_margin * 2) + minimum_size),
                minimum_margin,
            )
            max_line_length = max(
                min(text_length, columns - _clamp(minimum_margin * 2)), minimum_size
            )
            if max_line_length > columns:
                start_column = minimum_margin
            else:
                start_column = max((columns - max_line_length) // 2, minimum_margin)
        start_column = _clamp(start_column + self.start_column_offset)
        return Positioning(max_line_length=max_line_length, start_column=start_column)


def _fit_to_columns(dimensions: WindowSize, required_fit: int, actual_fit: int) -> int:
    return 0 if required_fit > dimensions.columns else actual_fit