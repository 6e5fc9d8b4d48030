"""Colours, text styles and styled text fragments."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import ClassVar, Optional

from wcwidth import wcswidth, wcwidth

_PALETTE = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Color:
    """A terminal colour: either a named palette colour or an RGB triple."""

    r: int = 0
    g: int = 0
    b: int = 0
    name: Optional[str] = None

    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]

    def __post_init__(self) -> None:
        if self.name is not None and self.name not in _PALETTE:
            raise ValueError(f"unknown palette color: {self.name!r}")
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"color component out of range: {component}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Build an RGB colour."""
        return cls(r, g, b)

    @property
    def is_rgb(self) -> bool:
        return self.name is None


for _name in _PALETTE:
    setattr(Color, _name.upper(), Color(name=_name))


def _color_sgr(color: Color, background: bool) -> str:
    """SGR parameters selecting the given colour."""
    if color.name is not None:
        base = 40 if background else 30
        return str(base + _PALETTE.index(color.name))
    selector = 48 if background else 38
    return f"{selector};2;{color.r};{color.g};{color.b}"


@dataclass(frozen=True)
class Colors:
    """A foreground/background colour pair; None means the terminal default."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None


class Attribute(enum.Flag):
    BOLD = enum.auto()
    ITALICS = enum.auto()
    UNDERLINED = enum.auto()
    STRIKETHROUGH = enum.auto()


_NO_ATTRIBUTES = Attribute(0)

_ATTRIBUTE_CODES = (
    (Attribute.BOLD, "1"),
    (Attribute.ITALICS, "3"),
    (Attribute.UNDERLINED, "4"),
    (Attribute.STRIKETHROUGH, "9"),
)


@dataclass(frozen=True)
class TextStyle:
    """An immutable text style; every modifier returns a new style."""

    flags: Attribute = _NO_ATTRIBUTES
    text_colors: Colors = field(default_factory=Colors)
    font_size: int = 1

    def bold(self) -> TextStyle:
        return replace(self, flags=self.flags | Attribute.BOLD)

    def italics(self) -> TextStyle:
        return replace(self, flags=self.flags | Attribute.ITALICS)

    def underlined(self) -> TextStyle:
        return replace(self, flags=self.flags | Attribute.UNDERLINED)

    def strikethrough(self) -> TextStyle:
        return replace(self, flags=self.flags | Attribute.STRIKETHROUGH)

    def fg_color(self, color: Color) -> TextStyle:
        return replace(self, text_colors=replace(self.text_colors, foreground=color))

    def bg_color(self, color: Color) -> TextStyle:
        return replace(self, text_colors=replace(self.text_colors, background=color))

    def size(self, size: int) -> TextStyle:
        return replace(self, font_size=size)

    def colors(self, colors: Colors) -> TextStyle:
        return replace(self, text_colors=colors)

    @classmethod
    def colored(cls, colors: Colors) -> TextStyle:
        return cls(text_colors=colors)

    def merged(self, other: TextStyle) -> TextStyle:
        """Combine with another style, keeping this style's values where set."""
        colors = Colors(
            foreground=self.text_colors.foreground or other.text_colors.foreground,
            background=self.text_colors.background or other.text_colors.background,
        )
        return replace(self, flags=self.flags | other.flags, text_colors=colors)

    def apply(self, content: str) -> str:
        """Render the content with the escape sequences for this style."""
        codes = [code for attribute, code in _ATTRIBUTE_CODES if attribute in self.flags]
        if self.text_colors.foreground is not None:
            codes.append(_color_sgr(self.text_colors.foreground, background=False))
        if self.text_colors.background is not None:
            codes.append(_color_sgr(self.text_colors.background, background=True))
        text = content
        if self.font_size > 1:
            text = f"\x1b]66;s={self.font_size};{content}\x1b\\"
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


@dataclass(frozen=True)
class Text:
    """A piece of text with a single style."""

    content: str = ""
    style: TextStyle = field(default_factory=TextStyle)

    def width(self) -> int:
        """The display width of the content in terminal cells."""
        width = wcswidth(self.content)
        if width < 0:
            width = sum(max(wcwidth(char), 0) for char in self.content)
        return width