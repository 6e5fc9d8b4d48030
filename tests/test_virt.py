import pytest
from PIL import Image as PilImage

from presterm.ascii import TOP_CHAR, AsciiPrinter
from presterm.images import Image, ImageSource, PrintOptions
from presterm.properties import WindowSize
from presterm.style import Color, Colors, Text, TextStyle
from presterm.terminal import (
    ClearScreen,
    MoveDown,
    MoveTo,
    MoveToColumn,
    MoveToNextLine,
    MoveToRow,
    PrintImage,
    PrintText,
    SetColors,
)
from presterm.virt import ImageBehavior, PrintedImage, StyledChar, VirtualTerminal, iter_row_texts


def contents(grid):
    return ["".join(cell.character for cell in row) for row in grid.rows]


def small_terminal(behavior=ImageBehavior.STORE):
    return VirtualTerminal(WindowSize(rows=2, columns=3, height=0, width=0), behavior)


def test_text():
    term = small_terminal()
    for char in "abc":
        term.execute(PrintText(char))
    term.execute(MoveToNextLine())
    term.execute(PrintText("A"))
    grid = term.into_contents()
    assert len(grid.rows) == 2
    assert contents(grid) == ["abc", "A  "]


def test_movement():
    term = small_terminal()
    term.execute(PrintText("A"))
    term.execute(MoveDown(1))
    term.execute(PrintText("B"))
    term.execute(MoveTo(2, 0))
    term.execute(PrintText("C"))
    term.execute(MoveToRow(1))
    term.execute(MoveToColumn(2))
    term.execute(PrintText("D"))
    assert contents(term.into_contents()) == ["A C", " BD"]


def test_iterator():
    row = [
        StyledChar(" ", TextStyle()),
        StyledChar("A", TextStyle()),
        StyledChar("B", TextStyle().bold()),
        StyledChar("C", TextStyle().bold()),
        StyledChar("D", TextStyle()),
    ]
    assert list(iter_row_texts(row)) == [Text(" A"), Text("BC", TextStyle().bold()), Text("D")]


def test_iterator_empty_row():
    assert list(iter_row_texts([])) == []


def test_text_outside_grid_is_dropped():
    term = small_terminal()
    term.execute(MoveTo(0, 5))
    term.execute(PrintText("xyz"))
    assert contents(term.into_contents()) == ["   ", "   "]


def test_colors_are_merged_into_style():
    term = small_terminal()
    term.execute(SetColors(Colors(foreground=Color.RED)))
    term.execute(PrintText("a"))
    cell = term.into_contents().rows[0][0]
    assert cell.style.text_colors.foreground == Color.RED


def test_clear_screen_keeps_background():
    term = small_terminal()
    term.execute(PrintText("ab"))
    term.execute(SetColors(Colors(background=Color.BLUE)))
    term.execute(ClearScreen())
    grid = term.into_contents()
    assert contents(grid) == ["   ", "   "]
    assert grid.background_color == Color.BLUE


def test_next_line_uses_row_height():
    term = VirtualTerminal(WindowSize(rows=4, columns=4, height=0, width=0))
    term.execute(PrintText("a", TextStyle().size(2)))
    term.execute(MoveToNextLine())
    assert term.cursor_row() == 2


def red_image():
    pil_image = PilImage.new("RGBA", (2, 2), (255, 0, 0, 255))
    return Image(AsciiPrinter().register(pil_image), ImageSource())


def test_store_image():
    term = small_terminal()
    image = red_image()
    term.execute(MoveTo(1, 1))
    term.execute(PrintImage(image, PrintOptions(columns=2, rows=1)))
    grid = term.into_contents()
    assert grid.images == {(1, 1): PrintedImage(image, 2)}
    assert contents(grid) == ["   ", "   "]


def test_print_ascii_image():
    term = VirtualTerminal(WindowSize(rows=3, columns=3, height=0, width=0), ImageBehavior.PRINT_ASCII)
    term.execute(PrintImage(red_image(), PrintOptions(columns=2, rows=1)))
    grid = term.into_contents()
    assert contents(grid)[0] == TOP_CHAR * 2 + " "
    assert grid.rows[0][0].style.text_colors == Colors(Color.rgb(255, 0, 0), Color.rgb(255, 0, 0))
    assert grid.images == {}
    assert term.cursor_row() == 1


def test_unknown_command():
    with pytest.raises(TypeError):
        small_terminal().execute(object())