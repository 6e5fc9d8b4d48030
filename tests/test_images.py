from pathlib import Path

import pytest

from presterm.images import Image, ImageSource, PrintImageError, PrintOptions, RegisterImageError
from presterm.style import Color


class StubImage:
    def __init__(self, width, height):
        self.size = (width, height)

    def dimensions(self):
        return self.size


def test_generated_sources_are_equal():
    assert ImageSource() == ImageSource()
    assert ImageSource().is_generated
    assert not ImageSource(Path("a.png")).is_generated


def test_images_compare_by_source():
    source = ImageSource(Path("picture.png"))
    first = Image(StubImage(1, 1), source)
    second = Image(StubImage(5, 7), ImageSource(Path("picture.png")))
    assert first == second
    assert hash(first) == hash(second)


def test_images_with_different_sources_differ():
    first = Image(StubImage(1, 1), ImageSource(Path("a.png")))
    second = Image(StubImage(1, 1), ImageSource(Path("b.png")))
    generated = Image(StubImage(1, 1), ImageSource())
    assert (first == second) is False
    assert (first == generated) is False
    assert generated == Image(StubImage(3, 3), ImageSource())


def test_dimensions_delegate_to_protocol_image():
    image = Image(StubImage(4, 9), ImageSource())
    assert image.dimensions() == (4, 9)


def test_repr_shows_dimensions():
    image = Image(StubImage(2, 3), ImageSource())
    assert repr(image) == "Image<2x3>"


def test_print_options_equality_and_defaults():
    options = PrintOptions(columns=2, rows=3)
    assert options == PrintOptions(columns=2, rows=3, z_index=0, background_color=None)
    assert options.column_width == 0
    colored = PrintOptions(columns=2, rows=3, background_color=Color.RED)
    assert colored.background_color == Color.RED
    assert (colored == options) is False


def test_error_default_messages():
    assert str(PrintImageError()) == "unsupported image type"
    assert str(RegisterImageError()) == "printer can't register images"


def test_error_custom_messages():
    with pytest.raises(PrintImageError, match="boom"):
        raise PrintImageError("boom")
    assert str(RegisterImageError("image decoding: bad")) == "image decoding: bad"