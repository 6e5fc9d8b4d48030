import io
from types import SimpleNamespace
from unittest import mock

import pytest

from presterm.style import Color, Colors, TextStyle
from presterm.terminal import (
    ClearScreen,
    Flush,
    MoveDown,
    MoveTo,
    MoveToNextLine,
    MoveToRow,
    PrintImage,
    PrintText,
    SetColors,
    StreamWriter,
    Terminal,
    TerminalError,
    should_hide_cursor,
)


class RecordingWriter:
    def __init__(self):
        self.data = []
        self.inits = 0
        self.deinits = 0
        self.flushes = 0

    def write(self, data):
        self.data.append(data)

    def flush(self):
        self.flushes += 1

    def init(self):
        self.inits += 1

    def deinit(self):
        self.deinits += 1


class RecordingPrinter:
    def __init__(self):
        self.calls = []

    def print(self, image, options, terminal):
        self.calls.append((image, options, terminal))


class FailingStream(io.StringIO):
    def write(self, data):
        raise OSError("broken pipe")


def make_terminal():
    writer = RecordingWriter()
    return Terminal(writer, RecordingPrinter()), writer


def test_init_and_close_lifecycle():
    writer = RecordingWriter()
    with Terminal(writer, None) as terminal:
        assert writer.inits == 1
        assert terminal.cursor_row() == 0
    terminal.close()
    assert writer.deinits == 1


def test_suspend_and_resume():
    terminal, writer = make_terminal()
    terminal.suspend()
    terminal.resume()
    assert (writer.inits, writer.deinits) == (2, 1)


def test_move_commands_track_row():
    terminal, _ = make_terminal()
    terminal.execute(MoveTo(column=4, row=9))
    assert terminal.cursor_row() == 9
    terminal.execute(MoveToRow(3))
    assert terminal.cursor_row() == 3
    terminal.execute(MoveDown(2))
    assert terminal.cursor_row() == 3 + 2


def test_next_line_uses_tallest_text():
    terminal, _ = make_terminal()
    terminal.execute(MoveToRow(5))
    terminal.execute(PrintText("a", TextStyle().size(2)))
    terminal.execute(MoveToNextLine())
    assert terminal.cursor_row() == 5 + 2
    terminal.execute(MoveToNextLine())
    assert terminal.cursor_row() == 5 + 2 + 1


def test_clear_screen_resets_row():
    terminal, _ = make_terminal()
    terminal.execute(MoveToRow(12))
    terminal.execute(ClearScreen())
    assert terminal.cursor_row() == 0


def test_flush_reaches_writer():
    terminal, writer = make_terminal()
    terminal.execute(Flush())
    assert writer.flushes == 1


def test_print_text_writes_styled_content():
    terminal, writer = make_terminal()
    style = TextStyle().bold().fg_color(Color.RED)
    terminal.execute(PrintText("x", style))
    assert writer.data[-1] == style.apply("x")


def test_set_colors_resets_first():
    terminal, writer = make_terminal()
    terminal.execute(SetColors(Colors(foreground=Color.RED)))
    assert writer.data[0] == "\x1b[0m"
    assert len(writer.data) == 2


def test_print_image_delegates_and_moves_down():
    writer = RecordingWriter()
    printer = RecordingPrinter()
    terminal = Terminal(writer, printer)
    options = SimpleNamespace(rows=3)
    terminal.execute(MoveToRow(4))
    terminal.execute(PrintImage(image="img", options=options))
    assert printer.calls == [("img", options, terminal)]
    assert terminal.cursor_row() == 4 + 3


def test_move_to_escape_sequence():
    stream = io.StringIO()
    terminal = Terminal(StreamWriter(stream), None)
    before = len(stream.getvalue())
    terminal.execute(MoveTo(column=1, row=2))
    assert stream.getvalue()[before:] == "\x1b[3;2H"


def test_stream_writer_enters_alternate_screen():
    stream = io.StringIO()
    StreamWriter(stream).init()
    assert "\x1b[?1049h" in stream.getvalue()


def test_io_failure_raises_terminal_error():
    writer = RecordingWriter()
    terminal = Terminal(writer, None)
    terminal._writer = StreamWriter(FailingStream())
    with pytest.raises(TerminalError):
        terminal.execute(MoveToRow(1))


@mock.patch.dict("os.environ", {"TERM_PROGRAM": "WezTerm", "WSL_DISTRO_NAME": "distro"})
def test_cursor_shown_on_wezterm_under_wsl():
    assert should_hide_cursor() is False


@mock.patch.dict("os.environ", {"TERM_PROGRAM": "other"}, clear=True)
@mock.patch("sys.platform", "linux")
def test_cursor_hidden_elsewhere():
    assert should_hide_cursor() is True