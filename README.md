# presterm

Building blocks for slide presentations that run in a terminal. The package has
styled text, horizontal layout, window and rectangle geometry, and terminal commands.
It has a terminal that writes those commands as escape sequences to a stream, and an
in-memory terminal that records what is drawn on it. Images can be drawn as coloured
half blocks or sent inline with the iTerm2 image protocol.

## Installation

```
pip install presterm
```

To run the tests:

```
pip install "presterm[test]"
pytest
```

## Modules

- `presterm.style` holds the styled text primitives. `Color` is a named palette colour
  (`Color.RED` and the others) or an RGB triple made with `Color.rgb`. `Colors` is a
  foreground and background pair. `TextStyle` is immutable, and each of `bold`,
  `italics`, `underlined`, `strikethrough`, `fg_color`, `bg_color`, `size`, `colors`
  and `merged` returns a new style. `TextStyle.apply` wraps a string in the matching
  SGR escape sequences. `Text` is a string with a style, and `Text.width` gives its
  display width in cells.
- `presterm.properties` holds `WindowSize` (rows, columns and pixel height and width)
  and `CursorPosition`. `WindowSize.current` asks the terminal for its size. When the
  terminal reports no pixel size, it estimates one from the font size fallback.
  `shrink_rows` and `shrink_columns` keep the ratio of pixels per cell.
- `presterm.layout` holds `Margin` (`Margin.fixed`, `Margin.percent`) and `Alignment`
  (`Alignment.left`, `Alignment.right`, `Alignment.center`). It also holds `Layout`,
  whose `compute` returns a `Positioning`: the column a line starts at and its maximum
  length.
- `presterm.rect` holds `WindowRect`, which has methods to shrink it from each side. It
  also holds `MaxSize` with `MaxColumnsAlignment` and `MaxRowsAlignment`,
  `RenderEngineOptions`, and `starting_rect`. `starting_rect` fits a window into the
  maximum size and places it by the chosen alignment.
- `presterm.terminal` holds the terminal commands: `BeginUpdate`, `EndUpdate`, `MoveTo`,
  `MoveToRow`, `MoveToColumn`, `MoveDown`, `MoveRight`, `MoveLeft`, `MoveToNextLine`,
  `PrintText`, `ClearScreen`, `SetColors`, `SetBackgroundColor`, `Flush` and
  `PrintImage`. It also holds the following:
  - `TerminalIo`, the interface for anything that executes commands.
  - `StreamWriter`. On `init` it switches a tty into raw mode, hides the cursor when
    `should_hide_cursor()` says to, and enters the alternate screen. `deinit` undoes
    all of that.
  - `Terminal`, which writes commands through a writer and tracks the cursor row. It
    hands `PrintImage` commands to the image printer it was given. It is a context
    manager, and `close` deinitialises the writer.
- `presterm.virt` holds `VirtualTerminal`, an in-memory `TerminalIo` that draws into a
  grid of `StyledChar` cells. `into_contents` returns a `TerminalGrid`. With
  `ImageBehavior.STORE`, printed images are recorded as `PrintedImage` entries keyed by
  their position. With `ImageBehavior.PRINT_ASCII` they are drawn as half blocks.
  `iter_row_texts` groups the cells of a row into `Text` runs.
- `presterm.images` holds `Image`, a registered image with its `ImageSource`. Two images
  are equal when their sources are equal. It also holds `PrintOptions`, and the
  exceptions `RegisterImageError` and `PrintImageError`.
- `presterm.scale` holds `ImageScaler`, which fits an image into a window (`fit_image_to_rect`)
  or scales it to a width (`scale_image`). Both return a `TerminalRect` in cells.
- `presterm.ascii` holds `AsciiPrinter` and `AsciiImage`. The printer draws two pixel rows
  per terminal row with `▀` and `▄`. It blends partly transparent pixels with an RGB
  background colour.
- `presterm.iterm` holds `ItermPrinter` and `ItermImage`. The printer emits the iTerm2
  inline image escape sequence with PNG contents.

## Example

```python
from PIL import Image as PilImage

from presterm.ascii import AsciiPrinter
from presterm.images import Image, ImageSource, PrintOptions
from presterm.layout import Alignment, Layout, Margin
from presterm.properties import WindowSize
from presterm.style import TextStyle
from presterm.terminal import MoveToNextLine, PrintImage, PrintText
from presterm.virt import ImageBehavior, VirtualTerminal

size = WindowSize(rows=4, columns=10, height=0, width=0)
terminal = VirtualTerminal(size, ImageBehavior.PRINT_ASCII)
terminal.execute(PrintText("hello", TextStyle().bold()))
terminal.execute(MoveToNextLine())

picture = AsciiPrinter().register(PilImage.new("RGBA", (2, 2), (255, 0, 0, 255)))
terminal.execute(PrintImage(Image(picture, ImageSource()), PrintOptions(columns=2, rows=1)))
grid = terminal.into_contents()

positioning = Layout(Alignment.left(Margin.fixed(5))).compute(
    WindowSize(rows=0, columns=100, height=0, width=0), 10
)
# Positioning(max_line_length=90, start_column=5)
```

## What the package does not do

The package has no render engine that turns a list of slide operations into terminal
commands. It also has no word-wrapping text drawer and no parser for ANSI-coloured
input. It does not choose an image printer from the terminal's graphics capabilities,
and it does not draw full-screen error messages. It provides the pieces such a renderer
would use: layout and rectangle geometry, styles, terminal commands, the stream and
virtual terminals, image scaling, and the half-block and iTerm2 image printers. It has
no command-line program.