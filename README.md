# skyness

A small pure-Python toolkit for simple raster graphics and text handling. It needs nothing beyond the standard library.

## What it provides

- `skyness.colors`: the X11 colour-name table.
  - `lookup_color(name)` looks up a name without regard to case. It raises `KeyError` for unknown names.
  - `text_rgb(name, end=None)` resolves an XPM colour specification.
    - A `#rrggbb` value is read as hexadecimal.
    - Otherwise the name is looked up, joined to `end` with a space when `end` is given (so that `"light blue"` works).
    - Unknown names give `0`, and `none` gives `NONE_COLOR` (`-1`).
- `skyness.visual`: TrueColor visuals.
  - `Visual(depth, red_mask, green_mask, blue_mask, byte_order)` describes a visual. It defaults to 24-bit, `0xRRGGBB` masks and least-significant byte first.
  - `Visual.color_value(color)` converts an `0xRRGGBB` colour to the visual's pixel value. At depth 24 and above the colour is returned unchanged.
  - `mask_shifts(red_mask, green_mask, blue_mask)` returns the shift and width of each channel.
- `skyness.image`: `Image(width, height, visual=None)`, an in-memory pixel buffer.
  - Rows are padded to 32 bits.
  - Bytes are stored in the visual's byte order.
  - Pixels are set and read with `put_pixel(x, y, color)` and `get_pixel(x, y)`. Coordinates outside the image raise `IndexError`.
- `skyness.xpm`: an XPM reader.
  - `xpm_to_image(xpm_data, visual=None)` reads from a sequence of strings.
  - `xpm_file_to_image(path, visual=None)` reads an XPM file in C source form.
  - `parse_xpm` and `strip_comments` are the lower-level steps.
  - Pixels whose colour is `none` are written as `TRANSPARENT_PIXEL` (`0xFF000000`).
  - Malformed data raises `XpmError`, a `ValueError`.
- `skyness.text`: substring search and word splitting.
  - `str_find` and `str_find_unquoted` search for a substring; `str_find_unquoted` ignores matches inside double quotes.
  - `split_words` splits on runs of spaces and tabs.
- `skyness.strings`: integer and separator helpers.
  - `itoa(n)` formats a 32-bit signed integer and raises `OverflowError` outside that range.
  - `split(s, charset)` and `count_words(s, charset)` work with runs of separator characters.
- `skyness.lines`: `LineReader(stream, buffer_size=128)` reads a text or binary stream one line at a time.
  - `read_line()` returns the next line with its newline, or `None` at the end.
  - Iterating over the reader yields each line.
- `skyness.printf`: a small formatter.
  - `render(fmt, *args)` returns the formatted text.
  - `printf(fmt, *args)` writes it to standard output and returns its length.
  - It supports `%c %s %p %d %i %u %x %X %%` and the colour escapes `%r %R %G %Y %B %M %C`.
  - Unknown conversions produce nothing.
  - Missing arguments raise `TypeError`.

## What it does not do

Images live only in memory. There is no window, no drawing to a screen, no keyboard or mouse handling and no event loop. To display an `Image`, hand its `data` bytes to a graphics library of your choice.

## Installing

```
pip install .
```

## Example

```python
from skyness.visual import Visual
from skyness.xpm import xpm_to_image

xpm = [
    "2 1 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
]
image = xpm_to_image(xpm, Visual())
print(image.width, image.height, hex(image.get_pixel(1, 0)))  # 2 1 0xff
```

```python
from skyness.printf import render

render("%s has %d moves (%x)", "player", 42, 255)  # 'player has 42 moves (ff)'
```

## Running the tests

```
pip install .[test]
pytest
```