# rasterbot

Pure-Python tools for in-memory bitmaps. The package reads and writes BMP
files, searches images for colours and for smaller images, and includes a
lenient base64 codec, a small reproducible random number generator, alert
dialogs and clipboard-ready image data.

## Modules

- `rasterbot.bitmap` defines the `Bitmap`, `Point` and `Rect` types.
  A `Bitmap` holds rows of pixels with the top row first. Each pixel is stored
  as blue, green, red. For 32-bit images an unused fourth byte follows. Rows
  are `bytewidth` bytes apart. `Bitmap` provides these methods:
  - `copy()` and `copy_portion(rect)` make copies.
  - `point_in_bounds(x, y)`, `rect_in_bounds(rect)` and `bounds()` deal with
    the image's bounds.
  - `pixel_at(x, y)` returns `(red, green, blue)`.
  - `hex_at(x, y)` returns a `0xRRGGBB` integer.

  `colors_similar(a, b, tolerance)` compares two `0xRRGGBB` colours. A
  tolerance of 0.0 means an exact match and 1.0 matches any colour.
- `rasterbot.bmp` handles uncompressed 24-bit and 32-bit BMP files.
  - `read_bmp(path)` understands Windows v3/v4/v5 and OS/2 v1 headers. On
    failure it raises `BMPReadError`. The exception's `code` is a
    `BMPErrorCode`, and `error_string(code)` describes it.
  - `save_bmp(bitmap, path)` writes a Windows v3 BMP.
  - `bitmap_to_bmp_data(bitmap)` returns the same file contents as bytes.
  - `flip_rows(data, height, bytewidth)` reverses row order.
- `rasterbot.imageio` picks a format by file name.
  - `get_extension(fname)` and `image_type_from_extension(extension)` map a
    file name to an `ImageType`.
  - `load_bitmap(path, image_type)` and `save_bitmap(bitmap, path, image_type)`
    dispatch on that type. Only `ImageType.BMP` can be loaded or saved. Any
    other type raises `UnsupportedImageTypeError`.
  - `error_string(image_type, code)` describes an error code.
- `rasterbot.color_find` searches an image for one colour.
  - `find_color(image, color, rect=None, tolerance=0.0)` returns the first
    matching `Point`, or `None`.
  - `find_all_colors(...)` returns every match in row order.
  - `count_colors(...)` counts the matches.
  - A rectangle that leaves the image raises `ValueError`.
- `rasterbot.bitmap_find` searches one bitmap for another.
  - `find_bitmap(needle, haystack, rect=None, tolerance=0.0)` returns the
    origin of the first match, or `None`.
  - `find_all_bitmaps(...)` returns every match and `count_bitmaps(...)`
    counts them.
  - `bad_shift_table(needle)` maps each needle colour to its offset from the
    bottom-right corner.
- `rasterbot.b64` provides `encode(data)` and `decode(data)`. `encode`
  returns padded base64 bytes and raises `ValueError` for empty input.
  `decode` skips line breaks, padding and any other non-alphabet bytes.
- `rasterbot.deadbeef` provides `DeadbeefRandom(seed)`, whose methods are
  `seed(x)`, `rand()`, `uniform(a, b)` and `randrange(a, b)`.
  `generate_seed()` derives a seed from the clock.
- `rasterbot.alert` shows blocking dialogs. `show_alert(title, msg,
  default_button=None, cancel_button=None)` runs the first available program
  among `gmessage`, `gxmessage`, `kmessage` and `xmessage`. It returns `True`
  when the default button is pressed. If none of the programs can be run it
  raises `AlertError`. `build_message_args(...)` returns the command-line
  arguments that are used.
- `rasterbot.pasteboard` prepares clipboard data.
  - `bitmap_to_dib(bitmap)` returns BMP data without the file header.
  - `copy_bitmap_to_pasteboard(bitmap, writer)` passes that data to your
    `writer` callable. Failures are raised as `PasteError`, whose `code` is a
    `PasteErrorCode`. `paste_error_string(code)` describes the code.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Build a bitmap in memory and read a pixel:

```python
from rasterbot.bitmap import Bitmap

# Two pixels in one row, stored as blue, green, red: red, then green.
image = Bitmap(bytearray([0, 0, 255, 0, 255, 0]), width=2, height=1, bytewidth=6)
assert image.hex_at(0, 0) == 0xFF0000
```

Load a screenshot and look for a smaller image inside it:

```python
from rasterbot.bmp import read_bmp
from rasterbot.bitmap_find import find_bitmap

haystack = read_bmp("screen.bmp")
needle = read_bmp("button.bmp")
point = find_bitmap(needle, haystack)
if point is not None:
    print("found at", point.x, point.y)
```

Produce a reproducible sequence of random numbers:

```python
from rasterbot.deadbeef import DeadbeefRandom

rng = DeadbeefRandom(42)
values = [rng.randrange(0, 10) for _ in range(5)]
```

## What it does not do

- It does not capture the screen. Bitmaps come from BMP files or from bytes
  you supply.
- It does not send keyboard or mouse input.
- PNG is recognised as an `ImageType`, but PNG files cannot be loaded or
  saved.
- It has no clipboard access of its own. `copy_bitmap_to_pasteboard` only
  hands the data to the writer you pass in, and without a writer it raises
  `PasteError`.
- There is no command-line program.