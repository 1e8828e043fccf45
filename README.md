# kipcb

kipcb reads a KiCad board file (`.kicad_pcb`) as an s-expression. It checks
the header, the `general` section and the `layers` section, and then opens a
window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Using it from the command line

```
kipcb path/to/board.kicad_pcb
```

- With no file given, kipcb prints a usage line and exits with status 0.
- If the file cannot be read or parsed, kipcb prints `Parse error: ...` to
  stderr and exits with status 1.
- If the file parses, kipcb prints `Parsed <file> successfully!`.
- The root must be a list headed by `kicad_pcb`. The file must also have a
  `general` section and a well-formed `layers` section. If any of these checks
  fails, kipcb prints `Board error: ...` to stderr and exits with status 1.
- If all checks pass, kipcb opens an 800×600 window titled `kicad_pcb render`.
  It builds a built-in sample `gr_line` and prints that line's start point.
  The window stays open until you close it, and kipcb then exits with status 0.

## Using it as a library

```python
from kipcb.sexpr import parse_file, find_sub_sexpr, find_all_sub_sexprs
from kipcb.general import General
from kipcb.layer import Layer
from kipcb.primitive import default_factory

board = parse_file("board.kicad_pcb")

general = General.from_sexpr(find_sub_sexpr(board, "general"))
print(general.nets, general.footprints)

layers = [Layer.from_sexpr(item) for item in find_sub_sexpr(board, "layers")[1:]]

factory = default_factory()
lines = [factory.create("gr_line", expr)
         for expr in find_all_sub_sexprs(board, "gr_line")]
```

### `kipcb.sexpr`

- `parse` and `parse_file` turn text into nested Python lists. Each element
  is a `Symbol`, a quoted `str`, an `int` or a `float`. Malformed text raises
  `SexprParseError`.
- `to_string` turns such a structure back into text.
- `find_sub_sexpr(sexpr, key)` searches depth-first and returns the first
  nested list whose head is the symbol `key`. It returns `None` if there is
  no such list.
- `find_all_sub_sexprs(sexpr, key)` returns every nested list whose head is
  the symbol `key`. `key` may also be a compiled `re.Pattern`, which must
  match the whole symbol.

### `kipcb.general`

- `General.from_sexpr` reads `links`, `no_connects`, `thickness`, `drawings`,
  `tracks`, `zones`, `modules` (stored as `footprints`) and `nets`.
- Only integer values are taken. A non-integer value, such as a fractional
  thickness, leaves that field as `None`.
- `assert_general_section` raises `GeneralSectionError` when the section is
  missing or is not a list.

### `kipcb.layer`

- `Layer.from_sexpr` builds a layer from an entry such as
  `(0 "F.Cu" signal)`. It reads the ordinal, the canonical name, the
  `LayerType` and an optional user name.
- `map_layer_type` maps `jumper`, `mixed`, `power`, `signal` or `user` to a
  `LayerType`. Any other name raises `LayerError`.
- `assert_layers_section` checks that the section starts with `layers` and
  holds at least one list. It raises `LayerError` if not.
- `Layer.add_primitive` attaches a primitive to the layer.
- `Layer.draw_all` draws every attached primitive, in the order they were
  added.

### `kipcb.primitive`

- `Line.from_sexpr` accepts `gr_line` (`Scope.GLOBAL`) and `fp_line`
  (`Scope.FOOTPRINT`).
  - It requires `start` and `end`.
  - It reads `layer`, `width` and `angle` when they are present.
  - Malformed input raises `PrimitiveError`.
- `extract_xy` reads the coordinates from a list such as `(start x y)`.
- `Line.draw` prints the line's start point. When it is given a pygame
  surface, it also draws the segment in white.
- `PrimitiveFactory` maps head names to constructors. Its `create` method
  returns `None` for unknown names.
- `default_factory()` returns a shared factory with `gr_line` and `fp_line`
  registered.

### `kipcb.renderer`

`Renderer` is a pygame window that works as a context manager. It has:

- `clear()`, which fills the window with black.
- `present()`, which shows what has been drawn.
- `handle_events()`, which returns `False` once the window is closed.
- `close()`, which closes the window.
- a `surface` property, which gives the surface to draw on.

## What it does not do

- The command does not draw the board. The window is cleared to black every
  frame and nothing is drawn into it.
- The layers and the general counts are read and checked, but they are not
  shown.
- Only straight lines (`gr_line`, `fp_line`) are understood. Other graphical
  items, tracks, pads, zones and footprints are not built.