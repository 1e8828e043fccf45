"""Command line entry point: load a board file and show it in a window."""

from __future__ import annotations

import sys

import pygame

from kipcb.general import General, GeneralSectionError, assert_general_section
from kipcb.layer import Layer, LayerError, assert_layers_section
from kipcb.primitive import Line, PrimitiveError
from kipcb.renderer import Renderer
from kipcb.sexpr import SexprParseError, Symbol, find_sub_sexpr, parse, parse_file

WINDOW_TITLE = "kicad_pcb render"
WINDOW_SIZE = (800, 600)
FRAME_DELAY_MS = 16
DEMO_LINE = "(gr_line (start 58 42) (end 58 29) (angle 90) (layer Edge.Cuts) (width 0.15))"


class BoardFormatError(ValueError):
    """Raised when a board file does not have the expected overall shape."""


def assert_header_section(root: object) -> None:
    """Check that *root* is a list starting with the symbol ``kicad_pcb``."""
    if not isinstance(root, list):
        raise BoardFormatError("root s-expression should be a list")
    if not root or not (isinstance(root[0], Symbol) and root[0] == "kicad_pcb"):
        raise BoardFormatError('root s-expression should start with a symbol named "kicad_pcb"')


def process_general_section(sexpr: list) -> General:
    """Find and read the ``general`` section of a board."""
    general = find_sub_sexpr(sexpr, "general")
    assert_general_section(general)
    return General.from_sexpr(general)


def process_layers_section(sexpr: list) -> list[Layer]:
    """Find the ``layers`` section and build every layer in it."""
    layers = find_sub_sexpr(sexpr, "layers")
    assert_layers_section(layers)
    return [Layer.from_sexpr(child) for child in layers[1:]]


def main(argv: list[str] | None = None) -> int:
    """Run the viewer; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: kipcb <kicad_pcb file>")
        return 0

    filename = args[0]
    try:
        root = parse_file(filename)
    except (OSError, UnicodeDecodeError, SexprParseError) as exc:
        print(f"Parse error: {exc}", file=sys.stderr)
        return 1
    print(f"Parsed {filename} successfully!")

    try:
        assert_header_section(root)
        process_general_section(root)
        process_layers_section(root)
    except (BoardFormatError, GeneralSectionError, LayerError) as exc:
        print(f"Board error: {exc}", file=sys.stderr)
        return 1

    with Renderer(WINDOW_TITLE, *WINDOW_SIZE) as renderer:
        try:
            line_sexpr = parse(DEMO_LINE)
        except SexprParseError as exc:
            print(f"Parse error: {exc}", file=sys.stderr)
            return 1
        print("Parsed dummy line successfully!")

        try:
            line = Line.from_sexpr(line_sexpr)
        except PrimitiveError as exc:
            print(f"Primitive error: {exc}", file=sys.stderr)
            return 1
        print("Successs??? ")
        line.draw(None)

        running = True
        while running:
            running = renderer.handle_events()
            renderer.clear()
            renderer.present()
            pygame.time.delay(FRAME_DELAY_MS)
    return 0


if __name__ == "__main__":
    sys.exit(main())