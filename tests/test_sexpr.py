import re

import pytest

from kipcb.sexpr import (
    SexprParseError,
    Symbol,
    find_all_sub_sexprs,
    find_sub_sexpr,
    parse,
    parse_file,
    to_string,
)

LINE = "(gr_line (start 58 42) (end 58 29) (angle 90) (layer Edge.Cuts) (width 0.15))"


def test_parse_atom_kinds():
    expr = parse(LINE)
    assert expr[0] == "gr_line"
    assert isinstance(expr[0], Symbol)
    assert expr[1] == [Symbol("start"), 58, 42]
    assert isinstance(expr[1][1], int)
    width = expr[5][1]
    assert isinstance(width, float) and width == 0.15


def test_quoted_string_is_not_symbol():
    expr = parse('(0 "F.Cu" signal)')
    assert expr[1] == "F.Cu"
    assert not isinstance(expr[1], Symbol)
    assert isinstance(expr[2], Symbol)


def test_string_escapes_round_trip():
    expr = ["a", 'say "hi"\\ok']
    text = to_string(expr)
    assert parse(text) == expr


def test_round_trip_preserves_types():
    expr = parse(LINE)
    again = parse(to_string(expr))
    assert again == expr
    assert [type(x) for x in again[5]] == [type(x) for x in expr[5]]


def test_negative_and_exponent_numbers():
    expr = parse("(p -3 -1.5 2e3)")
    assert expr[1:] == [-3, -1.5, 2000.0]
    assert isinstance(expr[3], float)


def test_bare_atom():
    assert parse("  kicad_pcb  ") == Symbol("kicad_pcb")


def test_parse_errors():
    with pytest.raises(SexprParseError):
        parse("(a (b c)")
    with pytest.raises(SexprParseError):
        parse(")")
    with pytest.raises(SexprParseError):
        parse("   ")
    with pytest.raises(SexprParseError):
        parse('(a "unterminated)')


def test_parse_file(tmp_path):
    path = tmp_path / "board.kicad_pcb"
    path.write_text("(kicad_pcb (version 4))", encoding="utf-8")
    assert parse_file(path) == [Symbol("kicad_pcb"), [Symbol("version"), 4]]


def test_to_string_rejects_unknown():
    with pytest.raises(TypeError):
        to_string([object()])


def test_find_sub_sexpr_nested_first():
    root = parse("(kicad_pcb (general (links 1)) (layers (0 F.Cu signal)) (links 9))")
    found = find_sub_sexpr(root, "links")
    assert found == [Symbol("links"), 1]
    assert find_sub_sexpr(root, "layers") is root[2]
    assert find_sub_sexpr(root, "missing") is None


def test_find_sub_sexpr_ignores_string_heads():
    root = parse('(root ("layer" 1))')
    assert find_sub_sexpr(root, "layer") is None


def test_find_all_by_name_in_order():
    root = parse("(r (a 1) (b (a 2 (a 3))) (a 4))")
    found = find_all_sub_sexprs(root, "a")
    assert [item[1] for item in found] == [1, 2, 3, 4]


def test_find_all_by_pattern_full_match():
    root = parse(
        "(r (gr_line (start 0 0)) (module (fp_line (start 1 1))) (gr_line_x 5))"
    )
    found = find_all_sub_sexprs(root, re.compile("(gr|fp)_line"))
    assert [item[0] for item in found] == ["gr_line", "fp_line"]