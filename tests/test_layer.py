import pytest

from kipcb.layer import (
    Layer,
    LayerError,
    LayerType,
    assert_layers_section,
    map_layer_type,
)
from kipcb.primitive import Primitive, Scope
from kipcb.sexpr import parse


class _Recorder(Primitive):
    def __init__(self, log, tag):
        super().__init__(scope=Scope.GLOBAL)
        self.log = log
        self.tag = tag

    def draw(self, surface):
        self.log.append((self.tag, surface))


@pytest.mark.parametrize("member", list(LayerType))
def test_map_layer_type_round_trip(member):
    assert map_layer_type(member.value) is member


def test_map_layer_type_error():
    with pytest.raises(LayerError, match="wrong TYPE of bogus for layer"):
        map_layer_type("bogus")


def test_layer_from_quoted_name():
    layer = Layer.from_sexpr(parse('(0 "F.Cu" signal)'))
    assert layer.ordinal == 0
    assert layer.canonical_name == "F.Cu"
    assert layer.layer_type is LayerType.SIGNAL
    assert layer.user_name is None


def test_layer_from_symbol_name_with_user_name():
    layer = Layer.from_sexpr(parse('(44 Edge.Cuts user "Board Edge")'))
    assert layer.ordinal == 44
    assert layer.canonical_name == "Edge.Cuts"
    assert layer.layer_type is LayerType.USER
    assert layer.user_name == "Board Edge"


def test_layer_missing_canonical_name():
    with pytest.raises(LayerError, match="missing CANONICAL_NAME"):
        Layer.from_sexpr(parse("(0 (x) signal)"))
    with pytest.raises(LayerError, match="missing CANONICAL_NAME"):
        Layer.from_sexpr(parse("(0)"))


def test_layer_bad_type():
    with pytest.raises(LayerError, match="wrong TYPE"):
        Layer.from_sexpr(parse("(0 F.Cu copper)"))


def test_assert_layers_section_accepts_valid():
    section = parse('(layers (0 "F.Cu" signal) (31 "B.Cu" signal))')
    assert_layers_section(section)
    assert [Layer.from_sexpr(c).ordinal for c in section[1:]] == [0, 31]


@pytest.mark.parametrize(
    "section",
    [None, "(layers)", "(stack (0 F.Cu signal))", "(layers (0 F.Cu signal) foo)"],
)
def test_assert_layers_section_errors(section):
    value = parse(section) if isinstance(section, str) else section
    with pytest.raises(LayerError):
        assert_layers_section(value)


def test_add_primitive_and_draw_all_in_order():
    layer = Layer.from_sexpr(parse('(0 "F.Cu" signal)'))
    log = []
    layer.add_primitive(_Recorder(log, "a"))
    layer.add_primitive(_Recorder(log, "b"))
    marker = object()
    layer.draw_all(marker)
    assert log == [("a", marker), ("b", marker)]
    assert len(layer.primitives) == 2