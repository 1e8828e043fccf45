"""Board layers and the ``layers`` section."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from kipcb.primitive import Primitive
from kipcb.sexpr import Symbol, to_string


class LayerError(ValueError):
    """Raised when a layer or the layers section is malformed."""


class LayerType(enum.Enum):
    """The kind of a board layer."""

    JUMPER = "jumper"
    MIXED = "mixed"
    POWER = "power"
    SIGNAL = "signal"
    USER = "user"


def map_layer_type(type_name: str) -> LayerType:
    """Return the layer type named *type_name*."""
    try:
        return LayerType(type_name)
    except ValueError:
        raise LayerError(f"wrong TYPE of {type_name} for layer") from None


def assert_layers_section(layers: object) -> None:
    """Check that *layers* is ``(layers (..) ...)`` with at least one layer."""
    if not isinstance(layers, list):
        raise LayerError("layers section must exist and be a list")
    if len(layers) <= 1:
        raise LayerError("layers section should consist of at least 1 layer")
    head, *rest = layers
    if not (isinstance(head, Symbol) and head == "layers"):
        raise LayerError('layers section should begin with a symbol "layers"')
    if not all(isinstance(child, list) for child in rest):
        raise LayerError("each layer inside layers section should be a list")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Layer:
    """One board layer and the primitives drawn on it."""

    ordinal: int | None
    canonical_name: str
    layer_type: LayerType | None
    user_name: str | None = None
    primitives: list[Primitive] = field(default_factory=list)

    @classmethod
    def from_sexpr(cls, layer: list) -> Layer:
        """Build a layer from an entry such as ``(0 "F.Cu" signal)``."""
        ordinal: int | None = None
        name: str | None = None
        layer_type: LayerType | None = None
        user_name: str | None = None
        for child in layer:
            if _is_int(child) and ordinal is None:
                ordinal = child
            elif name is None:
                if not isinstance(child, str):
                    raise LayerError(f"layer: {to_string(child)} missing CANONICAL_NAME")
                name = str(child)
            elif isinstance(child, Symbol) and layer_type is None:
                layer_type = map_layer_type(child)
            elif (
                isinstance(child, str)
                and not isinstance(child, Symbol)
                and layer_type is not None
                and user_name is None
            ):
                user_name = child
        if name is None:
            raise LayerError(f"layer: {to_string(layer)} missing CANONICAL_NAME")
        return cls(ordinal, name, layer_type, user_name)

    def add_primitive(self, primitive: Primitive) -> None:
        """Attach *primitive* to this layer."""
        self.primitives.append(primitive)

    def draw_all(self, surface) -> None:
        """Draw every primitive of this layer in the order added."""
        for primitive in self.primitives:
            primitive.draw(surface)