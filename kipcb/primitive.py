"""Graphical primitives found on a board and the factory that builds them."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import enum
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache

import pygame

from kipcb.sexpr import Symbol, find_sub_sexpr, to_string

Point = tuple[float, float]

LINE_COLOR = pygame.Color(255, 255, 255)


class PrimitiveError(ValueError):
    """Raised when a primitive's s-expression is malformed."""


class Scope(enum.Enum):
    """Whether a primitive belongs to the board or to a footprint."""

    GLOBAL = "global"
    FOOTPRINT = "footprint"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def extract_xy(sexpr: list) -> Point:
    """Return the x, y pair from a list such as ``(start x y)``."""
    if sexpr is None or len(sexpr) < 3:
        shown = "nil" if sexpr is None else to_string(sexpr)
        raise PrimitiveError(f"malformed xy pair s-expr: {shown}")
    x, y = sexpr[1], sexpr[2]
    if not (_is_number(x) and _is_number(y)):
        raise PrimitiveError(f"malformed xy pair s-expr: {to_string(sexpr)}")
    return float(x), float(y)


@dataclass
class Primitive(ABC):
    """Base of all drawable shapes."""

    scope: Scope
    layer: str | None = None
    width: float | None = None
    start: Point | None = None
    end: Point | None = None
    angle: float | None = None
    pts: list[Point] = field(default_factory=list)

    @abstractmethod
    def draw(self, surface: pygame.Surface | None) -> None:
        """Draw the primitive onto *surface*."""


_LINE_SCOPES = {"gr_line": Scope.GLOBAL, "fp_line": Scope.FOOTPRINT}


@dataclass
class Line(Primitive):
    """A straight segment, either ``gr_line`` or ``fp_line``."""

    @classmethod
    def from_sexpr(cls, line: list) -> Line:
        """Build a line from its s-expression; start and end are required."""
        message = f"malformed line s-expr: {to_string(line)}"
        if len(line) < 5 or not isinstance(line[0], Symbol):
            raise PrimitiveError(message)
        scope = _LINE_SCOPES.get(line[0])
        if scope is None:
            raise PrimitiveError(message)

        start = find_sub_sexpr(line, "start")
        end = find_sub_sexpr(line, "end")
        if start is None or end is None:
            raise PrimitiveError(message)

        result = cls(scope=scope, start=extract_xy(start), end=extract_xy(end))

        layer = find_sub_sexpr(line, "layer")
        if layer is not None and len(layer) >= 2 and isinstance(layer[1], str):
            result.layer = str(layer[1])
        width = find_sub_sexpr(line, "width")
        if width is not None and len(width) >= 2 and _is_number(width[1]):
            result.width = float(width[1])
        angle = find_sub_sexpr(line, "angle")
        if angle is not None and len(angle) >= 2 and _is_number(angle[1]):
            result.angle = float(angle[1])
        return result

    def draw(self, surface: pygame.Surface | None) -> None:
        """Report the start point and, given a surface, draw the segment."""
        if self.start is None:
            raise PrimitiveError("line has no start point")
        print(f"[+] START: {self.start[0]:g} {self.start[1]:g}")
        if surface is None or self.end is None:
            return
        thickness = max(1, round(self.width)) if self.width else 1
        pygame.draw.line(
            surface,
            LINE_COLOR,
            (round(self.start[0]), round(self.start[1])),
            (round(self.end[0]), round(self.end[1])),
            thickness,
        )


Creator = Callable[[list], Primitive]


class PrimitiveFactory:
    """Maps s-expression head names to primitive constructors."""

    def __init__(self) -> None:
        self._creators: dict[str, Creator] = {}

    def register(self, name: str, creator: Creator) -> None:
        """Register *creator* for *name*, replacing any earlier one."""
        self._creators[name] = creator

    def create(self, name: str, sexpr: list) -> Primitive | None:
        """Build a primitive, or return None when *name* is unknown."""
        creator = self._creators.get(name)
        if creator is None:
            return None
        return creator(sexpr)


@lru_cache(maxsize=None)
def default_factory() -> PrimitiveFactory:
    """Return the shared factory with the built-in primitives registered."""
    factory = PrimitiveFactory()
    for name in _LINE_SCOPES:
        factory.register(name, Line.from_sexpr)
    return factory