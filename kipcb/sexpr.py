"""S-expression parsing, formatting and searching for KiCad board files.

Lists are Python lists, symbols are :class:`Symbol` instances, quoted
strings are plain ``str``, and numbers are ``int`` or ``float``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator
from typing import Union


class Symbol(str):
    """An unquoted atom such as ``kicad_pcb`` or ``Edge.Cuts``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


class SexprParseError(ValueError):
    """Raised when text is not a well-formed s-expression."""


Atom = Union[Symbol, str, int, float]
Sexpr = Union[Atom, list]

_TOKEN_RE = re.compile(
    r'\s+|(?P<open>\()|(?P<close>\))|"(?P<string>(?:[^"\\]|\\.)*)"|(?P<atom>[^\s()"]+)',
    re.DOTALL,
)
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unescape(text: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), text)


def _escape(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )


def _atom(token: str) -> Atom:
    if _INT_RE.fullmatch(token):
        return int(token)
    if _FLOAT_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


def _tokenize(text: str) -> Iterator[tuple[str, Atom | None]]:
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise SexprParseError(f"unterminated string at offset {pos}")
        pos = match.end()
        kind = match.lastgroup
        if kind is None:
            continue
        if kind == "string":
            yield "atom", _unescape(match.group("string"))
        elif kind == "atom":
            yield "atom", _atom(match.group("atom"))
        else:
            yield kind, None


def parse(text: str) -> Sexpr:
    """Parse and return the first s-expression found in *text*."""
    stack: list[list] = []
    for kind, value in _tokenize(text):
        if kind == "open":
            stack.append([])
        elif kind == "close":
            if not stack:
                raise SexprParseError("unexpected closing parenthesis")
            done = stack.pop()
            if not stack:
                return done
            stack[-1].append(done)
        elif stack:
            stack[-1].append(value)
        else:
            return value
    if stack:
        raise SexprParseError("missing closing parenthesis")
    raise SexprParseError("no s-expression found")


def parse_file(path: str | os.PathLike) -> Sexpr:
    """Read *path* as UTF-8 and parse its first s-expression."""
    with open(path, encoding="utf-8") as handle:
        return parse(handle.read())


def to_string(expr: Sexpr) -> str:
    """Render *expr* back into s-expression text."""
    if isinstance(expr, list):
        return "(" + " ".join(to_string(item) for item in expr) + ")"
    if isinstance(expr, Symbol):
        return str(expr)
    if isinstance(expr, str):
        return '"' + _escape(expr) + '"'
    if isinstance(expr, bool):
        raise TypeError("booleans have no s-expression form")
    if isinstance(expr, int):
        return str(expr)
    if isinstance(expr, float):
        return repr(expr)
    raise TypeError(f"cannot render {type(expr).__name__} as an s-expression")


def _head_matches(predicate: Callable[[str], bool], item: object) -> bool:
    return (
        isinstance(item, list)
        and bool(item)
        and isinstance(item[0], Symbol)
        and predicate(item[0])
    )


def find_sub_sexpr(sexpr: list, key: str) -> list | None:
    """Return the first nested list headed by the symbol *key*, depth first."""
    for child in sexpr:
        if not isinstance(child, list) or not child:
            continue
        if isinstance(child[0], Symbol) and child[0] == key:
            return child
        found = find_sub_sexpr(child, key)
        if found is not None:
            return found
    return None


def _walk(sexpr: list, predicate: Callable[[str], bool]) -> Iterator[list]:
    for child in sexpr:
        if not isinstance(child, list) or not child:
            continue
        if _head_matches(predicate, child):
            yield child
        yield from _walk(child, predicate)


def find_all_sub_sexprs(sexpr: list, key: str | re.Pattern) -> list[list]:
    """Return every nested list whose head symbol equals *key*.

    *key* may also be a compiled pattern, which must match the whole symbol.
    """
    if isinstance(key, re.Pattern):
        pattern = key
        return list(_walk(sexpr, lambda name: pattern.fullmatch(name) is not None))
    return list(_walk(sexpr, lambda name: name == key))