"""The ``general`` section of a board file."""

from __future__ import annotations

from dataclasses import dataclass

from kipcb.sexpr import Symbol


class GeneralSectionError(ValueError):
    """Raised when the general section is missing or malformed."""


def assert_general_section(general: object) -> None:
    """Check that the general section exists and is a list."""
    if general is None:
        raise GeneralSectionError("general section must exist in the sexpr")
    if not isinstance(general, list):
        raise GeneralSectionError("general section must be a list")


_INT_FIELDS = {
    "links": "links",
    "no_connects": "no_connects",
    "thickness": "thickness",
    "drawings": "drawings",
    "tracks": "tracks",
    "zones": "zones",
    "modules": "footprints",
    "nets": "nets",
}


@dataclass
class General:
    """Board-wide counters and thickness; each value may be absent."""

    links: int | None = None
    no_connects: int | None = None
    thickness: float | None = None
    drawings: int | None = None
    tracks: int | None = None
    zones: int | None = None
    footprints: int | None = None
    nets: int | None = None

    @classmethod
    def from_sexpr(cls, general: list) -> General:
        """Build from a ``(general ...)`` list; only integer values are taken."""
        values: dict[str, int | float] = {}
        for child in general:
            if not isinstance(child, list) or len(child) < 2:
                continue
            key, value = child[0], child[1]
            if not isinstance(key, Symbol):
                continue
            field_name = _INT_FIELDS.get(key)
            if field_name is None:
                continue
            if isinstance(value, int) and not isinstance(value, bool):
                values[field_name] = float(value) if field_name == "thickness" else value
        return cls(**values)