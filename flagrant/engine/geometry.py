"""Geometry data model — unresolved (tags, references) and resolved trees.

Unresolved nodes may be shared: a Tag's geometry object is the same object
stored in the tag table, and every reference to it reaches that object.
Resolution expands each reference independently, so the resolved tree owns
its children outright.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from flagrant.engine.color import Color, to_hex


class Axis(str, enum.Enum):
    # Horizontal splits divide the x-extent, vertical splits the y-extent
    HORIZONTAL = "h"
    VERTICAL = "v"


@dataclass(frozen=True)
class Solid:
    color: Color


@dataclass(frozen=True)
class Part:
    """One weighted child of an unresolved split."""

    geometry: UnresolvedGeometry
    weight: int


@dataclass(frozen=True)
class UnresolvedSplit:
    axis: Axis
    parts: tuple[Part, ...] = ()


@dataclass(frozen=True)
class Tag:
    """Binds ``name`` to ``geometry``; transparent where it is declared."""

    name: str
    geometry: UnresolvedGeometry


@dataclass(frozen=True)
class Reference:
    name: str


UnresolvedGeometry = Union[Solid, UnresolvedSplit, Tag, Reference]


@dataclass(frozen=True)
class ResolvedPart:
    geometry: Geometry
    weight: int


@dataclass(frozen=True)
class Split:
    axis: Axis
    parts: tuple[ResolvedPart, ...] = ()

    @property
    def total_weight(self) -> int:
        return sum(p.weight for p in self.parts)


Geometry = Union[Solid, Split]


def describe(geometry: Geometry | UnresolvedGeometry, indent: int = 0) -> str:
    """Indented multi-line dump of a geometry tree, for debugging output."""
    pad = "  " * indent
    if isinstance(geometry, Solid):
        return f"{pad}solid {to_hex(geometry.color)}"
    if isinstance(geometry, (Split, UnresolvedSplit)):
        lines = [f"{pad}split {geometry.axis.name.lower()}"]
        for part in geometry.parts:
            lines.append(f"{pad}  weight {part.weight}:")
            lines.append(describe(part.geometry, indent + 2))
        return "\n".join(lines)
    if isinstance(geometry, Tag):
        return f"{pad}tag {geometry.name}\n" + describe(geometry.geometry, indent + 1)
    return f"{pad}ref {geometry.name}"
