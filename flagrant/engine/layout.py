"""Layout/render engine — proportional partition of a rectangle.

Each child of a split gets ``weight * extent // total_weight`` pixels along
the split axis, placed contiguously from the rectangle's origin. Floor
rounding can leave up to N-1 pixels at the far edge unpainted; they keep
whatever the canvas held before.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from flagrant.engine.color import Color
from flagrant.engine.geometry import Axis, Geometry, Solid, Split
from flagrant.errors import ZeroWeightSplit

logger = logging.getLogger(__name__)


class Canvas(Protocol):
    """Write surface the engine paints on."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def fill_rectangle(self, left: int, top: int, width: int, height: int, color: Color) -> None: ...


@dataclass(frozen=True)
class Region:
    """A solid rectangle covering [left, left+width) x [top, top+height)."""

    left: int
    top: int
    width: int
    height: int
    color: Color


def iter_regions(
    geometry: Geometry,
    left: int,
    top: int,
    width: int,
    height: int,
) -> Iterator[Region]:
    """Yield the solid rectangles of ``geometry`` in paint order."""
    if isinstance(geometry, Solid):
        yield Region(left, top, width, height, geometry.color)
        return

    if not isinstance(geometry, Split):
        raise TypeError(f"cannot lay out unresolved geometry {geometry!r}")

    total = geometry.total_weight
    if total == 0:
        raise ZeroWeightSplit(
            f"{geometry.axis.name.lower()} split with {len(geometry.parts)} part(s) has zero total weight"
        )

    if geometry.axis is Axis.HORIZONTAL:
        offset = left
        for part in geometry.parts:
            extent = part.weight * width // total
            yield from iter_regions(part.geometry, offset, top, extent, height)
            offset += extent
    else:
        offset = top
        for part in geometry.parts:
            extent = part.weight * height // total
            yield from iter_regions(part.geometry, left, offset, width, extent)
            offset += extent


def layout(geometry: Geometry, width: int, height: int) -> list[Region]:
    """All regions of ``geometry`` over a width x height area at the origin."""
    return list(iter_regions(geometry, 0, 0, width, height))


def draw_area(
    geometry: Geometry,
    canvas: Canvas,
    left: int,
    top: int,
    width: int,
    height: int,
) -> int:
    """Paint ``geometry`` into a sub-rectangle. Returns the number of fills."""
    count = 0
    for region in iter_regions(geometry, left, top, width, height):
        canvas.fill_rectangle(region.left, region.top, region.width, region.height, region.color)
        count += 1
    return count


def draw(geometry: Geometry, canvas: Canvas) -> int:
    """Paint ``geometry`` over the whole canvas."""
    count = draw_area(geometry, canvas, 0, 0, canvas.width, canvas.height)
    logger.debug("Painted %d region(s) on %dx%d canvas", count, canvas.width, canvas.height)
    return count
