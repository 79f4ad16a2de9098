"""Tests for the proportional layout engine."""

import pytest

from tests.conftest import RecordingCanvas

from flagrant.engine.color import NamedColor
from flagrant.engine.geometry import Axis, ResolvedPart, Solid, Split
from flagrant.engine.layout import Region, draw, draw_area, layout
from flagrant.errors import ZeroWeightSplit

RED = Solid(NamedColor.RED)
GREEN = Solid(NamedColor.GREEN)
BLUE = Solid(NamedColor.BLUE)
WHITE = Solid(NamedColor.WHITE)


def _split(axis: Axis, *parts: tuple[int, object]) -> Split:
    return Split(axis, tuple(ResolvedPart(geo, weight) for weight, geo in parts))


def test_solid_fills_whole_area():
    assert layout(RED, 400, 300) == [Region(0, 0, 400, 300, NamedColor.RED)]


def test_weighted_split_exact():
    geo = _split(Axis.HORIZONTAL, (1, RED), (2, GREEN), (1, BLUE))
    regions = layout(geo, 400, 300)
    assert [r.width for r in regions] == [100, 200, 100]
    assert [r.left for r in regions] == [0, 100, 300]
    assert all(r.height == 300 and r.top == 0 for r in regions)


def test_weighted_split_rounding_leaves_gap():
    geo = _split(Axis.HORIZONTAL, (1, RED), (1, GREEN), (1, BLUE))
    regions = layout(geo, 100, 10)
    assert [r.width for r in regions] == [33, 33, 33]
    assert [r.left for r in regions] == [0, 33, 66]
    assert regions[-1].left + regions[-1].width == 99


def test_vertical_split():
    geo = _split(Axis.VERTICAL, (1, WHITE), (1, RED))
    regions = layout(geo, 400, 300)
    assert [(r.top, r.height) for r in regions] == [(0, 150), (150, 150)]
    assert all(r.width == 400 for r in regions)


def test_nested_split():
    geo = _split(Axis.HORIZONTAL, (1, BLUE), (1, _split(Axis.VERTICAL, (1, WHITE), (1, RED))))
    assert layout(geo, 400, 300) == [
        Region(0, 0, 200, 300, NamedColor.BLUE),
        Region(200, 0, 200, 150, NamedColor.WHITE),
        Region(200, 150, 200, 150, NamedColor.RED),
    ]


def test_binary_pivot_as_weights():
    geo = _split(Axis.HORIZONTAL, (33, BLUE), (67, WHITE))
    assert [r.width for r in layout(geo, 400, 300)] == [132, 268]


def test_zero_weight_child_gets_nothing():
    geo = _split(Axis.HORIZONTAL, (0, RED), (1, GREEN))
    assert layout(geo, 400, 300) == [
        Region(0, 0, 0, 300, NamedColor.RED),
        Region(0, 0, 400, 300, NamedColor.GREEN),
    ]


def test_zero_total_weight_rejected():
    with pytest.raises(ZeroWeightSplit):
        layout(_split(Axis.HORIZONTAL, (0, RED), (0, GREEN)), 400, 300)


def test_empty_split_rejected():
    with pytest.raises(ZeroWeightSplit):
        layout(Split(Axis.VERTICAL, ()), 400, 300)


def test_draw_uses_canvas_size(recording_canvas):
    geo = _split(Axis.HORIZONTAL, (1, RED), (3, GREEN))
    assert draw(geo, recording_canvas) == 2
    assert recording_canvas.fills == [
        (0, 0, 100, 300, NamedColor.RED),
        (100, 0, 300, 300, NamedColor.GREEN),
    ]


def test_draw_area_offsets():
    canvas = RecordingCanvas(50, 50)
    geo = _split(Axis.VERTICAL, (1, RED), (1, GREEN))
    draw_area(geo, canvas, 10, 20, 30, 10)
    assert canvas.fills == [
        (10, 20, 30, 5, NamedColor.RED),
        (10, 25, 30, 5, NamedColor.GREEN),
    ]
