"""Shared test fixtures."""

from __future__ import annotations

import pytest

from flagrant.engine.color import Color


# Sample flag expressions

FRANCE = "(h 1 (s b) 1 (s w) 1 (s r))"

GERMANY = "(v 1 (s s) 1 (s r) 1 (s y))"

UKRAINE = "(v 1 (s #0057b7) 1 (s #ffd700))"

NESTED = "(h 33 (s b) 67 (v 50 (s w) 50 (s r)))"

TAGGED = "(h 1 (t x (s b)) 1 (r x))"

FORWARD_REFERENCE = "(h 1 (r x) 1 (t x (s b)))"

UNDEFINED_REFERENCE = "(h 1 (r missing) 1 (s g))"

SELF_CYCLE = "(t x (h 1 (r x)))"

MUTUAL_CYCLE = "(h 1 (t a (r b)) 1 (t b (r a)))"

DEEP_NESTING = "(h 1 " * 400 + "(s r)" + ")" * 400


class RecordingCanvas:
    """Canvas that remembers fill calls instead of painting pixels."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.fills: list[tuple[int, int, int, int, Color]] = []

    def fill_rectangle(self, left: int, top: int, width: int, height: int, color: Color) -> None:
        self.fills.append((left, top, width, height, color))


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas(400, 300)


@pytest.fixture
def france() -> str:
    return FRANCE


@pytest.fixture
def tagged() -> str:
    return TAGGED
