"""Tests for the package-level exports."""

import pytest

import flagrant
from flagrant.engine.color import NamedColor
from flagrant.engine.geometry import Solid


def test_public_exports():
    assert flagrant.__version__ == "0.1.0"
    assert flagrant.to_text(flagrant.parse_expression("( s   r )")) == "(s r)"
    assert flagrant.Pipeline().run("(s r)").geometry == Solid(NamedColor.RED)


def test_exported_error_type():
    with pytest.raises(flagrant.FlagError) as exc_info:
        flagrant.create_pipeline().run("(q)")
    assert exc_info.value.kind == flagrant.ErrorKind.UNKNOWN_OPERATOR
