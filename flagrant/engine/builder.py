"""Geometry builder — symbolic tree to unresolved geometry.

Dispatch is on the operator atom at the head of each list:

    (s COLOR)                  solid fill
    (h W1 G1 W2 G2 ...)        horizontal split, weighted children
    (v W1 G1 W2 G2 ...)        vertical split, weighted children
    (t NAME G)                 tag G as NAME
    (r NAME)                   reference to tag NAME
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from flagrant.dsl.parser import Node
from flagrant.engine.color import parse_color
from flagrant.engine.config import InterpreterConfig
from flagrant.engine.geometry import (
    Axis,
    Part,
    Reference,
    Solid,
    Tag,
    UnresolvedGeometry,
    UnresolvedSplit,
)
from flagrant.errors import (
    Diagnostics,
    ExpectedList,
    FlagError,
    InvalidArity,
    InvalidColor,
    InvalidWeight,
    UnknownOperator,
)

logger = logging.getLogger(__name__)

_WEIGHT_RE = re.compile(r"\+?[0-9]+")


def parse_weight(node: Node) -> int:
    """Non-negative decimal integer, optional leading '+'."""
    text = node.as_atom()
    if text is None or not _WEIGHT_RE.fullmatch(text):
        raise InvalidWeight(f"{node} is not a non-negative integer weight")
    return int(text)


class GeometryBuilder:
    def __init__(
        self,
        diagnostics: Diagnostics | None = None,
        config: InterpreterConfig | None = None,
    ) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.config = config or InterpreterConfig()
        self._handlers: dict[str, Callable[[tuple[Node, ...]], UnresolvedGeometry]] = {
            "s": self._solid,
            "h": lambda items: self._split(items, Axis.HORIZONTAL),
            "v": lambda items: self._split(items, Axis.VERTICAL),
            "t": self._tag,
            "r": self._reference,
        }

    def build(self, node: Node) -> UnresolvedGeometry:
        items = node.as_list()
        if items is None:
            raise ExpectedList(f"atom {node} is not a geometry")
        if not items:
            raise InvalidArity("empty list is not a geometry")

        op = items[0].as_atom()
        handler = self._handlers.get(op) if op is not None else None
        if handler is None:
            logger.debug("Unrecognized list: %s", node)
            raise UnknownOperator(f"unknown operator {items[0]} in {node}")
        return handler(items)

    def _solid(self, items: tuple[Node, ...]) -> Solid:
        if len(items) != 2:
            raise InvalidArity(f"(s COLOR) takes one argument, got {len(items) - 1}")
        text = items[1].as_atom()
        if text is None:
            raise InvalidColor(f"color must be an atom, got {items[1]}")
        return Solid(parse_color(text))

    def _split(self, items: tuple[Node, ...], axis: Axis) -> UnresolvedSplit:
        args = items[1:]
        parts: list[Part] = []
        for i in range(0, len(args), 2):
            try:
                if i + 1 >= len(args):
                    raise InvalidArity(f"weight {args[i]} has no geometry after it")
                weight = parse_weight(args[i])
                geometry = self.build(args[i + 1])
            except FlagError as e:
                if not self.config.skip_invalid_split_children:
                    raise
                self.diagnostics.record(e)
                continue
            parts.append(Part(geometry, weight))
        return UnresolvedSplit(axis, tuple(parts))

    def _tag(self, items: tuple[Node, ...]) -> Tag:
        if len(items) != 3:
            raise InvalidArity(f"(t NAME GEOMETRY) takes two arguments, got {len(items) - 1}")
        name = items[1].as_atom()
        if name is None:
            raise InvalidArity(f"tag name must be an atom, got {items[1]}")
        return Tag(name, self.build(items[2]))

    def _reference(self, items: tuple[Node, ...]) -> Reference:
        if len(items) != 2:
            raise InvalidArity(f"(r NAME) takes one argument, got {len(items) - 1}")
        name = items[1].as_atom()
        if name is None:
            raise InvalidArity(f"reference name must be an atom, got {items[1]}")
        return Reference(name)


def build_geometry(
    node: Node,
    diagnostics: Diagnostics | None = None,
    config: InterpreterConfig | None = None,
) -> UnresolvedGeometry:
    """Interpret a symbolic node as a geometry expression."""
    return GeometryBuilder(diagnostics, config).build(node)
