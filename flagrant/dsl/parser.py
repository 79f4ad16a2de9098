"""Symbolic parser — text to a generic tree of lists and atoms.

Grammar:
    node := "(" node* ")" | atom
    atom := run of characters that are not whitespace, "(" or ")"

Single pass with one character of lookahead, no backtracking. The tree has no
flag semantics; the geometry builder gives it meaning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from flagrant.errors import UnbalancedParens, UnexpectedEndOfInput

logger = logging.getLogger(__name__)

_OPEN = "("
_CLOSE = ")"


@dataclass(frozen=True)
class Atom:
    text: str

    def as_atom(self) -> str | None:
        return self.text

    def as_list(self) -> tuple[Node, ...] | None:
        return None

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class SList:
    children: tuple[Node, ...] = ()

    def as_atom(self) -> str | None:
        return None

    def as_list(self) -> tuple[Node, ...] | None:
        return self.children

    def __str__(self) -> str:
        return _OPEN + " ".join(str(c) for c in self.children) + _CLOSE


Node = Union[Atom, SList]


class CharStream:
    """Peekable cursor over a string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    def peek(self) -> str | None:
        if self.position < len(self.text):
            return self.text[self.position]
        return None

    def next(self) -> str | None:
        c = self.peek()
        if c is not None:
            self.position += 1
        return c

    def skip_whitespace(self) -> None:
        while (c := self.peek()) is not None and c.isspace():
            self.position += 1

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.text)


def parse_node(stream: CharStream, strict: bool = False) -> Node | None:
    """Parse at most one node, consuming trailing whitespace after it.

    Returns None only when the stream holds nothing but whitespace. A list
    still open at end of input is closed silently unless ``strict``.
    """
    stream.skip_whitespace()
    c = stream.peek()
    if c is None:
        return None

    if c == _CLOSE:
        raise UnbalancedParens(f"unexpected ')' at offset {stream.position}")

    if c == _OPEN:
        start = stream.position
        stream.next()
        children: list[Node] = []
        while True:
            stream.skip_whitespace()
            c = stream.peek()
            if c is None:
                if strict:
                    raise UnbalancedParens(f"'(' at offset {start} is never closed")
                logger.debug("Closing list opened at offset %d at end of input", start)
                break
            if c == _CLOSE:
                stream.next()
                break
            children.append(parse_node(stream, strict))
        node: Node = SList(tuple(children))
    else:
        chars = []
        while (c := stream.peek()) is not None and not c.isspace() and c not in (_OPEN, _CLOSE):
            chars.append(c)
            stream.next()
        node = Atom("".join(chars))

    stream.skip_whitespace()
    return node


def parse_expression(text: str, strict: bool = False) -> Node:
    """Parse one complete expression from ``text``.

    Non-strict mode ignores anything after the first node.
    """
    stream = CharStream(text)
    node = parse_node(stream, strict)
    if node is None:
        raise UnexpectedEndOfInput("expression is empty")

    if not stream.exhausted:
        if strict:
            raise UnbalancedParens(f"unexpected {stream.peek()!r} at offset {stream.position}")
        logger.debug("Ignoring trailing input at offset %d", stream.position)

    return node


def to_text(node: Node) -> str:
    """Canonical text for a node: single spaces, no padding inside parens."""
    return str(node)
