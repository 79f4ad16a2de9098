"""Interpreter configuration — the permissive policies, named."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InterpreterConfig:
    """Controls how the interpreter treats recoverable failures."""

    # Reject a list left open at end of input, or text after the expression
    strict_parens: bool = False

    # A split child whose weight or geometry fails is skipped (recorded as a
    # diagnostic) instead of failing the whole split
    skip_invalid_split_children: bool = True

    # A reference to an undefined tag inside a split is dropped from it
    # instead of failing the split
    drop_undefined_references: bool = True
