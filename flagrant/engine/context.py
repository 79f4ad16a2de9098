"""RenderContext — the state object flowing through the interpreter stages."""

from __future__ import annotations

from dataclasses import dataclass, field

from flagrant.dsl.parser import Node
from flagrant.engine.geometry import Geometry, UnresolvedGeometry
from flagrant.engine.resolver import TagTable
from flagrant.errors import Diagnostics


@dataclass
class RenderContext:
    """Shared state for one expression, filled in stage by stage."""

    # Raw expression text
    source: str = ""
    # Parse output
    symbolic: Node | None = None
    # Build output, still holding tags and references
    unresolved: UnresolvedGeometry | None = None
    # Flat tag namespace collected from the unresolved tree
    tags: TagTable = field(default_factory=dict)
    # Fully resolved tree, ready for layout
    geometry: Geometry | None = None
    # Recoverable failures (skipped children, dropped references)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    # Stage name -> elapsed milliseconds
    timings: dict[str, float] = field(default_factory=dict)
    completed_stages: list[str] = field(default_factory=list)
