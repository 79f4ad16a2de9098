"""Tag resolver — collect tag bindings, then expand references.

Tags are not lexically scoped: one flat namespace covers the whole tree, so a
reference may cite a tag declared later in the text, in another branch, or
inside a tag's own body. Name collisions are last-write-wins in traversal
order (a tag's inner bindings first, then the tag itself; split children left
to right).
"""

from __future__ import annotations

import logging

from flagrant.engine.config import InterpreterConfig
from flagrant.engine.geometry import (
    Geometry,
    Reference,
    ResolvedPart,
    Solid,
    Split,
    Tag,
    UnresolvedGeometry,
    UnresolvedSplit,
)
from flagrant.errors import Diagnostics, RecursiveTagCycle, UndefinedTagReference

logger = logging.getLogger(__name__)

TagTable = dict[str, UnresolvedGeometry]


def collect_tags(geometry: UnresolvedGeometry) -> TagTable:
    """Map every tag name in the tree to the geometry it wraps."""
    tags: TagTable = {}
    _collect(geometry, tags)
    logger.debug("Collected %d tag(s): %s", len(tags), ", ".join(sorted(tags)))
    return tags


def _collect(geometry: UnresolvedGeometry, tags: TagTable) -> None:
    if isinstance(geometry, Tag):
        _collect(geometry.geometry, tags)
        if geometry.name in tags:
            logger.debug("Tag %r redefined; last definition wins", geometry.name)
        tags[geometry.name] = geometry.geometry
    elif isinstance(geometry, UnresolvedSplit):
        for part in geometry.parts:
            _collect(part.geometry, tags)


class TagResolver:
    """Expands references against a tag table into a concrete geometry tree."""

    def __init__(
        self,
        tags: TagTable,
        diagnostics: Diagnostics | None = None,
        config: InterpreterConfig | None = None,
    ) -> None:
        self.tags = tags
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.config = config or InterpreterConfig()
        # Tag name -> resolved body, filled only by clean expansions
        self._resolved: dict[str, Geometry] = {}

    def resolve(self, geometry: UnresolvedGeometry) -> Geometry:
        return self._resolve(geometry, ())

    def _resolve(self, geometry: UnresolvedGeometry, chain: tuple[str, ...]) -> Geometry:
        # chain: names of the references currently being expanded
        if isinstance(geometry, Solid):
            return geometry

        if isinstance(geometry, UnresolvedSplit):
            parts: list[ResolvedPart] = []
            for part in geometry.parts:
                try:
                    child = self._resolve(part.geometry, chain)
                except UndefinedTagReference as e:
                    if not self.config.drop_undefined_references:
                        raise
                    self.diagnostics.record(e)
                    continue
                parts.append(ResolvedPart(child, part.weight))
            return Split(geometry.axis, tuple(parts))

        if isinstance(geometry, Tag):
            if self.tags.get(geometry.name) is geometry.geometry:
                return self._expand(geometry.name, chain)
            return self._resolve(geometry.geometry, chain)

        if isinstance(geometry, Reference):
            target = self.tags.get(geometry.name)
            if target is None:
                raise UndefinedTagReference(geometry.name)
            if geometry.name in chain:
                raise RecursiveTagCycle(chain[chain.index(geometry.name):] + (geometry.name,))
            return self._expand(geometry.name, chain + (geometry.name,))

        raise TypeError(f"not a geometry: {geometry!r}")

    def _expand(self, name: str, chain: tuple[str, ...]) -> Geometry:
        """Resolve the body bound to ``name``, reusing an earlier clean result."""
        cached = self._resolved.get(name)
        if cached is not None:
            return cached
        recorded = len(self.diagnostics)
        geometry = self._resolve(self.tags[name], chain)
        # A dropped reference must be reported at every use site
        if len(self.diagnostics) == recorded:
            self._resolved[name] = geometry
        return geometry


def resolve_geometry(
    geometry: UnresolvedGeometry,
    diagnostics: Diagnostics | None = None,
    config: InterpreterConfig | None = None,
) -> Geometry:
    """Collect the tree's tags and resolve it against them."""
    tags = collect_tags(geometry)
    return TagResolver(tags, diagnostics, config).resolve(geometry)
