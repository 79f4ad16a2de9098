"""Pipeline orchestrator — text to resolved geometry to pixels."""

from __future__ import annotations

import logging
import time
from typing import Callable

from flagrant.dsl.parser import parse_expression
from flagrant.engine.builder import GeometryBuilder
from flagrant.engine.color import Color, NamedColor
from flagrant.engine.config import InterpreterConfig
from flagrant.engine.context import RenderContext
from flagrant.engine.layout import Region, draw, layout
from flagrant.engine.resolver import TagResolver, collect_tags
from flagrant.errors import FlagError, NestingTooDeep
from flagrant.utils.canvas import PixelCanvas

logger = logging.getLogger(__name__)


class Pipeline:
    """Runs the interpreter stages in order; any FlagError aborts the run."""

    def __init__(self, config: InterpreterConfig | None = None) -> None:
        self.config = config or InterpreterConfig()
        self.stages: list[tuple[str, Callable[[RenderContext], None]]] = [
            ("parse", self._parse),
            ("build", self._build),
            ("collect", self._collect),
            ("resolve", self._resolve),
        ]

    def run(self, text: str) -> RenderContext:
        """Interpret ``text`` up to a resolved geometry."""
        ctx = RenderContext(source=text)
        start = time.perf_counter()

        for name, fn in self.stages:
            self._run_stage(ctx, name, fn)

        logger.info(
            "Interpreted %d chars: %d tag(s), %d diagnostic(s) in %.1fms",
            len(text),
            len(ctx.tags),
            len(ctx.diagnostics),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def render(
        self,
        text: str,
        width: int,
        height: int,
        background: Color = NamedColor.BLACK,
    ) -> tuple[RenderContext, PixelCanvas]:
        """Interpret ``text`` and paint it onto a fresh canvas."""
        ctx = self.run(text)
        canvas = PixelCanvas(width, height, background)
        self._run_stage(ctx, "draw", lambda c: draw(c.geometry, canvas))
        return ctx, canvas

    def layout(self, text: str, width: int, height: int) -> tuple[RenderContext, list[Region]]:
        """Interpret ``text`` and compute its painted regions without pixels."""
        ctx = self.run(text)
        regions: list[Region] = []
        self._run_stage(ctx, "layout", lambda c: regions.extend(layout(c.geometry, width, height)))
        return ctx, regions

    def _run_stage(self, ctx: RenderContext, name: str, fn: Callable[[RenderContext], None]) -> None:
        t0 = time.perf_counter()
        try:
            fn(ctx)
        except FlagError as e:
            e.context = ctx
            logger.warning("  %s FAILED: %s", name, e)
            raise
        except RecursionError as e:
            # Every stage walks the tree recursively
            error = NestingTooDeep(name)
            error.context = ctx
            logger.warning("  %s FAILED: %s", name, error)
            raise error from e
        ctx.timings[name] = (time.perf_counter() - t0) * 1000
        ctx.completed_stages.append(name)
        logger.debug("  %s completed in %.1fms", name, ctx.timings[name])

    def _parse(self, ctx: RenderContext) -> None:
        ctx.symbolic = parse_expression(ctx.source, strict=self.config.strict_parens)

    def _build(self, ctx: RenderContext) -> None:
        ctx.unresolved = GeometryBuilder(ctx.diagnostics, self.config).build(ctx.symbolic)

    def _collect(self, ctx: RenderContext) -> None:
        ctx.tags = collect_tags(ctx.unresolved)

    def _resolve(self, ctx: RenderContext) -> None:
        ctx.geometry = TagResolver(ctx.tags, ctx.diagnostics, self.config).resolve(ctx.unresolved)


def create_pipeline(config: InterpreterConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    if config is None:
        from flagrant.config import settings

        config = settings.interpreter_config()
    return Pipeline(config=config)
