"""flagrant command line — render one flag expression to an image file.

    flagrant "(h 1 (s b) 1 (s w) 1 (s r))" -o france.png
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from flagrant.config import settings
from flagrant.engine.color import parse_color
from flagrant.engine.geometry import describe
from flagrant.engine.pipeline import Pipeline
from flagrant.errors import FlagError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flagrant", description="Render a flag expression to an image")
    parser.add_argument("expression", help="Flag expression, e.g. '(v 1 (s w) 1 (s r))'")
    parser.add_argument("-o", "--output", default=settings.output_path, help="Output image path")
    parser.add_argument("--width", type=int, default=settings.canvas_width, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=settings.canvas_height, help="Canvas height in pixels")
    parser.add_argument("--background", default=settings.background, help="Color of unpainted pixels")
    parser.add_argument("--strict", action="store_true", help="Reject unbalanced parentheses and trailing text")
    parser.add_argument("--show", action="store_true", help="Print the resolved geometry to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.flagrant_log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = settings.interpreter_config()
    if args.strict:
        config.strict_parens = True

    try:
        background = parse_color(args.background)
        ctx, canvas = Pipeline(config).render(args.expression, args.width, args.height, background)
        if args.show:
            print(describe(ctx.geometry), file=sys.stderr)
        canvas.save(args.output)
    except (FlagError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
