"""flagrant: a tiny flag description language and its rasterizer."""

__version__ = "0.1.0"

from flagrant.dsl.parser import parse_expression, to_text
from flagrant.engine.pipeline import Pipeline, create_pipeline
from flagrant.errors import ErrorKind, FlagError

__all__ = [
    "ErrorKind",
    "FlagError",
    "Pipeline",
    "create_pipeline",
    "parse_expression",
    "to_text",
]
