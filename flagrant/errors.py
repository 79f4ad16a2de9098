"""Error taxonomy for every interpreter stage.

Fatal failures raise a FlagError subclass. Recoverable ones (a skipped split
child, a dropped reference) are recorded in a Diagnostics collector that is
passed explicitly through the build and resolve calls.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNBALANCED_PARENS = "unbalanced_parens"
    EXPECTED_LIST = "expected_list"
    UNKNOWN_OPERATOR = "unknown_operator"
    INVALID_ARITY = "invalid_arity"
    INVALID_COLOR = "invalid_color"
    INVALID_WEIGHT = "invalid_weight"
    UNDEFINED_TAG_REFERENCE = "undefined_tag_reference"
    ZERO_WEIGHT_SPLIT = "zero_weight_split"
    RECURSIVE_TAG_CYCLE = "recursive_tag_cycle"
    NESTING_TOO_DEEP = "nesting_too_deep"


class FlagError(ValueError):
    """Base class: every interpreter failure carries a kind."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        # Filled in by the pipeline when a stage aborts
        self.context = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class UnexpectedEndOfInput(FlagError):
    kind = ErrorKind.UNEXPECTED_END_OF_INPUT


class UnbalancedParens(FlagError):
    kind = ErrorKind.UNBALANCED_PARENS


class ExpectedList(FlagError):
    kind = ErrorKind.EXPECTED_LIST


class UnknownOperator(FlagError):
    kind = ErrorKind.UNKNOWN_OPERATOR


class InvalidArity(FlagError):
    kind = ErrorKind.INVALID_ARITY


class InvalidColor(FlagError):
    kind = ErrorKind.INVALID_COLOR


class InvalidWeight(FlagError):
    kind = ErrorKind.INVALID_WEIGHT


class UndefinedTagReference(FlagError):
    kind = ErrorKind.UNDEFINED_TAG_REFERENCE

    def __init__(self, name: str) -> None:
        super().__init__(f"no tag named {name!r}")
        self.name = name


class ZeroWeightSplit(FlagError):
    kind = ErrorKind.ZERO_WEIGHT_SPLIT


class RecursiveTagCycle(FlagError):
    kind = ErrorKind.RECURSIVE_TAG_CYCLE

    def __init__(self, chain: tuple[str, ...]) -> None:
        super().__init__("tag cycle " + " -> ".join(chain))
        self.chain = chain


class NestingTooDeep(FlagError):
    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, stage: str) -> None:
        super().__init__(f"expression nested too deeply to {stage}")
        self.stage = stage


@dataclass
class Diagnostics:
    """Recoverable failures noticed while building and resolving."""

    entries: list[FlagError] = field(default_factory=list)

    def record(self, error: FlagError) -> None:
        self.entries.append(error)
        logger.warning("Recovered: %s", error)

    def kinds(self) -> list[ErrorKind]:
        return [e.kind for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
