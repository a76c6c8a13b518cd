"""Base data structures for the assertion system."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    """Which session counter an assertion evaluation is folded into."""

    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceLocation:
    """Where an assertion was written.

    Attributes:
        file: Path of the source file, as reported by the interpreter.
        line: 1-based line number.
    """

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass
class AssertionResult:
    """Outcome of evaluating a single assertion.

    Built for one evaluation, reported and folded into the session counters,
    then discarded.

    Attributes:
        message: The human-readable message given by the test author.
        passed: Whether the check matched its expectation.
        location: Source location of the assertion call.
        detail: Extra failure context printed before the location
            (e.g. "expected 7, got 6"). None when there is none.
        show_location: Whether the report line carries the location.
    """

    message: str
    passed: bool
    location: SourceLocation
    detail: str | None = None
    show_location: bool = True


def caller_location(depth: int = 1) -> SourceLocation:
    """Return the location of the frame ``depth`` levels above the caller.

    ``depth=0`` is the function calling this one, ``depth=1`` its caller.
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(depth):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return SourceLocation(file="<unknown>", line=0)
        return SourceLocation(file=target.f_code.co_filename, line=target.f_lineno)
    finally:
        del frame
