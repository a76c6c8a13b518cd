"""Assertion primitives.

Each primitive evaluates one condition, prints one report line through the
session and updates the session counters. None of them raise on a mismatch
and none return a value.

When ``location`` is omitted it is taken from the line that called the
primitive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from microtest.assertions.base import (
    AssertionResult,
    Outcome,
    SourceLocation,
    caller_location,
)

if TYPE_CHECKING:
    from microtest.session import Session


def _where(location: SourceLocation | None) -> SourceLocation:
    # depth=2: skip _where and the primitive itself
    return location if location is not None else caller_location(depth=2)


def _outcome(passed: bool) -> Outcome:
    return Outcome.PASSED if passed else Outcome.FAILED


def expect_equal(
    session: Session,
    actual: Any,
    expected: Any,
    message: str,
    location: SourceLocation | None = None,
) -> None:
    """Pass iff ``actual == expected``; failures show both values."""
    where = _where(location)
    passed = actual == expected
    result = AssertionResult(
        message=message,
        passed=passed,
        location=where,
        detail=None if passed else f"expected {expected}, got {actual}",
    )
    session.record(result, _outcome(passed))


def expect_not_equal(
    session: Session,
    actual: Any,
    expected: Any,
    message: str,
    location: SourceLocation | None = None,
) -> None:
    """Pass iff ``actual != expected``; failures show only the location."""
    where = _where(location)
    passed = actual != expected
    result = AssertionResult(message=message, passed=passed, location=where)
    session.record(result, _outcome(passed))


def expect_true(
    session: Session,
    condition: Any,
    message: str,
    location: SourceLocation | None = None,
) -> None:
    """Pass iff ``condition`` is truthy."""
    where = _where(location)
    passed = bool(condition)
    result = AssertionResult(message=message, passed=passed, location=where)
    session.record(result, _outcome(passed))


def record_pass(
    session: Session, message: str, location: SourceLocation | None = None
) -> None:
    """Record an unconditional pass. The location is not printed."""
    where = _where(location)
    result = AssertionResult(
        message=message, passed=True, location=where, show_location=False
    )
    session.record(result, _outcome(True))


def record_fail(
    session: Session, message: str, location: SourceLocation | None = None
) -> None:
    """Record an unconditional failure line.

    The line is reported as a failure, but unless the session runs with
    ``strict_record_fail`` it is counted as passed.
    """
    where = _where(location)
    result = AssertionResult(message=message, passed=False, location=where)
    session.record(result, _outcome(not session.config.strict_record_fail))
