"""Assertion system for recording pass/fail outcomes."""

from microtest.assertions.base import AssertionResult, Outcome, SourceLocation
from microtest.assertions.primitives import (
    expect_equal,
    expect_not_equal,
    expect_true,
    record_fail,
    record_pass,
)

__all__ = [
    "AssertionResult",
    "Outcome",
    "SourceLocation",
    "expect_equal",
    "expect_not_equal",
    "expect_true",
    "record_fail",
    "record_pass",
]
