"""microtest - a minimal unit-test harness.

A driver creates a session, starts a suite, runs named test cases whose bodies
call the assertion primitives, and exits with the aggregated result::

    import sys
    from microtest import initialize, start_suite, run_test_case, compute_result
    from microtest import expect_equal

    session = initialize(sys.argv)
    start_suite(session, "xyz")
    run_test_case(session, lambda: expect_equal(session, 1 + 2, 3, "1+2 is 3"), "add")
    sys.exit(compute_result(session))
"""

from microtest.assertions import (
    AssertionResult,
    SourceLocation,
    expect_equal,
    expect_not_equal,
    expect_true,
    record_fail,
    record_pass,
)
from microtest.config import HarnessConfig, load_config
from microtest.runner import compute_result, run_suite, run_test_case, start_suite
from microtest.session import Session, SessionState, initialize

__all__ = [
    # Session
    "Session",
    "SessionState",
    "initialize",
    # Assertions
    "AssertionResult",
    "SourceLocation",
    "expect_equal",
    "expect_not_equal",
    "expect_true",
    "record_pass",
    "record_fail",
    # Runner
    "start_suite",
    "run_test_case",
    "compute_result",
    "run_suite",
    # Config
    "HarnessConfig",
    "load_config",
]
