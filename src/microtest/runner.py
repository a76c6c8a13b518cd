from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TextIO

from microtest.config import HarnessConfig
from microtest.session import Session, SessionState, initialize

TestBody = Callable[[], None]


def start_suite(session: Session, name: str) -> None:
    """Print the suite header. Counters are not touched."""
    session.reporter.suite_started(name)
    session.logger.debug(f"Starting suite '{name}'")


def run_test_case(session: Session, body: TestBody, name: str) -> None:
    """Run one named test case synchronously.

    A blank line separates this case from the previous one. Exceptions raised
    by ``body`` propagate to the caller and the case is not counted.
    """
    session.reporter.case_started(name, separator=session.case_set_count != 0)
    session.logger.debug(f"Running test case '{name}'")

    session.state = SessionState.RUNNING_CASE
    before = session.total
    try:
        body()
    finally:
        session.state = SessionState.INITIALIZED
    session.case_set_count += 1

    session.logger.debug(
        f"Test case '{name}' completed: {session.total - before} assertion(s)"
    )


def compute_result(session: Session) -> int:
    """Print the summary and return the process exit status.

    Returns 0 only when at least one assertion passed and none failed; a run
    that recorded nothing counts as a failure.
    """
    success = session.failed == 0 and session.passed != 0
    session.reporter.summary(session.passed, session.failed, success)
    session.state = SessionState.FINALIZED

    session.logger.debug(
        f"Result: {session.passed} passed, {session.failed} failed, "
        f"{session.case_set_count} case(s) -> {'PASS' if success else 'FAIL'}"
    )
    return 0 if success else 1


def run_suite(
    suite: Callable[[Session], None],
    args: Sequence[str] | None = None,
    *,
    config: HarnessConfig | None = None,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> int:
    """Drive a whole run: initialize, call ``suite`` and compute the result.

    ``suite`` receives the session and is expected to call
    :func:`start_suite` and :func:`run_test_case`. Typical use from a suite
    script::

        if __name__ == "__main__":
            sys.exit(run_suite(suite, sys.argv))
    """
    session = initialize(args, config=config, stream=stream, logger=logger)
    suite(session)
    return compute_result(session)
