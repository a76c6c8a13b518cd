"""Session state for a harness run.

A :class:`Session` holds the counters one suite run accumulates. It is created
by :func:`initialize`, owned by the driver and handed to every assertion and
runner call.
"""

from __future__ import annotations

import logging
import platform
import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import TextIO

from microtest.assertions.base import AssertionResult, Outcome
from microtest.config import HarnessConfig
from microtest.reporting.console import ConsoleReporter
from microtest.verbose import setup_logger


class SessionState(str, Enum):
    INITIALIZED = "initialized"
    RUNNING_CASE = "running_case"
    FINALIZED = "finalized"


class Session:
    """Counters and output of one harness run.

    Not thread-safe: a single thread of control drives a session.
    """

    def __init__(
        self,
        config: HarnessConfig | None = None,
        reporter: ConsoleReporter | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config or HarnessConfig()
        self.reporter = reporter or ConsoleReporter(
            pass_glyph=self.config.pass_glyph,
            fail_glyph=self.config.fail_glyph,
        )
        self.logger = logger or logging.getLogger("microtest")
        self.passed = 0
        self.failed = 0
        self.case_set_count = 0
        self.state = SessionState.INITIALIZED

    def initialize(self, args: Sequence[str] | None = None) -> None:
        """Reset all counters, and print the banner when configured to.

        Calling this again mid-run is allowed; counts from before are lost.
        """
        self.passed = 0
        self.failed = 0
        self.case_set_count = 0
        self.state = SessionState.INITIALIZED

        if self.config.verbose:
            self.reporter.banner(build_banner(args, debug=self.config.debug))

        self.logger.debug(f"Session initialized with args {list(args or [])}")

    def record(self, result: AssertionResult, outcome: Outcome) -> None:
        """Report an assertion outcome and fold it into the counters."""
        if self.state is SessionState.FINALIZED:
            # Unspecified usage; the evaluation is still counted.
            self.logger.warning(
                f"Assertion '{result.message}' evaluated after the result was computed"
            )

        self.reporter.assertion(result)

        if outcome is Outcome.PASSED:
            self.passed += 1
        else:
            self.failed += 1

        if not result.passed:
            self.logger.debug(
                f"Assertion failed: {result.message} at {result.location}"
            )

    @property
    def total(self) -> int:
        return self.passed + self.failed

    def __repr__(self) -> str:
        return (
            f"Session(passed={self.passed}, failed={self.failed}, "
            f"case_set_count={self.case_set_count}, state={self.state.value})"
        )


def initialize(
    args: Sequence[str] | None = None,
    *,
    config: HarnessConfig | None = None,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> Session:
    """Create a session with zeroed counters.

    Args:
        args: Command-line arguments of the test process; only printed,
            with the banner, when ``config.debug`` is set.
        config: Harness settings. Defaults to :class:`HarnessConfig` defaults.
        stream: Where report lines go. Defaults to ``sys.stdout``.
        logger: Logger for diagnostics. When omitted the ``microtest`` logger
            is used; it is configured from ``config.log_file`` when that is
            set or when the logger has no handlers yet.
    """
    config = config or HarnessConfig()
    if logger is None:
        logger = _default_logger(config)

    reporter = ConsoleReporter(
        stream=stream,
        pass_glyph=config.pass_glyph,
        fail_glyph=config.fail_glyph,
    )
    session = Session(config=config, reporter=reporter, logger=logger)
    session.initialize(args)
    return session


def build_banner(args: Sequence[str] | None = None, debug: bool = False) -> list[str]:
    """Describe the interpreter running the tests.

    Returns the lines to print, e.g.
    ``Built with CPython 3.12.1 (GCC 11.4.0), with exceptions.``
    """
    line = (
        f"Built with {platform.python_implementation()} "
        f"{platform.python_version()} ({platform.python_compiler()})"
    )
    line += ", with exceptions"
    if debug:
        line += ", with DEBUG"
    lines = [line + "."]

    if debug:
        argv = list(args) if args is not None else list(sys.argv)
        lines.append("argv[] = " + " ".join(f"'{a}'" for a in argv))

    return lines


def _default_logger(config: HarnessConfig) -> logging.Logger:
    if config.log_file:
        return setup_logger(debug_file=Path(config.log_file))

    logger = logging.getLogger("microtest")
    if logger.handlers:
        # configured by the caller
        return logger
    return setup_logger(verbose=False)
