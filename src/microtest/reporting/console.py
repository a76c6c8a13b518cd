"""Human-readable console output for a harness session."""

from __future__ import annotations

import sys
from typing import TextIO

from microtest.assertions.base import AssertionResult


class ConsoleReporter:
    """Writes report lines to a text stream in the order they are produced.

    The stream is looked up on every write when none was given, so that
    redirections of ``sys.stdout`` made after construction are honoured.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        pass_glyph: str = "✓",
        fail_glyph: str = "✗",
    ):
        self._stream = stream
        self.pass_glyph = pass_glyph
        self.fail_glyph = fail_glyph

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str = "") -> None:
        print(line, file=self.stream, flush=True)

    def banner(self, lines: list[str]) -> None:
        for line in lines:
            self._write(line)

    def suite_started(self, name: str) -> None:
        self._write()
        self._write(name)

    def case_started(self, name: str, separator: bool) -> None:
        if separator:
            self._write()
        self._write(f"  {name}")

    def assertion(self, result: AssertionResult) -> None:
        self._write(format_assertion(result, self.pass_glyph, self.fail_glyph))

    def summary(self, passed: int, failed: int, success: bool) -> None:
        self._write()
        if success:
            self._write(f"  {passed} passing")
        else:
            self._write(f"  {passed} passing, {failed} failing")


def format_assertion(
    result: AssertionResult, pass_glyph: str = "✓", fail_glyph: str = "✗"
) -> str:
    """Render one assertion outcome as a single report line.

    Passing lines carry only the message. Failing lines carry the detail
    (when present) and the location in parentheses.
    """
    glyph = pass_glyph if result.passed else fail_glyph
    line = f"    {glyph} {result.message}"
    if result.passed:
        return line

    context: list[str] = []
    if result.detail:
        context.append(result.detail)
    if result.show_location:
        context.append(f"in '{result.location}'")
    if context:
        line += f" ({', '.join(context)})"
    return line
