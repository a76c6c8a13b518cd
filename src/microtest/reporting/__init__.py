"""Report output for harness sessions."""

from microtest.reporting.console import ConsoleReporter, format_assertion

__all__ = ["ConsoleReporter", "format_assertion"]
