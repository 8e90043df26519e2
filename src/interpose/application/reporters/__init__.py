"""Reporters for decoration diagnostics."""

from interpose.application.reporters.console import DecorationReporter, ReportConfig

__all__ = ["DecorationReporter", "ReportConfig"]
