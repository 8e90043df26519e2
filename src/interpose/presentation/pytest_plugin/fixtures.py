"""pytest fixtures for testing decorated classes."""

from __future__ import annotations

import contextlib
import io
from typing import TYPE_CHECKING

import pytest

from interpose.application.reporters.console import DecorationReporter, ReportConfig
from interpose.application.shorthand_registry import ShorthandRegistry, shorthands

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def stdout_of() -> Callable[[Callable[[], object]], str]:
    """Run a callable and return what it wrote to sys.stdout.

    Example:
        assert stdout_of(lambda: Widget().render()) == "before\\ninside\\nafter\\n"
    """

    def _capture(action: Callable[[], object]) -> str:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            action()
        return buffer.getvalue()

    return _capture


@pytest.fixture
def isolated_shorthands() -> Iterator[ShorthandRegistry]:
    """Process-wide shorthand table, restored after the test.

    Decorator subclasses declared inside the test do not leak out.
    """
    saved = shorthands.snapshot()
    try:
        yield shorthands
    finally:
        shorthands.restore(saved)


@pytest.fixture
def decoration_report() -> Callable[..., str]:
    """Plain-text decoration report for owner types."""
    reporter = DecorationReporter(ReportConfig(color=False))
    return reporter.report
