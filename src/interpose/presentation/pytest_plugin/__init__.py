"""pytest plugin for interpose.

Provides fixtures:
    stdout_of: Capture sys.stdout written by a callable
    isolated_shorthands: Shorthand table restored after each test
    decoration_report: Plain-text report of decorated methods

Enable in conftest.py:
    pytest_plugins = ["interpose.presentation.pytest_plugin"]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from interpose.presentation.pytest_plugin.fixtures import (
    decoration_report,
    isolated_shorthands,
    stdout_of,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "decoration_report",
    "isolated_shorthands",
    "stdout_of",
]


def pytest_configure(config: pytest.Config) -> None:
    """Register interpose marker."""
    config.addinivalue_line(
        "markers",
        "interpose: mark test as exercising decorated classes",
    )
