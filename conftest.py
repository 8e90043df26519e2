"""Root conftest: enables interpose fixtures for the test suite."""

pytest_plugins = ["interpose.presentation.pytest_plugin"]
