"""Decoration configuration.

Given per owner (class keyword ``interpose_config`` or ``declare(config=...)``).
"""

from __future__ import annotations

from dataclasses import dataclass

from interpose.domain.model.enums import ResultPolicy


@dataclass(frozen=True, slots=True)
class DecorationConfig:
    """Per-owner decoration settings.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        result_policy: What dispatchers return. LAST = last decorator's result.
        warn_on_pending: Log a warning when a declaration unit ends with
            descriptors still pending. They stay pending either way.
        check_capability_on_install: Also verify each decorator has a callable
            ``call`` when the dispatcher is installed. Dispatch always checks.
    """

    result_policy: ResultPolicy = ResultPolicy.LAST
    warn_on_pending: bool = True
    check_capability_on_install: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.result_policy, ResultPolicy):
            raise TypeError(
                f"result_policy must be ResultPolicy, got {type(self.result_policy).__name__}",
            )


DEFAULT_CONFIG = DecorationConfig()
