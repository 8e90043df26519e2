"""Per-owner decoration state.

Each owner type carries its own OwnerState in its own ``__dict__``.
State is never inherited: a subclass starts with an empty queue and table.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from interpose.domain.model.configuration import DEFAULT_CONFIG
from interpose.domain.model.enums import DecorationState
from interpose.domain.model.method_table import DecoratedMethodTable
from interpose.domain.model.pending_queue import PendingQueue

if TYPE_CHECKING:
    from collections.abc import Iterator

    from interpose.domain.model.configuration import DecorationConfig

STATE_ATTRIBUTE = "__interpose_state__"

# Guards creation of OwnerState only; each state has its own lock afterwards.
_CREATE_LOCK = threading.Lock()


class OwnerState:
    """Pending queue, decorated-method table and config of one owner.

    Thread Safety:
      - lock is held across drain + instantiate + install, so two
        definition events on the same owner never interleave
      - RLock: decorator constructors may define methods on the same owner
    """

    __slots__ = ("_decorating", "config", "lock", "owner", "queue", "table")

    def __init__(
        self,
        owner: type,
        *,
        queue: PendingQueue | None = None,
        config: DecorationConfig | None = None,
    ) -> None:
        """Initialize state for owner.

        Args:
            owner: Type being declared.
            queue: Existing queue to adopt (class body queue). New if None.
            config: Decoration settings. DEFAULT_CONFIG if None.
        """
        self.owner = owner
        self.queue = queue if queue is not None else PendingQueue()
        self.table = DecoratedMethodTable()
        self.config = config or DEFAULT_CONFIG
        self.lock = threading.RLock()
        self._decorating: set[str] = set()

    def state_of(self, method_name: str) -> DecorationState:
        """Lifecycle state of one method name on this owner."""
        with self.lock:
            if method_name in self._decorating:
                return DecorationState.DECORATING
        if method_name in self.table:
            return DecorationState.DECORATED
        return DecorationState.UNDECORATED

    @contextmanager
    def decorating(self, method_name: str) -> Iterator[None]:
        """Mark method name as DECORATING for the duration of the block."""
        with self.lock:
            self._decorating.add(method_name)
            try:
                yield
            finally:
                self._decorating.discard(method_name)

    def __repr__(self) -> str:
        return (
            f"OwnerState(owner={self.owner.__qualname__}, "
            f"pending={len(self.queue)}, decorated={len(self.table)})"
        )


def state_for(owner: type) -> OwnerState | None:
    """Own state of owner. Returns None if owner never took part in decoration."""
    state = vars(owner).get(STATE_ATTRIBUTE)
    return state if isinstance(state, OwnerState) else None


def ensure_state(
    owner: type,
    *,
    queue: PendingQueue | None = None,
    config: DecorationConfig | None = None,
) -> OwnerState:
    """Own state of owner, created on first use.

    Args:
        owner: Owner type.
        queue: Queue adopted if the state is created here.
        config: Replaces the current config when given.

    Raises:
        TypeError: If owner does not accept attributes (builtin types).
    """
    with _CREATE_LOCK:
        state = state_for(owner)
        if state is None:
            state = OwnerState(owner, queue=queue, config=config)
            # type.__setattr__ bypasses DecoratedMeta's definition hook
            type.__setattr__(owner, STATE_ATTRIBUTE, state)
            return state
    if config is not None:
        state.config = config
    return state
