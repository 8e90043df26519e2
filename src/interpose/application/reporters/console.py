"""Console reporter: decorated-method tables -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from interpose.application.owner_state import state_for

if TYPE_CHECKING:
    from collections.abc import Iterable

    from interpose.domain.model.descriptor import DecoratorDescriptor
    from interpose.domain.model.method_entry import DecoratedMethodEntry


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Configuration for decoration reporter.

    Attributes:
        show_arguments: Show extra registration arguments per decorator.
        show_pending: Show descriptors still waiting for a definition.
        color: Emit ANSI styling. False = plain text.
        width: Console width in characters.
    """

    show_arguments: bool = True
    show_pending: bool = True
    color: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class DecorationReporter:
    """Renders decorated methods of owner types for diagnostics.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ReportConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ReportConfig()

    def report(self, *owners: type) -> str:
        """Format decoration state of owners.

        Args:
            owners: Owner types, rendered in given order.

        Returns:
            Formatted string, one section per owner.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )
        for owner in owners:
            self._render_owner(console, owner)
        return output.getvalue()

    def _render_owner(self, console: Console, owner: type) -> None:
        """Render one owner section."""
        console.rule(f"[bold]{escape(owner.__qualname__)}[/bold]")

        state = state_for(owner)
        entries = {} if state is None else state.table.entries()
        if not entries:
            console.print("no decorated methods")
        else:
            console.print(self._entries_table(entries.values()))

        if self._config.show_pending and state is not None:
            pending = state.queue.snapshot()
            if pending:
                names = ", ".join(self._describe(d) for d in pending)
                console.print(f"[yellow]pending:[/yellow] {escape(names)}")
        console.print()

    def _entries_table(self, entries: Iterable[DecoratedMethodEntry]) -> Table:
        """Build table: method, position, decorator, arguments."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("method")
        table.add_column("#", justify="right")
        table.add_column("decorator")
        if self._config.show_arguments:
            table.add_column("arguments")

        for entry in entries:
            for row in self._entry_rows(entry):
                table.add_row(*row)
        return table

    def _entry_rows(self, entry: DecoratedMethodEntry) -> list[tuple[str, ...]]:
        """One row per decorator instance, registration order."""
        rows: list[tuple[str, ...]] = []
        for index, decorator in enumerate(entry.decorators):
            method = entry.method_name if index == 0 else ""
            row = [escape(method), str(index + 1), escape(type(decorator).__qualname__)]
            if self._config.show_arguments:
                descriptor = entry.descriptors[index] if index < len(entry.descriptors) else None
                row.append(escape(self._arguments(descriptor)))
            rows.append(tuple(row))
        return rows

    def _describe(self, descriptor: DecoratorDescriptor) -> str:
        """Descriptor as Type(args)."""
        return f"{descriptor.type_name}({self._arguments(descriptor)})"

    @staticmethod
    def _arguments(descriptor: DecoratorDescriptor | None) -> str:
        """Extra arguments as call-style text."""
        if descriptor is None:
            return ""
        parts = [repr(a) for a in descriptor.args]
        parts.extend(f"{k}={v!r}" for k, v in descriptor.kwargs.items())
        return ", ".join(parts)
