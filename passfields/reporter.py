from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from passfields.core.fields import RecordKind


def build_kinds_table(kinds: Iterable[RecordKind]) -> Table:
    """
    Render record kinds and their fields as a rich table.

    One row per field, grouped by kind in declaration order.
    """
    table = Table(
        title="Record Kinds",
        box=box.ROUNDED,
        caption="Fields listed in validation order",
    )

    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Field", style="magenta")
    table.add_column("Key", style="green")
    table.add_column("Type", style="blue")
    table.add_column("Required", justify="center", style="bold")
    table.add_column("Constraint", style="yellow")

    for kind in kinds:
        for position, spec in enumerate(kind.fields):
            table.add_row(
                kind.name if position == 0 else "",
                spec.name,
                spec.canonical_key,
                spec.kind.value,
                "yes" if spec.required else "no",
                spec.validator.describe() or "-",
            )
        table.add_section()

    return table


def print_kinds(kinds: Iterable[RecordKind], console: Optional[Console] = None) -> None:
    console = console or Console()
    kinds = list(kinds)
    if not kinds:
        console.print("[yellow]No record kinds registered.[/yellow]")
        return
    console.print(build_kinds_table(kinds))


__all__ = ["build_kinds_table", "print_kinds"]
