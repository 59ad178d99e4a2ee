"""Terminal rendering of strips with rich."""

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table

from .formatting import format_date
from .layout import COLUMNS, card_to_grid
from .verify import StripValidation


def card_table(
    card: Sequence[int], *, code: Optional[str] = None, expires: Optional[str] = None
) -> Table:
    """Ticket grid for a card; cards that do not fit the grid show as a plain number row."""
    title = f"[bold]{code}[/bold]" if code else None
    caption = f"Valid until {format_date(expires)}" if expires else None
    table = Table(
        title=title,
        caption=caption,
        box=box.SQUARE,
        show_header=False,
        show_lines=True,
        padding=(0, 1),
    )
    try:
        grid = card_to_grid(card)
    except ValueError as exc:
        table.add_column(justify="left")
        table.add_row(" ".join(str(x) for x in card))
        table.add_row(f"[red]{exc}[/red]")
        return table
    for _ in range(COLUMNS):
        table.add_column(justify="center", width=2)
    for row in grid:
        table.add_row(*("" if value is None else str(value) for value in row))
    return table


def strip_panel(
    strip: Sequence[Sequence[int]],
    *,
    index: int,
    validation: StripValidation,
    codes: Optional[Sequence[Optional[str]]] = None,
    expires: Optional[str] = None,
) -> Panel:
    tables = [
        card_table(card, code=(codes[i] if codes and i < len(codes) else None), expires=expires)
        for i, card in enumerate(strip)
    ]
    if validation.ok:
        status = "[green]OK[/green]"
    else:
        status = (
            f"[red]Invalid: missing {validation.missing}, "
            f"duplicates {validation.duplicates}[/red]"
        )
    return Panel(Group(*tables), title=f"Strip #{index}", subtitle=status)
