"""Terminal preview of a picker page for debugging host integrations."""

from rich.console import Console
from rich.table import Table

from pagecal.domain.grid import CellDescriptor
from pagecal.domain.models import ViewGranularity
from pagecal.picker import DatePicker

console = Console()

_COLUMNS = {
    ViewGranularity.DAY: 7,
    ViewGranularity.MONTH: 3,
    ViewGranularity.YEAR: 3,
}


def format_cell(cell: CellDescriptor) -> str:
    """Format a cell label with markup for its semantic state.

    Args:
        cell: Cell descriptor from the grid generator.

    Returns:
        Rich markup string for the cell.
    """
    text = cell.label
    if cell.is_range_start or cell.is_range_end or cell.is_selected:
        text = f"[bold reverse]{text}[/bold reverse]"
    elif cell.is_in_range:
        text = f"[reverse]{text}[/reverse]"

    if cell.is_today:
        text = f"[underline]{text}[/underline]"
    if not cell.is_current_period or not cell.in_span:
        text = f"[dim]{text}[/dim]"
    return text


def build_page_table(
    cells: list[CellDescriptor],
    granularity: ViewGranularity,
    title: str,
    weekdays: list[str] | None = None,
) -> Table:
    """Lay out a page of cells as a table, row-major."""
    columns = _COLUMNS[granularity]
    show_header = granularity is ViewGranularity.DAY and weekdays is not None
    table = Table(title=title, show_header=show_header, header_style="bold")

    for col in range(columns):
        heading = weekdays[col] if show_header and weekdays else ""
        table.add_column(heading, justify="right")

    for start in range(0, len(cells), columns):
        row = [format_cell(cell) for cell in cells[start : start + columns]]
        row.extend("" for _ in range(columns - len(row)))
        table.add_row(*row)

    return table


def render_picker(picker: DatePicker, out: Console | None = None) -> None:
    """Print the picker's visible page."""
    table = build_page_table(
        picker.cells(),
        picker.granularity,
        picker.header_label(),
        picker.weekday_labels(),
    )
    (out or console).print(table)
