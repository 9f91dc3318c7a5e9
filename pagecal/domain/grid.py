"""Pure functions that build the cells of one calendar page.

Day, month and year grids share a single period descriptor: a cell
covers [period_start, period_end] (one day, one month or one year) and
every flag is derived from that span. The output depends only on the
arguments, so callers can regenerate a page after every input.
"""

from dataclasses import dataclass
from datetime import date

from pagecal.dates import date_for_page, last_of_month, month_grid_days, month_label, page_years
from pagecal.domain.models import ViewGranularity, YearSpan
from pagecal.domain.selection import (
    Selection,
    is_in_range,
    period_contains_range_end,
    period_contains_range_start,
    period_contains_selected,
    period_in_range,
)


@dataclass(frozen=True)
class CellDescriptor:
    """Immutable semantic state of one grid cell."""

    value: date
    label: str
    is_today: bool
    is_current_period: bool
    is_selected: bool
    is_in_range: bool
    is_range_start: bool
    is_range_end: bool
    in_span: bool = True

    @property
    def is_range_interior(self) -> bool:
        return self.is_in_range and not self.is_range_start and not self.is_range_end


def describe_period(
    period_start: date,
    period_end: date,
    label: str,
    selection: Selection,
    today: date,
    span: YearSpan,
    is_current_period: bool = True,
) -> CellDescriptor:
    """Build the descriptor for a cell covering [period_start, period_end].

    Args:
        period_start: First day covered by the cell.
        period_end: Last day covered by the cell (equal to period_start for days).
        label: Text the rendering layer shows in the cell.
        selection: Current selection.
        today: Today's date, supplied by the caller.
        span: Supported year span.
        is_current_period: False for leading/trailing days of a month page.

    Returns:
        CellDescriptor with today, selection and range flags set.
    """
    if period_start == period_end:
        in_range = is_in_range(selection, period_start)
    else:
        in_range = period_in_range(selection, period_start, period_end)

    return CellDescriptor(
        value=period_start,
        label=label,
        is_today=period_start <= today <= period_end,
        is_current_period=is_current_period,
        is_selected=period_contains_selected(selection, period_start, period_end),
        is_in_range=in_range,
        is_range_start=period_contains_range_start(selection, period_start, period_end),
        is_range_end=period_contains_range_end(selection, period_start, period_end),
        in_span=span.contains(period_start),
    )


def day_cells(page: int, selection: Selection, today: date, span: YearSpan) -> list[CellDescriptor]:
    """Build the Sunday-first day cells for a month page."""
    month_start = date_for_page(ViewGranularity.DAY, page, span)
    return [
        describe_period(
            d,
            d,
            str(d.day),
            selection,
            today,
            span,
            is_current_period=d.month == month_start.month,
        )
        for d in month_grid_days(month_start.year, month_start.month)
    ]


def month_cells(page: int, selection: Selection, today: date, span: YearSpan) -> list[CellDescriptor]:
    """Build the twelve month cells for a year page."""
    year = date_for_page(ViewGranularity.MONTH, page, span).year
    cells: list[CellDescriptor] = []
    for month in range(1, 13):
        start = date(year, month, 1)
        cells.append(describe_period(start, last_of_month(start), month_label(month), selection, today, span))
    return cells


def year_cells(page: int, selection: Selection, today: date, span: YearSpan) -> list[CellDescriptor]:
    """Build the ten year cells for a decade page."""
    return [
        describe_period(date(year, 1, 1), date(year, 12, 31), str(year), selection, today, span)
        for year in page_years(page, span)
    ]


def generate_page(
    granularity: ViewGranularity,
    page: int,
    selection: Selection,
    today: date,
    span: YearSpan,
) -> list[CellDescriptor]:
    """Build the ordered cells for one page of a granularity's track.

    Args:
        granularity: Which grid to build.
        page: Page index on that granularity's track.
        selection: Current selection.
        today: Today's date, supplied by the caller.
        span: Supported year span.

    Returns:
        Cells in row-major display order.

    Raises:
        OutOfBoundsYearError: If page is outside the track.
    """
    if granularity is ViewGranularity.DAY:
        return day_cells(page, selection, today, span)
    if granularity is ViewGranularity.MONTH:
        return month_cells(page, selection, today, span)
    return year_cells(page, selection, today, span)
