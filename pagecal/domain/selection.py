"""Pure functions for date selection.

This module contains the functional core for picking dates:
- No I/O operations (no callbacks, no console, no files)
- No side effects
- Every pick returns a new immutable Selection
- Easy to test

Range bounds are always kept ordered: when both are present,
range_start <= range_end.
"""

from dataclasses import dataclass, replace
from datetime import date

from pagecal.domain.models import DateRange, SelectionMode, YearSpan


@dataclass(frozen=True)
class Selection:
    """Immutable selection state for one picker."""

    mode: SelectionMode
    selected_date: date | None = None
    range_start: date | None = None
    range_end: date | None = None

    @property
    def is_complete_range(self) -> bool:
        return self.range_start is not None and self.range_end is not None


@dataclass(frozen=True)
class SelectionChangeResult:
    """Immutable outcome of a pick."""

    selection: Selection
    picked: date | None = None
    completed_range: DateRange | None = None
    error: str | None = None

    @property
    def ignored(self) -> bool:
        return self.error is not None


def _ordered(start: date | None, end: date | None) -> tuple[date | None, date | None]:
    if start is not None and end is not None and start > end:
        return end, start
    return start, end


def set_initial_range(mode: SelectionMode, start: date | None, end: date | None) -> Selection:
    """Build a range selection from externally supplied bounds.

    Args:
        mode: Selection mode of the picker.
        start: Initial range start, if any.
        end: Initial range end, if any.

    Returns:
        Selection with start and end swapped when they arrive out of order.
    """
    start, end = _ordered(start, end)
    return Selection(mode=mode, range_start=start, range_end=end)


def set_initial_date(mode: SelectionMode, selected: date | None) -> Selection:
    """Build a single-date selection from an externally supplied date."""
    return Selection(mode=mode, selected_date=selected)


def apply_pick(selection: Selection, picked: date, span: YearSpan) -> SelectionChangeResult:
    """Apply a tap on a day cell.

    Args:
        selection: Current selection.
        picked: Tapped date.
        span: Supported year span.

    Returns:
        SelectionChangeResult with the new selection. In range mode,
        completed_range is set once both bounds are present. Dates outside
        the span leave the selection unchanged and set error.
    """
    if not span.contains(picked):
        return SelectionChangeResult(
            selection=selection,
            error=f"Year {picked.year} is outside {span.min_year}-{span.max_year}",
        )

    if selection.mode is SelectionMode.SINGLE_DATE:
        return SelectionChangeResult(selection=replace(selection, selected_date=picked), picked=picked)

    start = selection.range_start
    if start is None or selection.range_end is not None:
        # A third tap never extends a finished range
        new_selection = replace(selection, range_start=picked, range_end=None)
        return SelectionChangeResult(selection=new_selection, picked=picked)

    if picked < start:
        new_start, new_end = picked, start
    else:
        new_start, new_end = start, picked

    new_selection = replace(selection, range_start=new_start, range_end=new_end)
    completed = DateRange(start=new_start, end=new_end)
    return SelectionChangeResult(selection=new_selection, picked=picked, completed_range=completed)


def is_in_range(selection: Selection, d: date) -> bool:
    """Check whether d lies on or after the start and on or before the end.

    A lone start (no end yet) counts as a one-day range so it still
    highlights itself.
    """
    if selection.mode is not SelectionMode.RANGE or selection.range_start is None:
        return False
    end = selection.range_end or selection.range_start
    return selection.range_start <= d <= end


def is_range_start(selection: Selection, d: date) -> bool:
    if selection.mode is not SelectionMode.RANGE or selection.range_start is None:
        return False
    return selection.range_start == d


def is_range_end(selection: Selection, d: date) -> bool:
    if selection.mode is not SelectionMode.RANGE or selection.range_end is None:
        return False
    return selection.range_end == d


def is_selected_single(selection: Selection, d: date) -> bool:
    if selection.mode is not SelectionMode.SINGLE_DATE or selection.selected_date is None:
        return False
    return selection.selected_date == d


def period_in_range(selection: Selection, period_start: date, period_end: date) -> bool:
    """Check whether a period overlaps the selected range.

    Args:
        selection: Current selection.
        period_start: First day of the period (inclusive).
        period_end: Last day of the period (inclusive).

    Returns:
        True if [period_start, period_end] and [start, end or start]
        intersect, touching endpoints included.
    """
    if selection.mode is not SelectionMode.RANGE or selection.range_start is None:
        return False
    end = selection.range_end or selection.range_start
    return period_start <= end and period_end >= selection.range_start


def period_contains_range_start(selection: Selection, period_start: date, period_end: date) -> bool:
    start = selection.range_start
    if selection.mode is not SelectionMode.RANGE or start is None:
        return False
    return period_start <= start <= period_end


def period_contains_range_end(selection: Selection, period_start: date, period_end: date) -> bool:
    end = selection.range_end
    if selection.mode is not SelectionMode.RANGE or end is None:
        return False
    return period_start <= end <= period_end


def period_contains_selected(selection: Selection, period_start: date, period_end: date) -> bool:
    selected = selection.selected_date
    if selection.mode is not SelectionMode.SINGLE_DATE or selected is None:
        return False
    return period_start <= selected <= period_end
