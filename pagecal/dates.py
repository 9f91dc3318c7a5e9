"""Date utilities for pagecal.

Pure functions for calendar comparisons, month grids, page index
arithmetic and header labels.
"""

import calendar
from datetime import date, timedelta

from pagecal.domain.models import OutOfBoundsYearError, PageIndex, ViewGranularity, YearSpan

# Any Sunday works; the seven days after it give the weekday header order
_REFERENCE_SUNDAY = date(2024, 6, 30)


def is_same_day(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month and a.day == b.day


def is_same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


def is_same_year(a: date, b: date) -> bool:
    return a.year == b.year


def decade_start(year: int) -> int:
    """Return the first year of the decade containing year (e.g. 2024 -> 2020)."""
    return (year // 10) * 10


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def last_of_month(d: date) -> date:
    return d.replace(day=days_in_month(d.year, d.month))


def month_grid_days(year: int, month: int) -> list[date]:
    """Calculate the dates shown on a Sunday-first month page.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).

    Returns:
        Whole weeks of dates, starting on the Sunday on or before the 1st
        and ending with the week that contains the last day of the month.
        Leading and trailing dates belong to the neighbouring months.
    """
    first = date(year, month, 1)
    # date.weekday() is Monday=0 .. Sunday=6; shift so Sunday=0
    leading = (first.weekday() + 1) % 7
    start = first - timedelta(days=leading)
    last = last_of_month(first)

    span_days = (last - start).days + 1
    weeks = -(-span_days // 7)
    return [start + timedelta(days=i) for i in range(weeks * 7)]


def total_pages(granularity: ViewGranularity, span: YearSpan) -> int:
    """Return the number of pages on the paging track of a granularity."""
    years = span.max_year - span.min_year + 1
    if granularity is ViewGranularity.DAY:
        return years * 12
    if granularity is ViewGranularity.MONTH:
        return years
    return (span.max_year - span.min_year) // 10 + 1


def page_for_date(granularity: ViewGranularity, d: date, span: YearSpan) -> PageIndex:
    """Encode the calendar unit containing d as a page index.

    Raises:
        OutOfBoundsYearError: If d's year is outside the span.
    """
    if not span.contains(d):
        raise OutOfBoundsYearError(f"Year {d.year} is outside {span.min_year}-{span.max_year}")

    offset = d.year - span.min_year
    if granularity is ViewGranularity.DAY:
        return PageIndex(offset * 12 + d.month - 1)
    if granularity is ViewGranularity.MONTH:
        return PageIndex(offset)
    return PageIndex(offset // 10)


def date_for_page(granularity: ViewGranularity, page: int, span: YearSpan) -> date:
    """Decode a page index into the first date of its calendar unit.

    Day pages decode to the 1st of their month, month pages to January 1st
    of their year and year pages to January 1st of their first year.

    Raises:
        OutOfBoundsYearError: If page is outside [0, total_pages).
    """
    if not 0 <= page < total_pages(granularity, span):
        raise OutOfBoundsYearError(f"Page {page} is outside the {granularity.name.lower()} track")

    if granularity is ViewGranularity.DAY:
        return date(span.min_year + page // 12, page % 12 + 1, 1)
    if granularity is ViewGranularity.MONTH:
        return date(span.min_year + page, 1, 1)
    return date(span.min_year + page * 10, 1, 1)


def page_years(page: int, span: YearSpan) -> list[int]:
    """Return the ten years shown on a year page."""
    first = date_for_page(ViewGranularity.YEAR, page, span).year
    return list(range(first, first + 10))


def header_label(granularity: ViewGranularity, focus: date, span: YearSpan) -> str:
    """Format the header text for the page anchored at focus.

    Returns:
        "July 2024" for days, "2024" for months, "2020 - 2029" for years.

    The year header spans the focus's year page (min_year + 10 * page), which
    is a calendar decade only when min_year is a multiple of ten.
    """
    if granularity is ViewGranularity.DAY:
        return focus.strftime("%B %Y")
    if granularity is ViewGranularity.MONTH:
        return str(focus.year)

    years = page_years(page_for_date(ViewGranularity.YEAR, focus, span), span)
    return f"{years[0]} - {years[-1]}"


def month_label(month: int) -> str:
    return date(2000, month, 1).strftime("%b")


def weekday_labels() -> list[str]:
    """Return abbreviated weekday names, Sunday first."""
    return [(_REFERENCE_SUNDAY + timedelta(days=i)).strftime("%a") for i in range(7)]
