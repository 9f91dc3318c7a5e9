"""Domain type definitions for pagecal.

These types are shared by the whole functional core:
- PageIndex: Index of a page on one of the three paging tracks
- SelectionMode: Single date or date range, fixed per picker
- ViewGranularity: Day, month or year grid, ordered DAY < MONTH < YEAR
- YearSpan: Inclusive range of years the picker can page through
- DateRange: A completed, ordered pair of range bounds

Calendar dates are plain ``datetime.date`` values: civil dates with no
time-of-day or time zone.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import NewType

# Page indexes are zero-based and bounded by total_pages() for their track
PageIndex = NewType("PageIndex", int)

DEFAULT_MIN_YEAR = 1900
DEFAULT_MAX_YEAR = 2100

# Month pages show days of the year before min_year and year pages show up
# to nine years past max_year; both must stay inside date.min..date.max
EARLIEST_MIN_YEAR = 2
LATEST_MAX_YEAR = 9990


class OutOfBoundsYearError(ValueError):
    """Raised when a date or page falls outside the supported year span."""


class SelectionMode(Enum):
    """How taps on day cells are interpreted."""

    SINGLE_DATE = "single"
    RANGE = "range"


class ViewGranularity(IntEnum):
    """Calendar unit shown by the grid. Higher values are coarser."""

    DAY = 0
    MONTH = 1
    YEAR = 2


@dataclass(frozen=True)
class YearSpan:
    """Immutable inclusive span of supported years."""

    min_year: int = DEFAULT_MIN_YEAR
    max_year: int = DEFAULT_MAX_YEAR

    def __post_init__(self) -> None:
        if self.min_year > self.max_year:
            raise ValueError(f"min_year {self.min_year} is after max_year {self.max_year}")
        if self.min_year < EARLIEST_MIN_YEAR:
            raise ValueError(f"min_year must be at least {EARLIEST_MIN_YEAR}, got {self.min_year}")
        if self.max_year > LATEST_MAX_YEAR:
            raise ValueError(f"max_year must be at most {LATEST_MAX_YEAR}, got {self.max_year}")

    def contains_year(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year

    def contains(self, d: date) -> bool:
        return self.contains_year(d.year)

    def clamp(self, d: date) -> date:
        """Pull a date into the span, keeping it unchanged when already inside."""
        if d.year < self.min_year:
            return date(self.min_year, 1, 1)
        if d.year > self.max_year:
            return date(self.max_year, 12, 1)
        return d


@dataclass(frozen=True)
class DateRange:
    """Immutable completed range. start <= end always holds."""

    start: date
    end: date
