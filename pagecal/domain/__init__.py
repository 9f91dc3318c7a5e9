"""Domain models and state machines for pagecal.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Selection and navigation logic separated from any rendering layer
"""

from pagecal.domain.models import (
    DateRange,
    OutOfBoundsYearError,
    PageIndex,
    SelectionMode,
    ViewGranularity,
    YearSpan,
)

__all__ = [
    "DateRange",
    "OutOfBoundsYearError",
    "PageIndex",
    "SelectionMode",
    "ViewGranularity",
    "YearSpan",
]
