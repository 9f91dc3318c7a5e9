"""pagecal - paged day/month/year date picker engine.

This module re-exports the public API for easy importing.
"""

from pagecal.domain.grid import CellDescriptor
from pagecal.domain.models import DateRange, SelectionMode, ViewGranularity, YearSpan
from pagecal.domain.sync import AlignRequest
from pagecal.picker import DatePicker

__all__ = [
    "AlignRequest",
    "CellDescriptor",
    "DatePicker",
    "DateRange",
    "SelectionMode",
    "ViewGranularity",
    "YearSpan",
]
