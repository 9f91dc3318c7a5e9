"""Stateful date picker that a rendering layer embeds.

DatePicker is the imperative shell around the functional core in
pagecal.domain: it owns the current selection, navigator state and track
positions, turns input events into pure transitions, and fires the host
callbacks. Reading today's date is the only other impure part.
"""

import logging
from collections.abc import Callable
from datetime import date

from pagecal.config import CalendarConfig
from pagecal.dates import header_label, total_pages, weekday_labels
from pagecal.domain.grid import CellDescriptor, generate_page
from pagecal.domain.models import DateRange, OutOfBoundsYearError, PageIndex, SelectionMode, ViewGranularity, YearSpan
from pagecal.domain.navigator import (
    NavigatorState,
    Transition,
    drill_down,
    drill_up,
    focus_on_external,
    focus_on_pick,
    initial_state,
    on_page_swiped,
    step,
)
from pagecal.domain.selection import Selection, apply_pick, set_initial_date, set_initial_range
from pagecal.domain.sync import AlignRequest, PageTracks, reconcile, target_page, tracks_for_focus

logger = logging.getLogger(__name__)

PickCallback = Callable[[date], None]
RangePickCallback = Callable[[DateRange], None]
AlignCallback = Callable[[AlignRequest], None]


class DatePicker:
    """Day/month/year date picker with single-date or range selection."""

    def __init__(
        self,
        mode: SelectionMode,
        *,
        initial_date: date | None = None,
        initial_start: date | None = None,
        initial_end: date | None = None,
        on_pick: PickCallback | None = None,
        on_range_pick: RangePickCallback | None = None,
        on_align: AlignCallback | None = None,
        span: YearSpan | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the picker.

        Args:
            mode: Selection mode, fixed for the picker's lifetime.
            initial_date: Initially selected date in single-date mode.
            initial_start: Initial range start in range mode.
            initial_end: Initial range end in range mode.
            on_pick: Called with the date of every accepted single-date pick.
            on_range_pick: Called with every completed range.
            on_align: Called when a paging track has to move.
            span: Supported years, 1900-2100 by default.
            today: Provider of today's date.
        """
        self._mode = mode
        self._span = span or YearSpan()
        self._today = today
        self._on_pick = on_pick
        self._on_range_pick = on_range_pick
        self._on_align = on_align

        self._selection = self._initial_selection(initial_date, initial_start, initial_end)
        focus = self._selection.selected_date or self._selection.range_start or self._today()
        self._state = initial_state(focus, self._span)
        self._tracks = tracks_for_focus(self._state.focus, self._span)
        self._pending: AlignRequest | None = None

        logger.debug("Date picker initialized: mode=%s, focus=%s", mode.value, self._state.focus)

    @classmethod
    def single(
        cls,
        initial_date: date | None = None,
        on_pick: PickCallback | None = None,
        **kwargs,
    ) -> "DatePicker":
        """Create a picker that selects one date at a time."""
        return cls(SelectionMode.SINGLE_DATE, initial_date=initial_date, on_pick=on_pick, **kwargs)

    @classmethod
    def range(
        cls,
        initial_start: date | None = None,
        initial_end: date | None = None,
        on_range_pick: RangePickCallback | None = None,
        **kwargs,
    ) -> "DatePicker":
        """Create a picker that selects an inclusive date range."""
        return cls(
            SelectionMode.RANGE,
            initial_start=initial_start,
            initial_end=initial_end,
            on_range_pick=on_range_pick,
            **kwargs,
        )

    @classmethod
    def from_config(cls, config: CalendarConfig, **kwargs) -> "DatePicker":
        """Create a picker using the mode and year span from a loaded config."""
        return cls(config.mode, span=config.span, **kwargs)

    def _initial_selection(self, selected: date | None, start: date | None, end: date | None) -> Selection:
        if self._mode is SelectionMode.SINGLE_DATE:
            return set_initial_date(self._mode, selected)
        return set_initial_range(self._mode, start, end)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def mode(self) -> SelectionMode:
        return self._mode

    @property
    def span(self) -> YearSpan:
        return self._span

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def state(self) -> NavigatorState:
        return self._state

    @property
    def granularity(self) -> ViewGranularity:
        return self._state.granularity

    @property
    def focus(self) -> date:
        return self._state.focus

    @property
    def tracks(self) -> PageTracks:
        return self._tracks

    @property
    def pending_alignment(self) -> AlignRequest | None:
        """Alignment requested but not yet reported as settled by the host."""
        return self._pending

    # ------------------------------------------------------------------
    # Per-frame queries
    # ------------------------------------------------------------------
    def page_count(self) -> int:
        return total_pages(self._state.granularity, self._span)

    def current_page(self) -> PageIndex:
        return target_page(self._state.granularity, self._state.focus, self._span)

    def cells(self, page: int | None = None) -> list[CellDescriptor]:
        """Return the cells for a page of the current granularity (default: the focused page)."""
        if page is None:
            page = self.current_page()
        return generate_page(self._state.granularity, page, self._selection, self._today(), self._span)

    def header_label(self) -> str:
        return header_label(self._state.granularity, self._state.focus, self._span)

    def weekday_labels(self) -> list[str]:
        return weekday_labels()

    def can_drill_up(self) -> bool:
        return self._state.granularity is not ViewGranularity.YEAR

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------
    def tap_cell(self, value: date) -> bool:
        """Handle a tap on a cell of the visible grid.

        Day cells are picks; month and year cells drill down.

        Returns:
            True if the tap changed state, False if it was ignored.
        """
        if self._state.granularity is not ViewGranularity.DAY:
            return self._apply(drill_down(self._state, value, self._span))

        result = apply_pick(self._selection, value, self._span)
        if result.ignored:
            logger.debug("Ignored pick: %s", result.error)
            return False

        self._selection = result.selection
        self._apply(focus_on_pick(self._state, value))

        if self._mode is SelectionMode.SINGLE_DATE:
            if self._on_pick:
                self._on_pick(value)
        elif result.completed_range and self._on_range_pick:
            self._on_range_pick(result.completed_range)
        return True

    def tap_header(self) -> bool:
        """Handle a tap on the header text (drill up)."""
        if not self.can_drill_up():
            return False
        return self._apply(drill_up(self._state, self._span))

    def tap_prev_arrow(self) -> bool:
        return self._apply(step(self._state, -1, self._span))

    def tap_next_arrow(self) -> bool:
        return self._apply(step(self._state, 1, self._span))

    def page_settled(self, granularity: ViewGranularity, index: int) -> bool:
        """Record that a paging track came to rest on a page.

        A settle on the page of the pending alignment completes it. A
        settle on the page the track was already on changes nothing. Any
        other settle on the visible track is a user swipe: it abandons the
        pending alignment and moves the focus.

        Returns:
            True if the focus moved.
        """
        if not 0 <= index < total_pages(granularity, self._span):
            logger.debug("Ignored settle on missing %s page %s", granularity.name.lower(), index)
            return False

        reported = self._tracks.position(granularity)
        self._tracks = self._tracks.moved(granularity, PageIndex(index))

        pending = self._pending
        if pending is not None and pending.granularity is granularity and pending.page == index:
            self._pending = None
            return False

        if granularity is not self._state.granularity or index == reported:
            return False

        self._pending = None
        return self._apply(on_page_swiped(self._state, granularity, index, self._span))

    # ------------------------------------------------------------------
    # Host updates
    # ------------------------------------------------------------------
    def update_initial(
        self,
        initial_date: date | None = None,
        initial_start: date | None = None,
        initial_end: date | None = None,
    ) -> None:
        """Replace the selection with new externally supplied values.

        The focus follows the new date (or range start) when one is given.
        """
        self._selection = self._initial_selection(initial_date, initial_start, initial_end)
        target = self._selection.selected_date or self._selection.range_start
        if target is not None:
            self._apply(focus_on_external(self._state, target, self._span))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _apply(self, transition: Transition) -> bool:
        if transition.ignored:
            logger.debug("Ignored %s transition: %s", transition.kind.value, transition.error)
            return False

        changed = transition.state != self._state
        self._state = transition.state

        # An alignment on a track that is no longer visible is abandoned
        pending = self._pending
        if pending is not None and pending.granularity is not self._state.granularity:
            pending = None

        try:
            request = reconcile(self._tracks, self._state, transition.kind, self._span, pending)
        except OutOfBoundsYearError as e:
            logger.debug("No page for focus %s: %s", self._state.focus, e)
            self._pending = pending
            return changed

        if request is None:
            self._pending = pending
            return changed

        # A new request replaces any alignment still in flight
        self._pending = request
        logger.debug(
            "Align %s track to page %s (%s)",
            request.granularity.name.lower(),
            request.page,
            "animate" if request.animate else "snap",
        )
        if self._on_align:
            self._on_align(request)
        return changed
