"""Tests for pagecal.domain.navigator transitions."""

from datetime import date

from pagecal.domain.models import ViewGranularity, YearSpan
from pagecal.domain.navigator import (
    NavigatorState,
    TransitionKind,
    drill_down,
    drill_up,
    focus_on_external,
    focus_on_pick,
    initial_state,
    on_page_swiped,
    step,
)

SPAN = YearSpan()
DAY = ViewGranularity.DAY
MONTH = ViewGranularity.MONTH
YEAR = ViewGranularity.YEAR


class TestInitialState:
    """Tests for initial_state."""

    def test_starts_in_day_grid(self) -> None:
        """Should start at day granularity on the given date."""
        state = initial_state(date(2024, 6, 15), SPAN)

        assert state == NavigatorState(DAY, date(2024, 6, 15))

    def test_focus_pulled_into_span(self) -> None:
        """Should clamp a focus outside the span to its nearest edge."""
        assert initial_state(date(1850, 6, 1), SPAN).focus == date(1900, 1, 1)
        assert initial_state(date(2200, 6, 1), SPAN).focus == date(2100, 12, 1)


class TestDrillUp:
    """Tests for drill_up."""

    def test_day_to_month(self) -> None:
        """Should focus January of the focused year."""
        transition = drill_up(NavigatorState(DAY, date(2024, 6, 15)), SPAN)

        assert transition.state == NavigatorState(MONTH, date(2024, 1, 1))
        assert transition.kind is TransitionKind.DRILL

    def test_month_to_year(self) -> None:
        """Should focus the start of the decade."""
        transition = drill_up(NavigatorState(MONTH, date(2024, 1, 1)), SPAN)

        assert transition.state == NavigatorState(YEAR, date(2020, 1, 1))

    def test_year_has_no_ascent(self) -> None:
        """Should return the year state unchanged."""
        state = NavigatorState(YEAR, date(2020, 1, 1))

        assert drill_up(state, SPAN).state == state

    def test_decade_start_clamped_to_span(self) -> None:
        """A decade starting before min_year should start at min_year."""
        span = YearSpan(1905, 2100)

        transition = drill_up(NavigatorState(MONTH, date(1907, 1, 1)), span)

        assert transition.state.focus == date(1905, 1, 1)


class TestDrillDown:
    """Tests for drill_down."""

    def test_year_to_month(self) -> None:
        """Tapping 1905 should focus 1905-01-01 at month granularity."""
        transition = drill_down(NavigatorState(YEAR, date(1900, 1, 1)), date(1905, 1, 1), SPAN)

        assert transition.state == NavigatorState(MONTH, date(1905, 1, 1))
        assert transition.kind is TransitionKind.DRILL

    def test_month_to_day(self) -> None:
        """Should focus the first of the tapped month."""
        transition = drill_down(NavigatorState(MONTH, date(2024, 1, 1)), date(2024, 5, 1), SPAN)

        assert transition.state == NavigatorState(DAY, date(2024, 5, 1))

    def test_day_has_no_descent(self) -> None:
        """Day cells are picks, so the state should not change."""
        state = NavigatorState(DAY, date(2024, 6, 1))

        assert drill_down(state, date(2024, 6, 15), SPAN).state == state

    def test_out_of_span_unit_ignored(self) -> None:
        """Should ignore cells outside the span."""
        state = NavigatorState(YEAR, date(2100, 1, 1))

        transition = drill_down(state, date(2105, 1, 1), SPAN)

        assert transition.ignored
        assert transition.state == state

    def test_round_trip_keeps_year(self) -> None:
        """Month -> day -> month should return to the same year."""
        start = NavigatorState(MONTH, date(2024, 1, 1))

        down = drill_down(start, date(2024, 9, 1), SPAN).state
        up = drill_up(down, SPAN).state

        assert up.granularity is MONTH
        assert up.focus.year == 2024
        assert up == start


class TestPageSwiped:
    """Tests for on_page_swiped."""

    def test_day_swipe_moves_year_and_month(self) -> None:
        """Should focus the month on the new page."""
        state = NavigatorState(DAY, date(2024, 6, 1))

        transition = on_page_swiped(state, DAY, 124 * 12 + 6, SPAN)

        assert transition.state == NavigatorState(DAY, date(2024, 7, 1))
        assert transition.kind is TransitionKind.SWIPE

    def test_month_swipe_keeps_month(self) -> None:
        """Should change the year but keep the focused month."""
        state = NavigatorState(MONTH, date(2024, 3, 1))

        transition = on_page_swiped(state, MONTH, 125, SPAN)

        assert transition.state == NavigatorState(MONTH, date(2025, 3, 1))

    def test_year_swipe_moves_decade(self) -> None:
        """Should move to the first year of the new decade."""
        state = NavigatorState(YEAR, date(2020, 1, 1))

        transition = on_page_swiped(state, YEAR, 13, SPAN)

        assert transition.state == NavigatorState(YEAR, date(2030, 1, 1))

    def test_missing_page_ignored(self) -> None:
        """Should ignore pages outside the track."""
        state = NavigatorState(MONTH, date(2024, 1, 1))

        transition = on_page_swiped(state, MONTH, 201, SPAN)

        assert transition.ignored
        assert transition.state == state


class TestStep:
    """Tests for arrow navigation."""

    def test_next_month_across_year(self) -> None:
        """Should move from December to January of the next year."""
        transition = step(NavigatorState(DAY, date(2024, 12, 15)), 1, SPAN)

        assert transition.state == NavigatorState(DAY, date(2025, 1, 1))
        assert transition.kind is TransitionKind.ARROW

    def test_previous_year(self) -> None:
        """Should move the month grid back one year."""
        transition = step(NavigatorState(MONTH, date(2024, 1, 1)), -1, SPAN)

        assert transition.state == NavigatorState(MONTH, date(2023, 1, 1))

    def test_stops_at_first_page(self) -> None:
        """Should ignore a step before page 0."""
        state = NavigatorState(DAY, date(1900, 1, 1))

        transition = step(state, -1, SPAN)

        assert transition.ignored
        assert transition.state == state

    def test_stops_at_last_page(self) -> None:
        """Should ignore a step past the last decade."""
        state = NavigatorState(YEAR, date(2100, 1, 1))

        assert step(state, 1, SPAN).ignored


class TestFocusChanges:
    """Tests for focus_on_pick and focus_on_external."""

    def test_pick_focuses_month(self) -> None:
        """Should focus the first of the picked day's month."""
        transition = focus_on_pick(NavigatorState(DAY, date(2024, 7, 1)), date(2024, 8, 2))

        assert transition.state == NavigatorState(DAY, date(2024, 8, 1))
        assert transition.kind is TransitionKind.PICK

    def test_external_keeps_granularity(self) -> None:
        """Should refocus without leaving the current grid."""
        transition = focus_on_external(NavigatorState(MONTH, date(2024, 1, 1)), date(2030, 5, 5), SPAN)

        assert transition.state == NavigatorState(MONTH, date(2030, 5, 1))
        assert transition.kind is TransitionKind.EXTERNAL
