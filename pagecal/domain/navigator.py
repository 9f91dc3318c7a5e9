"""View granularity state machine.

Every transition is a pure function from one NavigatorState to a
Transition. The focused date is the single source of truth for which
page is visible; page positions are derived from it on demand.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from pagecal.dates import date_for_page, decade_start, page_for_date, total_pages
from pagecal.domain.models import OutOfBoundsYearError, ViewGranularity, YearSpan


class TransitionKind(Enum):
    """What caused a focus change. Decides how the visible page is realigned."""

    DRILL = "drill"
    SWIPE = "swipe"
    ARROW = "arrow"
    PICK = "pick"
    EXTERNAL = "external"


@dataclass(frozen=True)
class NavigatorState:
    """Immutable granularity and focused unit."""

    granularity: ViewGranularity
    focus: date


@dataclass(frozen=True)
class Transition:
    """Immutable result of a navigation input."""

    state: NavigatorState
    kind: TransitionKind
    error: str | None = None

    @property
    def ignored(self) -> bool:
        return self.error is not None


def initial_state(focus: date, span: YearSpan) -> NavigatorState:
    """Start in the day grid, focused on the given date pulled into the span."""
    return NavigatorState(granularity=ViewGranularity.DAY, focus=span.clamp(focus))


def drill_up(state: NavigatorState, span: YearSpan) -> Transition:
    """Move one level up the day -> month -> year hierarchy.

    Args:
        state: Current navigator state.
        span: Supported year span.

    Returns:
        Transition to the coarser granularity. The year grid has no level
        above it, so it returns the state unchanged.
    """
    year = state.focus.year
    if state.granularity is ViewGranularity.DAY:
        new_state = NavigatorState(ViewGranularity.MONTH, date(year, 1, 1))
    elif state.granularity is ViewGranularity.MONTH:
        first_year = max(decade_start(year), span.min_year)
        new_state = NavigatorState(ViewGranularity.YEAR, date(first_year, 1, 1))
    else:
        new_state = state
    return Transition(state=new_state, kind=TransitionKind.DRILL)


def drill_down(state: NavigatorState, unit: date, span: YearSpan) -> Transition:
    """Descend one level, focusing the tapped year or month.

    Args:
        state: Current navigator state.
        unit: Value of the tapped cell (any date inside the year or month).
        span: Supported year span.

    Returns:
        Transition to the finer granularity. Day cells are picks rather
        than drills, so the day grid returns the state unchanged. Units
        outside the span are ignored.
    """
    if not span.contains(unit):
        return Transition(
            state=state,
            kind=TransitionKind.DRILL,
            error=f"Year {unit.year} is outside {span.min_year}-{span.max_year}",
        )

    if state.granularity is ViewGranularity.YEAR:
        new_state = NavigatorState(ViewGranularity.MONTH, date(unit.year, 1, 1))
    elif state.granularity is ViewGranularity.MONTH:
        new_state = NavigatorState(ViewGranularity.DAY, date(unit.year, unit.month, 1))
    else:
        new_state = state
    return Transition(state=new_state, kind=TransitionKind.DRILL)


def _focus_for_page(state: NavigatorState, granularity: ViewGranularity, page: int, span: YearSpan) -> date:
    page_start = date_for_page(granularity, page, span)
    if granularity is ViewGranularity.DAY:
        return page_start
    # Month and year pages only move the year; the focused month survives
    return date(page_start.year, state.focus.month, 1)


def on_page_swiped(state: NavigatorState, granularity: ViewGranularity, page: int, span: YearSpan) -> Transition:
    """Follow a page change that the user made by swiping.

    Args:
        state: Current navigator state.
        granularity: Track the page belongs to.
        page: Page index the track settled on.
        span: Supported year span.

    Returns:
        Transition with the focus moved to the page. Granularity never
        changes. Pages outside the track are ignored.
    """
    try:
        focus = _focus_for_page(state, granularity, page, span)
    except OutOfBoundsYearError as e:
        return Transition(state=state, kind=TransitionKind.SWIPE, error=str(e))

    return Transition(state=NavigatorState(state.granularity, focus), kind=TransitionKind.SWIPE)


def step(state: NavigatorState, delta: int, span: YearSpan) -> Transition:
    """Move the current granularity's page by delta (arrow buttons).

    Returns:
        Transition to the neighbouring page, or an ignored transition at
        either end of the track.
    """
    granularity = state.granularity
    target = page_for_date(granularity, state.focus, span) + delta
    if not 0 <= target < total_pages(granularity, span):
        return Transition(state=state, kind=TransitionKind.ARROW, error=f"No page {target} to move to")

    focus = _focus_for_page(state, granularity, target, span)
    return Transition(state=NavigatorState(granularity, focus), kind=TransitionKind.ARROW)


def focus_on_pick(state: NavigatorState, picked: date) -> Transition:
    """Keep the header in sync with a picked day by focusing its month."""
    focus = date(picked.year, picked.month, 1)
    return Transition(state=NavigatorState(state.granularity, focus), kind=TransitionKind.PICK)


def focus_on_external(state: NavigatorState, target: date, span: YearSpan) -> Transition:
    """Refocus on a date supplied by the host, keeping the granularity."""
    focus = span.clamp(target)
    if state.granularity is not ViewGranularity.DAY:
        focus = focus.replace(day=1)
    return Transition(state=NavigatorState(state.granularity, focus), kind=TransitionKind.EXTERNAL)
