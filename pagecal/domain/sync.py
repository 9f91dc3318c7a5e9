"""Pure functions that keep the three paging tracks aligned with the focus.

The host reports where each track actually is (PageTracks). The focused
date decides where the visible track should be. When the two disagree,
reconcile() produces an AlignRequest for the host to carry out.
"""

from dataclasses import dataclass, replace
from datetime import date

from pagecal.dates import page_for_date
from pagecal.domain.models import PageIndex, ViewGranularity, YearSpan
from pagecal.domain.navigator import NavigatorState, TransitionKind

_ANIMATED_KINDS = frozenset({TransitionKind.ARROW, TransitionKind.PICK})


@dataclass(frozen=True)
class PageTracks:
    """Immutable positions of the day, month and year tracks."""

    day: PageIndex
    month: PageIndex
    year: PageIndex

    def position(self, granularity: ViewGranularity) -> PageIndex:
        if granularity is ViewGranularity.DAY:
            return self.day
        if granularity is ViewGranularity.MONTH:
            return self.month
        return self.year

    def moved(self, granularity: ViewGranularity, page: PageIndex) -> "PageTracks":
        """Return a copy with one track moved to page."""
        return replace(self, **{granularity.name.lower(): page})


@dataclass(frozen=True)
class AlignRequest:
    """Immutable request for the host to move a track."""

    granularity: ViewGranularity
    page: PageIndex
    animate: bool


def target_page(granularity: ViewGranularity, focus: date, span: YearSpan) -> PageIndex:
    return page_for_date(granularity, focus, span)


def tracks_for_focus(focus: date, span: YearSpan) -> PageTracks:
    """Compute the positions all three tracks should start at."""
    return PageTracks(
        day=target_page(ViewGranularity.DAY, focus, span),
        month=target_page(ViewGranularity.MONTH, focus, span),
        year=target_page(ViewGranularity.YEAR, focus, span),
    )


def reconcile(
    tracks: PageTracks,
    state: NavigatorState,
    kind: TransitionKind,
    span: YearSpan,
    pending: AlignRequest | None = None,
) -> AlignRequest | None:
    """Decide whether the visible track has to move after a transition.

    Args:
        tracks: Track positions last reported by the host.
        state: Navigator state after the transition.
        kind: What caused the transition.
        span: Supported year span.
        pending: Request the host may still be carrying out.

    Returns:
        AlignRequest when the visible track is not headed for the focused
        page, otherwise None. A pending request on the visible track stands
        in for its reported position, so a new target always replaces the
        old destination. Swipes never produce a request because the track
        is already where the user left it. Arrows and picks animate; drills
        and host updates snap.
    """
    if kind is TransitionKind.SWIPE:
        return None

    page = target_page(state.granularity, state.focus, span)
    if pending is not None and pending.granularity is state.granularity:
        heading = pending.page
    else:
        heading = tracks.position(state.granularity)
    if heading == page:
        return None

    return AlignRequest(granularity=state.granularity, page=page, animate=kind in _ANIMATED_KINDS)
