"""Tests for pagecal.domain.sync pure functions."""

from datetime import date

from pagecal.domain.models import PageIndex, ViewGranularity, YearSpan
from pagecal.domain.navigator import NavigatorState, TransitionKind
from pagecal.domain.sync import AlignRequest, PageTracks, reconcile, target_page, tracks_for_focus

SPAN = YearSpan()
DAY = ViewGranularity.DAY
MONTH = ViewGranularity.MONTH
YEAR = ViewGranularity.YEAR


class TestTracks:
    """Tests for PageTracks helpers."""

    def test_tracks_for_focus(self) -> None:
        """Should place each track on the focused unit's page."""
        tracks = tracks_for_focus(date(2024, 6, 15), SPAN)

        assert tracks == PageTracks(day=PageIndex(1493), month=PageIndex(124), year=PageIndex(12))

    def test_moved_changes_one_track(self) -> None:
        """Should only move the named track."""
        tracks = PageTracks(day=PageIndex(1), month=PageIndex(2), year=PageIndex(3))

        moved = tracks.moved(MONTH, PageIndex(9))

        assert moved == PageTracks(day=PageIndex(1), month=PageIndex(9), year=PageIndex(3))
        assert moved.position(MONTH) == 9
        assert tracks.position(MONTH) == 2

    def test_target_page(self) -> None:
        """Should use the granularity's page formula."""
        assert target_page(YEAR, date(2024, 1, 1), SPAN) == 12


class TestReconcile:
    """Tests for reconcile."""

    def test_aligned_track_needs_nothing(self) -> None:
        """Should return None when the track is already on the focused page."""
        state = NavigatorState(DAY, date(2024, 6, 1))
        tracks = tracks_for_focus(state.focus, SPAN)

        assert reconcile(tracks, state, TransitionKind.ARROW, SPAN) is None

    def test_drill_snaps(self) -> None:
        """Drills should jump without animation."""
        tracks = tracks_for_focus(date(2024, 6, 1), SPAN)
        state = NavigatorState(MONTH, date(1905, 1, 1))

        request = reconcile(tracks, state, TransitionKind.DRILL, SPAN)

        assert request == AlignRequest(granularity=MONTH, page=PageIndex(5), animate=False)

    def test_arrow_animates(self) -> None:
        """Arrow navigation should animate."""
        tracks = tracks_for_focus(date(2024, 6, 1), SPAN)
        state = NavigatorState(DAY, date(2024, 7, 1))

        request = reconcile(tracks, state, TransitionKind.ARROW, SPAN)

        assert request == AlignRequest(granularity=DAY, page=PageIndex(1494), animate=True)

    def test_pick_animates(self) -> None:
        """Picking a day in a neighbouring month should animate."""
        tracks = tracks_for_focus(date(2024, 7, 1), SPAN)
        state = NavigatorState(DAY, date(2024, 8, 1))

        request = reconcile(tracks, state, TransitionKind.PICK, SPAN)

        assert request is not None
        assert request.animate

    def test_external_snaps(self) -> None:
        """Host updates should jump without animation."""
        tracks = tracks_for_focus(date(2024, 7, 1), SPAN)
        state = NavigatorState(DAY, date(2030, 1, 1))

        request = reconcile(tracks, state, TransitionKind.EXTERNAL, SPAN)

        assert request is not None
        assert not request.animate

    def test_swipe_never_requests(self) -> None:
        """A completed swipe should need no further alignment."""
        tracks = tracks_for_focus(date(2024, 6, 1), SPAN)
        state = NavigatorState(DAY, date(2030, 1, 1))

        assert reconcile(tracks, state, TransitionKind.SWIPE, SPAN) is None

    def test_pending_request_stands_in_for_position(self) -> None:
        """A new target should replace an in-flight request even if the track never moved."""
        tracks = tracks_for_focus(date(2024, 6, 1), SPAN)
        pending = AlignRequest(granularity=DAY, page=PageIndex(1494), animate=True)
        state = NavigatorState(DAY, date(2024, 6, 1))

        request = reconcile(tracks, state, TransitionKind.ARROW, SPAN, pending)

        assert request == AlignRequest(granularity=DAY, page=PageIndex(1493), animate=True)

    def test_pending_request_already_heading_to_target(self) -> None:
        """No new request is needed while the track is already headed for the focus."""
        tracks = tracks_for_focus(date(2024, 6, 1), SPAN)
        pending = AlignRequest(granularity=DAY, page=PageIndex(1494), animate=True)
        state = NavigatorState(DAY, date(2024, 7, 1))

        assert reconcile(tracks, state, TransitionKind.PICK, SPAN, pending) is None

    def test_pending_on_other_track_is_ignored(self) -> None:
        """A request for a hidden track should not affect the visible one."""
        tracks = tracks_for_focus(date(2024, 6, 1), SPAN)
        pending = AlignRequest(granularity=DAY, page=PageIndex(1494), animate=True)
        state = NavigatorState(MONTH, date(2024, 1, 1))

        assert reconcile(tracks, state, TransitionKind.DRILL, SPAN, pending) is None
