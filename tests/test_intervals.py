"""Unit tests for clip interval validation and pause padding.

WHY: A clip that overlaps another, runs past the transcript, or exceeds
the platform limit produces a broken render much later. These checks are
the only gate, so each rule and the order they run in is pinned here.

HOW: make_segments() gives contiguous 5-second segments, so a clip over
segments a..b lasts (b - a + 1) * 5 seconds. Pause padding uses
make_gapped_segments() where every gap is known.

RULES:
- 30 segments x 5s: [0,17] is exactly 90s, [0,18] is 95s
- Only the start is checked for overlap; the end is truncated
"""

import pytest

from clipline.clips.intervals import (
    ClipRules,
    RejectionKind,
    calculate_pause_timing,
    propose_create,
    propose_update,
)
from clipline.core.ir import ClipInterval, Segment


@pytest.fixture
def segments(make_segments):
    return make_segments(30)


def _create(segments, clips, start, end, rules=None):
    return propose_create(len(segments), clips, start, end, segments, rules)


def _bounds(result):
    return (result.interval.start_index, result.interval.end_index)


class TestCreate:
    def test_accepts_free_range(self, segments):
        result = _create(segments, [], 2, 6)

        assert result.accepted
        assert _bounds(result) == (2, 6)
        assert result.interval.id is None
        assert not result.truncated

    def test_truncates_before_following_clip(self, segments):
        result = _create(segments, [ClipInterval(10, 12)], 5, 15)

        assert result.accepted
        assert _bounds(result) == (5, 9)
        assert result.truncated

    def test_end_inside_following_clip_is_truncated(self, segments):
        result = _create(segments, [ClipInterval(10, 12)], 8, 11)
        assert _bounds(result) == (8, 9)

    def test_start_inside_clip_rejected(self, segments):
        result = _create(segments, [ClipInterval(5, 10)], 7, 15)

        assert not result.accepted
        assert result.interval is None
        assert result.rejection.kind is RejectionKind.OVERLAP

    def test_start_on_clip_boundary_rejected(self, segments):
        clips = [ClipInterval(10, 12)]
        assert _create(segments, clips, 12, 14).rejection.kind is RejectionKind.OVERLAP
        assert _create(segments, clips, 10, 11).rejection.kind is RejectionKind.OVERLAP

    def test_fits_between_two_clips(self, segments):
        clips = [ClipInterval(0, 3), ClipInterval(10, 12)]
        result = _create(segments, clips, 4, 9)

        assert _bounds(result) == (4, 9)
        assert not result.truncated

    def test_reversed_indices_swapped(self, segments):
        result = _create(segments, [], 5, 2)
        assert _bounds(result) == (2, 5)

    def test_reversed_swap_happens_before_overlap_check(self, segments):
        result = _create(segments, [ClipInterval(10, 12)], 15, 11)
        assert result.rejection.kind is RejectionKind.OVERLAP

    @pytest.mark.parametrize("start,end", [(-1, 3), (25, 30), (30, 31)])
    def test_out_of_bounds(self, segments, start, end):
        result = _create(segments, [], start, end)
        assert result.rejection.kind is RejectionKind.OUT_OF_BOUNDS

    def test_segment_count_limits_bounds(self, segments):
        result = propose_create(10, [], 5, 12, segments)
        assert result.rejection.kind is RejectionKind.OUT_OF_BOUNDS

    def test_exactly_max_duration_accepted(self, segments):
        assert _bounds(_create(segments, [], 0, 17)) == (0, 17)

    def test_over_max_duration_rejected(self, segments):
        assert _create(segments, [], 0, 18).rejection.kind is RejectionKind.DURATION_EXCEEDED
        assert _create(segments, [], 0, 29).rejection.kind is RejectionKind.DURATION_EXCEEDED

    def test_truncation_happens_before_duration_check(self, segments):
        # [3,25] would be 115s; truncated to [3,19] it is 85s
        result = _create(segments, [ClipInterval(20, 22)], 3, 25)

        assert result.accepted
        assert _bounds(result) == (3, 19)
        assert result.truncated

    def test_custom_max_duration(self, segments):
        rules = ClipRules(max_duration_s=20.0)
        assert _create(segments, [], 0, 3, rules).accepted
        assert not _create(segments, [], 0, 4, rules).accepted

    def test_duration_uses_wall_clock(self, make_gapped_segments):
        # 4s segments with 26s gaps: two segments already span 34s
        segments = make_gapped_segments(10, 26.0)
        rules = ClipRules(max_duration_s=60.0)
        assert propose_create(10, [], 0, 1, segments, rules).accepted
        assert not propose_create(10, [], 0, 2, segments, rules).accepted

    def test_rejection_carries_detail(self, segments):
        result = _create(segments, [], 0, 29)
        assert "exceeds" in result.rejection.detail

    def test_existing_clips_not_mutated(self, segments):
        clips = [ClipInterval(10, 12, id=1)]
        _create(segments, clips, 5, 15)
        assert clips == [ClipInterval(10, 12, id=1)]


class TestUpdate:
    @pytest.fixture
    def clips(self):
        return [ClipInterval(0, 3, id=1), ClipInterval(10, 12, id=2)]

    def _update(self, segments, clips, clip_id, start, end):
        return propose_update(len(segments), clips, clip_id, start, end, segments)

    def test_extend_clip(self, segments, clips):
        result = self._update(segments, clips, 2, 10, 14)

        assert _bounds(result) == (10, 14)
        assert result.interval.id == 2
        assert result.boundaries_changed

    def test_unchanged_boundaries_reported(self, segments, clips):
        result = self._update(segments, clips, 2, 10, 12)

        assert result.accepted
        assert not result.boundaries_changed

    def test_own_range_not_treated_as_overlap(self, segments, clips):
        result = self._update(segments, clips, 2, 11, 12)
        assert _bounds(result) == (11, 12)

    def test_start_inside_other_clip_rejected(self, segments, clips):
        result = self._update(segments, clips, 1, 11, 13)
        assert result.rejection.kind is RejectionKind.OVERLAP

    def test_truncated_before_other_clip(self, segments, clips):
        result = self._update(segments, clips, 1, 0, 20)

        assert _bounds(result) == (0, 9)
        assert result.truncated
        assert result.boundaries_changed

    def test_duration_exceeded(self, segments):
        clips = [ClipInterval(0, 3, id=1)]
        result = self._update(segments, clips, 1, 0, 25)
        assert result.rejection.kind is RejectionKind.DURATION_EXCEEDED

    def test_unknown_clip(self, segments, clips):
        result = self._update(segments, clips, 99, 4, 6)
        assert result.rejection.kind is RejectionKind.NOT_FOUND

    def test_rejected_update_leaves_clip_alone(self, segments, clips):
        self._update(segments, clips, 1, 11, 13)
        assert clips[0] == ClipInterval(0, 3, id=1)


class TestPauseTiming:
    def test_two_second_gaps(self, make_gapped_segments):
        segments = make_gapped_segments(5, 2.0)
        timing = calculate_pause_timing(1, 3, segments, video_duration=30.0)

        assert timing.pause_before == pytest.approx(1.0)
        assert timing.pause_after == pytest.approx(1.0)
        assert timing.starts_at == pytest.approx(5.0)
        assert timing.ends_at == pytest.approx(23.0)
        assert timing.duration == pytest.approx(18.0)

    def test_one_second_gaps_are_halved(self, make_gapped_segments):
        segments = make_gapped_segments(5, 1.0)
        timing = calculate_pause_timing(1, 3, segments, video_duration=30.0)

        assert timing.pause_before == pytest.approx(0.5)
        assert timing.pause_after == pytest.approx(0.5)
        assert timing.starts_at == pytest.approx(4.5)
        assert timing.ends_at == pytest.approx(19.5)
        assert timing.duration == pytest.approx(15.0)

    def test_long_gaps_capped(self, make_gapped_segments):
        segments = make_gapped_segments(5, 10.0)
        timing = calculate_pause_timing(1, 3, segments, video_duration=100.0)

        assert timing.pause_before == pytest.approx(1.0)
        assert timing.pause_after == pytest.approx(1.0)

    def test_contiguous_segments_get_no_padding(self, make_segments):
        timing = calculate_pause_timing(2, 4, make_segments(10), video_duration=50.0)

        assert timing.pause_before == 0.0
        assert timing.pause_after == 0.0
        assert timing.starts_at == 10.0
        assert timing.ends_at == 25.0

    def test_first_segment_uses_its_start(self):
        segments = [Segment(3.0, 5.0, "a"), Segment(5.0, 8.0, "b")]
        timing = calculate_pause_timing(0, 0, segments, video_duration=10.0)

        assert timing.pause_before == pytest.approx(1.0)
        assert timing.starts_at == pytest.approx(2.0)

    def test_first_segment_short_lead_in_not_halved(self):
        segments = [Segment(0.4, 5.0, "a")]
        timing = calculate_pause_timing(0, 0, segments, video_duration=5.0)
        assert timing.pause_before == pytest.approx(0.4)

    def test_last_segment_uses_rest_of_video(self, make_segments):
        timing = calculate_pause_timing(1, 2, make_segments(3), video_duration=20.0)

        assert timing.pause_after == pytest.approx(1.0)
        assert timing.ends_at == pytest.approx(16.0)

    def test_custom_cap(self, make_segments):
        timing = calculate_pause_timing(1, 2, make_segments(3), video_duration=20.0, pause_cap_s=2.5)
        assert timing.pause_after == pytest.approx(2.5)

    def test_video_ending_at_last_segment(self, make_segments):
        timing = calculate_pause_timing(0, 2, make_segments(3), video_duration=15.0)
        assert timing.pause_after == 0.0

    def test_negative_gap_clamped(self):
        segments = [Segment(0.0, 5.0, "a"), Segment(4.0, 8.0, "b")]
        timing = calculate_pause_timing(1, 1, segments, video_duration=7.0)

        assert timing.pause_before == 0.0
        assert timing.pause_after == 0.0

    @pytest.mark.parametrize("start,end", [(2, 1), (-1, 1), (0, 3)])
    def test_invalid_indices(self, make_segments, start, end):
        with pytest.raises(IndexError):
            calculate_pause_timing(start, end, make_segments(3), video_duration=15.0)
