"""Unit tests for highlight window precomputation.

WHY: The transcript view highlights, for the hovered segment, how far a new
clip would reach. An off-by-one here lets a click create a clip that ends
inside an existing one or runs past the duration limit.

HOW: Hand-checked values on make_segments(30) (5s each, 60s window = 12
segments), then a brute-force comparison of the single-pass scan against
the obvious quadratic definition.

RULES:
- "Inside a clip" is inclusive: start_index <= j <= end_index
"""

from clipline.clips.highlight import HighlightWindows, precompute_highlight_ends
from clipline.core.ir import ClipInterval, Segment


def _brute_force(segments, clips, window):
    def in_clip(j):
        return any(c.start_index <= j <= c.end_index for c in clips)

    ends = []
    for i, segment in enumerate(segments):
        best = i
        for j in range(i + 1, len(segments)):
            if segments[j].end - segment.start <= window and not in_clip(j):
                best = j
        ends.append(best)
    return ends


class TestWindowEnds:
    def test_no_clips(self, make_segments):
        ends = precompute_highlight_ends(make_segments(30), [])

        assert ends[0] == 11
        assert ends[17] == 28
        assert ends[25] == 29
        assert ends[29] == 29

    def test_window_stops_before_clip(self, make_segments):
        ends = precompute_highlight_ends(make_segments(30), [ClipInterval(10, 12)])

        assert ends[0] == 9
        assert ends[13] == 24

    def test_window_may_end_after_a_clip(self, make_segments):
        # segment 20 is outside the clip and within 60s of segment 9
        ends = precompute_highlight_ends(make_segments(30), [ClipInterval(10, 12)])
        assert ends[9] == 20

    def test_long_segment_window_is_itself(self):
        segments = [Segment(0.0, 70.0, "long"), Segment(70.0, 75.0, "short")]
        assert precompute_highlight_ends(segments, []) == [0, 1]

    def test_custom_window(self, make_segments):
        ends = precompute_highlight_ends(make_segments(5), [], max_window_s=10.0)
        assert ends == [1, 2, 3, 4, 4]

    def test_empty(self):
        assert precompute_highlight_ends([], []) == []

    def test_matches_brute_force(self, make_gapped_segments):
        segments = make_gapped_segments(40, 1.5)
        clips = [ClipInterval(3, 5), ClipInterval(9, 9), ClipInterval(20, 27), ClipInterval(36, 39)]

        ends = precompute_highlight_ends(segments, clips)
        assert ends == _brute_force(segments, clips, 60.0)

    def test_bounds_hold_everywhere(self, make_gapped_segments):
        segments = make_gapped_segments(50, 3.0)
        clips = [ClipInterval(5, 8), ClipInterval(30, 31)]
        windows = HighlightWindows.compute(segments, clips)

        for i, end in enumerate(windows.ends):
            assert end >= i
            if end > i:
                assert segments[end].end - segments[i].start <= 60.0
                assert not windows.in_clip(end)


class TestPredicates:
    def _windows(self, make_segments):
        clips = [ClipInterval(10, 12), ClipInterval(13, 15)]
        return HighlightWindows.compute(make_segments(30), clips)

    def test_in_clip_is_inclusive(self, make_segments):
        windows = self._windows(make_segments)

        assert windows.in_clip(10)
        assert windows.in_clip(12)
        assert not windows.in_clip(9)
        assert not windows.in_clip(16)

    def test_gap_in_clip(self, make_segments):
        windows = self._windows(make_segments)

        assert windows.gap_in_clip(10, 11)
        assert not windows.gap_in_clip(9, 10)
        # adjacent clips: the pause between them belongs to neither
        assert not windows.gap_in_clip(12, 13)

    def test_window_end_accessor(self, make_segments):
        windows = self._windows(make_segments)
        assert windows.window_end(0) == windows.ends[0] == 9
