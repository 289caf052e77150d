"""Highlight windows for click-to-create clip selection.

WHY: When a user hovers a transcript segment to start a new clip, the UI
highlights how far the clip could extend from there: no further than a
fixed duration, and never into an existing clip. Computing this per hover
would be quadratic on long recordings, so every answer is precomputed in
one pass whenever the segments or clips change.

HOW: Segments are scanned from last to first. Each position starts its
candidate end at the answer of the position after it and only moves it
backwards while the window is too long or the candidate sits inside a
clip. Starting earlier can only make a window longer, so the later
position's answer is always a valid upper bound, and the candidate moves
backwards at most n times over the whole scan.

RULES:
- ends[i] >= i for every i
- For ends[i] > i: segments[ends[i]].end - segments[i].start <= max_window_s
  and ends[i] is not inside any clip
- in_clip() and gap_in_clip() are inclusive of clip boundaries
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from clipline import config
from clipline.core.ir import ClipInterval, Segment


class HighlightWindows:
    """Precomputed highlight window ends for one transcript and clip set."""

    def __init__(self, ends: List[int], clips: List[ClipInterval]) -> None:
        self.ends = ends
        self.clips = clips

    @classmethod
    def compute(
        cls,
        segments: Sequence[Segment],
        clips: Iterable[ClipInterval],
        max_window_s: Optional[float] = None,
    ) -> "HighlightWindows":
        if max_window_s is None:
            max_window_s = config.HIGHLIGHT_WINDOW_S
        clip_list = list(clips)
        in_clip = _clip_membership(len(segments), clip_list)

        ends = [0] * len(segments)
        candidate = len(segments) - 1
        for i in range(len(segments) - 1, -1, -1):
            start = segments[i].start
            while candidate > i and (
                segments[candidate].end - start > max_window_s or in_clip[candidate]
            ):
                candidate -= 1
            ends[i] = candidate

        return cls(ends, clip_list)

    def window_end(self, index: int) -> int:
        return self.ends[index]

    def in_clip(self, index: int) -> bool:
        return any(c.contains(index) for c in self.clips)

    def gap_in_clip(self, prev_index: int, next_index: int) -> bool:
        """True if the pause between two segments lies inside a single clip."""
        return any(
            c.contains(prev_index) and c.contains(next_index) for c in self.clips
        )


def _clip_membership(count: int, clips: List[ClipInterval]) -> List[bool]:
    member = [False] * count
    for clip in clips:
        for j in range(max(0, clip.start_index), min(count, clip.end_index + 1)):
            member[j] = True
    return member


def precompute_highlight_ends(
    segments: Sequence[Segment],
    clips: Iterable[ClipInterval],
    max_window_s: Optional[float] = None,
) -> List[int]:
    """Return, for each segment index, the furthest index its highlight window reaches."""
    return HighlightWindows.compute(segments, clips, max_window_s).ends
