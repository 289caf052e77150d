"""Clip interval validation and pause padding.

WHY: Clips are picked by dragging across transcript segments. The drag can
run backwards, run past the end of the transcript, start inside a clip that
already exists, run into the next clip, or cover more than a short-form
platform accepts. Every such edit has to be normalized, trimmed or refused
before the caller stores it, and a refused edit must leave the stored
clip exactly as it was.

HOW: propose_create() and propose_update() run the same checks, in order:
  1. normalize  — swap reversed indices
  2. bounds     — OUT_OF_BOUNDS if either index is outside the transcript
  3. overlap    — OVERLAP if the start lies inside another clip
  4. truncate   — pull the end back to just before the next clip's start
  5. duration   — DURATION_EXCEEDED if the (truncated) span exceeds the cap
Both return a ClipResolution; nothing is mutated and nothing is raised.

calculate_pause_timing() turns an accepted index range into the padded
time interval actually cut from the recording: half of the surrounding
silence on each side, capped.

RULES:
- Only the proposed *start* is checked for overlap; the end is truncated
- The clip being updated is excluded from overlap and truncation checks
- Duration is wall-clock (first segment start → last segment end), so
  dense segments allow more segments per clip
- Updates report whether the boundaries changed so the caller can
  invalidate derived data (titles, rendered video)
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from clipline import config
from clipline.core.ir import ClipInterval, ClipTiming, Segment

logger = logging.getLogger(__name__)


class RejectionKind(enum.Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERLAP = "overlap"
    DURATION_EXCEEDED = "duration_exceeded"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Rejection:
    kind: RejectionKind
    detail: str


@dataclass(frozen=True)
class ClipRules:
    """Limits applied to clip edits and padding."""

    max_duration_s: float = config.MAX_CLIP_DURATION_S
    pause_cap_s: float = config.PAUSE_CAP_S


@dataclass
class ClipResolution:
    """Outcome of a proposed clip edit.

    Exactly one of ``interval`` and ``rejection`` is set.

    Attributes:
        interval: The accepted (possibly truncated) clip.
        rejection: Why the edit was refused.
        truncated: True if the end index was pulled back before a following clip.
        boundaries_changed: For updates, False when the accepted interval
                            equals the stored one. Always True for creates.
    """

    interval: Optional[ClipInterval] = None
    rejection: Optional[Rejection] = None
    truncated: bool = False
    boundaries_changed: bool = True

    @property
    def accepted(self) -> bool:
        return self.interval is not None


def _reject(kind: RejectionKind, detail: str) -> ClipResolution:
    return ClipResolution(rejection=Rejection(kind=kind, detail=detail))


def _resolve(
    segment_count: int,
    others: List[ClipInterval],
    start_index: int,
    end_index: int,
    segment_times: Sequence[Segment],
    rules: ClipRules,
    clip_id: Any,
    action: str,
) -> ClipResolution:
    if start_index > end_index:
        logger.warning(
            "%s called with start > end, swapping (start=%d, end=%d)",
            action, start_index, end_index,
        )
        start_index, end_index = end_index, start_index

    available = min(segment_count, len(segment_times))
    if start_index < 0 or end_index >= available:
        logger.warning(
            "%s rejected: segment indices %d-%d out of bounds (segment_count=%d)",
            action, start_index, end_index, segment_count,
        )
        return _reject(
            RejectionKind.OUT_OF_BOUNDS,
            "segments {}-{} outside 0-{}".format(start_index, end_index, available - 1),
        )

    for other in others:
        if other.contains(start_index):
            logger.warning(
                "%s rejected: start %d inside clip %r (%d-%d)",
                action, start_index, other.id, other.start_index, other.end_index,
            )
            return _reject(
                RejectionKind.OVERLAP,
                "segment {} is inside clip {}-{}".format(
                    start_index, other.start_index, other.end_index
                ),
            )

    truncated = False
    following = [c.start_index for c in others if c.start_index > start_index]
    if following:
        next_start = min(following)
        if end_index >= next_start:
            logger.warning(
                "%s truncating end %d to %d to avoid overlapping a following clip",
                action, end_index, next_start - 1,
            )
            end_index = next_start - 1
            truncated = True

    duration = segment_times[end_index].end - segment_times[start_index].start
    if duration > rules.max_duration_s:
        logger.warning(
            "%s rejected: duration %.2fs exceeds %.2fs (segments %d-%d)",
            action, duration, rules.max_duration_s, start_index, end_index,
        )
        return _reject(
            RejectionKind.DURATION_EXCEEDED,
            "duration {:.2f}s exceeds {:.2f}s".format(duration, rules.max_duration_s),
        )

    return ClipResolution(
        interval=ClipInterval(start_index=start_index, end_index=end_index, id=clip_id),
        truncated=truncated,
    )


def propose_create(
    segment_count: int,
    existing_clips: Iterable[ClipInterval],
    start_index: int,
    end_index: int,
    segment_times: Sequence[Segment],
    rules: Optional[ClipRules] = None,
) -> ClipResolution:
    """Validate a new clip over segments ``start_index``..``end_index``.

    Args:
        segment_count: Number of segments in the transcript.
        existing_clips: Clips already stored for this transcript.
        start_index: Proposed first segment (inclusive).
        end_index: Proposed last segment (inclusive).
        segment_times: Segments (anything with ``start``/``end``) indexed
                       like the transcript.
        rules: Limits; defaults come from clipline.config.

    Returns:
        ClipResolution with the accepted interval (``id`` None) or a rejection.
    """
    return _resolve(
        segment_count,
        list(existing_clips),
        start_index,
        end_index,
        segment_times,
        rules or ClipRules(),
        clip_id=None,
        action="create clip",
    )


def propose_update(
    segment_count: int,
    existing_clips: Iterable[ClipInterval],
    clip_id: Any,
    new_start: int,
    new_end: int,
    segment_times: Sequence[Segment],
    rules: Optional[ClipRules] = None,
) -> ClipResolution:
    """Validate new boundaries for the stored clip ``clip_id``.

    Same checks as propose_create(), with the edited clip excluded from the
    overlap and truncation checks. An unknown ``clip_id`` is rejected with
    NOT_FOUND.
    """
    clips = list(existing_clips)
    current = next((c for c in clips if c.id == clip_id), None)
    if current is None:
        logger.warning("update clip rejected: no clip with id %r", clip_id)
        return _reject(RejectionKind.NOT_FOUND, "no clip with id {!r}".format(clip_id))

    others = [c for c in clips if c.id != clip_id]
    result = _resolve(
        segment_count,
        others,
        new_start,
        new_end,
        segment_times,
        rules or ClipRules(),
        clip_id=clip_id,
        action="update clip",
    )
    if result.interval is not None:
        result.boundaries_changed = (
            result.interval.start_index != current.start_index
            or result.interval.end_index != current.end_index
        )
    return result


def calculate_pause_timing(
    start_index: int,
    end_index: int,
    segment_times: Sequence[Segment],
    video_duration: float,
    pause_cap_s: Optional[float] = None,
) -> ClipTiming:
    """Compute the padded time interval for a clip.

    WHY: Cutting exactly at segment bounds clips breaths and consonants.
    Half of the silence on each side is added, up to ``pause_cap_s``, so
    neighbouring clips never share padding.

    RULES:
    - pause_before = min((start - previous.end) / 2, cap); for the first
      segment the gap is the segment start itself: min(start, cap)
    - pause_after = min((next.start - end) / 2, cap); for the last segment
      the gap is the rest of the video: min(video_duration - end, cap)
    - Negative gaps (overlapping segments) give zero padding

    Raises:
        IndexError: If an index is outside ``segment_times``. Validate with
                    propose_create()/propose_update() first.
    """
    if pause_cap_s is None:
        pause_cap_s = config.PAUSE_CAP_S
    if not (0 <= start_index <= end_index < len(segment_times)):
        raise IndexError(
            "clip segments {}-{} outside 0-{}".format(
                start_index, end_index, len(segment_times) - 1
            )
        )

    first = segment_times[start_index]
    last = segment_times[end_index]

    if start_index > 0:
        pause_before = (first.start - segment_times[start_index - 1].end) / 2
    else:
        pause_before = first.start

    if end_index + 1 < len(segment_times):
        pause_after = (segment_times[end_index + 1].start - last.end) / 2
    else:
        pause_after = video_duration - last.end

    pause_before = max(0.0, min(pause_before, pause_cap_s))
    pause_after = max(0.0, min(pause_after, pause_cap_s))

    starts_at = first.start - pause_before
    ends_at = last.end + pause_after
    return ClipTiming(
        pause_before=pause_before,
        pause_after=pause_after,
        starts_at=starts_at,
        ends_at=ends_at,
        duration=ends_at - starts_at,
    )
