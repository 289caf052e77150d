"""Transcript rows: segments interleaved with labelled pauses.

WHY: Reading a sermon transcript to find clip-worthy passages is easier
when long silences are visible; they usually mark topic changes. Both the
full transcript view and a single clip's view list segments with a
timestamp and show a "12s pause" row wherever the speaker stopped for
longer than a threshold.

HOW: Segments are walked in order, remembering the previous segment's end.
A gap row is emitted before any segment that starts more than
``gap_threshold_s`` after it. Timestamps use H:MM:SS only when the listing
reaches the one-hour mark, so short recordings stay compact.

RULES:
- Row timestamps floor to whole seconds; gap labels round
- use_hours is decided by the start of the last listed segment (>= 3600s)
- A range (start_index, end_index) restricts the rows to one clip
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from clipline import config
from clipline.core.ir import Segment


@dataclass
class TranscriptRow:
    """One display row: a segment or a pause between segments."""

    type: str  # "segment" or "gap"
    label: str = ""
    timestamp: str = ""
    text: str = ""
    index: Optional[int] = None


def format_row_timestamp(seconds: float, use_hours: bool) -> str:
    total = int(seconds // 1)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if use_hours:
        return "{:d}:{:02d}:{:02d}".format(hours, minutes, secs)
    return "{:02d}:{:02d}".format(minutes, secs)


def format_gap(seconds: float) -> str:
    # Half-up, not Python's banker's rounding.
    total = int(seconds + 0.5)
    if total >= 60:
        minutes, secs = divmod(total, 60)
        return "{:d}m {:02d}s pause".format(minutes, secs)
    return "{:d}s pause".format(total)


def build_transcript_rows(
    segments: Sequence[Segment],
    gap_threshold_s: Optional[float] = None,
    start_index: int = 0,
    end_index: Optional[int] = None,
) -> List[TranscriptRow]:
    """Build display rows for segments ``start_index``..``end_index``.

    Args:
        segments: All transcript segments.
        gap_threshold_s: Pauses longer than this get a gap row.
        start_index: First segment to list.
        end_index: Last segment to list (inclusive); None lists to the end.

    Returns:
        Rows in transcript order. Segment rows carry their transcript index.
    """
    if gap_threshold_s is None:
        gap_threshold_s = config.ROW_GAP_THRESHOLD_S
    if end_index is None:
        end_index = len(segments) - 1
    start_index = max(0, start_index)
    end_index = min(end_index, len(segments) - 1)
    if start_index > end_index:
        return []

    use_hours = segments[end_index].start >= 3600

    rows: List[TranscriptRow] = []
    previous_end: Optional[float] = None
    for i in range(start_index, end_index + 1):
        segment = segments[i]
        if previous_end is not None:
            gap = segment.start - previous_end
            if gap > gap_threshold_s:
                rows.append(TranscriptRow(type="gap", label=format_gap(gap)))

        rows.append(TranscriptRow(
            type="segment",
            timestamp=format_row_timestamp(segment.start, use_hours),
            text=segment.text.strip(),
            index=i,
        ))
        previous_end = segment.end

    return rows
