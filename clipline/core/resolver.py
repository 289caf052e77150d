"""Word timestamp resolution: segments → strictly timestamped word sequence.

WHY: WhisperX aligns most words, but not all — numbers, symbols and words
in noisy passages come back without "start" or "end", and some segments
carry no word array at all. Phrase segmentation and subtitle timing need a
start and end for every word.

HOW: Each segment is resolved in order. Segments with word entries keep
their declared times and fill the gaps from neighbouring words or the
segment bounds (WordSource.EXPLICIT). Segments with only text are split on
whitespace and the tokens spread evenly across the segment
(WordSource.INTERPOLATED). Segments with neither contribute nothing.

RULES:
- Word text is trimmed; empty-after-trim words (including entries that
  arrived without text) are dropped, but still count as the next entry
  when a missing end is filled in
- Missing start → previous resolved word's end (anywhere in this call),
  else the segment start
- Missing end → the next word entry's declared start, else the segment end
- Interpolated token j of N spans [s + d*j/N, s + d*(j+1)/N]
- No global re-sort: input segments are assumed time-ordered
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from clipline.core.ir import ResolvedWord, Segment


class WordSource(enum.Enum):
    """Where a segment's resolved words came from."""

    EXPLICIT = "explicit"
    INTERPOLATED = "interpolated"


@dataclass
class ResolvedSegment:
    """The words one segment contributed, tagged with how they were obtained."""

    index: int
    source: WordSource
    words: List[ResolvedWord] = field(default_factory=list)


def _resolve_explicit(
    segment: Segment,
    previous: Optional[ResolvedWord],
) -> List[ResolvedWord]:
    resolved: List[ResolvedWord] = []
    entries = segment.words

    for j, entry in enumerate(entries):
        text = entry.word.strip()
        if not text:
            continue

        start = entry.start
        if start is None:
            last = resolved[-1] if resolved else previous
            start = last.end if last is not None else segment.start

        end = entry.end
        if end is None:
            if j + 1 < len(entries) and entries[j + 1].start is not None:
                end = entries[j + 1].start
            else:
                end = segment.end

        resolved.append(ResolvedWord(word=text, start=start, end=end))

    return resolved


def _interpolate(segment: Segment) -> List[ResolvedWord]:
    tokens = segment.text.split()
    count = len(tokens)
    duration = segment.end - segment.start
    return [
        ResolvedWord(
            word=token,
            start=segment.start + duration * j / count,
            end=segment.start + duration * (j + 1) / count,
        )
        for j, token in enumerate(tokens)
    ]


def resolve_segments(segments: Iterable[Segment]) -> List[ResolvedSegment]:
    """Resolve each segment's words, keeping the per-segment WordSource tag.

    Segments that contribute no words are omitted from the result.

    Args:
        segments: Time-ordered transcript segments.

    Returns:
        One ResolvedSegment per contributing segment, in input order.
        ``index`` is the position in the input iterable.
    """
    results: List[ResolvedSegment] = []
    previous: Optional[ResolvedWord] = None

    for index, segment in enumerate(segments):
        if segment.words:
            words = _resolve_explicit(segment, previous)
            source = WordSource.EXPLICIT
        elif segment.text.strip():
            words = _interpolate(segment)
            source = WordSource.INTERPOLATED
        else:
            continue

        if words:
            results.append(ResolvedSegment(index=index, source=source, words=words))
            previous = words[-1]

    return results


def resolve_words(segments: Iterable[Segment]) -> List[ResolvedWord]:
    """Flatten segments into one word sequence with guaranteed timestamps."""
    words: List[ResolvedWord] = []
    for resolved in resolve_segments(segments):
        words.extend(resolved.words)
    return words
