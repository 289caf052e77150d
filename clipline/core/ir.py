"""Intermediate representation dataclasses for transcripts, phrases and clips.

WHY: Recognizer output arrives as loosely-typed JSON where word timestamps
may be missing and text may carry stray whitespace. Caption generation and
clip management each need different views of the same transcript. The IR
gives both a single, well-typed form.

HOW: Dataclasses in three groups:
  WordSpan, Segment, Transcript — input as recognized (timestamps optional)
  ResolvedWord, Phrase          — caption-side output (timestamps guaranteed)
  ClipInterval, ClipTiming      — clip-side values (segment indices, padded times)

RULES:
- All times are float seconds from the start of the source recording
- Segment.end >= Segment.start
- ResolvedWord always has both timestamps
- ClipInterval indices are inclusive segment indices, start <= end
- The engine never mutates these objects after construction
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class WordSpan:
    """One recognized word as delivered by the recognizer.

    RULES:
    - word may contain leading/trailing whitespace (trimmed by the resolver)
    - word is "" for an entry that arrived without text; it keeps its slot
      so neighbouring words still see its timing
    - start / end are None when the recognizer could not align the word
    - confidence is informational only (WhisperX calls it "score")
    """

    word: str
    start: Optional[float] = None
    end: Optional[float] = None
    confidence: Optional[float] = None


@dataclass
class Segment:
    """One recognized utterance.

    An empty ``words`` list means the recognizer gave no word-level timing;
    the resolver then interpolates word times across the segment.
    """

    start: float
    end: float
    text: str
    words: List[WordSpan] = field(default_factory=list)


@dataclass
class Transcript:
    """A full transcript, as stored next to the source recording.

    ``duration_s`` is the length of the source media when known. It is only
    needed to pad a clip that ends on the final segment.
    """

    segments: List[Segment]
    duration_s: Optional[float] = None


@dataclass
class ResolvedWord:
    """A word with guaranteed start/end timestamps."""

    word: str
    start: float
    end: float


@dataclass
class Phrase:
    """A run of words shown on screen together.

    RULES:
    - start is the first word's start, end is the last word's end
    - text is the display text (original case or upper case, depending on
      the segmenter that built it)
    """

    text: str
    start: float
    end: float
    words: List[ResolvedWord] = field(default_factory=list)


@dataclass
class ClipInterval:
    """A clip expressed as an inclusive range of segment indices.

    ``id`` is assigned by whatever stores clips; the engine only compares it.
    """

    start_index: int
    end_index: int
    id: Optional[Any] = None

    def contains(self, index: int) -> bool:
        return self.start_index <= index <= self.end_index


@dataclass
class ClipTiming:
    """The padded time interval of a clip in the source recording."""

    pause_before: float
    pause_after: float
    starts_at: float
    ends_at: float
    duration: float
