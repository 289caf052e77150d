"""Shared test fixtures for the clipline test suite.

WHY: Clip, highlight and row tests all need transcripts with predictable
segment timing, and caption tests need small word-level segments in the
WhisperX shape. Centralizing the builders here keeps the numbers in one
place so expected values in tests can be derived by hand.

HOW: Factory fixtures return builder functions so each test picks its own
segment count and gap. Sample documents are plain dicts, exactly as they
would be read from a transcript JSON file.

RULES:
- make_segments(n): segment i spans [i*5, i*5+5], contiguous
- make_gapped_segments(n, gap): segment i spans [i*(4+gap), i*(4+gap)+4]
- Words in sample_document are deliberately hand-timed; do not "tidy" them
"""

from typing import Any, Dict, List

import pytest

from clipline.core.ir import ResolvedWord, Segment, WordSpan


@pytest.fixture
def make_segments():
    """Factory: n contiguous 5-second segments starting at 0."""

    def _make(count: int) -> List[Segment]:
        return [
            Segment(start=i * 5.0, end=i * 5.0 + 5.0, text="Segment {}".format(i))
            for i in range(count)
        ]

    return _make


@pytest.fixture
def make_gapped_segments():
    """Factory: n 4-second segments separated by ``gap`` seconds of silence."""

    def _make(count: int, gap: float) -> List[Segment]:
        step = 4.0 + gap
        return [
            Segment(start=i * step, end=i * step + 4.0, text="Segment {}".format(i))
            for i in range(count)
        ]

    return _make


@pytest.fixture
def make_words():
    """Factory: ResolvedWords from (text, start, end) tuples."""

    def _make(*triples) -> List[ResolvedWord]:
        return [ResolvedWord(word=w, start=s, end=e) for w, s, e in triples]

    return _make


@pytest.fixture
def even_words():
    """Factory: ``count`` words "word0".."wordN" every ``step`` seconds, lasting ``length``."""

    def _make(count: int, step: float = 0.3, length: float = 0.25) -> List[ResolvedWord]:
        return [
            ResolvedWord(word="word{}".format(i), start=i * step, end=i * step + length)
            for i in range(count)
        ]

    return _make


@pytest.fixture
def grace_segment():
    """One fully-timed segment: "Grace and mercy" at 0.0–1.5s."""
    return Segment(
        start=0.0,
        end=3.0,
        text="Grace and mercy",
        words=[
            WordSpan(word="Grace", start=0.0, end=0.5),
            WordSpan(word="and", start=0.6, end=0.8),
            WordSpan(word="mercy", start=0.9, end=1.5),
        ],
    )


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """A WhisperX-shaped transcript document with three segments.

    Segment 1 has a word with no timing at all, segment 2 has no word array.
    """
    return {
        "segments": [
            {
                "start": 10.0,
                "end": 12.0,
                "text": " Hello world.",
                "words": [
                    {"word": " Hello", "start": 10.0, "end": 10.4, "score": 0.91},
                    {"word": " world.", "start": 10.5, "end": 11.0, "score": 0.88},
                ],
            },
            {
                "start": 12.5,
                "end": 14.0,
                "text": " It is 1984.",
                "words": [
                    {"word": " It", "start": 12.5, "end": 12.7, "score": 0.95},
                    {"word": " is", "start": 12.8, "end": 13.0, "score": 0.93},
                    {"word": " 1984."},
                ],
            },
            {
                "start": 17.0,
                "end": 19.0,
                "text": " Grace and peace",
            },
        ],
        "duration": 20.0,
    }
