"""Abstract base segmenter.

WHY: The two caption styles group words differently (one by linguistic
and timing cues, one in fixed chunks), but the formatters only care that
they receive a list of Phrases. A shared base keeps them interchangeable.

RULES:
- segment() never reorders words; phrase order equals word order
- An empty word list yields an empty phrase list
- Phrase.start / Phrase.end are the first / last word's bounds
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from clipline.core.ir import Phrase, ResolvedWord


class BaseSegmenter(ABC):
    """Groups a resolved word sequence into display phrases.

    To add a new grouping strategy:
    1. Create a new file in segmenters/
    2. Subclass BaseSegmenter and implement segment()
    3. Register it in SEGMENTERS in segmenters/__init__.py
    """

    @abstractmethod
    def segment(self, words: List[ResolvedWord]) -> List[Phrase]:
        """Split words into consecutive phrases."""

    @staticmethod
    def _build_phrase(words: List[ResolvedWord], text: str) -> Phrase:
        return Phrase(
            text=text,
            start=words[0].start,
            end=words[-1].end,
            words=list(words),
        )
