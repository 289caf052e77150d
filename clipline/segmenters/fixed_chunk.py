"""Fixed-chunk segmenter for the uppercase caption style.

Words are taken left to right in groups of ``group_size``; the final group
gets the remainder. Phrase text is upper-cased. Timing is ignored.
"""

from __future__ import annotations

from typing import List, Optional

from clipline import config
from clipline.core.ir import Phrase, ResolvedWord
from clipline.segmenters.base import BaseSegmenter


class FixedChunkSegmenter(BaseSegmenter):
    def __init__(self, group_size: Optional[int] = None) -> None:
        if group_size is None:
            group_size = config.CHUNK_GROUP_SIZE
        if group_size < 1:
            raise ValueError("group_size must be at least 1, got {}".format(group_size))
        self.group_size = group_size

    def segment(self, words: List[ResolvedWord]) -> List[Phrase]:
        phrases: List[Phrase] = []
        for i in range(0, len(words), self.group_size):
            chunk = words[i:i + self.group_size]
            text = " ".join(w.word for w in chunk).upper()
            phrases.append(self._build_phrase(chunk, text))
        return phrases
