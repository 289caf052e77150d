"""Phrase segmenter registry.

WHY: Each caption style pairs a subtitle event mode with a way of grouping
words. The formatters and the CLI look segmenters up by key instead of
importing concrete classes.

HOW: SEGMENTERS maps string keys to segmenter *classes* (not instances).
Callers instantiate as needed: ``segmenter = SEGMENTERS["adaptive"]()``.

RULES:
- Keys are snake_case identifiers
- Every segmenter must be constructible with no arguments
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clipline.segmenters.adaptive import AdaptiveSegmenter, PhraseRules
from clipline.segmenters.fixed_chunk import FixedChunkSegmenter

if TYPE_CHECKING:
    from clipline.segmenters.base import BaseSegmenter

SEGMENTERS: dict[str, type[BaseSegmenter]] = {
    "adaptive": AdaptiveSegmenter,
    "fixed_chunk": FixedChunkSegmenter,
}

__all__ = [
    "SEGMENTERS",
    "AdaptiveSegmenter",
    "FixedChunkSegmenter",
    "PhraseRules",
]
