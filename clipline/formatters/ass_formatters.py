"""Caption style formatters: segmenter + event mode + style, in one object.

WHY: A caption style is more than a style line — the highlighted style
only works with the adaptive segmenter's short, punctuation-aware phrases,
and the uppercase style expects fixed four-word chunks. Pairing them here
means callers pick a style by name and cannot mix them up.

HOW: AssFormatter holds a segmenter, an EventMode and a StyleConfig built
from the caller's options. ``format()`` segments the words and hands the
phrases to emit_ass().

RULES:
- KaraokeAssFormatter: adaptive segmenter, per-word highlight events
- UppercaseAssFormatter: fixed-chunk segmenter, whole-phrase events
- Style options are validated at construction time
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from clipline.core.ir import ResolvedWord
from clipline.formatters.ass_subtitles import emit_ass
from clipline.formatters.base import BaseFormatter, FormatterOutput
from clipline.formatters.presets import EventMode, StyleConfig
from clipline.segmenters.adaptive import AdaptiveSegmenter
from clipline.segmenters.base import BaseSegmenter
from clipline.segmenters.fixed_chunk import FixedChunkSegmenter

ASS_MEDIA_TYPE = "text/x-ssa"


class AssFormatter(BaseFormatter):
    """Base for ASS caption styles."""

    mode: EventMode
    suffix: str

    def __init__(
        self,
        segmenter: BaseSegmenter,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.segmenter = segmenter
        self.style = StyleConfig.from_options(options, self.mode)

    def format(
        self,
        words: List[ResolvedWord],
        clip_start: float = 0.0,
        clip_duration: Optional[float] = None,
    ) -> Optional[FormatterOutput]:
        phrases = self.segmenter.segment(words)
        content = emit_ass(phrases, self.style, self.mode, clip_start, clip_duration)
        if content is None:
            return None
        return FormatterOutput(
            suffix=self.suffix,
            content=content,
            media_type=ASS_MEDIA_TYPE,
        )


class KaraokeAssFormatter(AssFormatter):
    """Short phrases with the spoken word highlighted."""

    mode = EventMode.PER_WORD_HIGHLIGHT
    suffix = "-captions.ass"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        segmenter: Optional[BaseSegmenter] = None,
    ) -> None:
        super().__init__(segmenter or AdaptiveSegmenter(), options)

    @property
    def name(self) -> str:
        return "Highlighted Words"


class UppercaseAssFormatter(AssFormatter):
    """Fixed-size uppercase chunks, one event per chunk."""

    mode = EventMode.WHOLE_PHRASE
    suffix = "-subtitles.ass"

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        segmenter: Optional[BaseSegmenter] = None,
    ) -> None:
        super().__init__(segmenter or FixedChunkSegmenter(), options)

    @property
    def name(self) -> str:
        return "Uppercase Chunks"
