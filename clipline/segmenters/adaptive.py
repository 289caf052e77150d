"""Adaptive phrase segmenter for word-by-word highlighted captions.

WHY: Highlighted captions show a whole phrase while the spoken word lights
up. Phrases that run across a sentence end or a long pause read badly, and
phrases that are too long do not fit the portrait canvas at 120pt. The
phrase boundaries therefore follow punctuation and silence, bounded by a
word-count target and a hard cap.

HOW: Words are scanned left to right into the current phrase. After each
word (except the last, which always closes its phrase) five break
conditions are evaluated; if any holds, the phrase is closed.

RULES:
- Break conditions, all evaluated every step:
    1. word count >= max_words (hard cap)
    2. word ends with . ! or ?
    3. word count >= min_words_for_comma_break and word ends with , ; or :
    4. word count >= target_words
    5. next word start - this word end > silence_threshold_s
- Phrase text is the words joined by single spaces, original case
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from clipline import config
from clipline.core.ir import Phrase, ResolvedWord
from clipline.segmenters.base import BaseSegmenter

SENTENCE_END_RE = re.compile(r"[.!?]$")
CLAUSE_END_RE = re.compile(r"[,;:]$")


@dataclass(frozen=True)
class PhraseRules:
    """Thresholds for adaptive phrase breaking."""

    max_words: int = config.PHRASE_MAX_WORDS
    target_words: int = config.PHRASE_TARGET_WORDS
    min_words_for_comma_break: int = config.PHRASE_MIN_WORDS_FOR_COMMA_BREAK
    silence_threshold_s: float = config.PHRASE_SILENCE_THRESHOLD_S


def should_break(
    phrase_words: List[ResolvedWord],
    next_word: ResolvedWord,
    rules: PhraseRules,
) -> bool:
    """Decide whether the phrase ending in ``phrase_words[-1]`` should close.

    All conditions are computed before combining them, so the outcome never
    depends on their order.
    """
    word = phrase_words[-1]
    count = len(phrase_words)
    text = word.word.strip()

    hit_cap = count >= rules.max_words
    sentence_end = bool(SENTENCE_END_RE.search(text))
    clause_end = count >= rules.min_words_for_comma_break and bool(CLAUSE_END_RE.search(text))
    hit_target = count >= rules.target_words
    silence = next_word.start - word.end > rules.silence_threshold_s

    return any((hit_cap, sentence_end, clause_end, hit_target, silence))


class AdaptiveSegmenter(BaseSegmenter):
    """Punctuation- and pause-aware phrase grouping."""

    def __init__(self, rules: Optional[PhraseRules] = None) -> None:
        self.rules = rules or PhraseRules()

    def segment(self, words: List[ResolvedWord]) -> List[Phrase]:
        phrases: List[Phrase] = []
        current: List[ResolvedWord] = []

        for i, word in enumerate(words):
            current.append(word)
            is_last = i == len(words) - 1

            if is_last or should_break(current, words[i + 1], self.rules):
                text = " ".join(w.word for w in current)
                phrases.append(self._build_phrase(current, text))
                current = []

        return phrases
