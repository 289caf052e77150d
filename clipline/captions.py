"""Caption generation for one clip of a transcript.

WHY: Captions are rendered per clip, not per recording: the caption file
must start at zero where the clip starts, contain only the clip's words,
and never show a timestamp past the clip's end. This module is the single
entry point that turns (transcript, clip) into an ASS document.

HOW: Resolve words for the clip's segment range only, pass them to the
formatter registered under ``style`` together with the clip timeline
(start = padded clip start, duration = padded clip length).

RULES:
- Returns None when the clip's segments yield no words
- Segment indices are clamped to the transcript
- Words are resolved from the clip's segments alone, so a missing start
  on the clip's first word falls back to its segment start
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from clipline.core.ir import Transcript
from clipline.core.resolver import resolve_words
from clipline.formatters import FORMATTERS
from clipline.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def render_clip_captions(
    transcript: Transcript,
    start_index: int,
    end_index: int,
    starts_at: float,
    ends_at: float,
    style: str = "karaoke",
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[FormatterOutput]:
    """Like caption_clip(), but returns the FormatterOutput (suffix, media type)."""
    if style not in FORMATTERS:
        raise ValueError(
            "Unknown caption style '{}'. Available: {}".format(
                style, ", ".join(sorted(FORMATTERS))
            )
        )
    formatter = FORMATTERS[style](options)

    first = max(0, start_index)
    last = min(end_index, len(transcript.segments) - 1)
    words = resolve_words(transcript.segments[first:last + 1])
    if not words:
        logger.info("No words in segments %d-%d, nothing to caption", start_index, end_index)
        return None

    logger.debug(
        "Captioning %d words from segments %d-%d with %s",
        len(words), first, last, formatter.name,
    )
    return formatter.format(words, clip_start=starts_at, clip_duration=ends_at - starts_at)


def caption_clip(
    transcript: Transcript,
    start_index: int,
    end_index: int,
    starts_at: float,
    ends_at: float,
    style: str = "karaoke",
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[str]:
    """Generate the ASS caption document for one clip.

    Args:
        transcript: The full transcript.
        start_index: First segment of the clip (inclusive).
        end_index: Last segment of the clip (inclusive).
        starts_at: Absolute clip start in the recording (padding included).
        ends_at: Absolute clip end in the recording (padding included).
        style: Key in FORMATTERS ("karaoke" or "uppercase").
        options: Style options (fontSize, outlineWidth, marginH, marginV,
                 primaryColor, highlightColor).

    Returns:
        The ASS document, or None when there is nothing to caption.

    Raises:
        ValueError: Unknown style or invalid style option.
    """
    output = render_clip_captions(
        transcript, start_index, end_index, starts_at, ends_at, style, options
    )
    return output.content if output is not None else None
