"""ASS subtitle emission for portrait clip captions.

WHY: Clips are burned with captions by ffmpeg's libass filter, which reads
Advanced SubStation Alpha (ASS) documents. ASS supports inline colour
overrides, which is what makes the word-by-word highlight style possible.

HOW: A document has three sections — [Script Info] (canvas 1080x1920),
[V4+ Styles] (one Default style from a StyleConfig) and [Events] (one
Dialogue line per event). Two event modes:
  PER_WORD_HIGHLIGHT — one event per word; the event shows the whole phrase
                       with the active word recoloured, and lasts until the
                       next word starts (last word: until the phrase ends)
  WHOLE_PHRASE       — one event per phrase spanning its start and end

When captioning a clip cut from a longer recording, every timestamp is
shifted by the clip's start and clamped into [0, clip_duration] before it
is formatted.

RULES:
- Timestamps are H:MM:SS.CC, never negative; centiseconds round half-up
  and a rounded 100 carries into seconds, minutes and hours
- Text escaping: \\ first, then { and } (so inserted backslashes are not
  escaped twice)
- Event order equals phrase/word order (start times never decrease for
  time-ordered input)
- No phrases → None ("nothing to caption"), not an empty document
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from clipline import config
from clipline.core.ir import Phrase, ResolvedWord
from clipline.formatters.presets import EventMode, StyleConfig

logger = logging.getLogger(__name__)

STYLE_FORMAT = (
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, "
    "OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, "
    "ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, "
    "MarginL, MarginR, MarginV, Encoding"
)

EVENT_FORMAT = "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"

_ROUNDING_EPSILON = 1e-6


def format_ass_timestamp(seconds: float) -> str:
    """Convert seconds to an ASS timestamp (H:MM:SS.CC).

    >>> format_ass_timestamp(3725.999)
    '1:02:06.00'
    """
    seconds = max(0.0, seconds)
    # 2.675 is stored as 2.67499..., so nudge before rounding half-up.
    total_centis = int(math.floor(seconds * 100 + 0.5 + _ROUNDING_EPSILON))
    total, centis = divmod(total_centis, 100)

    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return "{:d}:{:02d}:{:02d}.{:02d}".format(hours, minutes, secs, centis)


def escape_ass_text(text: str) -> str:
    """Escape characters that ASS treats as override-block syntax."""
    text = text.replace("\\", "\\\\")
    text = text.replace("{", "\\{")
    text = text.replace("}", "\\}")
    return text


def _color_override(color: str) -> str:
    return "{\\1c" + color + "&}"


def _highlighted_text(words: List[ResolvedWord], active: int, style: StyleConfig) -> str:
    parts = []
    for i, word in enumerate(words):
        escaped = escape_ass_text(word.word)
        if i == active:
            escaped = (
                _color_override(style.highlight_color)
                + escaped
                + _color_override(style.primary_color)
            )
        parts.append(escaped)
    return " ".join(parts)


class _ClipClock:
    """Maps absolute transcript times onto the clip's own timeline."""

    def __init__(self, clip_start: float, clip_duration: Optional[float]) -> None:
        self.clip_start = clip_start
        self.clip_duration = clip_duration

    def stamp(self, seconds: float) -> str:
        t = max(0.0, seconds - self.clip_start)
        if self.clip_duration is not None:
            t = min(t, max(0.0, self.clip_duration))
        return format_ass_timestamp(t)


def _dialogue(start: str, end: str, text: str) -> str:
    return "Dialogue: 0,{},{},Default,,0,0,0,,{}".format(start, end, text)


def build_script_info(style: StyleConfig) -> List[str]:
    lines = ["[Script Info]"]
    if style.title:
        lines.append("Title: {}".format(style.title))
    lines.extend([
        "ScriptType: v4.00+",
        "PlayResX: {}".format(config.CANVAS_WIDTH),
        "PlayResY: {}".format(config.CANVAS_HEIGHT),
        "WrapStyle: 0",
        "ScaledBorderAndShadow: yes",
    ])
    return lines


def build_style_line(style: StyleConfig) -> str:
    fields = [
        "Default",
        style.font_name,
        str(style.font_size),
        style.primary_color,
        style.secondary_color,
        style.outline_color,
        style.back_color,
        "-1" if style.bold else "0",
        "0", "0", "0",          # italic, underline, strikeout
        "100", "100", "0", "0",  # scale x/y, spacing, angle
        "1",                     # border style: outline + shadow
        str(style.outline_width),
        "{:g}".format(style.shadow),
        str(style.alignment),
        str(style.margin_h),
        str(style.margin_h),
        str(style.margin_v),
        "1",
    ]
    return "Style: " + ",".join(fields)


def build_events(
    phrases: List[Phrase],
    style: StyleConfig,
    mode: EventMode,
    clock: _ClipClock,
) -> List[str]:
    events: List[str] = []

    for phrase in phrases:
        if mode is EventMode.WHOLE_PHRASE:
            events.append(_dialogue(
                clock.stamp(phrase.start),
                clock.stamp(phrase.end),
                escape_ass_text(phrase.text.upper()),
            ))
            continue

        words = phrase.words
        for i, word in enumerate(words):
            end = words[i + 1].start if i + 1 < len(words) else phrase.end
            events.append(_dialogue(
                clock.stamp(word.start),
                clock.stamp(end),
                _highlighted_text(words, i, style),
            ))

    return events


def emit_ass(
    phrases: List[Phrase],
    style: StyleConfig,
    mode: EventMode,
    clip_start: float = 0.0,
    clip_duration: Optional[float] = None,
) -> Optional[str]:
    """Render phrases into a complete ASS document.

    Args:
        phrases: Display phrases in time order.
        style: Style values for the Default style and highlight colour.
        mode: Event generation mode.
        clip_start: Absolute time (seconds) that maps to 0:00:00.00.
        clip_duration: Upper clamp for clip-relative times; None disables it.

    Returns:
        The ASS document, or None when there are no phrases.
    """
    if not phrases:
        logger.info("No phrases to caption")
        return None

    clock = _ClipClock(clip_start, clip_duration)
    lines = build_script_info(style)
    lines.append("")
    lines.append("[V4+ Styles]")
    lines.append(STYLE_FORMAT)
    lines.append(build_style_line(style))
    lines.append("")
    lines.append("[Events]")
    lines.append(EVENT_FORMAT)
    lines.extend(build_events(phrases, style, mode, clock))

    return "\n".join(lines) + "\n"
