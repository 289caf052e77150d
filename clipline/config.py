"""Configuration constants and .env loading.

WHY: Phrase-breaking thresholds, the clip duration cap, pause padding and
the highlight window are tuning knobs, not logic. Keeping them as named
module-level values (instead of literals scattered through the algorithms)
makes them easy to find, easy to override per deployment, and lets tests
sweep them through the rule dataclasses.

HOW: python-dotenv loads the .env file on import. Each constant reads an
optional CLIPLINE_* environment variable and falls back to the documented
default. The rule dataclasses in the segmenter and clip modules take their
defaults from here.

RULES:
- Defaults match the production caption and clip behaviour
- Malformed environment values raise ValueError naming the variable
- Canvas size is fixed (portrait video) and not overridable
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}".format(name, raw)
        ) from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(
            "{} must be a number, got {!r}".format(name, raw)
        ) from None


# ---------------------------------------------------------------------------
# Adaptive phrase segmentation
# ---------------------------------------------------------------------------

PHRASE_MAX_WORDS = _env_int("CLIPLINE_PHRASE_MAX_WORDS", 10)
"""Hard cap on words per highlighted phrase."""

PHRASE_TARGET_WORDS = _env_int("CLIPLINE_PHRASE_TARGET_WORDS", 6)
"""Soft target: a phrase closes once it reaches this many words."""

PHRASE_MIN_WORDS_FOR_COMMA_BREAK = _env_int("CLIPLINE_PHRASE_MIN_WORDS_FOR_COMMA_BREAK", 3)
"""A trailing , ; or : only closes a phrase holding at least this many words."""

PHRASE_SILENCE_THRESHOLD_S = _env_float("CLIPLINE_PHRASE_SILENCE_THRESHOLD", 0.7)
"""A gap longer than this (seconds) between two words closes the phrase."""

# ---------------------------------------------------------------------------
# Fixed-chunk segmentation
# ---------------------------------------------------------------------------

CHUNK_GROUP_SIZE = _env_int("CLIPLINE_CHUNK_GROUP_SIZE", 4)

# ---------------------------------------------------------------------------
# Clip intervals
# ---------------------------------------------------------------------------

MAX_CLIP_DURATION_S = _env_float("CLIPLINE_MAX_CLIP_DURATION", 90.0)
"""Longest allowed clip, measured from first segment start to last segment end."""

PAUSE_CAP_S = _env_float("CLIPLINE_PAUSE_CAP", 1.0)
"""Upper bound for the silence padding added before and after a clip."""

HIGHLIGHT_WINDOW_S = _env_float("CLIPLINE_HIGHLIGHT_WINDOW", 60.0)
"""Longest span a click-to-create highlight window may cover."""

ROW_GAP_THRESHOLD_S = _env_float("CLIPLINE_ROW_GAP_THRESHOLD", 2.0)
"""Pauses longer than this get their own row in transcript listings."""

# ---------------------------------------------------------------------------
# Subtitle canvas (portrait 9:16)
# ---------------------------------------------------------------------------

CANVAS_WIDTH = 1080
CANVAS_HEIGHT = 1920
