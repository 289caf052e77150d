"""Transcript loading: validate a recognizer JSON document and build the IR.

WHY: Transcripts are stored as the raw WhisperX JSON document. The engine
must not crash deep inside phrase segmentation because a segment lacks its
start time, yet single garbled word entries are normal recognizer noise
and should simply be ignored.

HOW: The document is validated against TRANSCRIPT_SCHEMA with jsonschema,
which catches structural problems (missing segment times, wrong types) up
front. Word entries are then converted one by one; an entry without usable
text becomes an empty WordSpan (logged at debug level), so the segment
still counts as word-timed and the raw entry order is preserved.

RULES:
- Accepts {"segments": [...]} or a bare list of segments
- Segment "start" and "end" are required numbers; "text" defaults to ""
- Word "start"/"end" may be missing or null (resolved later)
- Word confidence is read from "score" (WhisperX) or "confidence"
- Word entries without a string "word" are kept with empty text and
  skipped by the resolver, never fatal
- Segment "end" must not be before "start"
- Structural errors raise TranscriptError
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import jsonschema

from clipline.core.ir import Segment, Transcript, WordSpan

logger = logging.getLogger(__name__)

_NUMBER_OR_NULL = {"type": ["number", "null"]}

TRANSCRIPT_SCHEMA: dict = {
    "type": "object",
    "required": ["segments"],
    "properties": {
        "segments": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["start", "end"],
                "properties": {
                    "start": {"type": "number"},
                    "end": {"type": "number"},
                    "text": {"type": "string"},
                    "words": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "start": _NUMBER_OR_NULL,
                                "end": _NUMBER_OR_NULL,
                                "score": _NUMBER_OR_NULL,
                                "confidence": _NUMBER_OR_NULL,
                            },
                        },
                    },
                },
            },
        },
        "duration": _NUMBER_OR_NULL,
    },
}


class TranscriptError(ValueError):
    """Raised when a transcript document is structurally invalid."""


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _load_word(entry: dict, segment_index: int) -> WordSpan:
    text = entry.get("word")
    if not isinstance(text, str):
        logger.debug("Word without text in segment %d: %r", segment_index, entry)
        text = ""
    confidence = entry.get("score", entry.get("confidence"))
    return WordSpan(
        word=text,
        start=_optional_float(entry.get("start")),
        end=_optional_float(entry.get("end")),
        confidence=_optional_float(confidence),
    )


def load_transcript(data: Any, duration_s: Optional[float] = None) -> Transcript:
    """Validate a transcript document and convert it to a Transcript IR.

    Args:
        data: Parsed JSON — a dict with a "segments" list, or the list itself.
        duration_s: Source media duration. Overrides a "duration" key in
                    the document when given.

    Returns:
        Transcript with one Segment per input segment, in input order.

    Raises:
        TranscriptError: If the document does not match TRANSCRIPT_SCHEMA,
                         or a segment ends before it starts.
    """
    if isinstance(data, list):
        data = {"segments": data}

    try:
        jsonschema.validate(instance=data, schema=TRANSCRIPT_SCHEMA)
    except jsonschema.ValidationError as e:
        path = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise TranscriptError(
            "Invalid transcript at {}: {}".format(path, e.message)
        ) from e

    segments: List[Segment] = []
    for i, raw in enumerate(data["segments"]):
        start, end = float(raw["start"]), float(raw["end"])
        if end < start:
            raise TranscriptError(
                "Invalid transcript at segments/{}: end {} is before start {}".format(i, end, start)
            )
        words = [_load_word(entry, i) for entry in raw.get("words", [])]
        segments.append(Segment(
            start=start,
            end=end,
            text=raw.get("text", ""),
            words=words,
        ))

    if duration_s is None:
        duration_s = _optional_float(data.get("duration"))

    return Transcript(segments=segments, duration_s=duration_s)
