"""clipline — transcript timeline engine for short-form video clips.

WHY: Word-level speech recognition output (WhisperX-style segments with
optional per-word timing) has to become two things before a long recording
can be cut into short portrait clips: time-coded caption markup, and a
consistent set of non-overlapping clip intervals. Both are pure computation
over the transcript, so they live here, apart from the transcoding, storage
and publishing machinery around them.

HOW: Four layers, each independently testable — core (IR, loading, word
timestamp resolution), segmenters (words → display phrases), formatters
(phrases → ASS subtitle documents), and clips (interval validation, pause
padding, highlight windows, transcript rows).

RULES:
- The engine performs no I/O; only the CLI reads and writes files
- All entities are plain dataclasses passed in and returned
- Heuristic constants live in config.py and can be overridden via .env
"""

__version__ = "0.1.0"
