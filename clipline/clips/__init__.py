"""Clip interval management over a transcript's segments.

WHY: Clips are stored as segment index ranges. Everything that decides
whether a range is acceptable, how much silence pads it, and how far a
new selection may extend is pure computation over segment times, kept
here apart from storage and rendering.

HOW: intervals.py validates and adjusts proposed edits and derives padded
clip timing, highlight.py precomputes selection windows, rows.py lays the
transcript out with pause markers.

RULES:
- Functions return results; rejections are values, not exceptions
- Nothing here stores or mutates clips
"""
