"""Abstract base formatter and output container.

WHY: The CLI and library callers should be able to produce any caption
style from the same resolved word list without knowing which segmenter
or event mode the style uses. This base class fixes that interface.

HOW: BaseFormatter is an ABC with a ``name`` property and a ``format()``
method taking resolved words plus the clip timeline. FormatterOutput
bundles a file suffix with its content and MIME type.

RULES:
- ``format()`` returns None when there is nothing to caption
- ``suffix`` starts with a hyphen, e.g. ``"-captions.ass"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from clipline.core.ir import ResolvedWord


@dataclass
class FormatterOutput:
    """One caption file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-captions.ass"`` → ``"sermon-captions.ass"``.
        content: The file content.
        media_type: MIME type for the content.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all caption formatters.

    To add a new caption style:
    1. Create a new file in formatters/ (or subclass AssFormatter)
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable style name, e.g. 'Highlighted Words'."""

    @abstractmethod
    def format(
        self,
        words: List[ResolvedWord],
        clip_start: float = 0.0,
        clip_duration: Optional[float] = None,
    ) -> Optional[FormatterOutput]:
        """Convert resolved words into a caption file.

        Args:
            words: Resolved words of the clip, in time order, with absolute
                   transcript timestamps.
            clip_start: Absolute time that becomes the caption file's zero.
            clip_duration: Clip length; later timestamps are clamped to it.

        Returns:
            A FormatterOutput, or None when ``words`` is empty.
        """
