"""Caption formatter registry.

WHY: The CLI and the caption pipeline need a single lookup to find a
caption style by name. Adding a style = one formatter class + one line here.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["karaoke"](options)``.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are BaseFormatter subclasses accepting an optional options map
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clipline.formatters.ass_formatters import KaraokeAssFormatter, UppercaseAssFormatter

if TYPE_CHECKING:
    from clipline.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "karaoke": KaraokeAssFormatter,
    "uppercase": UppercaseAssFormatter,
}
