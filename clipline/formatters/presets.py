"""Caption style presets and style option parsing.

WHY: The two caption styles look very different on screen (large black
text with an amber active word versus smaller white uppercase chunks), and
callers tweak a handful of values (size, outline, margins, colours)
without restating the whole ASS style line. Centralizing the defaults as
frozen presets keeps the emitter free of magic numbers.

HOW: StyleConfig is a frozen dataclass holding every field of the ASS
"Default" style plus the highlight colour. PRESETS maps each EventMode to
its default StyleConfig. StyleConfig.from_options() overlays a
recognized-options map (camelCase keys, as sent by the caller) onto the
preset for a mode.

RULES:
- Recognized option keys: fontSize, outlineWidth, marginH, marginV,
  primaryColor, highlightColor; all others are ignored
- Colours are ASS &HAABBGGRR values; a trailing "&" is accepted and dropped
- Integer options must be whole numbers
- Presets are frozen — from_options() returns a new instance
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_COLOR_RE = re.compile(r"^&H[0-9A-Fa-f]{6,8}&?$")


class EventMode(enum.Enum):
    """How phrases become dialogue events."""

    PER_WORD_HIGHLIGHT = "per_word_highlight"
    WHOLE_PHRASE = "whole_phrase"


def _parse_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("Style option {} must be an integer, got {!r}".format(key, value))
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("Style option {} must be an integer, got {!r}".format(key, value))
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(
            "Style option {} must be an integer, got {!r}".format(key, value)
        ) from None


def _parse_color(key: str, value: Any) -> str:
    if not isinstance(value, str) or not _COLOR_RE.match(value.strip()):
        raise ValueError(
            "Style option {} must be an ASS colour like &H00FFFFFF, got {!r}".format(key, value)
        )
    return value.strip().rstrip("&").upper()


# option key -> (StyleConfig field, parser)
_OPTION_FIELDS: Dict[str, Tuple[str, Callable[[str, Any], Any]]] = {
    "fontSize": ("font_size", _parse_int),
    "outlineWidth": ("outline_width", _parse_int),
    "marginH": ("margin_h", _parse_int),
    "marginV": ("margin_v", _parse_int),
    "primaryColor": ("primary_color", _parse_color),
    "highlightColor": ("highlight_color", _parse_color),
}


@dataclass(frozen=True)
class StyleConfig:
    """All values that go into the ASS Default style."""

    font_size: int
    outline_width: int
    margin_h: int
    margin_v: int
    primary_color: str
    highlight_color: str
    secondary_color: str = "&H000000FF"
    outline_color: str = "&H00000000"
    back_color: str = "&H00000000"
    font_name: str = "Montserrat"
    bold: bool = True
    shadow: float = 0.0
    alignment: int = 2
    title: Optional[str] = None

    @classmethod
    def from_options(
        cls,
        options: Optional[Mapping[str, Any]],
        mode: EventMode,
    ) -> "StyleConfig":
        """Build a style for ``mode`` from a recognized-options map.

        Raises:
            ValueError: If a recognized option has an invalid value.
        """
        base = PRESETS[mode]
        if not options:
            return base

        changes: Dict[str, Any] = {}
        for key, value in options.items():
            if key not in _OPTION_FIELDS:
                logger.debug("Ignoring unknown style option %r", key)
                continue
            field_name, parse = _OPTION_FIELDS[key]
            changes[field_name] = parse(key, value)

        return dataclasses.replace(base, **changes)


STYLE_HIGHLIGHT = StyleConfig(
    font_size=120,
    outline_width=10,
    margin_h=80,
    margin_v=350,
    primary_color="&H00000000",
    highlight_color="&H0000E5FF",
    outline_color="&H00FFFFFF",
    back_color="&H00000000",
    shadow=0.0,
    title="Clip Captions",
)

STYLE_UPPERCASE = StyleConfig(
    font_size=72,
    outline_width=4,
    margin_h=60,
    margin_v=250,
    primary_color="&H00FFFFFF",
    highlight_color="&H0000E5FF",
    outline_color="&H00000000",
    back_color="&H80000000",
    shadow=1.5,
)

PRESETS: Dict[EventMode, StyleConfig] = {
    EventMode.PER_WORD_HIGHLIGHT: STYLE_HIGHLIGHT,
    EventMode.WHOLE_PHRASE: STYLE_UPPERCASE,
}
