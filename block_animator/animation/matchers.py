"""Pure predicates over CSS-ish strings and numbers.

Every matcher returns ``False`` for input of the wrong type instead of raising.
"""
from __future__ import annotations

import math
import re
from typing import Any, Optional

from block_animator.animation.rules import (
    COLOR_KEYWORDS,
    CSS_UNITS,
    EASES,
    SELECTOR_DENYLIST,
    SELECTOR_MAX_LENGTH,
    TIMELINE_POSITIONS,
)

_UNITS = "|".join(re.escape(u) for u in sorted(CSS_UNITS, key=len, reverse=True))
_ALPHA = r"(?:0(?:\.\d+)?|1(?:\.0+)?|\.\d+)"

CSS_UNIT_RE = re.compile(rf"(-?\d+(?:\.\d+)?)({_UNITS})")
POSITIVE_CSS_UNIT_RE = re.compile(rf"(\d+(?:\.\d+)?)({_UNITS})")
HEX_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
RGB_COLOR_RE = re.compile(rf"rgba?\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*(?:,\s*{_ALPHA}\s*)?\)")
HSL_COLOR_RE = re.compile(rf"hsla?\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*(?:,\s*{_ALPHA}\s*)?\)")
NUMERIC_STRING_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")
BLOCK_NAME_RE = re.compile(r"[a-z][a-z0-9-]*/[a-z][a-z0-9-]*")
CUSTOM_POSITION_RE = re.compile(r"(?:[+-]=)?\d+(?:\.\d+)?")
SELECTOR_DENYLIST_RES = tuple(re.compile(p, re.IGNORECASE) for p in SELECTOR_DENYLIST)
SELECTOR_FORBIDDEN_CHARS_RE = re.compile(r"[^\w\s\-.#\[\]=:,()'>+~]")


def is_numeric(value: Any) -> bool:
    """True for finite ints/floats and numeric strings. Booleans are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        try:
            return math.isfinite(value)
        except OverflowError:
            return False
    if isinstance(value, str) and NUMERIC_STRING_RE.fullmatch(value):
        return math.isfinite(float(value))
    return False


def to_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float when ``is_numeric`` accepts it, else None."""
    if not is_numeric(value):
        return None
    return float(value)


def is_css_unit(value: Any) -> bool:
    return isinstance(value, str) and CSS_UNIT_RE.fullmatch(value) is not None


def is_positive_css_unit(value: Any) -> bool:
    return isinstance(value, str) and POSITIVE_CSS_UNIT_RE.fullmatch(value) is not None


def is_hex_color(value: Any) -> bool:
    return isinstance(value, str) and HEX_COLOR_RE.fullmatch(value) is not None


def is_rgb_color(value: Any) -> bool:
    return isinstance(value, str) and RGB_COLOR_RE.fullmatch(value) is not None


def is_hsl_color(value: Any) -> bool:
    return isinstance(value, str) and HSL_COLOR_RE.fullmatch(value) is not None


def is_color_keyword(value: Any) -> bool:
    return isinstance(value, str) and value.lower() in COLOR_KEYWORDS


def is_css_color(value: Any) -> bool:
    return is_hex_color(value) or is_rgb_color(value) or is_hsl_color(value) or is_color_keyword(value)


def is_ease(value: Any) -> bool:
    return isinstance(value, str) and value in EASES


def validate_selector(selector: Any) -> bool:
    """Check a CSS selector against the XSS denylist and the length cap.

    An empty selector is valid: it means "animate the block itself".
    """
    if not isinstance(selector, str):
        return False
    if not selector.strip():
        return True
    if len(selector) > SELECTOR_MAX_LENGTH:
        return False
    return not any(pattern.search(selector) for pattern in SELECTOR_DENYLIST_RES)


def sanitize_selector(selector: Any) -> str:
    """Return a selector safe to hand to a DOM query, or ``""``."""
    if not isinstance(selector, str):
        return ""
    selector = selector.strip()
    if not selector or not validate_selector(selector):
        return ""
    selector = SELECTOR_FORBIDDEN_CHARS_RE.sub("", selector)
    return selector[:SELECTOR_MAX_LENGTH].strip()


def is_block_name(value: Any) -> bool:
    return isinstance(value, str) and BLOCK_NAME_RE.fullmatch(value) is not None


def is_timeline_position(value: Any) -> bool:
    return isinstance(value, str) and value in TIMELINE_POSITIONS


def is_custom_position(value: Any) -> bool:
    return isinstance(value, str) and CUSTOM_POSITION_RE.fullmatch(value) is not None
