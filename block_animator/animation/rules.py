"""Animation rules table.

Every allow-list, numeric range and pattern used by the matchers, the
sanitizer, the validator, the value object and the strategies lives here.
The editor reads the same table through ``editor_rules()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class NumericRange:
    """Closed numeric interval with a default."""
    minimum: float
    maximum: float
    default: float
    integer: bool = False

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))

    def describe(self) -> str:
        low = _fmt(self.minimum)
        high = _fmt(self.maximum)
        return f"Must be between {low} and {high}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.minimum,
            "max": self.maximum,
            "default": self.default,
            "integer": self.integer,
        }


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


ANIMATION_TYPES: Tuple[str, ...] = ("to", "from", "fromTo", "set")
TRIGGERS: Tuple[str, ...] = ("pageload", "scroll", "click", "hover")

BASE_PROPERTIES: Tuple[str, ...] = (
    "x",
    "y",
    "rotation",
    "scale",
    "opacity",
    "backgroundColor",
    "color",
    "width",
    "height",
)
SET_ONLY_PROPERTIES: Tuple[str, ...] = ("display", "visibility", "zIndex")
ALL_PROPERTIES: Tuple[str, ...] = BASE_PROPERTIES + SET_ONLY_PROPERTIES

MOVEMENT_PROPERTIES = frozenset({"x", "y"})
COLOR_PROPERTIES = frozenset({"backgroundColor", "color"})
SIZE_PROPERTIES = frozenset({"width", "height"})

_EASE_FAMILIES = ("power1", "power2", "power3", "back", "elastic", "bounce")
EASES: Tuple[str, ...] = ("none", "linear") + tuple(
    f"{family}.{variant}" for family in _EASE_FAMILIES for variant in ("in", "out", "inOut")
)

CSS_UNITS: Tuple[str, ...] = (
    "px", "em", "rem", "%", "vw", "vh", "vmin", "vmax", "ex", "ch", "pt", "pc", "in", "cm", "mm",
)

COLOR_KEYWORDS = frozenset({
    "transparent",
    "inherit",
    "initial",
    "unset",
    "currentcolor",
    "black",
    "white",
    "red",
    "green",
    "blue",
    "yellow",
    "cyan",
    "magenta",
})

DISPLAY_VALUES: Tuple[str, ...] = (
    "block",
    "inline",
    "inline-block",
    "flex",
    "inline-flex",
    "grid",
    "inline-grid",
    "table",
    "table-cell",
    "none",
)
VISIBILITY_VALUES: Tuple[str, ...] = ("visible", "hidden", "collapse")

TIMELINE_POSITIONS: Tuple[str, ...] = ("start", "end", "+=0.5", "-=0.5", "custom")

ROTATION = NumericRange(-360, 360, 0)
SCALE = NumericRange(0.1, 10, 1)
OPACITY = NumericRange(0, 1, 1)
Z_INDEX = NumericRange(-999, 999, 0, integer=True)

DURATION = NumericRange(0.1, 10, 0.5)
DELAY = NumericRange(0, 5, 0)
REPEAT = NumericRange(0, 100, 0, integer=True)

PROPERTY_RANGES: Dict[str, NumericRange] = {
    "rotation": ROTATION,
    "scale": SCALE,
    "opacity": OPACITY,
    "zIndex": Z_INDEX,
}

SELECTOR_MAX_LENGTH = 200
SELECTOR_DENYLIST: Tuple[str, ...] = (
    r"javascript:",
    r"data:",
    r"vbscript:",
    r"on\w+\s*=",
    r"<script",
    r"</script",
)

DEFAULT_TYPE = "to"
DEFAULT_TRIGGER = "pageload"
DEFAULT_EASE = "power1.out"
DEFAULT_TIMELINE_POSITION = "start"

PROPERTY_FALLBACKS: Dict[str, Any] = {
    "x": "0px",
    "y": "0px",
    "rotation": ROTATION.default,
    "scale": SCALE.default,
    "opacity": OPACITY.default,
    "backgroundColor": "transparent",
    "color": "transparent",
    "width": "auto",
    "height": "auto",
    "display": "block",
    "visibility": "visible",
    "zIndex": int(Z_INDEX.default),
}


def allowed_properties(animation_type: str) -> Tuple[str, ...]:
    """Property keys accepted for an animation type."""
    if animation_type == "set":
        return ALL_PROPERTIES
    return BASE_PROPERTIES


def default_timing() -> Dict[str, Any]:
    return {
        "duration": DURATION.default,
        "delay": DELAY.default,
        "repeat": int(REPEAT.default),
        "yoyo": False,
        "ease": DEFAULT_EASE,
    }


def editor_rules() -> Dict[str, Any]:
    """Return the rules table in a JSON-serialisable form for editor controls."""
    return {
        "types": list(ANIMATION_TYPES),
        "triggers": list(TRIGGERS),
        "properties": list(BASE_PROPERTIES),
        "setOnlyProperties": list(SET_ONLY_PROPERTIES),
        "eases": list(EASES),
        "cssUnits": list(CSS_UNITS),
        "colorKeywords": sorted(COLOR_KEYWORDS),
        "displayValues": list(DISPLAY_VALUES),
        "visibilityValues": list(VISIBILITY_VALUES),
        "timelinePositions": list(TIMELINE_POSITIONS),
        "ranges": {
            "rotation": ROTATION.to_dict(),
            "scale": SCALE.to_dict(),
            "opacity": OPACITY.to_dict(),
            "zIndex": Z_INDEX.to_dict(),
            "duration": DURATION.to_dict(),
            "delay": DELAY.to_dict(),
            "repeat": REPEAT.to_dict(),
        },
        "selectorMaxLength": SELECTOR_MAX_LENGTH,
        "defaults": {
            "type": DEFAULT_TYPE,
            "trigger": DEFAULT_TRIGGER,
            "timing": default_timing(),
            "timelinePosition": DEFAULT_TIMELINE_POSITION,
        },
    }
