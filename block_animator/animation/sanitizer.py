"""Permissive per-property sanitizer.

Used right before a configuration reaches the animation engine. It never
rejects: malformed values are replaced with the documented fallback from
``rules.PROPERTY_FALLBACKS``. Strict checking is ``validator.AnimationValidator``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from block_animator.animation import matchers
from block_animator.animation.rules import (
    ALL_PROPERTIES,
    DEFAULT_EASE,
    DELAY,
    DISPLAY_VALUES,
    DURATION,
    NumericRange,
    OPACITY,
    PROPERTY_FALLBACKS,
    REPEAT,
    ROTATION,
    SCALE,
    VISIBILITY_VALUES,
    Z_INDEX,
)


def format_number(value: float) -> str:
    """Render a number for a CSS value: ``10.0 -> "10"``, ``10.5 -> "10.5"``."""
    text = f"{float(value):.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def clamp_number(value: Any, bounds: NumericRange) -> float:
    number = matchers.to_number(value)
    if number is None:
        return float(bounds.default)
    return float(bounds.clamp(number))


def sanitize_movement(value: Any) -> str:
    if matchers.is_css_unit(value):
        return value
    number = matchers.to_number(value)
    if number is not None:
        return f"{format_number(number)}px"
    return PROPERTY_FALLBACKS["x"]


def sanitize_size(value: Any) -> str:
    if matchers.is_positive_css_unit(value):
        return value
    number = matchers.to_number(value)
    if number is not None:
        return f"{format_number(max(0.0, number))}px"
    return PROPERTY_FALLBACKS["width"]


def sanitize_color(value: Any) -> str:
    if matchers.is_css_color(value):
        return value
    return PROPERTY_FALLBACKS["color"]


def sanitize_display(value: Any) -> str:
    if isinstance(value, str) and value in DISPLAY_VALUES:
        return value
    return PROPERTY_FALLBACKS["display"]


def sanitize_visibility(value: Any) -> str:
    if isinstance(value, str) and value in VISIBILITY_VALUES:
        return value
    return PROPERTY_FALLBACKS["visibility"]


def sanitize_z_index(value: Any) -> int:
    return int(clamp_number(value, Z_INDEX))


_SANITIZERS: Dict[str, Callable[[Any], Any]] = {
    "x": sanitize_movement,
    "y": sanitize_movement,
    "rotation": lambda v: clamp_number(v, ROTATION),
    "scale": lambda v: clamp_number(v, SCALE),
    "opacity": lambda v: clamp_number(v, OPACITY),
    "backgroundColor": sanitize_color,
    "color": sanitize_color,
    "width": sanitize_size,
    "height": sanitize_size,
    "display": sanitize_display,
    "visibility": sanitize_visibility,
    "zIndex": sanitize_z_index,
}


def sanitize(key: str, value: Any) -> Any:
    """Return a safe value for ``key``. Unknown keys yield None."""
    sanitizer = _SANITIZERS.get(key)
    if sanitizer is None:
        return None
    return sanitizer(value)


def sanitize_properties(
    properties: Any,
    allowed: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """Sanitize a properties map, dropping unknown keys and cleared values."""
    if not isinstance(properties, Mapping):
        return {}
    allowed_keys = set(allowed) if allowed is not None else set(ALL_PROPERTIES)
    result: Dict[str, Any] = {}
    for key, value in properties.items():
        if key not in allowed_keys or key not in _SANITIZERS:
            continue
        if value is None or value == "":
            continue
        result[key] = sanitize(key, value)
    return result


def sanitize_timing(timing: Any) -> Dict[str, Any]:
    """Clamp a timing map to the authoritative bounds, filling defaults."""
    if not isinstance(timing, dict):
        timing = {}
    yoyo = timing.get("yoyo")
    ease = timing.get("ease")
    return {
        "duration": clamp_number(timing.get("duration"), DURATION),
        "delay": clamp_number(timing.get("delay"), DELAY),
        "repeat": int(clamp_number(timing.get("repeat"), REPEAT)),
        "yoyo": yoyo if isinstance(yoyo, bool) else False,
        "ease": ease if matchers.is_ease(ease) else DEFAULT_EASE,
    }
