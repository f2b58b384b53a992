"""Strict animation configuration validator.

Collects every problem instead of failing fast so the editor can show all of
them at once. Messages are field-qualified: ``"properties.x: Must be ..."``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from block_animator.animation import matchers
from block_animator.animation.rules import (
    ANIMATION_TYPES,
    BASE_PROPERTIES,
    COLOR_PROPERTIES,
    DELAY,
    DISPLAY_VALUES,
    DURATION,
    EASES,
    MOVEMENT_PROPERTIES,
    PROPERTY_RANGES,
    REPEAT,
    SELECTOR_MAX_LENGTH,
    SET_ONLY_PROPERTIES,
    SIZE_PROPERTIES,
    TRIGGERS,
    VISIBILITY_VALUES,
    NumericRange,
    allowed_properties,
)
from block_animator.exceptions import AnimationValidationError


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}


def _missing(data: Mapping[str, Any], key: str) -> bool:
    return data.get(key) is None


def _is_integral(value: Any) -> bool:
    number = matchers.to_number(value)
    return number is not None and number.is_integer()


class AnimationValidator:
    def __init__(self) -> None:
        self._errors: List[str] = []

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    def validate(self, raw: Any) -> ValidationResult:
        self._errors = []
        data: Mapping[str, Any]
        if isinstance(raw, Mapping):
            data = raw
        else:
            self._add("config", "Must be an object")
            data = {}

        self._validate_enabled(data)
        self._validate_type(data)
        self._validate_trigger(data)
        self._validate_properties(data)
        self._validate_timing(data)
        self._validate_selector(data)

        return ValidationResult(valid=not self._errors, errors=list(self._errors))

    def validate_or_raise(self, raw: Any) -> None:
        result = self.validate(raw)
        if not result.valid:
            raise AnimationValidationError.from_errors(result.errors)

    def _add(self, field_name: str, message: str) -> None:
        self._errors.append(f"{field_name}: {message}")

    def _validate_enabled(self, data: Mapping[str, Any]) -> None:
        if _missing(data, "enabled"):
            self._add("enabled", "Field is required")
        elif not isinstance(data["enabled"], bool):
            self._add("enabled", "Must be a boolean value")

    def _validate_choice(self, data: Mapping[str, Any], key: str, label: str, allowed: tuple) -> None:
        if _missing(data, key):
            self._add(key, f"{label} is required")
            return
        value = data[key]
        if not isinstance(value, str):
            self._add(key, "Must be a string")
        elif value not in allowed:
            self._add(key, f"Invalid {key}. Allowed: {', '.join(allowed)}")

    def _validate_type(self, data: Mapping[str, Any]) -> None:
        self._validate_choice(data, "type", "Animation type", ANIMATION_TYPES)

    def _validate_trigger(self, data: Mapping[str, Any]) -> None:
        self._validate_choice(data, "trigger", "Trigger type", TRIGGERS)

    def _validate_properties(self, data: Mapping[str, Any]) -> None:
        if _missing(data, "properties"):
            self._add("properties", "Properties are required")
            return
        properties = data["properties"]
        if not isinstance(properties, Mapping):
            self._add("properties", "Must be an object")
            return
        if data.get("enabled") is True and not properties:
            self._add("properties", "At least one property is required when animation is enabled")
            return

        animation_type = data.get("type")
        allowed = allowed_properties(animation_type) if isinstance(animation_type, str) else BASE_PROPERTIES
        for key, value in properties.items():
            self._validate_property(str(key), value, allowed)

    def _validate_property(self, key: str, value: Any, allowed: tuple) -> None:
        field_name = f"properties.{key}"
        if key not in allowed:
            if key in SET_ONLY_PROPERTIES:
                self._add(field_name, "Only allowed for set animations")
            else:
                self._add(field_name, f"Invalid property. Allowed: {', '.join(allowed)}")
            return

        if key in MOVEMENT_PROPERTIES:
            if not (matchers.is_numeric(value) or matchers.is_css_unit(value)):
                self._add(field_name, "Must be a number or valid CSS unit")
        elif key in COLOR_PROPERTIES:
            if not isinstance(value, str):
                self._add(field_name, "Must be a string")
            elif not matchers.is_css_color(value):
                self._add(field_name, "Must be a valid color (hex, rgb, hsl, or keyword)")
        elif key in SIZE_PROPERTIES:
            number = matchers.to_number(value)
            if number is not None:
                if number < 0:
                    self._add(field_name, "Must be a positive number or valid CSS unit")
            elif not matchers.is_positive_css_unit(value):
                self._add(field_name, "Must be a positive number or valid CSS unit")
        elif key == "display":
            if value not in DISPLAY_VALUES:
                self._add(field_name, f"Invalid display value. Allowed: {', '.join(DISPLAY_VALUES)}")
        elif key == "visibility":
            if value not in VISIBILITY_VALUES:
                self._add(field_name, f"Invalid visibility value. Allowed: {', '.join(VISIBILITY_VALUES)}")
        elif key in PROPERTY_RANGES:
            self._validate_number(field_name, value, PROPERTY_RANGES[key])

    def _validate_number(self, field_name: str, value: Any, bounds: NumericRange, unit: str = "") -> None:
        number = matchers.to_number(value)
        if number is None:
            self._add(field_name, "Must be an integer" if bounds.integer else "Must be a number")
            return
        if bounds.integer and not number.is_integer():
            self._add(field_name, "Must be an integer")
            return
        if not bounds.contains(number):
            self._add(field_name, bounds.describe() + unit)

    def _validate_timing(self, data: Mapping[str, Any]) -> None:
        if _missing(data, "timing"):
            self._add("timing", "Timing configuration is required")
            return
        timing = data["timing"]
        if not isinstance(timing, Mapping):
            self._add("timing", "Must be an object")
            return

        if _missing(timing, "duration"):
            self._add("timing.duration", "Duration is required")
        else:
            self._validate_number("timing.duration", timing["duration"], DURATION, " seconds")

        if not _missing(timing, "delay"):
            self._validate_number("timing.delay", timing["delay"], DELAY, " seconds")

        if not _missing(timing, "repeat"):
            self._validate_number("timing.repeat", timing["repeat"], REPEAT)

        if not _missing(timing, "yoyo") and not isinstance(timing["yoyo"], bool):
            self._add("timing.yoyo", "Must be a boolean")

        if _missing(timing, "ease"):
            self._add("timing.ease", "Ease function is required")
        elif not isinstance(timing["ease"], str):
            self._add("timing.ease", "Must be a string")
        elif timing["ease"] not in EASES:
            self._add("timing.ease", f"Invalid ease function. Allowed: {', '.join(EASES)}")

    def _validate_selector(self, data: Mapping[str, Any]) -> None:
        selector = data.get("selector")
        if selector is None or selector == "":
            return
        if not isinstance(selector, str):
            self._add("selector", "Must be a string")
            return
        if len(selector) > SELECTOR_MAX_LENGTH:
            self._add("selector", f"Must be at most {SELECTOR_MAX_LENGTH} characters")
        elif not matchers.validate_selector(selector):
            self._add("selector", "Contains disallowed content")


def validate_animation_config(raw: Any) -> ValidationResult:
    """Validate ``raw`` with a fresh validator."""
    return AnimationValidator().validate(raw)
