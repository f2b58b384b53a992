"""Animation configuration value object.

``AnimationConfig.from_dict`` always succeeds: missing fields take defaults,
out-of-range numbers are clamped, property values pass the per-key sanitizer
and unknown enum values fall back to the default. It does not validate; see
``validator.AnimationValidator``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from block_animator.animation import matchers
from block_animator.animation.rules import (
    ANIMATION_TYPES,
    DEFAULT_TIMELINE_POSITION,
    DEFAULT_TRIGGER,
    DEFAULT_TYPE,
    TRIGGERS,
    allowed_properties,
)
from block_animator.animation.sanitizer import sanitize_properties, sanitize_timing

NESTED_KEYS = ("properties", "timing", "timeline")


@dataclass(frozen=True)
class TimingConfig:
    duration: float = 0.5
    delay: float = 0.0
    repeat: int = 0
    yoyo: bool = False
    ease: str = "power1.out"

    @classmethod
    def from_dict(cls, data: Any) -> "TimingConfig":
        return cls(**sanitize_timing(data))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "duration": self.duration,
            "delay": self.delay,
            "repeat": self.repeat,
            "yoyo": self.yoyo,
            "ease": self.ease,
        }


@dataclass(frozen=True)
class TimelineConfig:
    """Timeline grouping metadata. Carried for the editor, never executed here."""
    is_timeline: bool = False
    timeline_id: Optional[str] = None
    timeline_name: Optional[str] = None
    parent_timeline_id: Optional[str] = None
    timeline_position: Optional[str] = None
    custom_position: Optional[str] = None
    scroll_start: Optional[str] = None
    scroll_end: Optional[str] = None

    _KEYS = (
        ("timeline_id", "timelineId"),
        ("timeline_name", "timelineName"),
        ("parent_timeline_id", "parentTimelineId"),
        ("timeline_position", "timelinePosition"),
        ("custom_position", "customPosition"),
        ("scroll_start", "scrollStart"),
        ("scroll_end", "scrollEnd"),
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimelineConfig":
        values: Dict[str, Any] = {}
        for attr, key in cls._KEYS:
            value = data.get(key)
            if isinstance(value, str):
                values[attr] = value
        position = values.get("timeline_position")
        if position is not None and not matchers.is_timeline_position(position):
            values["timeline_position"] = DEFAULT_TIMELINE_POSITION
        custom = values.get("custom_position")
        if custom and not matchers.is_custom_position(custom):
            values["custom_position"] = None
        is_timeline = data.get("isTimeline")
        return cls(is_timeline=is_timeline if isinstance(is_timeline, bool) else False, **values)

    @property
    def position(self) -> str:
        """Effective timeline position, resolving ``custom``."""
        if self.timeline_position == "custom":
            return self.custom_position or DEFAULT_TIMELINE_POSITION
        return self.timeline_position or DEFAULT_TIMELINE_POSITION

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"isTimeline": self.is_timeline}
        for attr, key in self._KEYS:
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out


@dataclass(frozen=True)
class AnimationConfig:
    enabled: bool = False
    type: str = DEFAULT_TYPE
    trigger: str = DEFAULT_TRIGGER
    properties: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    timing: TimingConfig = field(default_factory=TimingConfig)
    selector: Optional[str] = None
    timeline: Optional[TimelineConfig] = None

    @classmethod
    def default(cls) -> "AnimationConfig":
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, raw: Any) -> "AnimationConfig":
        if isinstance(raw, AnimationConfig):
            return raw
        if not isinstance(raw, Mapping):
            raw = {}

        enabled = raw.get("enabled")
        animation_type = raw.get("type")
        if animation_type not in ANIMATION_TYPES:
            animation_type = DEFAULT_TYPE
        trigger = raw.get("trigger")
        if trigger not in TRIGGERS:
            trigger = DEFAULT_TRIGGER

        properties = sanitize_properties(raw.get("properties"), allowed_properties(animation_type))

        timeline = raw.get("timeline")
        return cls(
            enabled=enabled if isinstance(enabled, bool) else False,
            type=animation_type,
            trigger=trigger,
            properties=MappingProxyType(properties),
            timing=TimingConfig.from_dict(raw.get("timing")),
            selector=matchers.sanitize_selector(raw.get("selector")) or None,
            timeline=TimelineConfig.from_dict(timeline) if isinstance(timeline, Mapping) else None,
        )

    @property
    def duration(self) -> float:
        return self.timing.duration

    @property
    def delay(self) -> float:
        return self.timing.delay

    @property
    def repeat(self) -> int:
        return self.timing.repeat

    @property
    def yoyo(self) -> bool:
        return self.timing.yoyo

    @property
    def ease(self) -> str:
        return self.timing.ease

    @property
    def has_properties(self) -> bool:
        return bool(self.properties)

    def merged(self, patch: Mapping[str, Any]) -> "AnimationConfig":
        return AnimationConfig.from_dict(merge_patch(self.to_dict(), patch))

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "enabled": self.enabled,
            "type": self.type,
            "trigger": self.trigger,
            "properties": dict(self.properties),
            "timing": self.timing.to_dict(),
        }
        if self.selector is not None:
            out["selector"] = self.selector
        if self.timeline is not None:
            out["timeline"] = self.timeline.to_dict()
        return out


def merge_patch(base: Any, patch: Any) -> Dict[str, Any]:
    """Apply a partial editor update to a raw configuration.

    Top-level keys in ``patch`` replace those in ``base``. ``properties``,
    ``timing`` and ``timeline`` merge key by key, so updating one property
    keeps its siblings. A ``None`` value inside ``properties`` removes that
    property.
    """
    result: Dict[str, Any] = dict(base) if isinstance(base, Mapping) else {}
    if not isinstance(patch, Mapping):
        return result
    for key, value in patch.items():
        if key in NESTED_KEYS and isinstance(value, Mapping):
            current = result.get(key)
            merged = dict(current) if isinstance(current, Mapping) else {}
            for sub_key, sub_value in value.items():
                if key == "properties" and sub_value is None:
                    merged.pop(sub_key, None)
                else:
                    merged[sub_key] = sub_value
            result[key] = merged
        else:
            result[key] = value
    return result
