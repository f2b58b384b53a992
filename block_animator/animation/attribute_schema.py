"""JSON Schema of the persisted block animation attribute."""
from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from block_animator.animation.rules import ALL_PROPERTIES, ANIMATION_TYPES, EASES, SELECTOR_MAX_LENGTH, TRIGGERS

ANIMATION_ATTRIBUTE_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["enabled", "type", "trigger", "properties", "timing"],
    "properties": {
        "enabled": {"type": "boolean"},
        "type": {"type": "string", "enum": list(ANIMATION_TYPES)},
        "trigger": {"type": "string", "enum": list(TRIGGERS)},
        "properties": {
            "type": "object",
            "propertyNames": {"enum": list(ALL_PROPERTIES)},
            "additionalProperties": {"type": ["number", "string"]},
        },
        "timing": {
            "type": "object",
            "required": ["duration", "ease"],
            "properties": {
                "duration": {"type": "number"},
                "delay": {"type": "number"},
                "repeat": {"type": "integer"},
                "yoyo": {"type": "boolean"},
                "ease": {"type": "string", "enum": list(EASES)},
            },
        },
        "selector": {"type": ["string", "null"], "maxLength": SELECTOR_MAX_LENGTH},
        "timeline": {
            "type": "object",
            "properties": {
                "isTimeline": {"type": "boolean"},
                "timelineId": {"type": "string"},
                "timelineName": {"type": "string"},
                "parentTimelineId": {"type": "string"},
                "timelinePosition": {"type": "string"},
                "customPosition": {"type": "string"},
            },
        },
    },
}

_VALIDATOR = Draft202012Validator(ANIMATION_ATTRIBUTE_SCHEMA)


def describe_schema_drift(raw: Any) -> List[str]:
    """List the places where ``raw`` no longer matches the attribute shape."""
    messages = []
    for error in sorted(_VALIDATOR.iter_errors(raw), key=lambda e: [str(p) for p in e.path]):
        location = ".".join(str(p) for p in error.path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return messages
