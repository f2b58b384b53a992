"""Playback instruction handed to the animation engine."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

SCROLL_TRIGGER_DEFAULTS: Dict[str, str] = {
    "start": "top 80%",
    "end": "bottom 20%",
    "toggleActions": "play none none reverse",
}


@dataclass(frozen=True)
class PlaybackInstruction:
    """``{type, target, properties | fromProperties/toProperties, timing}`` for one block."""
    type: str
    trigger: str
    timing: Dict[str, Any]
    properties: Optional[Dict[str, Any]] = None
    from_properties: Optional[Dict[str, Any]] = None
    to_properties: Optional[Dict[str, Any]] = None
    block_id: Optional[str] = None
    selector: Optional[str] = None
    scroll_trigger: Optional[Dict[str, Any]] = None
    timeline: Optional[Dict[str, Any]] = None

    def for_block(self, block_id: str) -> "PlaybackInstruction":
        return replace(self, block_id=block_id)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.type,
            "target": {"blockId": self.block_id, "selector": self.selector},
            "trigger": self.trigger,
            "timing": dict(self.timing),
        }
        if self.from_properties is not None or self.to_properties is not None:
            out["fromProperties"] = dict(self.from_properties or {})
            out["toProperties"] = dict(self.to_properties or {})
        else:
            out["properties"] = dict(self.properties or {})
        if self.scroll_trigger is not None:
            out["scrollTrigger"] = dict(self.scroll_trigger)
        if self.timeline is not None:
            out["timeline"] = dict(self.timeline)
        return out
