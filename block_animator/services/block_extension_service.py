"""Block extension service.

Registers the animation attribute on block types and writes the animation
data attributes into rendered block markup.
"""
from __future__ import annotations

import html
import json
import logging
import re
import uuid
from typing import Any, Dict, Iterable, Optional

from block_animator.animation import matchers
from block_animator.animation.animation_config import AnimationConfig
from block_animator.utils.config import settings

logger = logging.getLogger(__name__)

HTML_ELEMENT_RE = re.compile(r"^(\s*<[^>]+?)(\s*/?>)")


class BlockExtensionService:
    def __init__(
        self,
        attribute_name: Optional[str] = None,
        skip_block_types: Optional[Iterable[str]] = None,
        block_id_prefix: Optional[str] = None,
    ) -> None:
        self.attribute_name = attribute_name or settings.attribute_name
        self.skip_block_types = set(skip_block_types if skip_block_types is not None else settings.skip_block_types)
        self.block_id_prefix = block_id_prefix or settings.block_id_prefix

    def add_animation_attributes(self, args: Dict[str, Any], block_type: str) -> Dict[str, Any]:
        """Return block registration args with the animation attribute added."""
        if block_type in self.skip_block_types or not matchers.is_block_name(block_type):
            return args
        updated = dict(args)
        attributes = dict(updated.get("attributes") or {})
        attributes[self.attribute_name] = {
            "type": "object",
            "default": AnimationConfig.default().to_dict(),
        }
        updated["attributes"] = attributes
        return updated

    def make_block_id(self, block_name: str) -> str:
        safe_name = re.sub(r"[^a-z0-9-]", "-", (block_name or "block").lower())
        return f"{self.block_id_prefix}-{safe_name}-{uuid.uuid4()}"

    def render_block(self, block_content: str, block: Dict[str, Any]) -> str:
        """Add ``data-gsap-*`` attributes to the first element of an animated block."""
        attrs = block.get("attrs") or {}
        raw = attrs.get(self.attribute_name) if isinstance(attrs, dict) else None
        if not isinstance(raw, dict):
            return block_content

        config = AnimationConfig.from_dict(raw)
        if not config.enabled:
            return block_content

        match = HTML_ELEMENT_RE.match(block_content)
        if match is None:
            logger.warning("Animated block has no HTML element", extra={"block_name": block.get("blockName")})
            return block_content

        block_id = self.make_block_id(block.get("blockName") or "")
        data = json.dumps(config.to_dict(), separators=(",", ":"))
        attributes = (
            f' data-gsap-animation="{html.escape(data, quote=True)}"'
            f' data-gsap-trigger="{html.escape(config.trigger, quote=True)}"'
            f' data-gsap-block-id="{html.escape(block_id, quote=True)}"'
        )
        if config.selector:
            attributes += f' data-gsap-selector="{html.escape(config.selector, quote=True)}"'

        return match.group(1) + attributes + match.group(2) + block_content[match.end():]
