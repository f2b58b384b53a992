"""Animation service: validation, playback instructions and preview bookkeeping."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from block_animator.animation.animation_config import AnimationConfig
from block_animator.animation.instruction import PlaybackInstruction
from block_animator.animation.registry import ActiveAnimationRegistry
from block_animator.animation.strategies import StrategyRegistry, default_strategy_registry
from block_animator.animation.validator import AnimationValidator, ValidationResult
from block_animator.exceptions import AnimationError

logger = logging.getLogger(__name__)


class AnimationService:
    """Composes the validator, the type strategies and the active-preview registry.

    Two paths:
    - ``create_preview`` is strict (editor time): invalid input raises.
    - ``process_animation`` is permissive (render time): it never raises and
      returns None when nothing should play.
    """

    def __init__(
        self,
        strategies: Optional[StrategyRegistry] = None,
        previews: Optional[ActiveAnimationRegistry] = None,
    ) -> None:
        self.strategies = strategies if strategies is not None else default_strategy_registry()
        self.previews = previews if previews is not None else ActiveAnimationRegistry()

    def validate(self, raw: Any) -> ValidationResult:
        return AnimationValidator().validate(raw)

    def build_instruction(self, config: AnimationConfig, block_id: Optional[str] = None) -> PlaybackInstruction:
        strategy = self.strategies.for_config(config)
        errors = strategy.validate(config)
        if errors:
            raise AnimationError.invalid_config("; ".join(errors))
        instruction = strategy.generate(config)
        if block_id is not None:
            instruction = instruction.for_block(block_id)
        return instruction

    def process_animation(self, block_id: str, raw: Any) -> Optional[PlaybackInstruction]:
        config = AnimationConfig.from_dict(raw)
        if not config.enabled:
            return None
        try:
            return self.build_instruction(config, block_id)
        except AnimationError as exc:
            logger.warning("Skipping animation: %s", exc, extra={"block_id": block_id})
            return None

    def instruction_for(self, raw: Any, block_id: Optional[str] = None) -> PlaybackInstruction:
        """Strict path: raise on invalid or disabled configurations."""
        AnimationValidator().validate_or_raise(raw)
        config = AnimationConfig.from_dict(raw)
        if not config.enabled:
            raise AnimationError.animation_disabled()
        return self.build_instruction(config, block_id)

    def create_preview(self, block_id: str, raw: Any) -> PlaybackInstruction:
        instruction = self.instruction_for(raw, block_id)
        previous = self.previews.acquire(block_id, instruction)
        if previous is not None:
            logger.info("Halted previous preview", extra={"block_id": block_id})
        return instruction

    def stop_preview(self, block_id: str) -> bool:
        return self.previews.release(block_id) is not None

    def active_preview(self, block_id: str) -> Optional[PlaybackInstruction]:
        return self.previews.get(block_id)

    def destroy_all(self) -> int:
        return self.previews.release_all()

    def summarize(self, raw: Any) -> Dict[str, Any]:
        config = AnimationConfig.from_dict(raw)
        total = len(config.properties)
        duration = f"{config.duration:g}"
        return {
            "type": config.type,
            "trigger": config.trigger,
            "duration": config.duration,
            "hasProperties": total > 0,
            "totalProperties": total,
            "isComplete": config.enabled and total > 0,
            "text": f"Type: {config.type} | Trigger: {config.trigger} | Duration: {duration}s",
        }
