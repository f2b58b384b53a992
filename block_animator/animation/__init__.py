"""Animation configuration core.

Components:
- rules: allow-lists, ranges and defaults shared by everything below
- matchers: CSS unit, colour, easing and selector predicates
- sanitizer: permissive per-property clamping used before playback
- validator: strict, accumulating validation used before save
- animation_config: immutable, defaulted configuration value object
- strategies: to / from / fromTo / set playback instruction builders
- registry: one active animation per block
"""

from block_animator.animation.animation_config import (
    AnimationConfig,
    TimelineConfig,
    TimingConfig,
    merge_patch,
)

from block_animator.animation.instruction import PlaybackInstruction

from block_animator.animation.matchers import sanitize_selector, validate_selector

from block_animator.animation.registry import ActiveAnimationRegistry

from block_animator.animation.sanitizer import (
    sanitize,
    sanitize_properties,
    sanitize_timing,
)

from block_animator.animation.strategies import (
    DEFAULT_INVERSE_POLICY,
    FromStrategy,
    FromToStrategy,
    InversePolicy,
    SetStrategy,
    StrategyRegistry,
    ToStrategy,
    default_strategy_registry,
)

from block_animator.animation.validator import (
    AnimationValidator,
    ValidationResult,
    validate_animation_config,
)

__all__ = [
    # Value object
    "AnimationConfig",
    "TimelineConfig",
    "TimingConfig",
    "merge_patch",
    # Matchers
    "sanitize_selector",
    "validate_selector",
    # Sanitizer
    "sanitize",
    "sanitize_properties",
    "sanitize_timing",
    # Validator
    "AnimationValidator",
    "ValidationResult",
    "validate_animation_config",
    # Strategies
    "PlaybackInstruction",
    "DEFAULT_INVERSE_POLICY",
    "InversePolicy",
    "ToStrategy",
    "FromStrategy",
    "FromToStrategy",
    "SetStrategy",
    "StrategyRegistry",
    "default_strategy_registry",
    # Registry
    "ActiveAnimationRegistry",
]
