"""Animation-type strategies: one per playback mode (to, from, fromTo, set)."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol

from block_animator.animation.animation_config import AnimationConfig
from block_animator.animation.instruction import SCROLL_TRIGGER_DEFAULTS, PlaybackInstruction
from block_animator.animation.matchers import CSS_UNIT_RE
from block_animator.animation.rules import ALL_PROPERTIES, BASE_PROPERTIES, PROPERTY_FALLBACKS, SCALE
from block_animator.animation.sanitizer import format_number, sanitize_properties
from block_animator.exceptions import AnimationError


class AnimationStrategy(Protocol):
    type: str

    def is_compatible(self, config: AnimationConfig) -> bool:
        ...

    def generate(self, config: AnimationConfig) -> PlaybackInstruction:
        ...

    def validate(self, config: AnimationConfig) -> List[str]:
        ...


# --- inverse values for fromTo ---------------------------------------------

def opposite_movement(value: Any) -> str:
    match = CSS_UNIT_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        return PROPERTY_FALLBACKS["x"]
    return f"{format_number(-float(match.group(1)))}{match.group(2)}"


def opposite_rotation(value: float) -> float:
    return value - 360 if value > 0 else value + 360


def opposite_scale(value: float) -> float:
    return SCALE.minimum if value > 1 else 2.0


def opposite_opacity(value: float) -> float:
    return 0.0 if value > 0.5 else 1.0


def transparent(_value: Any) -> str:
    return "transparent"


def zero_size(_value: Any) -> str:
    return "0px"


class InversePolicy:
    """Maps a property key to the function deriving a fromTo starting value.

    Values passed in are already sanitized. Keys without an entry start at
    their target value.
    """

    def __init__(self, inverses: Mapping[str, Callable[[Any], Any]]) -> None:
        self._inverses: Dict[str, Callable[[Any], Any]] = dict(inverses)

    def inverse(self, key: str, value: Any) -> Any:
        fn = self._inverses.get(key)
        if fn is None:
            return value
        return fn(value)

    def with_override(self, key: str, fn: Callable[[Any], Any]) -> "InversePolicy":
        inverses = dict(self._inverses)
        inverses[key] = fn
        return InversePolicy(inverses)


DEFAULT_INVERSE_POLICY = InversePolicy({
    "x": opposite_movement,
    "y": opposite_movement,
    "rotation": opposite_rotation,
    "scale": opposite_scale,
    "opacity": opposite_opacity,
    "backgroundColor": transparent,
    "color": transparent,
    "width": zero_size,
    "height": zero_size,
})


# --- shared helpers ----------------------------------------------------------

def _extras(config: AnimationConfig) -> Dict[str, Any]:
    extras: Dict[str, Any] = {"selector": config.selector}
    if config.trigger == "scroll":
        extras["scroll_trigger"] = dict(SCROLL_TRIGGER_DEFAULTS)
    if config.timeline is not None:
        extras["timeline"] = {**config.timeline.to_dict(), "position": config.timeline.position}
    return extras


def _tween_errors(config: AnimationConfig, label: str) -> List[str]:
    errors: List[str] = []
    if not sanitize_properties(dict(config.properties), BASE_PROPERTIES):
        errors.append(f"{label} animation requires at least one property to animate")
    # from_dict clamps duration; only a directly constructed TimingConfig reaches this.
    if config.duration <= 0:
        errors.append("Animation duration must be greater than 0")
    return errors


class ToStrategy:
    """Engine tweens from the element's current state to the given properties."""
    type = "to"

    def is_compatible(self, config: AnimationConfig) -> bool:
        return config.type == self.type

    def generate(self, config: AnimationConfig) -> PlaybackInstruction:
        return PlaybackInstruction(
            type=self.type,
            trigger=config.trigger,
            timing=config.timing.to_dict(),
            properties=sanitize_properties(dict(config.properties), BASE_PROPERTIES),
            **_extras(config),
        )

    def validate(self, config: AnimationConfig) -> List[str]:
        return _tween_errors(config, "To")


class FromStrategy:
    """Engine tweens from the given properties back to the current state."""
    type = "from"

    def is_compatible(self, config: AnimationConfig) -> bool:
        return config.type == self.type

    def generate(self, config: AnimationConfig) -> PlaybackInstruction:
        return PlaybackInstruction(
            type=self.type,
            trigger=config.trigger,
            timing=config.timing.to_dict(),
            properties=sanitize_properties(dict(config.properties), BASE_PROPERTIES),
            **_extras(config),
        )

    def validate(self, config: AnimationConfig) -> List[str]:
        return _tween_errors(config, "From")


class FromToStrategy:
    type = "fromTo"

    def __init__(self, policy: Optional[InversePolicy] = None) -> None:
        self.policy = policy if policy is not None else DEFAULT_INVERSE_POLICY

    def is_compatible(self, config: AnimationConfig) -> bool:
        return config.type == self.type

    def generate(self, config: AnimationConfig) -> PlaybackInstruction:
        to_properties = sanitize_properties(dict(config.properties), BASE_PROPERTIES)
        from_properties = {key: self.policy.inverse(key, value) for key, value in to_properties.items()}
        return PlaybackInstruction(
            type=self.type,
            trigger=config.trigger,
            timing=config.timing.to_dict(),
            from_properties=from_properties,
            to_properties=to_properties,
            **_extras(config),
        )

    def validate(self, config: AnimationConfig) -> List[str]:
        return _tween_errors(config, "FromTo")


class SetStrategy:
    """Applies properties instantly. Also accepts display, visibility and zIndex."""
    type = "set"

    def is_compatible(self, config: AnimationConfig) -> bool:
        return config.type == self.type

    def generate(self, config: AnimationConfig) -> PlaybackInstruction:
        return PlaybackInstruction(
            type=self.type,
            trigger=config.trigger,
            timing={"duration": 0, "delay": config.delay, "repeat": 0, "yoyo": False, "ease": "none"},
            properties=sanitize_properties(dict(config.properties), ALL_PROPERTIES),
            **_extras(config),
        )

    def validate(self, config: AnimationConfig) -> List[str]:
        if not sanitize_properties(dict(config.properties), ALL_PROPERTIES):
            return ["Set animation requires at least one property to set"]
        return []


class StrategyRegistry:
    def __init__(self) -> None:
        self._strategies: Dict[str, AnimationStrategy] = {}

    def register(self, strategy: AnimationStrategy) -> None:
        self._strategies[strategy.type] = strategy

    def types(self) -> List[str]:
        return list(self._strategies)

    def get(self, animation_type: str) -> AnimationStrategy:
        strategy = self._strategies.get(animation_type)
        if strategy is None:
            raise AnimationError.strategy_not_found(animation_type)
        return strategy

    def for_config(self, config: AnimationConfig) -> AnimationStrategy:
        return self.get(config.type)


def default_strategy_registry(policy: Optional[InversePolicy] = None) -> StrategyRegistry:
    registry = StrategyRegistry()
    registry.register(ToStrategy())
    registry.register(FromStrategy())
    registry.register(FromToStrategy(policy))
    registry.register(SetStrategy())
    return registry
