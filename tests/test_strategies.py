from __future__ import annotations

from types import MappingProxyType

import pytest

from block_animator.animation.animation_config import AnimationConfig, TimingConfig
from block_animator.animation.instruction import SCROLL_TRIGGER_DEFAULTS
from block_animator.animation.strategies import (
    DEFAULT_INVERSE_POLICY,
    FromStrategy,
    FromToStrategy,
    SetStrategy,
    ToStrategy,
    default_strategy_registry,
    opposite_movement,
    opposite_rotation,
)
from block_animator.exceptions import AnimationError


def _config(**overrides):
    raw = {
        "enabled": True,
        "type": "to",
        "trigger": "pageload",
        "properties": {"x": 10},
        "timing": {"duration": 1, "ease": "power2.out"},
    }
    raw.update(overrides)
    return AnimationConfig.from_dict(raw)


class TestToAndFrom:
    def test_to_instruction(self):
        instruction = ToStrategy().generate(_config())
        out = instruction.to_dict()
        assert out["type"] == "to"
        assert out["properties"] == {"x": "10px"}
        assert out["timing"] == {"duration": 1.0, "delay": 0.0, "repeat": 0, "yoyo": False, "ease": "power2.out"}
        assert out["target"] == {"blockId": None, "selector": None}
        assert "scrollTrigger" not in out
        assert "fromProperties" not in out

    def test_from_instruction(self):
        out = FromStrategy().generate(_config(type="from", properties={"opacity": 0})).to_dict()
        assert out["type"] == "from"
        assert out["properties"] == {"opacity": 0.0}

    def test_requires_properties(self):
        assert ToStrategy().validate(_config(properties={})) == ["To animation requires at least one property to animate"]
        assert FromStrategy().validate(_config(type="from", properties={})) == [
            "From animation requires at least one property to animate"
        ]

    def test_requires_positive_duration(self):
        config = AnimationConfig(properties=MappingProxyType({"x": 1}), timing=TimingConfig(duration=0))
        assert ToStrategy().validate(config) == ["Animation duration must be greater than 0"]

    def test_compatibility(self):
        assert ToStrategy().is_compatible(_config())
        assert not SetStrategy().is_compatible(_config())


class TestFromTo:
    def test_inverse_values(self):
        config = _config(type="fromTo", properties={
            "x": "100px",
            "rotation": 90,
            "scale": 2,
            "opacity": 1,
            "backgroundColor": "#f00",
            "width": "50%",
        })
        out = FromToStrategy().generate(config).to_dict()
        assert out["toProperties"] == {
            "x": "100px",
            "rotation": 90.0,
            "scale": 2.0,
            "opacity": 1.0,
            "backgroundColor": "#f00",
            "width": "50%",
        }
        assert out["fromProperties"] == {
            "x": "-100px",
            "rotation": -270.0,
            "scale": 0.1,
            "opacity": 0.0,
            "backgroundColor": "transparent",
            "width": "0px",
        }
        assert "properties" not in out

    def test_low_values_invert_upward(self):
        config = _config(type="fromTo", properties={"scale": 0.5, "opacity": 0.3, "rotation": -45})
        from_properties = FromToStrategy().generate(config).from_properties
        assert from_properties == {"scale": 2.0, "opacity": 1.0, "rotation": 315.0}

    def test_policy_override(self):
        policy = DEFAULT_INVERSE_POLICY.with_override("opacity", lambda value: 0.25)
        config = _config(type="fromTo", properties={"opacity": 1})
        assert FromToStrategy(policy).generate(config).from_properties == {"opacity": 0.25}
        assert FromToStrategy().generate(config).from_properties == {"opacity": 0.0}
        assert FromToStrategy(policy).policy is policy

    def test_opposites(self):
        assert opposite_movement("-5.5em") == "5.5em"
        assert opposite_movement("auto") == "0px"
        assert opposite_rotation(0) == 360


class TestSet:
    def test_instant_instruction(self):
        config = _config(type="set", properties={"display": "none", "zIndex": 10, "opacity": 0},
                         timing={"duration": 3, "delay": 1, "repeat": 4, "ease": "bounce.out"})
        out = SetStrategy().generate(config).to_dict()
        assert out["properties"] == {"display": "none", "zIndex": 10, "opacity": 0.0}
        assert out["timing"] == {"duration": 0, "delay": 1.0, "repeat": 0, "yoyo": False, "ease": "none"}

    def test_requires_properties(self):
        assert SetStrategy().validate(_config(type="set", properties={})) == [
            "Set animation requires at least one property to set"
        ]


class TestExtras:
    def test_scroll_trigger(self):
        out = ToStrategy().generate(_config(trigger="scroll")).to_dict()
        assert out["scrollTrigger"] == SCROLL_TRIGGER_DEFAULTS

    def test_selector_timeline_and_block(self):
        config = _config(selector=".title", timeline={"isTimeline": True, "timelinePosition": "+=0.5"})
        out = ToStrategy().generate(config).for_block("block-1").to_dict()
        assert out["target"] == {"blockId": "block-1", "selector": ".title"}
        assert out["timeline"] == {"isTimeline": True, "timelinePosition": "+=0.5", "position": "+=0.5"}


class TestRegistry:
    def test_default_types(self):
        assert default_strategy_registry().types() == ["to", "from", "fromTo", "set"]

    def test_for_config(self):
        registry = default_strategy_registry()
        assert isinstance(registry.for_config(_config(type="fromTo")), FromToStrategy)

    def test_unknown_type(self):
        with pytest.raises(AnimationError) as excinfo:
            default_strategy_registry().get("spin")
        assert excinfo.value.status_code == 404
        assert "spin" in str(excinfo.value)


@pytest.mark.parametrize("rotation", [-360, -90, 0, 45, 360])
def test_rotation_inverse_is_congruent(rotation):
    config = _config(type="fromTo", properties={"rotation": rotation})
    instruction = FromToStrategy().generate(config)
    assert (instruction.from_properties["rotation"] - instruction.to_properties["rotation"]) % 360 == 0


def test_opacity_inverse_scenario():
    strategy = FromToStrategy()
    assert strategy.generate(_config(type="fromTo", properties={"opacity": 0.8})).from_properties == {"opacity": 0.0}
    assert strategy.generate(_config(type="fromTo", properties={"opacity": 0.2})).from_properties == {"opacity": 1.0}
