from __future__ import annotations

import html
import json
import logging
import re

import pytest

from block_animator.animation.animation_config import AnimationConfig
from block_animator.services.block_extension_service import BlockExtensionService

VALID = {
    "enabled": True,
    "type": "to",
    "trigger": "scroll",
    "properties": {"x": 100, "opacity": 0.5},
    "timing": {"duration": 1, "ease": "power2.out"},
}


@pytest.fixture()
def service():
    return BlockExtensionService(
        attribute_name="gsapAnimation",
        skip_block_types=["core/block"],
        block_id_prefix="gsap-block",
    )


def _block(config, name="core/paragraph"):
    return {"blockName": name, "attrs": {"gsapAnimation": config}}


class TestAddAnimationAttributes:
    def test_adds_attribute_with_default(self, service):
        args = {"title": "Paragraph", "attributes": {"content": {"type": "string"}}}
        updated = service.add_animation_attributes(args, "core/paragraph")

        assert updated["attributes"]["content"] == {"type": "string"}
        assert updated["attributes"]["gsapAnimation"] == {
            "type": "object",
            "default": AnimationConfig.default().to_dict(),
        }
        assert "gsapAnimation" not in args["attributes"]

    def test_args_without_attributes(self, service):
        assert "gsapAnimation" in service.add_animation_attributes({}, "my-plugin/hero")["attributes"]

    @pytest.mark.parametrize("block_type", ["core/block", "Paragraph", ""])
    def test_skipped_types(self, service, block_type):
        args = {"attributes": {}}
        assert service.add_animation_attributes(args, block_type) is args


def test_make_block_id(service):
    block_id = service.make_block_id("core/paragraph")
    assert block_id.startswith("gsap-block-core-paragraph-")
    assert block_id != service.make_block_id("core/paragraph")


class TestRenderBlock:
    def test_injects_data_attributes(self, service):
        content = '<p class="lead">Hi</p>'
        rendered = service.render_block(content, _block(VALID))

        assert rendered.startswith('<p class="lead" data-gsap-animation="')
        assert rendered.endswith(">Hi</p>")
        assert 'data-gsap-trigger="scroll"' in rendered
        assert 'data-gsap-block-id="gsap-block-core-paragraph-' in rendered
        assert "data-gsap-selector" not in rendered

        encoded = re.search(r'data-gsap-animation="([^"]*)"', rendered).group(1)
        assert "&quot;" in encoded
        expected = AnimationConfig.from_dict(VALID).to_dict()
        assert json.loads(html.unescape(encoded)) == expected

    def test_self_closing_element(self, service):
        rendered = service.render_block('<img src="a.png" />', _block(VALID, "core/image"))
        assert rendered.startswith('<img src="a.png" data-gsap-animation=')
        assert rendered.endswith(" />")

    def test_selector_attribute(self, service):
        rendered = service.render_block("<div></div>", _block(dict(VALID, selector=".title")))
        assert 'data-gsap-selector=".title"' in rendered

    @pytest.mark.parametrize("block", [
        _block(dict(VALID, enabled=False)),
        {"blockName": "core/paragraph", "attrs": {}},
        {"blockName": "core/paragraph"},
        _block("enabled"),
    ])
    def test_untouched_content(self, service, block):
        assert service.render_block("<p>Hi</p>", block) == "<p>Hi</p>"

    def test_content_without_element(self, service, caplog):
        caplog.set_level(logging.WARNING)
        assert service.render_block("plain text", _block(VALID)) == "plain text"
        assert "no HTML element" in caplog.text
