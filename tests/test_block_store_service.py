"""Tests for persisted block animation attributes."""
from __future__ import annotations

import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from block_animator.db import Base
from block_animator.db_models import BlockAnimation
from block_animator.exceptions import AnimationValidationError, ServiceError
from block_animator.services.block_store_service import (
    delete_block_animation,
    find_block_animation,
    get_block_animation,
    list_block_animations,
    save_block_animation,
    update_block_animation,
)

VALID = {
    "enabled": True,
    "type": "to",
    "trigger": "pageload",
    "properties": {"x": 100, "opacity": 0.5},
    "timing": {"duration": 1, "delay": 0, "repeat": 0, "yoyo": False, "ease": "power2.out"},
}


@pytest.fixture()
def db():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


class TestSave:
    def test_stores_sanitized_config(self, db):
        record = save_block_animation(db, "block-1", VALID, block_name="core/paragraph")
        assert record.id is not None
        assert record.block_name == "core/paragraph"
        assert record.config["properties"] == {"x": "100px", "opacity": 0.5}
        assert record.config["timing"]["duration"] == 1.0

    def test_invalid_config_is_rejected(self, db):
        with pytest.raises(AnimationValidationError):
            save_block_animation(db, "block-1", dict(VALID, type="spin"))
        assert find_block_animation(db, "block-1") is None

    def test_failed_commit_rolls_back(self, db, monkeypatch):
        def _fail():
            raise SQLAlchemyError("disk full")

        monkeypatch.setattr(db, "commit", _fail)
        with pytest.raises(ServiceError) as excinfo:
            save_block_animation(db, "block-1", VALID)
        assert excinfo.value.status_code == 500
        assert str(excinfo.value) == 'Operation "save" failed: disk full'
        monkeypatch.undo()
        assert find_block_animation(db, "block-1") is None

    def test_rejection_is_logged(self, db, caplog):
        caplog.set_level(logging.INFO)
        with pytest.raises(AnimationValidationError):
            save_block_animation(db, "block-1", dict(VALID, enabled="yes"))
        assert "Rejected block animation: enabled: Must be a boolean value" in caplog.text

    def test_save_replaces_existing(self, db):
        save_block_animation(db, "block-1", VALID, block_name="core/paragraph")
        record = save_block_animation(db, "block-1", dict(VALID, trigger="click"))
        assert record.config["trigger"] == "click"
        assert record.block_name == "core/paragraph"
        assert len(list_block_animations(db)) == 1


class TestUpdate:
    def test_first_update_starts_from_default(self, db):
        record = update_block_animation(db, "block-1", {"enabled": True, "properties": {"x": 5}})
        assert record.config["enabled"] is True
        assert record.config["properties"] == {"x": "5px"}
        assert record.config["timing"]["ease"] == "power1.out"

    def test_update_merges_onto_stored(self, db):
        save_block_animation(db, "block-1", VALID)
        record = update_block_animation(db, "block-1", {"properties": {"opacity": None}, "timing": {"delay": 2}})
        assert record.config["properties"] == {"x": "100px"}
        assert record.config["timing"]["delay"] == 2.0
        assert record.config["timing"]["ease"] == "power2.out"

    def test_invalid_update_keeps_stored_config(self, db):
        save_block_animation(db, "block-1", VALID)
        with pytest.raises(AnimationValidationError) as excinfo:
            update_block_animation(db, "block-1", {"timing": {"ease": "bogus"}})
        assert excinfo.value.first_error.startswith("timing.ease: Invalid ease function")
        assert find_block_animation(db, "block-1").config["timing"]["ease"] == "power2.out"


class TestGet:
    def test_returns_config(self, db):
        save_block_animation(db, "block-1", VALID)
        config = get_block_animation(db, "block-1")
        assert config.enabled is True
        assert dict(config.properties) == {"x": "100px", "opacity": 0.5}

    def test_missing(self, db):
        with pytest.raises(ServiceError) as excinfo:
            get_block_animation(db, "nope")
        assert excinfo.value.status_code == 404

    def test_drifted_record_is_coerced(self, db, caplog):
        db.add(BlockAnimation(block_id="legacy", config={"enabled": "yes", "type": "spin", "properties": {"x": 3}}))
        db.commit()
        caplog.set_level(logging.WARNING)

        config = get_block_animation(db, "legacy")

        assert config.enabled is False
        assert config.type == "to"
        assert dict(config.properties) == {"x": "3px"}
        assert "does not match the current shape" in caplog.text


def test_delete(db):
    save_block_animation(db, "block-1", VALID)
    assert delete_block_animation(db, "block-1") is True
    assert delete_block_animation(db, "block-1") is False
    assert list_block_animations(db) == []
