"""Persistence of block animation attributes."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DbSession

from block_animator.animation.animation_config import AnimationConfig, merge_patch
from block_animator.animation.attribute_schema import describe_schema_drift
from block_animator.animation.validator import AnimationValidator
from block_animator.db_models import BlockAnimation
from block_animator.exceptions import AnimationValidationError, ServiceError

logger = logging.getLogger(__name__)


def find_block_animation(db: DbSession, block_id: str) -> Optional[BlockAnimation]:
    return db.execute(select(BlockAnimation).where(BlockAnimation.block_id == block_id)).scalar_one_or_none()


def _commit(db: DbSession, operation: str, block_id: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Block animation %s failed", operation, extra={"block_id": block_id})
        raise ServiceError.operation_failed(operation, str(exc)) from exc


def _persist(db: DbSession, block_id: str, raw: Dict[str, Any], block_name: Optional[str]) -> BlockAnimation:
    try:
        AnimationValidator().validate_or_raise(raw)
    except AnimationValidationError as exc:
        logger.info("Rejected block animation: %s", exc.first_error, extra={"block_id": block_id})
        raise
    stored = AnimationConfig.from_dict(raw).to_dict()
    record = find_block_animation(db, block_id)
    if record is None:
        record = BlockAnimation(block_id=block_id, block_name=block_name, config=stored)
        db.add(record)
    else:
        record.config = stored
        if block_name:
            record.block_name = block_name
    _commit(db, "save", block_id)
    db.refresh(record)
    logger.info("Saved block animation", extra={"block_id": block_id})
    return record


def save_block_animation(
    db: DbSession,
    block_id: str,
    raw: Dict[str, Any],
    block_name: Optional[str] = None,
) -> BlockAnimation:
    """Validate and store a full configuration, replacing any previous one."""
    return _persist(db, block_id, raw, block_name)


def update_block_animation(db: DbSession, block_id: str, patch: Dict[str, Any]) -> BlockAnimation:
    """Merge a partial update onto the stored configuration (or the default on first touch)."""
    record = find_block_animation(db, block_id)
    base = record.config if record is not None else AnimationConfig.default().to_dict()
    return _persist(db, block_id, merge_patch(base, patch), None)


def get_block_animation(db: DbSession, block_id: str) -> AnimationConfig:
    """Load a stored configuration, re-coercing it in case it was corrupted or is from an older shape."""
    record = find_block_animation(db, block_id)
    if record is None:
        raise ServiceError.resource_not_found("block_animation", block_id)
    drift = describe_schema_drift(record.config)
    if drift:
        logger.warning(
            "Stored block animation does not match the current shape; defaults applied",
            extra={"block_id": block_id, "drift": drift},
        )
    return AnimationConfig.from_dict(record.config)


def delete_block_animation(db: DbSession, block_id: str) -> bool:
    record = find_block_animation(db, block_id)
    if record is None:
        return False
    db.delete(record)
    _commit(db, "delete", block_id)
    logger.info("Deleted block animation", extra={"block_id": block_id})
    return True


def list_block_animations(db: DbSession) -> List[BlockAnimation]:
    return list(db.execute(select(BlockAnimation).order_by(BlockAnimation.created_at)).scalars())
