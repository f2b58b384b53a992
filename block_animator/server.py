"""REST API server."""
from __future__ import annotations

import logging
from typing import Any, Generator, List

from fastapi import Body, Depends, FastAPI, HTTPException
from sqlalchemy.orm import Session as DbSession

from block_animator.animation.animation_config import AnimationConfig, merge_patch
from block_animator.animation.rules import editor_rules
from block_animator.db import Base, SessionLocal, engine
from block_animator.db_models import BlockAnimation
from block_animator.exceptions import AnimationError, AnimationValidationError, ServiceError
from block_animator.schemas import (
    BlockAnimationResponse,
    BlockAnimationSaveRequest,
    ConfigResponse,
    InstructionRequest,
    InstructionResponse,
    MergeRequest,
    RenderBlockRequest,
    RenderBlockResponse,
    RulesResponse,
    SummaryResponse,
    ValidationResponse,
)
from block_animator.services.animation_service import AnimationService
from block_animator.services.block_extension_service import BlockExtensionService
from block_animator.services.block_store_service import (
    delete_block_animation,
    find_block_animation,
    get_block_animation,
    list_block_animations,
    save_block_animation,
    update_block_animation,
)
from block_animator.utils.config import settings

app = FastAPI(title="Block Animator API")

animation_service = AnimationService()
block_extension_service = BlockExtensionService()


@app.on_event("startup")
def on_startup() -> None:
    logging.basicConfig(level=settings.log_level)
    Base.metadata.create_all(bind=engine)


@app.get("/health")
async def health():
    return {"status": "ok"}


def get_db() -> Generator[DbSession, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _block_response(record: BlockAnimation, config: AnimationConfig | None = None) -> BlockAnimationResponse:
    return BlockAnimationResponse(
        block_id=record.block_id,
        block_name=record.block_name,
        config=(config.to_dict() if config is not None else record.config),
        updated_at=record.updated_at,
    )


@app.get("/api/animations/rules", response_model=RulesResponse)
def rules_endpoint() -> RulesResponse:
    return RulesResponse(rules=editor_rules(), default_config=AnimationConfig.default().to_dict())


@app.post("/api/animations/validate", response_model=ValidationResponse)
def validate_endpoint(config: Any = Body(...)) -> ValidationResponse:
    result = animation_service.validate(config)
    return ValidationResponse(valid=result.valid, errors=result.errors)


@app.post("/api/animations/sanitize", response_model=ConfigResponse)
def sanitize_endpoint(config: Any = Body(...)) -> ConfigResponse:
    return ConfigResponse(config=AnimationConfig.from_dict(config).to_dict())


@app.post("/api/animations/merge", response_model=ConfigResponse)
def merge_endpoint(payload: MergeRequest) -> ConfigResponse:
    return ConfigResponse(config=merge_patch(payload.config, payload.patch))


@app.post("/api/animations/instruction", response_model=InstructionResponse)
def instruction_endpoint(payload: InstructionRequest) -> InstructionResponse:
    try:
        instruction = animation_service.instruction_for(payload.config, payload.block_id)
    except AnimationValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail={"message": str(exc), "errors": exc.errors})
    except AnimationError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))
    return InstructionResponse(instruction=instruction.to_dict())


@app.post("/api/animations/summary", response_model=SummaryResponse)
def summary_endpoint(config: Any = Body(...)) -> SummaryResponse:
    return SummaryResponse(**animation_service.summarize(config))


@app.get("/api/blocks", response_model=List[BlockAnimationResponse])
def list_block_animations_endpoint(db: DbSession = Depends(get_db)) -> List[BlockAnimationResponse]:
    return [_block_response(record) for record in list_block_animations(db)]


@app.get("/api/blocks/{block_id}/animation", response_model=BlockAnimationResponse)
def get_block_animation_endpoint(block_id: str, db: DbSession = Depends(get_db)) -> BlockAnimationResponse:
    try:
        config = get_block_animation(db, block_id)
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))
    record = find_block_animation(db, block_id)
    return _block_response(record, config)


@app.put("/api/blocks/{block_id}/animation", response_model=BlockAnimationResponse)
def put_block_animation_endpoint(
    block_id: str,
    payload: BlockAnimationSaveRequest,
    db: DbSession = Depends(get_db),
) -> BlockAnimationResponse:
    try:
        record = save_block_animation(db, block_id, payload.config, payload.block_name)
    except AnimationValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail={"message": str(exc), "errors": exc.errors})
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))
    return _block_response(record)


@app.patch("/api/blocks/{block_id}/animation", response_model=BlockAnimationResponse)
def patch_block_animation_endpoint(
    block_id: str,
    patch: Any = Body(...),
    db: DbSession = Depends(get_db),
) -> BlockAnimationResponse:
    try:
        record = update_block_animation(db, block_id, patch if isinstance(patch, dict) else {})
    except AnimationValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail={"message": str(exc), "errors": exc.errors})
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))
    return _block_response(record)


@app.delete("/api/blocks/{block_id}/animation")
def delete_block_animation_endpoint(block_id: str, db: DbSession = Depends(get_db)):
    try:
        deleted = delete_block_animation(db, block_id)
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))
    if not deleted:
        raise HTTPException(status_code=404, detail="Block animation not found")
    return {"deleted": True, "block_id": block_id}


@app.post("/api/blocks/render", response_model=RenderBlockResponse)
def render_block_endpoint(payload: RenderBlockRequest) -> RenderBlockResponse:
    return RenderBlockResponse(content=block_extension_service.render_block(payload.content, payload.block))
