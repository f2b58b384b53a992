"""Pydantic schemas for API."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ValidationResponse(BaseModel):
    valid: bool
    errors: List[str]


class ConfigResponse(BaseModel):
    config: Dict[str, Any]


class MergeRequest(BaseModel):
    config: Dict[str, Any] = Field(default_factory=dict)
    patch: Dict[str, Any] = Field(default_factory=dict)


class InstructionRequest(BaseModel):
    config: Dict[str, Any]
    block_id: Optional[str] = None


class InstructionResponse(BaseModel):
    instruction: Dict[str, Any]


class SummaryResponse(BaseModel):
    type: str
    trigger: str
    duration: float
    has_properties: bool = Field(alias="hasProperties")
    total_properties: int = Field(alias="totalProperties")
    is_complete: bool = Field(alias="isComplete")
    text: str

    model_config = {
        "populate_by_name": True,
    }


class RulesResponse(BaseModel):
    rules: Dict[str, Any]
    default_config: Dict[str, Any]


class BlockAnimationResponse(BaseModel):
    block_id: str
    block_name: Optional[str] = None
    config: Dict[str, Any]
    updated_at: Optional[datetime] = None


class BlockAnimationSaveRequest(BaseModel):
    config: Dict[str, Any]
    block_name: Optional[str] = None


class RenderBlockRequest(BaseModel):
    content: str
    block: Dict[str, Any]


class RenderBlockResponse(BaseModel):
    content: str
