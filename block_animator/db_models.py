"""SQLAlchemy models for persisted block animation attributes."""
from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from block_animator.db import Base


class BlockAnimation(Base):
    __tablename__ = "block_animations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    block_id: Mapped[str] = mapped_column(String(200), unique=True, index=True)
    block_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    config: Mapped[dict] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
