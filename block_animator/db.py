"""Database engine and sessions for the block animation store.

The default URL is a local SQLite file; FastAPI runs sync dependencies and
endpoints on worker threads, so SQLite connections must not be pinned to the
thread that opened them.
"""
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from block_animator.utils.config import settings


class Base(DeclarativeBase):
    pass


def engine_options(database_url: str) -> dict:
    if make_url(database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(settings.database_url, **engine_options(settings.database_url))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
