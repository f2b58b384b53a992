from __future__ import annotations

from block_animator.db import engine_options


def test_sqlite_connections_are_shared_across_threads():
    assert engine_options("sqlite:///block_animator.db") == {"connect_args": {"check_same_thread": False}}
    assert engine_options("sqlite://") == {"connect_args": {"check_same_thread": False}}


def test_server_databases_use_pre_ping():
    assert engine_options("postgresql+psycopg://user:pw@localhost/db") == {"pool_pre_ping": True}
