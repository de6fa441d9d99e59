"""SQLAlchemy engine + session factory.

Bookmark writes open their own short-lived session and commit immediately,
so there is no session-per-request here.
"""

from __future__ import annotations

from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from lotto_report.models.base import Base


def create_app_engine(database_url: str) -> Engine:
    url = make_url(database_url)

    connect_args: dict[str, object] = {}
    if url.get_backend_name() == "sqlite":
        # Flask's dev server and the test client may touch the engine from several threads.
        connect_args["check_same_thread"] = False

    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def init_db(app: Flask) -> sessionmaker[Session]:
    """Initialize the database engine and return the session factory."""

    engine = create_app_engine(str(app.config["DATABASE_URL"]))
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # Create tables on startup (single small table, no migrations).
    Base.metadata.create_all(bind=engine)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory
    return session_factory
