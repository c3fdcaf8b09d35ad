# ecommerce_http_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for ``database_url``.

    SQLite needs ``check_same_thread=False`` because FastAPI runs sync
    endpoints in a threadpool. An in-memory SQLite database lives inside a
    single connection, so it is pinned with ``StaticPool``.
    """
    kwargs: dict[str, object] = {"echo": echo}

    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool

    return create_engine(database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


# ---------------------------------------------------------------------------
# FastAPI dependency / helper
# ---------------------------------------------------------------------------


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency yielding a request-scoped session.

    The session factory is created by ``create_app`` and stored on
    ``app.state.session_factory``. Anything not committed by the service
    layer is rolled back when the request ends.

        from fastapi import Depends
        from ecommerce_http_api.db.session import get_db

        @router.get("/users")
        def list_users(db: Session = Depends(get_db)):
            ...
    """
    factory: sessionmaker[Session] = request.app.state.session_factory
    db = factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# Alias kept for callers that prefer the longer name
get_session = get_db


@contextmanager
def db_session(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """
    Context manager for non-request usage, e.g. startup seeding or scripts.

        with db_session(app.state.session_factory) as db:
            ...
    """
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


__all__ = [
    "build_engine",
    "build_session_factory",
    "get_db",
    "get_session",
    "db_session",
]
