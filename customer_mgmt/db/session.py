from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from customer_mgmt.core.config import settings
from customer_mgmt.db.base import Base
from customer_mgmt.db.unit_of_work import UnitOfWork


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_pragmas(engine: Engine) -> None:
    """FK enforcement and case-sensitive LIKE are off by default in SQLite."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, _connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA case_sensitive_like=ON")
        cursor.close()


def build_engine(url: str | None = None, **kwargs) -> Engine:
    url = url or settings.DATABASE_URL
    if _is_sqlite(url):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    engine = create_engine(url, echo=settings.SQL_ECHO, **kwargs)
    if _is_sqlite(url):
        enable_sqlite_pragmas(engine)
    return engine


def make_session_factory(bind: Engine) -> sessionmaker:
    # autoflush stays off so staged writes reach the store only on commit.
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = build_engine()
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine | None = None) -> None:
    import customer_mgmt.models  # noqa: F401

    Base.metadata.create_all(bind or engine)


@contextmanager
def unit_of_work(
    session_factory: Callable[[], Session] | None = None,
) -> Iterator[UnitOfWork]:
    db = (session_factory or SessionLocal)()
    uow = UnitOfWork(db)
    try:
        yield uow
    except Exception:
        uow.rollback()
        raise
    finally:
        uow.close()


def get_uow() -> Iterator[UnitOfWork]:
    db = SessionLocal()
    try:
        yield UnitOfWork(db)
    finally:
        db.close()
