"""
hackapi/db/session.py – Engine factory + Session helper.

One sqlite file per path → cache 1 Engine per db path.
db_session() is a contextmanager that commits/rolls back and closes.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base


# ── Engine cache (1 engine / db file) ─────────────────────────────────────────

_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker] = {}


def _get_engine(db_path: Path) -> Engine:
    key = str(db_path)
    if key not in _engines:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            f"sqlite:///{db_path}",
            connect_args={"check_same_thread": False, "timeout": 30},
            echo=False,
        )
        # WAL: readers don't block the single writer
        @event.listens_for(engine, "connect")
        def set_wal(conn, _):
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA synchronous=NORMAL")

        Base.metadata.create_all(engine)
        _engines[key] = engine
        _session_factories[key] = sessionmaker(bind=engine, expire_on_commit=False)
    return _engines[key]


def get_session_factory(db_path: Path) -> sessionmaker:
    _get_engine(db_path)
    return _session_factories[str(db_path)]


@contextmanager
def db_session(db_path: Path) -> Generator[Session, None, None]:
    """Context manager yielding a Session; commits, rolls back on error, closes."""
    factory = get_session_factory(db_path)
    session: Session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
