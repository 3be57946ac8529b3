"""Read-only SQLModel engine singleton and session dependency.

The activity store is populated by an external export process; this
application only ever reads it, so file-backed SQLite databases are opened
through a ``mode=ro`` URI.
"""
from pathlib import Path
from typing import Generator

from sqlalchemy.engine import make_url
from sqlmodel import Session, create_engine

from straid.config import get_settings

_engine = None


class StoreUnavailableError(RuntimeError):
    """Raised when the activity store cannot be opened."""


def read_only_url(database_url: str) -> str:
    """Rewrite a SQLite file URL so the connection is opened read-only.

    Non-SQLite and in-memory URLs are returned unchanged.

    Raises:
        StoreUnavailableError: the SQLite file does not exist.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return database_url
    if url.database.startswith("file:"):
        return database_url
    path = Path(url.database)
    if not path.is_file():
        raise StoreUnavailableError(f"Activity store not found at {path}")
    return f"sqlite:///file:{path.as_posix()}?mode=ro&uri=true"


def get_engine():
    """Return the module-level engine, creating it on first call."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(
            read_only_url(settings.database_url),
            connect_args={"check_same_thread": False},  # SQLite only; safe for FastAPI
        )
    return _engine


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a DB session."""
    with Session(get_engine()) as session:
        yield session
