from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from loguru import logger

from app.core.config import DATABASE_URL, SQL_ECHO
from app.core.errors import AppError, InternalError

# --- Base (single source of truth) ---
Base = declarative_base()

_is_sqlite = DATABASE_URL.startswith("sqlite")
_is_memory = _is_sqlite and (DATABASE_URL in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in DATABASE_URL)

# --- Engine ---
engine_options = {}
if _is_memory:
    # in-memory sqlite lives on one connection, share it across sessions
    engine_options["poolclass"] = StaticPool

engine = create_engine(
    DATABASE_URL,
    echo=False,
    future=True,
    pool_pre_ping=not _is_sqlite,
    connect_args={"check_same_thread": False}
    if _is_sqlite
    else {},
    **engine_options,
)

# --- Session factory ---
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)

# --- SQLite needs FK enforcement switched on per connection ---
if _is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# --- SQL query logging ---
if SQL_ECHO:
    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        logger.debug(f"SQL: {statement} | params={parameters}")

# --- FastAPI dependency ---
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# --- Service-side error translation ---
@contextmanager
def translate_db_errors(db: Session, failure: str):
    """Roll back and re-raise unexpected persistence failures as InternalError."""
    try:
        yield
    except AppError:
        raise
    except SQLAlchemyError:
        db.rollback()
        logger.exception(failure)
        raise InternalError(failure)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
