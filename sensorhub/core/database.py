"""
Engine and sessions for the users, sensor and switch tables.

One pooled engine per process; every request and CLI run gets its own Session,
which services receive explicitly instead of sharing a global connection.
"""

from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from sensorhub.core.config import settings

# SQLite connections are bound to their creating thread unless told otherwise;
# FastAPI runs sync endpoints in a thread pool.
_connect_args = (
    {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
)

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
    connect_args=_connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Per-request session; closed (returned to the pool) after the response."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """True if SELECT 1 succeeds; backs the database field of GET /health."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
