from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from letshang.core.config import settings


def build_engine(database_url: str, connect_timeout: int | None = None) -> Engine:
    """Create the process-wide engine; the pool is shared by every request."""
    connect_args = {}
    if connect_timeout and make_url(database_url).get_backend_name() == "postgresql":
        connect_args["connect_timeout"] = connect_timeout

    return create_engine(
        database_url,
        pool_pre_ping=True,
        connect_args=connect_args,
        future=True,
    )


engine = build_engine(settings.DATABASE_URL, settings.DB_CONNECT_TIMEOUT)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
