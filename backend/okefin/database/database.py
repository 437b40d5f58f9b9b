from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from okefin.core.config import settings
from okefin.core.logger import setup_logger
from okefin.models.base import Base
import okefin.models

logger = setup_logger("database")


def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    # SQLite ships with foreign key checks off for every new connection
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def make_engine(url: str) -> Engine:
    if not url.startswith("sqlite"):
        return create_engine(url)
    return enable_sqlite_foreign_keys(create_engine(url, connect_args={"check_same_thread": False}))


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_base_metadata():
    return Base.metadata


def init_db(bind=None) -> None:
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured")


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Commit everything written inside the block, or nothing.

    Repositories only flush; the service wrapping a multi-step write opens one
    of these so a failure at any step rolls back the earlier steps too.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
