"""
Database connection: SQLAlchemy engine and session handling.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ainotes.storage.orm import Base

logger = logging.getLogger(__name__)

# Base data dir: repository_root/data (we are in backend/ainotes/storage)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DATA_DIR = Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR)))
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'notes.db'}")


class Database:
    """Engine plus a session factory; one session per unit of work."""

    def __init__(self, url: str):
        self.url = make_url(url)
        connect_args = {}
        if self.url.get_backend_name() == "sqlite":
            # sessions are used from FastAPI's threadpool
            connect_args["check_same_thread"] = False

        self.engine = create_engine(self.url, pool_pre_ping=True, connect_args=connect_args)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def create_tables(self) -> None:
        database = self.url.database
        if self.url.get_backend_name() == "sqlite" and database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables ready (%s)", self.url.render_as_string(hide_password=True))

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Commit on success, roll back on any error."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Database error: %s", e)
            raise
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


db = Database(DATABASE_URL)
