# app/database.py
"""
Database connection pool, scoped connection helper, and declarative base.
Uses SQLAlchemy Core over a bounded QueuePool. All models are auto-imported
by app.models so Base.metadata knows every table.
"""

import threading
import time
from contextlib import contextmanager
from typing import Callable, Optional, TypeVar

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from app.config import settings
from app.utils.logger import get_logger

logger = get_logger(__name__)

Base = declarative_base()

T = TypeVar("T")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class ConnectionPool:
    """
    Lazily-initialised pool of database connections.

    Every unit of work borrows one connection through connection() / run()
    and the connection goes back to the pool on every exit path.
    """

    def __init__(
        self,
        url: str,
        pool_min: int = 1,
        pool_max: int = 3,
        pool_timeout: int = 60,
        echo: bool = False,
    ):
        self.url = url
        self.pool_min = pool_min
        self.pool_max = max(pool_max, pool_min)
        self.pool_timeout = pool_timeout
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, cfg=settings) -> "ConnectionPool":
        return cls(
            url=cfg.DATABASE_URL,
            pool_min=cfg.DB_POOL_MIN,
            pool_max=cfg.DB_POOL_MAX,
            pool_timeout=cfg.DB_POOL_TIMEOUT,
            echo=cfg.DB_ECHO,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def initialize(self) -> Engine:
        """Create the engine and its pool once. Safe to call multiple times."""
        engine = self._engine
        if engine is not None:
            return engine

        with self._lock:
            if self._engine is not None:
                return self._engine

            connect_args = {"check_same_thread": False} if self.is_sqlite else {}
            engine = create_engine(
                self.url,
                pool_size=self.pool_min,
                max_overflow=self.pool_max - self.pool_min,
                pool_timeout=self.pool_timeout,
                pool_pre_ping=True,          # Auto-reconnect if DB connection drops
                echo=self.echo,
                connect_args=connect_args,
            )
            if self.is_sqlite:
                event.listen(engine, "connect", _enable_sqlite_foreign_keys)
            self._engine = engine

        logger.info(f"Connection pool started (min={self.pool_min}, max={self.pool_max})")
        return engine

    @property
    def engine(self) -> Engine:
        return self.initialize()

    @property
    def checked_out(self) -> int:
        if self._engine is None:
            return 0
        checkedout = getattr(self._engine.pool, "checkedout", None)
        return checkedout() if checkedout else 0

    @contextmanager
    def connection(self):
        """
        Borrow one connection for a unit of work.
        Commits on success, rolls back on error, always releases the connection.
        """
        with self.engine.begin() as conn:
            yield conn

    def run(self, unit_of_work: Callable[[Connection], T]) -> T:
        """Run unit_of_work(conn) with a borrowed connection and return its result."""
        with self.connection() as conn:
            return unit_of_work(conn)

    def ping(self) -> bool:
        try:
            self.run(lambda conn: conn.execute(text("SELECT 1")))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    def shutdown(self, grace_period: float = 10):
        """
        Drain the pool. Waits up to grace_period seconds for borrowed
        connections to come back before closing everything.
        """
        if self._engine is None:
            return

        deadline = time.monotonic() + grace_period
        while self.checked_out and time.monotonic() < deadline:
            time.sleep(0.1)
        if self.checked_out:
            logger.warning(f"Closing pool with {self.checked_out} connection(s) still in use")

        with self._lock:
            engine, self._engine = self._engine, None
        if engine is not None:
            engine.dispose()
        logger.info("Pool closed")


pool = ConnectionPool.from_settings(settings)


def get_pool() -> ConnectionPool:
    """FastAPI dependency — the process-wide connection pool."""
    return pool
