from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling
from mysql.connector.errors import PoolError

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS

    @classmethod
    def from_dict(
        cls,
        db_config: dict,
        *,
        pool_size: int = DEFAULT_POOL_SIZE,
        pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS,
    ) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_tracker")),
            pool_size=int(pool_size),
            pool_timeout=float(pool_timeout),
        )

    def describe(self) -> str:
        """user@host:port/db, without the password."""
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class _BorrowedConnection:
    """Pooled connection that frees its slot when closed."""

    def __init__(self, cnx, slots: threading.BoundedSemaphore):
        self._cnx = cnx
        self._slots = slots
        self._released = False

    def __getattr__(self, name):
        return getattr(self._cnx, name)

    def close(self) -> None:
        if self._released:
            return
        self._released = True
        try:
            self._cnx.close()
        finally:
            self._slots.release()


class DatabaseConnection:
    """Pooled MySQL connection factory.

    Lifecycle: open() -> connect() per operation -> close(). Connections handed
    out by connect() go back to the pool when closed.

    The driver's pool fails at once when every connection is borrowed, so
    connect() waits up to pool_timeout seconds for one to be returned.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._slots = threading.BoundedSemaphore(config.pool_size)

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> "DatabaseConnection":
        if self._pool is None:
            self._pool = pooling.MySQLConnectionPool(
                pool_name="attendance_tracker",
                pool_size=self._config.pool_size,
                pool_reset_session=True,
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
            logger.info("Opened MySQL pool (size=%s) for %s", self._config.pool_size, self._config.describe())
        return self

    def connect(self):
        if self._pool is None:
            raise RuntimeError("Database pool is not open")
        if not self._slots.acquire(timeout=self._config.pool_timeout):
            logger.warning("No pooled connection freed within %ss", self._config.pool_timeout)
            raise PoolError("Timed out waiting for a pooled connection")
        try:
            cnx = self._pool.get_connection()
        except Exception:
            self._slots.release()
            raise
        return _BorrowedConnection(cnx, self._slots)

    def close(self) -> None:
        if self._pool is None:
            return
        # mysql-connector-python 8.x and 9.x have no public pool close;
        # _remove_connections() closes the idle ones, borrowed ones close on return.
        self._pool._remove_connections()
        self._pool = None
        logger.info("Closed MySQL pool for %s", self._config.describe())
