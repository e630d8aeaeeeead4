# registrar/db/session.py
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import InterfaceError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session, sessionmaker

from registrar.core.config import Settings


class DatabaseUnavailableError(Exception):
    """Raised when no usable connection can be checked out of the pool."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


def _normalize(url: str) -> str:
    if url and url.startswith("jdbc:"):
        url = url[len("jdbc:"):]
    if url and url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)
    if url and url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def build_engine(
    url: str,
    *,
    pool_size: int = 10,
    pool_timeout: int = 10,
    pool_recycle: int = 1800,
    echo: bool = False,
) -> Engine:
    url = _normalize(url)
    kwargs = {"pool_pre_ping": True, "echo": echo, "future": True}
    if make_url(url).get_backend_name() == "sqlite":
        # sqlite writers serialize on the file lock; wait instead of failing fast
        kwargs["connect_args"] = {"timeout": 30, "check_same_thread": False}
    else:
        kwargs.update(
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
        )
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class ConnectionProvider:
    """Hands out one pooled connection per operation.

    ``session()`` checks the connection out eagerly so an unreachable store
    surfaces as :class:`DatabaseUnavailableError` before any statement runs.
    The session is always closed on exit, which returns the connection to the
    pool and rolls back anything left uncommitted.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessionmaker = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )

    @classmethod
    def from_url(cls, url: str, **pool_options) -> "ConnectionProvider":
        return cls(build_engine(url, **pool_options))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionProvider":
        return cls.from_url(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            echo=settings.DB_ECHO,
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self._sessionmaker()
        try:
            db.connection()
        except (OperationalError, InterfaceError, PoolTimeoutError) as e:
            db.close()
            raise DatabaseUnavailableError("Failed to get database connection", e) from e
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
