import logging
from typing import Iterator

import pytest
from sqlalchemy import func, select

from registrar.db.session import ConnectionProvider
from registrar.manager import DatabaseManager
from registrar.models.enrollment import Enrollment


@pytest.fixture()
def db_url(tmp_path) -> str:
    """A fresh file-backed SQLite database per test (threads need a real file)."""
    return f"sqlite:///{tmp_path / 'registrar_test.db'}"


@pytest.fixture()
def provider(db_url: str) -> Iterator[ConnectionProvider]:
    provider = ConnectionProvider.from_url(db_url)
    yield provider
    provider.dispose()


@pytest.fixture()
def unavailable_provider(tmp_path) -> Iterator[ConnectionProvider]:
    """Points at a directory that does not exist, so every checkout fails."""
    provider = ConnectionProvider.from_url(f"sqlite:///{tmp_path / 'missing' / 'nowhere.db'}")
    yield provider
    provider.dispose()


@pytest.fixture()
def manager(provider: ConnectionProvider) -> DatabaseManager:
    return DatabaseManager(provider=provider)


@pytest.fixture()
def offline_manager(unavailable_provider: ConnectionProvider) -> DatabaseManager:
    return DatabaseManager(provider=unavailable_provider)


@pytest.fixture()
def students(manager: DatabaseManager):
    return manager.students


@pytest.fixture()
def courses(manager: DatabaseManager):
    return manager.courses


@pytest.fixture()
def enrollments(manager: DatabaseManager):
    return manager.enrollments


@pytest.fixture()
def count_enrollments(provider: ConnectionProvider):
    """Count enrollment rows, optionally for one course."""

    def _count(course_code: str | None = None) -> int:
        stmt = select(func.count()).select_from(Enrollment)
        if course_code is not None:
            stmt = stmt.where(Enrollment.course_code == course_code)
        with provider.session() as db:
            return db.scalar(stmt)

    return _count


@pytest.fixture()
def restore_logging():
    """Put the root, registrar and sqlalchemy loggers back after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    saved = {name: logging.getLogger(name).level for name in ("registrar", "sqlalchemy")}
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in saved.items():
        logging.getLogger(name).setLevel(lvl)
