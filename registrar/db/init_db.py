# registrar/db/init_db.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from registrar.db.base import Base
from registrar.db.session import ConnectionProvider, DatabaseUnavailableError

logger = logging.getLogger(__name__)

TABLES = ("students", "courses", "enrollments")


def ensure_tables_exist(provider: ConnectionProvider) -> bool:
    """Create the students, courses and enrollments tables if missing.

    Safe to run on every start. Failures are logged and reported as False;
    later operations against a missing table fail on their own.
    """
    tables = [Base.metadata.tables[name] for name in TABLES]
    try:
        with provider.session() as db:
            Base.metadata.create_all(bind=db.connection(), tables=tables, checkfirst=True)
            db.commit()
    except DatabaseUnavailableError:
        logger.exception("Database connection unavailable. Tables cannot be created.")
        return False
    except SQLAlchemyError:
        logger.exception("Failed to create tables")
        return False
    return True
