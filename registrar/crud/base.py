import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from registrar.db.base import Base
from registrar.db.session import ConnectionProvider, DatabaseUnavailableError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class RepositoryBase(Generic[ModelType]):
    """Single-statement operations shared by the student and course tables.

    Every call checks out its own connection and collapses store failures
    into a failure value: False for writes, None for lookups. Nothing from
    SQLAlchemy escapes to the caller.
    """

    label = "row"

    def __init__(self, model: Type[ModelType], provider: ConnectionProvider):
        self.model = model
        self.provider = provider
        self.pk = inspect(model).primary_key[0]

    def _insert(self, obj: ModelType, key: str) -> bool:
        try:
            with self.provider.session() as db:
                db.add(obj)
                db.commit()
        except DatabaseUnavailableError:
            logger.error("Database connection unavailable. %s %s cannot be inserted.", self.label, key)
            return False
        except IntegrityError:
            logger.warning("%s %s already exists in the database.", self.label.capitalize(), key)
            return False
        except SQLAlchemyError:
            logger.exception("Error inserting %s: %s", self.label, key)
            return False
        logger.info("Inserted %s: %s", self.label, key)
        return True

    def _get(self, key: str) -> Optional[ModelType]:
        try:
            with self.provider.session() as db:
                return db.scalar(select(self.model).where(self.pk == key))
        except DatabaseUnavailableError:
            logger.error("Database connection unavailable. %s %s cannot be retrieved.", self.label, key)
        except SQLAlchemyError:
            logger.exception("Error getting %s: %s", self.label, key)
        return None

    def _list(self, deleted: bool) -> Optional[List[ModelType]]:
        stmt = select(self.model).where(self.model.is_deleted == deleted).order_by(self.pk)
        try:
            with self.provider.session() as db:
                return list(db.scalars(stmt).all())
        except DatabaseUnavailableError:
            logger.error("Database connection unavailable. %ss cannot be retrieved.", self.label)
            return None
        except SQLAlchemyError:
            logger.exception("Error getting %ss", self.label)
            return []

    def _update(self, key: str, values: Dict[str, Any]) -> Optional[int]:
        """UPDATE ... WHERE <pk> = key; the affected row count, or None on failure."""
        stmt = (
            update(self.model)
            .where(self.pk == key)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            with self.provider.session() as db:
                result = db.execute(stmt)
                db.commit()
                return result.rowcount
        except DatabaseUnavailableError:
            logger.error("Database connection unavailable. %s %s cannot be updated.", self.label, key)
        except SQLAlchemyError:
            logger.exception("Error updating %s with ID '%s'", self.label, key)
        return None

    def _set_deleted(self, key: str, delete: bool) -> None:
        rows = self._update(key, {"is_deleted": delete})
        if rows == 0:
            logger.info("%s %s does not exist in the database.", self.label.capitalize(), key)
