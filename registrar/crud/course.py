import logging
from typing import List, Optional

from pydantic import ValidationError

from registrar.crud.base import RepositoryBase
from registrar.crud.rows import course_from_row
from registrar.db.session import ConnectionProvider
from registrar.models.course import Course as CourseModel
from registrar.schemas.course import Course, CourseCreate

logger = logging.getLogger(__name__)


class CourseRepository(RepositoryBase[CourseModel]):
    label = "course"

    def __init__(self, provider: ConnectionProvider):
        super().__init__(CourseModel, provider)

    def insert_course(self, course_code: str, name: str, max_capacity: int) -> bool:
        try:
            data = CourseCreate(course_code=course_code, name=name, max_capacity=max_capacity)
        except ValidationError as e:
            logger.warning("Rejected course %r: %s", course_code, e.errors(include_url=False))
            return False
        obj = CourseModel(course_code=data.course_code, name=data.name, max_capacity=data.max_capacity)
        return self._insert(obj, data.course_code)

    def get_course(self, course_code: str) -> Optional[Course]:
        row = self._get(course_code.lower())
        return course_from_row(row) if row is not None else None

    def get_courses(self, deleted: bool) -> Optional[List[Course]]:
        rows = self._list(deleted)
        if rows is None:
            return None
        return [course_from_row(r) for r in rows]

    def delete_restore_course(self, course: Course, delete: bool) -> None:
        self._set_deleted(course.course_code.lower(), delete)

    def update_course_name(self, course_code: str, new_name: str) -> bool:
        rows = self._update(course_code.lower(), {"name": new_name.strip()})
        return bool(rows)

    def update_course_max_capacity(self, course_code: str, max_capacity: int) -> bool:
        # shrinking below the current enrolled count is allowed; new
        # enrollments are simply refused until there is headroom again
        if max_capacity <= 0:
            logger.warning("Rejected max capacity %s for course %s", max_capacity, course_code)
            return False
        rows = self._update(course_code.lower(), {"max_capacity": max_capacity})
        return bool(rows)
