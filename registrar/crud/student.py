import logging
from typing import TYPE_CHECKING, List, Optional

from pydantic import ValidationError

from registrar.crud.base import RepositoryBase
from registrar.crud.rows import student_from_row
from registrar.db.session import ConnectionProvider
from registrar.models.student import Student as StudentModel
from registrar.schemas.student import Student, StudentCreate

if TYPE_CHECKING:
    from registrar.crud.enrollment import EnrollmentManager

logger = logging.getLogger(__name__)


class StudentRepository(RepositoryBase[StudentModel]):
    label = "student"

    def __init__(self, provider: ConnectionProvider):
        super().__init__(StudentModel, provider)
        self.enrollments: Optional["EnrollmentManager"] = None

    def attach_enrollments(self, manager: "EnrollmentManager") -> None:
        self.enrollments = manager

    def _to_schema(self, row: StudentModel) -> Student:
        student = student_from_row(row)
        if self.enrollments is not None:
            self.enrollments.populate_enrollments(student)
        return student

    def insert_student(self, student_id: str, name: str) -> bool:
        try:
            data = StudentCreate(id=student_id, name=name)
        except ValidationError as e:
            logger.warning("Rejected student %r: %s", student_id, e.errors(include_url=False))
            return False
        return self._insert(StudentModel(id=data.id, name=data.name), data.id)

    def get_student(self, student_id: str) -> Optional[Student]:
        row = self._get(student_id.lower())
        if row is None:
            return None
        return self._to_schema(row)

    def get_students(self, deleted: bool) -> Optional[List[Student]]:
        rows = self._list(deleted)
        if rows is None:
            return None
        return [self._to_schema(r) for r in rows]

    def delete_restore_student(self, student: Student, delete: bool) -> None:
        self._set_deleted(student.id.lower(), delete)

    def update_student_name(self, student_id: str, new_name: str) -> bool:
        rows = self._update(student_id.lower(), {"name": new_name.strip()})
        return bool(rows)
