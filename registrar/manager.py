import logging
from typing import List, Optional

from registrar.core.config import Settings, settings as default_settings
from registrar.core.logging import setup_logging
from registrar.crud.course import CourseRepository
from registrar.crud.enrollment import EnrollmentManager
from registrar.crud.student import StudentRepository
from registrar.db.init_db import ensure_tables_exist
from registrar.db.session import ConnectionProvider
from registrar.schemas import Course, Student

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Wires the repositories to one connection provider.

    Construction makes sure the tables exist (failure is logged, not raised).
    Use as a context manager, or call :meth:`close`, to release the pool.
    """

    def __init__(self, provider: Optional[ConnectionProvider] = None, settings: Optional[Settings] = None):
        if provider is None:
            # standalone use: this manager owns the process setup
            cfg = settings or default_settings
            setup_logging(cfg.LOG_LEVEL)
            provider = ConnectionProvider.from_settings(cfg)
        self.provider = provider
        self.courses = CourseRepository(self.provider)
        self.enrollments = EnrollmentManager(self.provider)
        self.students = StudentRepository(self.provider)
        self.students.attach_enrollments(self.enrollments)
        self.schema_ready = ensure_tables_exist(self.provider)

    def __enter__(self) -> "DatabaseManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.provider.dispose()

    # students
    def insert_student(self, student_id: str, name: str) -> bool:
        return self.students.insert_student(student_id, name)

    def get_student(self, student_id: str) -> Optional[Student]:
        return self.students.get_student(student_id)

    def get_students(self, deleted: bool) -> Optional[List[Student]]:
        return self.students.get_students(deleted)

    def delete_restore_student(self, student: Student, delete: bool) -> None:
        self.students.delete_restore_student(student, delete)

    def update_student_name(self, student_id: str, new_name: str) -> bool:
        return self.students.update_student_name(student_id, new_name)

    # courses
    def insert_course(self, course_code: str, name: str, max_capacity: int) -> bool:
        return self.courses.insert_course(course_code, name, max_capacity)

    def get_course(self, course_code: str) -> Optional[Course]:
        return self.courses.get_course(course_code)

    def get_courses(self, deleted: bool) -> Optional[List[Course]]:
        return self.courses.get_courses(deleted)

    def delete_restore_course(self, course: Course, delete: bool) -> None:
        self.courses.delete_restore_course(course, delete)

    def update_course_name(self, course_code: str, new_name: str) -> bool:
        return self.courses.update_course_name(course_code, new_name)

    def update_course_max_capacity(self, course_code: str, max_capacity: int) -> bool:
        return self.courses.update_course_max_capacity(course_code, max_capacity)

    # enrollments
    def enroll_student_in_course(self, student_id: str, course_code: str) -> bool:
        return self.enrollments.enroll_student_in_course(student_id, course_code)

    def assign_grade(self, student_id: str, course_code: str, grade: Optional[float]) -> bool:
        return self.enrollments.assign_grade(student_id, course_code, grade)
