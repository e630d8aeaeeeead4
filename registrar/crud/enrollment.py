"""Enrollment transaction manager.

Capacity is reserved with a single conditional UPDATE::

    UPDATE courses SET enrolled = enrolled + 1
    WHERE course_code = :code AND enrolled < max_capacity

The store locks the course row for that statement, so the capacity check and
the increment cannot be split by a concurrent enrollment. The enrollment row
is inserted in the same transaction; if that insert fails the reservation is
rolled back with it.
"""
import logging
import math
from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from registrar.crud.rows import course_from_row, grade_from_value
from registrar.db.session import ConnectionProvider, DatabaseUnavailableError
from registrar.models.course import Course as CourseModel
from registrar.models.enrollment import Enrollment as EnrollmentModel
from registrar.schemas.student import Student

logger = logging.getLogger(__name__)


class EnrollmentManager:
    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    def enroll_student_in_course(self, student_id: str, course_code: str) -> bool:
        student_id = student_id.lower()
        course_code = course_code.lower()

        reserve_slot = (
            update(CourseModel)
            .where(
                CourseModel.course_code == course_code,
                CourseModel.enrolled < CourseModel.max_capacity,
            )
            .values(enrolled=CourseModel.enrolled + 1)
            .execution_options(synchronize_session=False)
        )
        add_enrollment = insert(EnrollmentModel).values(
            student_id=student_id, course_code=course_code, grade=None
        )

        try:
            with self.provider.session() as db:
                try:
                    if db.execute(reserve_slot).rowcount == 0:
                        db.rollback()
                        logger.info(
                            "Course %s is full or does not exist. Student %s not enrolled.",
                            course_code, student_id,
                        )
                        return False
                    db.execute(add_enrollment)
                    db.commit()
                except SQLAlchemyError:
                    db.rollback()
                    raise
        except DatabaseUnavailableError:
            logger.error("Database connection unavailable. Student %s cannot be enrolled.", student_id)
            return False
        except IntegrityError as e:
            logger.warning(
                "Enrollment of student %s in %s rejected: %s", student_id, course_code, e.orig
            )
            return False
        except SQLAlchemyError:
            logger.exception("Error enrolling student with ID '%s'", student_id)
            return False

        logger.info("Enrolled student %s in course %s", student_id, course_code)
        return True

    def populate_enrollments(self, student: Student) -> Student:
        """Fill ``student.enrolled_courses`` from the enrollments table.

        Inner-joined against courses, so an enrollment whose course row is
        gone is skipped. Soft-deleted courses are still listed.
        """
        stmt = (
            select(CourseModel, EnrollmentModel.grade)
            .join(EnrollmentModel, EnrollmentModel.course_code == CourseModel.course_code)
            .where(EnrollmentModel.student_id == student.id.lower())
            .order_by(CourseModel.course_code)
        )
        student.enrolled_courses.clear()
        try:
            with self.provider.session() as db:
                rows = db.execute(stmt).all()
        except DatabaseUnavailableError:
            logger.error("Database connection unavailable. Enrollments cannot be populated.")
            return student
        except SQLAlchemyError:
            logger.exception("Error populating enrollments for student with ID '%s'", student.id)
            return student

        for course_row, grade in rows:
            student.enrolled_courses[course_from_row(course_row)] = grade_from_value(grade)
        return student

    def assign_grade(self, student_id: str, course_code: str, grade: Optional[float]) -> bool:
        if grade is not None and not math.isfinite(grade):
            logger.warning("Rejected non-finite grade %r for student %s", grade, student_id)
            return False

        stmt = (
            update(EnrollmentModel)
            .where(
                EnrollmentModel.student_id == student_id.lower(),
                EnrollmentModel.course_code == course_code.lower(),
            )
            .values(grade=None if grade is None else float(grade))
            .execution_options(synchronize_session=False)
        )
        try:
            with self.provider.session() as db:
                result = db.execute(stmt)
                db.commit()
                return result.rowcount > 0
        except DatabaseUnavailableError:
            logger.error("Database connection unavailable. Grade cannot be assigned.")
        except SQLAlchemyError:
            logger.exception("Error assigning grade for student with ID '%s'", student_id)
        return False
