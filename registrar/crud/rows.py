"""Row -> entity conversion.

These functions only read attributes off a row-like object (an ORM
instance, a ``Row`` or anything with the same attribute names), so they can
be exercised without a database.
"""
from registrar.schemas.course import Course
from registrar.schemas.student import Student


def course_from_row(row) -> Course:
    return Course(
        course_code=row.course_code,
        name=row.name,
        max_capacity=row.max_capacity,
        enrolled=row.enrolled or 0,
        is_deleted=bool(row.is_deleted),
    )


def student_from_row(row) -> Student:
    return Student(
        id=row.id,
        name=row.name,
        is_deleted=bool(row.is_deleted),
    )


def grade_from_value(value):
    # NULL stays None: "no grade" must not read as 0.0
    return None if value is None else float(value)
