# registrar/models/__init__.py
# loading the base registers every table on the metadata
from registrar.db.base import Base  # noqa: F401
from registrar.models.student import Student  # noqa: F401
from registrar.models.course import Course  # noqa: F401
from registrar.models.enrollment import Enrollment  # noqa: F401

__all__ = ["Base", "Student", "Course", "Enrollment"]
