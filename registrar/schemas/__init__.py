from registrar.schemas.course import Course, CourseCreate
from registrar.schemas.student import Student, StudentCreate

__all__ = ["Course", "CourseCreate", "Student", "StudentCreate"]
