from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import REAL, ForeignKey, Text
from registrar.db.base import Base

class Enrollment(Base):
    __tablename__ = "enrollments"
    student_id: Mapped[str] = mapped_column(
        Text, ForeignKey("students.id", ondelete="CASCADE"), primary_key=True
    )
    course_code: Mapped[str] = mapped_column(
        Text, ForeignKey("courses.course_code", ondelete="CASCADE"), primary_key=True
    )
    grade: Mapped[Optional[float]] = mapped_column(REAL, nullable=True)
