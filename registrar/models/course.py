from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Boolean, Integer, Text, false, text
from registrar.db.base import Base

class Course(Base):
    __tablename__ = "courses"
    course_code: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    # only the enrollment transaction moves this counter
    enrolled: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, server_default=text("0"))
    is_deleted: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True, server_default=false())
