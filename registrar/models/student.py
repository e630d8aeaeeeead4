from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Boolean, Text, false
from registrar.db.base import Base


class Student(Base):
    __tablename__ = "students"
    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    is_deleted: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True, server_default=false())
