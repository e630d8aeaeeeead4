from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator

from registrar.schemas.course import Course


def _normalize_id(value: str) -> str:
    if value is None:
        raise ValueError("Student id is required.")
    sid = str(value).lower()
    if not sid.strip():
        raise ValueError("Student id must not be blank.")
    return sid


class StudentBase(BaseModel):
    id: str
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def _lower_id(cls, v):
        return _normalize_id(v)


class StudentCreate(StudentBase):
    pass


class Student(StudentBase):
    is_deleted: bool = False
    # derived from the enrollments table on read; None means "not graded yet"
    enrolled_courses: Dict[Course, Optional[float]] = Field(default_factory=dict)
