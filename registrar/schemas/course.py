from pydantic import BaseModel, Field, field_validator


def _normalize_code(value: str) -> str:
    if value is None:
        raise ValueError("Course code is required.")
    code = str(value).lower()
    if not code.strip():
        raise ValueError("Course code must not be blank.")
    return code


class CourseBase(BaseModel):
    course_code: str
    name: str

    @field_validator("course_code", mode="before")
    @classmethod
    def _lower_code(cls, v):
        return _normalize_code(v)


class CourseCreate(CourseBase):
    max_capacity: int = Field(gt=0)


class Course(CourseBase):
    max_capacity: int
    enrolled: int = 0
    is_deleted: bool = False

    @property
    def remaining_slots(self) -> int:
        return self.max_capacity - self.enrolled

    # identity is the course code, so a Course can key a grade map
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.course_code == other.course_code

    def __hash__(self) -> int:
        return hash(self.course_code)
