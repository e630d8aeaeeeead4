# registrar/db/base.py
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import MetaData

naming_convention = {
    "pk": "pk_%(table_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
}

class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=naming_convention)

# import the models so their tables land in Base.metadata
from registrar.models.student import Student  # noqa: E402,F401
from registrar.models.course import Course  # noqa: E402,F401
from registrar.models.enrollment import Enrollment  # noqa: E402,F401
