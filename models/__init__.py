from .base import BaseGolfModel
from .competition import Competition
from .course import Course
from .identifiers import InvalidIdError, is_valid_object_id, parse_object_id
from .user import User

__all__ = [
    "BaseGolfModel",
    "Competition",
    "Course",
    "User",
    "InvalidIdError",
    "is_valid_object_id",
    "parse_object_id",
]
