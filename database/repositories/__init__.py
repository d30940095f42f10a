from .competition_repo import CompetitionRepositoryDB
from .course_repo import CourseRepositoryDB
from .user_repo import UserRepositoryDB

__all__ = ["CompetitionRepositoryDB", "CourseRepositoryDB", "UserRepositoryDB"]
