from database.connection import MongoConnection, db, ensure_indexes
from database.db_manager import DatabaseManager
from database.repositories import CompetitionRepositoryDB, CourseRepositoryDB, UserRepositoryDB
from database.exceptions import DatabaseError, NotFoundError, DuplicateError

__all__ = [
    "MongoConnection",
    "db",
    "ensure_indexes",
    "DatabaseManager",
    "CompetitionRepositoryDB",
    "CourseRepositoryDB",
    "UserRepositoryDB",
    "DatabaseError",
    "NotFoundError",
    "DuplicateError",
]
