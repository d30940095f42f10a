from motor.motor_asyncio import AsyncIOMotorDatabase

from database.repositories import (
    CompetitionRepositoryDB,
    CourseRepositoryDB,
    UserRepositoryDB,
)


class DatabaseManager:
    """Groups the repositories that share one Motor database handle.

    Usage:
        database = await db.initialize(uri, "golfdb")
        manager = DatabaseManager(database)
        course = await manager.courses.get_course(course_id)
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        self.courses = CourseRepositoryDB(database)
        self.competitions = CompetitionRepositoryDB(database)
        self.users = UserRepositoryDB(database)
