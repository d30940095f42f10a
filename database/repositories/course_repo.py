"""CRUD operations for the courses collection."""

from typing import List, Optional, Sequence

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from models import Course
from database.converters import course_from_doc, course_to_doc


class CourseRepositoryDB:
    """Async CRUD for courses."""

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection = database["courses"]

    # ================================================================
    # Read
    # ================================================================

    async def list_courses(self) -> List[Course]:
        """All courses in natural (insertion) order."""
        docs = await self._collection.find({}).to_list(length=None)
        return [course_from_doc(d) for d in docs]

    async def get_course(self, course_id: ObjectId) -> Optional[Course]:
        doc = await self._collection.find_one({"_id": course_id})
        return course_from_doc(doc) if doc else None

    async def get_courses_by_ids(self, course_ids: Sequence[ObjectId]) -> List[Course]:
        """Resolve ids to courses, keeping the order of ``course_ids``.

        Ids with no matching document are skipped.
        """
        if not course_ids:
            return []
        docs = await self._collection.find(
            {"_id": {"$in": list(course_ids)}}
        ).to_list(length=None)
        by_id = {d["_id"]: d for d in docs}
        return [course_from_doc(by_id[cid]) for cid in course_ids if cid in by_id]

    # ================================================================
    # Create
    # ================================================================

    async def create_course(self, course: Course) -> Course:
        """Insert a course. Returns Course with the store-generated id."""
        result = await self._collection.insert_one(course_to_doc(course))
        return course.model_copy(update={"id": str(result.inserted_id)})

    # ================================================================
    # Delete
    # ================================================================

    async def delete_course(self, course_id: ObjectId) -> bool:
        """Returns True if a course was deleted."""
        result = await self._collection.delete_one({"_id": course_id})
        return result.deleted_count == 1
