"""CRUD operations for the users collection."""

from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from models import User
from database.converters import user_from_doc, user_to_doc
from database.exceptions import DuplicateError, NotFoundError


class UserRepositoryDB:
    """Async CRUD for users."""

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection = database["users"]

    # ================================================================
    # Read
    # ================================================================

    async def get_user(self, user_id: ObjectId) -> Optional[User]:
        doc = await self._collection.find_one({"_id": user_id})
        return user_from_doc(doc) if doc else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by (already normalized) email."""
        doc = await self._collection.find_one({"email": email})
        return user_from_doc(doc) if doc else None

    # ================================================================
    # Create
    # ================================================================

    async def create_user(self, user: User) -> User:
        """Insert a user. Returns User with the store-generated id."""
        try:
            result = await self._collection.insert_one(user_to_doc(user))
        except DuplicateKeyError as e:
            raise DuplicateError(f"Email already in use: {user.email}") from e
        return user.model_copy(update={"id": str(result.inserted_id)})

    # ================================================================
    # Favorites
    # ================================================================
    # $addToSet / $pull keep the update idempotent per course id, so two
    # concurrent adds can never store a duplicate.

    async def add_favorite(self, user_id: ObjectId, course_id: ObjectId) -> List[str]:
        """Add a course to favorites. Returns the updated list; NotFoundError if no such user."""
        return await self._update_favorites(user_id, {"$addToSet": {"favorites": course_id}})

    async def remove_favorite(self, user_id: ObjectId, course_id: ObjectId) -> List[str]:
        """Remove a course from favorites. Returns the updated list."""
        return await self._update_favorites(user_id, {"$pull": {"favorites": course_id}})

    async def _update_favorites(self, user_id: ObjectId, update: dict) -> List[str]:
        doc = await self._collection.find_one_and_update(
            {"_id": user_id},
            update,
            projection={"favorites": 1},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFoundError(f"User {user_id} not found")
        return [str(f) for f in doc.get("favorites", [])]
