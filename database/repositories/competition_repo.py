"""CRUD operations for the competitions collection."""

from typing import List, Literal, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from models import Competition
from database.converters import competition_from_doc, competition_to_doc

SortField = Literal["date", "entryFee"]


class CompetitionRepositoryDB:
    """Async CRUD for competitions."""

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection = database["competitions"]

    async def list_competitions(
        self,
        *,
        level: Optional[str] = None,
        sort_by: SortField = "date",
        descending: bool = False,
    ) -> List[Competition]:
        """List competitions, optionally filtered by exact level, sorted on one field."""
        query = {"level": level} if level else {}
        cursor = self._collection.find(query).sort(
            sort_by, DESCENDING if descending else ASCENDING
        )
        docs = await cursor.to_list(length=None)
        return [competition_from_doc(d) for d in docs]

    async def get_competition(self, competition_id: ObjectId) -> Optional[Competition]:
        doc = await self._collection.find_one({"_id": competition_id})
        return competition_from_doc(doc) if doc else None

    async def create_competition(self, competition: Competition) -> Competition:
        """Insert a competition. Returns Competition with the store-generated id."""
        result = await self._collection.insert_one(competition_to_doc(competition))
        return competition.model_copy(update={"id": str(result.inserted_id)})

    async def delete_competition(self, competition_id: ObjectId) -> bool:
        """Returns True if a competition was deleted."""
        result = await self._collection.delete_one({"_id": competition_id})
        return result.deleted_count == 1
