"""Competition API endpoints."""

import logging
from typing import List, Literal, Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_current_user_id, get_db, object_id_path
from api.schemas import CreateCompetitionRequest, MessageResponse
from database.db_manager import DatabaseManager
from models import Competition

logger = logging.getLogger(__name__)

router = APIRouter()

# "price" is the public name for sorting on entryFee.
_SORT_FIELDS = {"date": "date", "price": "entryFee", "entryFee": "entryFee"}


@router.get("", response_model=List[Competition])
async def list_competitions(
    level: Optional[str] = Query(None),
    sort: Literal["date", "price", "entryFee"] = Query("date"),
    order: Literal["asc", "desc"] = Query("asc"),
    db: DatabaseManager = Depends(get_db),
):
    return await db.competitions.list_competitions(
        level=level or None,
        sort_by=_SORT_FIELDS[sort],
        descending=order == "desc",
    )


@router.get("/{id}", response_model=Competition)
async def get_competition(
    competition_id: ObjectId = Depends(object_id_path),
    db: DatabaseManager = Depends(get_db),
):
    competition = await db.competitions.get_competition(competition_id)
    if not competition:
        raise HTTPException(404, "Competition not found")
    return competition


@router.post("", response_model=Competition, status_code=201)
async def create_competition(
    req: CreateCompetitionRequest,
    user_id: str = Depends(get_current_user_id),
    db: DatabaseManager = Depends(get_db),
):
    """Create a competition. The course id is checked for shape, not existence."""
    competition = Competition(**req.model_dump())
    created = await db.competitions.create_competition(competition)
    logger.info("Competition %s created by user %s", created.id, user_id)
    return created


@router.delete("/{id}", response_model=MessageResponse)
async def delete_competition(
    user_id: str = Depends(get_current_user_id),
    competition_id: ObjectId = Depends(object_id_path),
    db: DatabaseManager = Depends(get_db),
):
    deleted = await db.competitions.delete_competition(competition_id)
    if not deleted:
        raise HTTPException(404, "Competition not found")
    logger.info("Competition %s deleted by user %s", competition_id, user_id)
    return MessageResponse(message="Deleted")
