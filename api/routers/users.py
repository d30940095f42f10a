"""User profile endpoints. Both are self-only."""

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_db, require_self
from api.schemas import FavoriteUpdateRequest, FavoritesResponse, UserProfileResponse
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from models import parse_object_id

router = APIRouter()


@router.get("/{id}", response_model=UserProfileResponse)
async def get_user(
    user_id: ObjectId = Depends(require_self),
    db: DatabaseManager = Depends(get_db),
):
    user = await db.users.get_user(user_id)
    if not user:
        raise HTTPException(404, "User not found")

    favorite_ids = [parse_object_id(f) for f in user.favorites]
    courses = await db.courses.get_courses_by_ids(favorite_ids)
    return UserProfileResponse(**user.model_dump(), favorite_courses=courses)


@router.put("/{id}/favorites", response_model=FavoritesResponse)
async def update_favorites(
    req: FavoriteUpdateRequest,
    user_id: ObjectId = Depends(require_self),
    db: DatabaseManager = Depends(get_db),
):
    """Add or remove one favorite course. Both actions are idempotent."""
    course_id = parse_object_id(req.course_id)
    try:
        if req.action == "add":
            favorites = await db.users.add_favorite(user_id, course_id)
        else:
            favorites = await db.users.remove_favorite(user_id, course_id)
    except NotFoundError:
        raise HTTPException(404, "User not found")
    return FavoritesResponse(favorites=favorites)
