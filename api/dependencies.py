"""FastAPI dependencies: store access, settings, the bearer-token gate and id parsing."""

import logging

import jwt
from bson import ObjectId
from fastapi import Depends, HTTPException, Request

from api.config import Settings
from auth import decode_access_token
from database.db_manager import DatabaseManager
from models import InvalidIdError, parse_object_id

logger = logging.getLogger(__name__)


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def unauthorized() -> HTTPException:
    # One message for every auth failure; callers never learn which check failed.
    return HTTPException(401, "Unauthorized", headers={"WWW-Authenticate": "Bearer"})


def get_current_user_id(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> str:
    """Authenticate the request from ``Authorization: Bearer <token>``.

    Returns the token subject (the user id) and also stores it on
    ``request.state.user_id``.
    """
    header = request.headers.get("Authorization") or ""
    token = header.replace("Bearer ", "", 1).strip()
    if not token:
        raise unauthorized()

    try:
        payload = decode_access_token(token=token, secret=settings.jwt_secret)
    except jwt.InvalidTokenError as e:
        logger.debug("Rejected bearer token: %s", type(e).__name__)
        raise unauthorized()

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise unauthorized()

    request.state.user_id = subject
    return subject


def object_id_path(id: str) -> ObjectId:
    """Parse the ``{id}`` path parameter before any lookup."""
    try:
        return parse_object_id(id)
    except InvalidIdError:
        raise HTTPException(400, "Invalid id")


def require_self(
    user_id: str = Depends(get_current_user_id),
    target_id: ObjectId = Depends(object_id_path),
) -> ObjectId:
    """Self-only gate: the path id must be the authenticated user's own id."""
    if str(target_id) != user_id.lower():
        raise unauthorized()
    return target_id
