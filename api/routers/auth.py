"""Registration and login."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from starlette.concurrency import run_in_threadpool

from api.config import Settings
from api.dependencies import get_db, get_settings
from api.schemas import AuthResponse, LoginRequest, RegisterRequest
from auth import create_access_token, hash_password, verify_password
from database.db_manager import DatabaseManager
from database.exceptions import DuplicateError
from models import User

logger = logging.getLogger(__name__)

router = APIRouter()

# Same text for unknown email and wrong password.
INVALID_CREDENTIALS = "Invalid email or password"


def _issue_token(settings: Settings, user: User) -> str:
    return create_access_token(
        secret=settings.jwt_secret,
        user_id=user.id,
        expires_in=settings.jwt_expires_in,
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    req: RegisterRequest,
    db: DatabaseManager = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if await db.users.get_user_by_email(req.email):
        raise HTTPException(409, "Email already registered")

    # Hashing is CPU-bound; keep it off the event loop.
    password_hash = await run_in_threadpool(hash_password, req.password)
    user = User(
        username=req.username,
        email=req.email,
        password_hash=password_hash,
        handicap_level=req.handicap_level,
        created_at=datetime.now(timezone.utc),
    )
    try:
        created = await db.users.create_user(user)
    except DuplicateError:
        raise HTTPException(409, "Email already registered")

    logger.info("Registered user %s", created.id)
    return AuthResponse(token=_issue_token(settings, created), user=created)


@router.post("/login", response_model=AuthResponse)
async def login(
    req: LoginRequest,
    db: DatabaseManager = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = await db.users.get_user_by_email(req.email)
    valid = user is not None and await run_in_threadpool(
        verify_password, req.password, user.password_hash
    )
    if not valid:
        raise HTTPException(401, INVALID_CREDENTIALS, headers={"WWW-Authenticate": "Bearer"})

    return AuthResponse(token=_issue_token(settings, user), user=user)
