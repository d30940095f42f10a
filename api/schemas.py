"""Request bodies and API-specific response models."""

import math
from datetime import datetime
from typing import Annotated, Any, List, Literal, Optional

from pydantic import Field, StringConstraints, field_validator

from models import BaseGolfModel, Course, User, is_valid_object_id
from models.user import DEFAULT_HANDICAP_LEVEL

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]


def _coerce_rating(value: Any) -> float:
    """Anything that is not a finite, non-negative number becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _check_object_id(value: str) -> str:
    if not is_valid_object_id(value):
        raise ValueError("must be a valid id")
    return value


# ================================================================
# Requests
# ================================================================

class CreateCourseRequest(BaseGolfModel):
    name: NonEmptyStr
    location: NonEmptyStr
    price_range: TrimmedStr = "€€"
    difficulty_level: TrimmedStr = "Intermediate"
    rating: float = 0

    @field_validator("name", "location", "price_range", "difficulty_level", mode="before")
    @classmethod
    def stringify(cls, v, info):
        if v is None and info.field_name in ("price_range", "difficulty_level"):
            return cls.model_fields[info.field_name].default
        # Numbers are stored as their text, e.g. a course named 18.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("rating", mode="before")
    @classmethod
    def coerce_rating(cls, v):
        return _coerce_rating(v)


class CreateCompetitionRequest(BaseGolfModel):
    title: NonEmptyStr
    date: datetime
    level: NonEmptyStr
    entry_fee: float = Field(allow_inf_nan=False)
    course_id: NonEmptyStr

    @field_validator("course_id")
    @classmethod
    def validate_course_id(cls, v):
        return _check_object_id(v)

    @field_validator("entry_fee", mode="before")
    @classmethod
    def reject_bool_fee(cls, v):
        if isinstance(v, bool):
            raise ValueError("must be a number")
        return v


class RegisterRequest(BaseGolfModel):
    username: NonEmptyStr
    email: NonEmptyStr
    password: str = Field(min_length=1)
    handicap_level: NonEmptyStr = DEFAULT_HANDICAP_LEVEL

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class LoginRequest(BaseGolfModel):
    email: NonEmptyStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class FavoriteUpdateRequest(BaseGolfModel):
    course_id: NonEmptyStr
    action: Literal["add", "remove"]

    @field_validator("course_id")
    @classmethod
    def validate_course_id(cls, v):
        return _check_object_id(v)


# ================================================================
# Responses
# ================================================================

class MessageResponse(BaseGolfModel):
    message: str


class CreatedCourseResponse(Course):
    """Created course, plus the easter-egg marker for legendary names."""
    easter_egg: Optional[str] = None


class UserProfileResponse(User):
    """Public profile with favorite ids resolved to course documents."""
    favorite_courses: List[Course] = Field(default_factory=list)


class FavoritesResponse(BaseGolfModel):
    favorites: List[str]


class AuthResponse(BaseGolfModel):
    token: str
    user: User
