"""Conversion between MongoDB documents and Pydantic domain models.

Documents store ``_id`` and references as ObjectIds; models carry them as
hex strings. All mapping between the two lives here.
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId

from models import Competition, Course, User, parse_object_id


def _str_id(value) -> Optional[str]:
    return str(value) if value is not None else None


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes read from the store are UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ================================================================
# Document -> Model (reads)
# ================================================================

def course_from_doc(doc) -> Course:
    """courses document -> Course model."""
    return Course(
        id=_str_id(doc["_id"]),
        name=doc["name"],
        location=doc["location"],
        price_range=doc.get("priceRange", "€€"),
        difficulty_level=doc.get("difficultyLevel", "Intermediate"),
        rating=max(doc.get("rating") or 0, 0),
    )


def competition_from_doc(doc) -> Competition:
    """competitions document -> Competition model."""
    return Competition(
        id=_str_id(doc["_id"]),
        title=doc["title"],
        date=_as_utc(doc["date"]),
        level=doc["level"],
        entry_fee=doc["entryFee"],
        course_id=_str_id(doc["courseId"]),
    )


def user_from_doc(doc) -> User:
    """users document -> User model (password hash kept for auth checks)."""
    return User(
        id=_str_id(doc["_id"]),
        username=doc["username"],
        email=doc["email"],
        password_hash=doc.get("passwordHash"),
        handicap_level=doc.get("handicapLevel", "Beginner"),
        favorites=[str(f) for f in doc.get("favorites", [])],
        created_at=_as_utc(doc.get("createdAt")),
    )


# ================================================================
# Model -> Document (writes)
# ================================================================

def course_to_doc(course: Course) -> dict:
    """Course -> dict for courses INSERT."""
    return {
        "name": course.name,
        "location": course.location,
        "priceRange": course.price_range,
        "difficultyLevel": course.difficulty_level,
        "rating": course.rating,
    }


def competition_to_doc(competition: Competition) -> dict:
    """Competition -> dict for competitions INSERT (courseId stored as ObjectId)."""
    return {
        "title": competition.title,
        "date": competition.date,
        "level": competition.level,
        "entryFee": competition.entry_fee,
        "courseId": parse_object_id(competition.course_id),
    }


def user_to_doc(user: User) -> dict:
    """User -> dict for users INSERT."""
    return {
        "username": user.username,
        "email": user.email,
        "passwordHash": user.password_hash,
        "handicapLevel": user.handicap_level,
        "favorites": [ObjectId(f) for f in user.favorites],
        "createdAt": user.created_at,
    }
