"""Store identifier parsing.

Every id that crosses the HTTP boundary is a plain string. It is turned into a
``bson.ObjectId`` here, exactly once, before it is used in a query.
"""

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


class InvalidIdError(ValueError):
    """Value is not a 24-character hex ObjectId."""


def parse_object_id(value: Any) -> ObjectId:
    """Parse a string id into an ObjectId, raising InvalidIdError on failure."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or len(value) != 24:
        raise InvalidIdError(f"Invalid id: {value!r}")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdError(f"Invalid id: {value!r}") from e


def is_valid_object_id(value: Any) -> bool:
    try:
        parse_object_id(value)
        return True
    except InvalidIdError:
        return False
