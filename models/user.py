from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import BaseGolfModel

DEFAULT_HANDICAP_LEVEL = "Beginner"


class User(BaseGolfModel):
    """Represents a golfer account with their favorite courses.

    ``password_hash`` is carried for authentication only and is excluded from
    every serialized form of the model.
    """
    id: Optional[str] = None
    username: str
    email: str
    password_hash: Optional[str] = Field(None, exclude=True, repr=False)
    handicap_level: str = DEFAULT_HANDICAP_LEVEL
    favorites: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
