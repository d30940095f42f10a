from datetime import datetime
from typing import Optional

from .base import BaseGolfModel


class Competition(BaseGolfModel):
    """A competition held at a course."""
    id: Optional[str] = None
    title: str
    date: datetime
    level: str
    entry_fee: float
    course_id: str
