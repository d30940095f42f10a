import re
from typing import Optional

from pydantic import Field

from .base import BaseGolfModel

LEGEND_PATTERN = re.compile(r"augusta", re.IGNORECASE)
LEGEND_MIN_RATING = 4.9
LEGEND_MARKER = "🏌️ Legend detected"


class Course(BaseGolfModel):
    """Golf course listed in the discovery app."""
    id: Optional[str] = None
    name: str
    location: str
    price_range: str = "€€"
    difficulty_level: str = "Intermediate"
    rating: float = Field(0, ge=0)

    @property
    def is_legend(self) -> bool:
        """Whether the name matches the Augusta easter egg (case-insensitive)."""
        return bool(LEGEND_PATTERN.search(self.name))

    def apply_legend_floor(self) -> bool:
        """Floor the rating of legendary courses. Returns True if the course is one."""
        if not self.is_legend:
            return False
        self.rating = max(self.rating, LEGEND_MIN_RATING)
        return True
