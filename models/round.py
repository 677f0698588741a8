from datetime import date as Date
from enum import Enum
from typing import List, Optional

from .base import BaseGolfModel


class HoleSelection(str, Enum):
    """Which holes a tournament round is played over."""
    FULL = "18"
    FRONT_NINE = "Front 9"
    BACK_NINE = "Back 9"

    @property
    def hole_numbers(self) -> List[int]:
        if self is HoleSelection.FRONT_NINE:
            return list(range(1, 10))
        if self is HoleSelection.BACK_NINE:
            return list(range(10, 19))
        return list(range(1, 19))

    @property
    def is_full_round(self) -> bool:
        return self is HoleSelection.FULL


class Round(BaseGolfModel):
    """A round of a tournament division, played on one course and tee."""
    id: Optional[str] = None
    num_holes: HoleSelection = HoleSelection.FULL
    course_id: Optional[str] = None
    tee_id: Optional[str] = None
    date: Optional[Date] = None
