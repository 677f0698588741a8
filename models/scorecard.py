from pydantic import Field
from typing import Dict, List, Optional

from .base import BaseGolfModel

NO_TIME = "--:--"


class HoleScore(BaseGolfModel):
    """A player's strokes and time on a single hole."""
    hole: int = Field(..., ge=1, le=18)
    strokes: Optional[int] = Field(None, ge=1, le=99)
    hole_time: Optional[str] = None


class ScoreCard(BaseGolfModel):
    """One player's saved card for one round."""
    round_id: Optional[str] = None
    scores: List[HoleScore] = Field(default_factory=list)
    start_time: Optional[str] = None
    finish_time: Optional[str] = None
    sgs: Optional[str] = None
    total: Optional[int] = None

    def get_hole_score(self, hole: int) -> Optional[HoleScore]:
        for score in self.scores:
            if score.hole == hole:
                return score
        return None

    def strokes_by_hole(self) -> Dict[int, int]:
        """Entered strokes keyed by hole number; holes without strokes are absent."""
        return {s.hole: s.strokes for s in self.scores if s.strokes is not None}

    def hole_times_by_hole(self) -> Dict[int, str]:
        return {s.hole: s.hole_time for s in self.scores if s.hole_time}

    @property
    def has_start_time(self) -> bool:
        return bool(self.start_time) and self.start_time != NO_TIME

    @property
    def has_finish_time(self) -> bool:
        return bool(self.finish_time) and self.finish_time != NO_TIME
