from enum import Enum
from pydantic import Field, model_validator
from typing import Dict, Optional

from .base import BaseGolfModel
from .tee import Tee


class SpeedgolfPlay(str, Enum):
    """How a course accommodates speedgolf play."""
    ANYTIME = "sgAnytime"
    REGULAR_TEE_TIMES_ONLY = "sgRegularTeeTimesOnly"
    SPECIAL_ARRANGEMENT_ONLY = "sgSpecialArrangementOnly"
    NOT_ALLOWED = "sgNotAllowed"


class Course(BaseGolfModel):
    """Golf course with its tees keyed by tee name (insertion ordered)."""
    id: Optional[str] = None
    name: Optional[str] = None
    short_name: Optional[str] = None
    address: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    phone_number: Optional[str] = None
    website: Optional[str] = None
    maps_url: Optional[str] = None
    num_holes: int = Field(18, ge=1, le=18)
    tees: Dict[str, Tee] = Field(default_factory=dict)

    sg_contact_name: Optional[str] = None
    sg_email: Optional[str] = None
    sg_notes: Optional[str] = None
    sg_play: Optional[SpeedgolfPlay] = None
    sg_membership: bool = False
    sg_round_discount: bool = False
    sg_standing_tee_times: bool = False
    sg_friendliness_rating: int = Field(0, ge=0, le=5)

    @model_validator(mode='after')
    def validate_tee_keys(self):
        """Each tee is stored under its own name."""
        for key, tee in self.tees.items():
            if tee.name != key:
                raise ValueError(f"Tee '{tee.name}' stored under key '{key}'")
        return self

    def get_tee(self, name: str) -> Optional[Tee]:
        """Get a tee by its name."""
        return self.tees.get(name)
