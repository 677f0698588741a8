"""API request and response models."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from models.hole import Gender
from models.round import HoleSelection
from scoring.rounds import RoundEntry
from time_entry.validation import HoleTimeMode, TimeEntryMethod

UnsavedHoleTimes = Dict[str, Dict[str, Dict[int, Optional[str]]]]


class CourseActionRequest(BaseModel):
    """A stored course document and one action to apply to it."""
    course: Dict[str, Any]
    action: Dict[str, Any]
    units: Optional[str] = None  # "Imperial" or "Metric" for entered distances
    tees_as_list: bool = False


class TeeRequest(BaseModel):
    course: Dict[str, Any]
    tee: str
    units: str = "Imperial"
    gender: Gender = Gender.MENS


class SGSRequest(BaseModel):
    strokes: int = Field(..., ge=0)
    elapsed_time: Optional[str] = None
    start_time: Optional[str] = None
    finish_time: Optional[str] = None


class SGSResponse(BaseModel):
    sgs: str
    elapsed_time: Optional[str] = None


class RoundSummaryRequest(BaseModel):
    entry: RoundEntry
    gender: Gender = Gender.MENS
    num_holes: HoleSelection = HoleSelection.FULL
    course: Optional[Dict[str, Any]] = None
    tee: Optional[str] = None


class HoleTimesRequest(BaseModel):
    hole_times: Dict[int, Optional[str]] = Field(default_factory=dict)
    start_time: Optional[str] = None
    finish_time: Optional[str] = None
    mode: HoleTimeMode = HoleTimeMode.DURATIONS


class RoundGateRequest(BaseModel):
    tournament: Dict[str, Any]
    user_id: str
    round: str
    division: Optional[str] = None
    entry: Optional[RoundEntry] = None
    mode: HoleTimeMode = HoleTimeMode.NONE


class RoundGateResponse(BaseModel):
    can_enter: bool
    can_save: Optional[bool] = None


class DetectRequest(BaseModel):
    tournament: Optional[Dict[str, Any]] = None
    unsaved_hole_times: Optional[UnsavedHoleTimes] = None


class DetectResponse(BaseModel):
    method: Optional[TimeEntryMethod] = None
    allowed_modes: List[HoleTimeMode]


class ModeChangeRequest(DetectRequest):
    current_mode: HoleTimeMode = HoleTimeMode.NONE
    new_mode: HoleTimeMode
