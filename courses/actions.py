"""Course editing actions.

Each action is a pydantic model keyed by its ``type``. Documents coming from a
client are turned into actions with :func:`parse_action`.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Type

from models.course import Course
from models.point import Point

from .exceptions import UnknownActionError


class CourseAction(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str


class SetCourse(CourseAction):
    type: Literal["SET_COURSE"] = "SET_COURSE"
    payload: Course


class UpdateCourseInfo(CourseAction):
    type: Literal["UPDATE_COURSE_INFO"] = "UPDATE_COURSE_INFO"
    prop_name: str
    prop_val: Any = None


class UpdateSgInfo(CourseAction):
    type: Literal["UPDATE_SG_INFO"] = "UPDATE_SG_INFO"
    prop_name: str
    prop_val: Any = None


class UpdateHoleInfo(CourseAction):
    type: Literal["UPDATE_HOLE_INFO"] = "UPDATE_HOLE_INFO"
    tee: str
    hole_num: int
    prop_name: str
    prop_val: Any = None
    # Converts a user-entered distance (yards or meters) to feet.
    convert_to_ft: Optional[Callable[[float], float]] = Field(None, exclude=True)


class UpdateHoleFeature(CourseAction):
    type: Literal["UPDATE_HOLE_FEATURE"] = "UPDATE_HOLE_FEATURE"
    tee: str
    hole_num: int
    feature_type: str
    feature_coords: Optional[List[Point]] = None
    sampled_path_coords: Optional[List[Point]] = None


class UpdateTeeName(CourseAction):
    type: Literal["UPDATE_TEE_NAME"] = "UPDATE_TEE_NAME"
    prev_tee_name: str
    new_tee_name: str


class AddTee(CourseAction):
    type: Literal["ADD_TEE"] = "ADD_TEE"
    tee_name: str = Field(..., min_length=1)


class SetHasTeeSfLine(CourseAction):
    type: Literal["SET_HAS_TEE_SF_LINE"] = "SET_HAS_TEE_SF_LINE"
    tee: str
    prop_name: str
    has: bool


class UpdateSlopeRatingInfo(CourseAction):
    type: Literal["UPDATE_SLOPE_RATING_INFO"] = "UPDATE_SLOPE_RATING_INFO"
    tee: str
    prop_name: str
    prop_val: Any = None


ACTION_TYPES: Dict[str, Type[CourseAction]] = {
    cls.model_fields["type"].default: cls
    for cls in (
        SetCourse,
        UpdateCourseInfo,
        UpdateSgInfo,
        UpdateHoleInfo,
        UpdateHoleFeature,
        UpdateTeeName,
        AddTee,
        SetHasTeeSfLine,
        UpdateSlopeRatingInfo,
    )
}


def parse_action(data: Mapping[str, Any]) -> CourseAction:
    """Build the action model for a ``{"type": ..., ...}`` mapping."""
    action_type = data.get("type")
    cls = ACTION_TYPES.get(action_type)
    if cls is None:
        raise UnknownActionError(action_type)
    return cls.model_validate(dict(data))
