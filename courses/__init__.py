from .actions import (
    ACTION_TYPES,
    AddTee,
    CourseAction,
    SetCourse,
    SetHasTeeSfLine,
    UpdateCourseInfo,
    UpdateHoleFeature,
    UpdateHoleInfo,
    UpdateSgInfo,
    UpdateSlopeRatingInfo,
    UpdateTeeName,
    parse_action,
)
from .derived import (
    compute_friendliness_rating,
    count_golf_data_complete,
    count_path_data_complete,
    count_poly_data_complete,
    get_path_insertion_point,
    get_poly_insertion_point,
)
from .exceptions import (
    CourseError,
    DuplicateError,
    InvalidFeatureError,
    InvalidFieldError,
    NotFoundError,
    UnknownActionError,
)
from .reducer import apply_course_action, refresh_hole_run_stats

__all__ = [
    "ACTION_TYPES",
    "AddTee",
    "CourseAction",
    "CourseError",
    "DuplicateError",
    "InvalidFeatureError",
    "InvalidFieldError",
    "NotFoundError",
    "SetCourse",
    "SetHasTeeSfLine",
    "UnknownActionError",
    "UpdateCourseInfo",
    "UpdateHoleFeature",
    "UpdateHoleInfo",
    "UpdateSgInfo",
    "UpdateSlopeRatingInfo",
    "UpdateTeeName",
    "apply_course_action",
    "compute_friendliness_rating",
    "count_golf_data_complete",
    "count_path_data_complete",
    "count_poly_data_complete",
    "get_path_insertion_point",
    "get_poly_insertion_point",
    "parse_action",
    "refresh_hole_run_stats",
]
