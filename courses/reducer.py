"""Copy-on-write reducer for course documents.

``apply_course_action`` returns a new course with one action applied and every
derived tee field brought back in line with the hole list. The input course is
never modified.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from config import DEFAULT_SETTINGS, ParSettings
from geometry.run_stats import compute_hole_running_stats, gendered_time_par
from geometry.sampling import compute_sampled_path
from models.course import Course, SpeedgolfPlay
from models.hole import Gender, Hole, PathType, PolyType
from models.tee import Tee

from . import derived
from .actions import (
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
from .exceptions import (
    DuplicateError,
    InvalidFeatureError,
    InvalidFieldError,
    NotFoundError,
    UnknownActionError,
)

logger = logging.getLogger(__name__)

SG_FIELDS = {
    "sg_contact_name",
    "sg_email",
    "sg_notes",
    "sg_play",
    "sg_membership",
    "sg_round_discount",
    "sg_standing_tee_times",
}
RATING_FACTORS = {"sg_play", "sg_membership", "sg_round_discount", "sg_standing_tee_times"}
DISTANCE_FIELDS = {"golf_distance", "run_distance"}
SLOPE_RATING_FIELDS = {"mens_slope", "womens_slope", "mens_rating", "womens_rating"}
FEATURE_FIELDS = {p.field_name for p in PathType} | {p.sampled_field_name for p in PathType} | {
    p.field_name for p in PolyType
}
SF_LINE_FIELDS = {"has_start_line", "has_finish_line"}


def _blank_to_none(value: Any) -> Any:
    return None if value == "" else value


def _get_tee(course: Course, name: str) -> Tee:
    tee = course.get_tee(name)
    if tee is None:
        raise NotFoundError(f"Tee '{name}' not found")
    return tee


def _get_hole(tee: Tee, hole_num: int) -> Hole:
    hole = tee.get_hole(hole_num)
    if hole is None:
        raise NotFoundError(f"Hole {hole_num} not found on tee '{tee.name}'")
    return hole


def _set(model, field: str, value: Any) -> bool:
    """Assign with validation. A rejected value leaves the model unchanged."""
    error = model.update_field(field, value)
    if error:
        logger.warning("Rejected %s=%r: %s", field, value, error)
        return False
    return True


def _resolve_feature(feature_type: str) -> Union[PathType, PolyType]:
    for enum in (PathType, PolyType):
        for member in enum:
            if feature_type in (member.value, member.field_name):
                return member
    raise InvalidFeatureError(f"Unknown hole feature '{feature_type}'")


def refresh_hole_run_stats(tee: Tee, hole: Hole, settings: ParSettings) -> None:
    """Recompute a hole's running distances and time pars from its sampled paths.

    The first hole runs from the start line when the tee has one and the
    start path is drawn; the last hole adds the finish path under the same
    conditions. On a one-hole tee only the first-hole rule applies and the
    finish path is not run. Every other segment before the golf path is a
    transition.
    """
    is_first = hole.number == 1
    is_last = hole.number == len(tee.holes)
    use_start = is_first and tee.has_start_line and hole.start_path is not None
    use_finish = is_last and not is_first and tee.has_finish_line and hole.finish_path is not None

    if is_first:
        lead_in = hole.start_path_sampled if use_start else None
    else:
        lead_in = hole.transition_path_sampled

    stats = compute_hole_running_stats(
        lead_in,
        hole.golf_path_sampled,
        hole.womens_stroke_par,
        hole.mens_stroke_par,
        finish=hole.finish_path_sampled if use_finish else None,
        settings=settings,
    )
    hole.run_distance = stats.run_distance
    if use_start:
        hole.start_run_distance = stats.trans_path_run_distance
    else:
        hole.trans_run_distance = stats.trans_path_run_distance
    hole.golf_run_distance = stats.golf_path_run_distance
    if use_finish:
        hole.finish_run_distance = stats.finish_path_run_distance
    hole.mens_time_par = stats.mens_time_par
    hole.womens_time_par = stats.womens_time_par


def _refresh_path_fields(tee: Tee) -> None:
    tee.num_holes_path_data_complete = derived.count_path_data_complete(tee.holes)
    tee.path_insertion_point = derived.get_path_insertion_point(
        tee.has_start_line, tee.has_finish_line, tee.holes
    )


def _refresh_poly_fields(tee: Tee) -> None:
    tee.num_holes_poly_data_complete = derived.count_poly_data_complete(tee.holes)
    tee.poly_insertion_point = derived.get_poly_insertion_point(tee.holes)


# ==================== Handlers ====================


def _set_course(course: Course, action: SetCourse, settings: ParSettings) -> Course:
    return action.payload.model_copy(deep=True)


def _update_course_info(course: Course, action: UpdateCourseInfo, settings: ParSettings) -> Course:
    field = Course.resolve_field(action.prop_name)
    if field is None or field == "tees" or field in SG_FIELDS or field == "sg_friendliness_rating":
        raise InvalidFieldError(f"'{action.prop_name}' is not a course info field")
    _set(course, field, _blank_to_none(action.prop_val))
    return course


def _update_sg_info(course: Course, action: UpdateSgInfo, settings: ParSettings) -> Course:
    field = Course.resolve_field(action.prop_name)
    if field not in SG_FIELDS:
        raise InvalidFieldError(f"'{action.prop_name}' is not a speedgolf info field")
    value = _blank_to_none(action.prop_val)
    if field in RATING_FACTORS - {"sg_play"} and value is None:
        value = False
    if not _set(course, field, value):
        return course

    if course.sg_play == SpeedgolfPlay.NOT_ALLOWED:
        course.sg_membership = False
        course.sg_round_discount = False
        course.sg_standing_tee_times = False
        course.sg_friendliness_rating = 0
    elif field in RATING_FACTORS:
        course.sg_friendliness_rating = derived.compute_friendliness_rating(course)
    return course


def _update_hole_info(course: Course, action: UpdateHoleInfo, settings: ParSettings) -> Course:
    tee = _get_tee(course, action.tee)
    hole = _get_hole(tee, action.hole_num)
    field = Hole.resolve_field(action.prop_name)
    if field is None or field == "number" or field in FEATURE_FIELDS:
        raise InvalidFieldError(f"'{action.prop_name}' is not a hole info field")

    value = _blank_to_none(action.prop_val)
    if field in DISTANCE_FIELDS and value is not None:
        convert = action.convert_to_ft or float
        try:
            value = convert(float(value))
        except (TypeError, ValueError):
            logger.warning("Rejected %s=%r: not a number", field, action.prop_val)
            return course
    if not _set(hole, field, value):
        return course

    if field == "run_distance":
        hole.mens_time_par = gendered_time_par(hole.run_distance, hole.mens_stroke_par, Gender.MENS, settings)
        hole.womens_time_par = gendered_time_par(hole.run_distance, hole.womens_stroke_par, Gender.WOMENS, settings)
    elif field == "mens_stroke_par":
        hole.mens_time_par = gendered_time_par(hole.run_distance, hole.mens_stroke_par, Gender.MENS, settings)
    elif field == "womens_stroke_par":
        hole.womens_time_par = gendered_time_par(hole.run_distance, hole.womens_stroke_par, Gender.WOMENS, settings)

    tee.num_holes_golf_data_complete = derived.count_golf_data_complete(tee.holes)
    return course


def _update_hole_feature(course: Course, action: UpdateHoleFeature, settings: ParSettings) -> Course:
    tee = _get_tee(course, action.tee)
    hole = _get_hole(tee, action.hole_num)
    feature = _resolve_feature(action.feature_type)

    if isinstance(feature, PolyType):
        setattr(hole, feature.field_name, action.feature_coords)
        _refresh_poly_fields(tee)
        return course

    raw = action.feature_coords
    sampled = action.sampled_path_coords
    if raw is None:
        sampled = None
    elif sampled is None:
        try:
            sampled = compute_sampled_path(raw, settings.sampling_distance_feet)
        except ValueError as e:
            raise InvalidFeatureError(str(e)) from e
    setattr(hole, feature.field_name, raw)
    setattr(hole, feature.sampled_field_name, sampled)

    refresh_hole_run_stats(tee, hole, settings)
    _refresh_path_fields(tee)
    return course


def _update_tee_name(course: Course, action: UpdateTeeName, settings: ParSettings) -> Course:
    prev, new = action.prev_tee_name, action.new_tee_name
    tee = _get_tee(course, prev)
    if prev == new:
        return course
    if new in course.tees:
        raise DuplicateError(f"Tee '{new}' already exists")
    tee.name = new
    course.tees = {(new if name == prev else name): t for name, t in course.tees.items()}
    return course


def _add_tee(course: Course, action: AddTee, settings: ParSettings) -> Course:
    if action.tee_name in course.tees:
        logger.warning("Replacing existing tee '%s' on course %s", action.tee_name, course.id)
    holes = [Hole(number=n) for n in range(1, course.num_holes + 1)]
    holes[0].start_run_distance = 0.0
    holes[-1].finish_run_distance = 0.0
    tees = dict(course.tees)
    tees[action.tee_name] = Tee(name=action.tee_name, holes=holes)
    course.tees = tees
    return course


def _set_has_tee_sf_line(course: Course, action: SetHasTeeSfLine, settings: ParSettings) -> Course:
    tee = _get_tee(course, action.tee)
    field = Tee.resolve_field(action.prop_name)
    if field not in SF_LINE_FIELDS:
        raise InvalidFieldError(f"'{action.prop_name}' is not a start/finish line flag")
    setattr(tee, field, action.has)

    if tee.holes:
        if field == "has_start_line":
            hole, path = tee.holes[0], PathType.START
        else:
            hole, path = tee.holes[-1], PathType.FINISH
        if hole.has_path(path):
            refresh_hole_run_stats(tee, hole, settings)
    _refresh_path_fields(tee)
    return course


def _update_slope_rating_info(course: Course, action: UpdateSlopeRatingInfo, settings: ParSettings) -> Course:
    tee = _get_tee(course, action.tee)
    field = Tee.resolve_field(action.prop_name)
    if field not in SLOPE_RATING_FIELDS:
        raise InvalidFieldError(f"'{action.prop_name}' is not a slope or rating field")
    _set(tee, field, _blank_to_none(action.prop_val))
    return course


_HANDLERS: Dict[str, Callable[[Course, Any, ParSettings], Course]] = {
    "SET_COURSE": _set_course,
    "UPDATE_COURSE_INFO": _update_course_info,
    "UPDATE_SG_INFO": _update_sg_info,
    "UPDATE_HOLE_INFO": _update_hole_info,
    "UPDATE_HOLE_FEATURE": _update_hole_feature,
    "UPDATE_TEE_NAME": _update_tee_name,
    "ADD_TEE": _add_tee,
    "SET_HAS_TEE_SF_LINE": _set_has_tee_sf_line,
    "UPDATE_SLOPE_RATING_INFO": _update_slope_rating_info,
}


def apply_course_action(
    course: Course,
    action: Union[CourseAction, Mapping[str, Any]],
    settings: Optional[ParSettings] = None,
) -> Course:
    """Return a copy of ``course`` with ``action`` applied.

    Raises UnknownActionError for an unrecognised action type, NotFoundError
    for a missing tee or hole, and InvalidFieldError/InvalidFeatureError for
    actions naming something they cannot set. Values that fail validation
    are logged and leave the copy unchanged.
    """
    if isinstance(action, Mapping):
        action = parse_action(action)
    handler = _HANDLERS.get(action.type)
    if handler is None:
        raise UnknownActionError(action.type)

    logger.debug("Applying %s to course %s", action.type, course.id)
    return handler(course.model_copy(deep=True), action, settings or DEFAULT_SETTINGS)
