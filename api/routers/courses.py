"""Course editing endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from api.dependencies import get_settings
from api.schemas import CourseActionRequest, TeeRequest
from analytics.stats import tee_summary, time_par_by_hole
from config import ParSettings
from courses import (
    CourseError,
    DuplicateError,
    NotFoundError,
    UpdateHoleInfo,
    apply_course_action,
    parse_action,
)
from documents import course_from_document, course_to_document
from geometry.units import converter_for_units
from models import Course, Tee

router = APIRouter()


def _load_course(doc) -> Course:
    try:
        return course_from_document(doc)
    except ValidationError as e:
        raise HTTPException(422, f"Invalid course document: {e.errors()[0]['msg']}")


def _load_tee(course: Course, name: str) -> Tee:
    tee = course.get_tee(name)
    if tee is None:
        raise HTTPException(404, f"Tee '{name}' not found")
    return tee


@router.post("/actions")
async def apply_action(req: CourseActionRequest, settings: ParSettings = Depends(get_settings)):
    """Apply one editing action to a course document and return the updated document."""
    course = _load_course(req.course)
    try:
        action = parse_action(req.action)
        if isinstance(action, UpdateHoleInfo) and req.units:
            action.convert_to_ft = converter_for_units(req.units)
        updated = apply_course_action(course, action, settings)
    except ValidationError as e:
        raise HTTPException(422, f"Invalid action: {e.errors()[0]['msg']}")
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except DuplicateError as e:
        raise HTTPException(409, str(e))
    except (CourseError, ValueError) as e:
        raise HTTPException(400, str(e))
    return course_to_document(updated, tees_as_list=req.tees_as_list)


@router.post("/tee-summary")
async def get_tee_summary(req: TeeRequest):
    tee = _load_tee(_load_course(req.course), req.tee)
    try:
        return tee_summary(tee, req.units)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.post("/time-par")
async def get_time_par_table(req: TeeRequest):
    """Stroke and time par per hole with OUT/IN/TOTAL."""
    tee = _load_tee(_load_course(req.course), req.tee)
    return time_par_by_hole(tee, req.gender)
