"""Scoring endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from api.schemas import (
    HoleTimesRequest,
    RoundGateRequest,
    RoundGateResponse,
    RoundSummaryRequest,
    SGSRequest,
    SGSResponse,
)
from analytics.stats import round_summary
from documents import course_from_document, tournament_from_document
from scoring.par_calc import calculate_sgs
from scoring.rounds import (
    HoleTimeValidation,
    has_completed_previous_round,
    is_save_enabled,
    validate_hole_times,
)
from scoring.time_utils import calculate_time_from_finish_and_start

router = APIRouter()


@router.post("/sgs", response_model=SGSResponse)
async def compute_sgs(req: SGSRequest):
    """Speedgolf score from strokes and either an elapsed time or start/finish times."""
    elapsed = req.elapsed_time
    if elapsed is None:
        elapsed = calculate_time_from_finish_and_start(req.start_time, req.finish_time)
    return SGSResponse(sgs=calculate_sgs(req.strokes, elapsed), elapsed_time=elapsed)


@router.post("/round-summary")
async def get_round_summary(req: RoundSummaryRequest):
    tee = None
    if req.course is not None:
        try:
            course = course_from_document(req.course)
        except ValidationError as e:
            raise HTTPException(422, f"Invalid course document: {e.errors()[0]['msg']}")
        if req.tee is not None:
            tee = course.get_tee(req.tee)
            if tee is None:
                raise HTTPException(404, f"Tee '{req.tee}' not found")
    return round_summary(req.entry, tee, req.gender, req.num_holes)


@router.post("/validate-hole-times", response_model=HoleTimeValidation)
async def check_hole_times(req: HoleTimesRequest):
    return validate_hole_times(req.hole_times, req.start_time, req.finish_time, req.mode)


@router.post("/round-gate", response_model=RoundGateResponse)
async def check_round_gate(req: RoundGateRequest):
    """Whether a player may enter, and if an entry is given save, a round."""
    try:
        tournament = tournament_from_document(req.tournament)
    except ValidationError as e:
        raise HTTPException(422, f"Invalid tournament document: {e.errors()[0]['msg']}")
    can_enter = has_completed_previous_round(tournament, req.user_id, req.round, req.division)
    can_save = None
    if req.entry is not None:
        can_save = is_save_enabled(tournament, req.user_id, req.round, req.entry, req.mode, req.division)
    return RoundGateResponse(can_enter=can_enter, can_save=can_save)
