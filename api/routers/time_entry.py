"""Time entry method endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from api.schemas import DetectRequest, DetectResponse, ModeChangeRequest
from documents import tournament_from_document
from time_entry import (
    ModeChangeResult,
    allowed_modes,
    detect_established_method,
    request_hole_time_mode_change,
)

router = APIRouter()


def _detect(req: DetectRequest):
    tournament = None
    if req.tournament is not None:
        try:
            tournament = tournament_from_document(req.tournament)
        except ValidationError as e:
            raise HTTPException(422, f"Invalid tournament document: {e.errors()[0]['msg']}")
    return detect_established_method(tournament, req.unsaved_hole_times)


@router.post("/detect", response_model=DetectResponse)
async def detect_method(req: DetectRequest):
    method = _detect(req)
    return DetectResponse(method=method, allowed_modes=allowed_modes(method))


@router.post("/mode-change", response_model=ModeChangeResult)
async def change_mode(req: ModeChangeRequest):
    """Request a hole time mode; rejected if it conflicts with saved data."""
    return request_hole_time_mode_change(req.current_mode, req.new_mode, _detect(req))
