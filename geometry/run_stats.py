"""Running distance, elevation and time par for a hole."""

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel

from config import DEFAULT_SETTINGS, ParSettings
from models.hole import Gender
from models.point import Point

from .sampling import path_distance_feet


class RunStats(BaseModel):
    """Running statistics for one hole, distances in feet and pars in seconds."""
    run_distance: float
    trans_path_run_distance: float
    golf_path_run_distance: float
    finish_path_run_distance: float
    mens_time_par: Optional[float] = None
    womens_time_par: Optional[float] = None
    elevation_gain: float = 0.0
    elevation_loss: float = 0.0


def get_time_par(
    run_distance: Optional[float],
    stroke_par: Optional[int],
    run_pace: float,
    shot_box_seconds: float,
) -> Optional[float]:
    """Time par in seconds: running time at par pace plus a shot box per stroke.

    Returns None while either the running distance or the stroke par is
    undefined.
    """
    if run_distance is None or stroke_par is None:
        return None
    return run_distance * run_pace + stroke_par * shot_box_seconds


def gendered_time_par(
    run_distance: Optional[float],
    stroke_par: Optional[int],
    gender: Gender,
    settings: Optional[ParSettings] = None,
) -> Optional[float]:
    settings = settings or DEFAULT_SETTINGS
    gender = Gender(gender).value
    return get_time_par(run_distance, stroke_par, settings.run_pace(gender), settings.shot_box_seconds(gender))


def elevation_change(points: Optional[Sequence[Point]]) -> Tuple[float, float]:
    """Total climb and descent in feet along a sampled path.

    Points without an elevation are skipped.
    """
    gain = 0.0
    loss = 0.0
    elevations = [p.elevation for p in points or [] if p.elevation is not None]
    for previous, current in zip(elevations, elevations[1:]):
        diff = current - previous
        if diff > 0:
            gain += diff
        else:
            loss += -diff
    return gain, loss


def compute_hole_running_stats(
    transition_or_start: Optional[Sequence[Point]],
    golf: Optional[Sequence[Point]],
    womens_stroke_par: Optional[int],
    mens_stroke_par: Optional[int],
    finish: Optional[Sequence[Point]] = None,
    settings: Optional[ParSettings] = None,
) -> RunStats:
    """Distances, elevation and time pars for a hole's sampled segments.

    The first segment is the transition path from the previous green, or the
    start path on the first hole of a tee with a start line. Missing segments
    contribute nothing.
    """
    trans_distance = path_distance_feet(transition_or_start)
    golf_distance = path_distance_feet(golf)
    finish_distance = path_distance_feet(finish)
    run_distance = trans_distance + golf_distance + finish_distance

    gain = loss = 0.0
    for segment in (transition_or_start, golf, finish):
        seg_gain, seg_loss = elevation_change(segment)
        gain += seg_gain
        loss += seg_loss

    return RunStats(
        run_distance=run_distance,
        trans_path_run_distance=trans_distance,
        golf_path_run_distance=golf_distance,
        finish_path_run_distance=finish_distance,
        mens_time_par=gendered_time_par(run_distance, mens_stroke_par, Gender.MENS, settings),
        womens_time_par=gendered_time_par(run_distance, womens_stroke_par, Gender.WOMENS, settings),
        elevation_gain=gain,
        elevation_loss=loss,
    )
