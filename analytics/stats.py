from __future__ import annotations

from typing import Any, Dict, List, Optional

from geometry.run_stats import elevation_change
from geometry.sampling import FEET_TO_DEGREES, planar_distance
from geometry.units import IMPERIAL, METRIC, feet_to_km, feet_to_meters, feet_to_miles, feet_to_yards
from models.hole import Gender, Hole
from models.round import HoleSelection
from models.scorecard import NO_TIME
from models.tee import Tee
from scoring.par_calc import (
    calc_total_sgs,
    calc_total_sgs_to_par,
    calc_total_stroke_par,
    calc_total_strokes,
    calc_total_strokes_to_par,
    calc_total_time,
    calculate_header_time_par,
    calculate_sgs,
    calculate_total_time_par,
    format_sgs_to_par,
    format_time_to_par,
    get_hole_par,
    hole_par_lookup,
    round_half_up,
    strokes_to_par_label,
)
from scoring.rounds import RoundEntry
from scoring.time_utils import calculate_time_from_finish_and_start, calculate_total_time_in_seconds, seconds_to_mmss


def _running_segments(hole: Hole) -> list:
    return [hole.transition_path_sampled, hole.golf_path_sampled]


def tee_summary(tee: Tee, units: str = IMPERIAL) -> Dict[str, Any]:
    """Totals for the tee header: distances, elevation and pars.

    Golf distance is reported in yards (meters), running distance in miles
    (km) and elevation in feet (meters). Elevation is summed over transition
    and golf paths.
    """
    if units not in (IMPERIAL, METRIC):
        raise ValueError(f"Unknown units: {units}")
    metric = units == METRIC

    golf_feet = sum(hole.golf_distance or 0 for hole in tee.holes)
    run_feet = sum(hole.run_distance or 0 for hole in tee.holes)
    gain = loss = 0.0
    for hole in tee.holes:
        for segment in _running_segments(hole):
            seg_gain, seg_loss = elevation_change(segment)
            gain += seg_gain
            loss += seg_loss

    to_length = feet_to_meters if metric else (lambda feet: feet)
    mens_time_par = calculate_header_time_par(tee, Gender.MENS, _selection_for(tee))
    womens_time_par = calculate_header_time_par(tee, Gender.WOMENS, _selection_for(tee))
    return {
        "units": units,
        "holes": len(tee.holes),
        "fully_mapped": tee.is_fully_mapped,
        "golf_distance": feet_to_meters(golf_feet) if metric else feet_to_yards(golf_feet),
        "run_distance": feet_to_km(run_feet) if metric else feet_to_miles(run_feet),
        "elevation_gain": to_length(gain),
        "elevation_loss": to_length(loss),
        "mens_stroke_par": tee.stroke_par_total(Gender.MENS),
        "womens_stroke_par": tee.stroke_par_total(Gender.WOMENS),
        "mens_time_par": mens_time_par,
        "womens_time_par": womens_time_par,
        "mens_time_par_display": seconds_to_mmss(mens_time_par),
        "womens_time_par_display": seconds_to_mmss(womens_time_par),
    }


def _selection_for(tee: Tee) -> HoleSelection:
    return HoleSelection.FRONT_NINE if len(tee.holes) <= 9 else HoleSelection.FULL


def time_par_by_hole(tee: Tee, gender: Gender) -> Dict[str, Any]:
    """Stroke and time par per hole with OUT/IN/TOTAL rows, as in the course info table."""
    holes: List[Dict[str, Any]] = []
    for hole in tee.holes:
        time_par = hole.get_time_par(gender)
        rounded = round_half_up(time_par) if time_par is not None else None
        holes.append(
            {
                "hole": hole.number,
                "stroke_par": get_hole_par(tee, hole.number, gender),
                "time_par": rounded,
                "time_par_display": seconds_to_mmss(rounded) if rounded else NO_TIME,
            }
        )

    def _totals(selection: HoleSelection) -> Dict[str, Any]:
        numbers = set(selection.hole_numbers)
        rows = [row for row in holes if row["hole"] in numbers]
        time_par = calculate_header_time_par(tee, gender, selection)
        return {
            "stroke_par": sum(row["stroke_par"] for row in rows),
            "time_par": time_par,
            "time_par_display": seconds_to_mmss(time_par),
        }

    return {
        "holes": holes,
        "out": _totals(HoleSelection.FRONT_NINE),
        "in": _totals(HoleSelection.BACK_NINE),
        "total": _totals(_selection_for(tee)),
    }


def elevation_profile(hole: Hole) -> List[Dict[str, float]]:
    """Cumulative running distance (feet) and elevation along a hole's sampled paths."""
    profile: List[Dict[str, float]] = []
    distance = 0.0
    previous = None
    for segment in _running_segments(hole):
        for point in segment or []:
            if previous is not None:
                distance += planar_distance(previous, point) / FEET_TO_DEGREES
            previous = point
            if point.elevation is not None:
                profile.append({"distance": distance, "elevation": point.elevation})
    return profile


def round_summary(
    entry: RoundEntry,
    tee: Optional[Tee],
    gender: Gender,
    selection: HoleSelection = HoleSelection.FULL,
) -> Dict[str, Any]:
    """Strokes, time and SGS totals against par for one player's round.

    Par totals only cover holes with entries. The elapsed time comes from
    the start and finish times when both are set, otherwise from the sum of
    hole times.
    """
    get_par = hole_par_lookup(tee, gender)
    strokes = calc_total_strokes(entry.scores, selection)
    stroke_par = calc_total_stroke_par(entry.scores, get_par, selection)
    hole_time = calc_total_time(entry.hole_times, selection)
    time_par = calculate_total_time_par(entry.hole_times, tee, gender, selection)

    elapsed = calculate_total_time_in_seconds(entry.start_time, entry.finish_time)
    if elapsed > 0:
        elapsed_display = calculate_time_from_finish_and_start(entry.start_time, entry.finish_time)
        sgs = calculate_sgs(strokes, elapsed_display)
    else:
        elapsed = hole_time
        elapsed_display = seconds_to_mmss(hole_time)
        sgs = calc_total_sgs(entry.scores, entry.hole_times, selection).sgs

    sgs_to_par = calc_total_sgs_to_par(entry.scores, entry.hole_times, get_par, tee, gender, selection)
    return {
        "strokes": strokes,
        "stroke_par": stroke_par,
        "strokes_to_par": strokes_to_par_label(calc_total_strokes_to_par(entry.scores, get_par, selection)),
        "hole_time": hole_time,
        "time_par": time_par,
        "time_to_par": format_time_to_par(hole_time, time_par),
        "elapsed": elapsed,
        "elapsed_display": elapsed_display,
        "sgs": sgs,
        "sgs_to_par": format_sgs_to_par(sgs_to_par.sgs, sgs_to_par.par, sgs_to_par.difference_seconds),
    }
