"""Stroke, time and speedgolf-score totals for a tournament round.

Scores are mappings of hole number to strokes and hole times are mappings of
hole number to ``MM:SS`` strings. OUT is holes 1-9, IN is holes 10-18, and
TOTAL covers the holes of the round's selection.

Par columns use an accumulator: only holes with entered data contribute to
the par side, so a partially entered round compares fairly against par.
"""

import math
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional

from pydantic import BaseModel

from models.hole import Gender
from models.round import HoleSelection
from models.scorecard import NO_TIME
from models.tee import Tee
from time_entry.validation import is_real_time_data

from .time_utils import format_mmss, mmss_to_seconds, parse_duration

DEFAULT_HOLE_PAR = 4
OUT_HOLES = range(1, 10)
IN_HOLES = range(10, 19)

Scores = Mapping[int, Any]
HoleTimes = Mapping[int, Optional[str]]
HoleParLookup = Callable[[int], int]


class SGSBreakdown(BaseModel):
    strokes: int = 0
    time_minutes: int = 0
    time_seconds: int = 0
    sgs: str = NO_TIME
    sgs_minutes: int = 0
    sgs_seconds: int = 0


class SGSToPar(BaseModel):
    sgs: str = NO_TIME
    par: str = NO_TIME
    difference_seconds: int = 0


class ScoreClass(str, Enum):
    """Scorecard cell marking for a hole's score relative to par."""
    NONE = ""
    NEUTRAL = "neutral"
    CIRCLE = "circle"
    SQUARE = "square"
    SOLID_CIRCLE = "solid-circle"
    SOLID_SQUARE = "solid-square"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_strokes(value: Any) -> Optional[int]:
    """Entered strokes as an int. Missing, zero or unparsable entries are None."""
    if value is None or value == "":
        return None
    try:
        strokes = int(value)
    except (TypeError, ValueError):
        return None
    return strokes if strokes > 0 else None


def _holes(selection) -> Iterable[int]:
    return HoleSelection(selection).hole_numbers


def _sum_strokes(scores: Scores, holes: Iterable[int]) -> int:
    return sum(parse_strokes(scores.get(h)) or 0 for h in holes)


def _sum_stroke_par(scores: Scores, get_hole_par: HoleParLookup, holes: Iterable[int]) -> int:
    return sum(get_hole_par(h) for h in holes if parse_strokes(scores.get(h)) is not None)


def _sum_time(hole_times: HoleTimes, holes: Iterable[int]) -> int:
    return sum(mmss_to_seconds(hole_times.get(h)) for h in holes if is_real_time_data(hole_times.get(h)))


def _hole_time_par(tee: Optional[Tee], hole_num: int, gender: Gender) -> int:
    hole = tee.get_hole(hole_num) if tee is not None else None
    time_par = hole.get_time_par(gender) if hole is not None else None
    return round_half_up(time_par or 0)


def _sum_time_par(hole_times: HoleTimes, tee: Optional[Tee], gender: Gender, holes: Iterable[int]) -> int:
    return sum(_hole_time_par(tee, h, gender) for h in holes if is_real_time_data(hole_times.get(h)))


# ==================== Strokes ====================


def calc_out_strokes(scores: Scores) -> int:
    return _sum_strokes(scores, OUT_HOLES)


def calc_in_strokes(scores: Scores) -> int:
    return _sum_strokes(scores, IN_HOLES)


def calc_total_strokes(scores: Scores, selection=HoleSelection.FULL) -> int:
    return _sum_strokes(scores, _holes(selection))


# ==================== Stroke par ====================


def get_hole_par(tee: Optional[Tee], hole_num: int, gender: Gender) -> int:
    """Gendered stroke par of a hole, 4 when the tee does not define it."""
    hole = tee.get_hole(hole_num) if tee is not None else None
    par = hole.get_stroke_par(gender) if hole is not None else None
    return par or DEFAULT_HOLE_PAR


def hole_par_lookup(tee: Optional[Tee], gender: Gender) -> HoleParLookup:
    """Bind :func:`get_hole_par` to a tee and gender."""
    def lookup(hole_num: int) -> int:
        return get_hole_par(tee, hole_num, gender)
    return lookup


def calc_out_stroke_par(scores: Scores, get_hole_par: HoleParLookup) -> int:
    return _sum_stroke_par(scores, get_hole_par, OUT_HOLES)


def calc_in_stroke_par(scores: Scores, get_hole_par: HoleParLookup) -> int:
    return _sum_stroke_par(scores, get_hole_par, IN_HOLES)


def calc_total_stroke_par(scores: Scores, get_hole_par: HoleParLookup, selection=HoleSelection.FULL) -> int:
    return _sum_stroke_par(scores, get_hole_par, _holes(selection))


def calculate_out_par(get_hole_par: HoleParLookup) -> int:
    """Par of all OUT holes, entered or not."""
    return sum(get_hole_par(h) for h in OUT_HOLES)


def calculate_in_par(get_hole_par: HoleParLookup) -> int:
    return sum(get_hole_par(h) for h in IN_HOLES)


def calculate_total_par(get_hole_par: HoleParLookup, selection=HoleSelection.FULL) -> int:
    return sum(get_hole_par(h) for h in _holes(selection))


def calc_out_strokes_to_par(scores: Scores, get_hole_par: HoleParLookup) -> int:
    return calc_out_strokes(scores) - calc_out_stroke_par(scores, get_hole_par)


def calc_in_strokes_to_par(scores: Scores, get_hole_par: HoleParLookup) -> int:
    return calc_in_strokes(scores) - calc_in_stroke_par(scores, get_hole_par)


def calc_total_strokes_to_par(scores: Scores, get_hole_par: HoleParLookup, selection=HoleSelection.FULL) -> int:
    return calc_total_strokes(scores, selection) - calc_total_stroke_par(scores, get_hole_par, selection)


# ==================== Time ====================


def calc_out_time(hole_times: HoleTimes) -> int:
    """Seconds over the OUT holes with real time entries."""
    return _sum_time(hole_times, OUT_HOLES)


def calc_in_time(hole_times: HoleTimes) -> int:
    return _sum_time(hole_times, IN_HOLES)


def calc_total_time(hole_times: HoleTimes, selection=HoleSelection.FULL) -> int:
    return _sum_time(hole_times, _holes(selection))


# ==================== Time par ====================


def calculate_out_time_par(hole_times: HoleTimes, tee: Optional[Tee], gender: Gender) -> int:
    """Time par in seconds of the OUT holes that have a real time entry.

    Each hole's time par is rounded to whole seconds before summing.
    """
    return _sum_time_par(hole_times, tee, gender, OUT_HOLES)


def calculate_in_time_par(hole_times: HoleTimes, tee: Optional[Tee], gender: Gender) -> int:
    return _sum_time_par(hole_times, tee, gender, IN_HOLES)


def calculate_total_time_par(
    hole_times: HoleTimes, tee: Optional[Tee], gender: Gender, selection=HoleSelection.FULL
) -> int:
    return _sum_time_par(hole_times, tee, gender, _holes(selection))


def calculate_header_time_par(tee: Optional[Tee], gender: Gender, selection=HoleSelection.FULL) -> int:
    """Time par over every hole of the selection, for the course info header."""
    return sum(_hole_time_par(tee, h, gender) for h in _holes(selection))


def calc_out_time_to_par(hole_times: HoleTimes, tee: Optional[Tee], gender: Gender) -> int:
    return calc_out_time(hole_times) - calculate_out_time_par(hole_times, tee, gender)


def calc_in_time_to_par(hole_times: HoleTimes, tee: Optional[Tee], gender: Gender) -> int:
    return calc_in_time(hole_times) - calculate_in_time_par(hole_times, tee, gender)


def calc_total_time_to_par(
    hole_times: HoleTimes, tee: Optional[Tee], gender: Gender, selection=HoleSelection.FULL
) -> int:
    return calc_total_time(hole_times, selection) - calculate_total_time_par(hole_times, tee, gender, selection)


# ==================== Speedgolf score ====================


def calculate_sgs(strokes: Optional[int], elapsed_time: Optional[str]) -> str:
    """Speedgolf score: each stroke counts as one minute added to the elapsed time.

    ``calculate_sgs(80, "55:30")`` is ``"135:30"``. Returns ``"--:--"`` when
    there are no strokes or the elapsed time is missing or not positive.
    """
    if not strokes or strokes <= 0:
        return NO_TIME
    elapsed = parse_duration(elapsed_time)
    if elapsed is None or elapsed <= 0:
        return NO_TIME
    return format_mmss(strokes * 60 + elapsed)


def _sgs_breakdown(scores: Scores, hole_times: HoleTimes, holes: Iterable[int]) -> SGSBreakdown:
    total_strokes = 0
    total_seconds = 0
    has_scores = False
    for hole in holes:
        strokes = parse_strokes(scores.get(hole))
        if strokes is None:
            continue
        has_scores = True
        total_strokes += strokes
        if is_real_time_data(hole_times.get(hole)):
            total_seconds += mmss_to_seconds(hole_times.get(hole))

    if not has_scores:
        return SGSBreakdown()

    time_minutes, time_seconds = divmod(total_seconds, 60)
    sgs_minutes = total_strokes + time_minutes
    return SGSBreakdown(
        strokes=total_strokes,
        time_minutes=time_minutes,
        time_seconds=time_seconds,
        sgs=f"{sgs_minutes:02d}:{time_seconds:02d}",
        sgs_minutes=sgs_minutes,
        sgs_seconds=time_seconds,
    )


def calc_out_sgs(scores: Scores, hole_times: HoleTimes) -> SGSBreakdown:
    """SGS over the OUT holes with entered strokes."""
    return _sgs_breakdown(scores, hole_times, OUT_HOLES)


def calc_in_sgs(scores: Scores, hole_times: HoleTimes) -> SGSBreakdown:
    return _sgs_breakdown(scores, hole_times, IN_HOLES)


def calc_total_sgs(scores: Scores, hole_times: HoleTimes, selection=HoleSelection.FULL) -> SGSBreakdown:
    return _sgs_breakdown(scores, hole_times, _holes(selection))


def _sgs_to_par(breakdown: SGSBreakdown, stroke_par: int, time_par_seconds: int) -> SGSToPar:
    if breakdown.sgs == NO_TIME:
        return SGSToPar()
    par_seconds = stroke_par * 60 + time_par_seconds
    actual_seconds = breakdown.sgs_minutes * 60 + breakdown.sgs_seconds
    return SGSToPar(
        sgs=breakdown.sgs,
        par=format_mmss(par_seconds),
        difference_seconds=actual_seconds - par_seconds,
    )


def calc_out_sgs_to_par(
    scores: Scores, hole_times: HoleTimes, get_hole_par: HoleParLookup, tee: Optional[Tee], gender: Gender
) -> SGSToPar:
    return _sgs_to_par(
        calc_out_sgs(scores, hole_times),
        calc_out_stroke_par(scores, get_hole_par),
        calculate_out_time_par(hole_times, tee, gender),
    )


def calc_in_sgs_to_par(
    scores: Scores, hole_times: HoleTimes, get_hole_par: HoleParLookup, tee: Optional[Tee], gender: Gender
) -> SGSToPar:
    return _sgs_to_par(
        calc_in_sgs(scores, hole_times),
        calc_in_stroke_par(scores, get_hole_par),
        calculate_in_time_par(hole_times, tee, gender),
    )


def calc_total_sgs_to_par(
    scores: Scores,
    hole_times: HoleTimes,
    get_hole_par: HoleParLookup,
    tee: Optional[Tee],
    gender: Gender,
    selection=HoleSelection.FULL,
) -> SGSToPar:
    return _sgs_to_par(
        calc_total_sgs(scores, hole_times, selection),
        calc_total_stroke_par(scores, get_hole_par, selection),
        calculate_total_time_par(hole_times, tee, gender, selection),
    )


# ==================== Display ====================


def strokes_to_par_label(diff: int) -> str:
    """``0`` -> ``"E"``, ``3`` -> ``"+3"``, ``-2`` -> ``"-2"``."""
    if diff == 0:
        return "E"
    return f"+{diff}" if diff > 0 else str(diff)


def _signed_mmss(diff_seconds: int) -> str:
    minutes, seconds = divmod(int(abs(diff_seconds)), 60)
    sign = "+" if diff_seconds > 0 else "-"
    return f"{sign}{minutes}:{seconds:02d}"


def format_strokes_to_par(strokes: Optional[int], stroke_par: Optional[int]) -> str:
    """``"74 (+2)"``; empty when either value is missing."""
    if not strokes or not stroke_par:
        return ""
    return f"{strokes} ({strokes_to_par_label(strokes - stroke_par)})"


def format_time_to_par(time_seconds: Optional[int], time_par_seconds: Optional[int]) -> str:
    """``"05:30 (+0:30)"``; empty when either value is missing."""
    if not time_seconds or not time_par_seconds:
        return ""
    display = format_mmss(time_seconds)
    diff = time_seconds - time_par_seconds
    if diff == 0:
        return f"{display} (E)"
    return f"{display} ({_signed_mmss(diff)})"


def format_sgs_to_par(sgs: Optional[str], sgs_par: Optional[str], difference_seconds: int) -> str:
    if not sgs or sgs == NO_TIME or not sgs_par:
        return sgs or NO_TIME
    if difference_seconds == 0:
        return f"{sgs} (E)"
    return f"{sgs} ({_signed_mmss(difference_seconds)})"


def get_score_class(strokes: Any, stroke_par: int) -> ScoreClass:
    """Circle a birdie, square a bogey, fill the shape for anything further from par."""
    strokes = parse_strokes(strokes)
    if strokes is None:
        return ScoreClass.NONE
    diff = strokes - stroke_par
    if diff == 0:
        return ScoreClass.NEUTRAL
    if diff == -1:
        return ScoreClass.CIRCLE
    if diff == 1:
        return ScoreClass.SQUARE
    return ScoreClass.SOLID_CIRCLE if diff < 0 else ScoreClass.SOLID_SQUARE
