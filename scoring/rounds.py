"""Gates for entering and saving a player's round scores."""

import logging
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from models.round import HoleSelection
from models.scorecard import NO_TIME
from models.tournament import Division, Tournament, round_index
from time_entry.validation import HoleTimeMode, has_real_time_data_in_round

from .par_calc import calc_total_time, parse_strokes
from .time_utils import (
    calculate_total_time_in_seconds,
    clock_to_seconds,
    format_clock,
    format_to_ampm,
    parse_duration,
)

logger = logging.getLogger(__name__)

MIN_STROKES = 1
MAX_STROKES = 99


class RoundEntry(BaseModel):
    """Scores and times entered for one player's round, saved or not."""
    scores: Dict[int, Optional[int]] = Field(default_factory=dict)
    hole_times: Dict[int, Optional[str]] = Field(default_factory=dict)
    start_time: Optional[str] = None
    finish_time: Optional[str] = None


class HoleTimeValidation(BaseModel):
    valid: bool
    hole_time_seconds: int = 0
    elapsed_seconds: int = 0
    discrepancy_seconds: int = 0


def get_hole_numbers(num_holes: Optional[str]) -> List[int]:
    """Hole numbers played in a round; unknown selections play all 18."""
    try:
        return HoleSelection(num_holes).hole_numbers
    except ValueError:
        return HoleSelection.FULL.hole_numbers


def apply_score_change(scores: Mapping[int, Optional[int]], hole: int, value) -> Dict[int, Optional[int]]:
    """Return new scores with ``value`` entered for ``hole``.

    A blank value clears the hole. Anything that is not a whole number from
    1 to 99 is ignored.
    """
    updated = dict(scores)
    if value is None or (isinstance(value, str) and not value.strip()):
        updated[hole] = None
        return updated
    try:
        strokes = int(value)
    except (TypeError, ValueError):
        return updated
    if MIN_STROKES <= strokes <= MAX_STROKES:
        updated[hole] = strokes
    return updated


def _pad_time_parts(time: str) -> Optional[List[str]]:
    parts = [p.strip() for p in time.strip().split(":")]
    if len(parts) not in (2, 3) or not all(p.isdigit() and len(p) <= 2 for p in parts):
        return None
    # Minutes and seconds only go up to 59.
    if any(int(p) > 59 for p in parts[-2:]):
        return None
    return [p.zfill(2) for p in parts]


def format_hole_time(time: str, mode: HoleTimeMode) -> Optional[str]:
    """Normalize an entered hole time for the entry mode.

    Durations are stored ``MM:SS`` (a zero hour is dropped). Timestamps are
    stored ``HH:MM:SS`` (a missing hour becomes ``00``). Returns None if the
    value cannot be a time.
    """
    parts = _pad_time_parts(time)
    if parts is None:
        return None
    if HoleTimeMode(mode) == HoleTimeMode.DURATIONS:
        if len(parts) == 3 and parts[0] == "00":
            parts = parts[1:]
    elif len(parts) == 2:
        parts = ["00"] + parts
    return ":".join(parts)


def apply_hole_time_change(
    hole_times: Mapping[int, Optional[str]], hole: int, time: Optional[str], mode: HoleTimeMode
) -> Dict[int, Optional[str]]:
    """Return new hole times with ``time`` entered for ``hole``; invalid input is ignored."""
    updated = dict(hole_times)
    if not time or not time.strip():
        updated[hole] = None
        return updated
    formatted = format_hole_time(time, mode)
    if formatted is None:
        logger.debug("Ignoring hole time %r for hole %s", time, hole)
        return updated
    updated[hole] = formatted
    return updated


def convert_duration_for_saving(time: Optional[str]) -> Optional[str]:
    """``"00:04:30"`` -> ``"04:30"``; everything else is returned as-is."""
    if not time:
        return time
    parts = time.split(":")
    if len(parts) == 3 and parts[0] == "00":
        return f"{parts[1]}:{parts[2]}"
    return time


def _hole_time_seconds(time: str, mode: HoleTimeMode) -> int:
    if HoleTimeMode(mode) != HoleTimeMode.DURATIONS and time.count(":") != 2:
        return 0
    return parse_duration(time) or 0


def validate_hole_times(
    hole_times: Mapping[int, Optional[str]],
    start_time: Optional[str],
    finish_time: Optional[str],
    mode: HoleTimeMode = HoleTimeMode.DURATIONS,
) -> HoleTimeValidation:
    """Hole times must add up exactly to the round's elapsed time.

    A round with no hole times is valid. A round whose start and finish do
    not give a positive elapsed time is not.
    """
    entered = [t for t in hole_times.values() if t]
    if not entered:
        return HoleTimeValidation(valid=True)

    elapsed = calculate_total_time_in_seconds(start_time, finish_time)
    if elapsed <= 0:
        return HoleTimeValidation(valid=False, elapsed_seconds=elapsed)

    total = sum(_hole_time_seconds(t, mode) for t in entered)
    discrepancy = total - elapsed
    return HoleTimeValidation(
        valid=discrepancy == 0,
        hole_time_seconds=total,
        elapsed_seconds=elapsed,
        discrepancy_seconds=discrepancy,
    )


def calculate_finish_time_from_hole_times(
    start_time: Optional[str],
    hole_times: Mapping[int, Optional[str]],
    selection=HoleSelection.FULL,
) -> str:
    """Start time plus the sum of hole times, as a 12-hour clock time."""
    start = clock_to_seconds(start_time)
    if start is None:
        return NO_TIME
    total = calc_total_time(hole_times, selection)
    if total == 0:
        return NO_TIME
    finish = (start + total) % 86400
    return format_to_ampm(format_clock(finish))


def _player_division(tournament: Tournament, user_id: str, division_name: Optional[str]) -> Optional[Division]:
    if division_name:
        return tournament.find_division(division_name)
    return tournament.division_of(user_id)


def has_completed_previous_round(
    tournament: Tournament,
    user_id: str,
    round_label: str,
    division_name: Optional[str] = None,
) -> bool:
    """Whether a player may enter scores for ``round_label``.

    Round 1 is always open. Later rounds need a saved scorecard for the
    previous round with scores, a start and finish time, a positive total
    and an SGS (or the parts to compute it).
    """
    if round_label == "R1":
        return True

    index = round_index(round_label)
    player = tournament.find_player(user_id)
    if index is None or player is None or not player.score_cards:
        return False

    division = _player_division(tournament, user_id, division_name)
    if division is None or index - 1 >= len(division.rounds) or index < 1:
        return False
    previous_round = division.rounds[index - 1]
    card = player.get_score_card(previous_round.id) if previous_round.id else None
    if card is None:
        return False

    has_total = card.total is not None and card.total > 0
    has_times = card.has_start_time and card.has_finish_time
    has_sgs = bool(card.sgs) or (has_total and has_times)
    return bool(card.scores) and has_times and has_total and has_sgs


def is_save_enabled(
    tournament: Tournament,
    user_id: str,
    round_label: str,
    entry: RoundEntry,
    mode: HoleTimeMode = HoleTimeMode.NONE,
    division_name: Optional[str] = None,
) -> bool:
    """Whether a player's entered round can be saved.

    Every hole needs strokes and there must be a start time. With hole
    times on, every hole also needs a hole time in the mode's format and the
    finish is derived; otherwise a finish time is required. Entered hole
    times must add up to the elapsed time whenever a finish time is set.
    """
    if not has_completed_previous_round(tournament, user_id, round_label, division_name):
        return False

    division = _player_division(tournament, user_id, division_name)
    current_round = division.get_round(round_label) if division is not None else None
    holes = get_hole_numbers(current_round.num_holes if current_round is not None else None)

    all_holes_filled = all(parse_strokes(entry.scores.get(h)) is not None for h in holes)
    has_start = bool(entry.start_time) and entry.start_time != NO_TIME

    has_finish = bool(entry.finish_time) and entry.finish_time != NO_TIME
    if has_finish and has_real_time_data_in_round(entry.hole_times):
        validation = validate_hole_times(entry.hole_times, entry.start_time, entry.finish_time, _validation_mode(mode))
        if not validation.valid:
            logger.debug("Hole times off by %ss from elapsed time", validation.discrepancy_seconds)
            return False

    mode = HoleTimeMode(mode)
    if mode == HoleTimeMode.NONE:
        return all_holes_filled and has_start and has_finish

    all_times_valid = all(_is_formatted_hole_time(entry.hole_times.get(h), mode) for h in holes)
    return all_holes_filled and all_times_valid and has_start


def _is_formatted_hole_time(time: Optional[str], mode: HoleTimeMode) -> bool:
    if not time:
        return False
    parts = time.split(":")
    if not all(p.isdigit() for p in parts):
        return False
    if mode == HoleTimeMode.DURATIONS:
        return len(parts) == 2 and 1 <= len(parts[0]) <= 2 and len(parts[1]) == 2
    return len(parts) == 3 and all(len(p) == 2 for p in parts)


def _validation_mode(mode: HoleTimeMode) -> HoleTimeMode:
    # Hole times kept alongside start/finish entry are durations.
    mode = HoleTimeMode(mode)
    return HoleTimeMode.DURATIONS if mode == HoleTimeMode.NONE else mode
