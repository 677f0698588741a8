"""Detect which time entry method a tournament has already committed to.

Sources are checked in a fixed order and the first one holding real data
decides: unsaved hole times being edited, then scorecards of tournament-level
players, then scorecards of players stored under divisions.
"""

import logging
from typing import Dict, Iterable, Mapping, Optional

from models.scorecard import ScoreCard
from models.tournament import Player, Tournament

from .validation import (
    TimeEntryMethod,
    TimeValueKind,
    classify_time_value,
    has_real_time_data_in_round,
    is_real_time_data,
)

logger = logging.getLogger(__name__)

# player id -> round id -> hole number -> hole time
UnsavedHoleTimes = Mapping[str, Mapping[str, Mapping[int, Optional[str]]]]

ZERO_HOUR_PREFIX = "00:"
MIN_HOLE_INCREASE_SECONDS = 20

_KIND_TO_METHOD = {
    TimeValueKind.TIMESTAMP: TimeEntryMethod.TIMESTAMPS,
    TimeValueKind.DURATION: TimeEntryMethod.HOLE_BY_HOLE,
    TimeValueKind.OTHER: TimeEntryMethod.START_FINISH,
}


def _hms_seconds(value: str) -> int:
    hours, minutes, seconds = (int(p) for p in value.split(":"))
    return hours * 3600 + minutes * 60 + seconds


def _zero_hour_times(card: ScoreCard) -> Optional[list]:
    """Real hole times of a card in hole order, if every one is ``00:MM:SS``."""
    times = [s.hole_time for s in sorted(card.scores, key=lambda s: s.hole) if is_real_time_data(s.hole_time)]
    if not times or not all(t.startswith(ZERO_HOUR_PREFIX) and t.count(":") == 2 for t in times):
        return None
    return times


def _is_legacy_card(card: ScoreCard) -> bool:
    times = _zero_hour_times(card)
    if times is None or len(times) < 2:
        return False
    try:
        seconds = [_hms_seconds(t) for t in times]
    except ValueError:
        return False
    return not any(b - a >= MIN_HOLE_INCREASE_SECONDS for a, b in zip(seconds, seconds[1:]))


def is_legacy_hole_time_data(player: Player) -> bool:
    """Old scorecards stored round times as ``00:MM:SS`` hole values.

    A card is legacy when it has at least two real hole times, all with a
    zero hour, and no hole-to-hole increase of 20 seconds or more.
    """
    return any(_is_legacy_card(card) for card in player.score_cards if card.scores)


def _method_for_values(values: Iterable[Optional[str]]) -> Optional[TimeEntryMethod]:
    for value in values:
        kind = classify_time_value(value)
        if kind is not None:
            return _KIND_TO_METHOD[kind]
    return None


def _method_for_card(card: ScoreCard) -> Optional[TimeEntryMethod]:
    kinds = {classify_time_value(s.hole_time) for s in card.scores}
    if TimeValueKind.TIMESTAMP in kinds:
        return TimeEntryMethod.TIMESTAMPS
    # Zero-hour values that are not legacy are durations saved with an hour.
    if TimeValueKind.DURATION in kinds or _zero_hour_times(card) is not None:
        return TimeEntryMethod.HOLE_BY_HOLE
    if TimeValueKind.OTHER in kinds:
        return TimeEntryMethod.START_FINISH
    if card.start_time or card.finish_time:
        return TimeEntryMethod.START_FINISH
    return None


def _method_for_players(players: Iterable[Player]) -> Optional[TimeEntryMethod]:
    for player in players:
        if not player.score_cards:
            continue
        if is_legacy_hole_time_data(player):
            return TimeEntryMethod.START_FINISH
        for card in player.score_cards:
            if not card.scores:
                continue
            method = _method_for_card(card)
            if method is not None:
                return method
    return None


def detect_established_method(
    tournament: Optional[Tournament],
    unsaved_hole_times: Optional[UnsavedHoleTimes] = None,
) -> Optional[TimeEntryMethod]:
    """The tournament's time entry method, or None while undetermined."""
    for rounds in (unsaved_hole_times or {}).values():
        for hole_times in (rounds or {}).values():
            method = _method_for_values((hole_times or {}).values())
            if method is not None:
                logger.debug("Time entry method %s from unsaved hole times", method.value)
                return method

    if tournament is None or not tournament.divisions:
        return None

    method = _method_for_players(tournament.players)
    if method is None:
        method = _method_for_players(p for d in tournament.divisions for p in d.players)
    if method is not None:
        logger.debug("Time entry method %s from saved scorecards of %s", method.value, tournament.id)
    return method


def _all_players(tournament: Tournament) -> Iterable[Player]:
    yield from tournament.players
    for division in tournament.divisions:
        yield from division.players


def has_saved_hole_time_data(tournament: Optional[Tournament], round_id: str) -> bool:
    """Whether any saved scorecard for the round holds a real hole time."""
    if tournament is None or not round_id:
        return False
    for player in _all_players(tournament):
        card = player.get_score_card(round_id)
        if card is not None and any(is_real_time_data(s.hole_time) for s in card.scores):
            return True
    return False


def has_unsaved_hole_time_data(
    unsaved_hole_times: Optional[UnsavedHoleTimes],
    tournament: Optional[Tournament],
    round_id: str,
) -> bool:
    """Real hole times are being edited for the round and none are saved yet."""
    if not unsaved_hole_times or not round_id:
        return False
    has_current = any(
        has_real_time_data_in_round((rounds or {}).get(round_id))
        for rounds in unsaved_hole_times.values()
    )
    return has_current and not has_saved_hole_time_data(tournament, round_id)


def clear_unsaved_hole_time_data(
    unsaved_hole_times: Optional[UnsavedHoleTimes], round_id: str
) -> Dict[str, Dict[str, Dict[int, Optional[str]]]]:
    """Copy of the unsaved hole times with the round emptied for every player."""
    cleared: Dict[str, Dict[str, Dict[int, Optional[str]]]] = {}
    for player_id, rounds in (unsaved_hole_times or {}).items():
        cleared[player_id] = {
            rid: ({} if rid == round_id else dict(times or {}))
            for rid, times in (rounds or {}).items()
        }
    return cleared
