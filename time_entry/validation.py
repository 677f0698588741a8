"""Checks for whether a hole time string holds real data, and of which kind."""

import re
from enum import Enum
from typing import Any, Mapping, Optional

from models.scorecard import NO_TIME

ZERO_MMSS = re.compile(r"^0{1,2}:0{1,2}$")
ZERO_HHMMSS = re.compile(r"^0{1,2}:0{1,2}:0{1,2}$")
DURATION_PATTERN = re.compile(r"^\d{1,2}:\d{2}$")
TIMESTAMP_PATTERN = re.compile(r"^\d{1,2}:\d{2}:\d{2}$")

# Timestamps outside golf hours are assumed to be mis-stored durations.
FIRST_GOLF_HOUR = 6
LAST_GOLF_HOUR = 20


class TimeEntryMethod(str, Enum):
    """How a tournament records time, once established by saved data."""
    HOLE_BY_HOLE = "hole_by_hole"
    TIMESTAMPS = "timestamps"
    START_FINISH = "start_finish"


class HoleTimeMode(str, Enum):
    """Hole time entry mode offered to the scorer."""
    NONE = "none"
    DURATIONS = "durations"
    TIMESTAMPS = "timestamps"


class TimeValueKind(str, Enum):
    DURATION = "duration"
    TIMESTAMP = "timestamp"
    OTHER = "other"


def is_real_time_data(hole_time: Any) -> bool:
    """Non-empty, not ``"--:--"`` and not an all-zero pattern."""
    if not hole_time or not isinstance(hole_time, str) or hole_time == NO_TIME:
        return False
    return not (ZERO_MMSS.match(hole_time) or ZERO_HHMMSS.match(hole_time))


def is_real_duration_data(value: Any) -> bool:
    """A non-zero ``MM:SS`` duration."""
    if not value or not isinstance(value, str):
        return False
    return bool(DURATION_PATTERN.match(value)) and not ZERO_MMSS.match(value)


def is_real_timestamp_data(value: Any) -> bool:
    """A non-zero ``HH:MM:SS`` clock time between 06:00 and 20:59."""
    if not value or not isinstance(value, str):
        return False
    if not TIMESTAMP_PATTERN.match(value) or ZERO_HHMMSS.match(value):
        return False
    hour = int(value.split(":")[0])
    return FIRST_GOLF_HOUR <= hour <= LAST_GOLF_HOUR


def classify_time_value(value: Any) -> Optional[TimeValueKind]:
    """Kind of a single hole time; None if it is not real data."""
    if is_real_timestamp_data(value):
        return TimeValueKind.TIMESTAMP
    if is_real_duration_data(value):
        return TimeValueKind.DURATION
    if is_real_time_data(value):
        return TimeValueKind.OTHER
    return None


def has_real_time_data_in_round(hole_times: Optional[Mapping[Any, Any]]) -> bool:
    if not hole_times:
        return False
    return any(is_real_time_data(t) for t in hole_times.values())
