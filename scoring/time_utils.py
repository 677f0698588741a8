"""Parsing and formatting of clock times and durations.

Clock times are ``HH:MM[:SS]`` with an optional ``AM``/``PM`` suffix.
Durations are ``MM:SS`` or ``HH:MM:SS``. ``"--:--"`` means no time.
"""

import logging
from typing import List, Optional

from models.scorecard import NO_TIME

logger = logging.getLogger(__name__)

SECONDS_IN_DAY = 86400


def _split_ints(value: str) -> Optional[List[int]]:
    try:
        return [int(part) for part in value.split(":")]
    except ValueError:
        return None


def parse_duration(value: Optional[str]) -> Optional[int]:
    """Seconds in an ``MM:SS`` or ``HH:MM:SS`` string, or None if unparsable."""
    if not value or value == NO_TIME:
        return None
    parts = _split_ints(value.strip())
    if parts is None:
        return None
    if len(parts) == 2:
        minutes, seconds = parts
        return minutes * 60 + seconds
    if len(parts) == 3:
        hours, minutes, seconds = parts
        return hours * 3600 + minutes * 60 + seconds
    return None


def mmss_to_seconds(value: Optional[str]) -> int:
    """Like :func:`parse_duration` but anything unparsable counts as 0."""
    seconds = parse_duration(value)
    if seconds is None:
        if value and value != NO_TIME:
            logger.debug("Invalid time format: %r", value)
        return 0
    return seconds


def clock_to_seconds(time: Optional[str]) -> Optional[int]:
    """Seconds since midnight for a 12- or 24-hour clock time."""
    if not time or time == NO_TIME:
        return None
    time_part, _, period = time.strip().partition(" ")
    parts = _split_ints(time_part)
    if parts is None or len(parts) not in (2, 3):
        return None
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) == 3 else 0

    period = period.strip().upper()
    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0
    return hours * 3600 + minutes * 60 + seconds


def convert_to_24_hour(time: Optional[str]) -> str:
    """``"01:05 PM"`` -> ``"13:05:00"``. Empty string when there is no time."""
    seconds = clock_to_seconds(time)
    if seconds is None:
        return ""
    return format_clock(seconds)


def format_clock(seconds: int) -> str:
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_to_ampm(time: Optional[str]) -> str:
    """``"13:05:00"`` -> ``"01:05:00 PM"``."""
    if not time or time == NO_TIME:
        return ""
    parts = _split_ints(time.strip())
    if parts is None or len(parts) not in (2, 3):
        return ""
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) == 3 else 0
    period = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours:02d}:{minutes:02d}:{seconds:02d} {period}"


def calculate_total_time_in_seconds(start_time: Optional[str], finish_time: Optional[str]) -> int:
    """Finish minus start in seconds; 0 when either is missing.

    A PM start with an AM finish is taken to cross midnight. The result can
    be zero or negative for inconsistent times.
    """
    start = clock_to_seconds(start_time)
    finish = clock_to_seconds(finish_time)
    if start is None or finish is None:
        return 0
    if "PM" in start_time.upper() and "AM" in finish_time.upper():
        finish += SECONDS_IN_DAY
    return finish - start


def calculate_time_from_finish_and_start(start_time: Optional[str], finish_time: Optional[str]) -> str:
    """Elapsed round time as ``M:SS``, or ``"--:--"`` if not positive."""
    elapsed = calculate_total_time_in_seconds(start_time, finish_time)
    if elapsed <= 0:
        return NO_TIME
    return seconds_to_mmss(elapsed)


def seconds_to_mmss(seconds: Optional[float]) -> str:
    """``95`` -> ``"1:35"``. Fractional seconds are floored."""
    if not seconds or seconds <= 0:
        return NO_TIME
    minutes, remainder = divmod(int(seconds), 60)
    return f"{minutes}:{remainder:02d}"


def format_mmss(seconds: int) -> str:
    """Minutes padded to at least two digits: ``65`` -> ``"01:05"``."""
    minutes, remainder = divmod(int(seconds), 60)
    return f"{minutes:02d}:{remainder:02d}"


def time_to_par(actual_seconds: Optional[float], time_par_seconds: Optional[float]) -> str:
    """Signed difference such as ``"(+1:30)"`` or ``"(E)"``.

    Empty string when either side is missing or zero.
    """
    if not actual_seconds or not time_par_seconds:
        return ""
    diff = actual_seconds - time_par_seconds
    if diff == 0:
        return "(E)"
    minutes, seconds = divmod(int(abs(diff)), 60)
    sign = "-" if diff < 0 else "+"
    return f"({sign}{minutes}:{seconds:02d})"
