"""Lock the hole time entry mode to the tournament's established method."""

import logging
from typing import List, Optional

from pydantic import BaseModel

from .validation import HoleTimeMode, TimeEntryMethod

logger = logging.getLogger(__name__)

METHOD_MODES = {
    TimeEntryMethod.HOLE_BY_HOLE: HoleTimeMode.DURATIONS,
    TimeEntryMethod.TIMESTAMPS: HoleTimeMode.TIMESTAMPS,
    TimeEntryMethod.START_FINISH: HoleTimeMode.NONE,
}

METHOD_NAMES = {
    TimeEntryMethod.HOLE_BY_HOLE: "Hole-by-hole durations",
    TimeEntryMethod.TIMESTAMPS: "Hole-by-hole timestamps",
    TimeEntryMethod.START_FINISH: "Round start and finish times",
}


class ModeChangeResult(BaseModel):
    accepted: bool
    mode: HoleTimeMode
    reason: Optional[str] = None


def mode_for_method(method: TimeEntryMethod) -> HoleTimeMode:
    return METHOD_MODES[TimeEntryMethod(method)]


def allowed_modes(established_method: Optional[TimeEntryMethod]) -> List[HoleTimeMode]:
    """Every mode while undetermined, otherwise only the established one."""
    if established_method is None:
        return list(HoleTimeMode)
    return [mode_for_method(established_method)]


def request_hole_time_mode_change(
    current_mode: HoleTimeMode,
    new_mode: HoleTimeMode,
    established_method: Optional[TimeEntryMethod],
) -> ModeChangeResult:
    """Switch to ``new_mode`` unless it conflicts with the established method.

    A rejected request keeps ``current_mode`` and explains which method is
    locked in.
    """
    current_mode = HoleTimeMode(current_mode)
    new_mode = HoleTimeMode(new_mode)
    if established_method is None:
        return ModeChangeResult(accepted=True, mode=new_mode)

    established_method = TimeEntryMethod(established_method)
    if mode_for_method(established_method) != new_mode:
        reason = (
            f"Time entry method is locked to '{METHOD_NAMES[established_method]}' "
            "based on existing tournament data."
        )
        logger.warning("Rejected hole time mode change to %s: %s", new_mode.value, reason)
        return ModeChangeResult(accepted=False, mode=current_mode, reason=reason)
    return ModeChangeResult(accepted=True, mode=new_mode)
