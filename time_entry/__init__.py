from .detector import (
    clear_unsaved_hole_time_data,
    detect_established_method,
    has_saved_hole_time_data,
    has_unsaved_hole_time_data,
    is_legacy_hole_time_data,
)
from .enforcement import (
    METHOD_NAMES,
    ModeChangeResult,
    allowed_modes,
    mode_for_method,
    request_hole_time_mode_change,
)
from .validation import (
    HoleTimeMode,
    TimeEntryMethod,
    TimeValueKind,
    classify_time_value,
    has_real_time_data_in_round,
    is_real_duration_data,
    is_real_time_data,
    is_real_timestamp_data,
)
