from .par_calc import (
    DEFAULT_HOLE_PAR,
    SGSBreakdown,
    SGSToPar,
    ScoreClass,
    calc_in_sgs,
    calc_in_sgs_to_par,
    calc_in_stroke_par,
    calc_in_strokes,
    calc_in_strokes_to_par,
    calc_in_time,
    calc_in_time_to_par,
    calc_out_sgs,
    calc_out_sgs_to_par,
    calc_out_stroke_par,
    calc_out_strokes,
    calc_out_strokes_to_par,
    calc_out_time,
    calc_out_time_to_par,
    calc_total_sgs,
    calc_total_sgs_to_par,
    calc_total_stroke_par,
    calc_total_strokes,
    calc_total_strokes_to_par,
    calc_total_time,
    calc_total_time_to_par,
    calculate_header_time_par,
    calculate_in_par,
    calculate_in_time_par,
    calculate_out_par,
    calculate_out_time_par,
    calculate_sgs,
    calculate_total_par,
    calculate_total_time_par,
    format_sgs_to_par,
    format_strokes_to_par,
    format_time_to_par,
    get_hole_par,
    get_score_class,
    hole_par_lookup,
    parse_strokes,
    round_half_up,
    strokes_to_par_label,
)
from .rounds import (
    HoleTimeValidation,
    RoundEntry,
    apply_hole_time_change,
    apply_score_change,
    calculate_finish_time_from_hole_times,
    convert_duration_for_saving,
    get_hole_numbers,
    has_completed_previous_round,
    is_save_enabled,
    validate_hole_times,
)
from .time_utils import (
    calculate_time_from_finish_and_start,
    calculate_total_time_in_seconds,
    clock_to_seconds,
    convert_to_24_hour,
    format_mmss,
    format_to_ampm,
    mmss_to_seconds,
    seconds_to_mmss,
    time_to_par,
)
