import pytest

from models import Gender, Hole, HoleSelection, Tee
from scoring import (
    DEFAULT_HOLE_PAR,
    ScoreClass,
    calc_in_strokes,
    calc_out_sgs,
    calc_out_sgs_to_par,
    calc_out_stroke_par,
    calc_out_strokes,
    calc_out_time,
    calc_out_time_to_par,
    calc_total_sgs,
    calc_total_sgs_to_par,
    calc_total_stroke_par,
    calc_total_strokes,
    calc_total_strokes_to_par,
    calculate_header_time_par,
    calculate_in_par,
    calculate_out_par,
    calculate_out_time_par,
    calculate_sgs,
    calculate_total_par,
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


def _par_four(hole_num: int) -> int:
    return 4


def _build_tee() -> Tee:
    """Three holes with fractional time pars."""
    return Tee(
        name="White",
        holes=[
            Hole(number=1, mens_stroke_par=4, womens_stroke_par=5, mens_time_par=150.4, womens_time_par=175.0),
            Hole(number=2, mens_stroke_par=4, womens_stroke_par=4, mens_time_par=155.5, womens_time_par=160.0),
            Hole(number=3, mens_stroke_par=4, womens_stroke_par=4, mens_time_par=153.6, womens_time_par=158.0),
        ],
    )


SCORES = {1: 5, 2: 4, 3: 4}
HOLE_TIMES = {1: "03:00", 2: "02:30", 3: "02:45"}


# ================================================================
# Strokes and stroke par
# ================================================================

def test_total_strokes_to_par_counts_entered_holes_only():
    scores = {1: 5, 2: 3}
    assert calc_total_strokes(scores) == 8
    assert calc_total_stroke_par(scores, _par_four) == 8
    diff = calc_total_strokes_to_par(scores, _par_four)
    assert diff == 0
    assert strokes_to_par_label(diff) == "E"


def test_out_and_in_split():
    scores = {1: 3, 9: 5, 10: 5, 18: 4}
    assert calc_out_strokes(scores) == 8
    assert calc_in_strokes(scores) == 9
    assert calc_total_strokes(scores) == 17
    assert calc_total_strokes(scores, HoleSelection.FRONT_NINE) == 8
    assert calc_total_strokes(scores, "Back 9") == 9


def test_missing_and_zero_strokes_are_skipped():
    scores = {1: 5, 2: 0, 3: None, 4: "", 5: "x", 6: "4"}
    assert calc_out_strokes(scores) == 9
    assert calc_out_stroke_par(scores, _par_four) == 8


def test_parse_strokes():
    assert parse_strokes("5") == 5
    assert parse_strokes(3) == 3
    assert parse_strokes(0) is None
    assert parse_strokes("") is None
    assert parse_strokes(None) is None
    assert parse_strokes("abc") is None


def test_full_par_ignores_entries():
    assert calculate_out_par(_par_four) == 36
    assert calculate_in_par(_par_four) == 36
    assert calculate_total_par(_par_four) == 72
    assert calculate_total_par(_par_four, HoleSelection.BACK_NINE) == 36


def test_hole_par_lookup_defaults_to_four():
    tee = _build_tee()
    assert get_hole_par(tee, 1, Gender.WOMENS) == 5
    assert get_hole_par(tee, 1, Gender.MENS) == 4
    assert get_hole_par(tee, 12, Gender.MENS) == DEFAULT_HOLE_PAR
    assert get_hole_par(None, 1, Gender.MENS) == DEFAULT_HOLE_PAR
    assert hole_par_lookup(tee, "womens")(1) == 5


# ================================================================
# Time and time par
# ================================================================

def test_time_counts_real_entries_only():
    hole_times = {1: "02:00", 2: "--:--", 3: "00:00", 4: "1:30", 5: None, 10: "05:00"}
    assert calc_out_time(hole_times) == 210


def test_time_par_rounds_each_hole():
    tee = Tee(
        name="White",
        holes=[
            Hole(number=1, mens_time_par=100.5),
            Hole(number=2, mens_time_par=200.4),
            Hole(number=3, mens_time_par=50.0),
        ],
    )
    hole_times = {1: "02:00", 2: "03:00"}
    assert calculate_out_time_par(hole_times, tee, Gender.MENS) == 301
    assert calculate_header_time_par(tee, Gender.MENS) == 351
    assert calc_out_time_to_par(hole_times, tee, Gender.MENS) == 300 - 301


def test_time_par_missing_tee_is_zero():
    assert calculate_out_time_par({1: "02:00"}, None, Gender.MENS) == 0


def test_round_half_up():
    assert round_half_up(100.5) == 101
    assert round_half_up(200.4) == 200
    assert round_half_up(2.5) == 3


# ================================================================
# Speedgolf score
# ================================================================

def test_calculate_sgs():
    assert calculate_sgs(80, "55:30") == "135:30"
    assert calculate_sgs(5, "1:05") == "06:05"
    assert calculate_sgs(0, "--:--") == "--:--"
    assert calculate_sgs(5, "--:--") == "--:--"
    assert calculate_sgs(None, "10:00") == "--:--"
    assert calculate_sgs(5, "00:00") == "--:--"


def test_sgs_breakdown():
    result = calc_out_sgs(SCORES, HOLE_TIMES)
    assert result.strokes == 13
    assert result.time_minutes == 8
    assert result.time_seconds == 15
    assert result.sgs == "21:15"
    assert result.sgs_minutes == 21


def test_sgs_breakdown_skips_holes_without_strokes():
    result = calc_total_sgs({1: 5}, {1: "03:00", 2: "10:00"})
    assert result.sgs == "08:00"


def test_sgs_breakdown_without_scores():
    result = calc_total_sgs({}, HOLE_TIMES)
    assert result.sgs == "--:--"
    assert result.strokes == 0


def test_sgs_to_par():
    tee = _build_tee()
    result = calc_out_sgs_to_par(SCORES, HOLE_TIMES, hole_par_lookup(tee, Gender.MENS), tee, Gender.MENS)

    # stroke par 12 -> 12:00, time par 150 + 156 + 154 = 460 s -> 7:40
    assert result.sgs == "21:15"
    assert result.par == "19:40"
    assert result.difference_seconds == 95
    assert format_sgs_to_par(result.sgs, result.par, result.difference_seconds) == "21:15 (+1:35)"


def test_sgs_to_par_uses_gendered_pars():
    tee = _build_tee()
    result = calc_total_sgs_to_par(SCORES, HOLE_TIMES, hole_par_lookup(tee, "womens"), tee, "womens")
    # stroke par 13 -> 13:00, time par 175 + 160 + 158 = 493 s
    assert result.par == "21:13"
    assert result.difference_seconds == 2


def test_sgs_to_par_without_scores():
    tee = _build_tee()
    result = calc_total_sgs_to_par({}, {}, _par_four, tee, Gender.MENS)
    assert result.sgs == "--:--"
    assert result.par == "--:--"
    assert format_sgs_to_par(result.sgs, result.par, result.difference_seconds) == "--:--"


# ================================================================
# Display
# ================================================================

def test_strokes_to_par_labels():
    assert strokes_to_par_label(3) == "+3"
    assert strokes_to_par_label(-2) == "-2"
    assert format_strokes_to_par(74, 72) == "74 (+2)"
    assert format_strokes_to_par(70, 72) == "70 (-2)"
    assert format_strokes_to_par(72, 72) == "72 (E)"
    assert format_strokes_to_par(0, 72) == ""


def test_time_to_par_display():
    assert format_time_to_par(330, 300) == "05:30 (+0:30)"
    assert format_time_to_par(270, 300) == "04:30 (-0:30)"
    assert format_time_to_par(300, 300) == "05:00 (E)"
    assert format_time_to_par(None, 300) == ""


def test_sgs_to_par_display():
    assert format_sgs_to_par("19:40", "19:40", 0) == "19:40 (E)"
    assert format_sgs_to_par("18:40", "19:40", -60) == "18:40 (-1:00)"


@pytest.mark.parametrize("strokes,expected", [
    (4, ScoreClass.NEUTRAL),
    (3, ScoreClass.CIRCLE),
    (5, ScoreClass.SQUARE),
    (2, ScoreClass.SOLID_CIRCLE),
    (7, ScoreClass.SOLID_SQUARE),
    (None, ScoreClass.NONE),
    ("", ScoreClass.NONE),
])
def test_score_class(strokes, expected):
    assert get_score_class(strokes, 4) == expected
