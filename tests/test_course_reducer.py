import pytest

from courses import (
    AddTee,
    DuplicateError,
    InvalidFeatureError,
    InvalidFieldError,
    NotFoundError,
    UnknownActionError,
    UpdateHoleInfo,
    apply_course_action,
    compute_friendliness_rating,
    count_path_data_complete,
    get_path_insertion_point,
    parse_action,
)
from geometry import FEET_TO_DEGREES
from geometry.units import meters_to_feet, yards_to_feet
from models import Course, Hole, Point, SpeedgolfPlay


def _feet_east(feet: float, elevation=None) -> Point:
    return Point(lat=0.0, lng=feet * FEET_TO_DEGREES, elevation=elevation)


def _build_course(num_holes: int = 18, tee_name: str = "White") -> Course:
    course = Course(id="c1", name="Test Links", num_holes=num_holes)
    return apply_course_action(course, AddTee(tee_name=tee_name))


def _draw(course: Course, hole_num: int, feature: str, points, tee: str = "White") -> Course:
    return apply_course_action(course, {
        "type": "UPDATE_HOLE_FEATURE",
        "tee": tee,
        "holeNum": hole_num,
        "featureType": feature,
        "featureCoords": [p.model_dump(by_alias=True) for p in points],
    })


def _hole_info(course: Course, hole_num: int, prop: str, value, tee: str = "White") -> Course:
    return apply_course_action(course, {
        "type": "UPDATE_HOLE_INFO",
        "tee": tee,
        "holeNum": hole_num,
        "propName": prop,
        "propVal": value,
    })


# ================================================================
# ADD_TEE / SET_COURSE / dispatch
# ================================================================

def test_add_tee_creates_blank_holes():
    course = _build_course()
    tee = course.tees["White"]

    assert len(tee.holes) == 18
    assert [h.number for h in tee.holes] == list(range(1, 19))
    assert tee.num_holes_path_data_complete == 0
    assert tee.num_holes_golf_data_complete == 0
    assert tee.path_insertion_point.path == "golfPath"
    assert tee.path_insertion_point.hole_num == 1
    assert tee.poly_insertion_point.poly == "teebox"
    assert tee.holes[0].start_run_distance == 0
    assert tee.holes[-1].finish_run_distance == 0
    assert tee.holes[1].golf_distance is None


def test_add_tee_keeps_insertion_order_and_replaces_existing():
    course = _build_course()
    course = apply_course_action(course, AddTee(tee_name="Blue"))
    course = _hole_info(course, 1, "mensStrokePar", 4)
    course = apply_course_action(course, AddTee(tee_name="White"))

    assert list(course.tees) == ["White", "Blue"]
    assert course.tees["White"].holes[0].mens_stroke_par is None


def test_actions_do_not_modify_input():
    course = _build_course()
    before = course.model_dump()

    updated = _hole_info(course, 3, "mensStrokePar", 5)

    assert course.model_dump() == before
    assert updated is not course
    assert updated.tees["White"].holes[2].mens_stroke_par == 5


def test_set_course_replaces_document():
    course = _build_course()
    replacement = Course(id="c2", name="Other", num_holes=9)
    updated = apply_course_action(course, {"type": "SET_COURSE", "payload": replacement.model_dump()})
    assert updated.id == "c2"
    assert updated.tees == {}


def test_unknown_action_raises():
    with pytest.raises(UnknownActionError) as exc:
        apply_course_action(_build_course(), {"type": "DELETE_EVERYTHING"})
    assert exc.value.action_type == "DELETE_EVERYTHING"


def test_parse_action_reads_camel_case():
    action = parse_action({"type": "UPDATE_HOLE_INFO", "tee": "White", "holeNum": 2, "propName": "name", "propVal": "Dogleg"})
    assert isinstance(action, UpdateHoleInfo)
    assert action.hole_num == 2


def test_missing_tee_or_hole_raises():
    course = _build_course(num_holes=9)
    with pytest.raises(NotFoundError):
        _hole_info(course, 1, "mensStrokePar", 4, tee="Red")
    with pytest.raises(NotFoundError):
        _hole_info(course, 10, "mensStrokePar", 4)


# ================================================================
# UPDATE_HOLE_INFO
# ================================================================

def test_run_distance_recomputes_both_time_pars():
    course = _build_course()
    course = _hole_info(course, 1, "mensStrokePar", 4)
    course = _hole_info(course, 1, "womensStrokePar", 5)
    course = _hole_info(course, 1, "runDistance", 528)
    hole = course.tees["White"].holes[0]

    assert hole.run_distance == 528
    assert hole.mens_time_par == pytest.approx(162)
    assert hole.womens_time_par == pytest.approx(223)


def test_stroke_par_recomputes_only_its_gender():
    course = _build_course()
    course = _hole_info(course, 1, "runDistance", 528)
    hole = course.tees["White"].holes[0]
    assert hole.mens_time_par is None         # no stroke par yet

    course = _hole_info(course, 1, "womensStrokePar", 5)
    hole = course.tees["White"].holes[0]
    assert hole.womens_time_par == pytest.approx(223)
    assert hole.mens_time_par is None


def test_golf_distance_converted_to_feet():
    course = Course(id="c1", num_holes=2)
    course = apply_course_action(course, AddTee(tee_name="White"))
    course = apply_course_action(course, UpdateHoleInfo(
        tee="White", hole_num=1, prop_name="golfDistance", prop_val="100", convert_to_ft=yards_to_feet
    ))
    assert course.tees["White"].holes[0].golf_distance == 300

    course = apply_course_action(course, UpdateHoleInfo(
        tee="White", hole_num=2, prop_name="golfDistance", prop_val=100, convert_to_ft=meters_to_feet
    ))
    assert course.tees["White"].holes[1].golf_distance == pytest.approx(328.084, rel=1e-4)


def test_golf_data_completion_count():
    course = _build_course()
    course = _hole_info(course, 1, "golfDistance", 350)
    course = _hole_info(course, 1, "mensStrokePar", 4)
    assert course.tees["White"].num_holes_golf_data_complete == 0

    course = _hole_info(course, 1, "womensStrokePar", 4)
    assert course.tees["White"].num_holes_golf_data_complete == 1

    course = _hole_info(course, 1, "golfDistance", "")
    assert course.tees["White"].holes[0].golf_distance is None
    assert course.tees["White"].num_holes_golf_data_complete == 0


def test_invalid_values_leave_course_unchanged():
    course = _build_course()
    course = _hole_info(course, 1, "mensStrokePar", 4)

    updated = _hole_info(course, 1, "mensStrokePar", 42)
    assert updated.tees["White"].holes[0].mens_stroke_par == 4

    updated = _hole_info(course, 1, "golfDistance", "far")
    assert updated.tees["White"].holes[0].golf_distance is None


def test_hole_info_rejects_paths_and_numbers():
    course = _build_course()
    with pytest.raises(InvalidFieldError):
        _hole_info(course, 1, "golfPath", [])
    with pytest.raises(InvalidFieldError):
        _hole_info(course, 1, "number", 7)
    with pytest.raises(InvalidFieldError):
        _hole_info(course, 1, "notAField", 1)


# ================================================================
# UPDATE_HOLE_FEATURE
# ================================================================

def test_golf_path_samples_and_computes_stats():
    course = _build_course()
    course = _hole_info(course, 1, "mensStrokePar", 4)
    course = _draw(course, 1, "golfPath", [_feet_east(0, 100), _feet_east(1056, 110)])
    tee = course.tees["White"]
    hole = tee.holes[0]

    assert len(hole.golf_path) == 2
    assert len(hole.golf_path_sampled) == 107
    assert hole.golf_run_distance == pytest.approx(1056)
    assert hole.run_distance == pytest.approx(1056)
    assert hole.trans_run_distance == 0
    assert hole.mens_time_par == pytest.approx(84 + 120)
    assert hole.womens_time_par is None

    assert tee.num_holes_path_data_complete == 1
    assert tee.path_insertion_point.path == "transitionPath"
    assert tee.path_insertion_point.hole_num == 2


def test_transition_path_adds_to_run_distance():
    course = _build_course(num_holes=2)
    course = _draw(course, 2, "transitionPath", [_feet_east(0), _feet_east(200)])
    course = _draw(course, 2, "golfPath", [_feet_east(200), _feet_east(500)])
    hole = course.tees["White"].holes[1]

    assert hole.trans_run_distance == pytest.approx(200)
    assert hole.golf_run_distance == pytest.approx(300)
    assert hole.run_distance == pytest.approx(500)


def test_supplied_sampled_path_is_used():
    course = _build_course(num_holes=1)
    sampled = [_feet_east(0), _feet_east(50), _feet_east(90)]
    course = apply_course_action(course, {
        "type": "UPDATE_HOLE_FEATURE",
        "tee": "White",
        "holeNum": 1,
        "featureType": "golfPath",
        "featureCoords": [p.model_dump(by_alias=True) for p in (_feet_east(0), _feet_east(100))],
        "sampledPathCoords": [p.model_dump(by_alias=True) for p in sampled],
    })
    hole = course.tees["White"].holes[0]
    assert hole.golf_path_sampled == sampled
    assert hole.golf_run_distance == pytest.approx(90)


def test_clearing_a_path():
    course = _build_course(num_holes=1)
    course = _draw(course, 1, "golfPath", [_feet_east(0), _feet_east(100)])
    course = apply_course_action(course, {
        "type": "UPDATE_HOLE_FEATURE",
        "tee": "White",
        "holeNum": 1,
        "featureType": "golfPath",
        "featureCoords": None,
    })
    tee = course.tees["White"]
    assert tee.holes[0].golf_path is None
    assert tee.holes[0].golf_path_sampled is None
    assert tee.holes[0].run_distance == 0
    assert tee.num_holes_path_data_complete == 0


def test_polygons_update_poly_fields():
    course = _build_course(num_holes=2)
    box = [Point(lat=0, lng=0), Point(lat=0, lng=0.0001), Point(lat=0.0001, lng=0)]
    course = _draw(course, 1, "teebox", box)
    tee = course.tees["White"]
    assert tee.num_holes_poly_data_complete == 0
    assert tee.poly_insertion_point.poly == "green"

    course = _draw(course, 1, "green", box)
    tee = course.tees["White"]
    assert tee.num_holes_poly_data_complete == 1
    assert tee.poly_insertion_point.poly == "teebox"
    assert tee.poly_insertion_point.hole_num == 2


def test_bad_features_raise():
    course = _build_course(num_holes=1)
    with pytest.raises(InvalidFeatureError):
        _draw(course, 1, "bunker", [_feet_east(0), _feet_east(10)])
    with pytest.raises(InvalidFeatureError):
        _draw(course, 1, "golfPath", [_feet_east(0)])


# ================================================================
# SET_HAS_TEE_SF_LINE
# ================================================================

def test_start_line_changes_insertion_point_and_distance():
    course = _build_course(num_holes=2)
    course = apply_course_action(course, {"type": "SET_HAS_TEE_SF_LINE", "tee": "White", "propName": "hasStartLine", "has": True})
    tee = course.tees["White"]
    assert tee.has_start_line
    assert tee.path_insertion_point.path == "startPath"

    course = _draw(course, 1, "startPath", [_feet_east(0), _feet_east(100)])
    course = _draw(course, 1, "golfPath", [_feet_east(100), _feet_east(400)])
    hole = course.tees["White"].holes[0]
    assert hole.start_run_distance == pytest.approx(100)
    assert hole.run_distance == pytest.approx(400)

    course = apply_course_action(course, {"type": "SET_HAS_TEE_SF_LINE", "tee": "White", "propName": "hasStartLine", "has": False})
    hole = course.tees["White"].holes[0]
    assert hole.run_distance == pytest.approx(300)


def test_finish_line_insertion_point_on_last_hole():
    course = _build_course(num_holes=2)
    course = apply_course_action(course, {"type": "SET_HAS_TEE_SF_LINE", "tee": "White", "propName": "hasFinishLine", "has": True})
    course = _draw(course, 1, "golfPath", [_feet_east(0), _feet_east(300)])
    course = _draw(course, 2, "transitionPath", [_feet_east(300), _feet_east(350)])
    course = _draw(course, 2, "golfPath", [_feet_east(350), _feet_east(650)])
    tee = course.tees["White"]
    assert tee.path_insertion_point.path == "finishPath"
    assert tee.path_insertion_point.hole_num == 2

    course = _draw(course, 2, "finishPath", [_feet_east(650), _feet_east(700)])
    tee = course.tees["White"]
    assert tee.path_insertion_point.path == ""
    assert tee.holes[1].finish_run_distance == pytest.approx(50)
    assert tee.holes[1].run_distance == pytest.approx(400)


def test_one_hole_tee_runs_from_start_line_only():
    course = _build_course(num_holes=1)
    for prop in ("hasStartLine", "hasFinishLine"):
        course = apply_course_action(course, {"type": "SET_HAS_TEE_SF_LINE", "tee": "White", "propName": prop, "has": True})
    course = _draw(course, 1, "startPath", [_feet_east(0), _feet_east(100)])
    course = _draw(course, 1, "golfPath", [_feet_east(100), _feet_east(400)])
    course = _draw(course, 1, "finishPath", [_feet_east(400), _feet_east(450)])
    hole = course.tees["White"].holes[0]

    assert hole.start_run_distance == pytest.approx(100)
    assert hole.golf_run_distance == pytest.approx(300)
    assert hole.finish_run_distance == 0
    assert hole.run_distance == pytest.approx(400)
    assert course.tees["White"].path_insertion_point.path == ""


def test_sf_line_rejects_other_fields():
    with pytest.raises(InvalidFieldError):
        apply_course_action(_build_course(), {"type": "SET_HAS_TEE_SF_LINE", "tee": "White", "propName": "name", "has": True})


# ================================================================
# UPDATE_TEE_NAME
# ================================================================

def test_rename_tee_keeps_position():
    course = _build_course()
    course = apply_course_action(course, AddTee(tee_name="Blue"))
    course = apply_course_action(course, {"type": "UPDATE_TEE_NAME", "prevTeeName": "White", "newTeeName": "Gold"})

    assert list(course.tees) == ["Gold", "Blue"]
    assert course.tees["Gold"].name == "Gold"
    assert len(course.tees["Gold"].holes) == 18


def test_rename_tee_to_existing_name_raises():
    course = _build_course()
    course = apply_course_action(course, AddTee(tee_name="Blue"))
    with pytest.raises(DuplicateError):
        apply_course_action(course, {"type": "UPDATE_TEE_NAME", "prevTeeName": "White", "newTeeName": "Blue"})


# ================================================================
# Course info / speedgolf info / slope and rating
# ================================================================

def test_update_course_info():
    course = apply_course_action(_build_course(), {"type": "UPDATE_COURSE_INFO", "propName": "shortName", "propVal": "TL"})
    assert course.short_name == "TL"

    with pytest.raises(InvalidFieldError):
        apply_course_action(course, {"type": "UPDATE_COURSE_INFO", "propName": "sgPlay", "propVal": "sgAnytime"})


def _sg(course: Course, prop: str, value) -> Course:
    return apply_course_action(course, {"type": "UPDATE_SG_INFO", "propName": prop, "propVal": value})


def test_friendliness_rating_follows_sg_info():
    course = _build_course()
    course = _sg(course, "sgPlay", "sgAnytime")
    assert course.sg_friendliness_rating == 3

    course = _sg(course, "sgStandingTeeTimes", True)
    assert course.sg_friendliness_rating == 4

    course = _sg(course, "sgRoundDiscount", True)
    assert course.sg_friendliness_rating == 5

    course = _sg(course, "sgMembership", True)
    assert course.sg_friendliness_rating == 5

    course = _sg(course, "sgPlay", "sgNotAllowed")
    assert course.sg_friendliness_rating == 0
    assert not course.sg_membership
    assert not course.sg_round_discount
    assert not course.sg_standing_tee_times


def test_sg_notes_do_not_change_rating():
    course = _sg(_build_course(), "sgPlay", "sgSpecialArrangementOnly")
    course = _sg(course, "sgNotes", "Call ahead")
    assert course.sg_notes == "Call ahead"
    assert course.sg_friendliness_rating == 1


def test_compute_friendliness_rating():
    assert compute_friendliness_rating(Course()) == 0
    assert compute_friendliness_rating(Course(sg_play=SpeedgolfPlay.REGULAR_TEE_TIMES_ONLY, sg_membership=True)) == 3
    assert compute_friendliness_rating(Course(sg_play=SpeedgolfPlay.NOT_ALLOWED, sg_membership=True)) == 0


def test_slope_and_rating():
    course = apply_course_action(_build_course(), {
        "type": "UPDATE_SLOPE_RATING_INFO", "tee": "White", "propName": "mensSlope", "propVal": 128,
    })
    assert course.tees["White"].mens_slope == 128

    course = apply_course_action(course, {
        "type": "UPDATE_SLOPE_RATING_INFO", "tee": "White", "propName": "mensSlope", "propVal": 300,
    })
    assert course.tees["White"].mens_slope == 128

    with pytest.raises(InvalidFieldError):
        apply_course_action(course, {
            "type": "UPDATE_SLOPE_RATING_INFO", "tee": "White", "propName": "name", "propVal": "x",
        })


# ================================================================
# Derived fields
# ================================================================

def test_derived_fields_match_hole_list():
    course = _build_course(num_holes=3)
    course = _draw(course, 1, "golfPath", [_feet_east(0), _feet_east(300)])
    course = _draw(course, 2, "transitionPath", [_feet_east(300), _feet_east(350)])
    course = _draw(course, 3, "golfPath", [_feet_east(600), _feet_east(900)])
    tee = course.tees["White"]

    assert tee.num_holes_path_data_complete == count_path_data_complete(tee.holes) == 1
    expected = get_path_insertion_point(tee.has_start_line, tee.has_finish_line, tee.holes)
    assert tee.path_insertion_point == expected
    assert (expected.path, expected.hole_num) == ("golfPath", 2)


def test_replaying_an_action_is_idempotent():
    course = _build_course(num_holes=2)
    action = {
        "type": "UPDATE_HOLE_FEATURE",
        "tee": "White",
        "holeNum": 1,
        "featureType": "golfPath",
        "featureCoords": [p.model_dump(by_alias=True) for p in (_feet_east(0), _feet_east(120))],
    }
    once = apply_course_action(course, action)
    twice = apply_course_action(once, action)
    assert once.model_dump() == twice.model_dump()


def test_all_paths_defined_insertion_point():
    holes = [
        Hole(number=1, golf_path=[_feet_east(0), _feet_east(1)]),
        Hole(number=2, transition_path=[_feet_east(1), _feet_east(2)], golf_path=[_feet_east(2), _feet_east(3)]),
    ]
    point = get_path_insertion_point(False, False, holes)
    assert point.path == ""
    assert point.hole_num == 2
