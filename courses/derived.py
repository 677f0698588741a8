"""Derived tee fields. Each is recomputed from the full hole list."""

from typing import List

from models.course import Course, SpeedgolfPlay
from models.hole import Hole, PathType, PolyType
from models.tee import PathInsertionPoint, PolyInsertionPoint

PLAY_RATINGS = {
    SpeedgolfPlay.ANYTIME: 3,
    SpeedgolfPlay.REGULAR_TEE_TIMES_ONLY: 2,
    SpeedgolfPlay.SPECIAL_ARRANGEMENT_ONLY: 1,
}


def count_golf_data_complete(holes: List[Hole]) -> int:
    """Holes with a golf distance and both stroke pars."""
    return sum(1 for hole in holes if hole.has_golf_data)


def is_path_data_complete(holes: List[Hole], index: int) -> bool:
    """Positional completion rule.

    The first hole needs only its golf path; every other hole needs its
    transition and golf paths. Start and finish paths never block completion.
    """
    hole = holes[index]
    if index == 0:
        return hole.golf_path is not None
    return hole.transition_path is not None and hole.golf_path is not None


def count_path_data_complete(holes: List[Hole]) -> int:
    return sum(1 for i in range(len(holes)) if is_path_data_complete(holes, i))


def get_path_insertion_point(has_start_line: bool, has_finish_line: bool, holes: List[Hole]) -> PathInsertionPoint:
    """First path, in drawing order, that still needs to be defined."""
    last = len(holes) - 1
    for i, hole in enumerate(holes):
        if i == 0 and has_start_line and not hole.has_path(PathType.START):
            return PathInsertionPoint(path=PathType.START.value, hole_num=i + 1)
        if i != 0 and not hole.has_path(PathType.TRANSITION):
            return PathInsertionPoint(path=PathType.TRANSITION.value, hole_num=i + 1)
        if not hole.has_path(PathType.GOLF):
            return PathInsertionPoint(path=PathType.GOLF.value, hole_num=i + 1)
        if i == last and has_finish_line and not hole.has_path(PathType.FINISH):
            return PathInsertionPoint(path=PathType.FINISH.value, hole_num=i + 1)
    return PathInsertionPoint(path="", hole_num=len(holes))


def count_poly_data_complete(holes: List[Hole]) -> int:
    """Holes with both a teebox and a green polygon."""
    return sum(1 for hole in holes if hole.has_poly(PolyType.TEEBOX) and hole.has_poly(PolyType.GREEN))


def get_poly_insertion_point(holes: List[Hole]) -> PolyInsertionPoint:
    for i, hole in enumerate(holes):
        if not hole.has_poly(PolyType.TEEBOX):
            return PolyInsertionPoint(poly=PolyType.TEEBOX.value, hole_num=i + 1)
        if not hole.has_poly(PolyType.GREEN):
            return PolyInsertionPoint(poly=PolyType.GREEN.value, hole_num=i + 1)
    return PolyInsertionPoint(poly="", hole_num=len(holes))


def compute_friendliness_rating(course: Course) -> int:
    """Speedgolf friendliness, 0-5.

    Up to 3 for how freely speedgolf can be played, plus one for standing
    tee times and one for a membership or round discount.
    """
    if course.sg_play == SpeedgolfPlay.NOT_ALLOWED:
        return 0
    rating = PLAY_RATINGS.get(course.sg_play, 0)
    if course.sg_standing_tee_times:
        rating += 1
    if course.sg_membership or course.sg_round_discount:
        rating += 1
    return rating
