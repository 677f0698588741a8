from .base import BaseGolfModel
from .course import Course, SpeedgolfPlay
from .hole import Gender, Hole, PathType, PolyType
from .point import Point
from .round import HoleSelection, Round
from .scorecard import NO_TIME, HoleScore, ScoreCard
from .tee import PathInsertionPoint, PolyInsertionPoint, Tee
from .tournament import Division, Player, Tournament, round_index

__all__ = [
    "BaseGolfModel",
    "Course",
    "Division",
    "Gender",
    "Hole",
    "HoleScore",
    "HoleSelection",
    "NO_TIME",
    "PathInsertionPoint",
    "PathType",
    "Player",
    "Point",
    "PolyInsertionPoint",
    "PolyType",
    "Round",
    "ScoreCard",
    "SpeedgolfPlay",
    "Tee",
    "Tournament",
    "round_index",
]
