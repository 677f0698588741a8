from enum import Enum
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .point import Point


class Gender(str, Enum):
    """Division gender; selects the stroke par and time par columns."""
    MENS = "mens"
    WOMENS = "womens"


class PathType(str, Enum):
    START = "startPath"
    TRANSITION = "transitionPath"
    GOLF = "golfPath"
    FINISH = "finishPath"

    @property
    def field_name(self) -> str:
        return {
            PathType.START: "start_path",
            PathType.TRANSITION: "transition_path",
            PathType.GOLF: "golf_path",
            PathType.FINISH: "finish_path",
        }[self]

    @property
    def sampled_field_name(self) -> str:
        return self.field_name + "_sampled"


class PolyType(str, Enum):
    TEEBOX = "teebox"
    GREEN = "green"

    @property
    def field_name(self) -> str:
        return self.value


class Hole(BaseGolfModel):
    """A single hole of a tee.

    ``None`` means "not yet defined" and is distinct from 0. Distances are in
    feet and time pars in seconds.
    """
    number: int = Field(..., ge=1)
    name: Optional[str] = None

    golf_distance: Optional[float] = Field(None, ge=0)
    run_distance: Optional[float] = Field(None, ge=0)
    trans_run_distance: Optional[float] = Field(None, ge=0)
    start_run_distance: Optional[float] = Field(None, ge=0)
    golf_run_distance: Optional[float] = Field(None, ge=0)
    finish_run_distance: Optional[float] = Field(None, ge=0)

    mens_stroke_par: Optional[int] = Field(None, ge=1, le=10)
    womens_stroke_par: Optional[int] = Field(None, ge=1, le=10)
    mens_time_par: Optional[float] = Field(None, ge=0)
    womens_time_par: Optional[float] = Field(None, ge=0)
    mens_handicap: Optional[int] = Field(None, ge=1, le=18)
    womens_handicap: Optional[int] = Field(None, ge=1, le=18)

    golf_path: Optional[List[Point]] = None
    golf_path_sampled: Optional[List[Point]] = None
    transition_path: Optional[List[Point]] = None
    transition_path_sampled: Optional[List[Point]] = None
    start_path: Optional[List[Point]] = None
    start_path_sampled: Optional[List[Point]] = None
    finish_path: Optional[List[Point]] = None
    finish_path_sampled: Optional[List[Point]] = None

    teebox: Optional[List[Point]] = None
    green: Optional[List[Point]] = None

    def get_stroke_par(self, gender: Gender) -> Optional[int]:
        return self.womens_stroke_par if Gender(gender) == Gender.WOMENS else self.mens_stroke_par

    def get_time_par(self, gender: Gender) -> Optional[float]:
        return self.womens_time_par if Gender(gender) == Gender.WOMENS else self.mens_time_par

    def has_path(self, path_type: PathType) -> bool:
        return getattr(self, PathType(path_type).field_name) is not None

    def has_poly(self, poly_type: PolyType) -> bool:
        return getattr(self, PolyType(poly_type).field_name) is not None

    @property
    def has_golf_data(self) -> bool:
        """Golf distance and both stroke pars are defined."""
        return (
            self.golf_distance is not None
            and self.womens_stroke_par is not None
            and self.mens_stroke_par is not None
        )
