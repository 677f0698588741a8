from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Gender, Hole


class PathInsertionPoint(BaseGolfModel):
    """Next path the user must define. ``path == ""`` once all are defined."""
    path: str = "golfPath"
    hole_num: int = 1


class PolyInsertionPoint(BaseGolfModel):
    """Next polygon the user must define. ``poly == ""`` once all are defined."""
    poly: str = "teebox"
    hole_num: int = 1


class Tee(BaseGolfModel):
    """A set of tees on a course, with its holes and mapping progress."""
    name: str
    has_start_line: bool = False
    has_finish_line: bool = False
    holes: List[Hole] = Field(default_factory=list)

    num_holes_golf_data_complete: int = Field(0, ge=0)
    num_holes_path_data_complete: int = Field(0, ge=0)
    num_holes_poly_data_complete: int = Field(0, ge=0)
    path_insertion_point: PathInsertionPoint = Field(default_factory=PathInsertionPoint)
    poly_insertion_point: PolyInsertionPoint = Field(default_factory=PolyInsertionPoint)

    golf_distance: Optional[float] = None
    running_distance: Optional[float] = None
    mens_stroke_par: Optional[int] = None
    womens_stroke_par: Optional[int] = None
    mens_time_par: Optional[float] = None
    womens_time_par: Optional[float] = None
    mens_slope: Optional[float] = Field(None, ge=55, le=155)
    womens_slope: Optional[float] = Field(None, ge=55, le=155)
    mens_rating: Optional[float] = Field(None, ge=55.0, le=85.0)
    womens_rating: Optional[float] = Field(None, ge=55.0, le=85.0)

    @model_validator(mode='after')
    def validate_hole_numbers(self):
        for index, hole in enumerate(self.holes, start=1):
            if hole.number != index:
                raise ValueError(f"Hole at position {index} is numbered {hole.number}")
        return self

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-based)."""
        if 1 <= number <= len(self.holes):
            return self.holes[number - 1]
        return None

    def stroke_par_total(self, gender: Gender) -> Optional[int]:
        """Sum of the gendered stroke pars, or None if any hole lacks one."""
        pars = [hole.get_stroke_par(gender) for hole in self.holes]
        if not pars or any(p is None for p in pars):
            return None
        return sum(pars)

    @property
    def is_fully_mapped(self) -> bool:
        count = len(self.holes)
        return (
            count > 0
            and self.num_holes_path_data_complete == count
            and self.num_holes_poly_data_complete == count
        )
