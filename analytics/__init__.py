from .stats import (
    elevation_profile,
    round_summary,
    tee_summary,
    time_par_by_hole,
)
from .visualizations import (
    plot_elevation_profile,
    plot_time_par_by_hole,
)

__all__ = [
    "tee_summary",
    "time_par_by_hole",
    "elevation_profile",
    "round_summary",
    "plot_elevation_profile",
    "plot_time_par_by_hole",
]
