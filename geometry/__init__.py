from .run_stats import (
    RunStats,
    compute_hole_running_stats,
    elevation_change,
    gendered_time_par,
    get_time_par,
)
from .sampling import (
    FEET_TO_DEGREES,
    compute_sampled_path,
    iter_sampled_path,
    path_distance_feet,
    planar_distance,
)

__all__ = [
    "FEET_TO_DEGREES",
    "RunStats",
    "compute_hole_running_stats",
    "compute_sampled_path",
    "elevation_change",
    "gendered_time_par",
    "get_time_par",
    "iter_sampled_path",
    "path_distance_feet",
    "planar_distance",
]
