"""Resample drawn paths at a fixed spacing.

Coordinates are treated as a flat Euclidean plane in degrees. Over the length
of a golf hole this is close enough to geodesic distance, and it matches the
scale the running distances were originally computed on.
"""

import math
from typing import Callable, Iterator, List, Optional, Sequence

from config import DEFAULT_SETTINGS
from models.point import Point

METERS_TO_DEGREES = 0.00001
FEET_TO_DEGREES = 0.3048 * METERS_TO_DEGREES

ElevationLookup = Callable[[Point], Optional[float]]


def planar_distance(start: Point, end: Point) -> float:
    """Distance between two points in degrees."""
    return math.hypot(start.lng - end.lng, start.lat - end.lat)


def path_distance_feet(points: Optional[Sequence[Point]]) -> float:
    """Length of a path in feet. A missing or single-point path is 0."""
    if not points:
        return 0.0
    total = sum(planar_distance(a, b) for a, b in zip(points, points[1:]))
    return total / FEET_TO_DEGREES


def destination_point(start: Point, end: Point, offset: float) -> Point:
    """Point on the segment start->end lying ``offset`` degrees from start."""
    d = planar_distance(start, end)
    lng = start.lng - (offset * (start.lng - end.lng)) / d
    lat = start.lat - (offset * (start.lat - end.lat)) / d
    return Point(lat=lat, lng=lng)


def iter_sampled_path(
    raw_points: Sequence[Point],
    sampling_distance_feet: Optional[float] = None,
    elevation_lookup: Optional[ElevationLookup] = None,
) -> Iterator[Point]:
    """Yield points spaced ``sampling_distance_feet`` apart along the path.

    Every segment contributes its start point and each point at a whole
    multiple of the spacing. The final raw point is always yielded with its
    coordinates unchanged.
    """
    if len(raw_points) < 2:
        raise ValueError("A path needs at least two points")
    if sampling_distance_feet is None:
        sampling_distance_feet = DEFAULT_SETTINGS.sampling_distance_feet
    if sampling_distance_feet <= 0:
        raise ValueError("Sampling distance must be positive")

    step = sampling_distance_feet * FEET_TO_DEGREES

    def with_elevation(point: Point) -> Point:
        if elevation_lookup is None:
            return point
        return point.model_copy(update={"elevation": elevation_lookup(point)})

    for start, end in zip(raw_points, raw_points[1:]):
        d = planar_distance(start, end)
        if d == 0:
            continue
        for k in range(int(d / step) + 1):
            yield with_elevation(destination_point(start, end, step * k))

    last = raw_points[-1]
    if last.elevation is None:
        last = with_elevation(last)
    yield last


def compute_sampled_path(
    raw_points: Sequence[Point],
    sampling_distance_feet: Optional[float] = None,
    elevation_lookup: Optional[ElevationLookup] = None,
) -> List[Point]:
    """Materialized form of :func:`iter_sampled_path`."""
    return list(iter_sampled_path(raw_points, sampling_distance_feet, elevation_lookup))
