"""Distance unit conversions. Course distances are stored in feet."""

from typing import Callable

FEET_IN_MILE = 5280
FEET_IN_YARD = 3
FEET_IN_METER = 3.280839895
FEET_IN_KM = 3280.84

IMPERIAL = "Imperial"
METRIC = "Metric"


def yards_to_feet(yards: float) -> float:
    return yards * FEET_IN_YARD


def meters_to_feet(meters: float) -> float:
    return meters * FEET_IN_METER


def feet_to_yards(feet: float) -> float:
    return feet / FEET_IN_YARD


def feet_to_meters(feet: float) -> float:
    return feet / FEET_IN_METER


def feet_to_miles(feet: float) -> float:
    return feet / FEET_IN_MILE


def feet_to_km(feet: float) -> float:
    return feet / FEET_IN_KM


def converter_for_units(units: str) -> Callable[[float], float]:
    """Return the function that converts a displayed golf distance to feet.

    Imperial scorecards show yards, metric scorecards show meters.
    """
    if units.lower() == METRIC.lower():
        return meters_to_feet
    if units.lower() == IMPERIAL.lower():
        return yards_to_feet
    raise ValueError(f"Unknown units '{units}'")
