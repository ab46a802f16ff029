"""
Unit tags for the numeric values flowing through the workflow.

Each tag is a distinct nominal type for the type checker, so a latitude cannot
be passed where a longitude or a distance is expected. The helper functions
below are the only places where a raw float gets a unit.
"""

from typing import NewType

DegreesLatitude = NewType("DegreesLatitude", float)
DegreesLongitude = NewType("DegreesLongitude", float)
Radians = NewType("Radians", float)
Meters = NewType("Meters", float)
Feet = NewType("Feet", float)

METERS_PER_FOOT = 0.3048


def degrees_latitude(value: float) -> DegreesLatitude:
    return DegreesLatitude(float(value))


def degrees_longitude(value: float) -> DegreesLongitude:
    return DegreesLongitude(float(value))
