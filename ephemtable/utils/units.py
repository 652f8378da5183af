"""
Conversions between the distance and time units accepted by `EphemerisTable` and the internal
units that all ephemeris data is stored in: astronomical units and days.

Conversion factors are taken from `astropy.units`, so 1 au is exactly 149,597,870.7 km (IAU 2012
Resolution B2) and 1 day is exactly 86,400 s.
"""

from enum import Enum

import astropy.units as u
import numpy.typing as npt


class UnknownUnitError(ValueError):
    """Raised when a distance or time unit tag is not recognized."""

    def __init__(self, kind: str, unit_name):
        super().__init__(f"Unknown {kind} units: {unit_name}")
        self.value = unit_name


class DistanceUnit(str, Enum):
    """Distance units that ephemeris data can be supplied in."""

    AU = "au"
    KM = "km"


class TimeUnit(str, Enum):
    """Time units that ephemeris data can be supplied in."""

    DAY = "day"
    SEC = "sec"


_DISTANCE_QUANTITIES = {DistanceUnit.AU: u.au, DistanceUnit.KM: u.km}
_TIME_QUANTITIES = {TimeUnit.DAY: u.day, TimeUnit.SEC: u.second}

INTERNAL_DISTANCE_UNIT = DistanceUnit.AU
INTERNAL_TIME_UNIT = TimeUnit.DAY


def parse_distance_unit(unit_name: str | DistanceUnit) -> DistanceUnit:
    """Get the `DistanceUnit` for a tag like `"km"`, raising `UnknownUnitError` if there is none."""
    try:
        return DistanceUnit(unit_name)
    except ValueError as e:
        raise UnknownUnitError("distance", unit_name) from e


def parse_time_unit(unit_name: str | TimeUnit) -> TimeUnit:
    """Get the `TimeUnit` for a tag like `"sec"`, raising `UnknownUnitError` if there is none."""
    try:
        return TimeUnit(unit_name)
    except ValueError as e:
        raise UnknownUnitError("time", unit_name) from e


def distance_factor(unit_name: str | DistanceUnit) -> float:
    """Number of astronomical units in one of the given distance unit."""
    return _DISTANCE_QUANTITIES[parse_distance_unit(unit_name)].to(u.au)


def time_factor(unit_name: str | TimeUnit) -> float:
    """Number of days in one of the given time unit."""
    return _TIME_QUANTITIES[parse_time_unit(unit_name)].to(u.day)


def inverse_distance_factor(unit_name: str | DistanceUnit) -> float:
    """Number of the given distance unit in one astronomical unit."""
    return u.au.to(_DISTANCE_QUANTITIES[parse_distance_unit(unit_name)])


def inverse_time_factor(unit_name: str | TimeUnit) -> float:
    """Number of the given time unit in one day."""
    return u.day.to(_TIME_QUANTITIES[parse_time_unit(unit_name)])


def distance_to_au(value: npt.ArrayLike, unit_name: str | DistanceUnit) -> npt.ArrayLike:
    """Convert a distance (or array of distances) to astronomical units."""
    if parse_distance_unit(unit_name) is INTERNAL_DISTANCE_UNIT:
        return value
    return value * distance_factor(unit_name)


def au_to_distance(value: npt.ArrayLike, unit_name: str | DistanceUnit) -> npt.ArrayLike:
    """Convert a distance (or array of distances) in astronomical units to the given unit."""
    if parse_distance_unit(unit_name) is INTERNAL_DISTANCE_UNIT:
        return value
    return value * inverse_distance_factor(unit_name)


def time_to_day(value: npt.ArrayLike, unit_name: str | TimeUnit) -> npt.ArrayLike:
    """Convert a time (or array of times) to days."""
    if parse_time_unit(unit_name) is INTERNAL_TIME_UNIT:
        return value
    return value * time_factor(unit_name)


def day_to_time(value: npt.ArrayLike, unit_name: str | TimeUnit) -> npt.ArrayLike:
    """Convert a time (or array of times) in days to the given unit."""
    if parse_time_unit(unit_name) is INTERNAL_TIME_UNIT:
        return value
    return value * inverse_time_factor(unit_name)


def time_to_day_rate(value: npt.ArrayLike, time_unit_name: str | TimeUnit) -> npt.ArrayLike:
    """Convert a per-`time_unit` rate to a per-day rate."""
    if parse_time_unit(time_unit_name) is INTERNAL_TIME_UNIT:
        return value
    return value * inverse_time_factor(time_unit_name)


def velocity_to_au_per_day(
    value: npt.ArrayLike,
    distance_unit_name: str | DistanceUnit,
    time_unit_name: str | TimeUnit,
) -> npt.ArrayLike:
    """
    Convert a velocity (or array of velocities) given in `distance_unit / time_unit` to au/day.

    The velocity is scaled by `distance_factor(distance_unit) / time_factor(time_unit)`, so for
    example 1 km/sec becomes 86400 / 149597870.7 au/day.
    """
    return time_to_day_rate(distance_to_au(value, distance_unit_name), time_unit_name)


def au_per_day_to_velocity(
    value: npt.ArrayLike,
    distance_unit_name: str | DistanceUnit,
    time_unit_name: str | TimeUnit,
) -> npt.ArrayLike:
    """Convert a velocity (or array of velocities) in au/day to `distance_unit / time_unit`."""
    return au_to_distance(value, distance_unit_name) * time_factor(time_unit_name)
