from importlib.metadata import PackageNotFoundError, version

from ephemtable.ephemeris_table import (
    EphemerisTable,
    EphemerisTableError,
    EphemerisType,
    EphemerisUnits,
    InterpolationOrderOutOfRangeError,
    InterpolationType,
    InvalidDataShapeError,
    MissingArgumentError,
    UnknownDistanceUnitsError,
    UnknownEphemerisTypeError,
    UnknownInterpolationTypeError,
    UnknownTimeUnitsError,
    UnsortedTimesError,
)


try:
    __version__ = version("ephemtable")
except PackageNotFoundError:
    # package is not installed
    __version__ = "unknown"

__all__ = [
    "EphemerisTable",
    "EphemerisTableError",
    "EphemerisType",
    "EphemerisUnits",
    "InterpolationOrderOutOfRangeError",
    "InterpolationType",
    "InvalidDataShapeError",
    "MissingArgumentError",
    "UnknownDistanceUnitsError",
    "UnknownEphemerisTypeError",
    "UnknownInterpolationTypeError",
    "UnknownTimeUnitsError",
    "UnsortedTimesError",
]
