"""
Time-indexed tables of cartesian state vectors with interpolation to arbitrary times.

An `EphemerisTable` is built once from rows of `[t, x, y, z, vx, vy, vz]`, for example as exported
from JPL Horizons, and normalizes them into astronomical units and days. After construction the
table is read-only, so it can be queried from any number of threads without locking.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
import logging
from numbers import Integral, Real

from astropy.time import Time
import numpy as np
import numpy.typing as npt

from ephemtable.interpolation import lagrange_interpolate, select_window
from ephemtable.utils.units import (
    DistanceUnit,
    TimeUnit,
    UnknownUnitError,
    distance_to_au,
    parse_distance_unit,
    parse_time_unit,
    time_to_day,
    velocity_to_au_per_day,
)


logger = logging.getLogger(__name__)


class EphemerisType(str, Enum):
    """Layouts of ephemeris records."""

    CARTESIAN_POS_VEL = "cartesianposvel"


class InterpolationType(str, Enum):
    """Methods used to interpolate between ephemeris records."""

    LAGRANGE = "lagrange"


DEFAULT_EPHEMERIS_TYPE = EphemerisType.CARTESIAN_POS_VEL
DEFAULT_DISTANCE_UNITS = DistanceUnit.AU
DEFAULT_TIME_UNITS = TimeUnit.DAY
DEFAULT_INTERPOLATION_TYPE = InterpolationType.LAGRANGE
DEFAULT_INTERPOLATION_ORDER = 5

MIN_INTERPOLATION_ORDER = 0
"""Interpolation orders must be strictly greater than this."""

MAX_INTERPOLATION_ORDER = 20
"""Interpolation orders must be strictly less than this."""

RECORD_LENGTH = 7
TIME_COLUMN = 0
POSITION_COLUMNS = slice(1, 4)
VELOCITY_COLUMNS = slice(4, 7)


class EphemerisTableError(ValueError):
    """Base class for errors raised while constructing an `EphemerisTable`."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class MissingArgumentError(EphemerisTableError):
    """No ephemeris data structure was given."""

    def __init__(self):
        super().__init__("EphemerisTable must be initialized with an ephemeris data structure")


class InvalidDataShapeError(EphemerisTableError):
    """The ephemeris data is missing or is not a non-empty array of 7-element numeric rows."""

    def __init__(self, value=None):
        super().__init__(
            "EphemerisTable must be initialized with a structure containing an array of arrays of"
            " ephemeris data",
            value,
        )


class UnknownEphemerisTypeError(EphemerisTableError):
    def __init__(self, value):
        super().__init__(f"Unknown ephemeris type: {value}", value)


class UnknownTimeUnitsError(EphemerisTableError):
    def __init__(self, value):
        super().__init__(f"Unknown time units: {value}", value)


class UnknownDistanceUnitsError(EphemerisTableError):
    def __init__(self, value):
        super().__init__(f"Unknown distance units: {value}", value)


class UnknownInterpolationTypeError(EphemerisTableError):
    def __init__(self, value):
        super().__init__(f"Unknown interpolation type: {value}", value)


class InterpolationOrderOutOfRangeError(EphemerisTableError):
    def __init__(self, value):
        super().__init__(
            f"Interpolation order must be >{MIN_INTERPOLATION_ORDER} and"
            f" <{MAX_INTERPOLATION_ORDER}, got {value}",
            value,
        )


class UnsortedTimesError(EphemerisTableError):
    """Record times are not strictly increasing."""

    def __init__(self, value):
        super().__init__(
            f"Ephemeris record times must be strictly increasing, but record {value} is not later"
            " than the record before it",
            value,
        )


@dataclass(frozen=True)
class EphemerisUnits:
    """Units ephemeris data was declared in when the table was constructed."""

    distance: DistanceUnit
    time: TimeUnit


# Option names accepted in the construction structure, with their snake_case aliases
_OPTION_ALIASES = {
    "ephemerisType": "ephemeris_type",
    "distanceUnits": "distance_units",
    "timeUnits": "time_units",
    "interpolationType": "interpolation_type",
    "interpolationOrder": "interpolation_order",
}


def _get_option(ephemeris_data: Mapping, name: str, default):
    """Get an option by name or alias. Missing options and `None` values give the default."""
    value = ephemeris_data.get(name)
    if value is None:
        value = ephemeris_data.get(_OPTION_ALIASES[name])
    return default if value is None else value


def _is_sequence(value) -> bool:
    """Whether `value` is an array-like sequence, not counting strings and bytes."""
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_number(value) -> bool:
    return isinstance(value, (Real, np.number)) and not isinstance(value, (bool, np.bool_))


def _validate_data(data) -> list[Sequence]:
    if not _is_sequence(data) or len(data) == 0:
        raise InvalidDataShapeError(data)
    for row in data:
        if not _is_sequence(row) or len(row) != RECORD_LENGTH:
            raise InvalidDataShapeError(row)
        if not all(_is_number(component) for component in row):
            raise InvalidDataShapeError(row)
    return list(data)


def _validate_interpolation_order(order) -> int:
    if not isinstance(order, (Integral, np.integer)) or isinstance(order, (bool, np.bool_)):
        raise InterpolationOrderOutOfRangeError(order)
    if not MIN_INTERPOLATION_ORDER < order < MAX_INTERPOLATION_ORDER:
        raise InterpolationOrderOutOfRangeError(order)
    return int(order)


def normalize_records(
    data: npt.ArrayLike, distance_units: DistanceUnit, time_units: TimeUnit
) -> np.ndarray:
    """
    Convert rows of `[t, x, y, z, vx, vy, vz]` into days, au and au/day.

    Returns a new float64 array with shape `(n, 7)`; `data` is not modified.
    """
    records = np.array(data, dtype=np.float64)
    records[:, TIME_COLUMN] = time_to_day(records[:, TIME_COLUMN], time_units)
    records[:, POSITION_COLUMNS] = distance_to_au(records[:, POSITION_COLUMNS], distance_units)
    records[:, VELOCITY_COLUMNS] = velocity_to_au_per_day(
        records[:, VELOCITY_COLUMNS], distance_units, time_units
    )
    return records


class EphemerisTable:
    """
    A table of cartesian position/velocity records that can be interpolated to any time.

    Parameters
    ----------
    ephemeris_data : Mapping
        Structure with the required key `"data"`, a non-empty sequence of
        `[t, x, y, z, vx, vy, vz]` rows with strictly increasing times, and the optional keys

        - `"ephemerisType"`: record layout, only `"cartesianposvel"` (the default) is supported.
        - `"distanceUnits"`: `"au"` (default) or `"km"`.
        - `"timeUnits"`: `"day"` (default) or `"sec"`. Velocities are in
          `distanceUnits / timeUnits`.
        - `"interpolationType"`: only `"lagrange"` (the default) is supported.
        - `"interpolationOrder"`: integer strictly between 0 and 20, default 5.

        The snake_case spellings of the optional keys (`"distance_units"`, etc.) are also
        accepted.

    Raises
    ------
    EphemerisTableError
        One of the `EphemerisTableError` subclasses if `ephemeris_data` is invalid. The checks
        are made in the order the keys are listed above (with `"timeUnits"` checked before
        `"distanceUnits"`), and the first failure is raised.
    """

    def __init__(self, ephemeris_data: Mapping | None = None):
        if ephemeris_data is None:
            raise MissingArgumentError()
        if not isinstance(ephemeris_data, Mapping):
            raise InvalidDataShapeError(ephemeris_data)

        data = _validate_data(ephemeris_data.get("data"))

        ephemeris_type = _get_option(ephemeris_data, "ephemerisType", DEFAULT_EPHEMERIS_TYPE)
        try:
            self._ephemeris_type = EphemerisType(ephemeris_type)
        except ValueError as e:
            raise UnknownEphemerisTypeError(ephemeris_type) from e

        time_units = _get_option(ephemeris_data, "timeUnits", DEFAULT_TIME_UNITS)
        try:
            time_units = parse_time_unit(time_units)
        except UnknownUnitError as e:
            raise UnknownTimeUnitsError(time_units) from e

        distance_units = _get_option(ephemeris_data, "distanceUnits", DEFAULT_DISTANCE_UNITS)
        try:
            distance_units = parse_distance_unit(distance_units)
        except UnknownUnitError as e:
            raise UnknownDistanceUnitsError(distance_units) from e

        interpolation_type = _get_option(
            ephemeris_data, "interpolationType", DEFAULT_INTERPOLATION_TYPE
        )
        try:
            self._interpolation_type = InterpolationType(interpolation_type)
        except ValueError as e:
            raise UnknownInterpolationTypeError(interpolation_type) from e

        self._interpolation_order = _validate_interpolation_order(
            _get_option(ephemeris_data, "interpolationOrder", DEFAULT_INTERPOLATION_ORDER)
        )
        self._units = EphemerisUnits(distance=distance_units, time=time_units)

        records = normalize_records(data, distance_units, time_units)
        not_increasing = np.flatnonzero(np.diff(records[:, TIME_COLUMN]) <= 0)
        if len(not_increasing) > 0:
            raise UnsortedTimesError(int(not_increasing[0]) + 1)
        records.flags.writeable = False
        self._records = records
        # Time column as supplied, for queries made in the declared time units
        declared_times = np.array([row[TIME_COLUMN] for row in data], dtype=np.float64)
        declared_times.flags.writeable = False
        self._declared_times = declared_times
        logger.debug(
            f"Built {self._ephemeris_type.value} ephemeris table with {len(records)} records"
            f" from {distance_units.value}/{time_units.value} data, spanning"
            f" [{self.start_time}, {self.end_time}] days"
        )

    @classmethod
    def from_arrays(
        cls,
        data: npt.ArrayLike,
        *,
        ephemeris_type: str = DEFAULT_EPHEMERIS_TYPE,
        distance_units: str = DEFAULT_DISTANCE_UNITS,
        time_units: str = DEFAULT_TIME_UNITS,
        interpolation_type: str = DEFAULT_INTERPOLATION_TYPE,
        interpolation_order: int = DEFAULT_INTERPOLATION_ORDER,
    ) -> "EphemerisTable":
        """Build a table from rows of data and keyword options instead of a single structure."""
        return cls(
            {
                "data": data,
                "ephemerisType": ephemeris_type,
                "distanceUnits": distance_units,
                "timeUnits": time_units,
                "interpolationType": interpolation_type,
                "interpolationOrder": interpolation_order,
            }
        )

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(records={len(self)}, start_time={self.start_time},"
            f" end_time={self.end_time}, interpolation_order={self.interpolation_order})"
        )

    @property
    def records(self) -> np.ndarray:
        """Read-only `(n, 7)` array of records in days, au and au/day."""
        return self._records

    @property
    def times(self) -> np.ndarray:
        """Record times in days."""
        return self._records[:, TIME_COLUMN]

    @property
    def start_time(self) -> float:
        return float(self._records[0, TIME_COLUMN])

    @property
    def end_time(self) -> float:
        return float(self._records[-1, TIME_COLUMN])

    @property
    def ephemeris_type(self) -> EphemerisType:
        return self._ephemeris_type

    @property
    def units(self) -> EphemerisUnits:
        """Units the data was declared in. Stored records are always in au and days."""
        return self._units

    @property
    def interpolation_type(self) -> InterpolationType:
        return self._interpolation_type

    @property
    def interpolation_order(self) -> int:
        return self._interpolation_order

    def _interpolate_columns(
        self, time: float | Time, time_units: str | None, columns: slice
    ) -> np.ndarray:
        """Interpolate the given record columns at `time`, clamping outside the table."""
        if isinstance(time, Time):
            time, times = float(time.jd), self.times
        elif time_units is None or parse_time_unit(time_units) is self._units.time:
            time, times = float(time), self._declared_times
        else:
            time, times = float(time_to_day(time, time_units)), self.times

        if time <= times[0]:
            return self._records[0, columns].copy()
        if time >= times[-1]:
            return self._records[-1, columns].copy()
        window = select_window(times, time, self._interpolation_order)
        return lagrange_interpolate(times[window], self._records[window, columns], time)

    def get_position_at_time(
        self, time: float | Time, time_units: str | None = None
    ) -> np.ndarray:
        """
        Get the interpolated `[x, y, z]` position, in au, at a given time.

        Parameters
        ----------
        time : float | Time
            Time to interpolate to. Floats are read in `time_units`. An astropy `Time` is read as
            a Julian date.
        time_units : str | None
            Units of `time`. Defaults to the time units the table's data was declared in, so the
            time column of the original data can be used directly.

        Returns
        -------
        position : array
            Position with shape `(3,)`. Times before the first record or after the last record
            give the position of that record instead of extrapolating.
        """
        return self._interpolate_columns(time, time_units, POSITION_COLUMNS)

    def get_velocity_at_time(
        self, time: float | Time, time_units: str | None = None
    ) -> np.ndarray:
        """
        Get the interpolated `[vx, vy, vz]` velocity, in au/day, at a given time.

        Velocities are interpolated from the velocity columns the same way positions are
        interpolated in `get_position_at_time`, and clamp the same way outside the table.
        """
        return self._interpolate_columns(time, time_units, VELOCITY_COLUMNS)

    def get_state_at_time(self, time: float | Time, time_units: str | None = None) -> np.ndarray:
        """Get the interpolated `[x, y, z, vx, vy, vz]` state, in au and au/day, at a given time."""
        return self._interpolate_columns(time, time_units, slice(1, RECORD_LENGTH))
