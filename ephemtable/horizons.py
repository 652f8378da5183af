"""
Reading JPL Horizons vector tables into `EphemerisTable` construction structures.

Horizons vector tables exported as CSV (`CSV format = YES`, table type "vectors") have a header row
with the columns `JDTDB, Calendar Date (TDB), X, Y, Z, VX, VY, VZ, ...`, where the distance and
velocity units depend on the output units chosen for the request (au and au/day, or km and km/s).
Lines starting with `#` are treated as comments, so the `$$SOE`/`$$EOE` markers and request
preamble should be stripped or commented out before reading.
"""

import logging
from pathlib import Path

import pandas as pd

from ephemtable.ephemeris_table import EphemerisTable
from ephemtable.utils.units import DistanceUnit, TimeUnit, day_to_time


logger = logging.getLogger(__name__)


HORIZONS_COLUMNS = ["JDTDB", "X", "Y", "Z", "VX", "VY", "VZ"]
"""Horizons vector table columns used for `[t, x, y, z, vx, vy, vz]` records, in order."""


def read_horizons_csv(
    path: Path | str,
    distance_units: str = DistanceUnit.AU,
    time_units: str = TimeUnit.DAY,
    **options,
) -> dict:
    """
    Read a Horizons vector table CSV into a structure that can be passed to `EphemerisTable`.

    Parameters
    ----------
    path : Path | str
        CSV file to read.
    distance_units : str
        Distance units of the `X, Y, Z` columns. Velocity columns are assumed to be in
        `distance_units / time_units`.
    time_units : str
        Time units of the velocity columns. The `JDTDB` column is always in days, so it is
        converted to `time_units` to keep each record in a single unit system.
    **options
        Other `EphemerisTable` options, like `interpolationOrder`, added to the structure as-is.

    Returns
    -------
    ephemeris_data : dict
        Structure with `"data"`, `"distanceUnits"` and `"timeUnits"` keys and any extra options.

    Raises
    ------
    ValueError
        If the file is missing any of the required columns.
    """
    ephemeris = pd.read_csv(path, comment="#", skipinitialspace=True)
    ephemeris.columns = ephemeris.columns.str.strip()
    missing_columns = [column for column in HORIZONS_COLUMNS if column not in ephemeris.columns]
    if missing_columns:
        raise ValueError(f"Horizons ephemeris file {path} is missing columns {missing_columns}")

    records = ephemeris[HORIZONS_COLUMNS].astype(float)
    records["JDTDB"] = day_to_time(records["JDTDB"], time_units)
    logger.debug(f"Read {len(records)} ephemeris records from {path}")
    return {
        "data": records.to_numpy(),
        "distanceUnits": distance_units,
        "timeUnits": time_units,
        **options,
    }


def load_horizons_table(
    path: Path | str,
    distance_units: str = DistanceUnit.AU,
    time_units: str = TimeUnit.DAY,
    **options,
) -> EphemerisTable:
    """Read a Horizons vector table CSV and build an `EphemerisTable` from it."""
    return EphemerisTable(read_horizons_csv(path, distance_units, time_units, **options))
