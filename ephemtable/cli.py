"""Command line interface definition for ephemtable."""

import argparse
from pathlib import Path

from ephemtable import __version__ as ephemtable_version
from ephemtable.ephemeris_table import (
    DEFAULT_INTERPOLATION_ORDER,
    MAX_INTERPOLATION_ORDER,
    MIN_INTERPOLATION_ORDER,
)
from ephemtable.utils.units import DistanceUnit, TimeUnit


def interpolation_order(arg: str) -> int:
    """Parse an interpolation order as passed to --order. Used as a type for argparse."""
    try:
        order = int(arg)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid interpolation order: '{arg}'.") from e
    if not MIN_INTERPOLATION_ORDER < order < MAX_INTERPOLATION_ORDER:
        raise argparse.ArgumentTypeError(
            f"Invalid interpolation order: {order}. Must be >{MIN_INTERPOLATION_ORDER} and"
            f" <{MAX_INTERPOLATION_ORDER}."
        )
    return order


command_base_parser = argparse.ArgumentParser(add_help=False)
command_base_parser.add_argument(
    "ephemeris_file", type=Path, help="JPL Horizons vector table CSV to interpolate"
)
command_base_parser.add_argument(
    "-t",
    "--time",
    type=float,
    nargs="+",
    required=True,
    help="Julian dates (TDB) to interpolate to. Multiple times are allowed separated by spaces.",
)

_table_options = command_base_parser.add_argument_group("Ephemeris Table Options")
_table_options.add_argument(
    "--distance-units",
    choices=[unit.value for unit in DistanceUnit],
    default=DistanceUnit.AU.value,
    help="Distance units of the ephemeris file. Default=au.",
)
_table_options.add_argument(
    "--time-units",
    choices=[unit.value for unit in TimeUnit],
    default=TimeUnit.DAY.value,
    help="Time units of the ephemeris file velocities. Default=day.",
)
_table_options.add_argument(
    "--order",
    type=interpolation_order,
    default=DEFAULT_INTERPOLATION_ORDER,
    help=f"Lagrange interpolation order. Default={DEFAULT_INTERPOLATION_ORDER}.",
)

_logging_options = command_base_parser.add_argument_group("Logging Options")
_logging_options.add_argument(
    "--debug", action="store_true", help="Output debug-level logs (default=info-level logs)"
)
_logging_options.add_argument("-l", "--logfile", type=Path, help="File to write logs")


def make_ephemtable_parser() -> argparse.ArgumentParser:
    ephemtable_parser = argparse.ArgumentParser(
        description="Interpolate JPL Horizons state vector tables",
    )
    ephemtable_parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {ephemtable_version}"
    )
    ephemtable_commands = ephemtable_parser.add_subparsers(
        dest="ephemtable_command", required=True, help="Quantity to interpolate"
    )
    ephemtable_commands.add_parser(
        "position",
        description="Interpolate positions (au) from an ephemeris file.",
        help="Interpolate positions (au) from an ephemeris file.",
        parents=[command_base_parser],
    )
    ephemtable_commands.add_parser(
        "state",
        description="Interpolate positions (au) and velocities (au/day) from an ephemeris file.",
        help="Interpolate positions (au) and velocities (au/day) from an ephemeris file.",
        parents=[command_base_parser],
    )
    return ephemtable_parser


def parse_ephemtable_args(argv: list[str] | None = None) -> argparse.Namespace:
    return make_ephemtable_parser().parse_args(argv)
