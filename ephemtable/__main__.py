"""Main entrypoint for the ephemtable command line interface."""

import logging
import sys

from ephemtable import __version__ as ephemtable_version
from ephemtable.cli import parse_ephemtable_args
from ephemtable.horizons import load_horizons_table
from ephemtable.utils.logging import setup_logging


logger = logging.getLogger(__name__)


def ephemtable_main(argv: list[str] | None = None) -> int:
    args = parse_ephemtable_args(argv)
    setup_logging(args.debug, args.logfile)
    logger.debug(f"ephemtable version {ephemtable_version}")
    printable_args = "\n".join(
        f"{a}: {getattr(args, a)}" for a in dir(args) if not a.startswith("_")
    )
    logger.debug(f"Parsed command line arguments:\n{printable_args}")

    try:
        table = load_horizons_table(
            args.ephemeris_file,
            distance_units=args.distance_units,
            time_units=args.time_units,
            interpolationOrder=args.order,
        )
    except (ValueError, OSError) as e:
        logger.error(f"Could not load ephemeris from {args.ephemeris_file}: {e}")
        return 1
    logger.info(f"Loaded {table!r} from {args.ephemeris_file}")

    if args.ephemtable_command == "position":
        interpolate = table.get_position_at_time
    elif args.ephemtable_command == "state":
        interpolate = table.get_state_at_time
    else:
        raise ValueError(f"Unrecognized ephemtable command: {args.ephemtable_command}")

    for jd in args.time:
        if not table.start_time <= jd <= table.end_time:
            logger.warning(f"Time {jd} is outside of the ephemeris, using nearest record")
        values = interpolate(jd, time_units="day")
        print(" ".join([repr(jd), *(repr(float(value)) for value in values)]))
    return 0


if __name__ == "__main__":
    sys.exit(ephemtable_main())
