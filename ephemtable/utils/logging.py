"""
Logging utilities mainly meant for use by the command line interface. All logging throughout
ephemtable should be done through a logger retrieved with `logging.getLogger(__name__)` so that the
configuration made here applies to it.
"""

import logging
from pathlib import Path


def setup_logging(debug: bool = False, logfile: Path | None = None):
    """Set up logging for the `ephemtable` package with a reasonable set of defaults."""
    log_level = logging.DEBUG if debug else logging.INFO

    log_fmt: str
    if debug:
        log_fmt = "%(asctime)s %(levelname)s %(funcName)s: %(message)s"
    else:
        log_fmt = "%(asctime)s %(message)s"

    handler: logging.Handler
    if logfile is None:
        handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(logfile)
    date_fmt = "%Y.%m.%d %H:%M:%S"
    handler.setFormatter(logging.Formatter(log_fmt, date_fmt))

    base_logger = logging.getLogger("ephemtable")
    base_logger.setLevel(log_level)
    base_logger.addHandler(handler)
