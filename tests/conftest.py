"""Test configuration for the ephemtable package."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_ephemtable_logger():
    """Remove handlers added by `setup_logging` so tests don't write to each other's streams."""
    base_logger = logging.getLogger("ephemtable")
    original_handlers = list(base_logger.handlers)
    original_level = base_logger.level
    yield
    for handler in list(base_logger.handlers):
        if handler not in original_handlers:
            base_logger.removeHandler(handler)
            handler.close()
    base_logger.setLevel(original_level)


#######################################################################
#### Ephemeris Fixtures ###############################################
#######################################################################


TWO_ROW_EPHEMERIS = [
    [2458849.0, 1.0, 1.0, 1.0, 0.1, 0.1, 0.1],
    [2458849.1, 1.1, 1.1, 1.1, 0.11, 0.11, 0.11],
]

# 30-day spaced heliocentric state vectors from JPL Horizons, in km and km/s
REFERENCE_EPHEMERIS_KM_SEC = [
    [2458849.5, -206989202.337052, -230690377.049615, -3593501.66181472, 16.687770516701, -13.3316722546911, 2.11151638406883],  # noqa: E501
    [2458879.5, -160853957.991521, -261594772.804662, 1906010.76870765, 18.8299943771761, -10.4417066788293, 2.12128819944011],  # noqa: E501
    [2458909.5, -109834966.269488, -284485383.998363, 7346888.19219363, 20.4400085636901, -7.16522928027641, 2.06593395876294],  # noqa: E501
    [2458939.5, -55426045.8429041, -298504783.14858, 12559236.8059003, 21.4340764623436, -3.61803347469132, 1.94522656297565],  # noqa: E501
    [2458969.5, 700740.271922723, -303125826.314767, 17377436.5936175, 21.7598103326871, 0.062420209034819, 1.76271498092491],  # noqa: E501
    [2458999.5, 56785592.2271133, -298193955.729898, 21649894.2145173, 21.4025956485371, 3.72819502541183, 1.52561090543872],  # noqa: E501
    [2459029.5, 111082034.625081, -283937581.264955, 25247839.7778396, 20.3871405446663, 7.23392852255661, 1.2441732813624],  # noqa: E501
    [2459059.5, 161955146.28136, -260944905.356428, 28071991.3194814, 18.7737951408013, 10.449253410829, 0.930707156640917],  # noqa: E501
    [2459089.5, 207964370.049318, -230111867.649376, 30056334.6223833, 16.6505912540206, 13.2683522928012, 0.59837489420997],  # noqa: E501
    [2459119.5, 247922172.439639, -192570599.701394, 31168822.6597849, 14.1229350083109, 15.6153080046127, 0.260047428292031],  # noqa: E501
]


@pytest.fixture
def two_row_ephemeris() -> list[list[float]]:
    return [list(row) for row in TWO_ROW_EPHEMERIS]


@pytest.fixture
def reference_ephemeris() -> list[list[float]]:
    """Horizons state vectors in km and km/s, with times as Julian dates."""
    return [list(row) for row in REFERENCE_EPHEMERIS_KM_SEC]


@pytest.fixture
def quadratic_ephemeris() -> list[list[float]]:
    """
    Records for a body on a quadratic trajectory, which Lagrange interpolation of order >=2 must
    reproduce exactly (up to rounding).
    """
    records = []
    for t in [0.0, 1.0, 2.5, 3.0, 4.5, 5.0, 6.0, 8.0]:
        position = [1.0 + 2.0 * t + 0.5 * t**2, -3.0 + 0.25 * t**2, 4.0 - t]
        velocity = [2.0 + t, 0.5 * t, -1.0]
        records.append([t, *position, *velocity])
    return records
