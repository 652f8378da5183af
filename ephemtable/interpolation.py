"""
Lagrange interpolation over a sliding window of ephemeris samples.

The two steps of an interpolation are kept separate so that each can be checked on its own:
`select_window` picks which samples to interpolate through, and `lagrange_interpolate` evaluates
the interpolating polynomial through them.
"""

import logging

import numpy as np
import numpy.typing as npt


logger = logging.getLogger(__name__)


def find_bracketing_index(times: np.ndarray, time: float) -> int:
    """
    Get the index `i` of the last sample with `times[i] <= time`.

    `times` must be sorted in increasing order and `time` must lie within
    `[times[0], times[-1]]`. The returned index is clipped so that `i + 1` is always a valid index
    when there are at least two samples.
    """
    index = int(np.searchsorted(times, time, side="right")) - 1
    return min(max(index, 0), max(len(times) - 2, 0))


def select_window(times: np.ndarray, time: float, order: int) -> slice:
    """
    Select the samples used to interpolate at `time` with a polynomial of degree `order`.

    Parameters
    ----------
    times : array
        Sample times, strictly increasing.
    time : float
        Time being interpolated to. Must lie within `[times[0], times[-1]]`.
    order : int
        Interpolation order. Up to `order + 1` samples are used.

    Returns
    -------
    window : slice
        Slice into `times` of the samples to interpolate through. For a window of `n` samples,
        the lower sample of the bracketing pair is placed `n // 2` samples into the window, or
        further back if needed to keep the upper sample of the pair in the window. The window is
        shifted inwards where it would run past either end of the table.
        When the table has fewer than `order + 1` samples, all of them are used.
    """
    num_samples = len(times)
    window_size = min(order + 1, num_samples)
    bracket_index = find_bracketing_index(times, time)
    samples_below = min(window_size // 2, max(window_size - 2, 0))
    start = min(max(bracket_index - samples_below, 0), num_samples - window_size)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Interpolating at {time} with samples [{start}, {start + window_size}) around sample"
            f" {bracket_index}"
        )
    return slice(start, start + window_size)


def lagrange_basis(times: np.ndarray, time: float) -> np.ndarray:
    """
    Evaluate the Lagrange basis polynomials through `times` at `time`.

    The basis polynomial for sample `j` is
    $$
        L_j(t) = \\prod_{k \\neq j} (t - t_k) / (t_j - t_k)
    $$
    which is exactly 1 at `t_j` and exactly 0 at every other sample time.
    """
    times = np.asarray(times, dtype=np.float64)
    # ratios[j, k] = (time - t_k) / (t_j - t_k), with the j == k terms replaced by 1
    spacing = times[:, np.newaxis] - times[np.newaxis, :]
    np.fill_diagonal(spacing, 1.0)
    ratios = (time - times)[np.newaxis, :] / spacing
    np.fill_diagonal(ratios, 1.0)
    return ratios.prod(axis=1)


def lagrange_interpolate(times: npt.ArrayLike, values: npt.ArrayLike, time: float) -> np.ndarray:
    """
    Evaluate the Lagrange interpolating polynomial through `(times, values)` at `time`.

    Parameters
    ----------
    times : ArrayLike
        Sample times, shape `(n,)`. Must be distinct.
    values : ArrayLike
        Sample values, shape `(n,)` or `(n, k)`. Each column is interpolated independently.
    time : float
        Time to evaluate the polynomial at.

    Returns
    -------
    interpolated : array
        Interpolated value(s), shape `()` or `(k,)`.
    """
    values = np.asarray(values, dtype=np.float64)
    basis = lagrange_basis(times, time).reshape(-1, *([1] * (values.ndim - 1)))
    # Each column is summed sample by sample, independently of the other columns
    return (basis * values).sum(axis=0)
