"""
Floating point comparison utilities.

Values produced by different code paths (or read back from a stored
baseline) rarely agree bit for bit, so record equality is defined in
terms of the floating point spacing of the operands instead of ``==``.

Usage
-----
>>> from rt_options.utils.compare import equal_to
>>> equal_to(0.1 + 0.2, 0.3)
True
"""

from typing import Union

import numpy as np

from rt_options.core.constants import DEFAULT_ULP

ArrayLike = Union[float, np.ndarray, list, tuple]


def equal_to(x: ArrayLike, y: ArrayLike, ulp: int = DEFAULT_ULP):
    """
    Test two floating point values for equality within a number of ULPs.

    Two values compare equal when they are identical, or when their
    difference is at most ``ulp`` times the spacing between adjacent
    floating point numbers at the larger of their magnitudes. The test is
    symmetric in ``x`` and ``y`` and reflexive, with NaN equal only to NaN.

    Parameters
    ----------
    x, y : float or array_like
        Values to compare. Arrays are compared elementwise and must
        broadcast against each other.
    ulp : int
        Number of units in the last place the values may differ by.
        Must be >= 1.

    Returns
    -------
    bool or ndarray of bool
        Scalar result for scalar inputs, elementwise result otherwise.
    """
    if ulp < 1:
        raise ValueError(f"ulp must be >= 1, got {ulp}")

    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    # Infinities only compare equal when identical, NaN only to NaN
    with np.errstate(invalid="ignore"):
        magnitude = np.maximum(np.abs(x), np.abs(y))
        tolerance = ulp * np.spacing(magnitude)
        result = (x == y) | (np.abs(x - y) <= tolerance)
    result |= np.isnan(x) & np.isnan(y)

    if result.ndim == 0:
        return bool(result)
    return result


def all_equal_to(x: ArrayLike, y: ArrayLike, ulp: int = DEFAULT_ULP) -> bool:
    """
    Test whether two arrays have the same shape and are equal elementwise.

    Unlike :func:`equal_to` this never broadcasts: arrays of different
    shape are simply reported as unequal.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.shape != y.shape:
        return False
    return bool(np.all(equal_to(x, y, ulp=ulp)))


def compare_within_tolerance(
    x: ArrayLike,
    y: ArrayLike,
    n_significant_figures: int = 6,
):
    """
    Relative comparison to a number of significant figures.

    Intended for comparing computed results against stored baselines,
    where agreement to the last bit is not expected.

    Parameters
    ----------
    x, y : float or array_like
        Values to compare.
    n_significant_figures : int
        Number of significant figures that must agree.

    Returns
    -------
    bool or ndarray of bool
    """
    if n_significant_figures < 1:
        raise ValueError(
            f"n_significant_figures must be >= 1, got {n_significant_figures}"
        )
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    rtol = 10.0 ** (1 - n_significant_figures)
    result = np.isclose(x, y, rtol=rtol, atol=0.0)
    if np.ndim(result) == 0:
        return bool(result)
    return result
