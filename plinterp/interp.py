"""Piecewise linear interpolation in one dimension, evaluated in parallel"""

import numpy as np
import numba as nb
from time import time

from .errors import EmptySampleSet, QueryOutOfRange, BracketNotFound
from .lib import (
    first_outside,
    is_ascending,
    _process_dtype,
    _process_samples,
    _process_queries,
    _xr_in,
    _xr_out,
)
from .tools import make_interpolator, make_kernel


def interpolate(
    x,
    y,
    xi,
    deriv=0,
    dtype=np.float32,
    parallel=True,
    num_threads=None,
    check_sorted=False,
    output=False,
):
    """Linearly interpolate `y` as a function of `x` to the evaluation sites `xi`

    Parameters
    ----------
    x : array-like or xarray.DataArray

        Independent data, 1D.  Must be monotonically increasing (ties
        allowed).  This is assumed, and only checked if `check_sorted` is True.

    y : array-like or xarray.DataArray

        Dependent data, 1D, with the same length as `x`.

    xi : float, array-like, or xarray.DataArray

        Evaluation sites, of any shape.  These are cast to `dtype` before
        anything else, so every element must lie within `[x[0], x[-1]]` after
        this cast: with `float32`, a site within rounding of `x[-1]`, such as
        `x[-1] + 1e-9`, becomes `x[-1]` and is accepted.

    deriv : int, Default 0

        If 0, evaluate the interpolant.  If 1, evaluate its first derivative,
        i.e. the slope of the interval containing each evaluation site.

    dtype : numpy dtype, Default numpy.float32

        Precision in which to do all calculations: `float32` or `float64`.

    parallel : bool, Default True

        If True, evaluate the sites in parallel over numba's threads.

    num_threads : int, Default None

        If given, the number of numba threads to use for this call.  Must not
        exceed `numba.config.NUMBA_NUM_THREADS`.

    check_sorted : bool, Default False

        If True, check that `x` is monotonically increasing.

    output : bool, Default False

        If True, print a summary line once done.

    Returns
    -------
    yi : ndarray or xarray.DataArray

        The interpolant (or its derivative) evaluated at `xi`, with the same
        shape as `xi`.  If `xi` is a DataArray, so is `yi`, sharing its
        dimensions and coordinates.

    Raises
    ------
    EmptySampleSet
        If `x` has no elements, regardless of `xi`.

    QueryOutOfRange
        If any element of `xi` is outside `[x[0], x[-1]]` or is NaN.  No
        interpolation is performed.

    BracketNotFound
        If `x` has a single element, so no interval can contain `xi`.

    ValueError
        If `x` and `y` are not 1D arrays of the same length, if `x` is not
        ascending and `check_sorted` is True, or if `deriv` or `dtype` are
        invalid.

    Notes
    -----
    For each evaluation site `q`, the first `k` such that
    `x[k] <= q <= x[k+1]` is found by a linear scan, and the result is
    `y[k] + (q - x[k]) * ((y[k+1] - y[k]) / (x[k+1] - x[k]))`.
    Repeated values in `x` give an interval of zero width, whose slope is inf
    or NaN.

    Examples
    --------
    >>> x = np.linspace(1, 10, 10)
    >>> yi = interpolate(x, np.sin(x), np.linspace(1, 10, 20))
    >>> yi[:3]
    array([0.84147096, 0.8735993 , 0.90572757], dtype=float32)
    """
    return _interpolate(
        x, y, xi, True, deriv, dtype, parallel, num_threads, check_sorted, output
    )


def interpolate_unchecked(
    x,
    y,
    xi,
    deriv=0,
    dtype=np.float32,
    parallel=True,
    num_threads=None,
    output=False,
):
    """As `interpolate` but without checking `x` is non-empty or `xi` is within
    the range of `x`.

    Use when the inputs are known to be valid, to skip a sequential pass over
    `xi`.  Parameters and return values are as for `interpolate`.

    Raises
    ------
    BracketNotFound
        If no interval of `x` contains some element of `xi`.  This happens
        when that element is beyond `x`, is NaN, or `x` has fewer than two
        elements.

    ValueError
        As for `interpolate`.
    """
    return _interpolate(
        x, y, xi, False, deriv, dtype, parallel, num_threads, False, output
    )


def _interpolate(
    x, y, xi, checked, deriv, dtype, parallel, num_threads, check_sorted, output
):
    dtype = _process_dtype(dtype)
    make_kernel(deriv)  # validate before `deriv` is a cache key
    fcn = make_interpolator(int(deriv), parallel)

    xixr = _xr_in(xi, dtype)
    X, Y = _process_samples(x, y, dtype)
    XI, shape = _process_queries(xi, dtype)

    if checked:
        if X.size == 0:
            raise EmptySampleSet()

        if check_sorted and not is_ascending(X):
            raise ValueError("Expected `x` to be monotonically increasing")

        j = first_outside(XI, X[0], X[-1])
        if j >= 0:
            raise QueryOutOfRange(j, XI[j], X[0], X[-1])

    timer = time()
    yi, k = _run(fcn, X, Y, XI, num_threads)
    timer = time() - timer

    bad = np.flatnonzero(k < 0)
    if bad.size > 0:
        j = int(bad[0])
        lo, hi = (X[0], X[-1]) if X.size > 0 else (np.nan, np.nan)
        raise BracketNotFound(j, XI[j], lo, hi)

    if output:
        print(
            f"{'interpolate' if checked else 'interpolate_unchecked'} done"
            f" | {XI.size:11d} queries | {timer:.3f} sec"
        )

    return _xr_out(yi.reshape(shape), xixr)


def _run(fcn, X, Y, XI, num_threads):
    # Evaluate, temporarily using `num_threads` numba threads if given
    if num_threads is None:
        return fcn(X, Y, XI)

    num_threads_prev = nb.get_num_threads()
    nb.set_num_threads(num_threads)
    try:
        return fcn(X, Y, XI)
    finally:
        nb.set_num_threads(num_threads_prev)
