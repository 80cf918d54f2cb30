"""Library of simple functions for plinterp"""

import numpy as np
import numba as nb
import xarray as xr


@nb.njit
def bracket_1(x, X):
    """The interval of `X` containing `x`, found by a linear scan

    Parameters
    ----------
    x : float
        Evaluation site

    X : ndarray(float, 1d)
        Independent data, monotonically increasing.

    Returns
    -------
    k : int
        The first `k` such that `X[k] <= x <= X[k+1]`, or -1 if there is no
        such `k` (e.g. `x` is NaN, `x` lies beyond `X`, or `len(X) < 2`).
    """
    for k in range(X.size - 1):
        if X[k] <= x and x <= X[k + 1]:
            return k
    return -1


@nb.njit
def first_outside(xi, lo, hi):
    """The index to the first element of `xi` outside `[lo, hi]`

    Parameters
    ----------
    xi : ndarray(float, 1d)
        Evaluation sites

    lo, hi : float
        Bounds of the closed interval

    Returns
    -------
    j : int
        The first `j` such that `xi[j] < lo` or `hi < xi[j]` or `xi[j]` is NaN.
        If all of `xi` lies within `[lo, hi]`, then `j = -1`.
    """
    for j in range(xi.size):
        if not (lo <= xi[j] and xi[j] <= hi):
            return j
    return -1


@nb.njit
def is_ascending(X):
    """True if `X[k] <= X[k+1]` for every `k`, else False"""
    for k in range(X.size - 1):
        if X[k + 1] < X[k]:
            return False
    return True


def xr_to_np(S):
    """Convert xarray into numpy array"""
    if hasattr(S, "values"):
        S = S.values
    return S


def _xr_in(xi, dtype):
    # Prepare xarray container for output: like input xi, holding `dtype`
    if isinstance(xi, xr.DataArray):
        xixr = xr.full_like(xi, 0, dtype=dtype)
        xixr.attrs.clear()
        return xixr
    else:
        return None


def _xr_out(yi, xixr):
    # Return xarray if input was xarray
    if isinstance(xixr, xr.DataArray):
        xixr.data = yi
        return xixr
    else:
        return yi


def _process_dtype(dtype):
    """Check `dtype` is single or double precision float, and return it as a
    `numpy.dtype`."""
    dtype = np.dtype(dtype)
    if dtype not in (np.float32, np.float64):
        raise ValueError(f"Expected `dtype` in (float32, float64); got {dtype}")
    return dtype


def _process_samples(x, y, dtype):
    """Convert the independent and dependent data into contiguous 1D arrays of
    `dtype`, checking they are 1D and of the same length."""
    X = np.ascontiguousarray(xr_to_np(x), dtype=dtype)
    Y = np.ascontiguousarray(xr_to_np(y), dtype=dtype)
    if X.ndim != 1 or Y.ndim != 1:
        raise ValueError(
            f"Expected `x` and `y` to be 1D; got shapes {X.shape} and {Y.shape}"
        )
    if X.size != Y.size:
        raise ValueError(
            f"Expected `x` and `y` of the same length; got {X.size} and {Y.size}"
        )
    return X, Y


def _process_queries(xi, dtype):
    """Flatten the evaluation sites into a contiguous 1D array of `dtype`.
    Returns this array and the shape of the original `xi`."""
    xi = np.asarray(xr_to_np(xi), dtype=dtype)
    return np.ascontiguousarray(xi.reshape(-1)), xi.shape
