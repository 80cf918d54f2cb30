"""Kernels for linear interpolation"""
import numba as nb


@nb.njit(error_model="numpy")
def _linterp(x, X, Y, k):
    """
    The "kernel" of linear interpolation.

    Parameters
    ----------
    x : float
        The evaluation site

    X : ndarray(float, 1d)
        The independent data.

    Y : ndarray(float, 1d)
        The dependent data.

    k : int
        The interval of `X` that contains `x`, namely the first `k` such that
        `X[k] <= x <= X[k+1]`.
        This is assumed true; it is not checked.

    Returns
    -------
    y : float
        The value of `Y` linearly interpolated to `X` at `x`.

    Notes
    -----
    If `X[k] == X[k+1]` the slope is inf or nan, as per IEEE-754.
    """
    return Y[k] + (x - X[k]) * ((Y[k + 1] - Y[k]) / (X[k + 1] - X[k]))


@nb.njit(error_model="numpy")
def _linterp1(x, X, Y, k):
    """
    The "kernel" of the 1st derivative of linear interpolation.

    Inputs and outputs analogous to `_linterp`.
    """
    return (Y[k + 1] - Y[k]) / (X[k + 1] - X[k])
