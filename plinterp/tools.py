import functools as ft
import numpy as np
import numba as nb

from .lib import bracket_1
from .linear import _linterp, _linterp1


@ft.lru_cache
def make_interpolator(deriv=0, parallel=True):
    """Factory function to build a function evaluating a linear interpolant at
    many evaluation sites.

    Parameters
    ----------
    deriv : int, Default 0

        Build a function that returns the `deriv` derivative of the linear
        interpolant. `deriv = 0` simply interpolates; `deriv = 1` gives the
        slope of the interval containing each evaluation site.

    parallel : bool, Default True

        If True, the loop over evaluation sites is a `numba.prange` loop,
        distributed over numba's threads.
        If False, the loop is serial.

    Returns
    -------
    f : function

        A `numba.njit`ed function with inputs

            - X : ndarray(float, 1d), the independent data, ascending
            - Y : ndarray(float, 1d), the dependent data, same length as `X`
            - xi : ndarray(float, 1d), the evaluation sites

        and outputs

            - yi : ndarray(float, 1d), the same dtype as `Y`, where `yi[j]` is
              the interpolant (or its derivative) evaluated at `xi[j]`
            - k : ndarray(int, 1d), where `k[j]` is the interval of `X` that
              contains `xi[j]` (see `bracket_1`), or -1 if no interval
              contains `xi[j]`, in which case `yi[j]` is NaN.

    Notes
    -----
    No exception is raised inside the (possibly parallel) loop. Check for
    `k < 0` afterwards.

    Examples
    --------
    >>> X = np.linspace(1, 10, 10, dtype=np.float32)
    >>> Y = np.sin(X)
    >>> xi = np.linspace(1, 10, 20, dtype=np.float32)
    >>> interp = make_interpolator(0, True)
    >>> yi, k = interp(X, Y, xi)
    """

    ker = make_kernel(deriv)

    @nb.njit(parallel=parallel, error_model="numpy")
    def fcn(X, Y, xi):
        n = xi.size
        yi = np.empty(n, dtype=Y.dtype)
        k = np.empty(n, dtype=np.int64)
        for j in nb.prange(n):
            i = bracket_1(xi[j], X)
            k[j] = i
            if i < 0:
                yi[j] = np.nan
            else:
                yi[j] = ker(xi[j], X, Y, i)
        return yi, k

    return fcn


def make_kernel(deriv):
    """
    Select the interpolating kernel for a given derivative.

    Parameters
    ----------
    deriv : int

        Return the kernel for the `deriv` derivative of the linear interpolant.
        Must be the integer 0 or 1; higher derivatives of a linear
        interpolant are zero away from the knots and undefined at them.

    """

    kers = (_linterp, _linterp1)

    if not isinstance(deriv, (int, np.integer)) or deriv not in (0, 1):
        raise ValueError(f"Expected `deriv` in (0, 1); got {deriv}")

    return kers[deriv]
